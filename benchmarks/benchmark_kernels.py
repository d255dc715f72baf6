"""Benchmark pairwise kernel matrix computations."""

import time
import jax
import jax.random as random

from mlkernels.kernels.additive import SquaredDistanceKernel, ChiSquaredKernel
from mlkernels.kernels.separable import MercerSigmoidKernel
from mlkernels.pairwise import kernel_matrix


def benchmark_kernel(kernel, n_samples: int = 1000, n_features: int = 10):
    """Time one n x n kernel matrix."""
    key = random.PRNGKey(42)
    X = random.uniform(key, (n_samples, n_features))

    # Warm up
    jax.block_until_ready(kernel_matrix(kernel, X))

    # Time computation
    start = time.time()
    jax.block_until_ready(kernel_matrix(kernel, X))
    elapsed = time.time() - start

    print(f"{kernel.describe()}: {n_samples}x{n_samples} matrix, {n_features} features")
    print(f"Time: {elapsed:.4f} seconds")
    print(f"Throughput: {n_samples**2 / elapsed:.2f} kernel evaluations/second")

    return elapsed


def compare_fast_paths():
    """Compare the t=1 and t=0.5 closed forms against the general exponent."""
    sizes = [100, 500, 1000, 2000]

    print("=" * 60)
    print("Squared distance: fast paths vs general exponent")
    print("=" * 60)

    for n in sizes:
        print(f"\nSize: {n}x{n}")
        print("-" * 60)

        general_time = benchmark_kernel(SquaredDistanceKernel(0.7), n_samples=n)
        t1_time = benchmark_kernel(SquaredDistanceKernel(1.0), n_samples=n)
        half_time = benchmark_kernel(SquaredDistanceKernel(0.5), n_samples=n)

        print(f"Speedup t=1: {general_time / t1_time:.2f}x")
        print(f"Speedup t=0.5: {general_time / half_time:.2f}x")


def compare_separable():
    """Feature-map product (separable) vs broadcast (additive) evaluation."""
    for n in [500, 2000]:
        print(f"\nSize: {n}x{n}")
        print("-" * 60)
        benchmark_kernel(MercerSigmoidKernel(0.5, 2.0), n_samples=n)
        benchmark_kernel(ChiSquaredKernel(1.0), n_samples=n)


if __name__ == "__main__":
    compare_fast_paths()
    compare_separable()
