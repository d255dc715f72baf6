"""Shared fixtures for tests."""

import pytest
import jax
import jax.numpy as jnp
import jax.random as random

# Fast paths are checked for exact equality in double precision
jax.config.update("jax_enable_x64", True)

from mlkernels.kernels.additive import (
    SquaredDistanceKernel,
    SineSquaredKernel,
    ChiSquaredKernel,
)
from mlkernels.kernels.separable import ScalarProductKernel, MercerSigmoidKernel


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def sample_vectors(rng_key):
    """Pair of real vectors of length 6."""
    key1, key2 = random.split(rng_key)
    x = random.normal(key1, (6,), dtype=jnp.float64)
    y = random.normal(key2, (6,), dtype=jnp.float64)
    return x, y


@pytest.fixture
def sample_data_2d(rng_key):
    """Sample 2D data for testing."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (10, 5), dtype=jnp.float64)
    Y = random.normal(key2, (8, 5), dtype=jnp.float64)
    return X, Y


@pytest.fixture
def positive_data_2d(sample_data_2d):
    """Non-negative data for the chi squared kernel."""
    X, Y = sample_data_2d
    return jnp.abs(X), jnp.abs(Y)


@pytest.fixture(params=[
    SquaredDistanceKernel(1.0),
    SquaredDistanceKernel(0.5),
    SquaredDistanceKernel(0.3),
    SineSquaredKernel(1.0, 1.0),
    SineSquaredKernel(2.0, 0.5),
    SineSquaredKernel(0.7, 0.25),
    ChiSquaredKernel(1.0),
    ChiSquaredKernel(0.6),
    ScalarProductKernel(),
    MercerSigmoidKernel(0.5, 2.0),
], ids=repr)
def any_kernel(request):
    """Every kernel variant, including each evaluation path."""
    return request.param
