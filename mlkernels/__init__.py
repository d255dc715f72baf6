"""
mlkernels - Additive and separable kernel functions

A Python/JAX implementation of negative-definite and Mercer kernels on real
vectors, with the metadata kernel-method code uses to pick algorithms.
"""

__version__ = "0.1.0"

# Errors
from .exceptions import KernelError, InvalidParameter, DimensionMismatch

# Precision
from .config import enable_x64, x64_enabled

# Kernels
from .kernels.base import (
    KernelRange,
    BaseKernel,
    AdditiveKernel,
    SeparableKernel,
)
from .kernels.additive import (
    SquaredDistanceKernel,
    SineSquaredKernel,
    ChiSquaredKernel,
)
from .kernels.separable import (
    ScalarProductKernel,
    MercerSigmoidKernel,
)

# Pairwise evaluation
from .pairwise import kernel_matrix, kernel_diagonal

__all__ = [
    # Version
    "__version__",
    # Errors
    "KernelError",
    "InvalidParameter",
    "DimensionMismatch",
    # Precision
    "enable_x64",
    "x64_enabled",
    # Kernels
    "KernelRange",
    "BaseKernel",
    "AdditiveKernel",
    "SeparableKernel",
    "SquaredDistanceKernel",
    "SineSquaredKernel",
    "ChiSquaredKernel",
    "ScalarProductKernel",
    "MercerSigmoidKernel",
    # Pairwise
    "kernel_matrix",
    "kernel_diagonal",
]
