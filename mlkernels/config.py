"""Floating-point precision configuration.

JAX computes in single precision unless 64-bit mode is switched on, either
through ``enable_x64()`` or the ``JAX_ENABLE_X64`` environment variable.
Kernel element types are canonicalised against that setting at construction.
"""

import warnings

import jax
import numpy as np
from numpy.typing import DTypeLike


def enable_x64(enabled: bool = True) -> None:
    """Switch JAX double precision on or off."""
    jax.config.update("jax_enable_x64", enabled)


def x64_enabled() -> bool:
    """True if JAX is running with 64-bit floats."""
    return np.dtype(jax.dtypes.canonicalize_dtype(np.float64)) == np.float64


def canonical_dtype(dtype: DTypeLike, warn: bool = True) -> np.dtype:
    """
    Element type JAX will actually compute in for ``dtype``.

    Parameters:
        dtype: Requested floating element type
        warn: Emit a UserWarning when the request has to be narrowed

    Returns:
        The canonical numpy dtype (float64 narrows to float32 without x64)
    """
    requested = np.dtype(dtype)
    canonical = np.dtype(jax.dtypes.canonicalize_dtype(requested))
    if warn and canonical != requested:
        warnings.warn(
            f"Requested element type {requested} is not available with "
            f"jax_enable_x64={x64_enabled()}; using {canonical}",
            UserWarning,
            stacklevel=2,
        )
    return canonical
