"""Pairwise kernel matrices over the rows of two data matrices."""

from functools import partial
from typing import Optional

import jax.numpy as jnp
from jax import jit
from jaxtyping import Array, Float

from .exceptions import DimensionMismatch
from .kernels.base import ArrayLike, BaseKernel


def _as_matrix(kernel: BaseKernel, X: ArrayLike, name: str) -> Float[Array, "n d"]:
    X = jnp.asarray(X, dtype=kernel.dtype)
    if X.ndim != 2:
        raise DimensionMismatch(
            2, X.ndim, f"{name} must be 2D (observations x features), got shape {X.shape}"
        )
    return X


@partial(jit, static_argnums=(0,))
def _additive_matrix(
    kernel: BaseKernel,
    X: Float[Array, "n d"],
    Y: Float[Array, "m d"]
) -> Float[Array, "n m"]:
    # φ broadcasts to (n, m, d); the additive rule sums the feature axis
    return jnp.sum(kernel.phi(X[:, None, :], Y[None, :, :]), axis=-1)


@partial(jit, static_argnums=(0,))
def _separable_matrix(
    kernel: BaseKernel,
    X: Float[Array, "n d"],
    Y: Float[Array, "m d"]
) -> Float[Array, "n m"]:
    # Σ_i φ(x_i)φ(y_i) is an inner product of feature maps
    return jnp.dot(kernel.feature_map(X), kernel.feature_map(Y).T)


def kernel_matrix(
    kernel: BaseKernel,
    X: ArrayLike,
    Y: Optional[ArrayLike] = None
) -> Float[Array, "n m"]:
    """
    Compute the kernel matrix between the rows of X and Y.

    Separable kernels are evaluated as Φ(X) Φ(Y)ᵀ, other additive kernels by
    broadcasting φ over all row pairs.

    Parameters:
        kernel: Additive kernel
        X: First set of points, shape (n, d)
        Y: Second set of points, shape (m, d). Defaults to X.

    Returns:
        Kernel matrix of shape (n, m)

    Raises:
        DimensionMismatch: If X or Y is not 2D or their feature counts differ
    """
    X = _as_matrix(kernel, X, "X")
    Y = X if Y is None else _as_matrix(kernel, Y, "Y")
    if X.shape[1] != Y.shape[1]:
        raise DimensionMismatch(
            X.shape[1], Y.shape[1],
            f"X and Y must have same number of features ({X.shape[1]} != {Y.shape[1]})"
        )
    kernel.check_domain(X, Y)

    if kernel.is_separable():
        return _separable_matrix(kernel, X, Y)
    return _additive_matrix(kernel, X, Y)


def kernel_diagonal(kernel: BaseKernel, X: ArrayLike) -> Float[Array, "n"]:
    """
    Diagonal of K(X, X) without building the full matrix.

    Parameters:
        kernel: Additive kernel
        X: Input points, shape (n, d)

    Returns:
        Diagonal values, shape (n,)
    """
    X = _as_matrix(kernel, X, "X")
    kernel.check_domain(X, X)
    return jnp.sum(kernel.phi(X, X), axis=-1)
