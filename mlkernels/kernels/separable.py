"""Separable kernels: φ(x, y) = φ(x)φ(y)."""

from dataclasses import dataclass
from typing import Any, Optional

import jax.numpy as jnp
from jaxtyping import Array, Float
from numpy.typing import DTypeLike

from .base import ArrayLike, SeparableKernel
from ..utils.parameters import POSITIVE, REAL, check_parameter, promote


class _MercerSeparableKernel(SeparableKernel):
    """A product of identical feature maps is positive semi-definite."""

    @classmethod
    def is_mercer(cls) -> bool:
        return True


@dataclass(frozen=True, repr=False)
class ScalarProductKernel(_MercerSeparableKernel):
    """
    Scalar product (linear) kernel.

    k(x, y) = Σ_i x_i y_i

    Parameters:
        dtype: Floating element type (default float64)
    """
    _name = "ScalarProduct"

    dtype: Optional[DTypeLike] = None

    def __post_init__(self):
        dtype, _ = promote(dtype=self.dtype)
        self._assign(dtype=dtype)

    def feature_map(self, x: ArrayLike) -> Float[Array, "..."]:
        return self._asarray(x)


@dataclass(frozen=True, repr=False)
class MercerSigmoidKernel(_MercerSeparableKernel):
    """
    Mercer sigmoid kernel.

    k(x, y) = Σ_i tanh((x_i - d)/b) tanh((y_i - d)/b),   b > 0

    Parameters:
        d: Shift
        b: Scale
        dtype: Floating element type (promoted from ``d`` and ``b`` if omitted)
    """
    _name = "MercerSigmoid"

    d: Any = 0.0
    b: Any = 1.0
    dtype: Optional[DTypeLike] = None

    def __post_init__(self):
        dtype, (d, b) = promote(self.d, self.b, dtype=self.dtype)
        check_parameter("d", d, REAL)
        check_parameter("b", b, POSITIVE)
        self._assign(d=d, b=b, dtype=dtype)

    def feature_map(self, x: ArrayLike) -> Float[Array, "..."]:
        return jnp.tanh((self._asarray(x) - self.d) / self.b)
