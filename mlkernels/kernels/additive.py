"""Negative-definite additive kernels: squared distance, sine squared, chi squared."""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import jax.numpy as jnp
from jaxtyping import Array, Float
from numpy.typing import DTypeLike

from .base import (
    AdditiveKernel,
    ArrayLike,
    KernelCase,
    KernelRange,
    select_case,
    warn_if_negative,
)
from ..utils.parameters import POSITIVE, UNIT_INTERVAL, check_parameter, promote


class _NegativeDefiniteKernel(AdditiveKernel):
    """Shared metadata of the distance-like additive kernels."""

    @classmethod
    def is_negative_definite(cls) -> bool:
        return True

    @classmethod
    def kernel_range(cls) -> KernelRange:
        return KernelRange.NON_NEGATIVE

    @classmethod
    def attains_zero(cls) -> bool:
        return True


@dataclass(frozen=True, repr=False)
class SquaredDistanceKernel(_NegativeDefiniteKernel):
    """
    Squared distance kernel.

    k(x, y) = Σ_i ((x_i - y_i)²)ᵗ,   t ∈ (0, 1]

    Parameters:
        t: Exponent. t=1 gives the squared Euclidean distance, t=0.5 the
           L1 distance.
        dtype: Floating element type (promoted from ``t`` if omitted)
    """
    _name = "SquaredDistance"

    t: Any = 1.0
    dtype: Optional[DTypeLike] = None
    _case: KernelCase = field(
        default=KernelCase.GENERAL, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        dtype, (t,) = promote(self.t, dtype=self.dtype)
        check_parameter("t", t, UNIT_INTERVAL)
        self._assign(t=t, dtype=dtype, _case=select_case(t))

    def phi(self, x: ArrayLike, y: ArrayLike) -> Float[Array, "..."]:
        diff = self._asarray(x) - self._asarray(y)
        if self._case is KernelCase.T1:
            return diff ** 2
        if self._case is KernelCase.T0P5:
            return jnp.abs(diff)
        return (diff ** 2) ** self.t


@dataclass(frozen=True, repr=False)
class SineSquaredKernel(_NegativeDefiniteKernel):
    """
    Sine squared kernel.

    k(x, y) = Σ_i (sin²(p(x_i - y_i)))ᵗ,   p > 0, t ∈ (0, 1]

    Parameters:
        p: Frequency scale (default π)
        t: Exponent
        dtype: Floating element type (promoted from ``p`` and ``t`` if omitted)
    """
    _name = "SineSquared"

    p: Any = math.pi
    t: Any = 1.0
    dtype: Optional[DTypeLike] = None
    _case: KernelCase = field(
        default=KernelCase.GENERAL, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        dtype, (p, t) = promote(self.p, self.t, dtype=self.dtype)
        check_parameter("p", p, POSITIVE)
        check_parameter("t", t, UNIT_INTERVAL)
        self._assign(p=p, t=t, dtype=dtype, _case=select_case(t))

    def phi(self, x: ArrayLike, y: ArrayLike) -> Float[Array, "..."]:
        s = jnp.sin((self._asarray(x) - self._asarray(y)) * self.p)
        if self._case is KernelCase.T1:
            return s ** 2
        if self._case is KernelCase.T0P5:
            return jnp.abs(s)
        return (s ** 2) ** self.t


@dataclass(frozen=True, repr=False)
class ChiSquaredKernel(_NegativeDefiniteKernel):
    """
    Chi squared kernel on non-negative inputs.

    k(x, y) = Σ_i ((x_i - y_i)² / (x_i + y_i))ᵗ,   t ∈ (0, 1]

    A term with x_i = y_i = 0 contributes 0. Inputs are expected to be
    non-negative; vector evaluation warns when they are not.

    Parameters:
        t: Exponent
        dtype: Floating element type (promoted from ``t`` if omitted)
    """
    _name = "ChiSquared"

    t: Any = 1.0
    dtype: Optional[DTypeLike] = None
    _case: KernelCase = field(
        default=KernelCase.GENERAL, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        dtype, (t,) = promote(self.t, dtype=self.dtype)
        check_parameter("t", t, UNIT_INTERVAL)
        self._assign(t=t, dtype=dtype, _case=select_case(t, allow_half=False))

    def phi(self, x: ArrayLike, y: ArrayLike) -> Float[Array, "..."]:
        x = self._asarray(x)
        y = self._asarray(y)
        both_zero = (x == 0) & (y == 0)
        # Substitute a unit denominator so the masked branch stays finite
        ratio = (x - y) ** 2 / jnp.where(both_zero, 1, x + y)
        if self._case is KernelCase.T1:
            return jnp.where(both_zero, 0, ratio)
        return jnp.where(both_zero, 0, ratio ** self.t)

    def check_domain(self, x, y) -> None:
        warn_if_negative(self._name, x, y)
