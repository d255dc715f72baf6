"""Base kernel hierarchy, metadata and the additive composition rule."""

import warnings
from abc import ABC, abstractmethod
from dataclasses import fields, replace
from enum import Enum
from functools import partial
from typing import Any, ClassVar, Dict, Optional, Union

import jax
import jax.numpy as jnp
import numpy as np
from jax import jit
from jaxtyping import Array, Float
from numpy.typing import DTypeLike

from ..exceptions import DimensionMismatch

ArrayLike = Union[Float[Array, "..."], np.ndarray, float]


class KernelRange(Enum):
    """Set of values a kernel can take."""
    NON_NEGATIVE = "non_negative"
    POSITIVE = "positive"
    ALL_REALS = "all_reals"


class KernelCase(Enum):
    """Canonical exponent values that have a cheaper closed form."""
    GENERAL = "general"
    T1 = "t=1"
    T0P5 = "t=0.5"


def select_case(t: Any, allow_half: bool = True) -> KernelCase:
    """Pick the evaluation path for exponent ``t``."""
    if t == 1:
        return KernelCase.T1
    if allow_half and t == 0.5:
        return KernelCase.T0P5
    return KernelCase.GENERAL


class BaseKernel(ABC):
    """
    Abstract kernel on real vectors.

    Concrete kernels are frozen dataclasses whose init fields are the kernel
    parameters followed by ``dtype``. They are hashable, so an instance can be
    passed to ``jax.jit`` as a static argument.

    Metadata (negative-definiteness, Mercer property, range, whether zero is
    attained) is declared per class and does not depend on parameter values.
    """

    _name: ClassVar[str] = "Base"

    dtype: np.dtype

    def _assign(self, **values: Any) -> None:
        # Frozen dataclasses only allow writes through object.__setattr__
        for key, value in values.items():
            object.__setattr__(self, key, value)

    def _asarray(self, x: ArrayLike) -> Float[Array, "..."]:
        return jnp.asarray(x, dtype=self.dtype)

    @abstractmethod
    def phi(self, x: ArrayLike, y: ArrayLike) -> Float[Array, "..."]:
        """Per-pair rule, applied elementwise to broadcastable inputs."""
        ...

    # Metadata

    @classmethod
    def is_negative_definite(cls) -> bool:
        """True if the kernel is (conditionally) negative-definite."""
        return False

    @classmethod
    def is_mercer(cls) -> bool:
        """True if the kernel is positive semi-definite."""
        return False

    @classmethod
    def kernel_range(cls) -> KernelRange:
        """Values the kernel can take."""
        return KernelRange.ALL_REALS

    @classmethod
    def attains_zero(cls) -> bool:
        """True if zero is an attainable kernel value."""
        return True

    @classmethod
    def is_separable(cls) -> bool:
        return False

    def parameters(self) -> Dict[str, Any]:
        """Parameter names and values in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.init and f.name != "dtype"
        }

    def describe(self, eltype: bool = True) -> str:
        """
        Human-readable name with parameter values.

        Parameters:
            eltype: Include the element type, e.g. ``{float64}``

        Returns:
            String such as ``SquaredDistance{float64}(t=0.5)``
        """
        params = ",".join(f"{k}={v}" for k, v in self.parameters().items())
        suffix = f"{{{self.dtype.name}}}" if eltype else ""
        return f"{self._name}{suffix}({params})"

    def __repr__(self) -> str:
        return self.describe()

    def astype(self, dtype: DTypeLike) -> "BaseKernel":
        """Same kernel with parameters converted to another element type."""
        return replace(self, dtype=dtype)

    # Evaluation

    def __call__(self, x: ArrayLike, y: ArrayLike) -> Float[Array, ""]:
        """
        Evaluate the kernel on two vectors.

        k(x, y) = Σ_i φ(x_i, y_i)

        Parameters:
            x: First vector, shape (n,)
            y: Second vector, shape (n,)

        Returns:
            Scalar kernel value (0 for empty vectors)

        Raises:
            DimensionMismatch: If the vectors differ in length or are not 1-D
        """
        x = jnp.atleast_1d(self._asarray(x))
        y = jnp.atleast_1d(self._asarray(y))
        if x.ndim != 1 or y.ndim != 1:
            raise DimensionMismatch(
                1, max(x.ndim, y.ndim),
                f"Expected vectors, got arrays of shape {x.shape} and {y.shape}"
            )
        if x.shape[0] != y.shape[0]:
            raise DimensionMismatch(
                x.shape[0], y.shape[0],
                f"Dimensions of x ({x.shape[0]}) and y ({y.shape[0]}) must match"
            )
        self.check_domain(x, y)
        return self._additive_sum(x, y)

    @partial(jit, static_argnums=(0,))
    def _additive_sum(
        self,
        x: Float[Array, "n"],
        y: Float[Array, "n"]
    ) -> Float[Array, ""]:
        return jnp.sum(self.phi(x, y))

    def check_domain(self, x: Float[Array, "n"], y: Float[Array, "n"]) -> None:
        """Hook for input preconditions; the default accepts all reals."""


class AdditiveKernel(BaseKernel):
    """
    Kernel formed by summing a scalar kernel over the vector dimensions.

    k(x, y) = Σ_i φ(x_i, y_i),   x, y ∈ ℝⁿ
    """


class SeparableKernel(AdditiveKernel):
    """
    Additive kernel whose scalar rule factors as φ(x, y) = φ(x)φ(y).

    Subclasses implement ``feature_map`` only; the pairwise rule is derived.
    """

    @abstractmethod
    def feature_map(self, x: ArrayLike) -> Float[Array, "..."]:
        """Per-scalar rule φ(x), applied elementwise."""
        ...

    @classmethod
    def is_separable(cls) -> bool:
        return True

    def phi(
        self,
        x: ArrayLike,
        y: Optional[ArrayLike] = None
    ) -> Float[Array, "..."]:
        """
        φ(x) with one argument, φ(x)φ(y) with two.
        """
        if y is None:
            return self.feature_map(x)
        return self.feature_map(x) * self.feature_map(y)


def warn_if_negative(name: str, *arrays: Any) -> None:
    """Emit a RuntimeWarning if any concrete array has negative entries."""
    for a in arrays:
        try:
            values = np.asarray(a)
        except jax.errors.TracerArrayConversionError:
            return
        if np.any(values < 0):
            warnings.warn(
                f"{name} expects non-negative inputs; got negative entries",
                RuntimeWarning,
                stacklevel=4,
            )
            return
