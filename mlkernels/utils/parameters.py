"""Parameter domains, type promotion and validation for kernel constructors."""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..config import canonical_dtype
from ..exceptions import InvalidParameter


@dataclass(frozen=True)
class Interval:
    """
    A real interval used as a parameter domain.

    Attributes:
        lower: Lower bound (may be -inf)
        upper: Upper bound (may be inf)
        closed_lower: Whether ``lower`` itself belongs to the interval
        closed_upper: Whether ``upper`` itself belongs to the interval
    """
    lower: float = -math.inf
    upper: float = math.inf
    closed_lower: bool = False
    closed_upper: bool = False

    def contains(self, value: Any) -> bool:
        """True if ``value`` lies inside the interval (NaN never does)."""
        value = float(value)
        if math.isnan(value):
            return False
        above = value >= self.lower if self.closed_lower else value > self.lower
        below = value <= self.upper if self.closed_upper else value < self.upper
        return above and below

    def __str__(self) -> str:
        left = "[" if self.closed_lower else "("
        right = "]" if self.closed_upper else ")"
        return f"{left}{_format_bound(self.lower)}, {_format_bound(self.upper)}{right}"


def _format_bound(bound: float) -> str:
    if math.isinf(bound):
        return "-inf" if bound < 0 else "inf"
    if float(bound).is_integer():
        return str(int(bound))
    return str(bound)


UNIT_INTERVAL = Interval(0.0, 1.0, closed_lower=False, closed_upper=True)
POSITIVE = Interval(0.0, math.inf)
REAL = Interval()


def promote(
    *values: Any,
    dtype: Optional[DTypeLike] = None
) -> Tuple[np.dtype, Tuple[Any, ...]]:
    """
    Promote numeric parameters to a common floating element type.

    Mixed literals (ints, Python floats, numpy scalars) resolve through
    ``numpy.result_type``; integer and boolean results become float64.
    The result is canonicalised against the JAX precision setting.

    Parameters:
        *values: Parameter values
        dtype: Explicit element type; overrides promotion

    Returns:
        (element type, values converted to that type)

    Raises:
        TypeError: If ``dtype`` is given and is not a floating type
    """
    if dtype is not None:
        requested = np.dtype(dtype)
        if not np.issubdtype(requested, np.floating):
            raise TypeError(f"Element type must be floating, got {requested}")
        resolved = canonical_dtype(requested)
    else:
        common = np.result_type(*values) if values else np.dtype(np.float64)
        if not np.issubdtype(common, np.floating):
            common = np.dtype(np.float64)
        resolved = canonical_dtype(common, warn=False)

    scalar_type = resolved.type
    return resolved, tuple(scalar_type(v) for v in values)


def check_parameter(name: str, value: Any, domain: Interval) -> Any:
    """
    Validate a single parameter against its domain.

    Parameters:
        name: Parameter name, used in the error message
        value: Value to check
        domain: Allowed interval

    Returns:
        ``value`` unchanged

    Raises:
        InvalidParameter: If ``value`` is outside ``domain``
    """
    if not domain.contains(value):
        raise InvalidParameter(name, value, domain)
    return value
