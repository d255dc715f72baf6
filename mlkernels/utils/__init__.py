"""Parameter validation utilities."""

from .parameters import (
    Interval,
    UNIT_INTERVAL,
    POSITIVE,
    REAL,
    promote,
    check_parameter,
)

__all__ = [
    "Interval",
    "UNIT_INTERVAL",
    "POSITIVE",
    "REAL",
    "promote",
    "check_parameter",
]
