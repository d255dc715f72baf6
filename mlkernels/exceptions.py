"""Exceptions raised by kernel construction and evaluation."""

from typing import Any, Optional


class KernelError(Exception):
    """Base class for all mlkernels errors."""


class InvalidParameter(KernelError, ValueError):
    """
    A kernel parameter lies outside its domain.
    
    Attributes:
        name: Parameter name (e.g. "t")
        value: Offending value
        domain: Required domain, rendered as an interval string
    """
    
    def __init__(self, name: str, value: Any, domain: Any):
        self.name = name
        self.value = value
        self.domain = domain
        super().__init__(f"Parameter {name} = {value} must be in {domain}")


class DimensionMismatch(KernelError, ValueError):
    """
    Paired inputs have incompatible dimensions.
    
    Attributes:
        expected: Dimension of the first input
        actual: Dimension of the second input
    """
    
    def __init__(
        self,
        expected: Any,
        actual: Any,
        message: Optional[str] = None
    ):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Dimension mismatch: {expected} != {actual}"
        super().__init__(message)
