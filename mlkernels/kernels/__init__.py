"""Kernel implementations for mlkernels."""

from .base import (
    KernelRange,
    KernelCase,
    BaseKernel,
    AdditiveKernel,
    SeparableKernel,
)
from .additive import SquaredDistanceKernel, SineSquaredKernel, ChiSquaredKernel
from .separable import ScalarProductKernel, MercerSigmoidKernel

__all__ = [
    "KernelRange",
    "KernelCase",
    "BaseKernel",
    "AdditiveKernel",
    "SeparableKernel",
    "SquaredDistanceKernel",
    "SineSquaredKernel",
    "ChiSquaredKernel",
    "ScalarProductKernel",
    "MercerSigmoidKernel",
]
