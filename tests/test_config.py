"""Tests for precision configuration."""

import warnings

import numpy as np
import pytest

from mlkernels.config import canonical_dtype, enable_x64, x64_enabled
from mlkernels.kernels.additive import SquaredDistanceKernel
from mlkernels.utils.parameters import promote


@pytest.fixture
def single_precision():
    """Temporarily disable JAX 64-bit mode."""
    enable_x64(False)
    yield
    enable_x64(True)


def test_x64_enabled_for_tests():
    assert x64_enabled()
    assert canonical_dtype(np.float64) == np.float64


def test_float32_is_always_available():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert canonical_dtype(np.float32) == np.float32


def test_float64_narrows_without_x64(single_precision):
    assert not x64_enabled()
    with pytest.warns(UserWarning, match="float64"):
        assert canonical_dtype(np.float64) == np.float32


def test_explicit_float64_request_warns(single_precision):
    with pytest.warns(UserWarning):
        dtype, (t,) = promote(0.5, dtype=np.float64)
    assert dtype == np.float32
    assert isinstance(t, np.float32)


def test_promoted_literals_narrow_silently(single_precision):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        kernel = SquaredDistanceKernel(0.5)
    assert kernel.dtype == np.float32
    assert kernel([1.0, 3.0], [0.0, 0.0]) == 4.0
