"""Tests for scalar capability checks."""
from __future__ import annotations

import numpy as np
import pytest

from polyvec.scalar import is_scalar, sqrt


@pytest.mark.parametrize("value", [0, 1.5, -3, np.float32(2.0), np.float64(1e-9), np.int64(4)])
def test_real_numbers_are_scalars(value):
    assert is_scalar(value)


@pytest.mark.parametrize("value", [True, np.bool_(False), 1 + 2j, "1.0", None, [1.0]])
def test_non_real_values_are_rejected(value):
    assert not is_scalar(value)


def test_sqrt_of_non_negative_values():
    assert sqrt(25.0) == 5.0
    assert sqrt(0.0) == 0.0
    assert sqrt(np.float32(4.0)) == pytest.approx(2.0)
