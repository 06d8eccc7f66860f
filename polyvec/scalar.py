"""
Scalars - What a Vector Is Made Of

A vector component has to behave like a real floating-point number:
- ordered (we compare components against zero)
- closed under + - * /
- has a square root for non-negative values (magnitude = sqrt(sum of squares))

Python has no compile-time trait for that, so we use two things:
1. A TypeVar that type checkers enforce on Vector[S]
2. is_scalar() for callers who want a runtime check

Square roots go through NumPy so that numpy scalars (float32, float64)
keep their precision instead of being widened by math.sqrt.
"""

from __future__ import annotations
from numbers import Real
from typing import TypeVar, Union
import numpy as np


# Anything we accept as a component value
ScalarLike = Union[float, int, np.floating, np.integer]

# Generic parameter of Vector[S]
Scalar = TypeVar("Scalar", bound=ScalarLike)


def is_scalar(value: object) -> bool:
    """
    True if value can be stored as a vector component.

    bool is a subclass of int in Python, but True/False are not
    geometric quantities, so we reject them explicitly.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.floating, np.integer))


def sqrt(value: ScalarLike) -> float:
    """Square root, valid for non-negative operands."""
    return np.sqrt(value)
