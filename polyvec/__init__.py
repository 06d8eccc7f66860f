"""
polyvec - N-dimensional vectors in Cartesian, cylindrical and spherical coordinates.

This package provides:
- Vector: elastic, zero-padded vector with magnitude / direction / unit vector
- CoordinateSystem: how a vector's components are interpreted
- Scalar helpers and comparison tolerances
"""

from .config import VectorConfig, DEFAULT_CONFIG
from .coordinates import CoordinateSystem
from .scalar import Scalar, ScalarLike, is_scalar
from .vector import Vector, closed, through

__all__ = [
    "Vector",
    "CoordinateSystem",
    "Scalar",
    "ScalarLike",
    "is_scalar",
    "VectorConfig",
    "DEFAULT_CONFIG",
    "closed",
    "through",
]
