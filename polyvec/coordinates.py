"""
Coordinate Systems - How To Read A List Of Numbers

The same three numbers mean very different things depending on the
coordinate system:

    [5, 0.5, 2]  Cartesian:    5 along x, 0.5 along y, 2 along z
                 Cylindrical:  radius 5, angle 0.5 rad, height 2
                 Spherical:    radius 5, angles 0.5 and 2 rad

The set is CLOSED - formulas in vector.py branch on every member,
so adding a member means touching every geometric property.
"""

from __future__ import annotations
from enum import Enum


class CoordinateSystem(str, Enum):
    CARTESIAN = "cartesian"                  # [x, y, z, w, ...]
    POLAR_CYLINDRICAL = "polar_cylindrical"  # [r, θ, z, w, ...]
    POLAR_SPHERICAL = "polar_spherical"      # [r, θ, φ, ...]

    @property
    def is_polar(self) -> bool:
        return self is not CoordinateSystem.CARTESIAN

    def is_angle_index(self, index: int) -> bool:
        """
        Does component `index` hold an angle in this system?

        Angles are never scaled or squared into a magnitude.
        - Cartesian: no angles
        - Cylindrical: only index 1 (θ)
        - Spherical: everything after the radius
        """
        if self is CoordinateSystem.CARTESIAN:
            return False
        elif self is CoordinateSystem.POLAR_CYLINDRICAL:
            return index == 1
        elif self is CoordinateSystem.POLAR_SPHERICAL:
            return index >= 1
        raise ValueError(f"Unknown coordinate system: {self}")

    def __str__(self) -> str:
        return self.value
