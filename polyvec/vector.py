"""
N-Dimensional Vectors - Magnitude and Direction in Any Coordinate System

A vector is a list of numbers plus a rule for reading them (the
CoordinateSystem). Everything geometric - magnitude, unit vector,
direction - is computed from those two things on every access.
Nothing is cached, so nothing can go stale.

KEY CONCEPT: The Elastic Vector

Think of every vector as infinitely long, padded with zeros:

    <1, 2>  ==  <1, 2, 0, 0, 0, ...>

So:
- Reading past the end returns 0 (never an error)
- Writing past the end grows the vector, zero-filling the gap
- compact_dimensions ignores the trailing zeros

KEY CONCEPT: Magnitude Depends On The Coordinate System

    Cartesian   [x, y, z]:  |v|² = x² + y² + z²
    Cylindrical [r, θ, z]:  |v|² = r² + z²      (θ is an angle, r covers the plane)
    Spherical   [r, θ, φ]:  |v|² = r²           (everything after r is an angle)

Angles are never squared into a magnitude and never scaled.
"""

from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, Union
import numpy as np

from .config import VectorConfig, DEFAULT_CONFIG
from .coordinates import CoordinateSystem
from .scalar import Scalar, ScalarLike, sqrt

logger = logging.getLogger(__name__)


def closed(lower: int, upper: int) -> slice:
    """Closed range lower...upper as a slice: v[closed(1, 3)] == v[1:4]."""
    return slice(lower, upper + 1)


def through(upper: int) -> slice:
    """Prefix through upper (inclusive): v[through(2)] == v[0:3]."""
    return slice(0, upper + 1)


class Vector(Generic[Scalar]):
    """
    A mathematical way to describe both a magnitude and a direction.

    State:
    - components: how much the vector points along each axis, read
      according to coordinate_system
      Cartesian [x, y, z, w, ...], cylindrical [r, θ, z, w, ...],
      spherical [r, θ, φ, ...]
    - coordinate_system: which formulas apply

    Vectors are mutable values: constructors copy their input, and
    copy() / range reads / unit_vector always hand back a new Vector.
    """

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        components: Optional[Iterable[Scalar]] = None,
        coordinate_system: CoordinateSystem = CoordinateSystem.CARTESIAN,
    ):
        if components is None:
            components = [0.0, 0.0]
        self._components: List[Scalar] = list(components)
        self.coordinate_system = CoordinateSystem(coordinate_system)

    # ============================================================
    # Additional constructors
    # ============================================================

    @classmethod
    def with_dimensions(cls, dimensions: int) -> "Vector":
        """Zero vector with `dimensions` components (Cartesian)."""
        return cls([0.0] * max(dimensions, 0))

    @classmethod
    def in_system(cls, coordinate_system: CoordinateSystem) -> "Vector":
        """One zero component in the given coordinate system."""
        return cls([0.0], coordinate_system)

    @classmethod
    def of(cls, *components: Scalar) -> "Vector":
        """Literal syntax: Vector.of(1.0, 2.0, 3.0)."""
        return cls(components)

    @classmethod
    def cartesian(
        cls,
        x: Scalar,
        y: Scalar,
        z: Optional[Scalar] = None,
        w: Optional[Scalar] = None,
    ) -> "Vector":
        """
        Cartesian vector from named axes.

        Omitted trailing axes are not stored, so cartesian(1, 2) is 2D.
        """
        components = [x, y]
        if z is not None or w is not None:
            components.append(0.0 if z is None else z)
        if w is not None:
            components.append(w)
        return cls(components)

    @classmethod
    def cylindrical(cls, radius: Scalar, theta: Scalar, z: Scalar) -> "Vector":
        return cls([radius, theta, z], CoordinateSystem.POLAR_CYLINDRICAL)

    @classmethod
    def spherical(cls, radius: Scalar, theta: Scalar, phi: Scalar) -> "Vector":
        return cls([radius, theta, phi], CoordinateSystem.POLAR_SPHERICAL)

    @classmethod
    def from_array(
        cls,
        arr: np.ndarray,
        coordinate_system: CoordinateSystem = CoordinateSystem.CARTESIAN,
    ) -> "Vector":
        """Create from a 1-D numpy array."""
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise ValueError(f"Expected a 1-D array, got shape {arr.shape}")
        return cls([float(value) for value in arr], coordinate_system)

    @classmethod
    def zero(cls) -> "Vector":
        """Equates to <0, 0>."""
        return cls.with_dimensions(2)

    def to_array(self) -> np.ndarray:
        """Convert to numpy array for math operations."""
        return np.array(self._components, dtype=np.float64)

    def copy(self) -> "Vector":
        return Vector(self._components, self.coordinate_system)

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Vector":
        return self.copy()

    # ============================================================
    # Basic properties
    # ============================================================

    @property
    def components(self) -> List[Scalar]:
        return self._components

    @components.setter
    def components(self, components: Iterable[Scalar]) -> None:
        self._components = list(components)

    @property
    def dimensions(self) -> int:
        """The number of dimensions (components) in the vector."""
        return len(self._components)

    @dimensions.setter
    def dimensions(self, count: int) -> None:
        """
        Grow with zeros or drop trailing components until len == count.

        Negative counts clamp at 0.
        """
        current = len(self._components)
        if count > current:
            self._components.extend([0.0] * (count - current))
            logger.debug(f"Vector grew from {current} to {count} dimensions")
        elif count < current:
            del self._components[max(count, 0):]
            logger.debug(f"Vector truncated from {current} to {len(self._components)} dimensions")

    @property
    def compact_dimensions(self) -> int:
        """
        The number of dimensions, excluding trailing zeros.

            <1, 2, 0, 0, 0>.compact_dimensions  = 2
            <0, 0, 3>.compact_dimensions        = 3
            <1, 2, 0, 0, 3>.compact_dimensions  = 5
        """
        trailing_zeros = 0
        for component in reversed(self._components):
            if component != 0:
                break
            trailing_zeros += 1
        return self.dimensions - trailing_zeros

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._components)

    # ============================================================
    # Geometry
    # ============================================================

    @property
    def magnitude_squared(self) -> ScalarLike:
        """
        The magnitude of the vector, squared.

            <1, 2, 3>.magnitude_squared = 1² + 2² + 3²
        """
        system = self.coordinate_system
        if system is CoordinateSystem.CARTESIAN:
            return sum((c * c for c in self._components), 0.0)
        elif system is CoordinateSystem.POLAR_CYLINDRICAL:
            # r already accounts for the planar part, so skip θ (index 1)
            return sum(
                (c * c for i, c in enumerate(self._components) if i != 1), 0.0
            )
        elif system is CoordinateSystem.POLAR_SPHERICAL:
            # The radius of the sphere is the whole magnitude
            return self[0] * self[0]
        raise ValueError(f"Unknown coordinate system: {system}")

    @property
    def magnitude(self) -> ScalarLike:
        """Length of the vector: sqrt(magnitude_squared)."""
        return sqrt(self.magnitude_squared)

    def set_magnitude(self, magnitude: ScalarLike) -> None:
        """
        Rescale to the given magnitude, keeping the direction.

        This REPLACES every component (self = unit_vector * magnitude).
        """
        self._assign(self.unit_vector._scaled(magnitude))

    @property
    def unit_vector(self) -> "Vector":
        """A vector with the same direction as self but a magnitude of 1."""
        return self.unit_vector_with(DEFAULT_CONFIG)

    def unit_vector_with(self, config: Optional[VectorConfig] = None) -> "Vector":
        """
        unit_vector with explicit tolerances.

        Angles pass through untouched. A Cartesian or cylindrical vector
        with no magnitude has no direction: its magnitude-bearing
        components come back as 0.
        """
        config = config or DEFAULT_CONFIG
        system = self.coordinate_system

        if system is CoordinateSystem.POLAR_SPHERICAL:
            unit = self.copy()
            unit[0] = 1.0
            return unit

        magnitude = self.magnitude
        if magnitude <= config.zero_magnitude_tol:
            logger.warning(f"Unit vector of zero-magnitude vector {self!r}; returning zeros")
            return self._scaled(0.0)

        if system is CoordinateSystem.CARTESIAN:
            return Vector([c / magnitude for c in self._components], system)
        elif system is CoordinateSystem.POLAR_CYLINDRICAL:
            return Vector(
                [c if i == 1 else c / magnitude for i, c in enumerate(self._components)],
                system,
            )
        raise ValueError(f"Unknown coordinate system: {system}")

    @property
    def direction(self) -> "Vector":
        """The direction of the vector. Equivalent to the unit vector."""
        return self.unit_vector

    def set_direction(self, direction: "Vector") -> None:
        """
        Point along `direction`, keeping the current magnitude.

        Adopts direction's coordinate system as well.
        """
        magnitude = self.magnitude
        self._assign(direction.unit_vector._scaled(magnitude))

    def normalize(self) -> None:
        """
        Remove trailing zeros in place.

            <1, 2, 0, 0>  ->  <1, 2>
            <1, 0, 2>     ->  <1, 0, 2>
            <0, 0>        ->  <>
        """
        keep = self.compact_dimensions
        if keep < self.dimensions:
            self.dimensions = keep

    def is_approximately_equal(
        self, other: "Vector", config: Optional[VectorConfig] = None
    ) -> bool:
        """
        Component-wise closeness, reading both vectors elastically.

        <1, 2> and <1, 2, 0> are approximately equal.
        """
        config = config or DEFAULT_CONFIG
        if self.coordinate_system is not other.coordinate_system:
            return False
        count = max(self.dimensions, other.dimensions)
        ours = np.array([self[i] for i in range(count)], dtype=np.float64)
        theirs = np.array([other[i] for i in range(count)], dtype=np.float64)
        return bool(np.all(np.isclose(ours, theirs, rtol=config.rel_tol, atol=config.abs_tol)))

    def _scaled(self, factor: ScalarLike) -> "Vector":
        """Multiply the magnitude-bearing components by factor (angles untouched)."""
        system = self.coordinate_system
        return Vector(
            [c if system.is_angle_index(i) else c * factor for i, c in enumerate(self._components)],
            system,
        )

    def _assign(self, other: "Vector") -> None:
        self._components = list(other._components)
        self.coordinate_system = other.coordinate_system

    # ============================================================
    # Indexing
    # ============================================================

    def __getitem__(self, key: Union[int, slice]) -> Union[Scalar, "Vector"]:
        """
        v[i]      -> component i, or 0 past the end
        v[lo:hi]  -> new Vector of components lo..hi-1 (zeros past the end)
        """
        if isinstance(key, slice):
            lower, upper = self._resolve_range(key)
            return Vector([self._read(i) for i in range(lower, upper)])
        return self._read(self._check_index(key))

    def __setitem__(self, key: Union[int, slice], value) -> None:
        """
        v[i] = x        grows the vector (zero-filled) if i is past the end
        v[lo:hi] = w    w must have exactly hi - lo components
        """
        if isinstance(key, slice):
            lower, upper = self._resolve_range(key)
            values = list(value)
            expected = upper - lower
            if len(values) != expected:
                raise ValueError(
                    f"Range {lower}..<{upper} needs {expected} components, got {len(values)}"
                )
            for offset, component in enumerate(values):
                self._write(lower + offset, component)
            return
        self._write(self._check_index(key), value)

    def _read(self, index: int) -> Scalar:
        return self._components[index] if index < self.dimensions else 0.0

    def _write(self, index: int, value: Scalar) -> None:
        if index >= self.dimensions:
            self.dimensions = index + 1
        self._components[index] = value

    @staticmethod
    def _check_index(index) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers or slices, not {type(index).__name__}")
        if index < 0:
            raise IndexError(f"Vector index must be non-negative, got {index}")
        return int(index)

    def _resolve_range(self, key: slice) -> Tuple[int, int]:
        """Turn a slice into a half-open (lower, upper) against current dimensions."""
        if key.step not in (None, 1):
            raise ValueError(f"Vector ranges do not support a step, got {key.step}")
        lower = 0 if key.start is None else self._check_index(key.start)
        upper = self.dimensions if key.stop is None else self._check_index(key.stop)
        if lower > upper:
            raise ValueError(f"Invalid range {lower}..<{upper}")
        return lower, upper

    # ============================================================
    # Comparison / display
    # ============================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            self.coordinate_system is other.coordinate_system
            and self._components == other._components
        )

    def __repr__(self) -> str:
        return f"Vector({self._components!r}, {self.coordinate_system.value})"
