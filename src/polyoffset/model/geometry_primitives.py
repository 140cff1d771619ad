"""
Geometric Primitives for polyline offsetting.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


class DegenerateEdgeError(ValueError):
    """Raised when a direction is requested from a zero-length vector or edge."""


@dataclass(frozen=True)
class Vector:
    """
    A vector in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self * scalar

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __getitem__(self, index: int) -> float:
        return _component(self, index)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """
        Scale to unit length.

        Raises:
            DegenerateEdgeError: if the vector has zero length, or is so short
                that its direction cannot be represented. A zero vector has no
                direction, and returning one would silently collapse every
                offset built from it.
        """
        mag = self.magnitude
        if mag == 0.0:
            raise DegenerateEdgeError("Cannot normalize a zero-length vector.")
        # Divide rather than scale by 1 / mag, which overflows for subnormal lengths
        unit = Vector(self.x / mag, self.y / mag)
        if not (math.isfinite(unit.x) and math.isfinite(unit.y)):
            raise DegenerateEdgeError(f"Cannot normalize vector {self!r}.")
        return unit

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """2D cross product (z-component of the 3D one)."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> Vector:
        """Rotate 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A geometric point in 2D screen space."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def __getitem__(self, index: int) -> float:
        return _component(self, index)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: Point) -> float:
        return (other - self).magnitude

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def normal(a: Point, b: Point) -> Vector:
        """
        Unit normal of the segment a -> b, rotated 90 degrees counter-clockwise
        from its direction. The rotation is fixed, so the side of an offset is
        decided by the drawing order of the vertices alone.

        Raises:
            DegenerateEdgeError: if `a == b`.
        """
        return (b - a).perpendicular().normalize()


def _component(value: Union[Point, Vector], index: int) -> float:
    if index == 0:
        return value.x
    if index == 1:
        return value.y
    raise IndexError(f"2D component index out of range: {index}")


@dataclass(frozen=True)
class Line:
    """A straight segment between two points."""
    start: Point
    end: Point

    def reverse(self) -> Line:
        return Line(start=self.end, end=self.start)

    def to_vector(self) -> Vector:
        return self.end - self.start

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def normal(self) -> Vector:
        return Point.normal(self.start, self.end)

    def translate(self, vector: Vector) -> Line:
        return Line(start=self.start + vector, end=self.end + vector)

    def offset(self, distance: float) -> Line:
        """Parallel copy shifted `distance` along the normal."""
        return self.translate(self.normal() * distance)

    def point_at(self, t: float) -> Point:
        """Point on the infinite line through the segment, `t = 0` at start."""
        return self.start + self.to_vector() * t

    def discretize(self) -> npt.NDArray[np.float64]:
        return np.array([self.start.to_array(), self.end.to_array()])
