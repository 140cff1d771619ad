from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from polyoffset.model.geometry_primitives import DegenerateEdgeError, Point, Vector, Line

logger = logging.getLogger(__name__)

# Machine epsilon of a 64-bit float, threshold for a vanishing determinant.
PARALLEL_EPS: float = float(np.finfo(np.float64).eps)


def normal(a: Point, b: Point) -> Vector:
    """Unit vector perpendicular to a -> b, rotated counter-clockwise."""
    return Point.normal(a, b)


def polyline_edges(vertices: Sequence[Point]) -> list[Line]:
    """Consecutive vertex pairs of a polyline, in drawing order."""
    return [Line(start=a, end=b) for a, b in zip(vertices[:-1], vertices[1:])]


def offset_edges(vertices: Iterable[Point], distance: float) -> list[Line]:
    """
    Shift every edge of a polyline sideways by `distance`.

    Each edge (v_i, v_i+1) is translated by normal(v_i, v_i+1) * distance on both
    endpoints. A polyline with n vertices yields n - 1 offset edges, or none when
    n < 2.

    Degenerate edges (two equal consecutive vertices, or an edge too short or
    too long for its direction to be represented) have no normal. They are
    skipped, so the result may hold fewer than n - 1 edges.

    Args:
        vertices: The source polyline. Copied on entry.
        distance: Offset distance. Positive values offset to the left of the
            drawing direction in a y-up frame (right of it on a y-down screen).

    Returns:
        The offset edges, in source order.
    """
    assert math.isfinite(distance), f"Offset distance must be finite, got {distance!r}"
    snapshot = tuple(vertices)

    edges: list[Line] = []
    for index, edge in enumerate(polyline_edges(snapshot)):
        assert edge.start.is_finite() and edge.end.is_finite(), f"Non-finite vertex in edge {index}"
        try:
            edges.append(edge.offset(distance))
        except DegenerateEdgeError:
            logger.debug("Skipping degenerate edge %d at (%g, %g).", index, edge.start.x, edge.start.y)
    return edges


def line_line_intersection(
    first: Line,
    second: Line,
    *,
    eps: float = PARALLEL_EPS
) -> Optional[Point]:
    """
    Intersect the infinite lines through two segments.

    Solves p0 + t * (p1 - p0) = q0 + s * (q1 - q0) for t with Cramer's rule.
    No clamping is applied, so the result may lie outside both segments.

    Args:
        first: Segment (p0, p1).
        second: Segment (q0, q1).
        eps: Determinant magnitude below which the lines count as parallel.

    Returns:
        The intersection point, or None if the lines are parallel.

    Notes:
        - d = (q1.x - q0.x) * (p1.y - p0.y) - (p1.x - p0.x) * (q1.y - q0.y)
        - t = ((p0.x - q0.x) * (q1.y - q0.y) - (q1.x - q0.x) * (p0.y - q0.y)) / d
    """
    p0, p1 = first.start, first.end
    q0, q1 = second.start, second.end

    d = (q1.x - q0.x) * (p1.y - p0.y) - (p1.x - p0.x) * (q1.y - q0.y)
    if abs(d) < eps:
        return None

    t = ((p0.x - q0.x) * (q1.y - q0.y) - (q1.x - q0.x) * (p0.y - q0.y)) / d
    return first.point_at(t)


def offset_joints(edges: Sequence[Line]) -> list[Point]:
    """
    Miter joints between consecutive offset edges.

    Parallel neighbours produce no joint: they come from collinear source edges,
    whose offsets already share the endpoint at the common vertex.
    """
    joints: list[Point] = []
    for index, (first, second) in enumerate(zip(edges[:-1], edges[1:])):
        joint = line_line_intersection(first, second)
        if joint is None:
            logger.debug("Edges %d and %d are parallel, no joint emitted.", index, index + 1)
            continue
        if not joint.is_finite():
            logger.debug("Joint of edges %d and %d is out of range, dropped.", index, index + 1)
            continue
        joints.append(joint)
    return joints


def assemble_offset_polyline(edges: Sequence[Line]) -> list[Point]:
    """Join offset edges into one vertex sequence, capped by the outer endpoints."""
    if not edges:
        return []
    return [edges[0].start, *offset_joints(edges), edges[-1].end]


def offset_polyline(vertices: Iterable[Point], distance: float) -> list[Point]:
    """
    Build the offset polyline of `vertices` at `distance`.

    Pure function of its arguments: nothing is cached between calls and the
    caller's sequence is only read once. Fewer than two vertices give an empty
    result.
    """
    return assemble_offset_polyline(offset_edges(vertices, distance))


# -------------------------------------------------------------------------------
# numpy interop
# -------------------------------------------------------------------------------

def points_from_array(coords: npt.ArrayLike) -> list[Point]:
    """Convert an (N, 2) array of x, y rows into points."""
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array, got shape {arr.shape}.")
    return [Point(x=float(x), y=float(y)) for x, y in arr]


def points_to_array(points: Sequence[Point]) -> npt.NDArray[np.float64]:
    """Convert points into an (N, 2) float64 array."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def offset_polyline_array(coords: npt.ArrayLike, distance: float) -> npt.NDArray[np.float64]:
    """
    Array flavour of `offset_polyline`.

    Args:
        coords: (N, 2) polyline vertices.
        distance: Offset distance.

    Returns:
        An (M, 2) array of offset vertices, M == N unless joints were dropped.
    """
    return points_to_array(offset_polyline(points_from_array(coords), distance))
