"""
Drawing State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the drawn polylines, the pointer position and the
   offset distance in one place.
2. Single Writer: Only the canvas input handlers write to this object; the
   redraw reads it once per frame on the same (Qt event) thread.
3. Decoupling: The canvas reads from this object and never computes geometry
   itself.

Classes:
    Polyline: Ordered vertex sequence of one drawn line.
    DrawingState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from polyoffset import config
from polyoffset.model.geometry_primitives import Point, Line
from polyoffset.model.geometry_utils import offset_polyline, points_to_array, polyline_edges

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class Polyline:
    """Vertices in drawing order."""
    vertices: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)

    def append(self, point: Point) -> bool:
        """
        Record a vertex. A point equal to the last vertex is ignored, so the
        polyline never holds a zero-length edge.

        Returns:
            True if the vertex was recorded.
        """
        if self.vertices and self.vertices[-1] == point:
            return False
        self.vertices.append(point)
        return True

    @property
    def last(self) -> Optional[Point]:
        return self.vertices[-1] if self.vertices else None

    def snapshot(self) -> tuple[Point, ...]:
        return tuple(self.vertices)

    def edges(self) -> list[Line]:
        return polyline_edges(self.vertices)

    def to_array(self) -> npt.NDArray[np.float64]:
        return points_to_array(self.vertices)


@dataclass
class DrawingState:
    """
    Singleton-like class that holds the entire state of the drawing.
    Pass this instance to the canvas and the main window.
    """
    polylines: list[Polyline] = field(default_factory=list)
    mouse_position: Optional[Point] = None
    offset_distance: float = config.DEFAULT_OFFSET_DISTANCE

    @property
    def active_polyline(self) -> Optional[Polyline]:
        """The polyline that receives new vertices (always the first one)."""
        return self.polylines[0] if self.polylines else None

    def add_vertex(self, point: Point) -> bool:
        """Append a vertex to the active polyline, creating it on first use."""
        if not self.polylines:
            self.polylines.append(Polyline())
        recorded = self.polylines[0].append(point)
        if recorded:
            logger.debug("Vertex %d recorded at (%g, %g).", len(self.polylines[0]) - 1, point.x, point.y)
        return recorded

    def set_mouse_position(self, point: Point) -> None:
        self.mouse_position = point

    def clear_mouse_position(self) -> None:
        self.mouse_position = None

    def pending_segment(self) -> Optional[Line]:
        """Segment from the last recorded vertex to the pointer, if both exist."""
        polyline = self.active_polyline
        if polyline is None or polyline.last is None or self.mouse_position is None:
            return None
        return Line(start=polyline.last, end=self.mouse_position)

    def set_offset_distance(self, value: float) -> float:
        """
        Clamp and store the offset distance. Returns the stored value.

        Non-finite values are ignored and the current distance is kept.
        """
        value = float(value)
        if not math.isfinite(value):
            logger.warning("Ignoring non-finite offset distance %r.", value)
            return self.offset_distance
        clamped = min(max(value, config.MIN_OFFSET_DISTANCE), config.MAX_OFFSET_DISTANCE)
        if clamped != value:
            logger.warning("Offset distance %g clamped to %g.", value, clamped)
        self.offset_distance = clamped
        return clamped

    def offset_polylines(self) -> list[list[Point]]:
        """Offset polyline of every drawn polyline, recomputed from scratch."""
        return [offset_polyline(p.snapshot(), self.offset_distance) for p in self.polylines]

    def reset(self) -> None:
        """Clear all data for a new drawing"""
        self.polylines = []
        self.mouse_position = None
        self.offset_distance = config.DEFAULT_OFFSET_DISTANCE
        logger.info("Drawing state has been reset.")
