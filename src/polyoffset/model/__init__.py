"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt).
"""
from polyoffset.model.geometry_primitives import DegenerateEdgeError, Line, Point, Vector
from polyoffset.model.geometry_utils import (
    assemble_offset_polyline,
    line_line_intersection,
    normal,
    offset_edges,
    offset_polyline,
    offset_polyline_array,
)
from polyoffset.model.state import DrawingState, Polyline

__all__ = [
    "DegenerateEdgeError",
    "DrawingState",
    "Line",
    "Point",
    "Polyline",
    "Vector",
    "assemble_offset_polyline",
    "line_line_intersection",
    "normal",
    "offset_edges",
    "offset_polyline",
    "offset_polyline_array",
]
