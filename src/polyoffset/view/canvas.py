"""
Drawing Canvas
==============
Widget that turns mouse input into polyline vertices and paints the polylines
together with their offset curves.

The canvas owns no geometry. Input handlers write into the shared
`DrawingState`, and a frame timer repaints from a fresh read of it.
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, Qt, QTimer, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from polyoffset import config
from polyoffset.model.geometry_primitives import Point
from polyoffset.model.state import DrawingState


def polyline_path(vertices: Sequence[Point]) -> QPainterPath:
    """Open path through the vertices: move to the first, line to the rest."""
    path = QPainterPath()
    if not vertices:
        return path
    first, *rest = vertices
    path.moveTo(first.x, first.y)
    for vertex in rest:
        path.lineTo(vertex.x, vertex.y)
    return path


def _to_point(position: QPointF) -> Point:
    return Point(x=float(position.x()), y=float(position.y()))


class DrawingCanvas(QWidget):
    """
    Canvas with click-to-draw polylines:
      - left button release adds a vertex at the pointer,
      - a red segment follows the pointer from the last vertex,
      - each polyline is shadowed by its offset polyline.
    """
    vertex_added = Signal(object)

    def __init__(self, state: DrawingState, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.state = state

        self.setMouseTracking(True)
        self.setMinimumSize(200, 150)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(config.FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.update)
        self._frame_timer.start()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def add_vertex(self, point: Point) -> bool:
        """Record a vertex and notify listeners."""
        recorded = self.state.add_vertex(point)
        if recorded:
            self.vertex_added.emit(point)
        return recorded

    def stop(self) -> None:
        """Stop the frame timer."""
        self._frame_timer.stop()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.add_vertex(_to_point(event.position()))
        super().mouseReleaseEvent(event)

    def enterEvent(self, event) -> None:
        self.state.set_mouse_position(_to_point(event.position()))
        super().enterEvent(event)

    def mouseMoveEvent(self, event) -> None:
        # Only track the pointer between enter and leave
        if self.state.mouse_position is not None:
            self.state.set_mouse_position(_to_point(event.position()))
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self.state.clear_mouse_position()
        super().leaveEvent(event)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.fillRect(self.rect(), QColor(config.BACKGROUND_COLOR))
            self._paint(painter)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _paint(self, painter: QPainter) -> None:
        state = self.state

        # Finished polylines
        for polyline in state.polylines:
            self._stroke(painter, polyline.snapshot(), config.POLYLINE_COLOR)

        # Offset polylines
        for vertices in state.offset_polylines():
            self._stroke(painter, vertices, config.OFFSET_COLOR)

        # Segment still to be drawn
        pending = state.pending_segment()
        if pending is not None:
            self._stroke(painter, [pending.start, pending.end], config.PENDING_SEGMENT_COLOR)

        # Vertices
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(QColor(*config.VERTEX_COLOR)))
        for polyline in state.polylines:
            for vertex in polyline.vertices:
                painter.drawEllipse(QPointF(vertex.x, vertex.y), config.VERTEX_RADIUS, config.VERTEX_RADIUS)

    @staticmethod
    def _stroke(painter: QPainter, vertices: Sequence[Point], color: str, width: float = 1.0) -> None:
        if len(vertices) < 2:
            return
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        painter.strokePath(polyline_path(vertices), pen)
