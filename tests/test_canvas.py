import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEvent, QPointF, Qt  # noqa: E402
from PySide6.QtGui import QEnterEvent, QMouseEvent  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from polyoffset.model.geometry_primitives import Point  # noqa: E402
from polyoffset.model.state import DrawingState  # noqa: E402
from polyoffset.view.canvas import DrawingCanvas, polyline_path  # noqa: E402
from polyoffset.view.main_window import MainWindow  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def test_polyline_path_is_open():
    path = polyline_path([Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)])
    assert path.elementCount() == 3
    start = path.elementAt(0)
    end = path.elementAt(2)
    assert (start.x, start.y) == (0.0, 0.0)
    assert (end.x, end.y) == (10.0, 10.0)


def test_polyline_path_empty():
    assert polyline_path([]).isEmpty()


def test_canvas_add_vertex_emits_signal(qapp):
    state = DrawingState()
    canvas = DrawingCanvas(state)
    received = []
    canvas.vertex_added.connect(received.append)

    assert canvas.add_vertex(Point(5.0, 5.0))
    assert not canvas.add_vertex(Point(5.0, 5.0))

    assert received == [Point(5.0, 5.0)]
    assert len(state.active_polyline) == 1
    canvas.stop()


def test_canvas_renders_offscreen(qapp):
    state = DrawingState(offset_distance=20.0)
    canvas = DrawingCanvas(state)
    canvas.resize(300, 200)
    for p in (Point(20.0, 20.0), Point(200.0, 40.0), Point(150.0, 150.0)):
        canvas.add_vertex(p)
    state.set_mouse_position(Point(250.0, 180.0))

    pixmap = canvas.grab()
    assert not pixmap.isNull()
    assert pixmap.width() == 300
    canvas.stop()


def test_main_window_distance_and_clear(qapp):
    state = DrawingState()
    window = MainWindow(state)

    window.sp_distance.setValue(25.0)
    assert state.offset_distance == 25.0

    window.canvas.add_vertex(Point(1.0, 1.0))
    assert window.statusBar().currentMessage() == "Vertices: 1"

    window.act_clear.trigger()
    assert state.polylines == []
    assert state.offset_distance == 25.0
    assert window.statusBar().currentMessage() == "Vertices: 0"
    window.close()


def _mouse_event(kind, x, y, button=Qt.LeftButton, buttons=Qt.NoButton):
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, Qt.NoModifier)


def _enter_event(x, y):
    pos = QPointF(x, y)
    return QEnterEvent(pos, pos, pos)


@pytest.fixture
def canvas(qapp):
    widget = DrawingCanvas(DrawingState())
    widget.resize(300, 200)
    yield widget
    widget.stop()


def test_left_release_adds_vertex(canvas):
    canvas.mouseReleaseEvent(_mouse_event(QEvent.MouseButtonRelease, 12.0, 34.0))
    assert canvas.state.active_polyline.vertices == [Point(12.0, 34.0)]


def test_right_release_adds_nothing(canvas):
    canvas.mouseReleaseEvent(_mouse_event(QEvent.MouseButtonRelease, 12.0, 34.0, button=Qt.RightButton))
    assert canvas.state.active_polyline is None


def test_release_via_event_dispatch(canvas):
    QApplication.sendEvent(canvas, _mouse_event(QEvent.MouseButtonRelease, 5.0, 6.0))
    assert canvas.state.active_polyline.vertices == [Point(5.0, 6.0)]


def test_enter_sets_pointer(canvas):
    canvas.enterEvent(_enter_event(40.0, 50.0))
    assert canvas.state.mouse_position == Point(40.0, 50.0)


def test_move_without_enter_is_ignored(canvas):
    canvas.mouseMoveEvent(_mouse_event(QEvent.MouseMove, 70.0, 80.0, button=Qt.NoButton))
    assert canvas.state.mouse_position is None


def test_move_after_enter_updates_pointer(canvas):
    canvas.enterEvent(_enter_event(40.0, 50.0))
    canvas.mouseMoveEvent(_mouse_event(QEvent.MouseMove, 70.0, 80.0, button=Qt.NoButton))
    assert canvas.state.mouse_position == Point(70.0, 80.0)


def test_leave_clears_pointer(canvas):
    canvas.enterEvent(_enter_event(40.0, 50.0))
    canvas.leaveEvent(QEvent(QEvent.Leave))
    assert canvas.state.mouse_position is None

    # Moves after leaving do not bring the pointer back
    canvas.mouseMoveEvent(_mouse_event(QEvent.MouseMove, 70.0, 80.0, button=Qt.NoButton))
    assert canvas.state.mouse_position is None


def test_pending_segment_from_input(canvas):
    canvas.mouseReleaseEvent(_mouse_event(QEvent.MouseButtonRelease, 10.0, 10.0))
    canvas.enterEvent(_enter_event(10.0, 10.0))
    canvas.mouseMoveEvent(_mouse_event(QEvent.MouseMove, 60.0, 30.0, button=Qt.NoButton))
    segment = canvas.state.pending_segment()
    assert segment.start == Point(10.0, 10.0)
    assert segment.end == Point(60.0, 30.0)
