"""
Main Application Window
=======================
The primary GUI container that holds the Toolbar, the Canvas and the Status Bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (Clear, offset distance) to the
   drawing state.
"""
from PySide6.QtWidgets import QMainWindow, QToolBar, QDoubleSpinBox, QLabel
from PySide6.QtGui import QAction

from polyoffset import config
from polyoffset.model.geometry_primitives import Point
from polyoffset.model.state import DrawingState
from polyoffset.view.canvas import DrawingCanvas


class MainWindow(QMainWindow):
    def __init__(self, state: DrawingState) -> None:
        super().__init__()
        self.state: DrawingState = state

        self.setWindowTitle(config.APP_NAME)
        self.resize(1000, 700)

        # --- CENTRAL CANVAS ---
        self.canvas = DrawingCanvas(self.state)
        self.setCentralWidget(self.canvas)

        # --- TOOLBAR ---
        toolbar = QToolBar("Tools")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.act_clear = QAction("Clear", self)
        self.act_clear.setShortcut("Ctrl+N")
        self.act_clear.triggered.connect(self.on_clear)
        toolbar.addAction(self.act_clear)

        toolbar.addSeparator()
        toolbar.addWidget(QLabel("Offset: "))
        self.sp_distance = QDoubleSpinBox()
        self.sp_distance.setRange(config.MIN_OFFSET_DISTANCE, config.MAX_OFFSET_DISTANCE)
        self.sp_distance.setDecimals(1)
        self.sp_distance.setSingleStep(5.0)
        self.sp_distance.setSuffix(" px")
        self.sp_distance.setValue(self.state.offset_distance)
        self.sp_distance.valueChanged.connect(self.on_distance_changed)
        toolbar.addWidget(self.sp_distance)

        # --- SIGNAL CONNECTIONS ---
        self.canvas.vertex_added.connect(self.on_vertex_added)

        self.update_status()

    def on_clear(self) -> None:
        distance = self.state.offset_distance
        self.state.reset()
        # Keep the user's distance across a clear
        self.state.set_offset_distance(distance)
        self.update_status()

    def on_distance_changed(self, value: float) -> None:
        self.state.set_offset_distance(value)

    def on_vertex_added(self, point: Point) -> None:
        self.update_status()

    def update_status(self) -> None:
        polyline = self.state.active_polyline
        count = len(polyline) if polyline is not None else 0
        self.statusBar().showMessage(f"Vertices: {count}")

    def closeEvent(self, event) -> None:
        self.canvas.stop()
        super().closeEvent(event)
