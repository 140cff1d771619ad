"""
Application Initialization
==========================
This module wires the drawing state into the main window and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Drawing State (Model).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
"""
import logging
import sys
from PySide6.QtWidgets import QApplication

from polyoffset import config
from polyoffset.logging_config import setup_logging
from polyoffset.model.state import DrawingState
from polyoffset.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging
    # Use logging.DEBUG to trace skipped edges and dropped joints
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)

    # 3. Initialize the Data Model
    state = DrawingState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())
