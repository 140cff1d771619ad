"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
drawing state and the canvas.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (offset distance, colors, frame rate)
   from being scattered throughout the code.
2. Tuning: Defaults for the GUI shell live in one place.

Exports:
    DEFAULT_OFFSET_DISTANCE (float): Offset distance used on startup.
    FRAME_INTERVAL_MS (int): Redraw period of the canvas.
"""

APP_NAME: str = "Polyline Offset"

# Offset distance (screen pixels)
DEFAULT_OFFSET_DISTANCE: float = 50.0
MIN_OFFSET_DISTANCE: float = -500.0
MAX_OFFSET_DISTANCE: float = 500.0

# Canvas redraw period, roughly one animation frame at 60 Hz
FRAME_INTERVAL_MS: int = 16

# Drawing style
VERTEX_RADIUS: float = 5.0
POLYLINE_COLOR: str = "#000000"
PENDING_SEGMENT_COLOR: str = "#ff0000"
OFFSET_COLOR: str = "#2a7ab0"
VERTEX_COLOR: tuple[int, int, int] = (100, 100, 200)
BACKGROUND_COLOR: str = "#ffffff"
