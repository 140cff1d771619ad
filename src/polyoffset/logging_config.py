"""
Logging Configuration
Sets up the global logger for the application.

The offset core runs on every repaint, so its DEBUG messages (skipped edges,
dropped joints) repeat at the frame rate. They stay muted unless asked for
with `debug_geometry=True`.
"""
import logging
import sys
from typing import Optional

GEOMETRY_LOGGER = "polyoffset.model.geometry_utils"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    debug_geometry: bool = False
) -> None:
    """
    Configures the root logger for the 'polyoffset' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        debug_geometry: Let the per-frame geometry DEBUG messages through
            when `level` is DEBUG.
    """
    logger = logging.getLogger("polyoffset")
    logger.setLevel(level)

    # Avoid duplicate output when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    geometry_logger = logging.getLogger(GEOMETRY_LOGGER)
    if debug_geometry:
        geometry_logger.setLevel(logging.NOTSET)
    else:
        geometry_logger.setLevel(max(level, logging.INFO))

    logger.info("Logging initialized.")
