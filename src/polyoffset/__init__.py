"""Interactive polyline drawing with a live offset curve."""

__version__ = "0.1.0"
