"""
The VIEW layer: Qt widgets that read the drawing state and paint it.
"""
