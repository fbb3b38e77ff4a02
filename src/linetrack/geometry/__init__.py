"""
Geometry module - Value types for track geometry.

This module contains:
- Point: 2D coordinates and vector operations
- Line: A track line with type, flip flags and optional layer
- LineType: Standard, acceleration and scenery lines
"""

from linetrack.geometry.point import Point, ORIGIN
from linetrack.geometry.line import Line, LineType, bounding_box

__all__ = [
    "Point",
    "ORIGIN",
    "Line",
    "LineType",
    "bounding_box",
]
