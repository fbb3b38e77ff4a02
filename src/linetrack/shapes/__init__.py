"""
Shapes module - Generators that synthesize lines into shapes.

This module contains:
- polygon_lines: Regular polygons, single or thick
- thick_polygon_lines: Polygons drawn as two parallel rings
- function_lines: Graphs of y = f(x)
"""

from linetrack.shapes.polygon import (
    ThicknessMode,
    polygon_lines,
    polygon_vertices,
    thick_polygon_lines,
)
from linetrack.shapes.function import function_lines

__all__ = [
    "ThicknessMode",
    "polygon_lines",
    "polygon_vertices",
    "thick_polygon_lines",
    "function_lines",
]
