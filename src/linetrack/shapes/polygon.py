"""
Polygon generator - Regular polygons approximated by closed line chains.

Generates:
- Single polygons (one ring of lines)
- Thick polygons (an inner and an outer ring separated by a gap)

As the side count grows, the polygon approximates a circle.
"""

from enum import Enum
from typing import List
import numpy as np

from linetrack.errors import InvalidParameterError
from linetrack.geometry.line import Line, LineType
from linetrack.geometry.point import Point, ORIGIN


MIN_SIDES = 3


class ThicknessMode(Enum):
    """How polygon edges are drawn."""
    SINGLE = "single"  # One line per edge
    THICK = "thick"    # Inner and outer line per edge


def polygon_vertices(
    sides: int,
    radius: float,
    center: Point | None = None,
    rotation: float = 0.0,
) -> List[Point]:
    """Get polygon vertices in counter-clockwise order.
    
    The first vertex sits half a step counter-clockwise from the
    rotation angle, so an unrotated polygon has a flat edge
    crossing the +X axis.
    
    Args:
        sides: Number of sides (>= 3)
        radius: Circumradius (> 0)
        center: Polygon center, origin if None
        rotation: Starting rotation in radians
    
    Returns:
        List of vertices
    """
    sides = _check_polygon(sides, radius)
    center = center or ORIGIN
    
    step = 2 * np.pi / sides
    angles = rotation + step / 2 + step * np.arange(sides)
    
    return [Point.polar(radius, angle, center) for angle in angles]


def polygon_lines(
    sides: int,
    radius: float,
    center: Point | None = None,
    rotation: float = 0.0,
    line_type: LineType = LineType.STANDARD,
    thickness: ThicknessMode = ThicknessMode.SINGLE,
    gap: float = 0.0,
    flipped: bool = True,
    extended: bool = True,
) -> List[Line]:
    """Create the lines of a regular polygon.
    
    Lines run counter-clockwise and the last line ends exactly where
    the first one starts. In THICK mode the first `sides` lines are the
    inner ring and the next `sides` lines the outer ring; line i of one
    ring is parallel to line i of the other, `gap` apart.
    
    Args:
        sides: Number of sides (>= 3)
        radius: Circumradius of the (inner) ring (> 0)
        center: Polygon center, origin if None
        rotation: Starting rotation in radians
        line_type: Type of every generated line
        thickness: Single ring or thick wall
        gap: Distance between the paired edges of a thick wall
        flipped: Flip flag of every generated line
        extended: Left/right extension flags of every generated line
    
    Returns:
        List of `sides` or `2 * sides` lines
    """
    sides = _check_polygon(sides, radius)
    if not isinstance(thickness, ThicknessMode):
        raise InvalidParameterError(f"Unknown thickness mode: {thickness!r}")
    
    radii = [radius]
    if thickness is ThicknessMode.THICK:
        if not gap > 0 or not np.isfinite(gap):
            raise InvalidParameterError(f"Thick polygon gap must be positive, got {gap}")
        # Offset the circumradius so the edges (not the vertices) are `gap` apart
        radii.append(radius + gap / np.cos(np.pi / sides))
    
    lines = []
    for ring_radius in radii:
        vertices = polygon_vertices(sides, ring_radius, center, rotation)
        for i, start in enumerate(vertices):
            end = vertices[(i + 1) % sides]
            lines.append(Line.between(
                start,
                end,
                line_type=line_type,
                flipped=flipped,
                left_extended=extended,
                right_extended=extended,
            ))
    
    return lines


def thick_polygon_lines(
    sides: int,
    radius: float,
    gap: float,
    center: Point | None = None,
    rotation: float = 0.0,
    line_type: LineType = LineType.STANDARD,
    flipped: bool = True,
    extended: bool = True,
) -> List[Line]:
    """Create a polygon drawn as two parallel rings (see `polygon_lines`)."""
    return polygon_lines(
        sides,
        radius,
        center=center,
        rotation=rotation,
        line_type=line_type,
        thickness=ThicknessMode.THICK,
        gap=gap,
        flipped=flipped,
        extended=extended,
    )


def _check_polygon(sides: int, radius: float) -> int:
    """Validate polygon parameters and return the side count as an int."""
    try:
        whole = int(sides)
    except (TypeError, ValueError, OverflowError):
        whole = None
    if whole is None or whole != sides or whole < MIN_SIDES:
        raise InvalidParameterError(
            f"A polygon needs an integer side count >= {MIN_SIDES}, got {sides}"
        )
    if not np.isfinite(radius) or radius <= 0:
        raise InvalidParameterError(f"Polygon radius must be positive, got {radius}")
    return whole
