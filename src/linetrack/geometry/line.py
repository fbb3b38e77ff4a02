"""
Line - A single track line with its physical attributes.

Defines:
- Line types (standard, acceleration, scenery) with their wire values
- Line endpoints, flip and extension flags
- Bounding utilities over line collections
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple
import numpy as np

from linetrack.errors import InvalidParameterError
from linetrack.geometry.point import Point


class LineType(Enum):
    """Line kinds, valued as the game encodes them."""
    STANDARD = 0       # Blue, solid
    ACCELERATION = 1   # Red, solid and speeds riders up
    SCENERY = 2        # Green, drawn only


@dataclass(frozen=True)
class Line:
    """A line stretching from (x1, y1) to (x2, y2).
    
    The game requires a unique id for every line. Lines are built
    without one and a Game stamps the id when the line is added.
    A line with no layer belongs to the base layer.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    line_type: LineType = LineType.STANDARD
    
    # Which side is solid
    flipped: bool = False
    left_extended: bool = False
    right_extended: bool = False
    
    # Acceleration strength (acceleration lines) and stroke width (scenery)
    multiplier: Optional[float] = None
    width: Optional[float] = None
    
    line_id: Optional[int] = None
    layer_id: Optional[int] = None
    
    def __post_init__(self):
        for name in ("x1", "y1", "x2", "y2"):
            object.__setattr__(self, name, float(getattr(self, name)))
        
        if not isinstance(self.line_type, LineType):
            raise InvalidParameterError(f"Unknown line type: {self.line_type!r}")
        if self.x1 == self.x2 and self.y1 == self.y2:
            raise InvalidParameterError(
                f"Zero-length line at ({self.x1}, {self.y1})"
            )
        if self.multiplier is not None and self.multiplier < 0:
            raise InvalidParameterError(f"Negative multiplier: {self.multiplier}")
        if self.width is not None and self.width <= 0:
            raise InvalidParameterError(f"Non-positive width: {self.width}")
    
    @classmethod
    def between(cls, start: Point, end: Point, **kwargs) -> "Line":
        """Create a line between two points.
        
        Args:
            start: First endpoint
            end: Second endpoint
            **kwargs: Any other Line field
        
        Returns:
            New line
        """
        return cls(start.x, start.y, end.x, end.y, **kwargs)
    
    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)
    
    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)
    
    @property
    def length(self) -> float:
        """Euclidean length of the line."""
        return self.start.distance_to(self.end)
    
    @property
    def midpoint(self) -> Point:
        return self.start.midpoint(self.end)
    
    @property
    def angle(self) -> float:
        """Direction from start to end in radians."""
        return float(np.arctan2(self.y2 - self.y1, self.x2 - self.x1))
    
    def bounds(self) -> Tuple[Point, Point]:
        """Get (min corner, max corner) of the line."""
        return (
            Point(min(self.x1, self.x2), min(self.y1, self.y2)),
            Point(max(self.x1, self.x2), max(self.y1, self.y2)),
        )
    
    def reversed(self) -> "Line":
        """Same line traversed end to start."""
        return replace(self, x1=self.x2, y1=self.y2, x2=self.x1, y2=self.y1)
    
    def with_id(self, line_id: Optional[int]) -> "Line":
        return replace(self, line_id=line_id)
    
    def on_layer(self, layer_id: Optional[int]) -> "Line":
        return replace(self, layer_id=layer_id)


def bounding_box(lines: Iterable[Line]) -> Tuple[Point, Point]:
    """Get the bounding box covering all lines.
    
    Args:
        lines: Lines to cover
    
    Returns:
        Tuple of (min corner, max corner)
    """
    coords = np.array([(l.x1, l.y1, l.x2, l.y2) for l in lines], dtype=float)
    if coords.size == 0:
        raise InvalidParameterError("Cannot bound an empty set of lines")
    
    xs = coords[:, [0, 2]]
    ys = coords[:, [1, 3]]
    return (
        Point(xs.min(), ys.min()),
        Point(xs.max(), ys.max()),
    )
