"""
Point - 2D coordinates used for line endpoints, rider positions and velocities.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class Point:
    """A 2D point or vector in game coordinates.
    
    Values are plain floats. NaN and infinity are not trapped here;
    the serializer rejects them when a track is written.
    """
    x: float = 0.0
    y: float = 0.0
    
    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
    
    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)
    
    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)
    
    __rmul__ = __mul__
    
    def length(self) -> float:
        """Euclidean norm of the vector."""
        return float(np.hypot(self.x, self.y))
    
    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return (other - self).length()
    
    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)
    
    def rotate(self, angle: float, pivot: "Point | None" = None) -> "Point":
        """Rotate counter-clockwise about a pivot.
        
        Args:
            angle: Rotation in radians
            pivot: Center of rotation, origin if None
        
        Returns:
            Rotated point
        """
        pivot = pivot or ORIGIN
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        cos_a = np.cos(angle)
        sin_a = np.sin(angle)
        return Point(
            pivot.x + dx * cos_a - dy * sin_a,
            pivot.y + dx * sin_a + dy * cos_a,
        )
    
    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
    
    def to_dict(self) -> dict:
        """Wire representation: {"x": ..., "y": ...}."""
        return {"x": self.x, "y": self.y}
    
    @classmethod
    def from_dict(cls, data: dict) -> "Point":
        return cls(data["x"], data["y"])
    
    @classmethod
    def polar(cls, radius: float, angle: float, center: "Point | None" = None) -> "Point":
        """Point at a given radius and angle around a center."""
        center = center or ORIGIN
        return cls(
            center.x + radius * np.cos(angle),
            center.y + radius * np.sin(angle),
        )


ORIGIN = Point(0.0, 0.0)
