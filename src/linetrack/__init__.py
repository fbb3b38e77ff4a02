"""
linetrack - Build Line Rider tracks from Python.

This package provides:
- Geometry value types for points and track lines
- Shape generators for polygons, thick polygons and function graphs
- Layers and riders with configurable starting state
- A Game aggregate that assigns identifiers and owns the scene
- Serialization to and from the game's JSON track format
"""

__version__ = "0.1.0"

from linetrack.errors import (
    DanglingReferenceError,
    DuplicateNameError,
    InvalidParameterError,
    LineTrackError,
    NotFoundError,
    ParameterMismatchError,
    SerializationError,
)
from linetrack.geometry import Line, LineType, Point
from linetrack.shapes import ThicknessMode, function_lines, polygon_lines, thick_polygon_lines
from linetrack.scene import (
    EvenlySpaced,
    Explicit,
    Fixed,
    Game,
    GameConfig,
    Layer,
    LayerOptions,
    Range,
    Rider,
    create_riders,
)
from linetrack.export import deserialize, load_from_file, serialize, write_to_file

__all__ = [
    "Game",
    "GameConfig",
    "Point",
    "Line",
    "LineType",
    "Layer",
    "LayerOptions",
    "Rider",
    "create_riders",
    "Fixed",
    "Range",
    "Explicit",
    "EvenlySpaced",
    "ThicknessMode",
    "polygon_lines",
    "thick_polygon_lines",
    "function_lines",
    "serialize",
    "deserialize",
    "write_to_file",
    "load_from_file",
    "LineTrackError",
    "InvalidParameterError",
    "DuplicateNameError",
    "ParameterMismatchError",
    "DanglingReferenceError",
    "NotFoundError",
    "SerializationError",
    "__version__",
]
