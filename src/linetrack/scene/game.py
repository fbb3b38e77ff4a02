"""
Game - The complete track: lines, layers, riders and metadata.

Contains:
- Track metadata (label, creator, duration, format version)
- Ordered collections of lines, layers and riders
- Identifier assignment scoped to each game
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, Dict, Iterable, List, Optional, Set, Tuple
import logging

from linetrack.errors import (
    DanglingReferenceError,
    DuplicateNameError,
    InvalidParameterError,
    NotFoundError,
)
from linetrack.geometry.line import Line, bounding_box
from linetrack.geometry.point import Point
from linetrack.scene.layer import BASE_LAYER_ID, Layer, LayerOptions
from linetrack.scene.rider import Rider

logger = logging.getLogger(__name__)


FORMAT_VERSION = "6.2"


@dataclass
class GameConfig:
    """Track metadata written to the file header."""
    label: str = "Track created by linetrack"
    creator: str = "linetrack"
    description: str = ""
    duration: int = 120               # Playback length in frames
    version: str = FORMAT_VERSION     # Only version the writer is tested against
    audio: Optional[str] = None
    start_position: Point = field(default_factory=Point)
    
    def __post_init__(self):
        """Validate configuration."""
        if self.duration < 0:
            raise InvalidParameterError(f"Duration must be >= 0, got {self.duration}")


class Game:
    """A Line Rider game under construction.
    
    The game owns every line, layer and rider, and hands out their
    identifiers. Identifiers only ever increase and are never reused,
    even after a removal. Every operation either fully succeeds or
    leaves the game untouched.
    
    Usage:
        game = Game()
        game.add_lines(polygon_lines(8, 50.0))
        game.add_riders(create_riders(2))
        game.write_to_file("track.json")
    """
    
    def __init__(self, config: GameConfig | None = None, base_layer: bool = True):
        """Initialize an empty game.
        
        Args:
            config: Track metadata. Uses defaults if None.
            base_layer: Create the default base layer
        """
        self.config = config or GameConfig()
        
        self._lines: List[Line] = []
        self._layers: List[Layer] = []
        self._riders: List[Rider] = []
        
        # Lookup indices
        self._line_index: Dict[int, Line] = {}
        self._layer_index: Dict[int, Layer] = {}
        self._rider_index: Dict[int, Rider] = {}
        self._retired_line_ids: Set[int] = set()  # Removed, never reused
        
        # Next identifier per category
        self._next_line_id: int = 1
        self._next_layer_id: int = BASE_LAYER_ID
        self._next_rider_id: int = 1
        
        if base_layer:
            self._append_layer(Layer.base())
    
    @property
    def lines(self) -> Tuple[Line, ...]:
        """Lines in insertion order."""
        return tuple(self._lines)
    
    @property
    def layers(self) -> Tuple[Layer, ...]:
        """Layers in z-order."""
        return tuple(self._layers)
    
    @property
    def riders(self) -> Tuple[Rider, ...]:
        """Riders in insertion order."""
        return tuple(self._riders)
    
    @property
    def num_lines(self) -> int:
        return len(self._lines)
    
    @property
    def num_layers(self) -> int:
        return len(self._layers)
    
    @property
    def num_riders(self) -> int:
        return len(self._riders)
    
    @property
    def default_layer_id(self) -> int:
        """Layer that lines without a layer belong to."""
        return BASE_LAYER_ID
    
    def add_line(self, line: Line) -> int:
        """Add a single line to the game.
        
        Args:
            line: Line to add
        
        Returns:
            Id of the stored line
        """
        return self.add_lines([line])[0]
    
    def add_lines(self, lines: Iterable[Line]) -> List[int]:
        """Add several lines to the game.
        
        Lines without an id get the next free one. The whole batch is
        checked before anything is stored.
        
        Args:
            lines: Lines to add
        
        Returns:
            Ids of the stored lines, in order
        """
        lines = list(lines)
        
        for line in lines:
            layer_id = self.resolve_layer_id(line)
            if layer_id not in self._layer_index:
                raise DanglingReferenceError(
                    f"Line references missing layer {layer_id}"
                )
        
        stamped, self._next_line_id = _stamp_ids(
            lines,
            [line.line_id for line in lines],
            self._next_line_id,
            self._line_index.keys() | self._retired_line_ids,
            "Line",
        )
        for line in stamped:
            self._lines.append(line)
            self._line_index[line.line_id] = line
        
        logger.debug(f"Added {len(stamped)} lines ({self.num_lines} total)")
        return [line.line_id for line in stamped]
    
    def remove_line(self, line_id: int) -> Line:
        """Remove a line without renumbering the others.
        
        Args:
            line_id: Id of the line to remove
        
        Returns:
            The removed line
        """
        line = self.get_line(line_id)
        self._lines.remove(line)
        del self._line_index[line_id]
        self._retired_line_ids.add(line_id)
        
        logger.debug(f"Removed line {line_id}")
        return line
    
    def add_layer(self, name: str, options: LayerOptions | None = None) -> Layer:
        """Create a layer on top of the existing ones.
        
        Args:
            name: Unique layer name
            options: Visibility and edit flags. Uses defaults if None.
        
        Returns:
            The new layer
        """
        options = options or LayerOptions()
        
        if any(layer.name == name for layer in self._layers):
            raise DuplicateNameError(f"Layer '{name}' already exists")
        
        layer = Layer(
            layer_id=self._next_layer_id,
            name=name,
            visible=options.visible,
            editable=options.editable,
        )
        layer = self._append_layer(layer)
        
        logger.debug(f"Added layer {layer.layer_id} '{name}'")
        return layer
    
    def restore_layer(self, layer: Layer) -> Layer:
        """Add a layer that already carries its id, as read from a file.
        
        Args:
            layer: Layer with a free id and a unique name
        
        Returns:
            The stored layer
        """
        if any(existing.name == layer.name for existing in self._layers):
            raise DuplicateNameError(f"Layer '{layer.name}' already exists")
        
        return self._append_layer(layer)
    
    def _append_layer(self, layer: Layer) -> Layer:
        if layer.layer_id in self._layer_index:
            raise InvalidParameterError(f"Layer id {layer.layer_id} is already in use")
        
        layer = layer.with_order(len(self._layers))
        self._layers.append(layer)
        self._layer_index[layer.layer_id] = layer
        self._next_layer_id = max(self._next_layer_id, layer.layer_id + 1)
        return layer
    
    def add_rider(self, rider: Rider) -> int:
        """Add a single rider to the game.
        
        Args:
            rider: Rider to add
        
        Returns:
            Id of the stored rider
        """
        return self.add_riders([rider])[0]
    
    def add_riders(self, riders: Iterable[Rider]) -> List[int]:
        """Add several riders to the game.
        
        Args:
            riders: Riders to add
        
        Returns:
            Ids of the stored riders, in order
        """
        riders = list(riders)
        
        stamped, self._next_rider_id = _stamp_ids(
            riders,
            [rider.rider_id for rider in riders],
            self._next_rider_id,
            self._rider_index,
            "Rider",
        )
        for rider in stamped:
            self._riders.append(rider)
            self._rider_index[rider.rider_id] = rider
        
        logger.debug(f"Added {len(stamped)} riders ({self.num_riders} total)")
        return [rider.rider_id for rider in stamped]
    
    def get_line(self, line_id: int) -> Line:
        try:
            return self._line_index[line_id]
        except KeyError:
            raise NotFoundError(f"No line with id {line_id}") from None
    
    def get_layer(self, layer_id: int) -> Layer:
        try:
            return self._layer_index[layer_id]
        except KeyError:
            raise NotFoundError(f"No layer with id {layer_id}") from None
    
    def get_layer_by_name(self, name: str) -> Layer:
        for layer in self._layers:
            if layer.name == name:
                return layer
        raise NotFoundError(f"No layer named '{name}'")
    
    def get_rider(self, rider_id: int) -> Rider:
        try:
            return self._rider_index[rider_id]
        except KeyError:
            raise NotFoundError(f"No rider with id {rider_id}") from None
    
    def resolve_layer_id(self, line: Line) -> int:
        """Get the layer a line belongs to, base layer if unset."""
        return self.default_layer_id if line.layer_id is None else line.layer_id
    
    def lines_in_layer(self, layer_id: int) -> List[Line]:
        """Get the lines that belong to a layer.
        
        Args:
            layer_id: Layer id
        
        Returns:
            Lines of the layer in insertion order
        """
        self.get_layer(layer_id)
        return [line for line in self._lines if self.resolve_layer_id(line) == layer_id]
    
    def bounds(self) -> Tuple[Point, Point]:
        """Bounding box of all lines."""
        return bounding_box(self._lines)
    
    def construct_game(self, indent: int | None = None) -> str:
        """Construct the JSON representation that the game can import."""
        from linetrack.export.serializer import serialize
        return serialize(self, indent=indent)
    
    def write_to_file(self, path: str | Path) -> Path:
        """Write the JSON representation to a file."""
        from linetrack.export.serializer import write_to_file
        return write_to_file(self, path)
    
    def get_state(self) -> dict:
        """Get a summary of the game.
        
        Returns:
            Dictionary with metadata and counts
        """
        state = {
            "label": self.config.label,
            "version": self.config.version,
            "num_lines": self.num_lines,
            "num_layers": self.num_layers,
            "num_riders": self.num_riders,
        }
        if self._lines:
            low, high = self.bounds()
            state["bounds"] = (low.as_tuple(), high.as_tuple())
        return state


def _stamp_ids(
    items: list,
    ids: List[Optional[int]],
    next_id: int,
    used: Collection[int],
    kind: str,
):
    """Assign ids to a batch without touching the game.
    
    Items without an id get the next free one; explicit ids are kept
    and move the counter past them.
    
    Returns:
        Tuple of (id-stamped items, next free id)
    """
    seen = set()
    stamped = []
    for item, item_id in zip(items, ids):
        if item_id is None:
            item_id = next_id
        elif item_id < 1 or item_id in used or item_id in seen:
            raise InvalidParameterError(f"{kind} id {item_id} is already in use or invalid")
        next_id = max(next_id, item_id + 1)
        seen.add(item_id)
        stamped.append(item.with_id(item_id))
    return stamped, next_id
