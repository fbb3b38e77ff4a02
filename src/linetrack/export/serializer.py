"""
Track serializer - Convert games to and from the game's JSON track format.

Provides:
- Document construction with the exact field names the game loader expects
- Deterministic JSON encoding
- Reading documents back into games
- File helpers
"""

from pathlib import Path
from typing import Any, Dict
import json
import logging
import math

import numpy as np

from linetrack.errors import LineTrackError, SerializationError
from linetrack.geometry.line import Line, LineType
from linetrack.geometry.point import Point
from linetrack.scene.game import Game, GameConfig
from linetrack.scene.layer import BASE_LAYER_ID, Layer
from linetrack.scene.rider import Rider

logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""
    
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def line_to_dict(line: Line, layer_id: int) -> Dict[str, Any]:
    """Wire representation of a line.
    
    Args:
        line: Line with an id
        layer_id: Resolved layer of the line
    
    Returns:
        Dictionary in the game's field order
    """
    data = {
        "id": line.line_id,
        "type": line.line_type.value,
        "x1": line.x1,
        "y1": line.y1,
        "x2": line.x2,
        "y2": line.y2,
        "flipped": line.flipped,
        "leftExtended": line.left_extended,
        "rightExtended": line.right_extended,
        "layer": layer_id,
    }
    
    if line.line_type is LineType.ACCELERATION and line.multiplier is not None:
        data["multiplier"] = line.multiplier
    elif line.line_type is LineType.SCENERY and line.width is not None:
        data["width"] = line.width
    
    return data


def to_document(game: Game) -> Dict[str, Any]:
    """Build the track document for a game.
    
    Entries follow insertion order; the layer list order is the z-order.
    
    Args:
        game: Game to convert
    
    Returns:
        Document ready for JSON encoding
    """
    config = game.config
    
    return {
        "label": config.label,
        "creator": config.creator,
        "description": config.description,
        "duration": config.duration,
        "version": config.version,
        "audio": config.audio,
        "startPosition": config.start_position.to_dict(),
        "riders": [rider.get_state() for rider in game.riders],
        "layers": [layer.get_state() for layer in game.layers],
        "lines": [
            line_to_dict(line, game.resolve_layer_id(line))
            for line in game.lines
        ],
    }


def serialize(game: Game, indent: int | None = None) -> str:
    """Encode a game as track JSON.
    
    The same game always encodes to the same text.
    
    Args:
        game: Game to encode
        indent: Pretty-print indentation, compact if None
    
    Returns:
        JSON text
    """
    document = to_document(game)
    _check_finite(document, "")
    
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            document,
            cls=NumpyEncoder,
            allow_nan=False,
            indent=indent,
            separators=separators,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode track: {e}") from e


def _check_finite(value: Any, path: str) -> None:
    """Reject NaN and infinity anywhere in a document."""
    if isinstance(value, dict):
        for key, item in value.items():
            _check_finite(item, f"{path}.{key}" if path else key)
    elif isinstance(value, list):
        for i, item in enumerate(value):
            _check_finite(item, f"{path}[{i}]")
    elif isinstance(value, (float, np.floating)) and not math.isfinite(value):
        raise SerializationError(f"Non-finite value {value} at {path}")


def from_document(document: Dict[str, Any]) -> Game:
    """Rebuild a game from a track document.
    
    Missing metadata falls back to GameConfig defaults and missing
    sections are read as empty. Ids and layer references are kept.
    
    Args:
        document: Decoded track document
    
    Returns:
        Game holding the document's contents
    """
    if not isinstance(document, dict):
        raise SerializationError(f"Track document must be an object, got {type(document).__name__}")
    
    defaults = GameConfig()
    try:
        config = GameConfig(
            label=document.get("label", defaults.label),
            creator=document.get("creator", defaults.creator),
            description=document.get("description", defaults.description),
            duration=int(document.get("duration", defaults.duration)),
            version=str(document.get("version", defaults.version)),
            audio=document.get("audio", defaults.audio),
            start_position=_read_point(document.get("startPosition")),
        )
        
        game = Game(config, base_layer=False)
        
        layers = document.get("layers") or [Layer.base().get_state()]
        for i, data in enumerate(layers):
            game.restore_layer(Layer(
                layer_id=int(data.get("id", i)),
                name=str(data.get("name", f"Layer {i}")),
                visible=bool(data.get("visible", True)),
                editable=bool(data.get("editable", True)),
            ))
        
        game.add_riders(_read_rider(data) for data in document.get("riders") or [])
        game.add_lines(_read_line(data) for data in document.get("lines") or [])
    except SerializationError:
        raise
    except LineTrackError as e:
        raise SerializationError(f"Invalid track document: {e}") from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SerializationError(f"Malformed track document: {e!r}") from e
    
    return game


def _read_point(data: Dict[str, Any] | None) -> Point:
    if data is None:
        return Point()
    return Point.from_dict(data)


def _read_rider(data: Dict[str, Any]) -> Rider:
    return Rider(
        start_position=_read_point(data.get("startPosition")),
        start_velocity=_read_point(data.get("startVelocity")),
        remountable=bool(data.get("remountable", False)),
    )


def _read_line(data: Dict[str, Any]) -> Line:
    line_type = LineType(int(data.get("type", LineType.STANDARD.value)))
    line_id = data.get("id")
    layer_id = data.get("layer", BASE_LAYER_ID)
    
    return Line(
        data["x1"],
        data["y1"],
        data["x2"],
        data["y2"],
        line_type=line_type,
        flipped=bool(data.get("flipped", False)),
        left_extended=bool(data.get("leftExtended", False)),
        right_extended=bool(data.get("rightExtended", False)),
        multiplier=data.get("multiplier"),
        width=data.get("width"),
        line_id=None if line_id is None else int(line_id),
        layer_id=None if layer_id is None else int(layer_id),
    )


def deserialize(text: str | bytes) -> Game:
    """Decode track JSON into a game.
    
    Args:
        text: JSON text
    
    Returns:
        Decoded game
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid track JSON: {e}") from e
    return from_document(document)


def write_to_file(game: Game, path: str | Path, indent: int | None = None) -> Path:
    """Write a game's track JSON to a file.
    
    The track is fully encoded before the file is opened, so a
    serialization error never leaves a partial file behind.
    
    Args:
        game: Game to write
        path: Output file
        indent: Pretty-print indentation, compact if None
    
    Returns:
        Path to the written file
    """
    text = serialize(game, indent=indent)
    
    output_file = Path(path)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(text)
    
    logger.info(f"Wrote track '{game.config.label}' to {output_file} "
                f"({game.num_lines} lines, {game.num_riders} riders)")
    return output_file


def load_from_file(path: str | Path) -> Game:
    """Read a track JSON file into a game.
    
    Args:
        path: Track file
    
    Returns:
        Decoded game
    """
    with open(Path(path), 'r', encoding='utf-8') as f:
        text = f.read()
    
    game = deserialize(text)
    logger.debug(f"Loaded track '{game.config.label}' from {path}")
    return game
