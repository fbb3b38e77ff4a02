"""Tests for track serialization."""

import json
import logging

import pytest
import numpy as np

from linetrack.errors import SerializationError
from linetrack.export import (
    deserialize,
    from_document,
    load_from_file,
    serialize,
    to_document,
    write_to_file,
)
from linetrack.geometry import Line, LineType, Point
from linetrack.scene import Game, GameConfig, LayerOptions, Rider, create_riders
from linetrack.shapes import thick_polygon_lines


def build_game() -> Game:
    """Game with one layer, three lines and two riders."""
    game = Game(GameConfig(label="Test Track", description="three lines"))
    game.add_lines([
        Line(0.0, 0.0, 10.0, 0.0),
        Line(10.0, 0.0, 20.0, 5.0, line_type=LineType.ACCELERATION, multiplier=2.0, flipped=True),
        Line(-5.0, 3.0, 5.0, 3.0, line_type=LineType.SCENERY, width=1.5, layer_id=0),
    ])
    game.add_riders([
        Rider(Point(0.0, -5.0), Point(0.4, 0.0)),
        Rider(Point(2.0, -5.0), Point(1.0, 0.0), remountable=True),
    ])
    return game


class TestDocument:
    """Test the document layout."""
    
    def test_top_level_fields(self):
        """Test header fields and their order."""
        document = to_document(build_game())
        
        assert list(document.keys()) == [
            "label", "creator", "description", "duration", "version",
            "audio", "startPosition", "riders", "layers", "lines",
        ]
        assert document["label"] == "Test Track"
        assert document["creator"] == "linetrack"
        assert document["duration"] == 120
        assert document["version"] == "6.2"
        assert document["audio"] is None
        assert document["startPosition"] == {"x": 0.0, "y": 0.0}
    
    def test_line_fields(self):
        """Test line field names and default layer."""
        lines = to_document(build_game())["lines"]
        
        assert lines[0] == {
            "id": 1,
            "type": 0,
            "x1": 0.0,
            "y1": 0.0,
            "x2": 10.0,
            "y2": 0.0,
            "flipped": False,
            "leftExtended": False,
            "rightExtended": False,
            "layer": 0,
        }
        assert lines[1]["type"] == 1
        assert lines[1]["multiplier"] == 2.0
        assert lines[2]["type"] == 2
        assert lines[2]["width"] == 1.5
        assert "multiplier" not in lines[2]
    
    def test_multiplier_only_for_acceleration(self):
        """Test attributes of other line types are not written."""
        game = Game()
        game.add_line(Line(0.0, 0.0, 1.0, 0.0, multiplier=3.0, width=2.0))
        
        line = to_document(game)["lines"][0]
        
        assert "multiplier" not in line
        assert "width" not in line
    
    def test_layers_and_riders(self):
        """Test layer and rider entries in insertion order."""
        game = build_game()
        game.add_layer("Scenery", LayerOptions(editable=False))
        
        document = to_document(game)
        
        assert document["layers"] == [
            {"id": 0, "name": "Base Layer", "visible": True, "editable": True},
            {"id": 1, "name": "Scenery", "visible": True, "editable": False},
        ]
        assert [r["remountable"] for r in document["riders"]] == [0, 1]
        assert document["riders"][0]["startVelocity"] == {"x": 0.4, "y": 0.0}
    
    def test_insertion_order(self):
        """Test lines follow insertion order rather than id order."""
        game = Game()
        game.add_line(Line(0.0, 0.0, 1.0, 0.0, line_id=9))
        game.add_line(Line(0.0, 0.0, 2.0, 0.0, line_id=3))
        
        assert [l["id"] for l in to_document(game)["lines"]] == [9, 3]


class TestSerialize:
    """Test JSON encoding."""
    
    def test_deterministic(self):
        """Test the same game serializes to identical text."""
        game = build_game()
        
        assert serialize(game) == serialize(game)
        assert serialize(build_game()) == serialize(build_game())
    
    def test_valid_json(self):
        """Test output parses back to the document."""
        game = build_game()
        
        assert json.loads(serialize(game)) == to_document(game)
        assert json.loads(serialize(game, indent=2)) == to_document(game)
        assert game.construct_game() == serialize(game)
    
    def test_numpy_values(self):
        """Test numpy scalars in metadata are written as numbers."""
        game = Game(GameConfig(duration=np.int64(40)))
        
        assert json.loads(serialize(game))["duration"] == 40
    
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        """Test non-finite coordinates cannot be written."""
        game = Game()
        game.add_line(Line(0.0, 0.0, value, 1.0))
        
        with pytest.raises(SerializationError, match="lines\\[0\\].x2"):
            serialize(game)
    
    def test_non_finite_rider_rejected(self):
        """Test non-finite rider velocities cannot be written."""
        game = Game()
        game.add_rider(Rider(start_velocity=Point(float("nan"), 0.0)))
        
        with pytest.raises(SerializationError):
            serialize(game)


class TestDeserialize:
    """Test reading tracks back."""
    
    def test_round_trip(self):
        """Test a game survives serialization."""
        game = build_game()
        
        loaded = deserialize(serialize(game))
        
        assert loaded.num_layers == 1
        assert loaded.num_lines == 3
        assert loaded.num_riders == 2
        assert loaded.config == game.config
        assert loaded.layers[0].get_state() == game.layers[0].get_state()
        assert loaded.riders == game.riders
        
        for original, copy in zip(game.lines, loaded.lines):
            # Unset layers come back as the base layer
            assert copy == original.on_layer(game.resolve_layer_id(original))
    
    def test_round_trip_polygon_layers(self):
        """Test ids and layer references survive."""
        game = Game()
        walls = game.add_layer("Walls", LayerOptions(visible=False))
        game.add_lines(l.on_layer(walls.layer_id) for l in thick_polygon_lines(6, 30.0, gap=2.0))
        game.add_riders(create_riders(3, remountable=True))
        
        loaded = deserialize(serialize(game))
        
        assert serialize(loaded) == serialize(game)
        assert len(loaded.lines_in_layer(walls.layer_id)) == 12
        assert not loaded.get_layer_by_name("Walls").visible
        assert loaded.add_line(Line(0.0, 0.0, 1.0, 1.0)) == 13
    
    def test_missing_metadata_uses_defaults(self):
        """Test sparse documents fall back to defaults."""
        game = from_document({
            "lines": [{"id": 1, "type": 0, "x1": 0, "y1": 0, "x2": 5, "y2": 5}],
        })
        
        assert game.config == GameConfig()
        assert game.num_layers == 1
        assert game.get_line(1).layer_id == 0
        assert game.num_riders == 0
    
    def test_null_sections_read_as_empty(self):
        """Test null riders, lines and layers are read as empty sections."""
        game = deserialize('{"riders": null, "lines": null, "layers": null}')
        
        assert game.num_riders == 0
        assert game.num_lines == 0
        assert game.num_layers == 1
        assert game.layers[0].name == "Base Layer"
    
    @pytest.mark.parametrize("document", [
        [],
        {"lines": [{"id": 1, "x1": 0, "y1": 0, "x2": 5}]},
        {"lines": [{"id": 1, "type": 7, "x1": 0, "y1": 0, "x2": 5, "y2": 5}]},
        {"lines": [{"id": 1, "x1": 0, "y1": 0, "x2": 5, "y2": 5, "layer": 4}]},
        {"lines": [{"id": 1, "x1": 2, "y1": 2, "x2": 2, "y2": 2}]},
        {"riders": [{"startPosition": {"x": 1}}]},
        {"layers": [{"id": 0, "name": "A"}, {"id": 1, "name": "A"}]},
    ])
    def test_malformed_documents(self, document):
        """Test malformed documents raise SerializationError."""
        with pytest.raises(SerializationError):
            from_document(document)
    
    def test_invalid_json(self):
        """Test invalid JSON text raises SerializationError."""
        with pytest.raises(SerializationError):
            deserialize("{not json")


class TestFiles:
    """Test file helpers."""
    
    def test_write_and_load(self, tmp_path):
        """Test writing then loading a track file."""
        game = build_game()
        path = tmp_path / "track.json"
        
        written = write_to_file(game, path)
        
        assert written == path
        assert path.read_text(encoding="utf-8") == serialize(game)
        assert serialize(load_from_file(path)) == serialize(game)
    
    def test_game_write_to_file(self, tmp_path):
        """Test the Game shortcut writes the same text."""
        game = build_game()
        
        path = game.write_to_file(str(tmp_path / "track.json"))
        
        assert path.read_text(encoding="utf-8") == serialize(game)
    
    def test_failed_serialization_writes_nothing(self, tmp_path):
        """Test no partial file is left behind."""
        game = Game()
        game.add_line(Line(0.0, 0.0, float("nan"), 1.0))
        path = tmp_path / "track.json"
        
        with pytest.raises(SerializationError):
            write_to_file(game, path)
        
        assert not path.exists()
    
    def test_io_errors_surface_unchanged(self, tmp_path):
        """Test OSError from the file system is not wrapped."""
        with pytest.raises(OSError):
            write_to_file(build_game(), tmp_path / "missing" / "track.json")
        
        with pytest.raises(OSError):
            load_from_file(tmp_path / "nothing.json")
    
    def test_write_is_logged(self, tmp_path, caplog):
        """Test file writes are logged at INFO."""
        with caplog.at_level(logging.INFO, logger="linetrack"):
            write_to_file(build_game(), tmp_path / "track.json")
        
        assert "Test Track" in caplog.text
