#!/usr/bin/env python3
"""
Basic Track Example

This example demonstrates how to:
1. Sketch a long sine wave of scenery lines
2. Add a thick polygon on its own layer
3. Drop in riders at random positions and speeds
4. Write the track to a file the game can import

Run with: python build_track.py [output.json]
"""

import logging
import sys

import numpy as np

from linetrack import (
    Game,
    GameConfig,
    LineType,
    Range,
    create_riders,
    function_lines,
    thick_polygon_lines,
)
from linetrack.config import LoggingConfig, setup_logging

logger = logging.getLogger(__name__)


def offset_sin(x: float) -> float:
    """Gentle rolling hills."""
    return 50.0 + 100.0 * np.sin(0.01 * x)


def build_game(seed: int | None = None) -> Game:
    """Build the demo track."""
    game = Game(GameConfig(label="Sine hills", description="Rolling hills and a thick ring"))
    
    hills = function_lines(offset_sin, -1000.0, 5000.0, iterations=1, line_type=LineType.STANDARD)
    game.add_lines(hills)
    
    ring = game.add_layer("Ring")
    polygon = thick_polygon_lines(10, 40.0, gap=2.0, line_type=LineType.ACCELERATION)
    game.add_lines(line.on_layer(ring.layer_id) for line in polygon)
    
    riders = create_riders(
        4,
        start_position=Range.default(),
        start_velocity=Range.default(),
        rng=np.random.default_rng(seed),
    )
    game.add_riders(riders)
    
    return game


def main():
    setup_logging(LoggingConfig(level="INFO"))
    
    output = sys.argv[1] if len(sys.argv) > 1 else "track.json"
    game = build_game(seed=2024)
    
    logger.info(f"Built track: {game.get_state()}")
    game.write_to_file(output)


if __name__ == "__main__":
    main()
