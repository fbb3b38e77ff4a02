"""
Scene module - Games, layers and riders.

This module contains:
- Game: The track aggregate that owns lines, layers and riders
- Layer: Named, ordered line groups
- Rider: Riders with starting position and velocity
- create_riders: Rider generation from coordinate policies
"""

from linetrack.scene.game import Game, GameConfig, FORMAT_VERSION
from linetrack.scene.layer import Layer, LayerOptions, BASE_LAYER_ID, BASE_LAYER_NAME
from linetrack.scene.rider import (
    CoordPolicy,
    EvenlySpaced,
    Explicit,
    Fixed,
    Range,
    Rider,
    create_riders,
)

__all__ = [
    "Game",
    "GameConfig",
    "FORMAT_VERSION",
    "Layer",
    "LayerOptions",
    "BASE_LAYER_ID",
    "BASE_LAYER_NAME",
    "Rider",
    "CoordPolicy",
    "Fixed",
    "Range",
    "Explicit",
    "EvenlySpaced",
    "create_riders",
]
