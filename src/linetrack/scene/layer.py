"""
Layer - Named, ordered groups of lines.
"""

from dataclasses import dataclass, replace


BASE_LAYER_ID = 0
BASE_LAYER_NAME = "Base Layer"


@dataclass
class LayerOptions:
    """Options for a new layer."""
    visible: bool = True
    editable: bool = True


@dataclass(frozen=True)
class Layer:
    """A layer of the game.
    
    Layers do not own lines; lines point at a layer by id. The order
    index is the layer's position in the game's layer list and sets
    its z-order.
    """
    layer_id: int = BASE_LAYER_ID
    name: str = BASE_LAYER_NAME
    visible: bool = True
    editable: bool = True
    order: int = 0
    
    @classmethod
    def base(cls) -> "Layer":
        """Default layer every game starts with."""
        return cls()
    
    def with_order(self, order: int) -> "Layer":
        return replace(self, order=order)
    
    def get_state(self) -> dict:
        """Wire representation of the layer."""
        return {
            "id": self.layer_id,
            "name": self.name,
            "visible": self.visible,
            "editable": self.editable,
        }
