"""Domain layer: room model, element catalog and geometry services."""

from .catalog import ELEMENT_CATALOG, ElementSpec, get_element_spec
from .entities import (
    CustomWall,
    Door,
    Element,
    RoomDimensions,
    RoomState,
)

__all__ = [
    "CustomWall",
    "Door",
    "ELEMENT_CATALOG",
    "Element",
    "ElementSpec",
    "RoomDimensions",
    "RoomState",
    "get_element_spec",
]
