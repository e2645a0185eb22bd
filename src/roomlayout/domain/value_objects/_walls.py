"""Wall, door and room classification value objects."""

from __future__ import annotations

from enum import Enum


STANDARD_WALL_NAMES: dict[int, str] = {
    1: "North",
    2: "East",
    3: "South",
    4: "West",
}
"""Compass names of the four standard walls, keyed by wall number."""

STANDARD_WALL_NUMBERS: tuple[int, ...] = (1, 2, 3, 4)


def wall_name(wall_number: int) -> str:
    """Human-readable name for a wall number."""
    if wall_number in STANDARD_WALL_NAMES:
        return f"{STANDARD_WALL_NAMES[wall_number]} Wall"
    return f"Custom Wall {wall_number}"


class RoomType(str, Enum):
    """Rooms that can be designed in one session."""

    KITCHEN = "kitchen"
    BATHROOM = "bathroom"


class DoorType(str, Enum):
    """Kinds of door openings.

    Each type carries a default opening width in inches.
    """

    STANDARD = "standard"
    PANTRY = "pantry"
    ROOM = "room"
    DOUBLE = "double"
    SLIDING = "sliding"

    @property
    def default_width(self) -> float:
        """Default opening width in inches."""
        return _DOOR_DEFAULT_WIDTHS[self]


_DOOR_DEFAULT_WIDTHS: dict[DoorType, float] = {
    DoorType.STANDARD: 32.0,
    DoorType.PANTRY: 24.0,
    DoorType.ROOM: 36.0,
    DoorType.DOUBLE: 64.0,
    DoorType.SLIDING: 48.0,
}


class FloorPlanPreset(str, Enum):
    """Named wall configurations that can be applied in one step.

    Attributes:
        TRADITIONAL: All four walls present.
        OPEN_CONCEPT: South wall removed.
        GALLEY_OPEN: East and west walls removed.
        ISLAND_FOCUSED: Only the north wall kept.
        PENINSULA: West wall removed.
    """

    TRADITIONAL = "traditional"
    OPEN_CONCEPT = "open-concept"
    GALLEY_OPEN = "galley-open"
    ISLAND_FOCUSED = "island-focused"
    PENINSULA = "peninsula"

    @property
    def walls(self) -> tuple[int, ...]:
        """Standard walls present after the preset is applied."""
        return _PRESET_WALLS[self]

    @property
    def removed_walls(self) -> tuple[int, ...]:
        """Standard walls marked as removed by the preset."""
        return tuple(n for n in STANDARD_WALL_NUMBERS if n not in _PRESET_WALLS[self])


_PRESET_WALLS: dict[FloorPlanPreset, tuple[int, ...]] = {
    FloorPlanPreset.TRADITIONAL: (1, 2, 3, 4),
    FloorPlanPreset.OPEN_CONCEPT: (1, 2, 4),
    FloorPlanPreset.GALLEY_OPEN: (1, 3),
    FloorPlanPreset.ISLAND_FOCUSED: (1,),
    FloorPlanPreset.PENINSULA: (1, 2, 3),
}
