"""Value objects for the room layout domain.

This module provides immutable data types used throughout the layout
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Planar geometry
from ._geometry import (
    Bounds,
    Point2D,
    WallSegment,
)

# Walls, doors and rooms
from ._walls import (
    STANDARD_WALL_NAMES,
    STANDARD_WALL_NUMBERS,
    DoorType,
    FloorPlanPreset,
    RoomType,
    wall_name,
)

# Placeable elements
from ._elements import (
    VALID_ROTATIONS,
    ColorCount,
    ElementCategory,
    HingeDirection,
    normalize_rotation,
)

# Heuristic tuning
from ._tolerances import LayoutTolerances

# Query and command results
from ._results import (
    ClearanceZone,
    CollisionReport,
    DragPreview,
    EditResult,
    SnapResult,
    SnapSource,
)

__all__ = [
    # Planar geometry
    "Bounds",
    "Point2D",
    "WallSegment",
    # Walls, doors and rooms
    "STANDARD_WALL_NAMES",
    "STANDARD_WALL_NUMBERS",
    "DoorType",
    "FloorPlanPreset",
    "RoomType",
    "wall_name",
    # Placeable elements
    "VALID_ROTATIONS",
    "ColorCount",
    "ElementCategory",
    "HingeDirection",
    "normalize_rotation",
    # Heuristic tuning
    "LayoutTolerances",
    # Query and command results
    "ClearanceZone",
    "CollisionReport",
    "DragPreview",
    "EditResult",
    "SnapResult",
    "SnapSource",
]
