"""Result value objects returned by snapping, collision and editing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ._geometry import Bounds, Point2D

if TYPE_CHECKING:
    from ..entities import RoomState


class SnapSource(str, Enum):
    """What a snapped position was aligned to.

    Attributes:
        NONE: No snap applied.
        CABINET: Flush against another cabinet's edge.
        WALL: Room boundary snap or push-away from a wall.
        CUSTOM_WALL: Offset from a custom wall face.
        WALL_ENDPOINT: Endpoint of an existing custom wall.
        ROOM_CORNER: One of the four room corners.
        WALL_EDGE: Perpendicular foot on a standard wall's inner edge.
    """

    NONE = "none"
    CABINET = "cabinet"
    WALL = "wall"
    CUSTOM_WALL = "custom_wall"
    WALL_ENDPOINT = "wall_endpoint"
    ROOM_CORNER = "room_corner"
    WALL_EDGE = "wall_edge"


@dataclass(frozen=True)
class SnapResult:
    """Corrected candidate position produced by a snap function.

    Attributes:
        x: Resulting x coordinate.
        y: Resulting y coordinate.
        snapped: True if a snap rule adjusted the position.
        source: The rule that produced the position.
        wall_number: Wall involved in the snap, when there is one.
        wall_angle: Angle in degrees of the custom wall snapped to.
    """

    x: float
    y: float
    snapped: bool = False
    source: SnapSource = SnapSource.NONE
    wall_number: int | None = None
    wall_angle: float | None = None

    @property
    def point(self) -> Point2D:
        return Point2D(self.x, self.y)

    @classmethod
    def unsnapped(cls, x: float, y: float) -> SnapResult:
        """Position passed through unchanged."""
        return cls(x=x, y=y)


@dataclass(frozen=True)
class ClearanceZone:
    """Swing clearance in front of a door.

    Attributes:
        door_id: Door that owns the zone.
        wall_number: Wall the door sits in.
        bounds: Axis-aligned box tested for collisions.
        corners: Corners of the (possibly rotated) clearance rectangle.
        angle: Orientation in degrees for custom walls, None for standard.
    """

    door_id: str
    wall_number: int
    bounds: Bounds
    corners: tuple[Point2D, ...] = ()
    angle: float | None = None


@dataclass(frozen=True)
class DragPreview:
    """Tentative drag position reported to the renderer.

    Attributes:
        element_id: Element being dragged.
        x: Proposed x coordinate.
        y: Proposed y coordinate.
        accepted: False if the position was rejected; the element then
            keeps its last valid position.
        snapped: True if any snap rule applied.
        source: Snap rule that applied.
        pushed: True if push-away corrected a wall collision.
        reason: Short reason for a rejection.
    """

    element_id: str
    x: float
    y: float
    accepted: bool
    snapped: bool = False
    source: SnapSource = SnapSource.NONE
    pushed: bool = False
    reason: str | None = None


@dataclass(frozen=True)
class EditResult:
    """Outcome of an editing command.

    A rejected command carries the unchanged prior state and a
    user-facing message explaining the rejection.

    Attributes:
        state: State after the command.
        accepted: Whether the command was applied.
        message: User-facing explanation, mostly for rejections and warnings.
        value: Command-specific payload, such as a new element id.
    """

    state: RoomState
    accepted: bool = True
    message: str | None = None
    value: Any = None

    @classmethod
    def rejected(cls, state: RoomState, message: str) -> EditResult:
        """Reject a command, keeping the prior state."""
        return cls(state=state, accepted=False, message=message)


@dataclass(frozen=True)
class CollisionReport:
    """Summary of what an element placement collides with.

    Attributes:
        element_id: Element that was checked.
        walls: Wall numbers within the wall-collision threshold.
        doors: Door ids whose clearance zone is overlapped.
        elements: Ids of overlapped cabinets.
    """

    element_id: str
    walls: tuple[int, ...] = field(default_factory=tuple)
    doors: tuple[str, ...] = field(default_factory=tuple)
    elements: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_collisions(self) -> bool:
        return bool(self.walls or self.doors or self.elements)
