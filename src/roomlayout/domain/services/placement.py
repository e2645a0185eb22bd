"""Interactive placement: dragging elements, drawing walls, placing doors.

The controller owns no state of its own. Callers hand it the current
RoomState and InteractionMode and receive the next mode, a preview for
the renderer, or a committed state. Only the end of a drag writes the
dragged element's position back into the room.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from ..entities import RoomState
from ..value_objects import (
    DoorType,
    DragPreview,
    EditResult,
    HingeDirection,
    LayoutTolerances,
    Point2D,
    SnapSource,
)
from .collision import CollisionDetector
from .editing import DoorEditor, ElementEditor, WallEditor
from .push_away import PushAwayResolver
from .snapping import SnapResolver

logger = logging.getLogger(__name__)

__all__ = [
    "Dragging",
    "DrawingWall",
    "Idle",
    "InteractionMode",
    "PlacementController",
    "PlacingDoor",
]


@dataclass(frozen=True)
class Idle:
    """No interaction in progress."""


@dataclass(frozen=True)
class Dragging:
    """An element is being dragged.

    Attributes:
        element_id: Element under the pointer.
        offset: Pointer position relative to the element's top-left corner.
        last_valid: Last accepted candidate position, None until the first
            accepted move.
    """

    element_id: str
    offset: Point2D
    last_valid: Point2D | None = None


@dataclass(frozen=True)
class DrawingWall:
    """Wall drawing mode.

    Attributes:
        start: First endpoint once it has been placed.
    """

    start: Point2D | None = None


@dataclass(frozen=True)
class PlacingDoor:
    """Door placement mode for one door type."""

    door_type: DoorType = DoorType.STANDARD


InteractionMode = Union[Idle, Dragging, DrawingWall, PlacingDoor]


class PlacementController:
    """Runs drags through snapping and collision checks and commits them.

    Attributes:
        tolerances: Layout tolerances.
        collision_detector: Collision queries.
        push_resolver: Corrective push-away.
        snap_resolver: Snap rules.
        wall_editor: Commits drawn walls.
        door_editor: Commits placed doors.
        element_editor: Rotation and hinge changes.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        collision_detector: CollisionDetector | None = None,
        push_resolver: PushAwayResolver | None = None,
        snap_resolver: SnapResolver | None = None,
        wall_editor: WallEditor | None = None,
        door_editor: DoorEditor | None = None,
        element_editor: ElementEditor | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.collision_detector = collision_detector or CollisionDetector(self.tolerances)
        self.push_resolver = push_resolver or PushAwayResolver(
            self.tolerances, self.collision_detector
        )
        self.snap_resolver = snap_resolver or SnapResolver(
            self.tolerances, self.collision_detector, self.push_resolver
        )
        self.wall_editor = wall_editor or WallEditor(self.tolerances, self.snap_resolver)
        self.door_editor = door_editor or DoorEditor()
        self.element_editor = element_editor or ElementEditor(
            self.tolerances, self.collision_detector.clearance_service
        )

    # Dragging

    def begin_drag(self, state: RoomState, element_id: str, pointer: Point2D) -> InteractionMode:
        """Start dragging an element, replacing any prior mode.

        Returns:
            A Dragging mode, or Idle if the element does not exist.
        """
        element = state.element(element_id)
        if element is None:
            return Idle()
        offset = Point2D(pointer.x - element.x, pointer.y - element.y)
        return Dragging(element_id=element_id, offset=offset)

    def drag_to(
        self, state: RoomState, mode: InteractionMode, pointer: Point2D
    ) -> tuple[InteractionMode, DragPreview | None]:
        """Compute the candidate position for a pointer move.

        The raw position is clamped into the room using the rotated
        footprint, then snapped. A wall collision triggers push-away; if
        no push applies the move is rejected. Door-clearance and cabinet
        collisions reject the move unless the position came from a cabinet
        snap. Nothing is committed.

        Args:
            state: Current room state.
            mode: Current interaction mode.
            pointer: Pointer position in design units.

        Returns:
            The next mode and a preview, or the unchanged mode and None when
            no drag is in progress.
        """
        if not isinstance(mode, Dragging):
            return mode, None
        element = state.element(mode.element_id)
        if element is None:
            return Idle(), None

        w, h = element.footprint(state.scale)
        raw = Point2D(pointer.x - mode.offset.x, pointer.y - mode.offset.y)
        bounded = state.clamp_to_room(raw.x, raw.y, w, h)
        snap = self.snap_resolver.resolve(
            state, bounded.x, bounded.y, w, h, exclude_id=element.id, rotation=element.rotation
        )
        x, y = snap.x, snap.y
        cabinet_snapped = snap.source == SnapSource.CABINET
        pushed = False

        if not cabinet_snapped and self.collision_detector.wall_collision(state, x, y, w, h):
            corrected = self.push_resolver.push_away_from_wall(state, x, y, w, h, element.rotation)
            if corrected is None:
                return mode, self._rejected(element.id, x, y, snap.source, "wall")
            pushed = (corrected.x, corrected.y) != (x, y)
            x, y = corrected.x, corrected.y

        if not cabinet_snapped:
            if self.collision_detector.door_clearance_collision(state, x, y, w, h):
                return mode, self._rejected(element.id, x, y, snap.source, "door clearance")
            if self.collision_detector.element_collision(state, x, y, w, h, exclude_id=element.id):
                return mode, self._rejected(element.id, x, y, snap.source, "element")

        next_mode = replace(mode, last_valid=Point2D(x, y))
        preview = DragPreview(
            element_id=element.id,
            x=x,
            y=y,
            accepted=True,
            snapped=snap.snapped,
            source=snap.source,
            pushed=pushed,
        )
        return next_mode, preview

    @staticmethod
    def _rejected(
        element_id: str, x: float, y: float, source: SnapSource, reason: str
    ) -> DragPreview:
        logger.debug(f"Rejected drag of {element_id} to ({x:.1f}, {y:.1f}): {reason}")
        return DragPreview(
            element_id=element_id,
            x=x,
            y=y,
            accepted=False,
            snapped=source != SnapSource.NONE,
            source=source,
            reason=reason,
        )

    def end_drag(self, state: RoomState, mode: InteractionMode) -> tuple[RoomState, InteractionMode]:
        """Commit the last valid drag position and return to Idle."""
        if not isinstance(mode, Dragging):
            return state, mode
        element = state.element(mode.element_id)
        if element is None or mode.last_valid is None:
            return state, Idle()
        moved = element.moved_to(mode.last_valid.x, mode.last_valid.y)
        return state.replace_element(moved), Idle()

    def abandon_drag(self, state: RoomState, mode: InteractionMode) -> tuple[RoomState, InteractionMode]:
        """Pointer left the canvas mid-drag; the last valid position is kept."""
        return self.end_drag(state, mode)

    # Wall drawing

    def begin_wall_drawing(self) -> InteractionMode:
        return DrawingWall()

    def place_wall_point(
        self, state: RoomState, mode: InteractionMode, point: Point2D
    ) -> tuple[EditResult, InteractionMode]:
        """Handle a click while drawing walls.

        The first click records a snapped start point. The second click
        commits the wall; drawing then continues with a fresh start point
        whether or not the wall was accepted.
        """
        if not isinstance(mode, DrawingWall):
            return EditResult.rejected(state, "Not drawing walls."), mode
        if mode.start is None:
            start = self.snap_resolver.snap_to_wall_endpoints(state, point.x, point.y)
            return EditResult(state, value=start.point), DrawingWall(start=start.point)
        result = self.wall_editor.add_custom_wall(
            state, mode.start.x, mode.start.y, point.x, point.y
        )
        return result, DrawingWall()

    def cancel(self, mode: InteractionMode) -> InteractionMode:
        """Leave any mode. A pending drag is dropped without committing."""
        return Idle()

    # Door placement

    def begin_door_placement(self, door_type: DoorType | str = DoorType.STANDARD) -> InteractionMode:
        return PlacingDoor(DoorType(door_type))

    def place_door(
        self, state: RoomState, mode: InteractionMode, wall_number: int, position: float
    ) -> tuple[EditResult, InteractionMode]:
        """Place a door of the active type; the mode stays active."""
        if not isinstance(mode, PlacingDoor):
            return EditResult.rejected(state, "Not placing doors."), mode
        result = self.door_editor.add_door(state, wall_number, position, mode.door_type)
        return result, mode

    # Direct element changes

    def rotate_element(self, state: RoomState, element_id: str, delta: float = 90) -> EditResult:
        return self.element_editor.rotate_element(state, element_id, delta)

    def set_hinge_direction(
        self, state: RoomState, element_id: str, direction: HingeDirection | str
    ) -> EditResult:
        return self.element_editor.set_hinge_direction(state, element_id, direction)
