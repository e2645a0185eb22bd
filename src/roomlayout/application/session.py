"""Design session: one room state per room and the active interaction.

The session is the mutable shell around the immutable domain. It keeps
one RoomState per room, switches the active room, holds the single
InteractionMode, and applies accepted command results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from roomlayout.application.factory import ServiceFactory, get_factory
from roomlayout.domain.entities import DEFAULT_WALL_HEIGHT, RoomState
from roomlayout.domain.services import Dragging, DrawingWall, Idle, InteractionMode
from roomlayout.domain.value_objects import (
    DoorType,
    DragPreview,
    EditResult,
    FloorPlanPreset,
    Point2D,
    RoomType,
)

logger = logging.getLogger(__name__)


class RoomNotSetUpError(RuntimeError):
    """Raised when a room command runs before the room has dimensions."""


@dataclass
class DesignSession:
    """Interactive design session over a kitchen and a bathroom.

    Attributes:
        factory: Provides the layout services; defaults to the shared factory.
        rooms: Room state per room; None until the room is set up.
        active_room: Room that commands apply to.
        mode: Current interaction mode.
        selected_element_id: Element selected in the active room.
    """

    factory: ServiceFactory = field(default_factory=get_factory)
    rooms: dict[RoomType, RoomState | None] = field(
        default_factory=lambda: {RoomType.KITCHEN: None, RoomType.BATHROOM: None}
    )
    active_room: RoomType = RoomType.KITCHEN
    mode: InteractionMode = field(default_factory=Idle)
    selected_element_id: str | None = None

    @property
    def state(self) -> RoomState | None:
        """State of the active room."""
        return self.rooms.get(self.active_room)

    def require_state(self) -> RoomState:
        state = self.state
        if state is None:
            raise RoomNotSetUpError(f"The {self.active_room.value} has not been set up")
        return state

    def setup_room(
        self,
        width_ft: float,
        height_ft: float,
        wall_height_in: float = DEFAULT_WALL_HEIGHT,
    ) -> RoomState:
        """Create the active room from its dimensions, replacing any prior design."""
        tolerances = self.factory.tolerances
        state = RoomState.create(
            width_ft,
            height_ft,
            wall_height_in,
            canvas_size=tolerances.canvas_size,
            standard_wall_thickness=tolerances.standard_wall_thickness,
        )
        self.rooms[self.active_room] = state
        self._reset_interaction()
        logger.info(f"Set up {self.active_room.value}: {width_ft}ft x {height_ft}ft, scale {state.scale:.3f}")
        return state

    def load_room(self, room: RoomType, state: RoomState | None) -> None:
        self.rooms[room] = state

    def switch_room(self, room: RoomType | str) -> RoomState | None:
        """Make another room active. The leaving room's state is kept."""
        room = RoomType(room)
        if self.state is not None and isinstance(self.mode, Dragging):
            self.end_drag()
        self.active_room = room
        self._reset_interaction()
        return self.state

    def reset(self) -> None:
        """Discard every room and return to a fresh session."""
        for room in self.rooms:
            self.rooms[room] = None
        self.active_room = RoomType.KITCHEN
        self._reset_interaction()

    def _reset_interaction(self) -> None:
        self.mode = Idle()
        self.selected_element_id = None

    def apply(self, result: EditResult) -> EditResult:
        """Store an accepted result's state as the active room state."""
        if result.accepted:
            self.rooms[self.active_room] = result.state
        elif result.message:
            logger.info(f"Command rejected: {result.message}")
        return result

    def run(self, command: Callable[..., EditResult], *args: Any, **kwargs: Any) -> EditResult:
        """Run an editing command against the active room and apply it."""
        return self.apply(command(self.require_state(), *args, **kwargs))

    # Dragging

    def begin_drag(self, element_id: str, pointer: Point2D) -> None:
        controller = self.factory.get_placement_controller()
        self.mode = controller.begin_drag(self.require_state(), element_id, pointer)
        if isinstance(self.mode, Dragging):
            self.selected_element_id = element_id

    def drag_to(self, pointer: Point2D) -> DragPreview | None:
        controller = self.factory.get_placement_controller()
        self.mode, preview = controller.drag_to(self.require_state(), self.mode, pointer)
        return preview

    def end_drag(self) -> None:
        controller = self.factory.get_placement_controller()
        state, self.mode = controller.end_drag(self.require_state(), self.mode)
        self.rooms[self.active_room] = state

    def abandon_drag(self) -> None:
        controller = self.factory.get_placement_controller()
        state, self.mode = controller.abandon_drag(self.require_state(), self.mode)
        self.rooms[self.active_room] = state

    # Wall drawing and door placement

    def toggle_wall_drawing(self) -> None:
        """Enter wall drawing, or leave it if already drawing."""
        controller = self.factory.get_placement_controller()
        if isinstance(self.mode, DrawingWall):
            self.mode = controller.cancel(self.mode)
        else:
            self.mode = controller.begin_wall_drawing()
            self.selected_element_id = None

    def click_wall_point(self, point: Point2D) -> EditResult:
        controller = self.factory.get_placement_controller()
        result, self.mode = controller.place_wall_point(self.require_state(), self.mode, point)
        return self.apply(result)

    def begin_door_placement(self, door_type: DoorType | str = DoorType.STANDARD) -> None:
        self.mode = self.factory.get_placement_controller().begin_door_placement(door_type)
        self.selected_element_id = None

    def click_door(self, wall_number: int, position: float) -> EditResult:
        controller = self.factory.get_placement_controller()
        result, self.mode = controller.place_door(
            self.require_state(), self.mode, wall_number, position
        )
        return self.apply(result)

    def cancel(self) -> None:
        self.mode = self.factory.get_placement_controller().cancel(self.mode)

    # Commands

    def add_element(self, element_type: str) -> EditResult:
        result = self.run(self.factory.get_element_editor().add_element, element_type)
        if result.accepted:
            self.selected_element_id = result.value
        return result

    def delete_element(self, element_id: str) -> EditResult:
        result = self.run(self.factory.get_element_editor().delete_element, element_id)
        if result.accepted and self.selected_element_id == element_id:
            self.selected_element_id = None
        return result

    def add_wall(self, wall_number: int) -> EditResult:
        return self.run(self.factory.get_wall_editor().add_wall, wall_number)

    def remove_wall(self, wall_number: int) -> EditResult:
        return self.run(self.factory.get_wall_editor().remove_wall, wall_number)

    def apply_floor_plan_preset(self, preset: FloorPlanPreset | str) -> EditResult:
        result = self.run(self.factory.get_wall_editor().apply_floor_plan_preset, preset)
        if result.accepted:
            self.selected_element_id = None
        return result

    def total_price(self) -> float:
        """Price of the active room."""
        return self.factory.get_pricing_service().compute_price(self.require_state())
