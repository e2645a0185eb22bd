"""Editing commands for walls, doors and elements.

Every command takes a RoomState and returns an EditResult. A rejected
command returns the prior state unchanged together with a user-facing
message; commands never raise for invalid user input.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Iterable

from ..catalog import DEFAULT_MIN_HEIGHT, get_element_spec
from ..entities import DEFAULT_MATERIAL, CustomWall, Door, Element, RoomState
from ..value_objects import (
    STANDARD_WALL_NUMBERS,
    Bounds,
    ColorCount,
    DoorType,
    EditResult,
    FloorPlanPreset,
    HingeDirection,
    LayoutTolerances,
    Point2D,
    normalize_rotation,
    wall_name,
)
from .clearance import DoorClearanceService
from .snapping import SnapResolver

logger = logging.getLogger(__name__)

__all__ = [
    "DoorEditor",
    "ElementEditor",
    "WallEditor",
    "WallServiceAvailability",
]


@dataclass(frozen=True)
class WallServiceAvailability:
    """Administrative switches for chargeable wall work.

    Attributes:
        removal_enabled: Whether walls may be removed.
        addition_enabled: Whether custom walls may be drawn.
    """

    removal_enabled: bool = True
    addition_enabled: bool = True


def _sorted_walls(walls: Iterable[int]) -> tuple[int, ...]:
    return tuple(sorted(set(walls)))


def _next_id(prefix: str, existing: Iterable[str]) -> str:
    """Next free ``prefix-N`` identifier."""
    pattern = re.compile(rf"^{re.escape(prefix)}-(\d+)$")
    numbers = [int(m.group(1)) for m in (pattern.match(i) for i in existing) if m]
    return f"{prefix}-{max(numbers, default=0) + 1}"


class WallEditor:
    """Commands that add, remove, draw and rotate walls.

    Attributes:
        tolerances: Layout tolerances.
        snap_resolver: Snaps drawn wall endpoints to existing features.
        availability: Wall service switches.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        snap_resolver: SnapResolver | None = None,
        availability: WallServiceAvailability | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.snap_resolver = snap_resolver or SnapResolver(self.tolerances)
        self.availability = availability or WallServiceAvailability()

    def add_wall(self, state: RoomState, wall_number: int) -> EditResult:
        """Re-add a removed wall. Adding a present wall changes nothing."""
        if wall_number in state.walls:
            return EditResult(state)
        if wall_number not in state.all_available_walls:
            return EditResult.rejected(state, f"Wall {wall_number} does not exist.")
        new_state = replace(
            state,
            walls=_sorted_walls((*state.walls, wall_number)),
            removed_walls=tuple(w for w in state.removed_walls if w != wall_number),
        )
        return EditResult(new_state)

    def remove_wall(self, state: RoomState, wall_number: int) -> EditResult:
        """Remove a present wall and the elements standing against it.

        The wall is recorded as removed only if it belongs to the original
        walls, since only those removals are chargeable.
        """
        if not self.availability.removal_enabled:
            return EditResult.rejected(state, "Wall removal service is temporarily disabled.")
        if wall_number not in state.walls:
            return EditResult.rejected(state, f"{wall_name(wall_number)} is not present.")

        doomed = {e.id for e in self.elements_on_wall(state, wall_number)}
        removed = state.removed_walls
        if wall_number in state.original_walls:
            removed = _sorted_walls((*removed, wall_number))

        new_state = replace(
            state,
            elements=tuple(e for e in state.elements if e.id not in doomed),
            materials={k: v for k, v in state.materials.items() if k not in doomed},
            walls=tuple(w for w in state.walls if w != wall_number),
            removed_walls=removed,
        )
        message = None
        if doomed:
            message = f"Removed {len(doomed)} element(s) standing against {wall_name(wall_number)}."
            logger.info(message)
        return EditResult(new_state, message=message, value=sorted(doomed))

    def elements_on_wall(self, state: RoomState, wall_number: int) -> list[Element]:
        """Elements standing against a wall.

        For standard walls an element counts when its edge lies within the
        on-wall distance of the room edge. For custom walls the gap between
        the element's near edge and the wall face is measured instead.
        """
        threshold = self.tolerances.on_wall_distance
        room_w, room_h = state.room_width, state.room_height
        result = []
        for element in state.elements:
            box = element.bounds(state.scale)
            if wall_number == 1:
                on_wall = box.top < threshold
            elif wall_number == 2:
                on_wall = box.right > room_w - threshold
            elif wall_number == 3:
                on_wall = box.bottom > room_h - threshold
            elif wall_number == 4:
                on_wall = box.left < threshold
            else:
                on_wall = self._near_custom_wall(state, wall_number, box)
            if on_wall:
                result.append(element)
        return result

    def _near_custom_wall(self, state: RoomState, wall_number: int, box: Bounds) -> bool:
        wall = state.custom_wall(wall_number)
        if wall is None:
            return False
        segment = wall.segment()
        center = box.center
        t = segment.projection_parameter(center)
        slack = self.tolerances.wall_projection_slack
        if t < -slack or t > 1 + slack:
            return False
        normal = segment.normal
        half_extent = (box.width * abs(normal.x) + box.height * abs(normal.y)) / 2
        gap = segment.distance_to_line(center) - half_extent - segment.thickness / 2
        return gap <= self.tolerances.on_wall_distance

    def add_custom_wall(
        self,
        state: RoomState,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        existed_prior: bool = False,
    ) -> EditResult:
        """Draw a new custom wall between two points.

        Both endpoints are snapped to nearby wall features first. Walls
        shorter than the minimum length are rejected.

        Returns:
            EditResult whose value is the new wall number.
        """
        if not self.availability.addition_enabled:
            return EditResult.rejected(state, "Wall addition service is temporarily disabled.")

        start = self.snap_resolver.snap_to_wall_endpoints(state, x1, y1)
        end = self.snap_resolver.snap_to_wall_endpoints(state, x2, y2)
        length = start.point.distance_to(end.point)
        if length < self.tolerances.min_custom_wall_length:
            return EditResult.rejected(
                state,
                "Wall is too short. Please draw a longer wall "
                f"(minimum {self.tolerances.min_custom_wall_length:g} units).",
            )

        number = state.next_wall_number()
        wall = CustomWall(
            wall_number=number,
            x1=start.x,
            y1=start.y,
            x2=end.x,
            y2=end.y,
            thickness=self.tolerances.custom_wall_thickness,
            existed_prior=existed_prior,
        )
        originals = state.original_walls
        if existed_prior:
            originals = _sorted_walls((*originals, number))
        new_state = replace(
            state,
            custom_walls=(*state.custom_walls, wall),
            walls=_sorted_walls((*state.walls, number)),
            all_available_walls=_sorted_walls((*state.all_available_walls, number)),
            original_walls=originals,
        )
        logger.debug(f"Added custom wall {number} ({start.x:.1f}, {start.y:.1f})-({end.x:.1f}, {end.y:.1f})")
        return EditResult(new_state, value=number)

    def mark_existed_prior(
        self, state: RoomState, wall_number: int, existed_prior: bool = True
    ) -> EditResult:
        """Record whether a custom wall was already standing before renovation."""
        wall = state.custom_wall(wall_number)
        if wall is None:
            return EditResult.rejected(state, f"Custom wall {wall_number} does not exist.")
        if existed_prior:
            originals = _sorted_walls((*state.original_walls, wall_number))
        else:
            originals = tuple(w for w in state.original_walls if w != wall_number)
        new_state = replace(
            state,
            custom_walls=tuple(
                replace(w, existed_prior=existed_prior) if w.wall_number == wall_number else w
                for w in state.custom_walls
            ),
            original_walls=originals,
        )
        return EditResult(new_state)

    def rotate_custom_wall(self, state: RoomState, wall_number: int, angle_deg: float) -> EditResult:
        """Rotate a custom wall about its midpoint to an absolute angle."""
        wall = state.custom_wall(wall_number)
        if wall is None:
            return EditResult.rejected(state, f"Custom wall {wall_number} does not exist.")
        segment = wall.segment()
        mid = segment.midpoint
        half = segment.length / 2
        radians = math.radians(angle_deg)
        dx, dy = math.cos(radians) * half, math.sin(radians) * half
        rotated = replace(
            wall,
            x1=mid.x - dx,
            y1=mid.y - dy,
            x2=mid.x + dx,
            y2=mid.y + dy,
            angle=angle_deg,
        )
        new_state = replace(
            state,
            custom_walls=tuple(rotated if w.wall_number == wall_number else w for w in state.custom_walls),
        )
        return EditResult(new_state)

    def cleanup_available_walls(self, state: RoomState) -> EditResult:
        """Drop custom wall numbers that no longer correspond to a wall."""
        custom_numbers = {w.wall_number for w in state.custom_walls}
        kept = tuple(
            n for n in state.all_available_walls
            if n in STANDARD_WALL_NUMBERS or n in custom_numbers
        )
        if kept == state.all_available_walls:
            return EditResult(state)
        dropped = set(state.all_available_walls) - set(kept)
        logger.debug(f"Dropped stale wall numbers {sorted(dropped)}")
        new_state = replace(
            state,
            all_available_walls=kept,
            walls=tuple(w for w in state.walls if w in kept),
            removed_walls=tuple(w for w in state.removed_walls if w in kept),
        )
        return EditResult(new_state, value=sorted(dropped))

    def apply_floor_plan_preset(self, state: RoomState, preset: FloorPlanPreset | str) -> EditResult:
        """Apply a named standard-wall configuration and clear all elements.

        Present custom walls stay present.
        """
        try:
            preset = FloorPlanPreset(preset)
        except ValueError:
            return EditResult.rejected(state, f"Unknown floor plan preset '{preset}'.")
        customs_present = [w for w in state.walls if w not in STANDARD_WALL_NUMBERS]
        customs_removed = [w for w in state.removed_walls if w not in STANDARD_WALL_NUMBERS]
        new_state = replace(
            state,
            walls=_sorted_walls((*preset.walls, *customs_present)),
            removed_walls=_sorted_walls((*preset.removed_walls, *customs_removed)),
            elements=(),
            materials={},
        )
        return EditResult(new_state)


class DoorEditor:
    """Commands that place, move and remove doors.

    A door's position is the center of its opening as a percentage of the
    wall length. Positions are clamped so the whole opening stays on the
    wall; a door wider than its wall is rejected.
    """

    @staticmethod
    def _clamp_position(position: float, width: float, wall_length: float) -> float:
        half = width / 2 / wall_length * 100
        return max(half, min(position, 100 - half))

    def _check_fit(self, state: RoomState, wall_number: int, width: float) -> str | float:
        """Wall length in inches, or a rejection message."""
        if not state.is_wall_present(wall_number):
            return f"{wall_name(wall_number)} is not present."
        length = state.wall_length_inches(wall_number)
        if length is None:
            return f"{wall_name(wall_number)} does not exist."
        if width <= 0:
            return "Door width must be positive."
        if width > length:
            return f"A {width:g}\" door does not fit on {wall_name(wall_number)}."
        return length

    def add_door(
        self,
        state: RoomState,
        wall_number: int,
        position: float = 50.0,
        door_type: DoorType | str = DoorType.STANDARD,
        width: float | None = None,
    ) -> EditResult:
        """Place a door on a present wall.

        Returns:
            EditResult whose value is the new door id.
        """
        door_type = DoorType(door_type)
        width = door_type.default_width if width is None else width
        fit = self._check_fit(state, wall_number, width)
        if isinstance(fit, str):
            return EditResult.rejected(state, fit)
        door = Door(
            id=_next_id("door", (d.id for d in state.doors)),
            wall_number=wall_number,
            position=self._clamp_position(position, width, fit),
            width=width,
            type=door_type,
        )
        return EditResult(replace(state, doors=(*state.doors, door)), value=door.id)

    def update_door(
        self,
        state: RoomState,
        door_id: str,
        position: float | None = None,
        width: float | None = None,
        door_type: DoorType | str | None = None,
    ) -> EditResult:
        """Change a door's position, width or type."""
        door = state.door(door_id)
        if door is None:
            return EditResult.rejected(state, f"Door {door_id} does not exist.")
        new_width = door.width if width is None else width
        fit = self._check_fit(state, door.wall_number, new_width)
        if isinstance(fit, str):
            return EditResult.rejected(state, fit)
        updated = replace(
            door,
            position=self._clamp_position(door.position if position is None else position, new_width, fit),
            width=new_width,
            type=door.type if door_type is None else DoorType(door_type),
        )
        new_state = replace(
            state, doors=tuple(updated if d.id == door_id else d for d in state.doors)
        )
        return EditResult(new_state)

    def remove_door(self, state: RoomState, door_id: str) -> EditResult:
        if state.door(door_id) is None:
            return EditResult.rejected(state, f"Door {door_id} does not exist.")
        return EditResult(replace(state, doors=tuple(d for d in state.doors if d.id != door_id)))


class ElementEditor:
    """Commands that add, resize, restyle and delete elements.

    Attributes:
        tolerances: Layout tolerances.
        clearance_service: Used to keep new elements out of door swings.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        clearance_service: DoorClearanceService | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.clearance_service = clearance_service or DoorClearanceService(self.tolerances)

    def add_element(self, state: RoomState, element_type: str) -> EditResult:
        """Add a catalog element at the room center.

        When the center blocks a door swing, a coarse grid is searched for a
        free spot; if none exists the center is kept and a warning message
        is returned. New cabinets get the default material.

        Returns:
            EditResult whose value is the new element id.
        """
        spec = get_element_spec(element_type)
        if spec is None:
            logger.warning(f"Cannot add element: unknown type '{element_type}'")
            return EditResult.rejected(state, f"Unknown element type '{element_type}'.")

        w = spec.default_width * state.scale
        h = spec.default_depth * state.scale
        position = Point2D(state.room_width / 2 - w / 2, state.room_height / 2 - h / 2)
        message = None
        if self.clearance_service.collides(state, position.x, position.y, w, h):
            free = self._find_free_spot(state, w, h)
            if free is None:
                message = (
                    "Element placed in door clearance area. "
                    "Please move it to ensure proper door access."
                )
                logger.warning(message)
            else:
                position = free

        element = Element(
            id=_next_id("el", (e.id for e in state.elements)),
            type=spec.type,
            category=spec.category,
            x=position.x,
            y=position.y,
            width=spec.default_width,
            depth=spec.default_depth,
            actual_height=spec.height,
            mount_height=spec.mount_height or 0.0,
        )
        materials = state.materials
        if element.is_cabinet:
            materials = {**materials, element.id: DEFAULT_MATERIAL}
        new_state = replace(state, elements=(*state.elements, element), materials=materials)
        return EditResult(new_state, message=message, value=element.id)

    def _find_free_spot(self, state: RoomState, w: float, h: float) -> Point2D | None:
        step = self.tolerances.placement_grid_step
        y = 0.0
        while y < state.room_height - h:
            x = 0.0
            while x < state.room_width - w:
                if not self.clearance_service.collides(state, x, y, w, h):
                    return Point2D(x, y)
                x += step
            y += step
        return None

    def update_element_dimensions(
        self, state: RoomState, element_id: str, prop: str, value: float
    ) -> EditResult:
        """Change one dimension of an element.

        Width and depth are set directly. Heights are clamped between the
        catalog minimum and the wall height, less the mount height for
        wall-mounted types; fixed-height types cannot be resized. Mount
        height is clamped so the element stays below the ceiling.

        Args:
            state: Current room state.
            element_id: Element to change.
            prop: One of ``width``, ``depth``, ``actual_height`` or
                ``mount_height``.
            value: New value in inches.
        """
        if value is None or math.isnan(value) or (value <= 0 and prop != "mount_height"):
            return EditResult.rejected(state, "Dimensions must be positive numbers.")
        element = state.element(element_id)
        if element is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        spec = get_element_spec(element.type)
        if spec is None:
            logger.warning(f"Missing catalog entry for element type '{element.type}'")
            return EditResult.rejected(state, f"Unknown element type '{element.type}'.")

        if prop == "width":
            updated = replace(element, width=value)
        elif prop == "depth":
            updated = replace(element, depth=value)
        elif prop == "actual_height":
            if spec.has_fixed_height:
                return EditResult.rejected(state, f"{spec.name} has a fixed height.")
            max_height = state.wall_height
            if spec.is_wall_mounted:
                max_height -= element.mount_height
            min_height = spec.min_height or DEFAULT_MIN_HEIGHT
            updated = replace(element, actual_height=max(min_height, min(value, max_height)))
        elif prop == "mount_height":
            return self.set_mount_height(state, element_id, value)
        else:
            return EditResult.rejected(state, f"Unknown dimension '{prop}'.")
        return EditResult(state.replace_element(updated))

    def set_mount_height(self, state: RoomState, element_id: str, inches: float) -> EditResult:
        """Set the floor-to-bottom distance, keeping the element below the ceiling."""
        element = state.element(element_id)
        if element is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        max_mount = max(0.0, state.wall_height - element.actual_height)
        mount = max(0.0, min(inches, max_mount))
        return EditResult(state.replace_element(replace(element, mount_height=mount)))

    def rotate_element(self, state: RoomState, element_id: str, delta: float = 90) -> EditResult:
        """Rotate an element by quarter turns. The new footprint is not revalidated."""
        element = state.element(element_id)
        if element is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        rotation = normalize_rotation(element.rotation + delta)
        return EditResult(state.replace_element(replace(element, rotation=rotation)))

    def set_hinge_direction(
        self, state: RoomState, element_id: str, direction: HingeDirection | str
    ) -> EditResult:
        element = state.element(element_id)
        if element is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        updated = replace(element, hinge_direction=HingeDirection(direction))
        return EditResult(state.replace_element(updated))

    def delete_element(self, state: RoomState, element_id: str) -> EditResult:
        """Remove an element and its material choice."""
        if state.element(element_id) is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        new_state = replace(
            state,
            elements=tuple(e for e in state.elements if e.id != element_id),
            materials={k: v for k, v in state.materials.items() if k != element_id},
        )
        return EditResult(new_state)

    def set_material(self, state: RoomState, element_id: str, material: str) -> EditResult:
        """Choose the material of a cabinet."""
        element = state.element(element_id)
        if element is None:
            return EditResult.rejected(state, f"Element {element_id} does not exist.")
        if not element.is_cabinet:
            return EditResult.rejected(state, "Only cabinets have a material.")
        return EditResult(replace(state, materials={**state.materials, element_id: material}))

    def set_color_count(self, state: RoomState, count: ColorCount | str | int) -> EditResult:
        try:
            color_count = ColorCount(str(count))
        except ValueError:
            return EditResult.rejected(state, f"Unsupported color count '{count}'.")
        return EditResult(replace(state, color_count=color_count))
