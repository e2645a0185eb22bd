"""Door swing clearance zones.

Every door reserves a rectangle on the room side of its wall so the door
can open. On the four standard walls the rectangle is axis-aligned; on
custom walls it is rotated to the wall's normal and collision tests use
its axis-aligned bounding box.
"""

from __future__ import annotations

from ..entities import Door, RoomState
from ..value_objects import (
    STANDARD_WALL_NUMBERS,
    Bounds,
    ClearanceZone,
    LayoutTolerances,
    Point2D,
)

__all__ = ["DoorClearanceService"]


class DoorClearanceService:
    """Computes door clearance zones and tests placements against them.

    Attributes:
        tolerances: Layout tolerances providing the clearance multipliers.
    """

    def __init__(self, tolerances: LayoutTolerances | None = None) -> None:
        self.tolerances = tolerances or LayoutTolerances()

    def clearance_zones(self, state: RoomState) -> list[ClearanceZone]:
        """Clearance zones of all doors on present walls.

        Args:
            state: Room to inspect.

        Returns:
            One zone per door whose wall is present.
        """
        zones = []
        for door in state.doors:
            if not state.is_wall_present(door.wall_number):
                continue
            zone = self.zone_for_door(state, door)
            if zone is not None:
                zones.append(zone)
        return zones

    def zone_for_door(self, state: RoomState, door: Door) -> ClearanceZone | None:
        """Clearance zone of a single door, or None if its wall is unknown."""
        clear_width = door.width * state.scale * self.tolerances.door_clearance_width_multiplier
        clear_depth = door.width * state.scale * self.tolerances.door_clearance_depth_multiplier
        fraction = door.position / 100.0

        if door.wall_number in STANDARD_WALL_NUMBERS:
            bounds = self._standard_zone(state, door.wall_number, fraction, clear_width, clear_depth)
            corners = (
                Point2D(bounds.left, bounds.top),
                Point2D(bounds.right, bounds.top),
                Point2D(bounds.right, bounds.bottom),
                Point2D(bounds.left, bounds.bottom),
            )
            return ClearanceZone(door.id, door.wall_number, bounds, corners)

        wall = state.custom_wall(door.wall_number)
        if wall is None:
            return None
        segment = wall.segment()
        direction = segment.direction
        normal = segment.normal
        door_center = segment.point_at(fraction)
        center = door_center.offset(normal.x * clear_depth / 2, normal.y * clear_depth / 2)

        half_w = clear_width / 2
        half_d = clear_depth / 2
        corners = tuple(
            center.offset(
                sw * direction.x * half_w + sd * normal.x * half_d,
                sw * direction.y * half_w + sd * normal.y * half_d,
            )
            for sw, sd in ((-1, -1), (1, -1), (1, 1), (-1, 1))
        )
        return ClearanceZone(
            door_id=door.id,
            wall_number=door.wall_number,
            bounds=Bounds.enclosing(list(corners)),
            corners=corners,
            angle=segment.angle_degrees + 90.0,
        )

    @staticmethod
    def _standard_zone(
        state: RoomState,
        wall_number: int,
        fraction: float,
        clear_width: float,
        clear_depth: float,
    ) -> Bounds:
        room_w = state.room_width
        room_h = state.room_height
        if wall_number == 1:
            cx = room_w * fraction
            return Bounds(cx - clear_width / 2, 0.0, clear_width, clear_depth)
        if wall_number == 3:
            cx = room_w * fraction
            return Bounds(cx - clear_width / 2, room_h - clear_depth, clear_width, clear_depth)
        cy = room_h * fraction
        if wall_number == 2:
            return Bounds(room_w - clear_depth, cy - clear_width / 2, clear_depth, clear_width)
        return Bounds(0.0, cy - clear_width / 2, clear_depth, clear_width)

    def colliding_doors(
        self, state: RoomState, x: float, y: float, w: float, h: float
    ) -> list[str]:
        """Ids of doors whose clearance zone the box overlaps."""
        box = Bounds(x, y, w, h)
        return [
            zone.door_id
            for zone in self.clearance_zones(state)
            if box.overlaps(zone.bounds)
        ]

    def collides(self, state: RoomState, x: float, y: float, w: float, h: float) -> bool:
        """Check whether a box overlaps any door clearance zone.

        Touching edges count as overlap.
        """
        return bool(self.colliding_doors(state, x, y, w, h))
