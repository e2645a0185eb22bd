"""Collision queries for element placement.

All queries are pure: they read a RoomState and a candidate box in
design units and never modify anything.
"""

from __future__ import annotations

from ..entities import Element, RoomState
from ..value_objects import (
    Bounds,
    CollisionReport,
    LayoutTolerances,
    Point2D,
    WallSegment,
)
from .clearance import DoorClearanceService

__all__ = ["CollisionDetector"]


class CollisionDetector:
    """Detects collisions of a candidate box with walls, doors and cabinets.

    Wall collisions use a distance heuristic rather than exact polygon
    intersection: the box collides with a wall when its center lies closer
    to the wall's infinite line than half the wall thickness plus half the
    box's smaller side plus a buffer, and the center projects onto the wall
    within a small slack of its ends.

    Attributes:
        tolerances: Layout tolerances driving the thresholds.
        clearance_service: Door clearance zone provider.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        clearance_service: DoorClearanceService | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.clearance_service = clearance_service or DoorClearanceService(self.tolerances)

    def wall_threshold(self, segment: WallSegment, w: float, h: float) -> float:
        """Center distance below which a box collides with a wall."""
        return (segment.thickness + min(w, h)) / 2 + self.tolerances.wall_collision_buffer

    def is_near_wall(
        self, segment: WallSegment, x: float, y: float, w: float, h: float
    ) -> bool:
        """Check one wall against a box using the distance heuristic."""
        center = Point2D(x + w / 2, y + h / 2)
        t = segment.projection_parameter(center)
        slack = self.tolerances.wall_projection_slack
        if t < -slack or t > 1 + slack:
            return False
        return segment.distance_to_line(center) < self.wall_threshold(segment, w, h)

    def colliding_walls(
        self, state: RoomState, x: float, y: float, w: float, h: float
    ) -> list[int]:
        """Numbers of present walls the box collides with, in wall order."""
        return [
            segment.wall_number
            for segment in state.present_wall_segments()
            if self.is_near_wall(segment, x, y, w, h)
        ]

    def wall_collision(
        self, state: RoomState, x: float, y: float, w: float, h: float
    ) -> bool:
        """Check whether the box collides with any present wall."""
        return any(
            self.is_near_wall(segment, x, y, w, h)
            for segment in state.present_wall_segments()
        )

    def colliding_elements(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        exclude_id: str | None = None,
        vertical_span: tuple[float, float] | None = None,
    ) -> list[str]:
        """Ids of cabinets the box overlaps.

        Only cabinet-category elements take part. Boxes may interpenetrate
        by the overlap allowance without colliding. Elements stacked with a
        vertical gap of at least the vertical clearance never collide, which
        lets wall cabinets hang above base cabinets.

        Args:
            state: Room to inspect.
            x: Left edge of the box.
            y: Top edge of the box.
            w: Box width in design units.
            h: Box height in design units.
            exclude_id: Element to ignore, usually the one being moved.
            vertical_span: Bottom and top of the moving element in inches.
                Defaults to the span of ``exclude_id`` when it exists.

        Returns:
            Ids of overlapped cabinets, in element order.
        """
        if vertical_span is None and exclude_id is not None:
            moving = state.element(exclude_id)
            if moving is not None:
                vertical_span = moving.vertical_span

        box = Bounds(x, y, w, h)
        hits = []
        for other in state.elements:
            if other.id == exclude_id or not other.is_cabinet:
                continue
            if vertical_span is not None and self._vertically_separated(vertical_span, other):
                continue
            if box.overlaps(other.bounds(state.scale), self.tolerances.element_overlap_allowance):
                hits.append(other.id)
        return hits

    def element_collision(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        exclude_id: str | None = None,
        vertical_span: tuple[float, float] | None = None,
    ) -> bool:
        """Check whether the box overlaps any other cabinet."""
        return bool(self.colliding_elements(state, x, y, w, h, exclude_id, vertical_span))

    def _vertically_separated(self, span: tuple[float, float], other: Element) -> bool:
        bottom, top = span
        other_bottom, other_top = other.vertical_span
        gap = self.tolerances.vertical_clearance
        return top + gap <= other_bottom or other_top + gap <= bottom

    def door_clearance_collision(
        self, state: RoomState, x: float, y: float, w: float, h: float
    ) -> bool:
        """Check whether the box overlaps any door clearance zone."""
        return self.clearance_service.collides(state, x, y, w, h)

    def report(self, state: RoomState, element: Element) -> CollisionReport:
        """Collect everything an element currently collides with."""
        w, h = element.footprint(state.scale)
        return CollisionReport(
            element_id=element.id,
            walls=tuple(self.colliding_walls(state, element.x, element.y, w, h)),
            doors=tuple(
                self.clearance_service.colliding_doors(state, element.x, element.y, w, h)
            ),
            elements=tuple(
                self.colliding_elements(state, element.x, element.y, w, h, element.id)
            ),
        )
