"""Snap rules that turn a raw drag position into a corrected candidate.

Each rule is a pure function of the room state and the candidate box. The
resolver applies them in a fixed order (cabinet, room boundary, custom
wall) and reports which one produced the final position.
"""

from __future__ import annotations

import logging

from ..entities import RoomState
from ..value_objects import (
    STANDARD_WALL_NUMBERS,
    LayoutTolerances,
    Point2D,
    SnapResult,
    SnapSource,
    WallSegment,
)
from .collision import CollisionDetector
from .push_away import PushAwayResolver

logger = logging.getLogger(__name__)

__all__ = ["SnapResolver"]


class SnapResolver:
    """Computes snapped positions for elements and wall endpoints.

    Attributes:
        tolerances: Layout tolerances providing snap radii.
        collision_detector: Used to detect wall collisions after a snap.
        push_resolver: Used to correct wall collisions after a snap.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        collision_detector: CollisionDetector | None = None,
        push_resolver: PushAwayResolver | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.collision_detector = collision_detector or CollisionDetector(self.tolerances)
        self.push_resolver = push_resolver or PushAwayResolver(
            self.tolerances, self.collision_detector
        )

    def snap_to_cabinet(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        exclude_id: str | None = None,
    ) -> SnapResult:
        """Align a box flush against a nearby cabinet edge.

        Four cases are checked per cabinet in this order: the box's left
        edge near the cabinet's right edge, its right edge near the
        cabinet's left edge, its top edge near the cabinet's bottom edge,
        and its bottom edge near the cabinet's top edge. A horizontal snap
        also requires the boxes to overlap vertically and vice versa. The
        first match in element order wins.
        """
        snap = self.tolerances.cabinet_snap_distance
        for other in state.elements:
            if other.id == exclude_id or not other.is_cabinet:
                continue
            el_w, el_h = other.footprint(state.scale)
            el_x, el_y = other.x, other.y

            rows_overlap = abs(el_y - y) < el_h and abs(el_y + el_h - (y + h)) < el_h
            cols_overlap = abs(el_x - x) < el_w and abs(el_x + el_w - (x + w)) < el_w

            if abs(el_x + el_w - x) < snap and rows_overlap:
                return SnapResult(el_x + el_w, y, True, SnapSource.CABINET)
            if abs(el_x - (x + w)) < snap and rows_overlap:
                return SnapResult(el_x - w, y, True, SnapSource.CABINET)
            if abs(el_y + el_h - y) < snap and cols_overlap:
                return SnapResult(x, el_y + el_h, True, SnapSource.CABINET)
            if abs(el_y - (y + h)) < snap and cols_overlap:
                return SnapResult(x, el_y - h, True, SnapSource.CABINET)
        return SnapResult.unsnapped(x, y)

    def snap_to_wall(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        rotation: float = 0,
    ) -> SnapResult:
        """Snap a box to the room boundary and resolve wall collisions.

        A box edge within the wall snap distance of the room boundary is
        moved flush with it, then the box is clamped into the room. If the
        result collides with a wall it is pushed away; when no push applies
        or the pushed box still collides, a small grid around the candidate
        is searched for a collision-free spot.

        Args:
            state: Room providing dimensions and walls.
            x: Left edge of the box.
            y: Top edge of the box.
            w: Box width in design units.
            h: Box height in design units.
            rotation: Element rotation, used by push-away.

        Returns:
            SnapResult whose ``snapped`` flag is set only when boundary
            snapping moved the box. A push-away correction keeps the WALL
            source but is not a snap, so later snap rules may still apply.
        """
        room_w = state.room_width
        room_h = state.room_height
        snap = self.tolerances.wall_snap_distance

        sx, sy = x, y
        if abs(x) < snap:
            sx = 0.0
        if abs(x + w - room_w) < snap:
            sx = room_w - w
        if abs(y) < snap:
            sy = 0.0
        if abs(y + h - room_h) < snap:
            sy = room_h - h
        clamped = state.clamp_to_room(sx, sy, w, h)
        boundary_snapped = (sx, sy) != (x, y)

        if not self.collision_detector.wall_collision(state, clamped.x, clamped.y, w, h):
            if boundary_snapped:
                return SnapResult(clamped.x, clamped.y, True, SnapSource.WALL)
            return SnapResult.unsnapped(clamped.x, clamped.y)

        pushed = self.push_resolver.push_away_from_wall(
            state, clamped.x, clamped.y, w, h, rotation
        )
        if pushed is not None and self._is_settled(state, pushed, w, h, rotation):
            return SnapResult(pushed.x, pushed.y, boundary_snapped, SnapSource.WALL)

        origin = pushed or clamped
        found = self._grid_search(state, origin, w, h)
        if found is not None:
            logger.debug(f"Grid search moved box to ({found.x:.1f}, {found.y:.1f})")
            return SnapResult.unsnapped(found.x, found.y)
        if pushed is not None:
            return SnapResult(pushed.x, pushed.y, boundary_snapped, SnapSource.WALL)
        if boundary_snapped:
            return SnapResult(clamped.x, clamped.y, True, SnapSource.WALL)
        return SnapResult.unsnapped(clamped.x, clamped.y)

    def _is_settled(
        self, state: RoomState, position: Point2D, w: float, h: float, rotation: float
    ) -> bool:
        """Check whether another push would leave the box where it is.

        A box flush against a wall behind it still meets the collision
        criterion, so a pushed position counts as colliding only when a
        second push would move it again.
        """
        again = self.push_resolver.push_away_from_wall(state, position.x, position.y, w, h, rotation)
        if again is None:
            return True
        return abs(again.x - position.x) < 1e-6 and abs(again.y - position.y) < 1e-6

    def _grid_search(
        self, state: RoomState, origin: Point2D, w: float, h: float
    ) -> Point2D | None:
        radius = self.tolerances.grid_search_radius
        step = self.tolerances.grid_search_step
        count = int(2 * radius // step) + 1
        offsets = [-radius + i * step for i in range(count)]
        for ox in offsets:
            for oy in offsets:
                test = state.clamp_to_room(origin.x + ox, origin.y + oy, w, h)
                if not self.collision_detector.wall_collision(state, test.x, test.y, w, h):
                    return test
        return None

    def snap_to_wall_endpoints(
        self,
        state: RoomState,
        x: float,
        y: float,
        exclude_wall_id: int | None = None,
    ) -> SnapResult:
        """Snap a wall-drawing point to the nearest existing wall feature.

        Candidates are custom wall endpoints, the four room corners, and the
        perpendicular foot on the inner edge of each present standard wall.
        The nearest candidate within the endpoint snap distance wins.

        Args:
            state: Room providing walls and dimensions.
            x: Point x coordinate.
            y: Point y coordinate.
            exclude_wall_id: Custom wall whose endpoints are ignored.

        Returns:
            SnapResult positioned on the chosen feature, or the input point
            unsnapped.
        """
        point = Point2D(x, y)
        best = SnapResult.unsnapped(x, y)
        best_distance = self.tolerances.endpoint_snap_distance

        def consider(candidate: Point2D, source: SnapSource, wall_number: int | None) -> None:
            nonlocal best, best_distance
            distance = point.distance_to(candidate)
            if distance <= best_distance:
                best_distance = distance
                best = SnapResult(candidate.x, candidate.y, True, source, wall_number)

        for wall in state.custom_walls:
            if wall.wall_number == exclude_wall_id:
                continue
            consider(Point2D(wall.x1, wall.y1), SnapSource.WALL_ENDPOINT, wall.wall_number)
            consider(Point2D(wall.x2, wall.y2), SnapSource.WALL_ENDPOINT, wall.wall_number)

        room_w, room_h = state.room_width, state.room_height
        for corner in (
            Point2D(0.0, 0.0),
            Point2D(room_w, 0.0),
            Point2D(room_w, room_h),
            Point2D(0.0, room_h),
        ):
            consider(corner, SnapSource.ROOM_CORNER, None)

        for edge in self._inner_edges(state):
            consider(edge.closest_point(point), SnapSource.WALL_EDGE, edge.wall_number)

        return best

    @staticmethod
    def _inner_edges(state: RoomState) -> list[WallSegment]:
        """Inner faces of the present standard walls."""
        w, h = state.room_width, state.room_height
        inset = state.standard_wall_thickness
        edges = {
            1: (0.0, inset, w, inset),
            2: (w - inset, 0.0, w - inset, h),
            3: (0.0, h - inset, w, h - inset),
            4: (inset, 0.0, inset, h),
        }
        return [
            WallSegment(n, *edges[n], thickness=inset)
            for n in STANDARD_WALL_NUMBERS
            if n in state.walls
        ]

    def snap_cabinet_to_custom_wall(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        exclude_wall_id: int | None = None,
    ) -> SnapResult:
        """Place a box against the nearest custom wall face.

        The box center is moved to the closest point on the nearest present
        custom wall within the custom-wall snap distance, then offset along
        the wall normal by half the wall thickness, half the box's smaller
        side and a small gap.

        Returns:
            SnapResult carrying the wall number and angle in degrees.
        """
        center = Point2D(x + w / 2, y + h / 2)
        best = SnapResult.unsnapped(x, y)
        best_distance = self.tolerances.custom_wall_snap_distance

        for wall in state.present_custom_walls():
            if wall.wall_number == exclude_wall_id:
                continue
            segment = wall.segment()
            closest = segment.closest_point(center)
            distance = center.distance_to(closest)
            if distance > best_distance:
                continue
            offset = segment.thickness / 2 + min(w, h) / 2 + self.tolerances.custom_wall_snap_gap
            normal = segment.normal
            snapped_center = closest.offset(normal.x * offset, normal.y * offset)
            best_distance = distance
            best = SnapResult(
                x=snapped_center.x - w / 2,
                y=snapped_center.y - h / 2,
                snapped=True,
                source=SnapSource.CUSTOM_WALL,
                wall_number=wall.wall_number,
                wall_angle=segment.angle_degrees,
            )
        return best

    def resolve(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        exclude_id: str | None = None,
        rotation: float = 0,
    ) -> SnapResult:
        """Apply the snap rules in order: cabinet, room boundary, custom wall.

        Exactly one rule provides the final position. If neither the
        cabinet nor the boundary rule snapped, the custom-wall rule may
        replace the boundary rule's position.
        """
        cabinet = self.snap_to_cabinet(state, x, y, w, h, exclude_id)
        if cabinet.snapped:
            logger.debug(f"Snapped to cabinet at ({cabinet.x:.1f}, {cabinet.y:.1f})")
            return cabinet

        wall = self.snap_to_wall(state, x, y, w, h, rotation)
        if wall.snapped:
            return wall

        custom = self.snap_cabinet_to_custom_wall(state, x, y, w, h)
        if custom.snapped:
            logger.debug(f"Snapped to custom wall {custom.wall_number}")
            return custom
        return wall
