"""Corrective displacement of elements that crowd a wall.

An element whose back faces a nearby wall is pulled in until its back
edge sits a small gap from the wall face, so cabinets end up flush. Any
other side facing a nearby wall is pushed out until the front clearance
is restored.
"""

from __future__ import annotations

import logging
import math

from ..entities import RoomState
from ..value_objects import LayoutTolerances, Point2D, WallSegment
from .collision import CollisionDetector

logger = logging.getLogger(__name__)

__all__ = ["PushAwayResolver", "back_direction"]


def back_direction(rotation: float) -> Point2D:
    """Unit vector pointing out of an element's back.

    At rotation 0 the back faces north (negative y); rotation turns it
    clockwise on screen.
    """
    radians = math.radians(rotation)
    return Point2D(math.sin(radians), -math.cos(radians))


class PushAwayResolver:
    """Moves a box off or onto the walls it crowds.

    Attributes:
        tolerances: Layout tolerances providing gaps and thresholds.
        collision_detector: Detector deciding which walls are crowded.
    """

    def __init__(
        self,
        tolerances: LayoutTolerances | None = None,
        collision_detector: CollisionDetector | None = None,
    ) -> None:
        self.tolerances = tolerances or LayoutTolerances()
        self.collision_detector = collision_detector or CollisionDetector(self.tolerances)

    def push_away_from_wall(
        self,
        state: RoomState,
        x: float,
        y: float,
        w: float,
        h: float,
        rotation: float = 0,
    ) -> Point2D | None:
        """Correct a box position against every wall it crowds.

        Walls are visited in order and each correction starts from the
        position produced by the previous one. A wall counts as crowded
        when it meets the wall-collision criterion.

        Args:
            state: Room providing the walls.
            x: Left edge of the box.
            y: Top edge of the box.
            w: Box width in design units.
            h: Box height in design units.
            rotation: Element rotation in degrees, used to find its back.

        Returns:
            The corrected top-left corner clamped into the room, or None
            when no wall was crowded.
        """
        back = back_direction(rotation)
        current = Point2D(x, y)
        touched = False

        for segment in state.present_wall_segments():
            if not self.collision_detector.is_near_wall(segment, current.x, current.y, w, h):
                continue
            touched = True
            current = self._correct_against(segment, current, w, h, back)

        if not touched:
            return None
        clamped = state.clamp_to_room(current.x, current.y, w, h)
        logger.debug(f"Pushed box from ({x:.1f}, {y:.1f}) to ({clamped.x:.1f}, {clamped.y:.1f})")
        return clamped

    def _correct_against(
        self,
        segment: WallSegment,
        position: Point2D,
        w: float,
        h: float,
        back: Point2D,
    ) -> Point2D:
        center = Point2D(position.x + w / 2, position.y + h / 2)
        foot = segment.point_at(segment.projection_parameter(center))
        distance = center.distance_to(foot)

        if distance == 0:
            # Center on the wall line: leave along the wall normal.
            toward = Point2D(-segment.normal.x, -segment.normal.y)
        else:
            toward = Point2D((foot.x - center.x) / distance, (foot.y - center.y) / distance)

        # Half of the box measured along the wall normal.
        half_extent = (w * abs(toward.x) + h * abs(toward.y)) / 2
        faces_wall = back.x * toward.x + back.y * toward.y > 1e-9

        if faces_wall:
            target = segment.thickness / 2 + self.tolerances.push_back_gap + half_extent
            logger.debug(f"Back of box faces wall {segment.wall_number}; pulling flush")
        else:
            target = segment.thickness / 2 + self.tolerances.push_front_clearance + half_extent
            if distance >= target:
                return position
            logger.debug(f"Box crowds wall {segment.wall_number}; pushing clear")

        move_toward = distance - target
        return position.offset(toward.x * move_toward, toward.y * move_toward)
