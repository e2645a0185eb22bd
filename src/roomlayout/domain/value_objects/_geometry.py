"""Planar geometry value objects in design-space units."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point on the floor plan, in design-space units."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def offset(self, dx: float, dy: float) -> Point2D:
        """Return a new point shifted by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle anchored at its top-left corner.

    The floor plan uses screen orientation: y grows toward the south wall.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Extent along x.
        height: Extent along y.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Bounds width and height must be non-negative")

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: Bounds, allowance: float = 0.0) -> bool:
        """Check whether two rectangles overlap.

        Edges that merely touch count as overlapping. A positive allowance
        shrinks ``other`` on every side, so rectangles may interpenetrate by
        up to that amount without counting as a collision.

        Args:
            other: The rectangle to test against.
            allowance: Permitted interpenetration on each side.

        Returns:
            True if the rectangles overlap beyond the allowance.
        """
        return not (
            self.right < other.left + allowance
            or self.left > other.right - allowance
            or self.bottom < other.top + allowance
            or self.top > other.bottom - allowance
        )

    def contains(self, other: Bounds) -> bool:
        """Check whether ``other`` lies entirely inside this rectangle."""
        return (
            other.left >= self.left
            and other.right <= self.right
            and other.top >= self.top
            and other.bottom <= self.bottom
        )

    @classmethod
    def enclosing(cls, points: list[Point2D]) -> Bounds:
        """Smallest axis-aligned rectangle containing all points."""
        if not points:
            raise ValueError("At least one point is required")
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)


@dataclass(frozen=True)
class WallSegment:
    """A wall as a straight segment with thickness.

    Standard walls lie on the room boundary; custom walls may sit anywhere
    inside the room at any angle.

    Attributes:
        wall_number: Identifier of the wall (1-4 standard, >4 custom).
        x1: Start point x.
        y1: Start point y.
        x2: End point x.
        y2: End point y.
        thickness: Wall thickness in design units.
        is_custom: True for user-drawn walls.
    """

    wall_number: int
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    is_custom: bool = False

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Wall thickness must be positive")

    @property
    def start(self) -> Point2D:
        return Point2D(self.x1, self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(self.x2, self.y2)

    @property
    def length(self) -> float:
        """Length of the centerline."""
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def angle(self) -> float:
        """Direction of the centerline in radians."""
        return math.atan2(self.y2 - self.y1, self.x2 - self.x1)

    @property
    def angle_degrees(self) -> float:
        return math.degrees(self.angle)

    @property
    def midpoint(self) -> Point2D:
        return Point2D((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    @property
    def direction(self) -> Point2D:
        """Unit vector from start to end."""
        length = self.length
        if length == 0:
            return Point2D(1.0, 0.0)
        return Point2D((self.x2 - self.x1) / length, (self.y2 - self.y1) / length)

    @property
    def normal(self) -> Point2D:
        """Unit normal at ``angle + 90`` degrees."""
        direction = self.direction
        return Point2D(-direction.y, direction.x)

    def distance_to_line(self, point: Point2D) -> float:
        """Perpendicular distance from a point to the wall's infinite line."""
        length = self.length
        if length == 0:
            return point.distance_to(self.start)
        a = self.y2 - self.y1
        b = self.x1 - self.x2
        c = self.x2 * self.y1 - self.x1 * self.y2
        return abs(a * point.x + b * point.y + c) / length

    def projection_parameter(self, point: Point2D) -> float:
        """Parameter t of the point's projection onto the centerline.

        t is 0 at the start point and 1 at the end point; values outside
        [0, 1] fall beyond the segment's ends.
        """
        dx = self.x2 - self.x1
        dy = self.y2 - self.y1
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return 0.0
        return ((point.x - self.x1) * dx + (point.y - self.y1) * dy) / length_sq

    def point_at(self, t: float) -> Point2D:
        """Point on the centerline at parameter t."""
        return Point2D(
            self.x1 + t * (self.x2 - self.x1),
            self.y1 + t * (self.y2 - self.y1),
        )

    def closest_point(self, point: Point2D) -> Point2D:
        """Closest point on the segment (not the infinite line)."""
        t = max(0.0, min(1.0, self.projection_parameter(point)))
        return self.point_at(t)
