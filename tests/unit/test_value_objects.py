"""Unit tests for domain value objects.

These tests verify:
- Point2D and Bounds geometry, including the overlap allowance
- WallSegment projections and distances
- Wall, door and preset enumerations
- Rotation normalization and tolerance validation
"""

import math

import pytest

from roomlayout.domain.entities import RoomState
from roomlayout.domain.value_objects import (
    Bounds,
    DoorType,
    EditResult,
    FloorPlanPreset,
    LayoutTolerances,
    Point2D,
    SnapResult,
    SnapSource,
    WallSegment,
    normalize_rotation,
    wall_name,
)


class TestPoint2D:
    """Tests for Point2D."""

    def test_distance(self) -> None:
        assert Point2D(0, 0).distance_to(Point2D(3, 4)) == 5.0

    def test_offset_returns_new_point(self) -> None:
        p = Point2D(1, 2)
        assert p.offset(2, -1) == Point2D(3, 1)
        assert p == Point2D(1, 2)


class TestBounds:
    """Tests for Bounds."""

    def test_edges_and_center(self) -> None:
        b = Bounds(10, 20, 30, 40)
        assert (b.left, b.right, b.top, b.bottom) == (10, 40, 20, 60)
        assert b.center == Point2D(25, 40)

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Bounds(0, 0, -1, 5)

    def test_touching_edges_overlap(self) -> None:
        assert Bounds(0, 0, 10, 10).overlaps(Bounds(10, 0, 10, 10))

    def test_separated_boxes_do_not_overlap(self) -> None:
        assert not Bounds(0, 0, 10, 10).overlaps(Bounds(11, 0, 10, 10))

    def test_allowance_permits_small_interpenetration(self) -> None:
        a = Bounds(0, 0, 10, 10)
        b = Bounds(7, 0, 10, 10)
        assert a.overlaps(b)
        assert not a.overlaps(b, allowance=5)

    def test_allowance_exceeded_collides(self) -> None:
        assert Bounds(0, 0, 10, 10).overlaps(Bounds(4, 0, 10, 10), allowance=5)

    def test_enlarged_box_still_overlaps(self) -> None:
        other = Bounds(50, 50, 20, 20)
        small = Bounds(45, 45, 20, 20)
        large = Bounds(40, 40, 40, 40)
        assert small.overlaps(other, allowance=5)
        assert large.contains(small)
        assert large.overlaps(other, allowance=5)

    def test_contains(self) -> None:
        outer = Bounds(0, 0, 100, 100)
        assert outer.contains(Bounds(10, 10, 20, 20))
        assert not outer.contains(Bounds(90, 90, 20, 20))

    def test_enclosing(self) -> None:
        b = Bounds.enclosing([Point2D(3, 1), Point2D(-2, 4), Point2D(0, 0)])
        assert b == Bounds(-2, 0, 5, 4)

    def test_enclosing_requires_points(self) -> None:
        with pytest.raises(ValueError):
            Bounds.enclosing([])


class TestWallSegment:
    """Tests for WallSegment."""

    def test_horizontal_segment(self) -> None:
        seg = WallSegment(1, 0, 0, 10, 0, thickness=10)
        assert seg.length == 10
        assert seg.angle == 0
        assert seg.midpoint == Point2D(5, 0)
        assert seg.normal.x == pytest.approx(0)
        assert seg.normal.y == pytest.approx(1)

    def test_vertical_segment_angle(self) -> None:
        seg = WallSegment(2, 0, 0, 0, 10, thickness=10)
        assert seg.angle_degrees == pytest.approx(90)
        assert seg.normal.x == pytest.approx(-1)

    def test_distance_to_infinite_line(self) -> None:
        seg = WallSegment(1, 0, 0, 10, 0, thickness=10)
        assert seg.distance_to_line(Point2D(5, 3)) == pytest.approx(3)
        assert seg.distance_to_line(Point2D(50, -4)) == pytest.approx(4)

    def test_projection_parameter(self) -> None:
        seg = WallSegment(1, 0, 0, 10, 0, thickness=10)
        assert seg.projection_parameter(Point2D(5, 3)) == pytest.approx(0.5)
        assert seg.projection_parameter(Point2D(15, 0)) == pytest.approx(1.5)
        assert seg.point_at(0.25) == Point2D(2.5, 0)

    def test_closest_point_clamps_to_segment(self) -> None:
        seg = WallSegment(1, 0, 0, 10, 0, thickness=10)
        assert seg.closest_point(Point2D(15, 2)) == Point2D(10, 0)
        assert seg.closest_point(Point2D(-3, 2)) == Point2D(0, 0)

    def test_diagonal_distance(self) -> None:
        seg = WallSegment(5, 0, 0, 10, 10, thickness=6, is_custom=True)
        assert seg.distance_to_line(Point2D(10, 0)) == pytest.approx(math.sqrt(50))

    def test_thickness_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            WallSegment(1, 0, 0, 10, 0, thickness=0)


class TestWallEnumerations:
    """Tests for wall naming, door types and presets."""

    def test_standard_wall_names(self) -> None:
        assert wall_name(1) == "North Wall"
        assert wall_name(4) == "West Wall"

    def test_custom_wall_name(self) -> None:
        assert wall_name(7) == "Custom Wall 7"

    @pytest.mark.parametrize(
        "door_type,width",
        [
            (DoorType.STANDARD, 32),
            (DoorType.PANTRY, 24),
            (DoorType.ROOM, 36),
            (DoorType.DOUBLE, 64),
            (DoorType.SLIDING, 48),
        ],
    )
    def test_door_default_widths(self, door_type: DoorType, width: float) -> None:
        assert door_type.default_width == width

    def test_preset_walls(self) -> None:
        assert FloorPlanPreset.GALLEY_OPEN.walls == (1, 3)
        assert FloorPlanPreset.GALLEY_OPEN.removed_walls == (2, 4)
        assert FloorPlanPreset.TRADITIONAL.removed_walls == ()

    def test_preset_from_string(self) -> None:
        assert FloorPlanPreset("open-concept") == FloorPlanPreset.OPEN_CONCEPT


class TestRotation:
    """Tests for normalize_rotation."""

    @pytest.mark.parametrize(
        "degrees,expected",
        [(0, 0), (90, 90), (360, 0), (450, 90), (-90, 270), (268, 270), (359, 0)],
    )
    def test_normalize(self, degrees: float, expected: int) -> None:
        assert normalize_rotation(degrees) == expected


class TestLayoutTolerances:
    """Tests for LayoutTolerances."""

    def test_defaults(self) -> None:
        t = LayoutTolerances()
        assert t.canvas_size == 600
        assert t.wall_collision_buffer == 50
        assert t.cabinet_snap_distance == 8
        assert t.wall_snap_distance == 12

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="cabinet_snap_distance"):
            LayoutTolerances(cabinet_snap_distance=-1)

    def test_zero_grid_step_rejected(self) -> None:
        with pytest.raises(ValueError):
            LayoutTolerances(grid_search_step=0)


class TestResults:
    """Tests for result value objects."""

    def test_unsnapped(self) -> None:
        r = SnapResult.unsnapped(3, 4)
        assert not r.snapped
        assert r.source == SnapSource.NONE
        assert r.point == Point2D(3, 4)

    def test_rejected_keeps_state(self) -> None:
        state = RoomState.create(10, 8)
        r = EditResult.rejected(state, "nope")
        assert not r.accepted
        assert r.state is state
        assert r.message == "nope"
