"""Unit tests for collision queries and door clearance zones.

These tests verify:
- The wall distance heuristic and its projection slack
- Cabinet overlap with the interpenetration allowance and vertical exemption
- Clearance zones on standard and custom walls
"""

from dataclasses import replace

import pytest

from roomlayout.domain.entities import CustomWall, Door, RoomState
from roomlayout.domain.services import CollisionDetector, DoorClearanceService
from roomlayout.domain.value_objects import Bounds


@pytest.fixture
def detector() -> CollisionDetector:
    return CollisionDetector()


@pytest.fixture
def clearance() -> DoorClearanceService:
    return DoorClearanceService()


def with_custom_wall(state: RoomState, wall: CustomWall) -> RoomState:
    return replace(
        state,
        custom_walls=(*state.custom_walls, wall),
        walls=(*state.walls, wall.wall_number),
        all_available_walls=(*state.all_available_walls, wall.wall_number),
    )


class TestWallCollision:
    """Tests for the wall-collision heuristic."""

    def test_threshold(self, detector: CollisionDetector, room: RoomState) -> None:
        seg = room.standard_wall_segment(4)
        assert detector.wall_threshold(seg, 120, 120) == 115

    def test_box_in_room_center_is_clear(self, detector: CollisionDetector, room: RoomState) -> None:
        assert detector.colliding_walls(room, 240, 180, 120, 120) == []
        assert not detector.wall_collision(room, 240, 180, 120, 120)

    def test_box_inside_threshold_collides(self, detector: CollisionDetector, room: RoomState) -> None:
        assert detector.colliding_walls(room, 54, 200, 120, 120) == [4]

    def test_box_at_threshold_is_clear(self, detector: CollisionDetector, room: RoomState) -> None:
        assert not detector.wall_collision(room, 55, 200, 120, 120)

    def test_corner_box_collides_with_two_walls(
        self, detector: CollisionDetector, room: RoomState
    ) -> None:
        assert detector.colliding_walls(room, 0, 0, 120, 120) == [1, 4]

    def test_removed_wall_is_ignored(self, detector: CollisionDetector, room: RoomState) -> None:
        state = replace(room, walls=(1, 2, 3), removed_walls=(4,))
        assert not detector.wall_collision(state, 0, 200, 120, 120)

    def test_projection_beyond_wall_end_is_clear(
        self, detector: CollisionDetector, room: RoomState
    ) -> None:
        state = with_custom_wall(room, CustomWall(5, 200, 200, 400, 200))
        # Center (100, 200) lies on the wall's line but far past its start.
        assert detector.colliding_walls(state, 90, 190, 20, 20) == []

    def test_custom_wall_collision(self, detector: CollisionDetector, room: RoomState) -> None:
        state = with_custom_wall(room, CustomWall(5, 200, 200, 400, 200))
        assert detector.colliding_walls(state, 290, 210, 20, 20) == [5]


class TestElementCollision:
    """Tests for cabinet-to-cabinet overlap."""

    def test_overlap_detected(self, detector: CollisionDetector, big_room: RoomState, element_factory) -> None:
        state = replace(big_room, elements=(element_factory("el-1", x=100, y=100),))
        assert detector.colliding_elements(state, 110, 110, 24, 24) == ["el-1"]

    def test_small_interpenetration_allowed(
        self, detector: CollisionDetector, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=100, y=100),))
        # el-1 spans x 100..220; a 4-unit interpenetration stays within the allowance.
        assert not detector.element_collision(state, 216, 100, 120, 120)
        assert detector.element_collision(state, 210, 100, 120, 120)

    def test_excluded_element_ignored(
        self, detector: CollisionDetector, big_room: RoomState, element_factory
    ) -> None:
        state = replace(big_room, elements=(element_factory("el-1", x=100, y=100),))
        assert not detector.element_collision(state, 100, 100, 24, 24, exclude_id="el-1")

    def test_appliances_do_not_collide(
        self, detector: CollisionDetector, big_room: RoomState, element_factory
    ) -> None:
        state = replace(big_room, elements=(element_factory("el-1", "refrigerator", x=100, y=100),))
        assert not detector.element_collision(state, 100, 100, 24, 24)

    def test_wall_cabinet_hangs_above_base(
        self, detector: CollisionDetector, big_room: RoomState, element_factory
    ) -> None:
        base = element_factory("el-1", "base", x=100, y=100)
        upper = element_factory("el-2", "wall", x=300, y=300)
        state = replace(big_room, elements=(base, upper))
        assert not detector.element_collision(state, 100, 100, 24, 12, exclude_id="el-2")

    def test_small_vertical_gap_still_collides(
        self, detector: CollisionDetector, big_room: RoomState, element_factory
    ) -> None:
        state = replace(big_room, elements=(element_factory("el-1", x=100, y=100),))
        assert detector.element_collision(state, 100, 100, 24, 24, vertical_span=(36, 60))
        assert not detector.element_collision(state, 100, 100, 24, 24, vertical_span=(37.5, 60))

    def test_enlarged_box_still_collides(
        self, detector: CollisionDetector, big_room: RoomState, element_factory
    ) -> None:
        state = replace(big_room, elements=(element_factory("el-1", x=100, y=100),))
        assert detector.element_collision(state, 110, 110, 24, 24)
        assert detector.element_collision(state, 90, 90, 60, 60)

    def test_report(self, detector: CollisionDetector, room: RoomState, element_factory) -> None:
        a = element_factory("el-1", x=0, y=200)
        b = element_factory("el-2", x=60, y=200)
        state = replace(room, elements=(a, b))
        report = detector.report(state, a)
        assert report.walls == (4,)
        assert report.elements == ("el-2",)
        assert report.doors == ()
        assert report.has_collisions


class TestClearanceZones:
    """Tests for door clearance zones."""

    @pytest.mark.parametrize(
        "wall_number,position,expected",
        [
            (1, 50, Bounds(220, 0, 160, 240)),
            (2, 50, Bounds(360, 160, 240, 160)),
            (3, 25, Bounds(70, 240, 160, 240)),
            (4, 50, Bounds(0, 160, 240, 160)),
        ],
    )
    def test_standard_wall_zones(
        self,
        clearance: DoorClearanceService,
        room: RoomState,
        wall_number: int,
        position: float,
        expected: Bounds,
    ) -> None:
        door = Door("door-1", wall_number, position, 32)
        zone = clearance.zone_for_door(room, door)
        assert zone is not None
        assert zone.bounds == expected
        assert zone.angle is None

    def test_custom_wall_zone(self, clearance: DoorClearanceService, room: RoomState) -> None:
        state = with_custom_wall(room, CustomWall(5, 100, 300, 500, 300))
        zone = clearance.zone_for_door(state, Door("door-1", 5, 50, 32))
        assert zone is not None
        assert zone.angle == pytest.approx(90)
        assert zone.bounds.x == pytest.approx(220)
        assert zone.bounds.y == pytest.approx(300)
        assert zone.bounds.width == pytest.approx(160)
        assert zone.bounds.height == pytest.approx(240)
        assert len(zone.corners) == 4

    def test_doors_on_removed_walls_have_no_zone(
        self, clearance: DoorClearanceService, room: RoomState
    ) -> None:
        state = replace(
            room,
            doors=(Door("door-1", 1, 50, 32),),
            walls=(2, 3, 4),
            removed_walls=(1,),
        )
        assert clearance.clearance_zones(state) == []

    def test_collides(self, clearance: DoorClearanceService, room: RoomState) -> None:
        state = replace(room, doors=(Door("door-1", 1, 50, 32),))
        assert clearance.collides(state, 250, 100, 20, 20)
        assert not clearance.collides(state, 400, 100, 20, 20)
        assert clearance.colliding_doors(state, 250, 100, 20, 20) == ["door-1"]

    def test_detector_delegates_to_clearance(self, detector: CollisionDetector, room: RoomState) -> None:
        state = replace(room, doors=(Door("door-1", 1, 50, 32),))
        assert detector.door_clearance_collision(state, 250, 100, 20, 20)
