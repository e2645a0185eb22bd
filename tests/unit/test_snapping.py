"""Unit tests for the snap rules."""

from dataclasses import replace

import pytest

from roomlayout.domain.entities import CustomWall, RoomState
from roomlayout.domain.services import SnapResolver
from roomlayout.domain.value_objects import SnapSource


@pytest.fixture
def resolver() -> SnapResolver:
    return SnapResolver()


@pytest.fixture
def cabinet_room(big_room: RoomState, element_factory) -> RoomState:
    """Big room with one 24x24 base cabinet at (100, 100)."""
    return replace(big_room, elements=(element_factory("el-1", x=100, y=100),))


def with_custom_wall(state: RoomState, wall: CustomWall) -> RoomState:
    return replace(
        state,
        custom_walls=(*state.custom_walls, wall),
        walls=(*state.walls, wall.wall_number),
        all_available_walls=(*state.all_available_walls, wall.wall_number),
    )


class TestSnapToCabinet:
    """Tests for snap_to_cabinet."""

    def test_left_edge_to_right_edge(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.snap_to_cabinet(cabinet_room, 127, 100, 24, 24)
        assert result.snapped
        assert result.source == SnapSource.CABINET
        assert (result.x, result.y) == (124, 100)

    def test_right_edge_to_left_edge(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.snap_to_cabinet(cabinet_room, 70, 100, 24, 24)
        assert (result.x, result.y) == (76, 100)

    def test_top_edge_to_bottom_edge(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.snap_to_cabinet(cabinet_room, 100, 128, 24, 24)
        assert (result.x, result.y) == (100, 124)

    def test_bottom_edge_to_top_edge(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.snap_to_cabinet(cabinet_room, 100, 71, 24, 24)
        assert (result.x, result.y) == (100, 76)

    def test_requires_row_overlap(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.snap_to_cabinet(cabinet_room, 127, 200, 24, 24)
        assert not result.snapped
        assert (result.x, result.y) == (127, 200)

    def test_outside_snap_distance(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        assert not resolver.snap_to_cabinet(cabinet_room, 133, 100, 24, 24).snapped

    def test_excluded_cabinet(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        assert not resolver.snap_to_cabinet(cabinet_room, 127, 100, 24, 24, exclude_id="el-1").snapped

    def test_appliances_are_not_snap_targets(
        self, resolver: SnapResolver, big_room: RoomState, element_factory
    ) -> None:
        state = replace(big_room, elements=(element_factory("el-1", "dishwasher", x=100, y=100),))
        assert not resolver.snap_to_cabinet(state, 127, 100, 24, 24).snapped


class TestSnapToWall:
    """Tests for snap_to_wall."""

    def test_clear_position_is_unchanged(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall(room, 240, 180, 120, 120)
        assert not result.snapped
        assert (result.x, result.y) == (240, 180)

    def test_boundary_snap_without_wall(self, resolver: SnapResolver, room: RoomState) -> None:
        state = replace(room, walls=(1, 2, 3), removed_walls=(4,))
        result = resolver.snap_to_wall(state, 8, 200, 120, 120)
        assert result.snapped
        assert result.source == SnapSource.WALL
        assert (result.x, result.y) == (0, 200)

    def test_position_is_clamped(self, resolver: SnapResolver, room: RoomState) -> None:
        state = replace(room, walls=(), removed_walls=(1, 2, 3, 4))
        result = resolver.snap_to_wall(state, -50, 900, 120, 120)
        assert (result.x, result.y) == (0, 360)

    def test_wall_collision_is_pushed(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall(room, 8, 200, 120, 120)
        assert result.snapped
        assert result.source == SnapSource.WALL
        assert result.x == pytest.approx(55)
        assert result.y == pytest.approx(200)

    def test_back_against_wall_is_pulled_flush(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall(room, 200, 30, 120, 120, rotation=0)
        assert not result.snapped
        assert result.source == SnapSource.WALL
        assert result.y == pytest.approx(10)


class TestSnapToWallEndpoints:
    """Tests for snap_to_wall_endpoints."""

    def test_room_corner(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall_endpoints(room, 2, 3)
        assert result.snapped
        assert result.source == SnapSource.ROOM_CORNER
        assert (result.x, result.y) == (0, 0)

    def test_inner_wall_edge(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall_endpoints(room, 300, 14)
        assert result.source == SnapSource.WALL_EDGE
        assert result.wall_number == 1
        assert (result.x, result.y) == (300, 10)

    def test_removed_wall_edge_is_skipped(self, resolver: SnapResolver, room: RoomState) -> None:
        state = replace(room, walls=(2, 3, 4), removed_walls=(1,))
        assert not resolver.snap_to_wall_endpoints(state, 300, 14).snapped

    def test_custom_wall_endpoint(self, resolver: SnapResolver, room: RoomState) -> None:
        state = with_custom_wall(room, CustomWall(5, 100, 100, 200, 100))
        result = resolver.snap_to_wall_endpoints(state, 103, 104)
        assert result.source == SnapSource.WALL_ENDPOINT
        assert result.wall_number == 5
        assert (result.x, result.y) == (100, 100)

    def test_excluded_custom_wall(self, resolver: SnapResolver, room: RoomState) -> None:
        state = with_custom_wall(room, CustomWall(5, 100, 100, 200, 100))
        assert not resolver.snap_to_wall_endpoints(state, 103, 104, exclude_wall_id=5).snapped

    def test_nothing_nearby(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.snap_to_wall_endpoints(room, 300, 240)
        assert not result.snapped
        assert (result.x, result.y) == (300, 240)


class TestSnapToCustomWall:
    """Tests for snap_cabinet_to_custom_wall."""

    def test_snaps_against_wall_face(self, resolver: SnapResolver, big_room: RoomState) -> None:
        state = with_custom_wall(big_room, CustomWall(5, 100, 300, 300, 300))
        result = resolver.snap_cabinet_to_custom_wall(state, 188, 293, 24, 24)
        assert result.snapped
        assert result.source == SnapSource.CUSTOM_WALL
        assert result.wall_number == 5
        assert result.wall_angle == pytest.approx(0)
        assert result.x == pytest.approx(188)
        assert result.y == pytest.approx(305)

    def test_outside_snap_distance(self, resolver: SnapResolver, big_room: RoomState) -> None:
        state = with_custom_wall(big_room, CustomWall(5, 100, 300, 300, 300))
        assert not resolver.snap_cabinet_to_custom_wall(state, 188, 300, 24, 24).snapped

    def test_excluded_custom_wall(self, resolver: SnapResolver, big_room: RoomState) -> None:
        state = with_custom_wall(big_room, CustomWall(5, 100, 300, 300, 300))
        result = resolver.snap_cabinet_to_custom_wall(state, 188, 293, 24, 24, exclude_wall_id=5)
        assert not result.snapped

    def test_removed_custom_wall_is_ignored(self, resolver: SnapResolver, big_room: RoomState) -> None:
        state = replace(
            big_room,
            custom_walls=(CustomWall(5, 100, 300, 300, 300),),
            all_available_walls=(1, 2, 3, 4, 5),
        )
        assert not resolver.snap_cabinet_to_custom_wall(state, 188, 293, 24, 24).snapped


class TestResolve:
    """Tests for the combined snap order."""

    def test_cabinet_snap_wins(self, resolver: SnapResolver, cabinet_room: RoomState) -> None:
        result = resolver.resolve(cabinet_room, 127, 100, 24, 24, exclude_id="el-2")
        assert result.source == SnapSource.CABINET
        assert result.x == 124

    def test_wall_snap_when_no_cabinet(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.resolve(room, 8, 200, 120, 120)
        assert result.source == SnapSource.WALL

    def test_unsnapped_in_open_floor(self, resolver: SnapResolver, room: RoomState) -> None:
        result = resolver.resolve(room, 240, 180, 120, 120)
        assert not result.snapped
        assert result.source == SnapSource.NONE

    def test_custom_wall_snap_after_wall_push(self, resolver: SnapResolver, big_room: RoomState) -> None:
        state = with_custom_wall(big_room, CustomWall(5, 100, 300, 300, 300))
        result = resolver.resolve(state, 188, 293, 24, 24)
        assert result.snapped
        assert result.source == SnapSource.CUSTOM_WALL
        assert result.wall_number == 5
        assert result.x == pytest.approx(188)
        assert result.y == pytest.approx(305)

    def test_push_only_falls_back_to_wall_position(
        self, resolver: SnapResolver, room: RoomState
    ) -> None:
        result = resolver.resolve(room, 200, 30, 120, 120)
        assert not result.snapped
        assert result.source == SnapSource.WALL
        assert result.y == pytest.approx(10)
