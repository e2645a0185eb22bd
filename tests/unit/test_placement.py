"""Unit tests for the placement controller and interaction modes."""

from dataclasses import replace

import pytest

from roomlayout.domain.entities import CustomWall, Door, RoomState
from roomlayout.domain.services import (
    Dragging,
    DrawingWall,
    Idle,
    PlacementController,
    PlacingDoor,
)
from roomlayout.domain.value_objects import DoorType, Point2D, SnapSource


@pytest.fixture
def controller() -> PlacementController:
    return PlacementController()


class TestDragging:
    """Tests for begin_drag, drag_to and end_drag."""

    def test_begin_drag_records_offset(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        assert mode == Dragging("el-1", Point2D(60, 60))

    def test_begin_drag_unknown_element(self, controller: PlacementController, room: RoomState) -> None:
        assert controller.begin_drag(room, "el-9", Point2D(0, 0)) == Idle()

    def test_drag_in_open_floor(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        mode, preview = controller.drag_to(state, mode, Point2D(280, 230))
        assert preview.accepted
        assert not preview.snapped
        assert (preview.x, preview.y) == (220, 170)
        assert mode.last_valid == Point2D(220, 170)

    def test_drag_does_not_commit(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        controller.drag_to(state, mode, Point2D(280, 230))
        assert state.element("el-1").x == 240

    def test_end_drag_commits_last_valid(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        mode, _ = controller.drag_to(state, mode, Point2D(280, 230))
        committed, mode = controller.end_drag(state, mode)
        assert mode == Idle()
        assert (committed.element("el-1").x, committed.element("el-1").y) == (220, 170)

    def test_end_drag_without_move_keeps_position(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        committed, mode = controller.end_drag(state, mode)
        assert committed is state
        assert mode == Idle()

    def test_door_clearance_rejects(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(
            room,
            elements=(element_factory("el-1", x=240, y=300),),
            doors=(Door("door-1", 1, 50, 32),),
        )
        mode = controller.begin_drag(state, "el-1", Point2D(240, 300))
        mode, preview = controller.drag_to(state, mode, Point2D(240, 200))
        assert not preview.accepted
        assert preview.reason == "door clearance"
        assert mode.last_valid is None

    def test_rejection_keeps_last_valid(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(
            room,
            elements=(element_factory("el-1", x=240, y=300),),
            doors=(Door("door-1", 1, 50, 32),),
        )
        mode = controller.begin_drag(state, "el-1", Point2D(240, 300))
        mode, _ = controller.drag_to(state, mode, Point2D(240, 260))
        assert mode.last_valid == Point2D(240, 260)
        mode, preview = controller.drag_to(state, mode, Point2D(240, 200))
        assert not preview.accepted
        assert mode.last_valid == Point2D(240, 260)
        committed, _ = controller.end_drag(state, mode)
        assert committed.element("el-1").y == 260

    def test_cabinet_overlap_rejects(
        self, controller: PlacementController, big_room: RoomState, element_factory
    ) -> None:
        state = replace(
            big_room,
            elements=(
                element_factory("el-1", x=100, y=100),
                element_factory("el-2", x=300, y=300),
            ),
        )
        mode = controller.begin_drag(state, "el-2", Point2D(300, 300))
        _, preview = controller.drag_to(state, mode, Point2D(110, 110))
        assert not preview.accepted
        assert preview.reason == "element"

    def test_cabinet_snap_skips_collision_checks(
        self, controller: PlacementController, big_room: RoomState, element_factory
    ) -> None:
        state = replace(
            big_room,
            elements=(
                element_factory("el-1", x=100, y=100),
                element_factory("el-2", x=130, y=100),
            ),
        )
        mode = controller.begin_drag(state, "el-2", Point2D(142, 112))
        mode, preview = controller.drag_to(state, mode, Point2D(139, 112))
        assert preview.accepted
        assert preview.source == SnapSource.CABINET
        assert (preview.x, preview.y) == (124, 100)

    def test_drag_into_wall_is_pushed_out(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        mode, preview = controller.drag_to(state, mode, Point2D(-500, 260))
        assert preview.accepted
        assert preview.source == SnapSource.WALL
        assert preview.x == pytest.approx(55)

    def test_drag_along_custom_wall_snaps_to_its_face(
        self, controller: PlacementController, big_room: RoomState, element_factory
    ) -> None:
        state = replace(
            big_room,
            elements=(element_factory("el-1", x=50, y=50),),
            custom_walls=(CustomWall(5, 100, 300, 300, 300),),
            walls=(1, 2, 3, 4, 5),
            all_available_walls=(1, 2, 3, 4, 5),
        )
        mode = controller.begin_drag(state, "el-1", Point2D(62, 62))
        mode, preview = controller.drag_to(state, mode, Point2D(200, 305))
        assert preview.accepted
        assert preview.source == SnapSource.CUSTOM_WALL
        assert preview.pushed
        assert preview.x == pytest.approx(188)
        assert preview.y == pytest.approx(308)

    def test_drag_to_outside_drag_mode(self, controller: PlacementController, room: RoomState) -> None:
        mode, preview = controller.drag_to(room, Idle(), Point2D(10, 10))
        assert mode == Idle()
        assert preview is None

    def test_drag_of_deleted_element(self, controller: PlacementController, room: RoomState) -> None:
        mode, preview = controller.drag_to(room, Dragging("el-1", Point2D(0, 0)), Point2D(10, 10))
        assert mode == Idle()
        assert preview is None

    def test_abandon_keeps_last_valid(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        mode = controller.begin_drag(state, "el-1", Point2D(300, 240))
        mode, _ = controller.drag_to(state, mode, Point2D(280, 230))
        committed, mode = controller.abandon_drag(state, mode)
        assert committed.element("el-1").x == 220
        assert mode == Idle()


class TestWallDrawing:
    """Tests for the wall drawing mode."""

    def test_two_clicks_draw_a_wall(self, controller: PlacementController, room: RoomState) -> None:
        mode = controller.begin_wall_drawing()
        result, mode = controller.place_wall_point(room, mode, Point2D(2, 3))
        assert mode == DrawingWall(start=Point2D(0, 0))
        assert result.state is room

        result, mode = controller.place_wall_point(room, mode, Point2D(300, 240))
        assert result.accepted
        assert result.value == 5
        assert mode == DrawingWall()
        wall = result.state.custom_wall(5)
        assert (wall.x1, wall.y1, wall.x2, wall.y2) == (0, 0, 300, 240)

    def test_short_wall_rejected_and_drawing_continues(
        self, controller: PlacementController, room: RoomState
    ) -> None:
        mode = DrawingWall(start=Point2D(200, 200))
        result, mode = controller.place_wall_point(room, mode, Point2D(205, 200))
        assert not result.accepted
        assert mode == DrawingWall()

    def test_click_outside_drawing_mode(self, controller: PlacementController, room: RoomState) -> None:
        result, mode = controller.place_wall_point(room, Idle(), Point2D(0, 0))
        assert not result.accepted
        assert mode == Idle()

    def test_cancel(self, controller: PlacementController) -> None:
        assert controller.cancel(DrawingWall(start=Point2D(1, 1))) == Idle()


class TestDoorPlacement:
    """Tests for the door placement mode."""

    def test_place_door_keeps_mode(self, controller: PlacementController, room: RoomState) -> None:
        mode = controller.begin_door_placement("sliding")
        assert mode == PlacingDoor(DoorType.SLIDING)
        result, mode = controller.place_door(room, mode, 3, 50)
        assert result.accepted
        assert result.state.door("door-1").width == 48
        assert mode == PlacingDoor(DoorType.SLIDING)

    def test_place_door_outside_mode(self, controller: PlacementController, room: RoomState) -> None:
        result, _ = controller.place_door(room, Idle(), 3, 50)
        assert not result.accepted


class TestDirectEdits:
    """Tests for rotation and hinge changes through the controller."""

    def test_rotate_and_hinge(
        self, controller: PlacementController, room: RoomState, element_factory
    ) -> None:
        state = replace(room, elements=(element_factory("el-1", x=240, y=180),))
        state = controller.rotate_element(state, "el-1").state
        state = controller.set_hinge_direction(state, "el-1", "right").state
        el = state.element("el-1")
        assert el.rotation == 90
        assert el.hinge_direction.value == "right"
