"""Tunable distances used by collision, snapping and push-away."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class LayoutTolerances:
    """Distances and multipliers that drive the placement heuristics.

    Distances are in design-space units unless noted. The defaults match
    a 600-unit canvas budget.

    Attributes:
        canvas_size: Design-space budget for the longer room side.
        standard_wall_thickness: Thickness of the four boundary walls.
        custom_wall_thickness: Default thickness of user-drawn walls.
        min_custom_wall_length: Shortest custom wall that may be drawn.
        wall_collision_buffer: Extra clearance added to the wall threshold.
        wall_projection_slack: Allowed overshoot of the projection
            parameter beyond either wall end.
        element_overlap_allowance: Interpenetration allowed between cabinets.
        vertical_clearance: Vertical gap, in inches, that separates
            stacked elements so they never collide.
        door_clearance_depth_multiplier: Swing depth as a multiple of the
            door width.
        door_clearance_width_multiplier: Swing width as a multiple of the
            door width.
        cabinet_snap_distance: Edge-to-edge cabinet snap radius.
        wall_snap_distance: Room-boundary snap radius.
        endpoint_snap_distance: Wall endpoint snap radius.
        custom_wall_snap_distance: Custom-wall snap radius.
        custom_wall_snap_gap: Gap left between a custom wall face and a
            snapped element.
        push_back_gap: Gap between wall face and an element's back edge.
        push_front_clearance: Clearance kept in front of an element.
        grid_search_radius: Half-width of the fallback grid search.
        grid_search_step: Step of the fallback grid search.
        on_wall_distance: Distance within which an element counts as
            standing against a wall.
        placement_grid_step: Step of the free-spot search for new elements.
    """

    canvas_size: float = 600.0
    standard_wall_thickness: float = 10.0
    custom_wall_thickness: float = 6.0
    min_custom_wall_length: float = 20.0
    wall_collision_buffer: float = 50.0
    wall_projection_slack: float = 0.05
    element_overlap_allowance: float = 5.0
    vertical_clearance: float = 3.0
    door_clearance_depth_multiplier: float = 1.5
    door_clearance_width_multiplier: float = 1.0
    cabinet_snap_distance: float = 8.0
    wall_snap_distance: float = 12.0
    endpoint_snap_distance: float = 12.0
    custom_wall_snap_distance: float = 8.0
    custom_wall_snap_gap: float = 2.0
    push_back_gap: float = 5.0
    push_front_clearance: float = 50.0
    grid_search_radius: float = 20.0
    grid_search_step: float = 5.0
    on_wall_distance: float = 20.0
    placement_grid_step: float = 50.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be non-negative")
        if self.canvas_size <= 0:
            raise ValueError("canvas_size must be positive")
        if self.grid_search_step <= 0 or self.placement_grid_step <= 0:
            raise ValueError("Grid steps must be positive")
        if self.standard_wall_thickness <= 0 or self.custom_wall_thickness <= 0:
            raise ValueError("Wall thickness must be positive")
