"""Adapter functions from configuration models to domain objects.

These functions turn validated Pydantic configuration models into the
frozen dataclasses the domain services consume.
"""

from roomlayout.application.config.schemas import (
    EngineSettingsConfig,
    PriceTableConfig,
    RoomLayoutConfiguration,
    WallServicesConfig,
)
from roomlayout.domain.services import (
    DEFAULT_BASE_PRICES,
    DEFAULT_COLOR_PRICING,
    DEFAULT_MATERIAL_MULTIPLIERS,
    PriceTable,
    WallServiceAvailability,
)
from roomlayout.domain.value_objects import ColorCount, LayoutTolerances


def config_to_tolerances(engine: EngineSettingsConfig) -> LayoutTolerances:
    """Convert engine settings to LayoutTolerances.

    Example:
        >>> config = load_config(Path("layout.json"))
        >>> tolerances = config_to_tolerances(config.engine)
        >>> tolerances.cabinet_snap_distance
        8.0
    """
    return LayoutTolerances(
        canvas_size=engine.canvas_size,
        standard_wall_thickness=engine.walls.standard_thickness,
        custom_wall_thickness=engine.walls.custom_thickness,
        min_custom_wall_length=engine.walls.min_custom_length,
        wall_collision_buffer=engine.collision.wall_buffer,
        wall_projection_slack=engine.collision.projection_slack,
        element_overlap_allowance=engine.collision.element_overlap_allowance,
        vertical_clearance=engine.collision.vertical_clearance,
        door_clearance_depth_multiplier=engine.door_clearance.depth_multiplier,
        door_clearance_width_multiplier=engine.door_clearance.width_multiplier,
        cabinet_snap_distance=engine.snapping.cabinet,
        wall_snap_distance=engine.snapping.wall,
        endpoint_snap_distance=engine.snapping.endpoint,
        custom_wall_snap_distance=engine.snapping.custom_wall,
        custom_wall_snap_gap=engine.snapping.custom_wall_gap,
        push_back_gap=engine.push_away.back_gap,
        push_front_clearance=engine.push_away.front_clearance,
        grid_search_radius=engine.search.grid_radius,
        grid_search_step=engine.search.grid_step,
        on_wall_distance=engine.search.on_wall_distance,
        placement_grid_step=engine.search.placement_step,
    )


def config_to_price_table(pricing: PriceTableConfig) -> PriceTable:
    """Merge price overrides over the built-in defaults."""
    color_pricing = dict(DEFAULT_COLOR_PRICING)
    color_pricing.update({ColorCount(k): v for k, v in pricing.color_pricing.items()})
    return PriceTable(
        base_prices={**DEFAULT_BASE_PRICES, **pricing.base_prices},
        material_multipliers={**DEFAULT_MATERIAL_MULTIPLIERS, **pricing.material_multipliers},
        color_pricing=color_pricing,
        add_wall=pricing.wall_pricing.add_wall,
        remove_wall=pricing.wall_pricing.remove_wall,
    )


def config_to_wall_services(services: WallServicesConfig) -> WallServiceAvailability:
    return WallServiceAvailability(
        removal_enabled=services.wall_removal_enabled,
        addition_enabled=services.wall_addition_enabled,
    )


def default_configuration() -> RoomLayoutConfiguration:
    """Configuration with every setting at its default."""
    return RoomLayoutConfiguration()
