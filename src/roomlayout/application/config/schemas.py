"""Configuration schemas for the layout engine.

This module contains Pydantic models for the JSON configuration file:
engine tolerances, the price table, and wall service switches. All
distances are in design-space units unless a field says otherwise.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from roomlayout.domain.value_objects import ColorCount

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WallSettingsConfig(BaseModel):
    """Wall geometry settings.

    Attributes:
        standard_thickness: Thickness of the four boundary walls.
        custom_thickness: Thickness of user-drawn walls.
        min_custom_length: Shortest custom wall that may be drawn.
    """

    model_config = ConfigDict(extra="forbid")

    standard_thickness: float = Field(default=10.0, gt=0)
    custom_thickness: float = Field(default=6.0, gt=0)
    min_custom_length: float = Field(default=20.0, ge=0)


class CollisionSettingsConfig(BaseModel):
    """Collision detection settings.

    Attributes:
        wall_buffer: Extra clearance added to the wall-collision threshold.
        projection_slack: Allowed overshoot beyond a wall's ends, as a
            fraction of its length.
        element_overlap_allowance: Interpenetration allowed between cabinets.
        vertical_clearance: Vertical gap in inches that separates stacked
            elements.
    """

    model_config = ConfigDict(extra="forbid")

    wall_buffer: float = Field(default=50.0, ge=0)
    projection_slack: float = Field(default=0.05, ge=0, le=1)
    element_overlap_allowance: float = Field(default=5.0, ge=0)
    vertical_clearance: float = Field(default=3.0, ge=0)


class DoorClearanceSettingsConfig(BaseModel):
    """Door swing clearance multipliers, relative to the door width."""

    model_config = ConfigDict(extra="forbid")

    depth_multiplier: float = Field(default=1.5, gt=0)
    width_multiplier: float = Field(default=1.0, gt=0)


class SnapSettingsConfig(BaseModel):
    """Snap radii.

    Attributes:
        cabinet: Cabinet edge snap radius.
        wall: Room boundary snap radius.
        endpoint: Wall endpoint snap radius while drawing walls.
        custom_wall: Custom wall snap radius.
        custom_wall_gap: Gap between a custom wall face and a snapped element.
    """

    model_config = ConfigDict(extra="forbid")

    cabinet: float = Field(default=8.0, ge=0)
    wall: float = Field(default=12.0, ge=0)
    endpoint: float = Field(default=12.0, ge=0)
    custom_wall: float = Field(default=8.0, ge=0)
    custom_wall_gap: float = Field(default=2.0, ge=0)


class PushAwaySettingsConfig(BaseModel):
    """Push-away gaps.

    Attributes:
        back_gap: Gap left between a wall face and an element's back.
        front_clearance: Clearance kept between a wall face and an element's
            front or sides.
    """

    model_config = ConfigDict(extra="forbid")

    back_gap: float = Field(default=5.0, ge=0)
    front_clearance: float = Field(default=50.0, ge=0)


class SearchSettingsConfig(BaseModel):
    """Fallback search settings."""

    model_config = ConfigDict(extra="forbid")

    grid_radius: float = Field(default=20.0, ge=0)
    grid_step: float = Field(default=5.0, gt=0)
    placement_step: float = Field(default=50.0, gt=0)
    on_wall_distance: float = Field(default=20.0, ge=0)


class EngineSettingsConfig(BaseModel):
    """Tolerances of the layout engine.

    Attributes:
        canvas_size: Design-space budget for the longer room side.
        walls: Wall geometry settings.
        collision: Collision detection settings.
        door_clearance: Door swing clearance multipliers.
        snapping: Snap radii.
        push_away: Push-away gaps.
        search: Fallback search settings.
    """

    model_config = ConfigDict(extra="forbid")

    canvas_size: float = Field(default=600.0, gt=0)
    walls: WallSettingsConfig = Field(default_factory=WallSettingsConfig)
    collision: CollisionSettingsConfig = Field(default_factory=CollisionSettingsConfig)
    door_clearance: DoorClearanceSettingsConfig = Field(
        default_factory=DoorClearanceSettingsConfig
    )
    snapping: SnapSettingsConfig = Field(default_factory=SnapSettingsConfig)
    push_away: PushAwaySettingsConfig = Field(default_factory=PushAwaySettingsConfig)
    search: SearchSettingsConfig = Field(default_factory=SearchSettingsConfig)


class WallPricingConfig(BaseModel):
    """Charges for wall work."""

    model_config = ConfigDict(extra="forbid")

    add_wall: float = Field(default=1500.0, ge=0)
    remove_wall: float = Field(default=2000.0, ge=0)


class PriceTableConfig(BaseModel):
    """Price table overrides.

    Entries given here are merged over the built-in defaults, so a file
    only needs to list the prices it changes.

    Attributes:
        base_prices: Price of a 24-inch-wide cabinet, by element type.
        material_multipliers: Price factor per material.
        color_pricing: Upcharge per color count ("1", "2", "3", "custom").
        wall_pricing: Charges for wall work.
    """

    model_config = ConfigDict(extra="forbid")

    base_prices: dict[str, float] = Field(default_factory=dict)
    material_multipliers: dict[str, float] = Field(default_factory=dict)
    color_pricing: dict[str, float] = Field(default_factory=dict)
    wall_pricing: WallPricingConfig = Field(default_factory=WallPricingConfig)

    @field_validator("base_prices", "material_multipliers", "color_pricing")
    @classmethod
    def validate_non_negative(cls, v: dict[str, float]) -> dict[str, float]:
        """Reject negative prices and multipliers."""
        for key, value in v.items():
            if value < 0:
                raise ValueError(f"'{key}' must be non-negative")
        return v

    @field_validator("color_pricing")
    @classmethod
    def validate_color_keys(cls, v: dict[str, float]) -> dict[str, float]:
        """Color pricing keys must be valid color counts."""
        valid = {c.value for c in ColorCount}
        for key in v:
            if key not in valid:
                raise ValueError(
                    f"Unknown color count '{key}', expected one of {sorted(valid)}"
                )
        return v


class WallServicesConfig(BaseModel):
    """Administrative switches for wall work."""

    model_config = ConfigDict(extra="forbid")

    wall_removal_enabled: bool = True
    wall_addition_enabled: bool = True


class RoomLayoutConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        engine: Engine tolerances.
        pricing: Price table overrides.
        services: Wall service switches.

    Example:
        >>> config = RoomLayoutConfiguration(schema_version="1.0")
        >>> config.engine.snapping.cabinet
        8.0
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    engine: EngineSettingsConfig = Field(default_factory=EngineSettingsConfig)
    pricing: PriceTableConfig = Field(default_factory=PriceTableConfig)
    services: WallServicesConfig = Field(default_factory=WallServicesConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of them."""
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(s.split(".")[0]) for s in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
