"""Configuration schema and loading for the layout engine.

This package provides JSON-based configuration loading and validation for
engine tolerances, price tables and wall service switches.

Public API:
    - RoomLayoutConfiguration: Root configuration model
    - EngineSettingsConfig: Engine tolerances model
    - PriceTableConfig: Price table overrides model
    - WallServicesConfig: Wall service switches model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_tolerances: Convert engine settings to domain tolerances
    - config_to_price_table: Convert price overrides to a domain price table
    - config_to_wall_services: Convert service switches to domain settings

Example:
    >>> from pathlib import Path
    >>> from roomlayout.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("layout.json"))
    ...     print(f"Canvas: {config.engine.canvas_size}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from roomlayout.application.config.adapters import (
    config_to_price_table,
    config_to_tolerances,
    config_to_wall_services,
    default_configuration,
)
from roomlayout.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    read_json_file,
    validate_model,
)
from roomlayout.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CollisionSettingsConfig,
    DoorClearanceSettingsConfig,
    EngineSettingsConfig,
    PriceTableConfig,
    PushAwaySettingsConfig,
    RoomLayoutConfiguration,
    SearchSettingsConfig,
    SnapSettingsConfig,
    WallPricingConfig,
    WallServicesConfig,
    WallSettingsConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CollisionSettingsConfig",
    "ConfigError",
    "DoorClearanceSettingsConfig",
    "EngineSettingsConfig",
    "PriceTableConfig",
    "PushAwaySettingsConfig",
    "RoomLayoutConfiguration",
    "SearchSettingsConfig",
    "SnapSettingsConfig",
    "WallPricingConfig",
    "WallServicesConfig",
    "WallSettingsConfig",
    "config_to_price_table",
    "config_to_tolerances",
    "config_to_wall_services",
    "default_configuration",
    "load_config",
    "load_config_from_dict",
    "read_json_file",
    "validate_model",
]
