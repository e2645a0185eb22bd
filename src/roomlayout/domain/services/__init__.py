"""Domain services for room layout.

This package provides the geometry services of the layout engine:
- Collision queries against walls, cabinets and door clearances
- Snap rules and push-away correction
- Interactive placement and editing commands
- Price computation
"""

from .clearance import DoorClearanceService
from .collision import CollisionDetector
from .editing import (
    DoorEditor,
    ElementEditor,
    WallEditor,
    WallServiceAvailability,
)
from .placement import (
    Dragging,
    DrawingWall,
    Idle,
    InteractionMode,
    PlacementController,
    PlacingDoor,
)
from .pricing import (
    DEFAULT_BASE_PRICES,
    DEFAULT_COLOR_PRICING,
    DEFAULT_MATERIAL_MULTIPLIERS,
    PriceBreakdown,
    PriceTable,
    PricingService,
    compute_price,
)
from .push_away import PushAwayResolver, back_direction
from .snapping import SnapResolver

__all__ = [
    "CollisionDetector",
    "DEFAULT_BASE_PRICES",
    "DEFAULT_COLOR_PRICING",
    "DEFAULT_MATERIAL_MULTIPLIERS",
    "DoorClearanceService",
    "DoorEditor",
    "Dragging",
    "DrawingWall",
    "ElementEditor",
    "Idle",
    "InteractionMode",
    "PlacementController",
    "PlacingDoor",
    "PriceBreakdown",
    "PriceTable",
    "PricingService",
    "PushAwayResolver",
    "SnapResolver",
    "WallEditor",
    "WallServiceAvailability",
    "back_direction",
    "compute_price",
]
