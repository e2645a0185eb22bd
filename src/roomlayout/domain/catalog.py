"""Built-in catalog of placeable cabinet and appliance types."""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import ElementCategory, RoomType


@dataclass(frozen=True)
class ElementSpec:
    """Catalog entry for a placeable element type.

    Attributes:
        type: Catalog key, e.g. ``"sink-base"``.
        name: Display name.
        default_width: Default width in inches.
        default_depth: Default depth in inches.
        category: Cabinet or appliance.
        room: Room the type belongs to.
        fixed_height: Height that cannot be changed, in inches.
        default_height: Initial height for adjustable types, in inches.
        min_height: Lower bound for adjustable heights, in inches.
        mount_height: Default floor-to-bottom distance for wall-mounted
            types, in inches.
    """

    type: str
    name: str
    default_width: float
    default_depth: float
    category: ElementCategory
    room: RoomType
    fixed_height: float | None = None
    default_height: float | None = None
    min_height: float | None = None
    mount_height: float | None = None

    def __post_init__(self) -> None:
        if self.default_width <= 0 or self.default_depth <= 0:
            raise ValueError("Default dimensions must be positive")
        if self.fixed_height is None and self.default_height is None:
            raise ValueError("Either fixed_height or default_height is required")

    @property
    def height(self) -> float:
        """Initial height of a new element."""
        if self.fixed_height is not None:
            return self.fixed_height
        assert self.default_height is not None
        return self.default_height

    @property
    def has_fixed_height(self) -> bool:
        return self.fixed_height is not None

    @property
    def is_wall_mounted(self) -> bool:
        return self.mount_height is not None


_CAB = ElementCategory.CABINET
_APP = ElementCategory.APPLIANCE
_KITCHEN = RoomType.KITCHEN
_BATH = RoomType.BATHROOM

_SPECS: tuple[ElementSpec, ...] = (
    # Kitchen cabinets
    ElementSpec("base", "Base Cabinet", 24, 24, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec("sink-base", "Sink Base Cabinet", 33, 24, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec(
        "wall", "Wall Cabinet", 24, 12, _CAB, _KITCHEN,
        default_height=30, min_height=12, mount_height=54,
    ),
    ElementSpec("tall", "Tall Cabinet", 24, 24, _CAB, _KITCHEN, default_height=84, min_height=40),
    ElementSpec("corner", "Corner Cabinet (Lazy Susan)", 36, 36, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec("drawer-base", "Drawer Base Cabinet", 18, 24, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec("double-drawer-base", "Double Drawer Base", 30, 24, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec(
        "glass-wall", "Glass Front Wall Cabinet", 24, 12, _CAB, _KITCHEN,
        default_height=30, min_height=12, mount_height=54,
    ),
    ElementSpec(
        "open-shelf", "Open Shelf Cabinet", 30, 12, _CAB, _KITCHEN,
        default_height=30, min_height=12, mount_height=54,
    ),
    ElementSpec("island-base", "Kitchen Island", 48, 36, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec("peninsula-base", "Peninsula Cabinet", 36, 24, _CAB, _KITCHEN, fixed_height=34.5),
    ElementSpec("pantry", "Pantry Cabinet", 24, 24, _CAB, _KITCHEN, default_height=84, min_height=60),
    ElementSpec(
        "corner-wall", "Corner Wall Cabinet", 24, 24, _CAB, _KITCHEN,
        default_height=30, min_height=12, mount_height=54,
    ),
    # Bathroom cabinets
    ElementSpec("vanity", "Vanity Cabinet", 30, 21, _CAB, _BATH, fixed_height=32),
    ElementSpec("vanity-sink", "Vanity with Sink", 36, 21, _CAB, _BATH, fixed_height=32),
    ElementSpec(
        "medicine", "Medicine Cabinet", 24, 6, _CAB, _BATH,
        fixed_height=30, mount_height=48,
    ),
    ElementSpec("linen", "Linen Cabinet", 18, 21, _CAB, _BATH, default_height=84, min_height=60),
    ElementSpec("double-vanity", "Double Vanity", 60, 21, _CAB, _BATH, fixed_height=32),
    ElementSpec("floating-vanity", "Floating Vanity", 48, 18, _CAB, _BATH, fixed_height=32),
    ElementSpec("corner-vanity", "Corner Vanity", 30, 30, _CAB, _BATH, fixed_height=32),
    ElementSpec("vanity-tower", "Vanity Tower", 12, 21, _CAB, _BATH, default_height=84, min_height=60),
    ElementSpec(
        "medicine-mirror", "Medicine Cabinet w/ Mirror", 30, 6, _CAB, _BATH,
        fixed_height=36, mount_height=48,
    ),
    ElementSpec("linen-tower", "Linen Tower", 24, 18, _CAB, _BATH, default_height=84, min_height=72),
    # Kitchen appliances
    ElementSpec("refrigerator", "Refrigerator", 36, 30, _APP, _KITCHEN, fixed_height=70),
    ElementSpec("stove", "Stove/Range", 30, 26, _APP, _KITCHEN, fixed_height=36),
    ElementSpec("dishwasher", "Dishwasher", 24, 24, _APP, _KITCHEN, fixed_height=34),
    ElementSpec(
        "microwave", "Built-in Microwave", 30, 15, _APP, _KITCHEN,
        fixed_height=18, mount_height=54,
    ),
    ElementSpec("wine-cooler", "Wine Cooler", 24, 24, _APP, _KITCHEN, fixed_height=34),
    ElementSpec(
        "range-hood", "Range Hood", 36, 18, _APP, _KITCHEN,
        fixed_height=12, mount_height=66,
    ),
    ElementSpec("double-oven", "Double Wall Oven", 30, 25, _APP, _KITCHEN, fixed_height=50),
    # Bathroom fixtures
    ElementSpec("toilet", "Toilet", 20, 28, _APP, _BATH, fixed_height=30),
    ElementSpec("bathtub", "Bathtub", 60, 30, _APP, _BATH, fixed_height=20),
    ElementSpec("shower", "Shower", 36, 36, _APP, _BATH, fixed_height=80),
)

ELEMENT_CATALOG: dict[str, ElementSpec] = {spec.type: spec for spec in _SPECS}
"""Catalog entries keyed by element type."""

DEFAULT_MIN_HEIGHT = 12.0


def get_element_spec(element_type: str) -> ElementSpec | None:
    """Look up a catalog entry, returning None for unknown types."""
    return ELEMENT_CATALOG.get(element_type)


def is_known_type(element_type: str) -> bool:
    return element_type in ELEMENT_CATALOG


def element_types_for_room(
    room: RoomType, category: ElementCategory | None = None
) -> list[ElementSpec]:
    """Catalog entries available in a room, optionally filtered by category."""
    return [
        spec
        for spec in _SPECS
        if spec.room == room and (category is None or spec.category == category)
    ]
