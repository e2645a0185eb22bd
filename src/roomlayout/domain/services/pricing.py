"""Design price computation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import RoomState
from ..value_objects import ColorCount

DEFAULT_BASE_PRICE = 250.0
STANDARD_CABINET_WIDTH = 24.0

DEFAULT_BASE_PRICES: dict[str, float] = {
    "base": 250,
    "sink-base": 320,
    "wall": 180,
    "tall": 450,
    "corner": 380,
    "drawer-base": 280,
    "double-drawer-base": 350,
    "glass-wall": 220,
    "open-shelf": 160,
    "island-base": 580,
    "peninsula-base": 420,
    "pantry": 520,
    "corner-wall": 210,
    "vanity": 280,
    "vanity-sink": 350,
    "double-vanity": 650,
    "floating-vanity": 420,
    "corner-vanity": 380,
    "vanity-tower": 320,
    "medicine": 120,
    "medicine-mirror": 180,
    "linen": 350,
    "linen-tower": 420,
    "refrigerator": 0,
    "stove": 0,
    "dishwasher": 0,
    "microwave": 0,
    "wine-cooler": 0,
    "range-hood": 0,
    "double-oven": 0,
    "toilet": 0,
    "bathtub": 0,
    "shower": 0,
}

DEFAULT_MATERIAL_MULTIPLIERS: dict[str, float] = {
    "laminate": 1.0,
    "wood": 1.5,
    "plywood": 1.3,
}

DEFAULT_COLOR_PRICING: dict[ColorCount, float] = {
    ColorCount.ONE: 0,
    ColorCount.TWO: 100,
    ColorCount.THREE: 200,
    ColorCount.CUSTOM: 500,
}


@dataclass(frozen=True)
class PriceTable:
    """Prices used to quote a design.

    Attributes:
        base_prices: Price of a 24-inch-wide cabinet, by element type.
        material_multipliers: Price factor per material.
        color_pricing: Upcharge per color count.
        add_wall: Charge per custom wall added.
        remove_wall: Charge per original wall removed.
    """

    base_prices: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BASE_PRICES))
    material_multipliers: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_MATERIAL_MULTIPLIERS)
    )
    color_pricing: dict[ColorCount, float] = field(
        default_factory=lambda: dict(DEFAULT_COLOR_PRICING)
    )
    add_wall: float = 1500.0
    remove_wall: float = 2000.0

    def base_price(self, element_type: str) -> float:
        """Base price of a type; missing or zero prices fall back to the default."""
        return self.base_prices.get(element_type) or DEFAULT_BASE_PRICE

    def material_multiplier(self, material: str) -> float:
        return self.material_multipliers.get(material, 1.0)


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized quote.

    Attributes:
        cabinets: Price of each cabinet, keyed by element id.
        colors: Color upcharge.
        walls_removed: Charge for removed original walls.
        walls_added: Charge for added custom walls.
    """

    cabinets: dict[str, float]
    colors: float
    walls_removed: float
    walls_added: float

    @property
    def total(self) -> float:
        return round(
            sum(self.cabinets.values()) + self.colors + self.walls_removed + self.walls_added, 2
        )


class PricingService:
    """Quotes a room design against a price table."""

    def __init__(self, price_table: PriceTable | None = None) -> None:
        self.price_table = price_table or PriceTable()

    def breakdown(self, state: RoomState) -> PriceBreakdown:
        """Itemize the price of a design.

        Each cabinet costs its base price times its material multiplier,
        scaled by width relative to a 24-inch cabinet. Removing an original
        wall and adding a wall that was not original are both charged.
        """
        table = self.price_table
        cabinets = {
            element.id: table.base_price(element.type)
            * table.material_multiplier(state.material_for(element.id))
            * (element.width / STANDARD_CABINET_WIDTH)
            for element in state.elements
            if element.is_cabinet
        }
        originals = set(state.original_walls)
        removed = [w for w in state.removed_walls if w in originals]
        added = [w for w in state.walls if w not in originals]
        return PriceBreakdown(
            cabinets=cabinets,
            colors=table.color_pricing.get(state.color_count, 0.0),
            walls_removed=len(removed) * table.remove_wall,
            walls_added=len(added) * table.add_wall,
        )

    def compute_price(self, state: RoomState) -> float:
        return self.breakdown(state).total


def compute_price(state: RoomState, price_table: PriceTable | None = None) -> float:
    """Total price of a design."""
    return PricingService(price_table).compute_price(state)
