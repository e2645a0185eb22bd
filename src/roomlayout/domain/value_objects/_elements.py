"""Placeable element classification value objects."""

from __future__ import annotations

from enum import Enum


class ElementCategory(str, Enum):
    """Broad grouping of placeable elements.

    Only cabinets take part in element-to-element collision and pricing.
    """

    CABINET = "cabinet"
    APPLIANCE = "appliance"


class HingeDirection(str, Enum):
    """Side on which a door-fronted element is hinged."""

    LEFT = "left"
    RIGHT = "right"


class ColorCount(str, Enum):
    """Number of finish colors chosen for the cabinetry."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    CUSTOM = "custom"


VALID_ROTATIONS: tuple[int, ...] = (0, 90, 180, 270)


def normalize_rotation(degrees: float) -> int:
    """Snap an angle to the nearest quarter turn in [0, 360)."""
    return int(round(degrees / 90.0)) * 90 % 360
