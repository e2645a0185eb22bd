"""Room document persistence.

A saved room is a camelCase JSON document. Loading is forgiving: missing
fields take defaults, entries that cannot be parsed are dropped, and
elements of unknown types are dropped with a logged warning. Only a file
that cannot be read or is not a JSON object fails with ConfigError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from roomlayout.application.config.loader import read_json_file, validate_model
from roomlayout.domain.catalog import get_element_spec
from roomlayout.domain.entities import (
    CustomWall,
    Door,
    Element,
    RoomDimensions,
    RoomState,
)
from roomlayout.domain.value_objects import (
    STANDARD_WALL_NUMBERS,
    ColorCount,
    DoorType,
    ElementCategory,
    HingeDirection,
    LayoutTolerances,
    normalize_rotation,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CustomWallDocument",
    "DimensionsDocument",
    "DoorDocument",
    "ElementDocument",
    "RoomDocument",
    "document_to_room_state",
    "dump_room_document",
    "load_room_document",
    "load_room_state",
    "room_state_to_document",
]


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _id_to_str(v: Any) -> Any:
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(int(v)) if float(v).is_integer() else str(v)
    return v


class DimensionsDocument(_DocumentModel):
    """Room dimensions; width and height in feet, wall height in inches."""

    width: float | None = None
    height: float | None = None
    wall_height: float | None = 96.0

    @field_validator("width", "height", "wall_height", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("wall_height", mode="after")
    @classmethod
    def default_wall_height(cls, v: float | None) -> float:
        return 96.0 if v is None or v <= 0 else v

    @property
    def is_complete(self) -> bool:
        return bool(self.width and self.height and self.width > 0 and self.height > 0)


class ElementDocument(_DocumentModel):
    """A saved element. Missing sizes fall back to the catalog."""

    id: str
    type: str
    x: float = 0.0
    y: float = 0.0
    width: float | None = None
    depth: float | None = None
    actual_height: float | None = None
    mount_height: float | None = None
    rotation: float = 0.0
    hinge_direction: str = HingeDirection.LEFT.value
    category: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


class DoorDocument(_DocumentModel):
    """A saved door."""

    id: str
    wall_number: int
    position: float = 50.0
    width: float | None = None
    type: str = DoorType.STANDARD.value

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


class CustomWallDocument(_DocumentModel):
    """A saved custom wall. The doors list is written for readers but ignored on load."""

    id: str | None = None
    wall_number: int
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 6.0
    is_custom: bool = True
    existed_prior: bool = False
    angle: float | None = None
    doors: list[DoorDocument] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


def _lenient_items(model: type[BaseModel], items: Any, label: str) -> list[Any]:
    """Validate list entries one by one, dropping the ones that fail."""
    if items is None:
        return []
    if not isinstance(items, list):
        logger.warning(f"Ignoring {label}: expected a list")
        return []
    kept = []
    for index, item in enumerate(items):
        try:
            kept.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping malformed {label}[{index}]: {e.error_count()} error(s)")
    return kept


def _lenient_wall_numbers(value: Any, label: str, default: list[int] | None) -> list[int] | None:
    """Coerce a wall-number list, dropping entries that are not integers."""
    if value is None:
        return default
    if not isinstance(value, list):
        logger.warning(f"Ignoring {label}: expected a list")
        return default
    numbers = []
    for index, item in enumerate(value):
        if isinstance(item, bool):
            number = None
        elif isinstance(item, int):
            number = item
        elif isinstance(item, float) and item.is_integer():
            number = int(item)
        elif isinstance(item, str) and item.strip().isdigit():
            number = int(item)
        else:
            number = None
        if number is None:
            logger.warning(f"Dropping malformed {label}[{index}]: {item!r}")
        else:
            numbers.append(number)
    return numbers


class RoomDocument(_DocumentModel):
    """A saved room design.

    Attributes:
        dimensions: Room size; None while the room has not been set up.
        elements: Placed cabinets and appliances.
        materials: Material per cabinet id.
        walls: Present wall numbers.
        removed_walls: Removed original wall numbers.
        custom_walls: User-drawn walls.
        all_available_walls: Every wall number in the design.
        original_walls: Walls that existed before renovation.
        doors: Door openings.
        color_count: Number of finish colors.
    """

    dimensions: DimensionsDocument | None = None
    elements: list[ElementDocument] = Field(default_factory=list)
    materials: dict[str, str] = Field(default_factory=dict)
    walls: list[int] = Field(default_factory=lambda: list(STANDARD_WALL_NUMBERS))
    removed_walls: list[int] = Field(default_factory=list)
    custom_walls: list[CustomWallDocument] = Field(default_factory=list)
    all_available_walls: list[int] | None = None
    original_walls: list[int] = Field(default_factory=lambda: list(STANDARD_WALL_NUMBERS))
    doors: list[DoorDocument] = Field(default_factory=list)
    color_count: str = ColorCount.ONE.value

    @field_validator("elements", mode="before")
    @classmethod
    def lenient_elements(cls, v: Any) -> list[Any]:
        return _lenient_items(ElementDocument, v, "elements")

    @field_validator("doors", mode="before")
    @classmethod
    def lenient_doors(cls, v: Any) -> list[Any]:
        return _lenient_items(DoorDocument, v, "doors")

    @field_validator("custom_walls", mode="before")
    @classmethod
    def lenient_custom_walls(cls, v: Any) -> list[Any]:
        return _lenient_items(CustomWallDocument, v, "customWalls")

    @field_validator("walls", "original_walls", mode="before")
    @classmethod
    def lenient_standard_wall_lists(cls, v: Any, info: ValidationInfo) -> list[int]:
        return _lenient_wall_numbers(v, to_camel(info.field_name), list(STANDARD_WALL_NUMBERS))

    @field_validator("removed_walls", mode="before")
    @classmethod
    def lenient_removed_walls(cls, v: Any) -> list[int]:
        return _lenient_wall_numbers(v, "removedWalls", [])

    @field_validator("all_available_walls", mode="before")
    @classmethod
    def lenient_available_walls(cls, v: Any) -> list[int] | None:
        return _lenient_wall_numbers(v, "allAvailableWalls", None)

    @field_validator("materials", mode="before")
    @classmethod
    def coerce_material_keys(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(_id_to_str(k)): m for k, m in v.items() if isinstance(m, str)}
        return {}

    @field_validator("color_count", mode="before")
    @classmethod
    def coerce_color_count(cls, v: Any) -> Any:
        if v is None:
            return ColorCount.ONE.value
        return str(v)

    def unknown_element_types(self) -> list[str]:
        """Element types in the document that the catalog does not know."""
        return sorted({e.type for e in self.elements if get_element_spec(e.type) is None})


def load_room_document(path: Path) -> RoomDocument:
    """Read a room document from a JSON file.

    Raises:
        ConfigError: If the file is missing, not valid JSON, or not an object.
    """
    data = read_json_file(path, kind="room document")
    return validate_model(RoomDocument, data, path, heading="Room document validation failed:")


def _element_from_document(doc: ElementDocument, known_ids: set[str]) -> Element | None:
    spec = get_element_spec(doc.type)
    if spec is None:
        logger.warning(f"Dropping element {doc.id}: unknown type '{doc.type}'")
        return None
    if doc.id in known_ids:
        logger.warning(f"Dropping element {doc.id}: duplicate id")
        return None

    rotation = normalize_rotation(doc.rotation)
    if rotation != doc.rotation % 360:
        logger.warning(f"Element {doc.id}: rotation {doc.rotation} snapped to {rotation}")
    try:
        category = ElementCategory(doc.category) if doc.category else spec.category
    except ValueError:
        category = spec.category
    try:
        hinge = HingeDirection(doc.hinge_direction)
    except ValueError:
        hinge = HingeDirection.LEFT

    try:
        return Element(
            id=doc.id,
            type=doc.type,
            category=category,
            x=doc.x,
            y=doc.y,
            width=doc.width or spec.default_width,
            depth=doc.depth or spec.default_depth,
            actual_height=doc.actual_height or spec.height,
            mount_height=(
                doc.mount_height if doc.mount_height is not None else spec.mount_height or 0.0
            ),
            rotation=rotation,
            hinge_direction=hinge,
        )
    except ValueError as e:
        logger.warning(f"Dropping element {doc.id}: {e}")
        return None


def _door_from_document(doc: DoorDocument) -> Door | None:
    try:
        door_type = DoorType(doc.type)
    except ValueError:
        logger.warning(f"Door {doc.id}: unknown type '{doc.type}', using standard")
        door_type = DoorType.STANDARD
    try:
        return Door(
            id=doc.id,
            wall_number=doc.wall_number,
            position=max(0.0, min(100.0, doc.position)),
            width=doc.width or door_type.default_width,
            type=door_type,
        )
    except ValueError as e:
        logger.warning(f"Dropping door {doc.id}: {e}")
        return None


def _custom_wall_from_document(doc: CustomWallDocument) -> CustomWall | None:
    try:
        return CustomWall(
            wall_number=doc.wall_number,
            x1=doc.x1,
            y1=doc.y1,
            x2=doc.x2,
            y2=doc.y2,
            thickness=doc.thickness if doc.thickness > 0 else 6.0,
            existed_prior=doc.existed_prior,
            angle=doc.angle,
        )
    except ValueError as e:
        logger.warning(f"Dropping custom wall {doc.wall_number}: {e}")
        return None


def document_to_room_state(
    document: RoomDocument, tolerances: LayoutTolerances | None = None
) -> RoomState | None:
    """Build a RoomState from a document.

    Membership sets are repaired so the state invariants hold: a wall that
    is both present and removed counts as present, and every present wall
    is available.

    Args:
        document: Parsed room document.
        tolerances: Provides the canvas size and standard wall thickness.

    Returns:
        The room state, or None if the document has no usable dimensions.
    """
    tolerances = tolerances or LayoutTolerances()
    dims = document.dimensions
    if dims is None or not dims.is_complete:
        logger.info("Room document has no dimensions; room is not set up")
        return None
    assert dims.width is not None and dims.height is not None
    dimensions = RoomDimensions(dims.width, dims.height, dims.wall_height or 96.0)

    elements: list[Element] = []
    seen: set[str] = set()
    for doc in document.elements:
        element = _element_from_document(doc, seen)
        if element is not None:
            elements.append(element)
            seen.add(element.id)

    custom_walls: list[CustomWall] = []
    for wall_doc in document.custom_walls:
        wall = _custom_wall_from_document(wall_doc)
        if wall is not None and all(w.wall_number != wall.wall_number for w in custom_walls):
            custom_walls.append(wall)
    custom_numbers = {w.wall_number for w in custom_walls}
    known_walls = set(STANDARD_WALL_NUMBERS) | custom_numbers

    doors = [d for d in (_door_from_document(doc) for doc in document.doors) if d is not None]

    walls = {w for w in document.walls if w in known_walls}
    removed = {w for w in document.removed_walls if w in known_walls} - walls
    if document.all_available_walls is None:
        available = known_walls
    else:
        available = {w for w in document.all_available_walls if w in known_walls}
    available |= walls | set(STANDARD_WALL_NUMBERS)

    try:
        color_count = ColorCount(document.color_count)
    except ValueError:
        logger.warning(f"Unknown color count '{document.color_count}', using 1")
        color_count = ColorCount.ONE

    return RoomState(
        dimensions=dimensions,
        scale=dimensions.scale_for(tolerances.canvas_size),
        elements=tuple(elements),
        custom_walls=tuple(custom_walls),
        doors=tuple(doors),
        walls=tuple(sorted(walls)),
        removed_walls=tuple(sorted(removed)),
        all_available_walls=tuple(sorted(available)),
        original_walls=tuple(sorted(set(document.original_walls))),
        materials={k: v for k, v in document.materials.items() if k in seen},
        color_count=color_count,
        standard_wall_thickness=tolerances.standard_wall_thickness,
    )


def room_state_to_document(state: RoomState) -> RoomDocument:
    """Convert a RoomState to its document form."""
    return RoomDocument(
        dimensions=DimensionsDocument(
            width=state.dimensions.width_ft,
            height=state.dimensions.height_ft,
            wall_height=state.dimensions.wall_height_in,
        ),
        elements=[
            ElementDocument(
                id=e.id,
                type=e.type,
                x=e.x,
                y=e.y,
                width=e.width,
                depth=e.depth,
                actual_height=e.actual_height,
                mount_height=e.mount_height,
                rotation=e.rotation,
                hinge_direction=e.hinge_direction.value,
                category=e.category.value,
            )
            for e in state.elements
        ],
        materials=dict(state.materials),
        walls=list(state.walls),
        removed_walls=list(state.removed_walls),
        custom_walls=[
            CustomWallDocument(
                id=w.id,
                wall_number=w.wall_number,
                x1=w.x1,
                y1=w.y1,
                x2=w.x2,
                y2=w.y2,
                thickness=w.thickness,
                existed_prior=w.existed_prior,
                angle=w.angle,
                doors=[_door_document(d) for d in state.doors_on_wall(w.wall_number)],
            )
            for w in state.custom_walls
        ],
        all_available_walls=list(state.all_available_walls),
        original_walls=list(state.original_walls),
        doors=[_door_document(d) for d in state.doors],
        color_count=state.color_count.value,
    )


def _door_document(door: Door) -> DoorDocument:
    return DoorDocument(
        id=door.id,
        wall_number=door.wall_number,
        position=door.position,
        width=door.width,
        type=door.type.value,
    )


def dump_room_document(state: RoomState, path: Path) -> None:
    """Write a RoomState to a JSON file in document form."""
    document = room_state_to_document(state)
    path.write_text(document.model_dump_json(by_alias=True, indent=2), encoding="utf-8")


def load_room_state(
    path: Path, tolerances: LayoutTolerances | None = None
) -> RoomState | None:
    """Read a room document file and build its RoomState."""
    return document_to_room_state(load_room_document(path), tolerances)
