"""Domain entities for room layout."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    STANDARD_WALL_NUMBERS,
    Bounds,
    ColorCount,
    DoorType,
    ElementCategory,
    HingeDirection,
    Point2D,
    VALID_ROTATIONS,
    WallSegment,
)

DEFAULT_WALL_HEIGHT = 96.0
DEFAULT_MATERIAL = "laminate"


@dataclass(frozen=True)
class RoomDimensions:
    """Room footprint and ceiling height.

    Attributes:
        width_ft: East-west extent in feet.
        height_ft: North-south extent in feet.
        wall_height_in: Ceiling height in inches.
    """

    width_ft: float
    height_ft: float
    wall_height_in: float = DEFAULT_WALL_HEIGHT

    def __post_init__(self) -> None:
        if self.width_ft <= 0 or self.height_ft <= 0:
            raise ValueError("Room width and height must be positive")
        if self.wall_height_in <= 0:
            raise ValueError("Wall height must be positive")

    @property
    def width_in(self) -> float:
        return self.width_ft * 12

    @property
    def height_in(self) -> float:
        return self.height_ft * 12

    def scale_for(self, canvas_size: float) -> float:
        """Design units per inch that fit the room into the canvas budget."""
        return min(canvas_size / self.width_in, canvas_size / self.height_in)


@dataclass(frozen=True)
class Element:
    """A placed cabinet or appliance.

    Position is the top-left corner of the rotated footprint in design
    units; width, depth and heights are in inches.

    Attributes:
        id: Unique identifier.
        type: Catalog type key.
        category: Cabinet or appliance.
        x: Left edge in design units.
        y: Top edge in design units.
        width: Width in inches.
        depth: Depth in inches.
        actual_height: Height in inches.
        mount_height: Distance from floor to the element's bottom, inches.
        rotation: Quarter-turn rotation in degrees.
        hinge_direction: Hinge side for door-fronted elements.
    """

    id: str
    type: str
    category: ElementCategory
    x: float
    y: float
    width: float
    depth: float
    actual_height: float
    mount_height: float = 0.0
    rotation: int = 0
    hinge_direction: HingeDirection = HingeDirection.LEFT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.actual_height <= 0:
            raise ValueError("Element dimensions must be positive")
        if self.mount_height < 0:
            raise ValueError("Mount height must be non-negative")
        if self.rotation not in VALID_ROTATIONS:
            raise ValueError(f"Rotation must be one of {VALID_ROTATIONS}")

    @property
    def is_cabinet(self) -> bool:
        return self.category == ElementCategory.CABINET

    @property
    def is_wall_mounted(self) -> bool:
        return self.mount_height > 0

    @property
    def vertical_span(self) -> tuple[float, float]:
        """Bottom and top of the element above the floor, in inches."""
        return (self.mount_height, self.mount_height + self.actual_height)

    def footprint(self, scale: float) -> tuple[float, float]:
        """Width and height of the floor footprint in design units.

        A quarter turn swaps width and depth.
        """
        if self.rotation % 180 == 90:
            return (self.depth * scale, self.width * scale)
        return (self.width * scale, self.depth * scale)

    def bounds(self, scale: float) -> Bounds:
        w, h = self.footprint(scale)
        return Bounds(self.x, self.y, w, h)

    def moved_to(self, x: float, y: float) -> Element:
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class Door:
    """A door opening in a wall.

    Attributes:
        id: Unique identifier.
        wall_number: Wall the door sits in.
        position: Center of the opening as a percentage of wall length.
        width: Opening width in inches.
        type: Kind of door.
    """

    id: str
    wall_number: int
    position: float
    width: float
    type: DoorType = DoorType.STANDARD

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Door width must be positive")
        if not 0 <= self.position <= 100:
            raise ValueError("Door position must be between 0 and 100")


@dataclass(frozen=True)
class CustomWall:
    """A wall drawn by the user inside the room.

    Attributes:
        wall_number: Identifier, always greater than 4.
        x1: Start point x in design units.
        y1: Start point y in design units.
        x2: End point x in design units.
        y2: End point y in design units.
        thickness: Thickness in design units.
        existed_prior: True if the wall was already in the room before
            renovation, which makes its removal chargeable.
        angle: Last rotation applied, in degrees.
    """

    wall_number: int
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 6.0
    existed_prior: bool = False
    angle: float | None = None

    def __post_init__(self) -> None:
        if self.wall_number in STANDARD_WALL_NUMBERS:
            raise ValueError("Custom wall numbers must not clash with standard walls")

    @property
    def id(self) -> str:
        return f"wall-{self.wall_number}"

    def segment(self) -> WallSegment:
        return WallSegment(
            wall_number=self.wall_number,
            x1=self.x1,
            y1=self.y1,
            x2=self.x2,
            y2=self.y2,
            thickness=self.thickness,
            is_custom=True,
        )


@dataclass(frozen=True)
class RoomState:
    """Complete design of one room.

    Commands never mutate a state; they return a new one. Membership sets
    are kept as sorted tuples of wall numbers.

    Attributes:
        dimensions: Room footprint and ceiling height.
        scale: Design units per inch, fixed at room setup.
        elements: Placed cabinets and appliances.
        custom_walls: User-drawn walls, including removed ones.
        doors: Door openings.
        walls: Walls currently present.
        removed_walls: Original walls that have been removed.
        all_available_walls: Every wall number that exists in the design.
        original_walls: Walls that existed before renovation.
        materials: Material chosen per cabinet id.
        color_count: Number of finish colors.
    """

    dimensions: RoomDimensions
    scale: float
    elements: tuple[Element, ...] = ()
    custom_walls: tuple[CustomWall, ...] = ()
    doors: tuple[Door, ...] = ()
    walls: tuple[int, ...] = STANDARD_WALL_NUMBERS
    removed_walls: tuple[int, ...] = ()
    all_available_walls: tuple[int, ...] = STANDARD_WALL_NUMBERS
    original_walls: tuple[int, ...] = STANDARD_WALL_NUMBERS
    materials: dict[str, str] = field(default_factory=dict, hash=False)
    color_count: ColorCount = ColorCount.ONE
    standard_wall_thickness: float = 10.0

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError("Scale must be positive")
        if set(self.walls) & set(self.removed_walls):
            raise ValueError("A wall cannot be both present and removed")
        if not set(self.walls) <= set(self.all_available_walls):
            raise ValueError("Present walls must be available walls")

    @classmethod
    def create(
        cls,
        width_ft: float,
        height_ft: float,
        wall_height_in: float = DEFAULT_WALL_HEIGHT,
        canvas_size: float = 600.0,
        standard_wall_thickness: float = 10.0,
    ) -> RoomState:
        """Create an empty room with all four standard walls.

        Args:
            width_ft: Room width in feet.
            height_ft: Room depth in feet.
            wall_height_in: Ceiling height in inches.
            canvas_size: Design-space budget used to compute the scale.
            standard_wall_thickness: Thickness of the boundary walls.

        Returns:
            A fresh RoomState.
        """
        dimensions = RoomDimensions(width_ft, height_ft, wall_height_in)
        return cls(
            dimensions=dimensions,
            scale=dimensions.scale_for(canvas_size),
            standard_wall_thickness=standard_wall_thickness,
        )

    @property
    def room_width(self) -> float:
        """Room width in design units."""
        return self.dimensions.width_in * self.scale

    @property
    def room_height(self) -> float:
        """Room depth in design units."""
        return self.dimensions.height_in * self.scale

    @property
    def room_bounds(self) -> Bounds:
        return Bounds(0.0, 0.0, self.room_width, self.room_height)

    @property
    def wall_height(self) -> float:
        return self.dimensions.wall_height_in

    def standard_wall_segment(self, wall_number: int) -> WallSegment:
        """Synthesize one of the four boundary walls."""
        w, h = self.room_width, self.room_height
        coords = {
            1: (0.0, 0.0, w, 0.0),
            2: (w, 0.0, w, h),
            3: (0.0, h, w, h),
            4: (0.0, 0.0, 0.0, h),
        }
        if wall_number not in coords:
            raise ValueError(f"Wall {wall_number} is not a standard wall")
        x1, y1, x2, y2 = coords[wall_number]
        return WallSegment(wall_number, x1, y1, x2, y2, self.standard_wall_thickness)

    def wall_segment(self, wall_number: int) -> WallSegment | None:
        """Segment for any wall number, present or not."""
        if wall_number in STANDARD_WALL_NUMBERS:
            return self.standard_wall_segment(wall_number)
        custom = self.custom_wall(wall_number)
        return custom.segment() if custom is not None else None

    def present_wall_segments(self) -> list[WallSegment]:
        """Segments of every present wall, standard walls first."""
        segments = [
            self.standard_wall_segment(n)
            for n in STANDARD_WALL_NUMBERS
            if n in self.walls
        ]
        segments.extend(
            wall.segment()
            for wall in self.custom_walls
            if wall.wall_number in self.walls
        )
        return segments

    def present_custom_walls(self) -> list[CustomWall]:
        return [w for w in self.custom_walls if w.wall_number in self.walls]

    def custom_wall(self, wall_number: int) -> CustomWall | None:
        for wall in self.custom_walls:
            if wall.wall_number == wall_number:
                return wall
        return None

    def is_wall_present(self, wall_number: int) -> bool:
        return wall_number in self.walls

    def wall_length_inches(self, wall_number: int) -> float | None:
        """Length of a wall in inches, or None for an unknown wall."""
        if wall_number in (1, 3):
            return self.dimensions.width_in
        if wall_number in (2, 4):
            return self.dimensions.height_in
        custom = self.custom_wall(wall_number)
        if custom is None:
            return None
        return custom.segment().length / self.scale

    def element(self, element_id: str) -> Element | None:
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def door(self, door_id: str) -> Door | None:
        for door in self.doors:
            if door.id == door_id:
                return door
        return None

    def doors_on_wall(self, wall_number: int) -> list[Door]:
        return [d for d in self.doors if d.wall_number == wall_number]

    def material_for(self, element_id: str) -> str:
        return self.materials.get(element_id, DEFAULT_MATERIAL)

    def clamp_to_room(self, x: float, y: float, w: float, h: float) -> Point2D:
        """Clamp a top-left corner so the footprint stays inside the room."""
        return Point2D(
            max(0.0, min(x, self.room_width - w)),
            max(0.0, min(y, self.room_height - h)),
        )

    def replace_element(self, element: Element) -> RoomState:
        """Return a state with the element of the same id replaced."""
        return replace(
            self,
            elements=tuple(element if e.id == element.id else e for e in self.elements),
        )

    def next_wall_number(self) -> int:
        used = set(self.all_available_walls) | {w.wall_number for w in self.custom_walls}
        return max(used | {4}) + 1
