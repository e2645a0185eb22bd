"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from roomlayout.domain.value_objects import LayoutTolerances

if TYPE_CHECKING:
    from roomlayout.application.config import RoomLayoutConfiguration
    from roomlayout.domain.services import (
        CollisionDetector,
        DoorClearanceService,
        DoorEditor,
        ElementEditor,
        PlacementController,
        PriceTable,
        PricingService,
        PushAwayResolver,
        SnapResolver,
        WallEditor,
        WallServiceAvailability,
    )


@dataclass
class ServiceFactory:
    """Factory for creating layout services.

    Services are created lazily and shared, so every service built by one
    factory sees the same tolerances and collaborators.

    Attributes:
        tolerances: Layout tolerances for all geometry services.
        availability: Wall service switches; defaults to everything enabled.
        price_table: Price table; defaults to the built-in prices.
    """

    tolerances: LayoutTolerances = field(default_factory=LayoutTolerances)
    availability: WallServiceAvailability | None = None
    price_table: PriceTable | None = None

    _clearance_service: DoorClearanceService | None = field(default=None, repr=False)
    _collision_detector: CollisionDetector | None = field(default=None, repr=False)
    _push_resolver: PushAwayResolver | None = field(default=None, repr=False)
    _snap_resolver: SnapResolver | None = field(default=None, repr=False)
    _wall_editor: WallEditor | None = field(default=None, repr=False)
    _door_editor: DoorEditor | None = field(default=None, repr=False)
    _element_editor: ElementEditor | None = field(default=None, repr=False)
    _placement_controller: PlacementController | None = field(default=None, repr=False)

    @classmethod
    def from_config(cls, config: RoomLayoutConfiguration) -> ServiceFactory:
        """Create a factory configured from a loaded configuration file."""
        from roomlayout.application.config import (
            config_to_price_table,
            config_to_tolerances,
            config_to_wall_services,
        )

        return cls(
            tolerances=config_to_tolerances(config.engine),
            availability=config_to_wall_services(config.services),
            price_table=config_to_price_table(config.pricing),
        )

    def get_clearance_service(self) -> DoorClearanceService:
        """Get or create door clearance service instance."""
        if self._clearance_service is None:
            from roomlayout.domain.services import DoorClearanceService

            self._clearance_service = DoorClearanceService(self.tolerances)
        return self._clearance_service

    def get_collision_detector(self) -> CollisionDetector:
        """Get or create collision detector instance."""
        if self._collision_detector is None:
            from roomlayout.domain.services import CollisionDetector

            self._collision_detector = CollisionDetector(
                self.tolerances, self.get_clearance_service()
            )
        return self._collision_detector

    def get_push_resolver(self) -> PushAwayResolver:
        """Get or create push-away resolver instance."""
        if self._push_resolver is None:
            from roomlayout.domain.services import PushAwayResolver

            self._push_resolver = PushAwayResolver(
                self.tolerances, self.get_collision_detector()
            )
        return self._push_resolver

    def get_snap_resolver(self) -> SnapResolver:
        """Get or create snap resolver instance."""
        if self._snap_resolver is None:
            from roomlayout.domain.services import SnapResolver

            self._snap_resolver = SnapResolver(
                self.tolerances, self.get_collision_detector(), self.get_push_resolver()
            )
        return self._snap_resolver

    def get_wall_editor(self) -> WallEditor:
        """Get or create wall editor instance."""
        if self._wall_editor is None:
            from roomlayout.domain.services import WallEditor

            self._wall_editor = WallEditor(
                self.tolerances, self.get_snap_resolver(), self.availability
            )
        return self._wall_editor

    def get_door_editor(self) -> DoorEditor:
        """Get or create door editor instance."""
        if self._door_editor is None:
            from roomlayout.domain.services import DoorEditor

            self._door_editor = DoorEditor()
        return self._door_editor

    def get_element_editor(self) -> ElementEditor:
        """Get or create element editor instance."""
        if self._element_editor is None:
            from roomlayout.domain.services import ElementEditor

            self._element_editor = ElementEditor(
                self.tolerances, self.get_clearance_service()
            )
        return self._element_editor

    def get_placement_controller(self) -> PlacementController:
        """Get or create placement controller instance."""
        if self._placement_controller is None:
            from roomlayout.domain.services import PlacementController

            self._placement_controller = PlacementController(
                tolerances=self.tolerances,
                collision_detector=self.get_collision_detector(),
                push_resolver=self.get_push_resolver(),
                snap_resolver=self.get_snap_resolver(),
                wall_editor=self.get_wall_editor(),
                door_editor=self.get_door_editor(),
                element_editor=self.get_element_editor(),
            )
        return self._placement_controller

    def get_pricing_service(self) -> PricingService:
        """Create pricing service instance."""
        from roomlayout.domain.services import PricingService

        return PricingService(self.price_table)


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
