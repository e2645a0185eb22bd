"""Pytest configuration and shared fixtures for room layout tests."""

from __future__ import annotations

import pytest

from roomlayout.application.factory import ServiceFactory, reset_factory
from roomlayout.domain.catalog import get_element_spec
from roomlayout.domain.entities import Element, RoomState
from roomlayout.domain.value_objects import LayoutTolerances


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture(autouse=True)
def _reset_default_factory():
    yield
    reset_factory()


@pytest.fixture
def tolerances() -> LayoutTolerances:
    return LayoutTolerances()


@pytest.fixture
def factory() -> ServiceFactory:
    """Service factory with default tolerances and prices."""
    return ServiceFactory()


@pytest.fixture
def room() -> RoomState:
    """A 10ft x 8ft room: scale 5, 600 x 480 design units."""
    return RoomState.create(10, 8)


@pytest.fixture
def big_room() -> RoomState:
    """A 50ft x 40ft room at scale 1, 600 x 480 design units."""
    return RoomState.create(50, 40)


def make_element(
    element_id: str,
    element_type: str = "base",
    x: float = 0.0,
    y: float = 0.0,
    rotation: int = 0,
    **overrides,
) -> Element:
    """Build an element from its catalog defaults."""
    spec = get_element_spec(element_type)
    assert spec is not None
    values = dict(
        id=element_id,
        type=element_type,
        category=spec.category,
        x=x,
        y=y,
        width=spec.default_width,
        depth=spec.default_depth,
        actual_height=spec.height,
        mount_height=spec.mount_height or 0.0,
        rotation=rotation,
    )
    values.update(overrides)
    return Element(**values)


@pytest.fixture
def element_factory():
    """The make_element helper as a fixture."""
    return make_element
