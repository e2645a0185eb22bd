"""Application layer - sessions, persistence and service wiring."""

from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .persistence import (
    RoomDocument,
    document_to_room_state,
    dump_room_document,
    load_room_document,
    load_room_state,
    room_state_to_document,
)
from .session import DesignSession, RoomNotSetUpError

__all__ = [
    "DesignSession",
    "RoomDocument",
    "RoomNotSetUpError",
    "ServiceFactory",
    "document_to_room_state",
    "dump_room_document",
    "get_factory",
    "load_room_document",
    "load_room_state",
    "reset_factory",
    "room_state_to_document",
    "set_factory",
]
