"""Real-time chat layer: room membership and negotiation protocol."""

from .room_registry import Connection, RoomRegistry, envelope
from .coordinator import ChatCoordinator, chat_coordinator, get_coordinator, welcome_text

__all__ = [
    "Connection",
    "RoomRegistry",
    "envelope",
    "ChatCoordinator",
    "chat_coordinator",
    "get_coordinator",
    "welcome_text",
]
