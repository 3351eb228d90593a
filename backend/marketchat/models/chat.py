"""
Chat protocol models.

WHAT: Inbound/outbound chat payloads, participants and negotiation results
WHY: Validate client frames and keep the wire format in one place
HOW: Pydantic v2 models; camelCase aliases for the wire, snake_case in code
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Role = Literal["Vendor", "Supplier"]
Sender = Literal["System", "Vendor", "Supplier"]

VENDOR: Role = "Vendor"
SUPPLIER: Role = "Supplier"
SYSTEM: Sender = "System"


class ChatEvent(str, Enum):
    """Event names carried in the WebSocket envelope."""

    JOIN_CHAT = "join_chat"
    SEND_MESSAGE = "send_message"
    CHAT_MESSAGE = "chat_message"
    DEAL_FINALIZED = "deal_finalized"
    ERROR = "error"


class RoomState(str, Enum):
    """Negotiation state of a room."""

    IDLE = "idle"
    DEAL_FINALIZED = "deal_finalized"


class WireModel(BaseModel):
    """Base for models that travel over the socket."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ========== Client -> Server ==========

class JoinChatPayload(WireModel):
    """Body of a `join_chat` event."""
    chat_room: str = Field(..., min_length=1, alias="chatRoom", description="Product id")
    product_name: str | None = Field(default=None, alias="productName")
    role: Role
    mobile: str = ""


class SendMessagePayload(WireModel):
    """Body of a `send_message` event."""
    chat_room: str = Field(..., min_length=1, alias="chatRoom")
    user: Role
    message: str = Field(..., max_length=1000)
    mobile: str = ""


# ========== Server -> Client ==========

class ChatMessage(WireModel):
    """Body of a `chat_message` event."""
    user: Sender
    message: str
    is_system: bool | None = Field(default=None, alias="isSystem")


class DealFinalized(WireModel):
    """Body of a `deal_finalized` event."""
    final_price: int | float = Field(..., alias="finalPrice")
    supplier_contact: str = Field(..., alias="supplierContact")
    vendor_contact: str = Field(..., alias="vendorContact")
    distance: str


class ErrorMessage(WireModel):
    """Body of an `error` event."""
    error: str
    message: str


# ========== Internal ==========

class Participant(BaseModel):
    """A connection attached to a chat room."""

    model_config = ConfigDict(frozen=True)

    connection_id: str
    room_id: str
    role: Role
    mobile: str = ""


class NegotiationOutcome(BaseModel):
    """Result of evaluating one offer; produced fresh per message."""

    model_config = ConfigDict(frozen=True)

    reply_text: str
    deal_accepted: bool = False
    final_price: int | None = None
