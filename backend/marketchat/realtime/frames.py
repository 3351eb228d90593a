"""
WebSocket frame parsing.

WHAT: Decode `{"event": ..., "data": {...}}` frames into typed payloads
WHY: The socket loop should only see validated join/send payloads
HOW: json + pydantic validation, failures raised as ValidationException
"""

import json
from typing import Tuple, Union

from pydantic import ValidationError

from ..models.chat import ChatEvent, JoinChatPayload, SendMessagePayload
from ..utils.exceptions import ValidationException

ClientPayload = Union[JoinChatPayload, SendMessagePayload]

CLIENT_EVENTS = {
    ChatEvent.JOIN_CHAT.value: JoinChatPayload,
    ChatEvent.SEND_MESSAGE.value: SendMessagePayload,
}


def parse_frame(raw: str) -> Tuple[ChatEvent, ClientPayload]:
    """
    Parse one client frame.

    Args:
        raw: Text frame received on the socket

    Returns:
        (event, payload) for `join_chat` or `send_message`

    Raises:
        ValidationException: bad JSON, unknown event or invalid payload
    """
    try:
        frame = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationException("Invalid JSON")

    if not isinstance(frame, dict) or not isinstance(frame.get("event"), str):
        raise ValidationException("Frame must be a JSON object with an 'event' field")

    event = frame["event"]
    model = CLIENT_EVENTS.get(event)
    if model is None:
        raise ValidationException(f"Unknown event: {event}")

    try:
        payload = model.model_validate(frame.get("data") or {})
    except ValidationError as e:
        field_errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in e.errors()
        ]
        raise ValidationException(f"Invalid '{event}' payload", field_errors=field_errors)

    return ChatEvent(event), payload
