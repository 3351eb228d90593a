"""
Negotiation chat WebSocket endpoint.

WHAT: Real-time channel for join_chat / send_message events
WHY: Vendors and suppliers negotiate price per product room
HOW: One receive loop per socket, frames handed to the ChatCoordinator
"""

from uuid import uuid4

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from ...models.chat import ChatEvent, ErrorMessage, JoinChatPayload
from ...realtime.coordinator import ChatCoordinator, get_coordinator
from ...realtime.frames import parse_frame
from ...realtime.room_registry import envelope
from ...utils.exceptions import BusinessException
from ...utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.websocket("/ws/chat")
async def chat_socket(websocket: WebSocket, coordinator: ChatCoordinator = Depends(get_coordinator)):
    """
    Serve one chat connection until it disconnects.

    Bad frames are answered with an `error` event; the socket stays open.
    """
    await websocket.accept()
    connection_id = uuid4().hex
    logger.info(f"A user connected for chat ({connection_id})")

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                _, payload = parse_frame(raw)
                if isinstance(payload, JoinChatPayload):
                    await coordinator.join(connection_id, websocket, payload)
                else:
                    await coordinator.relay_message(connection_id, payload)
            except BusinessException as e:
                logger.warning(f"Rejected frame from {connection_id}: {e.code} - {e.message}")
                error = ErrorMessage(error=e.code, message=e.message)
                await websocket.send_json(envelope(ChatEvent.ERROR.value, error.to_wire()))
    except WebSocketDisconnect:
        pass
    finally:
        await coordinator.disconnect(connection_id)
