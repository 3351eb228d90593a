"""
Chat room registry.

WHAT: Room-scoped membership with join/leave/broadcast/send primitives
WHY: One place that knows which live connections belong to which product room
HOW: room_id -> {connection_id: connection}; rooms appear on first join and
     disappear when their last member leaves
"""

from typing import Any, Dict, Optional, Protocol, Tuple

from ..utils.logger import get_logger

logger = get_logger(__name__)


class Connection(Protocol):
    """Anything that can push a JSON frame to a client (e.g. a WebSocket)."""

    async def send_json(self, data: Any) -> None: ...


def envelope(event: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a payload in the wire envelope used on the socket."""
    return {"event": event, "data": data}


class RoomRegistry:
    """
    Track room membership for live connections.

    A connection belongs to at most one room; joining another room moves it.
    """

    def __init__(self):
        self._rooms: Dict[str, Dict[str, Connection]] = {}
        self._room_of: Dict[str, str] = {}
        self._connections: Dict[str, Connection] = {}

    def join(self, room_id: str, connection_id: str, connection: Connection) -> int:
        """
        Add a connection to a room.

        Returns:
            Member count of the room after the join
        """
        previous = self._room_of.get(connection_id)
        if previous is not None and previous != room_id:
            self._remove_from_room(previous, connection_id)

        members = self._rooms.setdefault(room_id, {})
        members[connection_id] = connection
        self._room_of[connection_id] = room_id
        self._connections[connection_id] = connection

        logger.debug(f"Connection {connection_id} in room {room_id} ({len(members)} members)")
        return len(members)

    def leave(self, connection_id: str) -> Optional[Tuple[str, int]]:
        """
        Remove a connection from whatever room it is in.

        Returns:
            (room_id, remaining member count), or None if it was in no room
        """
        self._connections.pop(connection_id, None)
        room_id = self._room_of.pop(connection_id, None)
        if room_id is None:
            return None

        remaining = self._remove_from_room(room_id, connection_id)
        return room_id, remaining

    def _remove_from_room(self, room_id: str, connection_id: str) -> int:
        members = self._rooms.get(room_id)
        if members is None:
            return 0

        members.pop(connection_id, None)
        if not members:
            del self._rooms[room_id]
            logger.debug(f"Room {room_id} is empty and was released")
            return 0
        return len(members)

    def room_of(self, connection_id: str) -> Optional[str]:
        return self._room_of.get(connection_id)

    def member_count(self, room_id: str) -> int:
        return len(self._rooms.get(room_id, {}))

    def rooms(self) -> Dict[str, int]:
        """Snapshot of room_id -> member count."""
        return {room_id: len(members) for room_id, members in self._rooms.items()}

    async def send(self, connection_id: str, event: str, data: Dict[str, Any]) -> bool:
        """
        Send an event to a single connection.

        Returns:
            True if delivered, False if the connection is gone or the send failed
        """
        connection = self._connections.get(connection_id)
        if connection is None:
            logger.debug(f"Dropping '{event}' for unknown connection {connection_id}")
            return False

        try:
            await connection.send_json(envelope(event, data))
            return True
        except Exception as e:
            logger.warning(f"Send of '{event}' to {connection_id} failed: {e}")
            return False

    async def broadcast(self, room_id: str, event: str, data: Dict[str, Any]) -> int:
        """
        Send an event to every member of a room, the sender included.

        Members whose send fails are dropped from the room. Broadcasting to
        an empty or unknown room is a no-op.

        Returns:
            Number of members the event was delivered to
        """
        members = list(self._rooms.get(room_id, {}).items())
        if not members:
            logger.debug(f"Broadcast of '{event}' to empty room {room_id} skipped")
            return 0

        frame = envelope(event, data)
        delivered = 0
        for connection_id, connection in members:
            try:
                await connection.send_json(frame)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping {connection_id} from room {room_id}: {e}")
                self.leave(connection_id)

        return delivered
