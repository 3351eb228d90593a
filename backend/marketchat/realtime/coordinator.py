"""
Chat session coordinator.

WHAT: Drives the negotiation chat protocol for every product room
WHY: Joins, relays, simulated supplier replies and deal reveal need one owner
HOW: Participants keyed by connection id, one cancellable asyncio task per
     vendor message, per-room Idle -> DealFinalized state
"""

import asyncio
from typing import Dict, List, Optional, Set

from ..core.catalog import CatalogRepository, catalog
from ..core.config import settings
from ..models.catalog import Product
from ..models.chat import (
    SUPPLIER,
    SYSTEM,
    VENDOR,
    ChatEvent,
    ChatMessage,
    DealFinalized,
    JoinChatPayload,
    Participant,
    RoomState,
    SendMessagePayload,
)
from ..services.negotiation_engine import NegotiationPolicy, evaluate, format_amount
from .room_registry import Connection, RoomRegistry
from ..utils.logger import chat_logger, get_logger

logger = get_logger(__name__)


def welcome_text(product: Optional[Product], symbol: str = "₹") -> str:
    """Render the private welcome sent on join."""
    if product is None:
        return "Welcome to the chat for this product! You can now negotiate the price."
    return (
        f"Welcome to the chat for {product.name}! "
        f"MRP: {symbol}{format_amount(product.reference_price)}/{product.unit}. "
        f"You can now negotiate the price."
    )


class ChatCoordinator:
    """
    Orchestrate per-product negotiation rooms.

    WHAT: join / relay_message / disconnect handlers plus delayed replies
    WHY: Keep transport glue out of the pure negotiation engine
    HOW: Registry for membership, catalog for MRP lookups, asyncio tasks for
         the simulated "typing" delay
    """

    def __init__(
        self,
        registry: RoomRegistry,
        catalog: CatalogRepository,
        policy: Optional[NegotiationPolicy] = None,
        reply_delay: Optional[float] = None,
        supplier_contact: Optional[str] = None,
        deal_distance: Optional[str] = None,
        allow_offers_after_deal: Optional[bool] = None,
    ):
        self.registry = registry
        self.catalog = catalog
        self.policy = policy or NegotiationPolicy.from_settings()
        self.reply_delay = settings.REPLY_DELAY_SECONDS if reply_delay is None else reply_delay
        self.supplier_contact = supplier_contact or settings.SUPPLIER_CONTACT
        self.deal_distance = deal_distance or settings.DEAL_DISTANCE
        self.allow_offers_after_deal = (
            settings.ALLOW_OFFERS_AFTER_DEAL if allow_offers_after_deal is None else allow_offers_after_deal
        )

        self.participants: Dict[str, Participant] = {}
        self._pending: Dict[str, Set[asyncio.Task]] = {}
        self._states: Dict[str, RoomState] = {}
        self._delivering: Set[asyncio.Task] = set()

    # ---------- queries ----------

    def room_state(self, room_id: str) -> RoomState:
        return self._states.get(room_id, RoomState.IDLE)

    def pending_replies(self, room_id: str) -> List[asyncio.Task]:
        return list(self._pending.get(room_id, ()))

    def room_snapshot(self) -> List[dict]:
        """Diagnostic view of every live room."""
        snapshot = []
        for room_id, members in sorted(self.registry.rooms().items()):
            product = self.catalog.get_product(room_id)
            snapshot.append({
                "room_id": room_id,
                "product_name": product.name if product else None,
                "members": members,
                "state": self.room_state(room_id).value,
                "pending_replies": len(self._pending.get(room_id, ())),
            })
        return snapshot

    # ---------- handlers ----------

    async def join(self, connection_id: str, connection: Connection, payload: JoinChatPayload) -> Participant:
        """
        Attach a connection to a product room and welcome it privately.

        Unknown product ids still join; the welcome is just generic.
        """
        room_id = payload.chat_room
        previous = self.participants.get(connection_id)

        self.registry.join(room_id, connection_id, connection)
        participant = Participant(
            connection_id=connection_id,
            room_id=room_id,
            role=payload.role,
            mobile=payload.mobile,
        )
        self.participants[connection_id] = participant
        log = chat_logger(logger, room_id, connection_id)
        log.info(f"{payload.role} joined chat room")

        if previous is not None and previous.room_id != room_id:
            self._release_if_empty(previous.room_id)

        product = self.catalog.get_product(room_id)
        if product is None:
            log.warning("Join for unknown product; sending generic welcome")

        welcome = ChatMessage(
            user=SYSTEM,
            message=welcome_text(product, self.policy.currency_symbol),
            is_system=True,
        )
        await self.registry.send(connection_id, ChatEvent.CHAT_MESSAGE.value, welcome.to_wire())
        return participant

    async def relay_message(self, connection_id: str, payload: SendMessagePayload) -> Optional[asyncio.Task]:
        """
        Broadcast a participant message and, for vendors, schedule the reply.

        Returns:
            The scheduled reply task, or None when no reply was scheduled
        """
        room_id = payload.chat_room
        log = chat_logger(logger, room_id, connection_id)
        log.info(f"Message from {payload.user} ({payload.mobile}): {payload.message}")

        relayed = ChatMessage(user=payload.user, message=payload.message)
        await self._broadcast(room_id, ChatEvent.CHAT_MESSAGE.value, relayed.to_wire())

        product = self.catalog.get_product(room_id)
        if product is None:
            log.error("Product not found for chat room")
            return None

        if payload.user != VENDOR:
            return None

        if self.registry.member_count(room_id) == 0:
            log.info("Room has no reachable members; no reply scheduled")
            return None

        if self.room_state(room_id) == RoomState.DEAL_FINALIZED and not self.allow_offers_after_deal:
            log.info("Room already has a deal; not answering")
            notice = ChatMessage(
                user=SYSTEM,
                message=f"A deal for {product.name} has already been finalized in this chat.",
                is_system=True,
            )
            await self.registry.send(connection_id, ChatEvent.CHAT_MESSAGE.value, notice.to_wire())
            return None

        vendor_mobile = payload.mobile
        if not vendor_mobile and connection_id in self.participants:
            vendor_mobile = self.participants[connection_id].mobile

        return self._schedule_reply(room_id, product, payload.message, vendor_mobile)

    async def disconnect(self, connection_id: str) -> None:
        """Drop the participant and its membership; release the room when empty."""
        participant = self.participants.pop(connection_id, None)
        left = self.registry.leave(connection_id)

        room_id = participant.room_id if participant else (left[0] if left else None)
        chat_logger(logger, room_id or "-", connection_id).info("Disconnected from chat")
        if room_id is not None:
            self._release_if_empty(room_id)

    async def shutdown(self) -> None:
        """Cancel every pending reply and wait for the cancellations to land."""
        tasks = [task for pending in self._pending.values() for task in pending]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
        logger.info(f"Chat coordinator stopped ({len(tasks)} pending replies cancelled)")

    async def drain(self, room_id: Optional[str] = None) -> None:
        """Wait until the pending replies of one room (or all rooms) have finished."""
        while True:
            if room_id is None:
                tasks = [task for pending in self._pending.values() for task in pending]
            else:
                tasks = self.pending_replies(room_id)
            if not tasks:
                return
            await asyncio.gather(*tasks, return_exceptions=True)

    # ---------- delivery ----------

    async def _broadcast(self, room_id: str, event: str, data: dict) -> int:
        """
        Room broadcast that also forgets participants the registry dropped.

        A member whose send fails is removed from the room by the registry;
        its participant record goes too, and the room is released when that
        left it empty.
        """
        delivered = await self.registry.broadcast(room_id, event, data)

        dropped = [
            connection_id for connection_id, participant in self.participants.items()
            if participant.room_id == room_id and self.registry.room_of(connection_id) != room_id
        ]
        for connection_id in dropped:
            del self.participants[connection_id]
            chat_logger(logger, room_id, connection_id).info("Forgot unreachable participant")
        if dropped:
            self._release_if_empty(room_id)

        return delivered

    # ---------- delayed replies ----------

    def _schedule_reply(self, room_id: str, product: Product, message: str, vendor_mobile: str) -> asyncio.Task:
        task = asyncio.create_task(
            self._reply_after_delay(room_id, product, message, vendor_mobile),
            name=f"supplier-reply:{room_id}",
        )
        pending = self._pending.setdefault(room_id, set())
        pending.add(task)
        task.add_done_callback(lambda t: self._forget_task(room_id, t))
        logger.debug(f"Scheduled supplier reply in room {room_id} ({len(pending)} pending)")
        return task

    def _forget_task(self, room_id: str, task: asyncio.Task) -> None:
        pending = self._pending.get(room_id)
        if pending is None:
            return
        pending.discard(task)
        if not pending:
            del self._pending[room_id]

    async def _reply_after_delay(self, room_id: str, product: Product, message: str, vendor_mobile: str) -> None:
        await asyncio.sleep(self.reply_delay)

        if self.room_state(room_id) == RoomState.DEAL_FINALIZED and not self.allow_offers_after_deal:
            chat_logger(logger, room_id).info("Skipping supplier reply; deal already finalized")
            return

        outcome = evaluate(message, product, self.policy)
        if outcome.deal_accepted:
            # state flips before any await so no sibling reply can close a second deal
            self._finalize(room_id)

        current = asyncio.current_task()
        self._delivering.add(current)
        try:
            reply = ChatMessage(user=SUPPLIER, message=outcome.reply_text)
            await self._broadcast(room_id, ChatEvent.CHAT_MESSAGE.value, reply.to_wire())

            if not outcome.deal_accepted:
                return

            deal = DealFinalized(
                final_price=outcome.final_price,
                supplier_contact=self.supplier_contact,
                vendor_contact=vendor_mobile,
                distance=self.deal_distance,
            )
            delivered = await self._broadcast(room_id, ChatEvent.DEAL_FINALIZED.value, deal.to_wire())
            chat_logger(logger, room_id).info(
                f"Deal finalized at {outcome.final_price} (vendor {vendor_mobile}, {delivered} recipients)"
            )
        finally:
            self._delivering.discard(current)

    def _finalize(self, room_id: str) -> None:
        """Mark the room finalized and cancel replies that are still waiting."""
        if self.allow_offers_after_deal:
            return

        self._states[room_id] = RoomState.DEAL_FINALIZED
        current = asyncio.current_task()
        cancelled = 0
        for task in self.pending_replies(room_id):
            if task is current or task.done() or task in self._delivering:
                continue
            task.cancel()
            cancelled += 1
        if cancelled:
            chat_logger(logger, room_id).info(f"Cancelled {cancelled} pending replies after deal")

    def _release_if_empty(self, room_id: str) -> None:
        if self.registry.member_count(room_id) > 0:
            return

        pending = self._pending.pop(room_id, set())
        current = asyncio.current_task()
        for task in pending:
            if task is not current:
                task.cancel()
        self._states.pop(room_id, None)
        if pending:
            chat_logger(logger, room_id).info(f"Room emptied; cancelled {len(pending)} pending replies")


# Singleton instance
chat_coordinator = ChatCoordinator(RoomRegistry(), catalog)


def get_coordinator() -> ChatCoordinator:
    """FastAPI dependency returning the process-wide coordinator."""
    return chat_coordinator
