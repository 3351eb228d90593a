"""
Negotiation engine for the simulated supplier.

WHAT: Decide the supplier's reply to a vendor message
WHY: Stateless, deterministic decision logic that the chat coordinator can call
HOW: Classify the offer, compare the amount to the product's MRP, render a reply
"""

from dataclasses import dataclass

from ..core.config import settings
from ..models.catalog import Product
from ..models.chat import NegotiationOutcome
from .offer_classifier import (
    Greeting,
    MalformedOffer,
    PriceOffer,
    classify_offer,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NegotiationPolicy:
    """Price thresholds as fractions of the reference price."""
    low_ratio: float
    accept_ratio: float
    currency_symbol: str = "₹"

    @classmethod
    def from_settings(cls) -> "NegotiationPolicy":
        return cls(
            low_ratio=settings.LOW_OFFER_RATIO,
            accept_ratio=settings.ACCEPT_OFFER_RATIO,
            currency_symbol=settings.CURRENCY_SYMBOL,
        )


def format_amount(value: float) -> str:
    """Render a price with at most two decimals: 40.0 -> "40", 1250000 -> "1250000", 12345.75 -> "12345.75"."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def evaluate(offer_text: str, product: Product, policy: NegotiationPolicy | None = None) -> NegotiationOutcome:
    """
    Evaluate a vendor message against a product's reference price.

    WHAT: Produce the supplier reply and whether the deal is accepted
    WHY: Single decision table shared by the live chat and tests
    HOW: Band the offered amount against low_ratio and accept_ratio of the MRP

    Bands (amount a, reference price m):
    - a <  low_ratio * m     -> rejected as too low
    - a >= accept_ratio * m  -> accepted, final_price = a
    - otherwise              -> counter-probe about quantity

    Args:
        offer_text: Raw vendor message
        product: Catalog product the room is about
        policy: Thresholds; defaults to the configured policy

    Returns:
        NegotiationOutcome
    """
    policy = policy or NegotiationPolicy.from_settings()
    symbol = policy.currency_symbol
    mrp = product.reference_price
    mrp_text = format_amount(mrp)
    unit = product.unit

    kind = classify_offer(offer_text, symbol)

    if isinstance(kind, MalformedOffer):
        return NegotiationOutcome(
            reply_text=f"Please specify your price offer clearly (e.g., '{symbol}XX/{unit}')."
        )

    if isinstance(kind, PriceOffer):
        amount = kind.amount

        if amount < mrp * policy.low_ratio:
            return NegotiationOutcome(
                reply_text=(
                    f"Your offer of {symbol}{amount}/{unit} is a bit low. "
                    f"The MRP is {symbol}{mrp_text}. Can you increase it?"
                )
            )

        if amount >= mrp * policy.accept_ratio:
            logger.debug(f"Offer {amount} accepted for {product.id} (mrp={mrp_text})")
            return NegotiationOutcome(
                reply_text=(
                    f"That's a good offer of {symbol}{amount}/{unit}! "
                    f"I accept. Let's finalize this."
                ),
                deal_accepted=True,
                final_price=amount,
            )

        return NegotiationOutcome(
            reply_text=(
                f"Hmm, for {symbol}{amount}/{unit}, what quantity are you looking for? "
                f"I can consider a little more."
            )
        )

    if isinstance(kind, Greeting):
        return NegotiationOutcome(
            reply_text=(
                f"Hello! This is {product.supplier}. The MRP for {product.name} "
                f"is {symbol}{mrp_text}/{unit}. What is your offer?"
            )
        )

    return NegotiationOutcome(
        reply_text=f"I'm here to help. The MRP is {symbol}{mrp_text}/{unit}. What is your offer?"
    )
