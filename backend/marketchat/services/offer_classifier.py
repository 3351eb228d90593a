"""
Offer classification for free-text chat messages.

WHAT: Turn a vendor's chat line into a tagged offer kind
WHY: Keep the negotiation decision table independent of string scanning
HOW: Ordered rules (currency marker, greeting, fallback) over lowercased text
"""

import re
from dataclasses import dataclass
from typing import Union

from ..core.config import settings

GREETING_TOKENS = ("hello", "hi")


@dataclass(frozen=True)
class Greeting:
    """Message greets the supplier without naming a price."""


@dataclass(frozen=True)
class PriceOffer:
    """Message carries a currency-marked amount."""
    amount: int


@dataclass(frozen=True)
class MalformedOffer:
    """Currency marker present but no usable amount follows it."""


@dataclass(frozen=True)
class Unclassified:
    """Anything else."""


OfferKind = Union[Greeting, PriceOffer, MalformedOffer, Unclassified]


def extract_amount(text: str, currency_symbol: str | None = None) -> int | None:
    """
    Extract the first integer that directly follows the currency symbol.

    Args:
        text: Raw chat message
        currency_symbol: Marker to look for (defaults to settings.CURRENCY_SYMBOL)

    Returns:
        The amount, or None if no marker is immediately followed by digits.
        A zero amount is returned as None since it is not a usable offer.

    Example:
        >>> extract_amount("₹36/kg, final ₹40")
        36
    """
    symbol = currency_symbol or settings.CURRENCY_SYMBOL
    match = re.search(re.escape(symbol) + r"([0-9]+)", text)
    if not match:
        return None

    amount = int(match.group(1))
    return amount or None


def classify_offer(text: str, currency_symbol: str | None = None) -> OfferKind:
    """
    Classify a chat message; the first matching rule wins.

    Rules:
    1. Currency marker present -> PriceOffer(amount) or MalformedOffer
    2. Contains "hello" or "hi" (substring, case-insensitive) -> Greeting
    3. Otherwise -> Unclassified
    """
    symbol = (currency_symbol or settings.CURRENCY_SYMBOL).lower()
    lowered = (text or "").lower()

    if symbol in lowered:
        amount = extract_amount(lowered, symbol)
        if amount is None:
            return MalformedOffer()
        return PriceOffer(amount=amount)

    if any(token in lowered for token in GREETING_TOKENS):
        return Greeting()

    return Unclassified()
