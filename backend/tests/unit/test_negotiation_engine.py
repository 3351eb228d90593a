"""
Unit tests for the negotiation engine.

WHAT: Test the supplier decision table against the MRP bands
WHY: Accept/reject thresholds decide when contact details are revealed
HOW: Evaluate offers for a MRP 40 product and check outcome fields and text
"""

import pytest

from marketchat.models.catalog import Product
from marketchat.models.chat import NegotiationOutcome
from marketchat.services.negotiation_engine import NegotiationPolicy, evaluate, format_amount


@pytest.mark.unit
class TestPriceBands:
    """Test the three price bands."""

    def test_low_offer_is_rejected(self, tomatoes, policy):
        outcome = evaluate("₹25/kg", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert outcome.final_price is None
        assert "a bit low" in outcome.reply_text
        assert "₹40" in outcome.reply_text
        assert "₹25/kg" in outcome.reply_text

    def test_good_offer_is_accepted(self, tomatoes, policy):
        outcome = evaluate("₹36/kg", tomatoes, policy)

        assert outcome.deal_accepted is True
        assert outcome.final_price == 36
        assert outcome.reply_text == "That's a good offer of ₹36/kg! I accept. Let's finalize this."

    def test_offer_above_mrp_is_accepted(self, tomatoes, policy):
        outcome = evaluate("₹45", tomatoes, policy)

        assert outcome.deal_accepted is True
        assert outcome.final_price == 45

    def test_middle_offer_gets_counter_probe(self, tomatoes, policy):
        outcome = evaluate("₹32/kg", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert outcome.final_price is None
        assert "what quantity" in outcome.reply_text
        assert "a little more" in outcome.reply_text

    @pytest.mark.parametrize("amount,accepted", [
        (1, False), (29, False), (30, False), (35, False), (36, True), (400, True),
    ])
    def test_acceptance_follows_threshold(self, tomatoes, policy, amount, accepted):
        outcome = evaluate(f"₹{amount}", tomatoes, policy)
        assert outcome.deal_accepted is accepted
        assert outcome.final_price == (amount if accepted else None)


@pytest.mark.unit
class TestBoundaries:
    """Exact threshold values."""

    def test_exactly_low_threshold_is_counter_probe(self, tomatoes, policy):
        """0.75 * 40 = 30; rejection is strictly below."""
        outcome = evaluate("₹30", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert "what quantity" in outcome.reply_text

    def test_just_below_low_threshold_is_rejected(self, tomatoes, policy):
        outcome = evaluate("₹29", tomatoes, policy)
        assert "a bit low" in outcome.reply_text

    def test_exactly_accept_threshold_is_accepted(self, tomatoes, policy):
        """0.90 * 40 = 36; acceptance is inclusive."""
        outcome = evaluate("₹36", tomatoes, policy)
        assert outcome.deal_accepted is True

    def test_custom_policy(self, tomatoes):
        strict = NegotiationPolicy(low_ratio=0.5, accept_ratio=1.0)

        assert evaluate("₹36", tomatoes, strict).deal_accepted is False
        assert evaluate("₹40", tomatoes, strict).deal_accepted is True
        assert "what quantity" in evaluate("₹20", tomatoes, strict).reply_text


@pytest.mark.unit
class TestConversationalReplies:
    """Non-price messages."""

    def test_greeting_names_supplier_and_mrp(self, tomatoes, policy):
        outcome = evaluate("hi there", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert "Green Farms" in outcome.reply_text
        assert "₹40/kg" in outcome.reply_text
        assert outcome.reply_text.startswith("Hello! This is Green Farms.")

    def test_hello(self, tomatoes, policy):
        outcome = evaluate("hello", tomatoes, policy)
        assert "Premium Tomatoes" in outcome.reply_text
        assert "40" in outcome.reply_text

    def test_generic_reply_restates_mrp(self, tomatoes, policy):
        outcome = evaluate("Do you deliver?", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert outcome.reply_text == "I'm here to help. The MRP is ₹40/kg. What is your offer?"

    def test_malformed_offer_reprompts(self, tomatoes, policy):
        outcome = evaluate("₹ please", tomatoes, policy)

        assert outcome.deal_accepted is False
        assert outcome.reply_text == "Please specify your price offer clearly (e.g., '₹XX/kg')."


@pytest.mark.unit
class TestPurity:
    """Determinism and formatting helpers."""

    def test_same_input_same_outcome(self, tomatoes, policy):
        first = evaluate("₹33 for 10kg?", tomatoes, policy)
        second = evaluate("₹33 for 10kg?", tomatoes, policy)

        assert isinstance(first, NegotiationOutcome)
        assert first == second

    def test_only_first_amount_counts(self, tomatoes, policy):
        outcome = evaluate("₹20 or maybe ₹38", tomatoes, policy)
        assert outcome.deal_accepted is False
        assert "a bit low" in outcome.reply_text

    def test_fractional_mrp_is_rendered_compactly(self, policy):
        product = Product(id="x", name="Limes", supplier="Citrus Co", mrp=12.5, unit="dozen")

        outcome = evaluate("hello", product, policy)

        assert "₹12.5/dozen" in outcome.reply_text

    def test_format_amount(self):
        assert format_amount(40.0) == "40"
        assert format_amount(36.5) == "36.5"

    def test_defaults_come_from_settings(self, tomatoes):
        outcome = evaluate("₹36", tomatoes)
        assert outcome.deal_accepted is True


@pytest.mark.unit
class TestPriceRendering:
    """MRP values must be quoted exactly in every reply."""

    @pytest.fixture
    def tractor(self):
        return Product(id="t1", name="Tractor", supplier="Agro Motors", mrp=1250000, unit="unit")

    @pytest.fixture
    def saffron(self):
        return Product(id="s1", name="Saffron", supplier="Kashmir Gold", mrp=12345.75, unit="kg")

    def test_seven_digit_mrp_in_greeting(self, tractor, policy):
        outcome = evaluate("hello", tractor, policy)

        assert "₹1250000/unit" in outcome.reply_text
        assert "e+" not in outcome.reply_text

    def test_seven_digit_mrp_in_low_offer_reply(self, tractor, policy):
        outcome = evaluate("₹500000", tractor, policy)

        assert "The MRP is ₹1250000." in outcome.reply_text

    def test_seven_digit_mrp_in_generic_reply(self, tractor, policy):
        outcome = evaluate("Is it new?", tractor, policy)

        assert outcome.reply_text == "I'm here to help. The MRP is ₹1250000/unit. What is your offer?"

    def test_precise_fractional_mrp(self, saffron, policy):
        outcome = evaluate("hello", saffron, policy)

        assert "₹12345.75/kg" in outcome.reply_text

    @pytest.mark.parametrize("value,text", [
        (1250000.0, "1250000"),
        (12345.75, "12345.75"),
        (99.5, "99.5"),
        (40, "40"),
    ])
    def test_format_amount_keeps_every_digit(self, value, text):
        assert format_amount(value) == text
