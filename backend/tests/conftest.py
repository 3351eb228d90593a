"""
Pytest configuration and shared fixtures for backend tests.

WHAT: Centralized test configuration with markers
WHY: Enable test organization, filtering, and shared test utilities
HOW: Define pytest markers, fixtures, and test helpers
"""

import pytest

from marketchat.core.catalog import InMemoryCatalogRepository, build_default_catalog
from marketchat.models.catalog import Product, SupplierListing
from marketchat.realtime.coordinator import ChatCoordinator
from marketchat.realtime.room_registry import RoomRegistry
from marketchat.services.negotiation_engine import NegotiationPolicy


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (isolated component tests)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (multiple components)"
    )
    config.addinivalue_line(
        "markers", "realtime: Tests that drive the chat protocol"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take significant time to run"
    )


class FakeConnection:
    """Records every frame pushed to it, like a connected client."""

    def __init__(self, fail: bool = False):
        self.frames = []
        self.fail = fail

    async def send_json(self, data):
        if self.fail:
            raise RuntimeError("socket closed")
        self.frames.append(data)

    def events(self, name=None):
        """Frames as (event, data) pairs, optionally filtered by event name."""
        return [
            (f["event"], f["data"]) for f in self.frames
            if name is None or f["event"] == name
        ]

    def messages(self):
        """Bodies of every chat_message frame."""
        return [data for _, data in self.events("chat_message")]


@pytest.fixture
def tomatoes():
    """Product with MRP 40, matching the bundled catalog entry p2."""
    return Product(
        id="p2",
        name="Premium Tomatoes",
        category="Vegetables",
        supplier="Green Farms",
        mrp=40,
        unit="kg",
    )


@pytest.fixture
def policy():
    return NegotiationPolicy(low_ratio=0.75, accept_ratio=0.90, currency_symbol="₹")


@pytest.fixture
def catalog(tomatoes):
    """Small catalog with one product and its suppliers."""
    listings = {
        "p2": [
            SupplierListing(
                supplier_id="s3", supplier_name="Green Farms",
                price=38, unit="kg", distance=2, rating=4.7
            )
        ]
    }
    return InMemoryCatalogRepository([tomatoes], listings)


@pytest.fixture
def default_catalog():
    return build_default_catalog()


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def coordinator(registry, catalog, policy):
    """Coordinator that replies immediately and closes rooms after a deal."""
    return ChatCoordinator(
        registry,
        catalog,
        policy=policy,
        reply_delay=0,
        supplier_contact="9876543210",
        deal_distance="5 km",
        allow_offers_after_deal=False,
    )


@pytest.fixture
def make_connection():
    """Factory for FakeConnection objects."""
    def _make(fail: bool = False) -> FakeConnection:
        return FakeConnection(fail=fail)
    return _make
