"""Pytest configuration and fixtures"""
import os
from decimal import Decimal

import pytest

# Set test environment variables
os.environ.setdefault("CART_STORE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from stitches.cart import CartEngine, CartStorage, Product  # noqa: E402
from stitches.db import MemoryStore  # noqa: E402
from stitches.services.notifications import ToastTray  # noqa: E402


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store"""
    return MemoryStore()


@pytest.fixture
def storage(memory_store):
    return CartStorage(memory_store)


@pytest.fixture
def toasts(clock):
    return ToastTray(clock=clock, show_delay_ms=10, dismiss_delay_ms=3000)


@pytest.fixture
def engine(storage, toasts):
    """Cart engine over an empty store, toasts captured in the tray"""
    return CartEngine(storage, notify=toasts.notify)


@pytest.fixture
def shirt():
    """Sample product"""
    return Product(id="p1", name="Shirt", price=Decimal("1500"), img="x")


@pytest.fixture
def scarf():
    return Product(id="p2", name="Scarf", price=Decimal("750"), img="scarf.jpg")


@pytest.fixture
def shirt_payload():
    """Sample product as sent by the storefront"""
    return {"id": "p1", "name": "Shirt", "price": 1500, "img": "x"}
