"""Tests for key-value store backends"""
import time
from unittest.mock import Mock

import pytest

from stitches import config, db
from stitches.db import MemoryStore, RedisStore, StoreKeys, get_store, reset_store
from stitches.errors import StoreUnavailableError


@pytest.fixture(autouse=True)
def fresh_store_singleton():
    reset_store()
    yield
    reset_store()


class TestMemoryStore:

    def test_get_missing(self):
        assert MemoryStore().get("cart") is None

    def test_set_get_delete(self):
        store = MemoryStore()
        store.set("cart", "[]")
        assert store.get("cart") == "[]"

        store.delete("cart")
        store.delete("cart")
        assert store.get("cart") is None

    def test_initial_data_is_copied(self):
        initial = {"cart": "[]"}
        store = MemoryStore(initial)
        store.delete("cart")
        assert initial == {"cart": "[]"}


class TestRedisStore:

    def test_passthrough(self):
        client = Mock()
        client.get.return_value = "[]"
        store = RedisStore(client)

        assert store.get("cart") == "[]"
        store.set("cart", "[1]")
        store.delete("order-details")

        client.set.assert_called_once_with("cart", "[1]")
        client.delete.assert_called_once_with("order-details")

    def test_retries_transient_failure(self):
        client = Mock()
        client.get.side_effect = [ConnectionError("reset"), "[]"]

        assert RedisStore(client).get("cart") == "[]"
        assert client.get.call_count == 2

    def test_gives_up_after_three_attempts(self):
        client = Mock()
        client.set.side_effect = ConnectionError("down")

        with pytest.raises(StoreUnavailableError):
            RedisStore(client).set("cart", "[]")
        assert client.set.call_count == 3

    def test_backoff_stays_short(self, monkeypatch):
        """A failing call sleeps 0.15s in total before giving up"""
        waits = []
        monkeypatch.setattr(time, "sleep", waits.append)
        client = Mock()
        client.get.side_effect = ConnectionError("down")

        with pytest.raises(StoreUnavailableError):
            RedisStore(client).get("cart")

        assert len(waits) == db.REDIS_ATTEMPTS - 1
        assert all(wait <= db.REDIS_BACKOFF_MAX for wait in waits)
        assert sum(waits) == pytest.approx(0.15)


class TestStoreKeys:

    def test_unscoped(self):
        assert StoreKeys.scoped(StoreKeys.CART) == "cart"

    def test_scoped(self):
        assert StoreKeys.scoped(StoreKeys.ORDER_DETAILS, "abc") == "abc:order-details"


class TestGetStore:

    def test_memory_default(self, monkeypatch):
        monkeypatch.setattr(config, "CART_STORE_BACKEND", "memory")
        store = get_store()
        assert isinstance(store, MemoryStore)
        assert get_store() is store

    def test_redis_requires_credentials(self, monkeypatch):
        monkeypatch.setattr(config, "CART_STORE_BACKEND", "redis")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "")
        with pytest.raises(ValueError):
            get_store()

    def test_redis_backend(self, monkeypatch):
        monkeypatch.setattr(config, "CART_STORE_BACKEND", "redis")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "https://example.upstash.io")
        monkeypatch.setattr(config, "UPSTASH_REDIS_REST_TOKEN", "token")
        redis_cls = Mock()
        monkeypatch.setattr(db, "Redis", redis_cls)

        store = get_store()

        assert isinstance(store, RedisStore)
        redis_cls.assert_called_once_with(url="https://example.upstash.io", token="token")
