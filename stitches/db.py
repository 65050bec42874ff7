"""
Key-Value Store Module

The cart lives in an opaque key-value store with get/set/delete.
Two backends:
- MemoryStore: process-local dict (default, tests)
- RedisStore: Upstash Redis over REST
"""

from typing import Dict, Optional, Protocol

from tenacity import retry, stop_after_attempt, wait_exponential
from upstash_redis import Redis

from stitches import config
from stitches.errors import ERROR_STORE_UNAVAILABLE, StoreUnavailableError
from stitches.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """Minimal persistence contract used by the cart storage adapter."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store. State is lost on restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


# Runs on the event loop thread: back-off for a failing call totals 0.15s.
REDIS_ATTEMPTS = 3
REDIS_BACKOFF_MAX = 0.2

_redis_retry = retry(
    stop=stop_after_attempt(REDIS_ATTEMPTS),
    wait=wait_exponential(multiplier=0.05, min=0.05, max=REDIS_BACKOFF_MAX),
    reraise=True,
)


class RedisStore:
    """
    Upstash Redis backend.

    Each call is retried a few times before surfacing StoreUnavailableError.
    """

    def __init__(self, client: Redis):
        self.client = client

    @_redis_retry
    def _get(self, key: str) -> Optional[str]:
        return self.client.get(key)

    @_redis_retry
    def _set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    @_redis_retry
    def _delete(self, key: str) -> None:
        self.client.delete(key)

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get(key)
        except Exception as e:
            logger.error(f"Redis GET failed: {e}")
            raise StoreUnavailableError(ERROR_STORE_UNAVAILABLE) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._set(key, value)
        except Exception as e:
            logger.error(f"Redis SET failed: {e}")
            raise StoreUnavailableError(ERROR_STORE_UNAVAILABLE) from e

    def delete(self, key: str) -> None:
        try:
            self._delete(key)
        except Exception as e:
            logger.error(f"Redis DEL failed: {e}")
            raise StoreUnavailableError(ERROR_STORE_UNAVAILABLE) from e


# Key names inside a session namespace
class StoreKeys:
    """Key layout for cart data."""

    CART = "cart"
    ORDER_DETAILS = "order-details"

    @staticmethod
    def scoped(key: str, namespace: Optional[str] = None) -> str:
        # cart, or {namespace}:cart when several sessions share one store
        return f"{namespace}:{key}" if namespace else key


# Singleton instance
_store: Optional[KeyValueStore] = None


def get_store() -> KeyValueStore:
    """
    Get the configured store (singleton).

    CART_STORE_BACKEND=redis requires:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _store

    if _store is None:
        if config.CART_STORE_BACKEND == "redis":
            if not config.UPSTASH_REDIS_REST_URL or not config.UPSTASH_REDIS_REST_TOKEN:
                raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
            _store = RedisStore(
                Redis(url=config.UPSTASH_REDIS_REST_URL, token=config.UPSTASH_REDIS_REST_TOKEN)
            )
        else:
            _store = MemoryStore()
        logger.info(f"Cart store backend: {type(_store).__name__}")

    return _store


def reset_store() -> None:
    """Drop the singleton so the next get_store() rebuilds it."""
    global _store
    _store = None
