"""Store adapter: cart and order-details persistence over a key-value store."""
import json
from typing import Optional

from stitches.db import KeyValueStore, StoreKeys
from stitches.logging import get_logger, log_id

from .models import Cart

logger = get_logger(__name__)


class CartStorage:
    """
    Reads and writes one session's cart.

    Missing or corrupt data always loads as an empty cart.
    """

    def __init__(self, store: KeyValueStore, namespace: Optional[str] = None):
        self.store = store
        self.namespace = namespace
        self.cart_key = StoreKeys.scoped(StoreKeys.CART, namespace)
        self.order_details_key = StoreKeys.scoped(StoreKeys.ORDER_DETAILS, namespace)

    def load_cart(self) -> Cart:
        data = self.store.get(self.cart_key)
        if not data:
            return Cart.empty()

        try:
            return Cart.from_list(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                f"Corrupted cart data for session {log_id(self.namespace)}: {e}"
            )
            return Cart.empty()

    def save_cart(self, cart: Cart) -> None:
        self.store.set(self.cart_key, json.dumps(cart.to_list()))

    def delete_cart(self) -> None:
        self.store.delete(self.cart_key)

    def load_order_details(self) -> Optional[dict]:
        data = self.store.get(self.order_details_key)
        if not data:
            return None
        try:
            details = json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupted order details: {e}")
            return None
        return details if isinstance(details, dict) else None

    def save_order_details(self, details: dict) -> None:
        self.store.set(self.order_details_key, json.dumps(details))

    def delete_order_details(self) -> None:
        self.store.delete(self.order_details_key)
