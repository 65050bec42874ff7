"""Cart engine: state transitions over the stored cart."""
import math
from decimal import Decimal
from typing import Any, Callable, List, Optional

from stitches.errors import (
    ERROR_EMPTY_CART,
    ERROR_INVALID_QUANTITY,
    EmptyCartError,
    InvalidQuantityError,
)
from stitches.logging import get_logger, log_id, log_text
from stitches.services.money import to_float

from .models import Cart, CartLine, Product
from .storage import CartStorage
from .summary import build_order_text

logger = get_logger(__name__)

CartListener = Callable[[Cart], None]


def validate_quantity(quantity: Any) -> int:
    """
    Accept integers (and integral floats/Decimals); reject everything else.

    Raises:
        InvalidQuantityError: for bools, strings, NaN, infinities and fractions
    """
    if isinstance(quantity, bool):
        raise InvalidQuantityError(ERROR_INVALID_QUANTITY)
    if isinstance(quantity, int):
        return quantity
    if isinstance(quantity, float):
        if math.isfinite(quantity) and quantity.is_integer():
            return int(quantity)
    elif isinstance(quantity, Decimal):
        if quantity.is_finite() and quantity == quantity.to_integral_value():
            return int(quantity)
    raise InvalidQuantityError(ERROR_INVALID_QUANTITY)


class CartEngine:
    """
    Mutates one session's cart.

    Every operation is load -> mutate -> save -> notify listeners, all
    inside the call. Listeners receive the cart exactly as saved.
    """

    def __init__(
        self,
        storage: CartStorage,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.storage = storage
        self._notify = notify
        self._listeners: List[CartListener] = []

    def subscribe(self, listener: CartListener) -> None:
        """Register a projection to re-run after each mutation."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def load_cart(self) -> Cart:
        return self.storage.load_cart()

    def _commit(self, cart: Cart) -> None:
        self.storage.save_cart(cart)
        self._resync(cart)

    def _resync(self, cart: Cart) -> None:
        for listener in list(self._listeners):
            listener(cart)

    def _toast(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)

    def add_to_cart(self, product: Product) -> Cart:
        """Add one unit; re-adding only bumps the existing line's quantity."""
        cart = self.storage.load_cart()

        existing_line = cart.find(product.id)
        if existing_line:
            existing_line.quantity += 1
        else:
            cart.lines.append(CartLine.from_product(product))

        self._commit(cart)
        logger.info(
            f"Added {log_id(product.id)} to cart "
            f"(qty={cart.find(product.id).quantity})"
        )
        self._toast(f"{product.name} has been added to your cart!")
        return cart

    def update_quantity(self, product_id: str, quantity: Any) -> Cart:
        """
        Overwrite a line's quantity.

        quantity < 1 removes the line. Unknown ids are left alone.
        """
        quantity = validate_quantity(quantity)
        cart = self.storage.load_cart()

        if quantity < 1:
            cart.lines = [line for line in cart.lines if line.id != product_id]
        else:
            line = cart.find(product_id)
            if line:
                line.quantity = quantity

        self._commit(cart)
        logger.info(f"Set quantity of {log_id(product_id)} to {quantity}")
        return cart

    def remove_item_from_cart(self, product_id: str) -> Cart:
        cart = self.storage.load_cart()
        cart.lines = [line for line in cart.lines if line.id != product_id]

        self._commit(cart)
        logger.info(f"Removed {log_id(product_id)} from cart")
        self._toast("Item removed from cart.")
        return cart

    def clear_cart(self) -> Cart:
        """Delete the cart and any order snapshot outright."""
        self.storage.delete_cart()
        self.storage.delete_order_details()
        cart = Cart.empty()
        self._resync(cart)
        logger.info(f"Cleared cart for session {log_id(self.storage.namespace)}")
        return cart

    def save_order_details(self) -> dict:
        """
        Store the checkout snapshot that accompanies an order submission.

        The order text is built from the stored cart, never taken from the caller.

        Raises:
            EmptyCartError: nothing to order
        """
        cart = self.storage.load_cart()
        if cart.is_empty:
            raise EmptyCartError(ERROR_EMPTY_CART)

        order_text = build_order_text(cart)
        details = {
            "order_text": order_text,
            "total": to_float(cart.total),
            "items": [
                {
                    "id": line.id,
                    "name": line.name,
                    "quantity": line.quantity,
                    "line_total": to_float(line.line_total),
                }
                for line in cart.lines
            ],
        }
        self.storage.save_order_details(details)
        logger.info(
            f"Saved order details for session {log_id(self.storage.namespace)}: "
            f"{len(cart.lines)} lines, {log_text(order_text.splitlines()[0])}"
        )
        return details

    def load_order_details(self) -> Optional[dict]:
        return self.storage.load_order_details()
