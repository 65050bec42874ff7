"""Page: the set of regions present on one view, kept in sync with the cart."""
from typing import List, Optional, Sequence

from stitches.cart.models import Cart
from stitches.cart.service import CartEngine

from .badge import BadgeTarget, update_cart_count
from .cart_page import CartTable, render_cart_page
from .checkout import OrderSummary, render_checkout_summary
from .removal import RemovalDialog, RemovalGate


class Page:
    """
    Composes whichever regions a view carries.

    open() runs the page-load sync and subscribes to engine mutations;
    sync() re-derives every present projection from a cart value.
    """

    def __init__(
        self,
        engine: CartEngine,
        badges: Sequence[BadgeTarget] = (),
        table: Optional[CartTable] = None,
        summary: Optional[OrderSummary] = None,
        removal_dialog: Optional[RemovalDialog] = None,
    ):
        self.engine = engine
        self.badges: List[BadgeTarget] = list(badges)
        self.table = table
        self.summary = summary
        self.gate: Optional[RemovalGate] = None
        if removal_dialog is not None:
            self.gate = RemovalGate(engine.remove_item_from_cart, removal_dialog)
        self._subscribed = False

    @classmethod
    def cart_view(cls, engine: CartEngine) -> "Page":
        return cls(
            engine,
            badges=[BadgeTarget()],
            table=CartTable(),
            removal_dialog=RemovalDialog(),
        )

    @classmethod
    def checkout_view(cls, engine: CartEngine) -> "Page":
        return cls(engine, badges=[BadgeTarget()], summary=OrderSummary())

    def open(self) -> Cart:
        if not self._subscribed:
            self.engine.subscribe(self.sync)
            self._subscribed = True
        return self.refresh()

    def close(self) -> None:
        self.engine.unsubscribe(self.sync)
        self._subscribed = False

    def refresh(self) -> Cart:
        cart = self.engine.load_cart()
        self.sync(cart)
        return cart

    def sync(self, cart: Cart) -> None:
        update_cart_count(cart, self.badges)
        render_cart_page(
            cart,
            self.table,
            on_quantity_change=self.engine.update_quantity,
            on_remove_request=self.gate.request if self.gate else None,
        )
        render_checkout_summary(cart, self.summary)
