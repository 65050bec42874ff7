"""Checkout page renderer: read-only order summary and the order text blob."""
from dataclasses import dataclass, field
from typing import List, Optional

from stitches.cart.models import Cart
from stitches.cart.summary import build_order_text
from stitches.services.money import format_money

EMPTY_CART_MESSAGE = "Your cart is empty. Please add items to your cart before checking out."


@dataclass
class SummaryEntry:
    label: str
    amount: str


@dataclass
class OrderSummary:
    """Order summary region including the hidden order-text field."""
    entries: List[SummaryEntry] = field(default_factory=list)
    message: Optional[str] = None
    subtotal_text: str = ""
    total_text: str = ""
    order_text: str = ""
    place_order_enabled: bool = False


def render_checkout_summary(cart: Cart, summary: Optional[OrderSummary]) -> None:
    if summary is None:
        return

    summary.entries = []

    if cart.is_empty:
        summary.message = EMPTY_CART_MESSAGE
        summary.place_order_enabled = False
        summary.subtotal_text = format_money(0)
        summary.total_text = format_money(0)
        summary.order_text = ""
        return

    summary.message = None
    for line in cart.lines:
        summary.entries.append(
            SummaryEntry(
                label=f"{line.name} × {line.quantity}",
                amount=format_money(line.line_total),
            )
        )

    summary.subtotal_text = format_money(cart.subtotal)
    summary.total_text = format_money(cart.total)
    summary.order_text = build_order_text(cart)
    summary.place_order_enabled = True


__all__ = [
    "EMPTY_CART_MESSAGE",
    "OrderSummary",
    "SummaryEntry",
    "build_order_text",
    "render_checkout_summary",
]
