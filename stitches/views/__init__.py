"""Projections of the cart onto display regions."""
from .badge import BadgeTarget, update_cart_count
from .cart_page import CartRow, CartTable, parse_quantity_input, render_cart_page
from .checkout import OrderSummary, SummaryEntry, build_order_text, render_checkout_summary
from .page import Page
from .removal import RemovalDialog, RemovalGate

__all__ = [
    "BadgeTarget",
    "update_cart_count",
    "CartRow",
    "CartTable",
    "parse_quantity_input",
    "render_cart_page",
    "OrderSummary",
    "SummaryEntry",
    "build_order_text",
    "render_checkout_summary",
    "Page",
    "RemovalDialog",
    "RemovalGate",
]
