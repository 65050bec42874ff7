"""
Cart page renderer.

Projects the cart into the line-item table, the totals block and the
checkout button state, then binds the per-row controls.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from stitches.cart.models import Cart
from stitches.logging import get_logger, log_id
from stitches.services.money import format_money

logger = get_logger(__name__)

_INT_INPUT = re.compile(r"^[+-]?\d+$")

QuantityHandler = Callable[[str, int], Any]
RemoveHandler = Callable[[str], Any]


def parse_quantity_input(raw: Any) -> Optional[int]:
    """Parse a quantity field value; None when it isn't a whole number."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not _INT_INPUT.match(text):
        return None
    return int(text)


@dataclass
class CartRow:
    id: str
    name: str
    img: str
    unit_price: str
    quantity: int
    line_total: str
    remove_label: str
    min_quantity: int = 1
    on_quantity_change: Optional[Callable[[Any], None]] = field(default=None, repr=False, compare=False)
    on_remove: Optional[Callable[[], None]] = field(default=None, repr=False, compare=False)

    def change_quantity(self, raw_value: Any) -> None:
        """Simulate a change event on the quantity input."""
        if self.on_quantity_change is not None:
            self.on_quantity_change(raw_value)

    def click_remove(self) -> None:
        if self.on_remove is not None:
            self.on_remove()


@dataclass
class CartTable:
    """The cart page region: table body plus the surrounding totals and toggles."""
    rows: List[CartRow] = field(default_factory=list)
    subtotal_text: str = ""
    total_text: str = ""
    empty_message_visible: bool = False
    totals_visible: bool = False
    checkout_enabled: bool = False


def _bind_quantity(product_id: str, handler: QuantityHandler) -> Callable[[Any], None]:
    def on_change(raw_value: Any) -> None:
        quantity = parse_quantity_input(raw_value)
        if quantity is None:
            logger.warning(f"Ignoring non-numeric quantity for {log_id(product_id)}")
            return
        handler(product_id, quantity)

    return on_change


def _bind_remove(product_id: str, handler: RemoveHandler) -> Callable[[], None]:
    def on_click() -> None:
        handler(product_id)

    return on_click


def render_cart_page(
    cart: Cart,
    table: Optional[CartTable],
    on_quantity_change: Optional[QuantityHandler] = None,
    on_remove_request: Optional[RemoveHandler] = None,
) -> None:
    """
    Re-render the cart table from scratch.

    No-op when the page has no cart table. Remove controls are only wired
    when a removal handler (the confirmation gate) is supplied.
    """
    if table is None:
        return

    table.rows = []

    if cart.is_empty:
        table.empty_message_visible = True
        table.totals_visible = False
        table.checkout_enabled = False
        return

    table.empty_message_visible = False
    table.totals_visible = True

    for line in cart.lines:
        table.rows.append(
            CartRow(
                id=line.id,
                name=line.name,
                img=line.img,
                unit_price=format_money(line.price),
                quantity=line.quantity,
                line_total=format_money(line.line_total),
                remove_label=f"Remove {line.name}",
            )
        )

    table.subtotal_text = format_money(cart.subtotal)
    table.total_text = format_money(cart.total)
    table.checkout_enabled = True

    for row in table.rows:
        if on_quantity_change is not None:
            row.on_quantity_change = _bind_quantity(row.id, on_quantity_change)
        if on_remove_request is not None:
            row.on_remove = _bind_remove(row.id, on_remove_request)
