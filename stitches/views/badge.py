"""Header badge showing the number of units in the cart."""
from typing import Iterable

from stitches.cart.models import Cart


class BadgeTarget:
    """One badge element. Hidden badges keep their last text."""

    def __init__(self, text: str = "", visible: bool = False):
        self.text = text
        self.visible = visible


def update_cart_count(cart: Cart, targets: Iterable[BadgeTarget]) -> int:
    """Reflect the total quantity onto every badge; returns the total."""
    total_items = cart.total_quantity

    for target in targets:
        if total_items > 0:
            target.text = str(total_items)
            target.visible = True
        else:
            target.visible = False

    return total_items
