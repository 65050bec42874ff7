"""Plain-text order description submitted with the checkout form."""
from stitches.services.money import format_money

from .models import Cart


def build_order_text(cart: Cart) -> str:
    """
    Order Total: Ksh 7,500

    Items:
    Shirt x 5 - Ksh 7,500
    """
    items = "".join(
        f"{line.name} x {line.quantity} - {format_money(line.line_total)}\n"
        for line in cart.lines
    )
    return f"Order Total: {format_money(cart.total)}\n\nItems:\n{items}"
