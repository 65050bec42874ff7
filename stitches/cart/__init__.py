"""Cart package: models, storage adapter, and engine."""
from .models import Cart, CartLine, Product
from .service import CartEngine, validate_quantity
from .storage import CartStorage

__all__ = [
    "Cart",
    "CartLine",
    "Product",
    "CartEngine",
    "CartStorage",
    "validate_quantity",
]
