"""
Common Error Constants

Centralized error messages and the cart exception hierarchy.
"""

# Cart errors
ERROR_INVALID_QUANTITY = "Quantity must be a whole number"
ERROR_EMPTY_CART = "Cart is empty"
ERROR_INVALID_PRODUCT = "Invalid product"

# Storage errors
ERROR_STORE_UNAVAILABLE = "Cart storage unavailable"


class CartError(ValueError):
    """Base class for cart errors surfaced to callers."""

    status_code = 400


class InvalidQuantityError(CartError):
    """Quantity is not a finite integer."""


class EmptyCartError(CartError):
    """Operation needs at least one line in the cart."""


class StoreUnavailableError(CartError):
    """Key-value backend could not be reached."""

    status_code = 503
