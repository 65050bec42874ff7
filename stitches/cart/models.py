"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from stitches.services.money import multiply


def parse_price(value: Any) -> Decimal:
    """
    Strictly parse a stored or submitted price.

    Raises ValueError for non-numeric, non-finite or negative values.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"invalid price: {value!r}")
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"invalid price: {value!r}") from e
    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid price: {value!r}")
    return price


@dataclass(frozen=True)
class Product:
    """Catalog product as handed to the cart. Never mutated."""
    id: str
    name: str
    price: Decimal
    img: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            price=parse_price(data["price"]),
            img=str(data.get("img", "")),
        )


@dataclass
class CartLine:
    """A product plus how many of it are in the cart."""
    id: str
    name: str
    price: Decimal
    img: str
    quantity: int

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartLine":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            img=product.img,
            quantity=quantity,
        )

    @property
    def line_total(self) -> Decimal:
        """price x quantity."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "img": self.img,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"invalid quantity: {quantity!r}")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            price=parse_price(data["price"]),
            img=str(data.get("img", "")),
            quantity=quantity,
        )


@dataclass
class Cart:
    """Ordered cart lines; order is first-add order."""
    lines: List[CartLine]

    @classmethod
    def empty(cls) -> "Cart":
        return cls(lines=[])

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.id == product_id), None)

    @property
    def total_quantity(self) -> int:
        """Total number of units across all lines."""
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal("0"))

    @property
    def total(self) -> Decimal:
        # No tax or shipping: total is the subtotal
        return self.subtotal

    def to_list(self) -> list:
        """Convert to the JSON list kept in the store."""
        return [line.to_dict() for line in self.lines]

    @classmethod
    def from_list(cls, data: Any) -> "Cart":
        """
        Build from the stored list.

        Raises ValueError/KeyError/TypeError when the shape is wrong.
        """
        if not isinstance(data, list):
            raise TypeError(f"cart must be a list, got {type(data).__name__}")
        lines: List[CartLine] = []
        seen = set()
        for raw in data:
            if not isinstance(raw, dict):
                raise TypeError("cart line must be an object")
            line = CartLine.from_dict(raw)
            if line.id in seen:
                raise ValueError(f"duplicate cart line: {line.id}")
            seen.add(line.id)
            lines.append(line)
        return cls(lines=lines)
