from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

CART_ATTRIBUTE = "shop.cart"


@dataclass(slots=True, eq=False)
class CartItem:
    name: str
    quantity: int
    price: Decimal = Decimal("0")

    @property
    def key(self) -> str:
        return self.name.casefold()

    # identity within a cart is the case-insensitive name
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartItem):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "price": str(self.price),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> CartItem:
        return CartItem(
            name=data["name"],
            quantity=int(data["quantity"]),
            price=Decimal(str(data.get("price", "0"))),
        )


@dataclass(slots=True)
class Cart:
    items: set[CartItem] = field(default_factory=set)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Cart:
        return Cart(items={CartItem.from_dict(item) for item in data.get("items", [])})
