from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from shop_cart.checkout.checkout_models import Receipt, ReceiptDiscount, ReceiptLine
from shop_cart.store.cart_models import Cart, CartItem


class CartItemResponse(BaseModel):
    name: str
    quantity: int
    price: float

    @staticmethod
    def from_cart_item(item: CartItem) -> CartItemResponse:
        return CartItemResponse(
            name=item.name,
            quantity=item.quantity,
            price=float(item.price),
        )


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    quantity: int

    @staticmethod
    def from_cart(cart: Cart) -> CartResponse:
        return CartResponse(
            items=[CartItemResponse.from_cart_item(item) for item in sorted(cart.items, key=lambda i: i.key)],
            quantity=cart.total_quantity,
        )


class CartItemRequest(BaseModel):
    name: str
    quantity: NonNegativeInt = 1
    price: Annotated[float, Field(ge=0, allow_inf_nan=False)] = 0.0

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def as_cart_item(self) -> CartItem:
        return CartItem(name=self.name, quantity=self.quantity, price=Decimal(str(self.price)))


class QuantityRequest(BaseModel):
    # anything that is not a plain integer is ignored rather than rejected
    quantity: Any = None

    def as_quantity(self) -> int | None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            return None
        return self.quantity


class ReceiptLineResponse(BaseModel):
    name: str
    quantity: int
    unit_price: float
    total: float

    @staticmethod
    def from_line(line: ReceiptLine) -> ReceiptLineResponse:
        return ReceiptLineResponse(
            name=line.name,
            quantity=line.quantity,
            unit_price=float(line.unit_price),
            total=float(line.total),
        )


class ReceiptDiscountResponse(BaseModel):
    description: str
    amount: float

    @staticmethod
    def from_discount(discount: ReceiptDiscount) -> ReceiptDiscountResponse:
        return ReceiptDiscountResponse(description=discount.description, amount=float(discount.amount))


class ReceiptResponse(BaseModel):
    lines: List[ReceiptLineResponse]
    subtotal: float
    discounts: List[ReceiptDiscountResponse]
    total: float

    @staticmethod
    def from_receipt(receipt: Receipt) -> ReceiptResponse:
        return ReceiptResponse(
            lines=[ReceiptLineResponse.from_line(line) for line in receipt.lines],
            subtotal=float(receipt.subtotal),
            discounts=[ReceiptDiscountResponse.from_discount(d) for d in receipt.discounts],
            total=float(receipt.total),
        )
