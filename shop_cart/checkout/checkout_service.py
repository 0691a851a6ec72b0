"""
Pricing of a cart into a receipt.

The cart endpoints depend only on ``CheckoutService``; discount logic is
supplied as rules so it can change without touching the cart.
"""
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Sequence

from shop_cart.checkout.checkout_models import Receipt, ReceiptDiscount, ReceiptLine
from shop_cart.logging import get_logger
from shop_cart.store.cart_models import Cart

logger = get_logger(__name__)

MONEY_PRECISION = Decimal("0.01")

DiscountRule = Callable[[Cart], Iterable[ReceiptDiscount]]


def round_money(value: Decimal) -> Decimal:
    return value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


class CheckoutService(ABC):
    @abstractmethod
    def checkout(self, cart: Cart) -> Receipt:
        ...


class StandardCheckoutService(CheckoutService):
    """Prices each line at unit price times quantity, then applies discount rules."""

    def __init__(self, discount_rules: Sequence[DiscountRule] = ()) -> None:
        self.discount_rules = list(discount_rules)

    def checkout(self, cart: Cart) -> Receipt:
        lines = [
            ReceiptLine(
                name=item.name,
                quantity=item.quantity,
                unit_price=round_money(item.price),
                total=round_money(item.price * item.quantity),
            )
            for item in sorted(cart.items, key=lambda i: i.key)
        ]
        subtotal = round_money(sum((line.total for line in lines), Decimal("0")))

        discounts = [
            ReceiptDiscount(description=d.description, amount=round_money(d.amount))
            for rule in self.discount_rules
            for d in rule(cart)
        ]
        discounted = subtotal - sum((d.amount for d in discounts), Decimal("0"))
        total = max(round_money(discounted), Decimal("0.00"))

        logger.debug("Checked out %d lines, total %s", len(lines), total)
        return Receipt(lines=lines, subtotal=subtotal, discounts=discounts, total=total)
