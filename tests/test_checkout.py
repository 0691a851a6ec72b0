from __future__ import annotations

from decimal import Decimal

import pytest

from shop_cart.checkout.checkout_models import ReceiptDiscount
from shop_cart.checkout.checkout_service import StandardCheckoutService, round_money
from shop_cart.services.cart_service import CartService
from shop_cart.store.cart_models import Cart, CartItem
from shop_cart.store.cart_repository import InMemoryCartRepository


def make_cart() -> Cart:
	return Cart(items={
		CartItem(name="pear", quantity=3, price=Decimal("0.335")),
		CartItem(name="Apple", quantity=2, price=Decimal("1.10")),
	})


def test_round_money() -> None:
	assert round_money(Decimal("1.005")) == Decimal("1.01")
	assert round_money(Decimal("2")) == Decimal("2.00")


def test_checkout_without_discounts() -> None:
	receipt = StandardCheckoutService().checkout(make_cart())

	assert [line.name for line in receipt.lines] == ["Apple", "pear"]
	assert receipt.lines[0].total == Decimal("2.20")
	assert receipt.lines[1].unit_price == Decimal("0.34")
	assert receipt.lines[1].total == Decimal("1.01")
	assert receipt.subtotal == Decimal("3.21")
	assert receipt.discounts == []
	assert receipt.total == Decimal("3.21")


def test_checkout_empty_cart() -> None:
	receipt = StandardCheckoutService().checkout(Cart())
	assert receipt.lines == []
	assert receipt.subtotal == Decimal("0.00")
	assert receipt.total == Decimal("0.00")


def test_checkout_applies_discount_rules() -> None:
	def apple_deal(cart: Cart) -> list[ReceiptDiscount]:
		return [
			ReceiptDiscount(description="Apple deal", amount=item.price)
			for item in cart.items
			if item.key == "apple" and item.quantity >= 2
		]

	def too_generous(cart: Cart) -> list[ReceiptDiscount]:
		return [ReceiptDiscount(description="Everything", amount=Decimal("100"))]

	receipt = StandardCheckoutService([apple_deal]).checkout(make_cart())
	assert [d.description for d in receipt.discounts] == ["Apple deal"]
	assert receipt.total == Decimal("2.11")

	receipt = StandardCheckoutService([apple_deal, too_generous]).checkout(make_cart())
	assert receipt.total == Decimal("0.00")


def test_receipt_does_not_change_cart_and_propagates_errors() -> None:
	class BrokenCheckout(StandardCheckoutService):
		def checkout(self, cart: Cart):
			raise RuntimeError("pricing unavailable")

	repo = InMemoryCartRepository()
	repo.save("s1", make_cart())

	receipt = CartService(repo, StandardCheckoutService()).receipt("s1")
	assert receipt.total == Decimal("3.21")
	assert {i.name: i.quantity for i in repo.locate("s1").items} == {"pear": 3, "Apple": 2}

	with pytest.raises(RuntimeError, match="pricing unavailable"):
		CartService(repo, BrokenCheckout()).receipt("s1")
