from shop_cart.checkout.checkout_models import Receipt
from shop_cart.checkout.checkout_service import CheckoutService
from shop_cart.store import cart_queries as store
from shop_cart.store.cart_models import Cart, CartItem
from shop_cart.store.cart_repository import CartRepository


class CartService:
    """
    Answers the cart operations for one session at a time.

    Errors from the checkout service are not caught here.
    """

    def __init__(self, repository: CartRepository, checkout_service: CheckoutService) -> None:
        self.repository = repository
        self.checkout_service = checkout_service

    def view(self, session_id: str | None) -> Cart:
        return store.view(self.repository, session_id)

    def add_item(self, session_id: str | None, item: CartItem) -> Cart:
        return store.add_item(self.repository, session_id, item)

    def get_item(self, session_id: str | None, name: str) -> CartItem | None:
        return store.get_item(self.repository, session_id, name)

    def update_quantity(self, session_id: str | None, name: str, quantity: int | None) -> Cart:
        return store.update_quantity(self.repository, session_id, name, quantity)

    def remove_item(self, session_id: str | None, name: str) -> Cart:
        return store.remove_item(self.repository, session_id, name)

    def clear(self, session_id: str | None) -> None:
        store.clear(self.repository, session_id)

    def receipt(self, session_id: str | None) -> Receipt:
        return self.checkout_service.checkout(store.locate(self.repository, session_id))
