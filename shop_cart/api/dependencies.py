from functools import cache
from typing import Annotated

from fastapi import Depends

from shop_cart.checkout.checkout_service import CheckoutService, StandardCheckoutService
from shop_cart.config import get_settings
from shop_cart.services.cart_service import CartService
from shop_cart.store.cart_repository import CartRepository, create_cart_repository


@cache
def get_cart_repository() -> CartRepository:
    return create_cart_repository(get_settings())


@cache
def get_checkout_service() -> CheckoutService:
    return StandardCheckoutService()


def get_cart_service(
    repository: Annotated[CartRepository, Depends(get_cart_repository)],
    checkout_service: Annotated[CheckoutService, Depends(get_checkout_service)],
) -> CartService:
    return CartService(repository, checkout_service)
