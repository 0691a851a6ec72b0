"""
Cart state transitions.

Every operation locates the session's cart, looks the item up by name,
applies its change and saves the cart back. The locate/save pair is not
atomic: concurrent requests on one session can overwrite each other.
"""
from shop_cart.errors import CartItemConflictError
from shop_cart.logging import get_logger, sanitize_string_for_logging
from shop_cart.store.cart_models import Cart, CartItem
from shop_cart.store.cart_repository import CartRepository

logger = get_logger(__name__)


def locate(repository: CartRepository, session_id: str | None) -> Cart:
    return repository.locate(session_id)


def find_by_name(cart: Cart, name: str) -> CartItem | None:
    key = name.casefold()
    return next((item for item in cart.items if item.key == key), None)


def _exclude(cart: Cart, name: str) -> None:
    key = name.casefold()
    cart.items = {item for item in cart.items if item.key != key}


def view(repository: CartRepository, session_id: str | None) -> Cart:
    return locate(repository, session_id)


def add_item(repository: CartRepository, session_id: str | None, item: CartItem) -> Cart:
    cart = locate(repository, session_id)

    if find_by_name(cart, item.name) is not None:
        raise CartItemConflictError(item.name)

    cart.items.add(item)
    repository.save(session_id, cart)

    logger.info("Added %s x%d to cart", sanitize_string_for_logging(item.name), item.quantity)
    return cart


def get_item(repository: CartRepository, session_id: str | None, name: str) -> CartItem | None:
    return find_by_name(locate(repository, session_id), name)


def update_quantity(
    repository: CartRepository,
    session_id: str | None,
    name: str,
    quantity: int | None,
) -> Cart:
    cart = locate(repository, session_id)
    existing = find_by_name(cart, name)

    if existing is None:
        repository.save(session_id, cart)
        return cart

    if quantity is None or quantity < 0:
        logger.debug("Ignoring quantity %r for %s", quantity, sanitize_string_for_logging(name))
        return cart

    if quantity == 0:
        _exclude(cart, name)

    # the removed item still records the requested quantity, nothing reads it
    existing.quantity = quantity
    repository.save(session_id, cart)

    logger.info("Set quantity of %s to %d", sanitize_string_for_logging(name), quantity)
    return cart


def remove_item(repository: CartRepository, session_id: str | None, name: str) -> Cart:
    cart = locate(repository, session_id)

    if find_by_name(cart, name) is not None:
        _exclude(cart, name)
        logger.info("Removed %s from cart", sanitize_string_for_logging(name))

    repository.save(session_id, cart)
    return cart


def clear(repository: CartRepository, session_id: str | None) -> None:
    repository.clear(session_id)
