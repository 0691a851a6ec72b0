from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from shop_cart.api.dependencies import get_cart_service
from shop_cart.api.session import get_session_id
from shop_cart.services.cart_service import CartService

from .cart_contracts import (
    CartItemRequest,
    CartItemResponse,
    CartResponse,
    QuantityRequest,
    ReceiptResponse,
)

cart_router = APIRouter(prefix="/cart")

SessionId = Annotated[str, Depends(get_session_id)]
Service = Annotated[CartService, Depends(get_cart_service)]
ItemName = Annotated[str, Path(pattern=r"\S")]


@cart_router.get("")
async def view_cart(session_id: SessionId, service: Service) -> CartResponse:
    return CartResponse.from_cart(service.view(session_id))


@cart_router.put(
    "",
    status_code=HTTPStatus.CREATED,
    responses={
        HTTPStatus.CREATED: {
            "description": "Item added, returns the updated cart",
        },
        HTTPStatus.BAD_REQUEST: {
            "description": "An item with the same name is already in the cart",
        },
    },
)
async def add_item(info: CartItemRequest, session_id: SessionId, service: Service) -> CartResponse:
    return CartResponse.from_cart(service.add_item(session_id, info.as_cart_item()))


@cart_router.post("/clear")
async def clear_cart(session_id: SessionId, service: Service) -> Response:
    service.clear(session_id)
    return Response("")


@cart_router.get("/receipt")
async def receipt(session_id: SessionId, service: Service) -> ReceiptResponse:
    return ReceiptResponse.from_receipt(service.receipt(session_id))


@cart_router.get(
    "/{name}",
    response_model=CartItemResponse,
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested item",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "No item with this name in the cart",
        },
    },
)
async def get_item(name: ItemName, session_id: SessionId, service: Service):
    item = service.get_item(session_id, name)

    if item is None:
        return Response(status_code=HTTPStatus.NOT_FOUND)

    return CartItemResponse.from_cart_item(item)


@cart_router.post(
    "/{name}",
    status_code=HTTPStatus.CREATED,
)
async def update_item_quantity(
    name: ItemName,
    session_id: SessionId,
    service: Service,
    info: QuantityRequest | None = None,
) -> CartResponse:
    quantity = info.as_quantity() if info is not None else None
    return CartResponse.from_cart(service.update_quantity(session_id, name, quantity))


@cart_router.delete(
    "/{name}",
    status_code=HTTPStatus.CREATED,
)
async def remove_item(name: ItemName, session_id: SessionId, service: Service) -> CartResponse:
    return CartResponse.from_cart(service.remove_item(session_id, name))
