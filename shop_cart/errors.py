"""
Cart error types and their HTTP rendering.

Duplicate items are the only error the cart itself raises; missing items
and sessions are treated as no-ops by the mutating operations.
"""
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

ERROR_ITEM_ALREADY_EXISTS = "Item '{name}' already exists in cart."


class CartItemConflictError(Exception):
    """Raised when an item with the same (case-insensitive) name is already in the cart."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(ERROR_ITEM_ALREADY_EXISTS.format(name=name))

    @property
    def message(self) -> str:
        return str(self)


def error_document(message: str, self_href: str) -> dict:
    return {
        "message": message,
        "_links": {"self": {"href": self_href}},
    }


def _relative_url(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


async def _handle_cart_item_conflict(request: Request, exc: CartItemConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=error_document(exc.message, _relative_url(request)),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CartItemConflictError, _handle_cart_item_conflict)
