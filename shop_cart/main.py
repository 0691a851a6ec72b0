from fastapi import FastAPI

from shop_cart.api.cart.cart_routes import cart_router
from shop_cart.api.dependencies import get_cart_repository
from shop_cart.config import get_settings
from shop_cart.errors import install_error_handlers
from shop_cart.logging import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Shop API")

install_error_handlers(app)
app.include_router(cart_router)


@app.on_event("startup")
def _on_startup() -> None:
    # builds the configured store (and its schema) before the first request
    repository = get_cart_repository()
    logger.info("Cart store %r ready (%s)", get_settings().cart_store, type(repository).__name__)
