from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from shop_cart.api.dependencies import get_cart_repository, get_checkout_service
from shop_cart.checkout.checkout_service import StandardCheckoutService
from shop_cart.main import app
from shop_cart.store.cart_repository import InMemoryCartRepository


@pytest.fixture()
def repository() -> InMemoryCartRepository:
	return InMemoryCartRepository()


@pytest.fixture()
def client(repository: InMemoryCartRepository) -> Iterator[TestClient]:
	app.dependency_overrides[get_cart_repository] = lambda: repository
	app.dependency_overrides[get_checkout_service] = lambda: StandardCheckoutService()
	with TestClient(app) as c:
		yield c
	app.dependency_overrides.clear()
