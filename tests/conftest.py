"""Shared fixtures for storefront tests."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from petstore.core.config import Settings, get_settings
from petstore.database.carts import CartStore, cart_db
from petstore.database.products import product_db
from petstore.main import app
from petstore.models.cart import CartItem

ADMIN_KEY = "test-admin-key"


def make_item(product_id="A", price="80", original_price="100", discount=20, name=None):
    return CartItem(
        id=product_id,
        name=name or f"Product {product_id}",
        price=Decimal(price),
        original_price=Decimal(original_price),
        discount=discount,
    )


@pytest.fixture
def store():
    return CartStore()


@pytest.fixture
def settings():
    return Settings(admin_api_key=ADMIN_KEY, catalog_url="http://testserver/api/categories")


@pytest.fixture
def client(settings):
    product_db.reset()
    cart_db.reset()
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Key": ADMIN_KEY}
