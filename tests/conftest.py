"""Shared fixtures for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.database.carts import CartStore
from storefront.database.products import ProductDatabase
from storefront.database.storage import LocalStore
from storefront.main import create_app


@pytest.fixture
def products():
    return ProductDatabase()


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "storage.json")


@pytest.fixture
def storage(store_path):
    return LocalStore(store_path)


@pytest.fixture
def cart(products, storage):
    return CartStore(products, storage)


@pytest.fixture
def client(store_path):
    app = create_app(storage_path=store_path, checkout_delay_seconds=0)
    with TestClient(app) as client:
        yield client
