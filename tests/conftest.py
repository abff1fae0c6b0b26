"""Pytest fixtures for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.main import app
from storefront.session import Storefront
from storefront.state import get_storefront

FULL_CUSTOMER = {
    "name": "Jane Doe",
    "address": "1 Main St",
    "state": "CA",
    "zip": "90210",
    "email": "jane@example.com",
    "phone": "555-0100",
}


@pytest.fixture
def settings():
    """Default settings, independent of any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store(settings):
    """A fresh storefront session with the default catalog."""
    return Storefront(settings=settings)


@pytest.fixture
def customer():
    return dict(FULL_CUSTOMER)


@pytest.fixture
def ready_store(store, customer):
    """A session with items in the cart and a complete customer form."""
    store.add_line("short-sleeve", "Medium", "blue", 2)
    store.add_line("muscle-tee", "Large", "black", 1)
    for name, value in customer.items():
        store.set_customer_field(name, value)
    return store


@pytest.fixture
def client(store):
    """HTTP client bound to the ``store`` fixture session."""
    app.dependency_overrides[get_storefront] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
