"""
Shared test fixtures.

Provides a fresh in-memory store for service-level tests, a factory
for customer payloads, and an HTTP test client bound to a freshly built
application (and therefore its own empty store).
"""

import pytest
from fastapi.testclient import TestClient

from customer_location_api.app.main import create_app
from customer_location_api.app.schemas.customer import CustomerCreate
from customer_location_api.app.services.customer_location_service import CustomerLocationService


@pytest.fixture
def store():
    """An empty customer/location store."""
    return CustomerLocationService()


@pytest.fixture
def customer_payload():
    """Build a ``CustomerCreate`` with the given location addresses."""

    def _make(first="Ada", last="Lovelace", addresses=()):
        return CustomerCreate(
            first_name=first,
            last_name=last,
            locations=[{"address": a} for a in addresses],
        )

    return _make


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """HTTP client over an application with an empty store."""
    return TestClient(app)
