"""
Process-wide store wiring.

The application owns exactly one :class:`CustomerLocationService`.  It
is created by ``init_store`` when the app is built and attached to
``app.state``; route handlers receive it through the ``get_store``
dependency instead of importing a module-level global.
"""

import logging

from fastapi import FastAPI, Request

from customer_location_api.app.services.customer_location_service import CustomerLocationService


def init_store(app: FastAPI) -> CustomerLocationService:
    """Create the store for ``app`` and attach it to ``app.state``."""
    store = CustomerLocationService()
    app.state.store = store
    logging.getLogger(__name__).info("Customer/location store initialised")
    return store


def get_store(request: Request) -> CustomerLocationService:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
