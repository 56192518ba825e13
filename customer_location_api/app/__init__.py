"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Customers and locations share a single in-memory store
(``services/customer_location_service.py``); each of them exposes a
router defined in ``api/v1/endpoints``.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
