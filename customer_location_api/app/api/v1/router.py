"""
Top-level router for version 1 of the API.

Customers and locations get their own sub-routers under a unified
prefix.
"""

from fastapi import APIRouter

from .endpoints import customers, locations

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])
