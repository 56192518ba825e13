"""
Location endpoints for API v1.

Routes over the canonical location registry.  Creating a location
whose address is already registered (compared case-insensitively) is
reported with HTTP 200 and an informational message instead of 201.
Renaming or deleting a location also affects every customer that has
it.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from customer_location_api.app.core import messages
from customer_location_api.app.core.store import get_store
from customer_location_api.app.schemas.location import Location, LocationCreate, LocationUpdate
from customer_location_api.app.schemas.response import ApiResponse
from customer_location_api.app.services.customer_location_service import (
    CustomerLocationService,
    LocationWriteOutcome,
)

router = APIRouter()


@router.get("/", response_model=ApiResponse[List[Location]])
async def list_locations(
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[List[Location]]:
    """Return the location registry in the order entries were added."""
    locations = store.list_locations()
    message = messages.LOCATION_LIST if locations else messages.NO_LOCATIONS
    return ApiResponse(status_code=status.HTTP_200_OK, message=message, result=locations)


@router.get("/{location_id}", response_model=ApiResponse[Location])
async def get_location(
    location_id: int,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Location]:
    """Retrieve a single location by ID."""
    location = store.get_location(location_id)
    if location is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.LOCATION_NOT_FOUND)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.LOCATION_DETAILS, result=location)


@router.post("/", response_model=ApiResponse[Location], status_code=status.HTTP_201_CREATED)
async def create_location(
    location_in: LocationCreate,
    response: Response,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Location]:
    """Register a new location.

    If the address is already registered nothing is created and the
    existing entry is returned with status 200.
    """
    written = store.add_location(location_in)
    if written.outcome is LocationWriteOutcome.ALREADY_EXISTS:
        response.status_code = status.HTTP_200_OK
        return ApiResponse(status_code=status.HTTP_200_OK, message=messages.LOCATION_EXIST, result=written.location)
    return ApiResponse(status_code=status.HTTP_201_CREATED, message=messages.LOCATION_ADD, result=written.location)


@router.put("/{location_id}", response_model=ApiResponse[Location])
async def update_location(
    location_id: int,
    location_in: LocationUpdate,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Location]:
    """Change a location's address in the registry and on every customer."""
    written = store.update_location(location_id, location_in)
    if written.outcome is LocationWriteOutcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.LOCATION_NOT_FOUND)
    if written.outcome is LocationWriteOutcome.ALREADY_EXISTS:
        return ApiResponse(status_code=status.HTTP_200_OK, message=messages.LOCATION_EXIST, result=written.location)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.LOCATION_UPDATE, result=written.location)


@router.delete("/{location_id}", response_model=ApiResponse[None])
async def delete_location(
    location_id: int,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[None]:
    """Delete a location from the registry and from every customer."""
    if not store.delete_location(location_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.LOCATION_NOT_FOUND)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.LOCATION_DELETE)
