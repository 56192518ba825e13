"""
Customer endpoints for API v1.

These routes are a thin adapter over :class:`CustomerLocationService`:
they translate store outcomes into HTTP status codes and wrap every
result in the ``{statusCode, message, result}`` envelope.  Refusing to
delete a customer that still has locations is an informational 200,
not an error.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from customer_location_api.app.core import messages
from customer_location_api.app.core.store import get_store
from customer_location_api.app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from customer_location_api.app.schemas.response import ApiResponse
from customer_location_api.app.services.customer_location_service import (
    CustomerLocationService,
    DeleteCustomerLocationOutcome,
    DeleteCustomerOutcome,
)

router = APIRouter()


@router.get("/", response_model=ApiResponse[List[Customer]])
async def list_customers(
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[List[Customer]]:
    """Return all customers in the order they were created."""
    customers = store.list_customers()
    message = messages.CUSTOMER_LIST if customers else messages.NO_CUSTOMERS
    return ApiResponse(status_code=status.HTTP_200_OK, message=message, result=customers)


@router.get("/{customer_id}", response_model=ApiResponse[Customer])
async def get_customer(
    customer_id: int,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Customer]:
    """Retrieve a single customer by ID.

    Returns HTTP 404 if the customer does not exist.
    """
    customer = store.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CUSTOMER_NOT_FOUND)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.CUSTOMER_DETAILS, result=customer)


@router.post("/", response_model=ApiResponse[Customer], status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Customer]:
    """Create a customer.

    Embedded locations are matched against the location registry by
    address; the response carries the resolved location ids.
    """
    customer = store.add_customer(customer_in)
    return ApiResponse(status_code=status.HTTP_201_CREATED, message=messages.CUSTOMER_ADD, result=customer)


@router.put("/{customer_id}", response_model=ApiResponse[Customer])
async def update_customer(
    customer_id: int,
    customer_in: CustomerUpdate,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[Customer]:
    """Replace an existing customer, including its location list."""
    customer = store.update_customer(customer_id, customer_in)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CUSTOMER_NOT_FOUND)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.CUSTOMER_UPDATE, result=customer)


@router.delete("/{customer_id}", response_model=ApiResponse[None])
async def delete_customer(
    customer_id: int,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[None]:
    """Delete a customer.

    A customer with locations is not deleted; the response is still 200
    and the message explains why.
    """
    outcome = store.delete_customer(customer_id)
    if outcome is DeleteCustomerOutcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CUSTOMER_NOT_FOUND)
    if outcome is DeleteCustomerOutcome.BLOCKED_HAS_LOCATIONS:
        return ApiResponse(status_code=status.HTTP_200_OK, message=messages.CUSTOMER_WITH_LOCATIONS)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.CUSTOMER_DELETE)


@router.delete("/{customer_id}/locations/{location_id}", response_model=ApiResponse[None])
async def delete_customer_location(
    customer_id: int,
    location_id: int,
    store: CustomerLocationService = Depends(get_store),
) -> ApiResponse[None]:
    """Detach one location from one customer.

    The location stays in the registry and on other customers.
    """
    outcome = store.delete_customer_location(customer_id, location_id)
    if outcome is DeleteCustomerLocationOutcome.CUSTOMER_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CUSTOMER_NOT_FOUND)
    if outcome is DeleteCustomerLocationOutcome.LOCATION_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=messages.CUSTOMER_LOCATION_NOT_FOUND)
    return ApiResponse(status_code=status.HTTP_200_OK, message=messages.CUSTOMER_LOCATION_DELETE)
