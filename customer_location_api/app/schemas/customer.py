"""
Pydantic schemas for customers.

A customer embeds copies of the locations it is associated with.  The
``locations`` field may be omitted or sent as ``null``; both are
treated as an empty list so consumers never need to handle a missing
collection.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from customer_location_api.app.schemas.location import Location, LocationCreate


class CustomerBase(BaseModel):
    first_name: str = Field(..., min_length=1, examples=["Ada"])
    last_name: str = Field(..., min_length=1, examples=["Lovelace"])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v


class CustomerCreate(CustomerBase):
    """Schema for creating a customer.

    Embedded locations are matched against the location registry by
    address; unknown addresses are added to the registry.
    """

    locations: List[LocationCreate] = Field(default_factory=list)

    @field_validator("locations", mode="before")
    @classmethod
    def default_locations(cls, v: Optional[list]) -> list:
        return [] if v is None else v


class CustomerUpdate(CustomerCreate):
    """Schema for replacing an existing customer.

    The update is a full replacement: the stored record takes the
    names and the location list from the request.
    """


class Customer(CustomerBase):
    """Schema for reading a customer from the API."""

    id: int
    locations: List[Location] = Field(default_factory=list)
