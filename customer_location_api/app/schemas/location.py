"""
Pydantic schemas for locations.

A location is identified by its address, which is unique across the
registry when compared case-insensitively.  Identifiers are always
assigned by the store, so request schemas carry only the address; an
``id`` sent by a client is ignored.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class LocationBase(BaseModel):
    address: str = Field(..., min_length=1, examples=["221B Baker Street"])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("address")
    @classmethod
    def address_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Address must not be blank")
        return v


class LocationCreate(LocationBase):
    """Schema for creating a location, standalone or embedded in a customer."""


class LocationUpdate(LocationBase):
    """Schema for replacing the address of an existing location."""


class Location(LocationBase):
    """Schema for reading a location from the API."""

    id: int
