"""
Uniform response envelope.

Every endpoint answers with ``{"statusCode", "message", "result"}``.
``result`` is ``null`` for outcomes that carry no record, such as
deletions or not-found responses.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    status_code: int
    message: str
    result: Optional[T] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
