"""Response envelopes shared by all routes.

Successful responses carry ``status="success"``, a message and the payload;
errors carry ``status="failure"`` and a message (see interface/error.py).
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")
MetaT = TypeVar("MetaT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Successful response with a single payload."""

    status: Literal["success"] = "success"
    message: str
    data: DataT


class PaginatedResponse(BaseModel, Generic[DataT, MetaT]):
    """Successful listing response with pagination metadata."""

    status: Literal["success"] = "success"
    message: str
    data: list[DataT]
    meta: MetaT


class ErrorResponse(BaseModel):
    """Failure response."""

    status: Literal["failure"] = "failure"
    message: str
