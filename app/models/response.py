"""JSON envelope shared by every endpoint."""

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T | None = None


class ErrorDetail(BaseModel):
    message: str
    stack: str | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail
