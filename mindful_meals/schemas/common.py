"""Response envelopes shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: {"success": true, "data": ..., "message": ...}."""

    success: bool = True
    data: T | None = None
    message: str


class ErrorResponse(BaseModel):
    """Error envelope: {"success": false, "message": ..., "errors": [...]}."""

    success: bool = False
    message: str
    error: str | None = None
    errors: list[str] | None = None


class OptionResponse(BaseModel):
    """Static lookup entry (category or storage location)."""

    value: str
    label: str
    icon: str
