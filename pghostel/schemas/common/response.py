"""
Standard API response envelope: ``{success, data?, message?, error?}``.
"""

from typing import Generic, Optional, TypeVar

from pydantic import Field, model_serializer

from pghostel.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = ["ApiResponse"]


class ApiResponse(BaseSchema, Generic[T]):
    """Envelope used by every endpoint. Empty optional members are omitted."""

    success: bool = Field(default=True, description="Success flag")
    data: Optional[T] = Field(default=None, description="Response data")
    message: Optional[str] = Field(default=None, description="Response message")
    error: Optional[str] = Field(default=None, description="Failure message")

    @model_serializer(mode="wrap")
    def _drop_empty_members(self, handler):
        payload = handler(self)
        for key in ("data", "message", "error"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        """Create success response."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[T]":
        """Create error response."""
        return cls(success=False, error=error)
