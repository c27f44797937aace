"""
Contact message schemas.
"""

from typing import Optional

from pydantic import EmailStr, Field

from pghostel.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = ["ContactMessageCreate", "ContactMessageResponse"]


class ContactMessageCreate(BaseCreateSchema):
    """Public contact form submission."""

    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    subject: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=1)


class ContactMessageResponse(BaseResponseSchema):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    is_read: bool = False
