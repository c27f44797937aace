"""
Expense schemas.
"""

from typing import Optional

from pydantic import Field

from pghostel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
    CalendarDate,
)
from pghostel.schemas.common.enums import ExpensePaymentMethod, ExpenseStatus

__all__ = ["ExpenseCreate", "ExpenseUpdate", "ExpenseResponse"]


class ExpenseCreate(BaseCreateSchema):
    """Create expense schema. ``wing`` is free text ("A", "B", "common")."""

    category: str = Field(..., min_length=1, max_length=100)
    subcategory: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    date: CalendarDate
    payment_method: ExpensePaymentMethod
    vendor: str = Field(..., min_length=1, max_length=200)
    status: ExpenseStatus = ExpenseStatus.PENDING
    wing: str = Field(..., min_length=1, max_length=20)


class ExpenseUpdate(BaseUpdateSchema):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    subcategory: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    date: Optional[CalendarDate] = None
    payment_method: Optional[ExpensePaymentMethod] = None
    vendor: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[ExpenseStatus] = None
    wing: Optional[str] = Field(None, min_length=1, max_length=20)


class ExpenseResponse(BaseResponseSchema):
    category: str
    subcategory: str
    description: str
    amount: float
    date: CalendarDate
    payment_method: ExpensePaymentMethod
    vendor: str
    status: ExpenseStatus
    wing: str
