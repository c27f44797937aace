"""
Rent payment schemas.

``status`` is never taken from the client: it is accepted on input for
compatibility and replaced by the classified value.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from pghostel.core.constants import FILTER_ALL
from pghostel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    CalendarDate,
)
from pghostel.schemas.common.enums import PaymentMethod, PaymentStatus
from pghostel.schemas.references import RoomSummary, TenantSummary

__all__ = [
    "MONTH_TOKEN_PATTERN",
    "RentPaymentCreate",
    "RentPaymentUpdate",
    "RentPaymentResponse",
    "RentPaymentFilters",
    "GenerateMonthlyRequest",
    "GenerateMonthlyResult",
    "PaymentStats",
]

MONTH_TOKEN_PATTERN = r"^[0-9]{4}-(0[1-9]|1[0-2])$"


class RentPaymentCreate(BaseCreateSchema):
    """
    Create rent payment schema.

    ``year``/``month_name`` default from ``month``; ``due_date`` defaults to
    the rent due day of ``month``; ``paid_amount`` defaults to 0.
    """

    tenant_id: str = Field(..., min_length=1)
    room_id: str = Field(..., min_length=1)
    month: str = Field(..., pattern=MONTH_TOKEN_PATTERN, description="Billing month YYYY-MM")
    year: Optional[int] = Field(None, ge=1900, le=9999)
    month_name: Optional[str] = None
    amount: float = Field(..., ge=0)
    paid_amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[CalendarDate] = None
    paid_date: Optional[CalendarDate] = None
    status: Optional[PaymentStatus] = Field(None, description="Ignored; derived server-side")
    payment_method: Optional[PaymentMethod] = None
    transaction_id: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None
    late_fee: float = Field(0, ge=0)
    wing: str = Field(..., min_length=1, max_length=20)


class RentPaymentUpdate(BaseUpdateSchema):
    """Partial rent payment update. Status is re-derived after merging."""

    nullable_fields = frozenset(
        {"paid_date", "payment_method", "transaction_id", "notes", "status"}
    )

    tenant_id: Optional[str] = Field(None, min_length=1)
    room_id: Optional[str] = Field(None, min_length=1)
    month: Optional[str] = Field(None, pattern=MONTH_TOKEN_PATTERN)
    year: Optional[int] = Field(None, ge=1900, le=9999)
    month_name: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    paid_amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[CalendarDate] = None
    paid_date: Optional[CalendarDate] = None
    status: Optional[PaymentStatus] = Field(None, description="Ignored; derived server-side")
    payment_method: Optional[PaymentMethod] = None
    transaction_id: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None
    late_fee: Optional[float] = Field(None, ge=0)
    wing: Optional[str] = Field(None, min_length=1, max_length=20)


class RentPaymentResponse(BaseResponseSchema):
    """Rent payment with tenant and room summaries (null when deleted)."""

    tenant_id: str
    room_id: str
    month: str
    year: int
    month_name: str
    amount: float
    paid_amount: float
    due_date: CalendarDate
    paid_date: Optional[CalendarDate] = None
    status: PaymentStatus
    payment_method: Optional[PaymentMethod] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    late_fee: float = 0
    wing: str
    tenant: Optional[TenantSummary] = None
    room: Optional[RoomSummary] = None


class RentPaymentFilters(BaseSchema):
    """
    Listing filters. ``status``/``wing`` of "all" (or empty) disable the
    filter; ``search`` matches tenant name or email.
    """

    status: Optional[PaymentStatus] = None
    wing: Optional[str] = None
    month: Optional[str] = None
    search: Optional[str] = None

    @field_validator("status", "wing", mode="before")
    @classmethod
    def drop_all_sentinel(cls, v):
        if v is None or (isinstance(v, str) and v.strip() in ("", FILTER_ALL)):
            return None
        return v

    @field_validator("month", "search", mode="before")
    @classmethod
    def drop_empty(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class GenerateMonthlyRequest(BaseSchema):
    """Body of the monthly generation call. Format is checked by the generator."""

    month: Any = None


class GenerateMonthlyResult(BaseSchema):
    """Number of payments created by a generation run."""

    created: int


class PaymentStats(BaseSchema):
    """Aggregate payment report."""

    total: int = 0
    paid: int = 0
    pending: int = 0
    partial: int = 0
    overdue: int = 0
    total_amount: float = 0
    collected_amount: float = 0
    pending_amount: float = 0
    overdue_amount: float = 0
    collection_rate: int = 0
