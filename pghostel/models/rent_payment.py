"""
Rent payment model.

One bill per tenant per billing month ("YYYY-MM"). Tenant and room are
referenced by id only; payments outlive the records they point to.
"""

from datetime import date as Date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date as SQLDate, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pghostel.models.base import BaseModel, enum_column
from pghostel.schemas.common.enums import PaymentMethod, PaymentStatus

if TYPE_CHECKING:
    from pghostel.models.room import Room
    from pghostel.models.tenant import Tenant


class RentPayment(BaseModel):
    """Monthly rent bill and its settlement state."""

    __tablename__ = "rent_payments"
    __table_args__ = (
        Index("ix_rent_payments_tenant_month", "tenant_id", "month"),
    )

    # ==================== References ====================
    tenant_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    room_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    # ==================== Billing Period ====================
    month: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        index=True,
        comment="Billing month token YYYY-MM",
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month_name: Mapped[str] = mapped_column(String(20), nullable=False)

    # ==================== Amounts ====================
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    paid_amount: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False),
        nullable=False,
        default=0,
    )
    late_fee: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False),
        nullable=False,
        default=0,
    )

    # ==================== Dates & Status ====================
    due_date: Mapped[Date] = mapped_column(SQLDate, nullable=False)
    paid_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)
    status: Mapped[PaymentStatus] = mapped_column(
        enum_column(PaymentStatus),
        nullable=False,
        default=PaymentStatus.PENDING,
        index=True,
    )

    # ==================== Settlement ====================
    payment_method: Mapped[Optional[PaymentMethod]] = mapped_column(
        enum_column(PaymentMethod),
        nullable=True,
    )
    transaction_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    wing: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    tenant: Mapped[Optional["Tenant"]] = relationship(
        "Tenant",
        primaryjoin="foreign(RentPayment.tenant_id) == Tenant.id",
        viewonly=True,
        uselist=False,
    )
    room: Mapped[Optional["Room"]] = relationship(
        "Room",
        primaryjoin="foreign(RentPayment.room_id) == Room.id",
        viewonly=True,
        uselist=False,
    )
