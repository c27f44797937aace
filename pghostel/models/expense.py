"""
Expense model.

Operating expenses of the hostel, tagged with a wing (or "common").
"""

from datetime import date as Date

from sqlalchemy import Date as SQLDate, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pghostel.models.base import BaseModel, enum_column
from pghostel.schemas.common.enums import ExpensePaymentMethod, ExpenseStatus


class Expense(BaseModel):
    """Single operating expense."""

    __tablename__ = "expenses"

    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    subcategory: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    date: Mapped[Date] = mapped_column(SQLDate, nullable=False, index=True)
    payment_method: Mapped[ExpensePaymentMethod] = mapped_column(
        enum_column(ExpensePaymentMethod),
        nullable=False,
    )
    vendor: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[ExpenseStatus] = mapped_column(
        enum_column(ExpenseStatus),
        nullable=False,
        default=ExpenseStatus.PENDING,
    )
    wing: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
