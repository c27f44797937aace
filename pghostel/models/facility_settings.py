"""
Facility settings model.

Singleton record holding the PG's organization details, billing rules
and UI preferences. Nested groups are JSON sub-documents.
"""

from typing import Any, Dict, List

from sqlalchemy import JSON, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pghostel.models.base import BaseModel


class FacilitySettings(BaseModel):
    """Organization-wide settings. Exactly one row is expected."""

    __tablename__ = "facility_settings"

    pg_name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    contact_number: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    gst_number: Mapped[str] = mapped_column(String(30), nullable=False)
    bank_details: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)

    rent_due_date: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    late_fee_percentage: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
        default=5,
    )
    maintenance_fee: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False),
        nullable=False,
        default=0,
    )

    amenities: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    policies: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    theme: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    notifications: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
