"""
Tenant model.

A paying guest assigned to a room. Address, ID proof and emergency
contact are stored as JSON sub-documents.
"""

from datetime import date as Date
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlalchemy import JSON, Date as SQLDate, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pghostel.models.base import BaseModel, enum_column
from pghostel.schemas.common.enums import TenantStatus

if TYPE_CHECKING:
    from pghostel.models.room import Room


class Tenant(BaseModel):
    """Tenant occupying a room."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    room_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    rent: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    deposit: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    status: Mapped[TenantStatus] = mapped_column(
        enum_column(TenantStatus),
        nullable=False,
        default=TenantStatus.ACTIVE,
        index=True,
    )
    join_date: Mapped[Date] = mapped_column(SQLDate, nullable=False)

    address: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    id_proof: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    emergency_contact: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)

    # Wing is free text here; rooms constrain it to A/B
    wing: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    floor: Mapped[int] = mapped_column(Integer, nullable=False)

    room: Mapped[Optional["Room"]] = relationship(
        "Room",
        primaryjoin="foreign(Tenant.room_id) == Room.id",
        viewonly=True,
        uselist=False,
    )
