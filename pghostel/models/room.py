"""
Room model.

A rentable room in one wing of the building. ``tenant_id`` points at the
occupying tenant without a database foreign key, so removing a tenant
never fails on dangling references.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pghostel.models.base import BaseModel, enum_column
from pghostel.schemas.common.enums import RoomStatus, RoomType, Wing

if TYPE_CHECKING:
    from pghostel.models.tenant import Tenant


class Room(BaseModel):
    """Room in a wing with its rent, status and amenities."""

    __tablename__ = "rooms"
    __table_args__ = (
        UniqueConstraint("room_number", "wing", name="uq_rooms_room_number_wing"),
    )

    room_number: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    floor: Mapped[int] = mapped_column(Integer, nullable=False)
    wing: Mapped[Wing] = mapped_column(enum_column(Wing), nullable=False, index=True)
    type: Mapped[RoomType] = mapped_column(enum_column(RoomType), nullable=False)
    rent: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        enum_column(RoomStatus),
        nullable=False,
        default=RoomStatus.AVAILABLE,
        index=True,
    )
    amenities: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tenant_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)

    tenant: Mapped[Optional["Tenant"]] = relationship(
        "Tenant",
        primaryjoin="foreign(Room.tenant_id) == Tenant.id",
        viewonly=True,
        uselist=False,
    )
