"""
Compact views of related records embedded in list responses.
"""

from datetime import date as Date

from pghostel.schemas.common.base import BaseSchema
from pghostel.schemas.common.enums import TenantStatus, Wing

__all__ = ["RoomSummary", "TenantSummary"]


class RoomSummary(BaseSchema):
    """Room fields shown next to a tenant or payment."""

    id: str
    room_number: str
    floor: int
    wing: Wing


class TenantSummary(BaseSchema):
    """Tenant fields shown next to a room or payment."""

    id: str
    name: str
    email: str
    phone: str
    room_id: str
    rent: float
    deposit: float
    status: TenantStatus
    join_date: Date
    wing: str
    floor: int
