"""
Room schemas.
"""

from typing import List, Optional

from pydantic import Field

from pghostel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)
from pghostel.schemas.common.enums import RoomStatus, RoomType, Wing
from pghostel.schemas.references import TenantSummary

__all__ = ["RoomCreate", "RoomUpdate", "RoomResponse"]


class RoomCreate(BaseCreateSchema):
    """Create room schema."""

    room_number: str = Field(..., min_length=1, max_length=20)
    floor: int = Field(..., ge=0)
    wing: Wing
    type: RoomType
    rent: float = Field(..., ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE
    amenities: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    tenant_id: Optional[str] = None


class RoomUpdate(BaseUpdateSchema):
    """Partial room update. Only fields sent are applied."""

    nullable_fields = frozenset({"description", "tenant_id"})

    room_number: Optional[str] = Field(None, min_length=1, max_length=20)
    floor: Optional[int] = Field(None, ge=0)
    wing: Optional[Wing] = None
    type: Optional[RoomType] = None
    rent: Optional[float] = Field(None, ge=0)
    status: Optional[RoomStatus] = None
    amenities: Optional[List[str]] = None
    description: Optional[str] = None
    tenant_id: Optional[str] = None


class RoomResponse(BaseResponseSchema):
    """Room with its occupying tenant, when one is linked and still exists."""

    room_number: str
    floor: int
    wing: Wing
    type: RoomType
    rent: float
    status: RoomStatus
    amenities: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    tenant_id: Optional[str] = None
    tenant: Optional[TenantSummary] = None
