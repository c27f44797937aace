"""
Tenant schemas.
"""

from typing import Optional

from pydantic import EmailStr, Field

from pghostel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    CalendarDate,
)
from pghostel.schemas.common.enums import IDProofType, TenantStatus
from pghostel.schemas.references import RoomSummary

__all__ = [
    "Address",
    "IdProof",
    "EmergencyContact",
    "TenantCreate",
    "TenantUpdate",
    "TenantResponse",
]

_NESTED = frozenset({"address", "id_proof", "emergency_contact"})


class Address(BaseSchema):
    """Permanent address of a tenant."""

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class IdProof(BaseSchema):
    """Identity document. ``image`` is a URL or data URL."""

    type: IDProofType = IDProofType.AADHAR
    number: Optional[str] = None
    image: Optional[str] = None


class EmergencyContact(BaseSchema):
    """Person to reach in an emergency. All fields are required."""

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    relation: str = Field(..., min_length=1)


class TenantCreate(BaseCreateSchema):
    """Create tenant schema."""

    json_fields = _NESTED

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=30)
    room_id: str = Field(..., min_length=1)
    rent: float = Field(..., ge=0)
    deposit: float = Field(..., ge=0)
    status: TenantStatus = TenantStatus.ACTIVE
    join_date: CalendarDate
    address: Optional[Address] = None
    id_proof: Optional[IdProof] = None
    emergency_contact: EmergencyContact
    wing: str = Field(..., min_length=1, max_length=20)
    floor: int = Field(..., ge=0)


class TenantUpdate(BaseUpdateSchema):
    """Partial tenant update. Only fields sent are applied."""

    json_fields = _NESTED
    nullable_fields = frozenset({"address", "id_proof"})

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    room_id: Optional[str] = Field(None, min_length=1)
    rent: Optional[float] = Field(None, ge=0)
    deposit: Optional[float] = Field(None, ge=0)
    status: Optional[TenantStatus] = None
    join_date: Optional[CalendarDate] = None
    address: Optional[Address] = None
    id_proof: Optional[IdProof] = None
    emergency_contact: Optional[EmergencyContact] = None
    wing: Optional[str] = Field(None, min_length=1, max_length=20)
    floor: Optional[int] = Field(None, ge=0)


class TenantResponse(BaseResponseSchema):
    """Tenant with a summary of the assigned room, when it still exists."""

    name: str
    email: str
    phone: str
    room_id: str
    rent: float
    deposit: float
    status: TenantStatus
    join_date: CalendarDate
    address: Optional[Address] = None
    id_proof: Optional[IdProof] = None
    emergency_contact: EmergencyContact
    wing: str
    floor: int
    room: Optional[RoomSummary] = None
