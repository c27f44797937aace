"""
Facility settings schemas.

Settings are a singleton; updates replace each supplied top-level field
wholesale, nested groups included.
"""

from typing import List, Optional

from pydantic import Field

from pghostel.schemas.common.base import BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "BankDetails",
    "ThemeSettings",
    "NotificationPreferences",
    "FacilitySettingsUpdate",
    "FacilitySettingsResponse",
]


class BankDetails(BaseSchema):
    account_number: str = ""
    ifsc_code: str = ""
    bank_name: str = ""
    account_holder_name: str = ""


class ThemeSettings(BaseSchema):
    primary_color: str = "#fbbf24"
    secondary_color: str = "#92400e"


class NotificationPreferences(BaseSchema):
    email: bool = True
    sms: bool = False
    push: bool = False


class FacilitySettingsUpdate(BaseUpdateSchema):
    """Shallow settings update."""

    json_fields = frozenset({"bank_details", "theme", "notifications"})

    pg_name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = None
    contact_number: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)
    gst_number: Optional[str] = Field(None, max_length=30)
    bank_details: Optional[BankDetails] = None
    rent_due_date: Optional[int] = Field(None, ge=1, le=31)
    late_fee_percentage: Optional[float] = Field(None, ge=0, le=100)
    maintenance_fee: Optional[float] = Field(None, ge=0)
    amenities: Optional[List[str]] = None
    policies: Optional[List[str]] = None
    theme: Optional[ThemeSettings] = None
    notifications: Optional[NotificationPreferences] = None


class FacilitySettingsResponse(BaseResponseSchema):
    pg_name: str
    address: str
    contact_number: str
    email: str
    gst_number: str
    bank_details: BankDetails
    rent_due_date: int
    late_fee_percentage: float
    maintenance_fee: float
    amenities: List[str] = Field(default_factory=list)
    policies: List[str] = Field(default_factory=list)
    theme: ThemeSettings
    notifications: NotificationPreferences
