"""
Facility settings endpoints.
"""

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import envelope
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.facility_settings import FacilitySettingsResponse, FacilitySettingsUpdate
from pghostel.services.hostel import FacilitySettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=ApiResponse[FacilitySettingsResponse])
def get_settings(service: FacilitySettingsService = Depends(deps.get_settings_service)):
    """Current settings; defaults are created if none exist."""
    return envelope(service.get_settings(), FacilitySettingsResponse)


@router.put("", response_model=ApiResponse[FacilitySettingsResponse])
def update_settings(
    payload: FacilitySettingsUpdate,
    service: FacilitySettingsService = Depends(deps.get_settings_service),
):
    """Replace the supplied top-level fields."""
    return envelope(service.update_settings(payload), FacilitySettingsResponse)
