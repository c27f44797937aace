"""
Hostel inventory and configuration services.
"""

from pghostel.services.hostel.room_service import RoomService
from pghostel.services.hostel.settings_service import FacilitySettingsService

__all__ = ["RoomService", "FacilitySettingsService"]
