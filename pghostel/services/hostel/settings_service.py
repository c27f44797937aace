"""
Facility settings service.

Settings form a single record. It is seeded from defaults at startup and
again on read if it has gone missing.
"""

import copy
from typing import Optional

from pghostel.core.constants import DEFAULT_FACILITY_SETTINGS
from pghostel.models.facility_settings import FacilitySettings
from pghostel.repositories.facility_settings_repository import FacilitySettingsRepository
from pghostel.schemas.facility_settings import FacilitySettingsUpdate
from pghostel.services.base import BaseService, ServiceResult


class FacilitySettingsService(BaseService[FacilitySettings, FacilitySettingsRepository]):
    """Read and shallow-merge the settings singleton."""

    def ensure_defaults(self) -> FacilitySettings:
        """
        Return the settings record, creating it from defaults if absent.

        Raises:
            DatabaseError: If the store cannot be read or written
        """
        settings_row: Optional[FacilitySettings] = self.repository.get_singleton()
        if settings_row is None:
            settings_row = self.repository.create(
                FacilitySettings(**copy.deepcopy(DEFAULT_FACILITY_SETTINGS))
            )
            self._logger.info("Seeded default facility settings")
        return settings_row

    def get_settings(self) -> ServiceResult[FacilitySettings]:
        try:
            return ServiceResult.success(self.ensure_defaults())
        except Exception as e:
            return self._handle_exception(e, "get settings")

    def update_settings(self, payload: FacilitySettingsUpdate) -> ServiceResult[FacilitySettings]:
        """Replace each supplied top-level field wholesale."""
        try:
            settings_row = self.ensure_defaults()
            settings_row = self.repository.apply(settings_row, payload.changes())
            return ServiceResult.success(settings_row, message="Settings updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update settings")
