"""
Facility settings repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from pghostel.models.facility_settings import FacilitySettings
from pghostel.repositories.base import BaseRepository


class FacilitySettingsRepository(BaseRepository[FacilitySettings]):
    """Data access for the singleton settings record."""

    entity_label = "Settings"

    def __init__(self, db: Session):
        super().__init__(FacilitySettings, db)

    def get_singleton(self) -> Optional[FacilitySettings]:
        """The oldest settings row, if any."""
        rows = self.find_by_criteria({}, limit=1, order_by=["created_at"])
        return rows[0] if rows else None
