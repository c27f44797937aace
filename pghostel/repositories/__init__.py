"""
Repositories: one per persisted entity, all built on BaseRepository and
constructed with the request's SQLAlchemy Session.
"""

from pghostel.repositories.base import BaseRepository
from pghostel.repositories.contact_message_repository import ContactMessageRepository
from pghostel.repositories.expense_repository import ExpenseRepository
from pghostel.repositories.facility_settings_repository import FacilitySettingsRepository
from pghostel.repositories.rent_payment_repository import RentPaymentRepository
from pghostel.repositories.room_repository import RoomRepository
from pghostel.repositories.tenant_repository import TenantRepository
from pghostel.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "ContactMessageRepository",
    "ExpenseRepository",
    "FacilitySettingsRepository",
    "RentPaymentRepository",
    "RoomRepository",
    "TenantRepository",
    "UserRepository",
]
