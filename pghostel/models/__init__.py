"""
SQLAlchemy models. Importing this package registers every table on
``Base.metadata``.
"""

from pghostel.models.base import Base, BaseModel
from pghostel.models.contact_message import ContactMessage
from pghostel.models.expense import Expense
from pghostel.models.facility_settings import FacilitySettings
from pghostel.models.rent_payment import RentPayment
from pghostel.models.room import Room
from pghostel.models.tenant import Tenant
from pghostel.models.user import User

__all__ = [
    "Base",
    "BaseModel",
    "ContactMessage",
    "Expense",
    "FacilitySettings",
    "RentPayment",
    "Room",
    "Tenant",
    "User",
]
