"""
FastAPI dependencies wiring request-scoped sessions into services.

Example usage in a router:
    @router.get("/rooms")
    def list_rooms(service: RoomService = Depends(deps.get_room_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from pghostel.db.session import get_db
from pghostel.repositories import (
    ContactMessageRepository,
    ExpenseRepository,
    FacilitySettingsRepository,
    RentPaymentRepository,
    RoomRepository,
    TenantRepository,
)
from pghostel.services.admin import DatabaseSeedService
from pghostel.services.expense import ExpenseService
from pghostel.services.hostel import FacilitySettingsService, RoomService
from pghostel.services.inquiry import ContactService
from pghostel.services.payment import (
    MonthlyPaymentGenerator,
    PaymentStatsService,
    RentPaymentService,
)
from pghostel.services.tenant import TenantService


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService(RoomRepository(db), db)


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(TenantRepository(db), RoomRepository(db), db)


def get_rent_payment_service(db: Session = Depends(get_db)) -> RentPaymentService:
    return RentPaymentService(RentPaymentRepository(db), TenantRepository(db), db)


def get_payment_stats_service(db: Session = Depends(get_db)) -> PaymentStatsService:
    return PaymentStatsService(RentPaymentRepository(db), db)


def get_monthly_generator(db: Session = Depends(get_db)) -> MonthlyPaymentGenerator:
    return MonthlyPaymentGenerator(RentPaymentRepository(db), TenantRepository(db), db)


def get_expense_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(ExpenseRepository(db), db)


def get_contact_service(db: Session = Depends(get_db)) -> ContactService:
    return ContactService(ContactMessageRepository(db), db)


def get_settings_service(db: Session = Depends(get_db)) -> FacilitySettingsService:
    return FacilitySettingsService(FacilitySettingsRepository(db), db)


def get_seed_service(db: Session = Depends(get_db)) -> DatabaseSeedService:
    return DatabaseSeedService(db)
