"""
API router aggregating every resource router.
"""

from fastapi import APIRouter

from pghostel.api.routes import (
    admin,
    contacts,
    expenses,
    health,
    rent_payments,
    rooms,
    settings,
    tenants,
)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(health.router)
router.include_router(rooms.router)
router.include_router(tenants.router)
router.include_router(rent_payments.router)
router.include_router(expenses.router)
router.include_router(contacts.router)
router.include_router(settings.router)
router.include_router(admin.router)
