"""
Rent payment endpoints.

The fixed paths (``/stats``, ``/generate``) are declared before the
``/{payment_id}`` routes.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query

from pghostel.api import deps
from pghostel.api.responses import envelope, envelope_list, message_only
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.rent_payment import (
    GenerateMonthlyRequest,
    GenerateMonthlyResult,
    PaymentStats,
    RentPaymentCreate,
    RentPaymentFilters,
    RentPaymentResponse,
    RentPaymentUpdate,
)
from pghostel.services.payment import (
    MonthlyPaymentGenerator,
    PaymentStatsService,
    RentPaymentService,
)

router = APIRouter(prefix="/rent-payments", tags=["Rent Payments"])


def get_filters(
    status: Optional[str] = Query(None, description='Payment status or "all"'),
    wing: Optional[str] = Query(None, description='Wing or "all"'),
    month: Optional[str] = Query(None, description="Billing month YYYY-MM"),
    search: Optional[str] = Query(None, description="Tenant name or email fragment"),
) -> RentPaymentFilters:
    return RentPaymentFilters(status=status, wing=wing, month=month, search=search)


@router.get("", response_model=ApiResponse[List[RentPaymentResponse]])
def list_payments(
    filters: RentPaymentFilters = Depends(get_filters),
    service: RentPaymentService = Depends(deps.get_rent_payment_service),
):
    """Payments matching every supplied filter, with tenant and room attached."""
    return envelope_list(service.list_payments(filters), RentPaymentResponse)


@router.get("/stats", response_model=ApiResponse[PaymentStats])
def payment_stats(
    month: Optional[str] = Query(None, description="Billing month YYYY-MM"),
    service: PaymentStatsService = Depends(deps.get_payment_stats_service),
):
    return envelope(service.stats(month), PaymentStats)


@router.post("/generate", response_model=ApiResponse[GenerateMonthlyResult])
def generate_monthly(
    payload: Optional[GenerateMonthlyRequest] = Body(None),
    generator: MonthlyPaymentGenerator = Depends(deps.get_monthly_generator),
):
    """Create bills for every active tenant not yet billed for the month."""
    month = payload.month if payload is not None else None
    return envelope(generator.generate(month), GenerateMonthlyResult)


@router.post("", response_model=ApiResponse[RentPaymentResponse])
def create_payment(
    payload: RentPaymentCreate,
    service: RentPaymentService = Depends(deps.get_rent_payment_service),
):
    return envelope(service.create_payment(payload), RentPaymentResponse)


@router.put("/{payment_id}", response_model=ApiResponse[RentPaymentResponse])
def update_payment(
    payment_id: str,
    payload: RentPaymentUpdate,
    service: RentPaymentService = Depends(deps.get_rent_payment_service),
):
    return envelope(service.update_payment(payment_id, payload), RentPaymentResponse)


@router.delete("/{payment_id}", response_model=ApiResponse[None])
def delete_payment(
    payment_id: str,
    service: RentPaymentService = Depends(deps.get_rent_payment_service),
):
    return message_only(service.delete(payment_id), "Rent payment deleted successfully")
