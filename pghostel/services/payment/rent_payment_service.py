"""
Rent payment service: filtered listing and CRUD with derived status.
"""

from typing import Callable, List

from sqlalchemy.orm import Session

from pghostel.models.rent_payment import RentPayment
from pghostel.repositories.rent_payment_repository import RentPaymentRepository
from pghostel.repositories.tenant_repository import TenantRepository
from pghostel.schemas.rent_payment import (
    RentPaymentCreate,
    RentPaymentFilters,
    RentPaymentUpdate,
)
from pghostel.services.base import BaseService, ServiceResult
from pghostel.services.payment.status_classifier import classify_payment_status
from pghostel.utils.date_utils import parse_month_token, today_utc


class RentPaymentService(BaseService[RentPayment, RentPaymentRepository]):
    """Rent payment operations."""

    def __init__(
        self,
        repository: RentPaymentRepository,
        tenant_repository: TenantRepository,
        db_session: Session,
        clock: Callable = today_utc,
    ):
        super().__init__(repository, db_session)
        self.tenant_repository = tenant_repository
        self._clock = clock

    def list_payments(self, filters: RentPaymentFilters) -> ServiceResult[List[RentPayment]]:
        """
        Payments matching all supplied filters, with tenant and room
        attached. ``search`` narrows to tenants whose name or email
        contains the term.
        """
        try:
            tenant_ids = None
            if filters.search:
                tenant_ids = self.tenant_repository.search_ids(filters.search)
                if not tenant_ids:
                    return ServiceResult.success([])

            payments = self.repository.list_filtered(
                status=filters.status,
                wing=filters.wing,
                month=filters.month,
                tenant_ids=tenant_ids,
            )
            return ServiceResult.success(payments)
        except Exception as e:
            return self._handle_exception(e, "list rent payments")

    def create_payment(self, payload: RentPaymentCreate) -> ServiceResult[RentPayment]:
        """
        Record a payment. Missing period fields are derived from ``month``
        and the status is classified from the amounts.
        """
        try:
            data = payload.record_data()
            data.pop("status", None)

            billing = parse_month_token(data["month"])
            if data.get("year") is None:
                data["year"] = billing.year
            if not data.get("month_name"):
                data["month_name"] = billing.month_name
            if data.get("due_date") is None:
                data["due_date"] = billing.due_date()
            if data.get("paid_amount") is None:
                data["paid_amount"] = 0

            data["status"] = classify_payment_status(
                data["amount"], data["paid_amount"], data["due_date"], self._clock()
            )

            payment = self.repository.create(RentPayment(**data))
            return ServiceResult.success(payment, message="Rent payment created successfully")
        except Exception as e:
            return self._handle_exception(e, "create rent payment")

    def update_payment(self, payment_id: str, payload: RentPaymentUpdate) -> ServiceResult[RentPayment]:
        """Merge supplied fields, then re-derive the status from the merged record."""
        try:
            payment = self.repository.get_by_id(payment_id)

            changes = payload.changes()
            changes.pop("status", None)

            merged = {
                "amount": changes.get("amount", payment.amount),
                "paid_amount": changes.get("paid_amount", payment.paid_amount),
                "due_date": changes.get("due_date", payment.due_date),
            }
            changes["status"] = classify_payment_status(
                merged["amount"], merged["paid_amount"], merged["due_date"], self._clock()
            )

            payment = self.repository.apply(payment, changes)
            return ServiceResult.success(payment, message="Rent payment updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update rent payment", payment_id)
