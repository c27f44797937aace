"""
Monthly rent payment generation.

Creates one pending (or overdue) bill per active tenant for a billing
month, skipping tenants already billed for it. Safe to run repeatedly.
"""

from typing import Callable, Dict, Optional

from sqlalchemy.orm import Session

from pghostel.core.constants import DEFAULT_WING
from pghostel.models.rent_payment import RentPayment
from pghostel.models.tenant import Tenant
from pghostel.repositories.rent_payment_repository import RentPaymentRepository
from pghostel.repositories.tenant_repository import TenantRepository
from pghostel.services.base import BaseService, ServiceResult
from pghostel.services.payment.status_classifier import classify_payment_status
from pghostel.utils.date_utils import parse_month_token, today_utc


def resolve_wing(tenant: Tenant) -> str:
    """Tenant wing, else the wing of the tenant's room, else the default wing."""
    if tenant.wing:
        return tenant.wing
    if tenant.room is not None and tenant.room.wing:
        return tenant.room.wing.value
    return DEFAULT_WING


class MonthlyPaymentGenerator(BaseService[RentPayment, RentPaymentRepository]):
    """Bulk creation of monthly rent bills."""

    def __init__(
        self,
        payment_repository: RentPaymentRepository,
        tenant_repository: TenantRepository,
        db_session: Session,
        clock: Callable = today_utc,
    ):
        super().__init__(payment_repository, db_session)
        self.tenant_repository = tenant_repository
        self._clock = clock

    def generate(self, month: Optional[str]) -> ServiceResult[Dict[str, int]]:
        """
        Generate bills for ``month`` ("YYYY-MM").

        Returns:
            ServiceResult with ``{"created": n}``; a validation failure if
            the month token is malformed, in which case nothing is written.
        """
        try:
            billing = parse_month_token(month)
            due_date = billing.due_date()
            today = self._clock()

            created = 0
            with self.transaction():
                for tenant in self.tenant_repository.find_active_with_rooms():
                    if self.repository.exists_for_month(tenant.id, billing.token):
                        continue

                    payment = RentPayment(
                        tenant_id=tenant.id,
                        room_id=tenant.room_id,
                        month=billing.token,
                        year=billing.year,
                        month_name=billing.month_name,
                        amount=tenant.rent,
                        paid_amount=0,
                        late_fee=0,
                        due_date=due_date,
                        status=classify_payment_status(tenant.rent, 0, due_date, today),
                        wing=resolve_wing(tenant),
                    )
                    self.repository.create(payment, commit=False)
                    created += 1

            self._log_operation("generate monthly payments", billing.token, {"created_count": created})
            return ServiceResult.success({"created": created}, message=f"Created {created} payments")
        except Exception as e:
            return self._handle_exception(e, "generate monthly payments", month)
