"""
Rent payment statistics.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from pghostel.models.rent_payment import RentPayment
from pghostel.repositories.rent_payment_repository import RentPaymentRepository
from pghostel.services.base import BaseService, ServiceResult


def collection_rate(collected: float, total: float) -> int:
    """Collected share of the billed total in whole percent, rounded half up."""
    if not total or total <= 0:
        return 0
    rate = Decimal(str(collected)) * 100 / Decimal(str(total))
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentStatsService(BaseService[RentPayment, RentPaymentRepository]):
    """Aggregate report over rent payments."""

    def stats(self, month: Optional[str] = None) -> ServiceResult[Dict[str, Any]]:
        """
        Counts per status, amount totals and the collection rate,
        optionally for a single billing month.
        """
        try:
            figures = self.repository.aggregate_stats(month or None)
            figures["collection_rate"] = collection_rate(
                figures["collected_amount"], figures["total_amount"]
            )
            return ServiceResult.success(figures)
        except Exception as e:
            return self._handle_exception(e, "compute payment stats", month)
