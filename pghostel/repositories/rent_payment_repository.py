"""
Rent payment repository.

Filtered listing with tenant/room joins, the per-month existence check
used by monthly generation, and the SQL aggregates behind payment stats.
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from pghostel.core.exceptions import DatabaseError
from pghostel.models.rent_payment import RentPayment
from pghostel.repositories.base import BaseRepository, driver_message
from pghostel.schemas.common.enums import PaymentStatus


class RentPaymentRepository(BaseRepository[RentPayment]):
    """Data access for rent payments."""

    entity_label = "Rent payment"

    def __init__(self, db: Session):
        super().__init__(RentPayment, db)

    def list_filtered(
        self,
        status: Optional[PaymentStatus] = None,
        wing: Optional[str] = None,
        month: Optional[str] = None,
        tenant_ids: Optional[Sequence[str]] = None,
    ) -> List[RentPayment]:
        """
        Payments matching every supplied filter, tenant and room loaded.

        ``tenant_ids`` of None means no tenant filter; an empty sequence
        matches nothing.
        """
        try:
            stmt = select(RentPayment).options(
                selectinload(RentPayment.tenant),
                selectinload(RentPayment.room),
            )
            if status is not None:
                stmt = stmt.where(RentPayment.status == status)
            if wing is not None:
                stmt = stmt.where(RentPayment.wing == wing)
            if month is not None:
                stmt = stmt.where(RentPayment.month == month)
            if tenant_ids is not None:
                stmt = stmt.where(RentPayment.tenant_id.in_(list(tenant_ids)))

            stmt = stmt.order_by(RentPayment.month.desc(), RentPayment.created_at.desc())
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="list_filtered") from e

    def exists_for_month(self, tenant_id: str, month: str) -> bool:
        """Whether a payment is already recorded for (tenant, month)."""
        try:
            stmt = (
                select(RentPayment.id)
                .where(RentPayment.tenant_id == tenant_id, RentPayment.month == month)
                .limit(1)
            )
            return self.db.scalar(stmt) is not None
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="exists_for_month") from e

    def aggregate_stats(self, month: Optional[str] = None) -> Dict[str, Any]:
        """
        Counts and sums over payments, optionally restricted to one month.

        Returns raw figures; empty sets yield zeros.
        """
        outstanding = RentPayment.amount - RentPayment.paid_amount
        status = RentPayment.status

        stmt = select(
            func.count(RentPayment.id).label("total"),
            func.count(RentPayment.id).filter(status == PaymentStatus.PAID).label("paid"),
            func.count(RentPayment.id).filter(status == PaymentStatus.PENDING).label("pending"),
            func.count(RentPayment.id).filter(status == PaymentStatus.PARTIAL).label("partial"),
            func.count(RentPayment.id).filter(status == PaymentStatus.OVERDUE).label("overdue"),
            func.sum(RentPayment.amount).label("total_amount"),
            func.sum(RentPayment.paid_amount).label("collected_amount"),
            func.sum(outstanding).filter(
                status.in_([PaymentStatus.PENDING, PaymentStatus.PARTIAL])
            ).label("pending_amount"),
            func.sum(outstanding).filter(status == PaymentStatus.OVERDUE).label("overdue_amount"),
        )
        if month is not None:
            stmt = stmt.where(RentPayment.month == month)

        try:
            row = self.db.execute(stmt).one()
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="aggregate_stats") from e

        return {
            "total": row.total or 0,
            "paid": row.paid or 0,
            "pending": row.pending or 0,
            "partial": row.partial or 0,
            "overdue": row.overdue or 0,
            "total_amount": float(row.total_amount or 0),
            "collected_amount": float(row.collected_amount or 0),
            "pending_amount": float(row.pending_amount or 0),
            "overdue_amount": float(row.overdue_amount or 0),
        }
