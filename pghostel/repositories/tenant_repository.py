"""
Tenant repository.
"""

from typing import List

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from pghostel.core.exceptions import DatabaseError
from pghostel.models.tenant import Tenant
from pghostel.repositories.base import BaseRepository, driver_message
from pghostel.schemas.common.enums import TenantStatus


class TenantRepository(BaseRepository[Tenant]):
    """Data access for tenants."""

    entity_label = "Tenant"

    def __init__(self, db: Session):
        super().__init__(Tenant, db)

    def list_with_rooms(self) -> List[Tenant]:
        """All tenants with their room loaded."""
        try:
            stmt = select(Tenant).options(selectinload(Tenant.room)).order_by(Tenant.name)
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="list_with_rooms") from e

    def find_active_with_rooms(self) -> List[Tenant]:
        """Tenants with status ``active``, rooms loaded for wing fallback."""
        try:
            stmt = (
                select(Tenant)
                .options(selectinload(Tenant.room))
                .where(Tenant.status == TenantStatus.ACTIVE)
                .order_by(Tenant.created_at)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="find_active_with_rooms") from e

    def search_ids(self, term: str) -> List[str]:
        """
        Ids of tenants whose name or email contains ``term``,
        case-insensitively. Wildcard characters in ``term`` match literally.
        """
        try:
            stmt = select(Tenant.id).where(
                or_(
                    Tenant.name.icontains(term, autoescape=True),
                    Tenant.email.icontains(term, autoescape=True),
                )
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="search_ids") from e
