"""
Tenant service.

Registering a tenant also assigns the tenant to the room it names.
"""

from typing import List

from sqlalchemy.orm import Session

from pghostel.models.tenant import Tenant
from pghostel.repositories.room_repository import RoomRepository
from pghostel.repositories.tenant_repository import TenantRepository
from pghostel.schemas.tenant import TenantCreate, TenantUpdate
from pghostel.services.base import BaseService, ServiceResult


class TenantService(BaseService[Tenant, TenantRepository]):
    """Tenant registration and maintenance."""

    def __init__(
        self,
        repository: TenantRepository,
        room_repository: RoomRepository,
        db_session: Session,
    ):
        super().__init__(repository, db_session)
        self.room_repository = room_repository

    def list_tenants(self) -> ServiceResult[List[Tenant]]:
        try:
            return ServiceResult.success(self.repository.list_with_rooms())
        except Exception as e:
            return self._handle_exception(e, "list tenants")

    def create_tenant(self, payload: TenantCreate) -> ServiceResult[Tenant]:
        """
        Insert the tenant and mark its room occupied, in one transaction.

        An unknown room id does not block registration; it is logged and
        the room update is skipped.
        """
        try:
            with self.transaction():
                tenant = self.repository.create(Tenant(**payload.record_data()), commit=False)
                room = self.room_repository.mark_occupied(tenant.room_id, tenant.id, commit=False)
                if room is None:
                    self._logger.warning(
                        f"Room {tenant.room_id} not found while registering tenant {tenant.id}"
                    )

            self.db.refresh(tenant)
            return ServiceResult.success(tenant, message="Tenant created successfully")
        except Exception as e:
            return self._handle_exception(e, "create tenant")

    def update_tenant(self, tenant_id: str, payload: TenantUpdate) -> ServiceResult[Tenant]:
        return self.update(tenant_id, payload.changes())
