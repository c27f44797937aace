"""
Room service.
"""

from typing import List

from pghostel.models.room import Room
from pghostel.repositories.room_repository import RoomRepository
from pghostel.schemas.room import RoomCreate, RoomUpdate
from pghostel.services.base import BaseService, ServiceResult


class RoomService(BaseService[Room, RoomRepository]):
    """Room inventory. Deleting a room leaves its tenant and payments in place."""

    def list_rooms(self) -> ServiceResult[List[Room]]:
        try:
            return ServiceResult.success(self.repository.list_with_tenants())
        except Exception as e:
            return self._handle_exception(e, "list rooms")

    def create_room(self, payload: RoomCreate) -> ServiceResult[Room]:
        return self.create(payload.record_data())

    def update_room(self, room_id: str, payload: RoomUpdate) -> ServiceResult[Room]:
        return self.update(room_id, payload.changes())
