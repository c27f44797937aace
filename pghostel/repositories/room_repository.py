"""
Room repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from pghostel.core.exceptions import DatabaseError
from pghostel.models.room import Room
from pghostel.repositories.base import BaseRepository, driver_message
from pghostel.schemas.common.enums import RoomStatus


class RoomRepository(BaseRepository[Room]):
    """Data access for rooms."""

    entity_label = "Room"

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def list_with_tenants(self) -> List[Room]:
        """All rooms with the occupying tenant loaded."""
        try:
            stmt = (
                select(Room)
                .options(selectinload(Room.tenant))
                .order_by(Room.wing, Room.room_number)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="list_with_tenants") from e

    def mark_occupied(self, room_id: str, tenant_id: str, commit: bool = True) -> Optional[Room]:
        """
        Link ``tenant_id`` to the room and flag it occupied.

        Returns None when the room does not exist.
        """
        room = self.find_by_id(room_id)
        if room is None:
            return None
        return self.apply(
            room,
            {"tenant_id": tenant_id, "status": RoomStatus.OCCUPIED},
            commit=commit,
        )
