"""
Contact message repository.
"""

from typing import List

from sqlalchemy.orm import Session

from pghostel.models.contact_message import ContactMessage
from pghostel.repositories.base import BaseRepository


class ContactMessageRepository(BaseRepository[ContactMessage]):
    """Data access for contact inquiries."""

    entity_label = "Message"

    def __init__(self, db: Session):
        super().__init__(ContactMessage, db)

    def list_newest(self, limit: int) -> List[ContactMessage]:
        """The ``limit`` most recently received messages, newest first."""
        return self.find_by_criteria({}, limit=limit, order_by=["-created_at"])
