"""
Contact message service: the public inquiry inbox.
"""

from typing import List

from sqlalchemy.orm import Session

from pghostel.config.settings import settings
from pghostel.models.contact_message import ContactMessage
from pghostel.repositories.contact_message_repository import ContactMessageRepository
from pghostel.schemas.contact import ContactMessageCreate
from pghostel.services.base import BaseService, ServiceResult


class ContactService(BaseService[ContactMessage, ContactMessageRepository]):
    """Receive inquiries and track which have been read."""

    def __init__(
        self,
        repository: ContactMessageRepository,
        db_session: Session,
        list_limit: int = settings.CONTACT_LIST_LIMIT,
    ):
        super().__init__(repository, db_session)
        self.list_limit = list_limit

    def list_messages(self) -> ServiceResult[List[ContactMessage]]:
        """Most recent messages, newest first."""
        try:
            return ServiceResult.success(self.repository.list_newest(self.list_limit))
        except Exception as e:
            return self._handle_exception(e, "list contact messages")

    def submit(self, payload: ContactMessageCreate) -> ServiceResult[ContactMessage]:
        try:
            message = self.repository.create(ContactMessage(**payload.record_data()))
            return ServiceResult.success(message, message="Message sent successfully")
        except Exception as e:
            return self._handle_exception(e, "submit contact message")

    def mark_read(self, message_id: str) -> ServiceResult[ContactMessage]:
        return self.update(message_id, {"is_read": True})
