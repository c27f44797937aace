"""
User repository.
"""

from sqlalchemy.orm import Session

from pghostel.models.user import User
from pghostel.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Data access for back-office users."""

    entity_label = "User"

    def __init__(self, db: Session):
        super().__init__(User, db)
