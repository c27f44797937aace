"""
Expense repository.
"""

from typing import List

from sqlalchemy.orm import Session

from pghostel.models.expense import Expense
from pghostel.repositories.base import BaseRepository


class ExpenseRepository(BaseRepository[Expense]):
    """Data access for expenses."""

    entity_label = "Expense"

    def __init__(self, db: Session):
        super().__init__(Expense, db)

    def list_recent_first(self) -> List[Expense]:
        """All expenses, newest expense date first."""
        return self.find_all(order_by=["-date", "-created_at"])
