"""
Expense service.
"""

from typing import List

from pghostel.models.expense import Expense
from pghostel.repositories.expense_repository import ExpenseRepository
from pghostel.schemas.expense import ExpenseCreate, ExpenseUpdate
from pghostel.services.base import BaseService, ServiceResult


class ExpenseService(BaseService[Expense, ExpenseRepository]):
    """Operating expense bookkeeping."""

    def list_expenses(self) -> ServiceResult[List[Expense]]:
        """All expenses, latest expense date first."""
        try:
            return ServiceResult.success(self.repository.list_recent_first())
        except Exception as e:
            return self._handle_exception(e, "list expenses")

    def create_expense(self, payload: ExpenseCreate) -> ServiceResult[Expense]:
        return self.create(payload.record_data())

    def update_expense(self, expense_id: str, payload: ExpenseUpdate) -> ServiceResult[Expense]:
        return self.update(expense_id, payload.changes())
