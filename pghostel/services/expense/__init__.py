"""
Expense services.
"""

from pghostel.services.expense.expense_service import ExpenseService

__all__ = ["ExpenseService"]
