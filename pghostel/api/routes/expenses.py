"""
Expense endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import envelope, envelope_list, message_only
from pghostel.schemas.common.response import ApiResponse
from pghostel.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from pghostel.services.expense import ExpenseService

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("", response_model=ApiResponse[List[ExpenseResponse]])
def list_expenses(service: ExpenseService = Depends(deps.get_expense_service)):
    return envelope_list(service.list_expenses(), ExpenseResponse)


@router.post("", response_model=ApiResponse[ExpenseResponse])
def create_expense(payload: ExpenseCreate, service: ExpenseService = Depends(deps.get_expense_service)):
    return envelope(service.create_expense(payload), ExpenseResponse)


@router.put("/{expense_id}", response_model=ApiResponse[ExpenseResponse])
def update_expense(
    expense_id: str,
    payload: ExpenseUpdate,
    service: ExpenseService = Depends(deps.get_expense_service),
):
    return envelope(service.update_expense(expense_id, payload), ExpenseResponse)


@router.delete("/{expense_id}", response_model=ApiResponse[None])
def delete_expense(expense_id: str, service: ExpenseService = Depends(deps.get_expense_service)):
    return message_only(service.delete(expense_id), "Expense deleted successfully")
