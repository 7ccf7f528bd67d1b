# routers/expenses.py
"""
Expense API routes.

An expense is visible through its company, its property, or the company of
its property.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from models import Expense
from schemas.common import MessageResponse
from schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from services.crud_service import ExpenseService

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


def _build_expense_response(expense: Expense) -> ExpenseResponse:
     response = ExpenseResponse.model_validate(expense)
     response.property_address = expense.property.full_address if expense.property else None
     response.company_name = expense.company.name if expense.company else None
     return response


@router.get("", response_model=List[ExpenseResponse], summary="List your expenses")
def list_expenses(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     company_id: Optional[int] = Query(None, description="Filter by company ID"),
     category: Optional[str] = Query(None, description="Filter by category"),
     start_date: Optional[date] = Query(None, description="Earliest expense date"),
     end_date: Optional[date] = Query(None, description="Latest expense date"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     rows = ExpenseService(db, identity).list(
          start_date=start_date,
          end_date=end_date,
          category=category,
          property_id=property_id,
          company_id=company_id,
     )
     return [_build_expense_response(e) for e in rows]


@router.get("/{expense_id}", response_model=ExpenseResponse, summary="Get expense by ID")
def get_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_expense_response(ExpenseService(db, identity).get(expense_id))


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED, summary="Record an expense")
def create_expense(
     body: ExpenseCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Record an expense against a property, a company, or both.

     At least one of **property_id** / **company_id** is required and each
     given one must be yours.
     """
     return _build_expense_response(ExpenseService(db, identity).create(body))


@router.put("/{expense_id}", response_model=ExpenseResponse, summary="Update expense")
def update_expense(
     expense_id: int,
     body: ExpenseUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_expense_response(ExpenseService(db, identity).update(expense_id, body))


@router.delete("/{expense_id}", response_model=MessageResponse, summary="Delete expense")
def delete_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     ExpenseService(db, identity).delete(expense_id)
     return MessageResponse(message="Expense deleted successfully", id=expense_id)
