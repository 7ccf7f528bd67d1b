# routers/expense_categories.py
"""
Expense category API routes.

Shared categories (no owner) are listed for everyone next to the caller's
own categories.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from schemas.common import MessageResponse
from schemas.expense_category import ExpenseCategoryCreate, ExpenseCategoryUpdate, ExpenseCategoryResponse
from services.crud_service import ExpenseCategoryService

router = APIRouter(prefix="/api/expense-categories", tags=["expense-categories"])


@router.get("", response_model=List[ExpenseCategoryResponse], summary="List expense categories")
def list_categories(
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return ExpenseCategoryService(db, identity).list()


@router.post("", response_model=ExpenseCategoryResponse, status_code=status.HTTP_201_CREATED, summary="Create a category")
def create_category(
     body: ExpenseCategoryCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return ExpenseCategoryService(db, identity).create(body)


@router.put("/{category_id}", response_model=ExpenseCategoryResponse, summary="Rename a category")
def update_category(
     category_id: int,
     body: ExpenseCategoryUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return ExpenseCategoryService(db, identity).update(category_id, body)


@router.delete("/{category_id}", response_model=MessageResponse, summary="Delete a category")
def delete_category(
     category_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """Shared categories can only be deleted by admins."""
     ExpenseCategoryService(db, identity).delete(category_id)
     return MessageResponse(message="Expense category deleted successfully", id=category_id)
