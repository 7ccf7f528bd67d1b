# routers/owners.py
"""
Owner administration. Admins only; there is no self-registration.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import Identity, require_admin
from database import get_session
from schemas.common import MessageResponse
from schemas.owner import OwnerCreate, OwnerResponse
from services.owner_service import OwnerService

router = APIRouter(prefix="/api/owners", tags=["owners"])


@router.get("", response_model=List[OwnerResponse], summary="List owners")
def list_owners(
     db: Session = Depends(get_session),
     admin: Identity = Depends(require_admin),
):
     return OwnerService.list_owners(db)


@router.post("", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED, summary="Create an owner")
def create_owner(
     body: OwnerCreate,
     db: Session = Depends(get_session),
     admin: Identity = Depends(require_admin),
):
     """Duplicate emails are rejected with 409."""
     return OwnerService.create_owner(db, body.email, body.password, body.name, body.is_admin)


@router.delete("/{owner_id}", response_model=MessageResponse, summary="Delete an owner")
def delete_owner(
     owner_id: int,
     db: Session = Depends(get_session),
     admin: Identity = Depends(require_admin),
):
     """Only owners without companies or properties can be deleted."""
     OwnerService.delete_owner(db, owner_id, admin.owner_id)
     return MessageResponse(message="Owner deleted successfully", id=owner_id)
