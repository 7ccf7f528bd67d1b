# routers/auth.py
"""
Login exchange and current-owner lookup.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from schemas.owner import LoginRequest, LoginResponse, OwnerResponse
from services.owner_service import OwnerService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Log in")
def login(body: LoginRequest, db: Session = Depends(get_session)):
     result = OwnerService.login(db, body.email, body.password)
     if result is None:
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
     return result


@router.get("/me", response_model=OwnerResponse, summary="Current owner")
def me(
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return OwnerService.get(db, identity.owner_id)
