# routers/rent_payments.py
"""
Rent payment API routes.

Payments resolve to an owner through tenant -> property.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from models import RentPayment
from schemas.common import MessageResponse
from schemas.rent_payment import RentPaymentCreate, RentPaymentUpdate, RentPaymentResponse
from services.crud_service import RentPaymentService

router = APIRouter(prefix="/api/rent-payments", tags=["rent-payments"])


def _build_payment_response(payment: RentPayment) -> RentPaymentResponse:
     response = RentPaymentResponse.model_validate(payment)
     tenant = payment.tenant
     if tenant:
          response.tenant_name = tenant.name
          response.tenant_phone = tenant.phone
          response.property_address = tenant.property.full_address if tenant.property else None
     return response


@router.get("", response_model=List[RentPaymentResponse], summary="List your rent payments")
def list_payments(
     tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
     month: Optional[int] = Query(None, ge=1, le=12, description="Payment month (requires year)"),
     year: Optional[int] = Query(None, ge=1900, le=9999, description="Payment year (requires month)"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     rows = RentPaymentService(db, identity).list(month=month, year=year, tenant_id=tenant_id)
     return [_build_payment_response(p) for p in rows]


@router.get("/{payment_id}", response_model=RentPaymentResponse, summary="Get rent payment by ID")
def get_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_payment_response(RentPaymentService(db, identity).get(payment_id))


@router.post("", response_model=RentPaymentResponse, status_code=status.HTTP_201_CREATED, summary="Record a rent payment")
def create_payment(
     body: RentPaymentCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_payment_response(RentPaymentService(db, identity).create(body))


@router.put("/{payment_id}", response_model=RentPaymentResponse, summary="Update rent payment")
def update_payment(
     payment_id: int,
     body: RentPaymentUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_payment_response(RentPaymentService(db, identity).update(payment_id, body))


@router.delete("/{payment_id}", response_model=MessageResponse, summary="Delete rent payment")
def delete_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     RentPaymentService(db, identity).delete(payment_id)
     return MessageResponse(message="Payment deleted successfully", id=payment_id)
