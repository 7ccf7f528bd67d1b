# routers/companies.py
"""
Company API routes.

Companies belong directly to the owner who created them.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from models import Company
from schemas.common import MessageResponse
from schemas.company import CompanyCreate, CompanyUpdate, CompanyResponse
from services.crud_service import CompanyService

router = APIRouter(prefix="/api/companies", tags=["companies"])


def _build_company_response(company: Company) -> CompanyResponse:
     response = CompanyResponse.model_validate(company)
     response.property_count = len(company.properties)
     return response


@router.get("", response_model=List[CompanyResponse], summary="List your companies")
def list_companies(
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return [_build_company_response(c) for c in CompanyService(db, identity).list()]


@router.get("/{company_id}", response_model=CompanyResponse, summary="Get company by ID")
def get_company(
     company_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_company_response(CompanyService(db, identity).get(company_id))


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED, summary="Create a company")
def create_company(
     body: CompanyCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_company_response(CompanyService(db, identity).create(body))


@router.put("/{company_id}", response_model=CompanyResponse, summary="Update company")
def update_company(
     company_id: int,
     body: CompanyUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_company_response(CompanyService(db, identity).update(company_id, body))


@router.delete("/{company_id}", response_model=MessageResponse, summary="Delete company")
def delete_company(
     company_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """Refused with 409 while properties or expenses still reference the company."""
     CompanyService(db, identity).delete(company_id)
     return MessageResponse(message="Company deleted successfully", id=company_id)
