# routers/properties.py
"""
Property API routes.

A property is visible to its direct owner and to the owner of its company.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from models import Property
from schemas.common import MessageResponse
from schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from services.crud_service import PropertyService

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _build_property_response(prop: Property) -> PropertyResponse:
     response = PropertyResponse.model_validate(prop)
     response.company_name = prop.company.name if prop.company else None
     return response


@router.get("", response_model=List[PropertyResponse], summary="List your properties")
def list_properties(
     company_id: Optional[int] = Query(None, description="Filter by company ID"),
     status: Optional[str] = Query(None, description="Filter by status"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     rows = PropertyService(db, identity).list(company_id=company_id, status=status)
     return [_build_property_response(p) for p in rows]


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property by ID")
def get_property(
     property_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_property_response(PropertyService(db, identity).get(property_id))


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED, summary="Create a property")
def create_property(
     body: PropertyCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Create a property owned by the caller.

     - **company_id**: optional; must be one of your companies
     """
     return _build_property_response(PropertyService(db, identity).create(body))


@router.put("/{property_id}", response_model=PropertyResponse, summary="Update property")
def update_property(
     property_id: int,
     body: PropertyUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_property_response(PropertyService(db, identity).update(property_id, body))


@router.delete("/{property_id}", response_model=MessageResponse, summary="Delete property")
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """Refused with 409 while tenants, leases or expenses still reference the property."""
     PropertyService(db, identity).delete(property_id)
     return MessageResponse(message="Property deleted successfully", id=property_id)
