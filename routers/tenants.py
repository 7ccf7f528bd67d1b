# routers/tenants.py
"""
Tenant API routes.

Tenants are reachable only through their property; a tenant without a
property does not show up for anyone.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from models import Tenant
from schemas.common import MessageResponse
from schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from services.crud_service import TenantService

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


def _build_tenant_response(tenant: Tenant) -> TenantResponse:
     response = TenantResponse.model_validate(tenant)
     response.property_address = tenant.property.full_address if tenant.property else None
     return response


@router.get("", response_model=List[TenantResponse], summary="List your tenants")
def list_tenants(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return [_build_tenant_response(t) for t in TenantService(db, identity).list(property_id=property_id)]


@router.get("/{tenant_id}", response_model=TenantResponse, summary="Get tenant by ID")
def get_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_tenant_response(TenantService(db, identity).get(tenant_id))


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED, summary="Create a tenant")
def create_tenant(
     body: TenantCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_tenant_response(TenantService(db, identity).create(body))


@router.put("/{tenant_id}", response_model=TenantResponse, summary="Update tenant")
def update_tenant(
     tenant_id: int,
     body: TenantUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_tenant_response(TenantService(db, identity).update(tenant_id, body))


@router.delete("/{tenant_id}", response_model=MessageResponse, summary="Delete tenant")
def delete_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     TenantService(db, identity).delete(tenant_id)
     return MessageResponse(message="Tenant deleted successfully", id=tenant_id)
