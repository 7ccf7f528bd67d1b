# routers/leases.py
"""
Lease API routes, including the signed lease document.

A lease is accessible through its property. Creating or moving a lease
requires both the property and the tenant to be yours.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session

import config
from auth import Identity, get_identity
from database import get_session
from models import Lease
from schemas.common import MessageResponse
from schemas.lease import LeaseCreate, LeaseUpdate, LeaseResponse, LeaseDocumentResponse
from services.crud_service import LeaseService
from services.lease_document_service import LeaseDocumentService
from storage import BlobStore, get_storage

router = APIRouter(prefix="/api/leases", tags=["leases"])


def _build_lease_response(lease: Lease) -> LeaseResponse:
     response = LeaseResponse.model_validate(lease)
     response.tenant_name = lease.tenant.name if lease.tenant else None
     response.property_address = lease.property.full_address if lease.property else None
     response.is_active = lease.active_on()
     return response


@router.get("", response_model=List[LeaseResponse], summary="List your leases")
def list_leases(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
     active_only: bool = Query(False, description="Only leases ending today or later"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     rows = LeaseService(db, identity).list(active_only=active_only, property_id=property_id, tenant_id=tenant_id)
     return [_build_lease_response(lease) for lease in rows]


@router.get("/{lease_id}", response_model=LeaseResponse, summary="Get lease by ID")
def get_lease(
     lease_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_lease_response(LeaseService(db, identity).get(lease_id))


@router.post("", response_model=LeaseResponse, status_code=status.HTTP_201_CREATED, summary="Create a lease")
def create_lease(
     body: LeaseCreate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Create a lease.

     - **property_id** and **tenant_id** must both resolve to you (403 otherwise)
     - **rent** / **deposit**: decimal amounts with two fraction digits
     """
     return _build_lease_response(LeaseService(db, identity).create(body))


@router.put("/{lease_id}", response_model=LeaseResponse, summary="Update lease")
def update_lease(
     lease_id: int,
     body: LeaseUpdate,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return _build_lease_response(LeaseService(db, identity).update(lease_id, body))


@router.delete("/{lease_id}", response_model=MessageResponse, summary="Delete lease")
def delete_lease(
     lease_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
     store: BlobStore = Depends(get_storage),
):
     """
     Delete a lease and its document.

     Removing the document is best effort; the lease is deleted even when
     storage fails.
     """
     LeaseService(db, identity, store).delete(lease_id)
     return MessageResponse(message="Lease deleted successfully", id=lease_id)


# ---------------------------------------------------------------------------
# Lease document
# ---------------------------------------------------------------------------

@router.post("/{lease_id}/upload", summary="Attach the lease document")
def upload_lease_document(
     lease_id: int,
     document: UploadFile = File(...),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
     store: BlobStore = Depends(get_storage),
):
     """
     Upload (or replace) the document of a lease.

     Accepts PDF, DOC, DOCX, JPG, JPEG and PNG up to 10 MB.
     """
     # One byte past the limit is enough to reject an oversized upload
     data = document.file.read(config.MAX_DOCUMENT_SIZE + 1)
     return LeaseDocumentService(db, identity, store).attach(
          lease_id, document.filename, document.content_type, data
     )


@router.get("/{lease_id}/document", response_model=LeaseDocumentResponse, summary="Describe the lease document")
def get_lease_document(
     lease_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
     store: BlobStore = Depends(get_storage),
):
     return LeaseDocumentService(db, identity, store).describe(lease_id)


@router.delete("/{lease_id}/document", response_model=MessageResponse, summary="Remove the lease document")
def delete_lease_document(
     lease_id: int,
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
     store: BlobStore = Depends(get_storage),
):
     LeaseDocumentService(db, identity, store).detach(lease_id)
     return MessageResponse(message="Document deleted successfully", id=lease_id)
