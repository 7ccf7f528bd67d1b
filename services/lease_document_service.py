# services/lease_document_service.py
"""
Lease document attach / detach.

A lease carries at most one document. Attaching stores the new file under a
generated name, points the lease at it and only then removes the previous
file. Any cleanup of a file that is no longer referenced is best effort:
failures are logged and never mask the primary result.
"""
import logging
import os
import random
import time
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import config
from auth import Identity
from errors import NotFound, PayloadTooLarge, StorageError, UnsupportedMediaType, ValidationError
from models import Lease
from services.access_service import EntityKind, require_accessible
from storage import BlobStore

logger = logging.getLogger(__name__)

# extension -> MIME types accepted for it
ALLOWED_DOCUMENT_TYPES = {
     ".pdf": {"application/pdf"},
     ".doc": {"application/msword"},
     ".docx": {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"},
     ".jpg": {"image/jpeg", "image/jpg"},
     ".jpeg": {"image/jpeg", "image/jpg"},
     ".png": {"image/png"},
}


def validate_document(original_name: str, content_type: Optional[str], size: int,
                      max_size: int = None) -> str:
     """
     Check name, MIME type and size of an upload.

     Returns the lower-cased extension.
     """
     max_size = config.MAX_DOCUMENT_SIZE if max_size is None else max_size
     if not original_name:
          raise ValidationError("No file uploaded")
     extension = os.path.splitext(original_name)[1].lower()
     mime = (content_type or "").split(";")[0].strip().lower()
     if extension not in ALLOWED_DOCUMENT_TYPES or mime not in ALLOWED_DOCUMENT_TYPES[extension]:
          raise UnsupportedMediaType()
     if size == 0:
          raise ValidationError("Uploaded file is empty")
     if size > max_size:
          raise PayloadTooLarge(f"File exceeds the {max_size} byte limit")
     return extension


def generate_document_name(extension: str) -> str:
     """lease-<epoch ms>-<9 random digits><ext>"""
     unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999):09d}"
     return f"lease-{unique_suffix}{extension}"


class LeaseDocumentService:
     """Attach, describe and detach the document of an owner's lease."""

     def __init__(self, db: Session, identity: Identity, store: BlobStore):
          self.db = db
          self.identity = identity
          self.store = store

     def _lease(self, lease_id: int) -> Lease:
          return require_accessible(self.db, self.identity.owner_id, EntityKind.LEASE, lease_id)

     def _discard(self, name: str, reason: str) -> None:
          try:
               self.store.delete_if_exists(name)
          except Exception:
               logger.exception("Could not remove %s document %s", reason, name)

     def attach(self, lease_id: int, original_name: str, content_type: Optional[str], data: bytes) -> dict:
          lease = self._lease(lease_id)
          extension = validate_document(original_name, content_type, len(data))
          filename = generate_document_name(extension)

          try:
               url = self.store.put(filename, data, content_type)
          except Exception as e:
               logger.error("Upload of %s for lease %s failed: %s", filename, lease_id, e)
               self._discard(filename, "partially written")
               raise StorageError("Failed to upload document")

          previous = lease.document_filename
          lease.document_filename = filename
          lease.document_original_name = os.path.basename(original_name)
          lease.document_uploaded_at = datetime.utcnow()
          try:
               self.db.commit()
          except SQLAlchemyError:
               self.db.rollback()
               self._discard(filename, "unreferenced")
               raise

          if previous and previous != filename:
               self._discard(previous, "replaced")

          logger.info("Stored document %s for lease %s", filename, lease_id)
          return {
               "message": "Document uploaded successfully",
               "filename": filename,
               "original_name": lease.document_original_name,
               "url": url,
          }

     def describe(self, lease_id: int) -> dict:
          lease = self._lease(lease_id)
          if not lease.document_filename:
               raise NotFound("No document found")
          return {
               "lease_id": lease.id,
               "filename": lease.document_filename,
               "original_name": lease.document_original_name,
               "uploaded_at": lease.document_uploaded_at,
               "url": self.store.url_for(lease.document_filename),
          }

     def detach(self, lease_id: int) -> None:
          lease = self._lease(lease_id)
          if not lease.document_filename:
               raise NotFound("No document found")
          filename = lease.document_filename
          self._discard(filename, "detached")
          lease.document_filename = None
          lease.document_original_name = None
          lease.document_uploaded_at = None
          self.db.commit()
          logger.info("Removed document %s from lease %s", filename, lease_id)
