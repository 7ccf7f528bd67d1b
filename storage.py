# storage.py
"""
Lease document storage.

Azure Blob Storage is used when AZURE_STORAGE_CONNECTION_STRING is set;
otherwise documents are written to UPLOAD_DIR and served from /uploads.
Both stores expose the same three calls: put, delete_if_exists and url_for.
"""
import logging
import os
from typing import Optional

import config

logger = logging.getLogger(__name__)


class BlobStore:
     """Interface for lease document storage backends."""

     def put(self, name: str, data: bytes, content_type: str) -> str:
          """Store data under name and return its public URL."""
          raise NotImplementedError

     def delete_if_exists(self, name: str) -> bool:
          """Delete name; return False when there was nothing to delete."""
          raise NotImplementedError

     def url_for(self, name: str) -> str:
          raise NotImplementedError


class AzureBlobStore(BlobStore):

     def __init__(self, connection_string: str, container: str):
          from azure.storage.blob import BlobServiceClient

          self.blob_service = BlobServiceClient.from_connection_string(connection_string)
          self.container = self.blob_service.get_container_client(container)
          if not self.container.exists():
               self.container.create_container(public_access="blob")
               logger.info("Created blob container %s", container)

     def put(self, name: str, data: bytes, content_type: str) -> str:
          from azure.storage.blob import ContentSettings

          blob_client = self.container.get_blob_client(name)
          blob_client.upload_blob(
               data,
               overwrite=True,
               content_settings=ContentSettings(content_type=content_type),
          )
          return blob_client.url

     def delete_if_exists(self, name: str) -> bool:
          from azure.core.exceptions import ResourceNotFoundError

          try:
               self.container.get_blob_client(name).delete_blob()
          except ResourceNotFoundError:
               return False
          return True

     def url_for(self, name: str) -> str:
          return self.container.get_blob_client(name).url


class LocalDiskStore(BlobStore):

     def __init__(self, directory: str, url_prefix: str = "/uploads"):
          self.directory = directory
          self.url_prefix = url_prefix.rstrip("/")
          os.makedirs(self.directory, exist_ok=True)

     def _path(self, name: str) -> str:
          # Names are generated server side; never let one escape the directory
          return os.path.join(self.directory, os.path.basename(name))

     def put(self, name: str, data: bytes, content_type: str) -> str:
          with open(self._path(name), "wb") as buffer:
               buffer.write(data)
          return self.url_for(name)

     def delete_if_exists(self, name: str) -> bool:
          path = self._path(name)
          if not os.path.exists(path):
               return False
          os.remove(path)
          return True

     def url_for(self, name: str) -> str:
          return f"{self.url_prefix}/{os.path.basename(name)}"


_store: Optional[BlobStore] = None


def create_store() -> BlobStore:
     if config.AZURE_STORAGE_CONNECTION_STRING:
          logger.info("Lease documents: Azure Blob Storage (%s)", config.AZURE_STORAGE_CONTAINER_NAME)
          return AzureBlobStore(config.AZURE_STORAGE_CONNECTION_STRING, config.AZURE_STORAGE_CONTAINER_NAME)
     logger.info("Lease documents: local storage (%s)", config.UPLOAD_DIR)
     return LocalDiskStore(config.UPLOAD_DIR)


def get_storage() -> BlobStore:
     """FastAPI dependency returning the process-wide document store."""
     global _store
     if _store is None:
          _store = create_store()
     return _store
