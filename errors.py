# errors.py
"""
Error taxonomy shared by services and routers.

Services raise these; the handlers registered on the FastAPI app turn them into
JSON bodies of the form {"error": "..."} with the matching status code.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
     """Base class for errors surfaced to API callers."""
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     default_message = "Internal server error"

     def __init__(self, message: str = None):
          self.message = message or self.default_message
          super().__init__(self.message)


class NotFound(AppError):
     status_code = status.HTTP_404_NOT_FOUND
     default_message = "Not found"


class Forbidden(AppError):
     status_code = status.HTTP_403_FORBIDDEN
     default_message = "You do not have access to this resource"


class ValidationError(AppError):
     status_code = status.HTTP_400_BAD_REQUEST
     default_message = "Invalid request"


class Conflict(AppError):
     status_code = status.HTTP_409_CONFLICT
     default_message = "Conflict"


class UnsupportedMediaType(AppError):
     status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
     default_message = "Only PDF, DOC, DOCX, JPG, JPEG, PNG files are allowed"


class PayloadTooLarge(AppError):
     status_code = 413
     default_message = "File is too large"


class StorageError(AppError):
     status_code = status.HTTP_502_BAD_GATEWAY
     default_message = "Document storage failed"


class DatabaseError(AppError):
     status_code = status.HTTP_503_SERVICE_UNAVAILABLE
     default_message = "Database error"


def _error_response(status_code: int, message: str, details=None) -> JSONResponse:
     content = {"error": message}
     if details is not None:
          content["details"] = details
     return JSONResponse(status_code=status_code, content=content)


async def app_error_handler(request: Request, exc: AppError):
     if exc.status_code >= 500:
          logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
     return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
     return _error_response(
          status.HTTP_400_BAD_REQUEST,
          "Validation failed",
          jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
     )


async def integrity_error_handler(request: Request, exc: IntegrityError):
     logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
     return _error_response(status.HTTP_409_CONFLICT, "Conflicting record already exists")


async def database_error_handler(request: Request, exc: SQLAlchemyError):
     logger.exception("Database error on %s %s", request.method, request.url.path)
     return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, DatabaseError.default_message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
     if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
          return _error_response(exc.status_code, "Route not found")
     return JSONResponse(
          status_code=exc.status_code,
          content={"error": exc.detail},
          headers=getattr(exc, "headers", None),
     )


def register_exception_handlers(app: FastAPI) -> None:
     app.add_exception_handler(AppError, app_error_handler)
     app.add_exception_handler(RequestValidationError, request_validation_handler)
     app.add_exception_handler(IntegrityError, integrity_error_handler)
     app.add_exception_handler(SQLAlchemyError, database_error_handler)
     app.add_exception_handler(StarletteHTTPException, http_exception_handler)
