# config.py
"""
Application settings loaded from the environment.

Values come from the process environment (or a local .env file loaded with
python-dotenv). Every setting has a default suitable for local development
except the database credentials and JWT secret.
"""
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _as_bool(value: str) -> bool:
     return value.strip().lower() in ("1", "true", "yes", "on")


# Database configuration from environment
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")

# DATABASE_URL takes precedence (e.g. sqlite:///./dev.db for local work)
DATABASE_URL = os.getenv("DATABASE_URL") or (
     f"mssql+pymssql://{quote_plus(DB_USER or '')}:{quote_plus(DB_PASS or '')}"
     f"@{DB_SERVER}:{DB_PORT}/{DB_NAME}"
)

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "0"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))
RUN_MIGRATIONS = _as_bool(os.getenv("RUN_MIGRATIONS", "true"))

# Auth
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "720"))

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Lease document storage
AZURE_STORAGE_CONNECTION_STRING = os.getenv("AZURE_STORAGE_CONNECTION_STRING")
AZURE_STORAGE_CONTAINER_NAME = os.getenv("AZURE_STORAGE_CONTAINER_NAME", "lease-documents")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "uploads"))
MAX_DOCUMENT_SIZE = int(os.getenv("MAX_DOCUMENT_SIZE", str(10 * 1024 * 1024)))
