import logging
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import config
from database import check_connection, run_migrations
from errors import register_exception_handlers
from routers import (
     auth,
     companies,
     expense_categories,
     expenses,
     leases,
     owners,
     properties,
     rent_payments,
     reports,
     tenants,
)
from storage import get_storage

logging.basicConfig(
     level=config.LOG_LEVEL,
     format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("property_manager")


@asynccontextmanager
async def lifespan(app: FastAPI):
     # Refuse to serve traffic without a working database
     if not check_connection():
          logger.critical("Database connection failed; shutting down")
          sys.exit(1)
     logger.info("Connected to database")
     if config.RUN_MIGRATIONS:
          run_migrations()
     store = get_storage()
     logger.info("Storage backend: %s", type(store).__name__)
     yield


# App instance
app = FastAPI(title="Property Manager API", lifespan=lifespan)

# CORS
app.add_middleware(
     CORSMiddleware,
     allow_origins=config.CORS_ORIGINS,
     allow_credentials="*" not in config.CORS_ORIGINS,
     allow_methods=["*"],
     allow_headers=["*"],
)

register_exception_handlers(app)

# Mount local uploads when documents are not kept in Azure
if not config.AZURE_STORAGE_CONNECTION_STRING:
     os.makedirs(config.UPLOAD_DIR, exist_ok=True)
     app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR), name="uploads")

for module in (
     auth,
     owners,
     companies,
     properties,
     tenants,
     leases,
     expenses,
     rent_payments,
     expense_categories,
     reports,
):
     app.include_router(module.router)


@app.get("/api/health", tags=["health"])
def health():
     return {"status": "ok", "database": check_connection()}


if __name__ == "__main__":
     uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=False)
