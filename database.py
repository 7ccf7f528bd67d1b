# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration for Azure SQL (MS SQL Server), or any URL
  given in DATABASE_URL
- Session factory for dependency injection
- Connection check and Alembic migration runner used at startup

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
import logging
import os
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

import config

logger = logging.getLogger(__name__)

ALEMBIC_INI = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini")


def _engine_options(url: str) -> dict:
     if url.startswith("sqlite"):
          return {"connect_args": {"check_same_thread": False}, "echo": config.SQL_ECHO}
     return {
          "poolclass": QueuePool,
          "pool_size": config.DB_POOL_SIZE,
          "max_overflow": config.DB_MAX_OVERFLOW,
          "pool_timeout": config.DB_POOL_TIMEOUT,
          "pool_recycle": 1800,  # Recycle connections after 30 minutes
          "pool_pre_ping": True,
          "echo": config.SQL_ECHO,
     }


# Create SQLAlchemy engine
engine = create_engine(config.DATABASE_URL, **_engine_options(config.DATABASE_URL))

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Services commit explicitly; anything left uncommitted when the request
     fails is rolled back here.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               owners = db.query(Owner).all()
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception as e:
          logger.error("Database connection failed: %s", e)
          return False


def run_migrations() -> None:
     """
     Apply pending Alembic migrations up to head.

     Each revision runs once; applied revisions are tracked in the
     alembic_version table.
     """
     from alembic import command
     from alembic.config import Config

     alembic_cfg = Config(ALEMBIC_INI)
     alembic_cfg.set_main_option("script_location", os.path.join(os.path.dirname(ALEMBIC_INI), "alembic"))
     alembic_cfg.set_main_option("sqlalchemy.url", config.DATABASE_URL.replace("%", "%%"))
     # Logging is already configured by main.py
     alembic_cfg.attributes["configure_logger"] = False
     command.upgrade(alembic_cfg, "head")
     logger.info("Database schema is up to date")
