# alembic/env.py
"""
Alembic environment for the property manager schema.

Revisions live in alembic/versions and are applied in order; the applied
revision is tracked in the alembic_version table. The database URL comes
from config.py (DATABASE_URL or the DB_* variables) unless the caller has
already set sqlalchemy.url, as database.run_migrations() does.
"""
import os
import sys
from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

# Make the app modules importable when alembic runs from the CLI
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config as app_config  # noqa: E402
from models import Base  # noqa: E402

config = context.config

# The app configures logging itself before migrating at startup
if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or app_config.DATABASE_URL


def _context_options(**options) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        **options,
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    context.configure(**_context_options(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    ))

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect and apply pending revisions."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        # SQLite cannot ALTER most constraints in place
        context.configure(**_context_options(
            connection=connection,
            render_as_batch=connection.dialect.name == "sqlite",
        ))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
