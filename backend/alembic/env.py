"""Alembic environment configuration - SYNC MODE for migrations."""

from logging.config import fileConfig
import os
from pathlib import Path

# Load .env FIRST before anything else
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from sqlalchemy import pool, create_engine

from alembic import context

from frontdesk.core.database import Base
import frontdesk.models  # noqa: F401  (registers tables on Base.metadata)

# Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Async drivers and the sync drivers Alembic runs with
SYNC_DRIVERS = {
    "+asyncpg": "+psycopg2",
    "+aiosqlite": "",
}


def get_url():
    """Get database URL from environment."""
    url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./frontdesk.db")
    # Force sync driver for Alembic
    for async_driver, sync_driver in SYNC_DRIVERS.items():
        if async_driver in url:
            url = url.replace(async_driver, sync_driver)
    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode with SYNC engine."""
    url = get_url()
    connectable = create_engine(
        url,
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=url.startswith("sqlite"),
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
