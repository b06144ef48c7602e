"""Async SQLAlchemy engine, declarative base and session dependency."""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Declarative base for persisted reference data."""


_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def init_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the process-wide engine and session factory."""
    global _engine, _session_factory

    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool

    _engine = create_async_engine(database_url, **kwargs)
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _engine


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    return _engine


async def create_all() -> None:
    """Create tables for all registered models."""
    # Import models so they register with Base.metadata
    import frontdesk.models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a database session."""
    if _session_factory is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    async with _session_factory() as session:
        yield session
