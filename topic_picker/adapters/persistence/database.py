"""Async SQLAlchemy engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from topic_picker.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(database_url: str | None = None, timeout: float | None = None) -> AsyncEngine:
    url = database_url or settings.database_url
    timeout = timeout if timeout is not None else settings.store_timeout_seconds
    connect_args = {}
    if url.startswith("postgresql+asyncpg"):
        # Connection and per-statement limits on the asyncpg side
        connect_args = {"timeout": timeout, "command_timeout": timeout}
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create tables directly (tests and local SQLite); production uses Alembic."""
    from topic_picker.adapters.persistence import models  # noqa: F401 — register models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
