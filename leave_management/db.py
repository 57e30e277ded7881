"""Database engine and per-request sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from leave_management.config import get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None


def _build_engine() -> AsyncEngine:
    settings = get_settings()
    options: dict[str, object] = {"echo": settings.debug, "pool_pre_ping": True}
    if not settings.database_url.startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    logger.info("Connecting to %s", settings.database_url.rsplit("@", 1)[-1])
    return create_async_engine(settings.database_url, **options)


def leave_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the shared engine, built on first use.

    Objects stay loaded after commit so responses can be built from them.
    """
    global _engine, _sessionmaker
    if _sessionmaker is None:
        _engine = _build_engine()
        _sessionmaker = async_sessionmaker(_engine, expire_on_commit=False)
    return _sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield one session per request. Work left uncommitted is rolled back."""
    async with leave_sessionmaker()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def dispose_engine() -> None:
    """Close pooled connections; the next session builds a fresh engine."""
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None
