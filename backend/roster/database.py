"""
Roster API: Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   One engine per process; every request gets its own AsyncSession which
       commits when the handler returns and rolls back when it raises.
Who:   Route handlers receive sessions through FastAPI's Depends().

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings and apply to
    server databases only. SQLite URLs (used in development and tests) fall
    back to SQLAlchemy's own pool choice for the driver.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from roster.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# expire_on_commit=False: response schemas read attributes after the
# dependency has committed
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the application and Alembic.
    """
    pass


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the exception handlers
        5. Always: closes the session (returns connection to pool)

    Services flush inside the handler, so constraint violations surface
    before the commit and reach the client as a 500.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Closes all pooled connections during application shutdown."""
    await engine.dispose()
