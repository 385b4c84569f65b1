"""
Roster API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the test suite.
How:   Environment overrides are applied before any roster import so the
       settings singleton never points at a real database.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine: in-memory SQLite engine with all tables created
    ├── session_factory: sessions bound to db_engine (for seeding)
    ├── roster_app: fresh app whose get_db_session uses db_engine
    └── test_client: HTTPX AsyncClient against roster_app
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Sequence  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from roster.database import Base, get_db_session  # noqa: E402
from roster.models import Course, Student, Teacher  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession; no database needed.

    Usage:
        mock_db_session.get.return_value = None
        with pytest.raises(NotFoundError):
            await service.update(mock_db_session, 1, patch)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.scalar = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    A private in-memory database per test.

    StaticPool keeps the single SQLite connection alive, so every session
    in the test sees the same tables and rows.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def roster_app(session_factory):
    """
    A fresh app whose get_db_session is bound to the test engine.

    The request session mirrors get_db_session (commit on success,
    rollback on error).
    """
    from roster.main import create_app

    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    return app


@pytest_asyncio.fixture
async def test_client(roster_app):
    """HTTPX AsyncClient wired to roster_app through ASGITransport."""
    transport = ASGITransport(app=roster_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Seeding fixtures (rows the API cannot create, e.g. courses)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def seed_student(session_factory):
    """Returns `await seed_student(name, course_names)` → new student id."""

    async def _seed(name: str, course_names: Sequence[str] = ()) -> int:
        async with session_factory() as session:
            student = Student(name=name, courses=[Course(name=c) for c in course_names])
            session.add(student)
            await session.commit()
            return student.id

    return _seed


@pytest.fixture
def seed_teacher(session_factory):
    """Returns `await seed_teacher(name, department, course_names)` → new teacher id."""

    async def _seed(name: str, department: str, course_names: Sequence[str] = ()) -> int:
        async with session_factory() as session:
            teacher = Teacher(
                name=name,
                department=department,
                courses=[Course(name=c) for c in course_names],
            )
            session.add(teacher)
            await session.commit()
            return teacher.id

    return _seed
