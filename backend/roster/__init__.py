"""
Roster API: Application Package
=================================

What:  Student and Teacher record management over a small REST surface.
Who:   Imported by uvicorn (`roster.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (generic CRUD logic)   │  ← Query building, error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Students and teachers share one ResourceService and one router factory;
    each resource module only declares its model, schemas and prefix.
"""

__version__ = "1.0.0"
