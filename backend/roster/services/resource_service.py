"""
Roster API: Resource Service (Generic CRUD)
=============================================

What:  One implementation of create / list / get / update / delete shared by
       every resource (students, teachers).
How:   Parameterized by the ORM model, its `courses` relationship and the
       response schemas. Each public method performs one logical unit of work
       against the session and returns a schema object.
Who:   Called by the routes built in roster.routes.resource.

Error Handling Strategy:
    - A missing row becomes NotFoundError (404, fixed "Not found" message).
    - Any SQLAlchemyError becomes PersistenceError carrying the driver's
      message (500). The session is rolled back by get_db_session.
    - Nothing is retried.

Query shapes:
    list:   SELECT count(*) FROM <table>
            SELECT * FROM <table> ORDER BY <col> <dir>, id LIMIT :limit OFFSET :offset
            (+ SELECT ... FROM courses ... IN (...) when populate=Course)
    get:    SELECT * FROM <table> WHERE id = :id  (+ courses, always)
"""

import logging
from typing import Any, Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.attributes import InstrumentedAttribute

from roster.database import Base
from roster.exceptions import NotFoundError, PersistenceError
from roster.schemas.common import (
    ListMeta,
    ListQuery,
    MessageResponse,
    SortField,
    SortOrder,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _driver_message(exc: SQLAlchemyError) -> str:
    """The DBAPI error text when there is one, without SQLAlchemy's SQL dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class ResourceService(Generic[ModelT]):
    """
    CRUD operations for one mapped entity.

    Args:
        model:          ORM class (Student, Teacher)
        courses:        the model's relationship to Course, eager-loaded on demand
        resource:       name used in logs and NotFoundError context
        read_schema:    plain record response
        detail_schema:  record + "Course" array
        list_schema:    {meta, data} envelope
    """

    def __init__(
        self,
        model: Type[ModelT],
        courses: InstrumentedAttribute,
        resource: str,
        read_schema: Type[BaseModel],
        detail_schema: Type[BaseModel],
        list_schema: Type[BaseModel],
    ):
        self.model = model
        self.courses = courses
        self.resource = resource
        self.read_schema = read_schema
        self.detail_schema = detail_schema
        self.list_schema = list_schema

    def _persistence_error(self, operation: str, exc: SQLAlchemyError) -> PersistenceError:
        message = _driver_message(exc)
        logger.error(
            "Database error during %s on %s: %s", operation, self.resource, message,
            exc_info=True,
        )
        return PersistenceError(
            message=message,
            context={"resource": self.resource, "operation": operation},
        )

    async def _fetch(self, db: AsyncSession, record_id: int) -> ModelT:
        """findByPk without joins; NotFoundError when absent."""
        try:
            record = await db.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise self._persistence_error("lookup", e)
        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        return record

    # ── Create ────────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, payload: BaseModel) -> BaseModel:
        """
        Insert a new record from a validated create schema.

        flush() assigns the generated id inside the request's transaction;
        the commit happens in get_db_session.
        """
        record = self.model(**payload.model_dump())
        try:
            db.add(record)
            await db.flush()
            await db.refresh(record)
        except SQLAlchemyError as e:
            raise self._persistence_error("create", e)

        logger.info("%s %s created", self.resource, record.id)
        return self.read_schema.model_validate(record)

    # ── List ──────────────────────────────────────────────────────────────

    async def list(self, db: AsyncSession, query: ListQuery) -> BaseModel:
        """
        One page of records with pagination metadata.

        totalItems counts this resource's table. The sort column comes from
        the SortField whitelist, with id as tie-breaker so pages never overlap.
        """
        column = getattr(self.model, query.sort_by.attribute)
        ordering: List[Any] = [column.desc() if query.order == SortOrder.DESC else column.asc()]
        if query.sort_by is not SortField.ID:
            ordering.append(self.model.id.asc())

        stmt = (
            select(self.model)
            .order_by(*ordering)
            .limit(query.limit)
            .offset(query.offset)
        )
        if query.populate_courses:
            stmt = stmt.options(selectinload(self.courses))

        try:
            total = await db.scalar(select(func.count()).select_from(self.model)) or 0
            result = await db.execute(stmt)
            records: Sequence[ModelT] = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._persistence_error("list", e)

        schema = self.detail_schema if query.populate_courses else self.read_schema
        return self.list_schema(
            meta=ListMeta.build(total, query),
            data=[schema.model_validate(record) for record in records],
        )

    # ── Get ───────────────────────────────────────────────────────────────

    async def get(self, db: AsyncSession, record_id: int) -> BaseModel:
        """Single record, always with its courses."""
        stmt = (
            select(self.model)
            .options(selectinload(self.courses))
            .where(self.model.id == record_id)
        )
        try:
            result = await db.execute(stmt)
            record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._persistence_error("get", e)

        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)
        return self.detail_schema.model_validate(record)

    # ── Update ────────────────────────────────────────────────────────────

    async def update(self, db: AsyncSession, record_id: int, patch: BaseModel) -> BaseModel:
        """
        Apply a partial patch: only fields present in the request body change.

        exclude_unset distinguishes "field omitted" from "field sent as null".
        """
        record = await self._fetch(db, record_id)
        changes = patch.model_dump(exclude_unset=True)

        try:
            for field, value in changes.items():
                setattr(record, field, value)
            await db.flush()
            await db.refresh(record)
        except SQLAlchemyError as e:
            raise self._persistence_error("update", e)

        logger.info("%s %s updated: %s", self.resource, record_id, sorted(changes))
        return self.read_schema.model_validate(record)

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete(self, db: AsyncSession, record_id: int) -> MessageResponse:
        """Permanent removal; association handling is owned by the model mapping."""
        record = await self._fetch(db, record_id)
        try:
            await db.delete(record)
            await db.flush()
        except SQLAlchemyError as e:
            raise self._persistence_error("delete", e)

        logger.info("%s %s deleted", self.resource, record_id)
        return MessageResponse(message="Deleted")
