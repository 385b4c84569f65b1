"""
Roster API: Shared Schemas
============================

What:  Base model, list envelope, query parsing and error/health shapes used
       by every resource.
How:   Query parameters arrive as raw strings and are read leniently by
       ListQuery.from_params(): anything unparseable falls back to its default
       instead of failing the request.
"""

import math
import re
from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for every schema: camelCase on the wire, ORM objects accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# List Query Parameters
# ══════════════════════════════════════════════════════════════════════════


class SortField(str, Enum):
    """
    Columns a list may be ordered by.

    The value is the API name (sortBy=createdAt); `attribute` is the mapped
    attribute on the model. Only members of this enum ever reach ORDER BY.
    """

    ID = "id"
    NAME = "name"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @property
    def attribute(self) -> str:
        return {
            SortField.ID: "id",
            SortField.NAME: "name",
            SortField.CREATED_AT: "created_at",
            SortField.UPDATED_AT: "updated_at",
        }[self]


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


COURSE_RELATION = "Course"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Upper bound for page, limit and path ids: a 32-bit INTEGER column
MAX_INT = 2**31 - 1


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Reads a leading integer from a query value ("3", " 3", "3abc" → 3).

    Missing, non-numeric, zero, negative and out-of-range (> MAX_INT) values
    all yield `default`.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    # Too many digits to be in range; also keeps int() away from huge strings
    if len(match.group(1).lstrip("+-").lstrip("0")) > len(str(MAX_INT)):
        return default
    value = int(match.group(1))
    return value if 0 < value <= MAX_INT else default


def parse_populate(raw: Optional[str]) -> FrozenSet[str]:
    """Splits `populate=Course,Other` into a set of relation names."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


class ListQuery(BaseModel):
    """
    Normalized list parameters: page, limit, sort column/direction, joins.

    Defaults: page 1, limit from settings (10), sortBy id, order ASC.
    """

    page: int = Field(default=1, ge=1, le=MAX_INT)
    limit: int = Field(default=10, ge=1, le=MAX_INT)
    sort_by: SortField = SortField.ID
    order: SortOrder = SortOrder.ASC
    populate: FrozenSet[str] = frozenset()

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def populate_courses(self) -> bool:
        return COURSE_RELATION in self.populate

    @classmethod
    def from_params(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        populate: Optional[str] = None,
        default_limit: int = 10,
    ) -> "ListQuery":
        try:
            sort_field = SortField(sort_by) if sort_by else SortField.ID
        except ValueError:
            sort_field = SortField.ID
        try:
            sort_order = SortOrder(order.upper()) if order else SortOrder.ASC
        except ValueError:
            sort_order = SortOrder.ASC
        return cls(
            page=parse_positive_int(page, 1),
            limit=parse_positive_int(limit, default_limit),
            sort_by=sort_field,
            order=sort_order,
            populate=parse_populate(populate),
        )


# ══════════════════════════════════════════════════════════════════════════
# Response Envelopes
# ══════════════════════════════════════════════════════════════════════════


class ListMeta(APIModel):
    """Pagination block of a list response: totalItems, page, totalPages."""

    total_items: int
    page: int
    total_pages: int

    @classmethod
    def build(cls, total_items: int, query: ListQuery) -> "ListMeta":
        return cls(
            total_items=total_items,
            page=query.page,
            total_pages=math.ceil(total_items / query.limit),
        )


class MessageResponse(APIModel):
    message: str


class ErrorResponse(APIModel):
    """Body of every 500 response: the underlying failure message."""

    error: str


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
