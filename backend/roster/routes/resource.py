"""
Roster API: Resource Router Factory
=====================================

What:  Builds the five CRUD endpoints for one resource.
How:   build_resource_router() closes over a ResourceService and the
       resource's schemas; FastAPI reads the concrete schema classes from the
       endpoint signatures for validation and OpenAPI docs.

    POST   {prefix}          create   → 201 record
    GET    {prefix}          list     → 200 {meta, data}
    GET    {prefix}/{id}     get      → 200 record + Course / 404
    PUT    {prefix}/{id}     update   → 200 record / 404
    DELETE {prefix}/{id}     delete   → 200 {message} / 404

Path ids must fit the INTEGER id column (<= MAX_INT); larger ids are a 422.
"""

from typing import Optional, Type

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from roster.config import settings
from roster.database import get_db_session
from roster.schemas.common import MAX_INT, ErrorResponse, ListQuery, MessageResponse
from roster.services.resource_service import ResourceService

SERVER_ERROR = {500: {"description": "Database error", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "Not found", "model": MessageResponse}}


def build_resource_router(
    *,
    prefix: str,
    tag: str,
    service: ResourceService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    detail_schema: Type[BaseModel],
    list_schema: Type[BaseModel],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    name = service.resource

    @router.post(
        "",
        status_code=201,
        response_model=read_schema,
        responses=SERVER_ERROR,
        summary=f"Create a {name}",
    )
    async def create_record(
        payload: create_schema,
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.create(db, payload)

    @router.get(
        "",
        response_model=list_schema,
        responses=SERVER_ERROR,
        summary=f"List {name}s with pagination",
        description=(
            "Paginated, sorted list. Unparseable page/limit values fall back to "
            "their defaults; populate=Course embeds each record's courses."
        ),
    )
    async def list_records(
        page: Optional[str] = Query(default=None, description="Page number (default 1)"),
        limit: Optional[str] = Query(
            default=None,
            description=f"Items per page (default {settings.default_page_limit})",
        ),
        sort_by: Optional[str] = Query(
            default=None,
            alias="sortBy",
            description="Sort column: id, name, createdAt, updatedAt (default id)",
        ),
        order: Optional[str] = Query(default=None, description="ASC or DESC (default ASC)"),
        populate: Optional[str] = Query(
            default=None,
            description="Comma-separated relations to join (Course)",
        ),
        db: AsyncSession = Depends(get_db_session),
    ):
        query = ListQuery.from_params(
            page=page,
            limit=limit,
            sort_by=sort_by,
            order=order,
            populate=populate,
            default_limit=settings.default_page_limit,
        )
        return await service.list(db, query)

    @router.get(
        "/{record_id}",
        response_model=detail_schema,
        responses={**NOT_FOUND, **SERVER_ERROR},
        summary=f"Get a {name} by ID, with courses",
    )
    async def get_record(
        record_id: int = Path(..., le=MAX_INT),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.get(db, record_id)

    @router.put(
        "/{record_id}",
        response_model=read_schema,
        responses={**NOT_FOUND, **SERVER_ERROR},
        summary=f"Update a {name}",
    )
    async def update_record(
        patch: update_schema,
        record_id: int = Path(..., le=MAX_INT),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.update(db, record_id, patch)

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        responses={**NOT_FOUND, **SERVER_ERROR},
        summary=f"Delete a {name}",
    )
    async def delete_record(
        record_id: int = Path(..., le=MAX_INT),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.delete(db, record_id)

    return router
