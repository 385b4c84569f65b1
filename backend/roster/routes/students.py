"""Student endpoints under /students."""

from roster.routes.resource import build_resource_router
from roster.schemas.student import (
    StudentCreate,
    StudentDetail,
    StudentListResponse,
    StudentRead,
    StudentUpdate,
)
from roster.services.student_service import student_service

router = build_resource_router(
    prefix="/students",
    tag="Students",
    service=student_service,
    create_schema=StudentCreate,
    update_schema=StudentUpdate,
    read_schema=StudentRead,
    detail_schema=StudentDetail,
    list_schema=StudentListResponse,
)
