"""Teacher endpoints under /teachers."""

from roster.routes.resource import build_resource_router
from roster.schemas.teacher import (
    TeacherCreate,
    TeacherDetail,
    TeacherListResponse,
    TeacherRead,
    TeacherUpdate,
)
from roster.services.teacher_service import teacher_service

router = build_resource_router(
    prefix="/teachers",
    tag="Teachers",
    service=teacher_service,
    create_schema=TeacherCreate,
    update_schema=TeacherUpdate,
    read_schema=TeacherRead,
    detail_schema=TeacherDetail,
    list_schema=TeacherListResponse,
)
