"""Teacher CRUD: the generic ResourceService bound to the Teacher model."""

from roster.models import Teacher
from roster.schemas.teacher import TeacherDetail, TeacherListResponse, TeacherRead
from roster.services.resource_service import ResourceService

teacher_service: ResourceService[Teacher] = ResourceService(
    model=Teacher,
    courses=Teacher.courses,
    resource="teacher",
    read_schema=TeacherRead,
    detail_schema=TeacherDetail,
    list_schema=TeacherListResponse,
)
