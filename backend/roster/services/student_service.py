"""Student CRUD: the generic ResourceService bound to the Student model."""

from roster.models import Student
from roster.schemas.student import StudentDetail, StudentListResponse, StudentRead
from roster.services.resource_service import ResourceService

student_service: ResourceService[Student] = ResourceService(
    model=Student,
    courses=Student.courses,
    resource="student",
    read_schema=StudentRead,
    detail_schema=StudentDetail,
    list_schema=StudentListResponse,
)
