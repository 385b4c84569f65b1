"""Course as embedded in student/teacher responses under the `Course` key."""

from datetime import datetime
from typing import Optional

from roster.schemas.common import APIModel


class CourseRead(APIModel):
    id: int
    name: str
    code: Optional[str] = None
    teacher_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
