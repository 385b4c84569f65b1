"""
Roster API: Student Schemas
=============================

What:  Request bodies for POST/PUT /students and the response shapes.
Why:   Validation lives here rather than in the ORM: a missing name is a 422
       before any SQL runs.

Response variants:
    StudentRead     plain record (create, update, list without populate)
    StudentDetail   record + "Course" array (get-by-id, list with populate=Course)
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field, field_validator

from roster.schemas.common import APIModel, ListMeta
from roster.schemas.course import CourseRead


class StudentCreate(APIModel):
    name: str = Field(min_length=1, max_length=255, description="Full name")
    email: Optional[str] = Field(default=None, max_length=255)


class StudentUpdate(APIModel):
    """Partial patch: only fields present in the body are applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("name cannot be null")
        return v


class StudentRead(APIModel):
    id: int
    name: str
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class StudentDetail(StudentRead):
    # Required so a record without joined courses never validates as a detail
    courses: List[CourseRead] = Field(alias="Course")


class StudentListResponse(APIModel):
    meta: ListMeta
    data: List[Union[StudentDetail, StudentRead]]
