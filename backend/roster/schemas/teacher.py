"""
Roster API: Teacher Schemas
=============================

Same shapes as the student schemas; name and department are both required
on create and may not be nulled by an update.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field, field_validator

from roster.schemas.common import APIModel, ListMeta
from roster.schemas.course import CourseRead


class TeacherCreate(APIModel):
    name: str = Field(min_length=1, max_length=255)
    department: str = Field(min_length=1, max_length=255)


class TeacherUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    department: Optional[str] = Field(default=None, min_length=1, max_length=255)

    @field_validator("name", "department")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class TeacherRead(APIModel):
    id: int
    name: str
    department: str
    created_at: datetime
    updated_at: datetime


class TeacherDetail(TeacherRead):
    courses: List[CourseRead] = Field(alias="Course")


class TeacherListResponse(APIModel):
    meta: ListMeta
    data: List[Union[TeacherDetail, TeacherRead]]
