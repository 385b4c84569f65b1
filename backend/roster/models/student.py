"""
Roster API: Student Model
===========================

What:  ORM mapping for the `students` table.

Lifecycle:
    1. Created by POST /students
    2. Patched by PUT /students/{id} (only supplied fields change)
    3. Removed by DELETE /students/{id}; enrollment rows go with it
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.database import Base
from roster.models.timestamps import TimestampMixin

if TYPE_CHECKING:
    from roster.models.course import Course


class Student(TimestampMixin, Base):
    """A student and the courses they are enrolled in."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Never lazy-loaded: the service asks for selectinload when it needs them
    courses: Mapped[List["Course"]] = relationship(
        secondary="student_courses",
        back_populates="students",
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name='{self.name}')>"
