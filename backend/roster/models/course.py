"""
Roster API: Course Model
==========================

What:  The `courses` table and the `student_courses` enrollment table.
Why:   Course is never managed through its own endpoints; it exists as the
       join target behind `populate=Course` and the get-by-id responses.

Relationships:
    Teacher 1 ──< Course      (courses.teacher_id, SET NULL on teacher delete)
    Student >──< Course       (student_courses, rows removed with either side)
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.database import Base
from roster.models.timestamps import TimestampMixin

if TYPE_CHECKING:
    from roster.models.student import Student
    from roster.models.teacher import Teacher


student_courses = Table(
    "student_courses",
    Base.metadata,
    Column(
        "student_id",
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "course_id",
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Course(TimestampMixin, Base):
    """A course; taught by at most one teacher, attended by many students."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Short catalogue code, e.g. "MATH-101"
    code: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    teacher_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("teachers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    teacher: Mapped[Optional["Teacher"]] = relationship(back_populates="courses")
    students: Mapped[List["Student"]] = relationship(
        secondary=student_courses,
        back_populates="courses",
    )

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, name='{self.name}')>"
