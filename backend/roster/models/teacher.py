"""
Roster API: Teacher Model
===========================

What:  ORM mapping for the `teachers` table. Name and department are both
       required at the schema and the column level.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.database import Base
from roster.models.timestamps import TimestampMixin

if TYPE_CHECKING:
    from roster.models.course import Course


class Teacher(TimestampMixin, Base):
    """A teacher and the courses they teach."""

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    department: Mapped[str] = mapped_column(String(255), nullable=False)

    # Deleting a teacher orphans its courses (teacher_id → NULL), never deletes them
    courses: Mapped[List["Course"]] = relationship(back_populates="teacher")

    def __repr__(self) -> str:
        return f"<Teacher(id={self.id}, name='{self.name}', department='{self.department}')>"
