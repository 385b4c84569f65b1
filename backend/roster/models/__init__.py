"""
ORM models. Importing this package registers every mapped class with
Base.metadata, which relationship() string lookups and Alembic rely on.
"""

from roster.models.course import Course, student_courses
from roster.models.student import Student
from roster.models.teacher import Teacher

__all__ = ["Course", "Student", "Teacher", "student_courses"]
