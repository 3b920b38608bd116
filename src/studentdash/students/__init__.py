"""Students - The persisted student collection and its CRUD contract."""

from studentdash.students.exceptions import StudentError, StudentNotFoundError
from studentdash.students.models import Student, StudentInput, StudentStatus, utc_now
from studentdash.students.repository import STUDENTS_KEY, StudentRepository

__all__ = [
    "STUDENTS_KEY",
    "Student",
    "StudentError",
    "StudentInput",
    "StudentNotFoundError",
    "StudentRepository",
    "StudentStatus",
    "utc_now",
]
