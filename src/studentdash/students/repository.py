"""StudentRepository - CRUD over the persisted student collection."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from studentdash.logging import mask_email
from studentdash.students.exceptions import StudentNotFoundError
from studentdash.students.models import Student, StudentInput, utc_now

if TYPE_CHECKING:
    from studentdash.state_store import PersistedStore

logger = logging.getLogger(__name__)

STUDENTS_KEY = "students"

_students_adapter = TypeAdapter(list[Student])


def generate_id(taken: set[str]) -> str:
    """Generate a student id not present in ``taken``."""
    while True:
        candidate = str(uuid.uuid4())
        if candidate not in taken:
            return candidate


class StudentRepository:
    """Student CRUD built on whole-collection replace.

    Every mutation reads the current collection, computes the next one and
    writes it back under a single key. There is no locking: with several
    writers sharing a database file, the last write wins.
    """

    def __init__(
        self,
        store: PersistedStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Store owning the durable collection.
            clock: Source of "now" for enrollment and activity timestamps.
        """
        self._store = store
        self._clock = clock

    def list_students(self) -> list[Student]:
        """Return the whole collection in stored order.

        A missing or malformed stored collection reads as empty.
        """
        return self._store.read(STUDENTS_KEY, [], parse=_students_adapter.validate_python)

    def get_student(self, student_id: str) -> Student:
        """Get a student by ID.

        Raises:
            StudentNotFoundError: If no student has this ID.
        """
        return _find(self.list_students(), student_id)

    def create_student(self, data: StudentInput) -> Student:
        """Append a new student with a fresh ID.

        Args:
            data: Editable fields of the new record.

        Returns:
            The created student, with enrollment and last-active set to now.
        """
        students = self.list_students()
        now = self._clock()
        student = Student(
            id=generate_id({s.id for s in students}),
            enrollment_date=now,
            last_active=now,
            **data.model_dump(),
        )
        self._save([*students, student])
        logger.info("Created student %s (%s)", student.id, mask_email(student.email))
        return student

    def update_student(self, student_id: str, data: StudentInput) -> Student:
        """Replace the editable fields of a student.

        The ID and enrollment date are carried forward unchanged; last-active
        is refreshed and never moves backwards.

        Raises:
            StudentNotFoundError: If no student has this ID.
        """
        students = self.list_students()
        current = _find(students, student_id)
        updated = Student(
            id=current.id,
            enrollment_date=current.enrollment_date,
            last_active=max(self._clock(), current.last_active),
            **data.model_dump(),
        )
        self._save([updated if s.id == student_id else s for s in students])
        logger.info("Updated student %s", student_id)
        return updated

    def delete_student(self, student_id: str) -> Student:
        """Remove a student.

        Returns:
            The removed record.

        Raises:
            StudentNotFoundError: If no student has this ID.
        """
        students = self.list_students()
        removed = _find(students, student_id)
        self._save([s for s in students if s.id != student_id])
        logger.info("Deleted student %s", student_id)
        return removed

    def _save(self, students: list[Student]) -> None:
        self._store.write(
            STUDENTS_KEY,
            [s.model_dump(mode="json", by_alias=True) for s in students],
        )


def _find(students: list[Student], student_id: str) -> Student:
    for student in students:
        if student.id == student_id:
            return student
    raise StudentNotFoundError(f"Student with id '{student_id}' not found")
