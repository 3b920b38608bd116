"""Pydantic models for student records."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class StudentStatus(StrEnum):
    """Enrollment status of a student."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class StudentInput(BaseModel):
    """Editable student fields, as submitted by the form.

    Serialized with camelCase keys (``profileImage``, ``courseIds``); both
    spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    profile_image: str = ""
    course_ids: list[str] = Field(default_factory=list)
    status: StudentStatus = StudentStatus.ACTIVE

    @field_validator("course_ids")
    @classmethod
    def _drop_duplicate_courses(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


class Student(StudentInput):
    """A persisted student record.

    ``id`` and ``enrollment_date`` never change once assigned; ``last_active``
    moves forward on every edit.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    enrollment_date: datetime
    last_active: datetime

    @field_validator("enrollment_date", "last_active")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_input(self) -> StudentInput:
        """Editable fields of this record, e.g. to pre-fill an edit form."""
        return StudentInput(
            name=self.name,
            email=self.email,
            profile_image=self.profile_image,
            course_ids=list(self.course_ids),
            status=self.status,
        )


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)
