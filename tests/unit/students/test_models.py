"""Unit tests for student models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from studentdash.students import Student, StudentInput, StudentStatus


class TestStudentStatusEnum:
    """Tests for StudentStatus enum."""

    def test_status_values(self) -> None:
        assert StudentStatus.ACTIVE.value == "active"
        assert StudentStatus.INACTIVE.value == "inactive"
        assert len(StudentStatus) == 2


class TestStudentModel:
    """Tests for Student."""

    def test_defaults(self) -> None:
        data = StudentInput(name="Ada", email="ada@example.com")

        assert data.profile_image == ""
        assert data.course_ids == []
        assert data.status == StudentStatus.ACTIVE

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StudentInput(name="Ada", email="ada@example.com", status="graduated")

    def test_naive_timestamps_become_utc(self) -> None:
        student = Student(
            id="s1",
            name="Ada",
            email="ada@example.com",
            enrollment_date=datetime(2024, 1, 1, 12, 0),
            last_active=datetime(2024, 1, 2, 12, 0),
        )

        assert student.enrollment_date.tzinfo is UTC

    def test_parses_dashboard_timestamps(self) -> None:
        """ISO strings with a Z suffix, as browsers write them, are accepted."""
        student = Student.model_validate(
            {
                "id": "s1",
                "name": "Ada",
                "email": "ada@example.com",
                "profileImage": "",
                "courseIds": ["1"],
                "status": "inactive",
                "enrollmentDate": "2024-01-01T10:00:00.000Z",
                "lastActive": "2024-02-01T10:00:00.000Z",
            }
        )

        assert student.status == StudentStatus.INACTIVE
        assert student.enrollment_date == datetime(2024, 1, 1, 10, 0, tzinfo=UTC)

    def test_student_is_immutable(self) -> None:
        student = Student(
            id="s1",
            name="Ada",
            email="ada@example.com",
            enrollment_date=datetime(2024, 1, 1, tzinfo=UTC),
            last_active=datetime(2024, 1, 1, tzinfo=UTC),
        )

        with pytest.raises(ValidationError):
            student.id = "s2"  # type: ignore[misc]
