"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest

from studentdash.catalog import CourseCatalogClient
from studentdash.notifications import ToastNotifier
from studentdash.session import DashboardSession
from studentdash.state_store import PersistedStore
from studentdash.students import Student, StudentInput, StudentStatus


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class FakeClock:
    """Manually advanced clock returning aware UTC datetimes."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeMonotonic:
    """Manually advanced monotonic clock in seconds."""

    def __init__(self) -> None:
        self.value = 1000.0

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> Iterator[PersistedStore]:
    """Create an in-memory PersistedStore."""
    s = PersistedStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def catalog_client() -> CourseCatalogClient:
    """Catalog client that answers immediately and never fails."""
    return CourseCatalogClient(delay=0, failure_rate=0.0)


@pytest.fixture
def session(
    store: PersistedStore, catalog_client: CourseCatalogClient, clock: FakeClock
) -> Iterator[DashboardSession]:
    """Session over an in-memory store with a deterministic clock."""
    s = DashboardSession(store, catalog_client, ToastNotifier(clock=FakeMonotonic()), clock)
    yield s
    s.notifier.clear()


def make_input(
    name: str = "Ada Lovelace",
    email: str = "ada@example.com",
    course_ids: list[str] | None = None,
    status: StudentStatus = StudentStatus.ACTIVE,
    profile_image: str = "",
) -> StudentInput:
    return StudentInput(
        name=name,
        email=email,
        course_ids=["1"] if course_ids is None else course_ids,
        status=status,
        profile_image=profile_image,
    )


def make_student(
    student_id: str,
    name: str = "Student",
    email: str | None = None,
    course_ids: list[str] | None = None,
    status: StudentStatus = StudentStatus.ACTIVE,
    enrolled: datetime | None = None,
) -> Student:
    enrolled = enrolled or datetime(2024, 1, 1, tzinfo=UTC)
    return Student(
        id=student_id,
        name=name,
        email=email or f"{student_id}@example.com",
        course_ids=["1"] if course_ids is None else course_ids,
        status=status,
        enrollment_date=enrolled,
        last_active=enrolled,
    )


@pytest.fixture
def input_factory() -> Callable[..., StudentInput]:
    return make_input


@pytest.fixture
def student_factory() -> Callable[..., Student]:
    return make_student
