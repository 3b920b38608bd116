"""DashboardSession - The state container behind every dashboard action."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from studentdash.catalog import CourseCatalog, CourseCatalogClient
from studentdash.dashboard import (
    ActivityItem,
    DashboardStats,
    StatusDistribution,
    compute_stats,
    recent_activity,
    status_distribution,
)
from studentdash.notifications import Severity, ToastNotifier
from studentdash.state_store import PersistedStore
from studentdash.students import STUDENTS_KEY, Student, StudentRepository, utc_now
from studentdash.validation import validate_student
from studentdash.view import (
    FilterSpec,
    SortDirection,
    SortField,
    SortSpec,
    ViewPage,
    clamp_page,
    filter_students,
    paginate,
    sort_students,
    toggle_sort,
    total_pages,
)

if TYPE_CHECKING:
    from studentdash.catalog import Course
    from studentdash.config import Settings
    from studentdash.students import StudentInput

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"
THEME_TOAST_DURATION_MS = 2000

_students_adapter = TypeAdapter(list[Student])


def _parse_flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {type(value).__name__}")
    return value


@dataclass
class SaveResult:
    """Outcome of submitting the student form.

    Attributes:
        student: The created or updated record, None when validation failed.
        errors: Field name to message for every failing field.
    """

    student: Student | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class DashboardSession:
    """Owns the persisted collection, the catalog state, the toasts and the
    table settings, and exposes one method per user action.

    Create one per process (or per test) and pass it to whatever presents
    it; nothing here is module-global.
    """

    def __init__(
        self,
        store: PersistedStore,
        catalog_client: CourseCatalogClient,
        notifier: ToastNotifier | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the session.

        Args:
            store: Durable storage for students and preferences.
            catalog_client: Source of the course catalog.
            notifier: Toast queue. A fresh one is created if omitted.
            clock: Source of "now" for student timestamps.
        """
        self.store = store
        self.students = StudentRepository(store, clock)
        self.catalog = CourseCatalog(catalog_client)
        self.notifier = notifier if notifier is not None else ToastNotifier()
        self.filters = FilterSpec()
        self.sort = SortSpec()
        self.page = 1
        self._subscription = store.subscribe(STUDENTS_KEY, self._on_students_changed)

    @classmethod
    def from_settings(cls, settings: Settings) -> DashboardSession:
        """Build a session from runtime settings."""
        store = PersistedStore(settings.db_path)
        client = CourseCatalogClient(
            delay=settings.catalog_delay,
            failure_rate=settings.catalog_failure_rate,
        )
        logger.info("Session opened (db=%s)", settings.db_path)
        return cls(store, client)

    def close(self) -> None:
        """Dismiss pending toasts and release the database."""
        self.store.unsubscribe(self._subscription.id)
        self.notifier.clear()
        self.store.close()

    # --- Students ---

    def list_students(self) -> list[Student]:
        return self.students.list_students()

    def get_student(self, student_id: str) -> Student:
        return self.students.get_student(student_id)

    def save_student(self, data: StudentInput, student_id: str | None = None) -> SaveResult:
        """Validate and submit the student form.

        Args:
            data: Submitted fields.
            student_id: ID of the edited student, None to create one.

        Returns:
            SaveResult carrying either the saved student or the field errors.

        Raises:
            StudentNotFoundError: If ``student_id`` does not exist.
        """
        errors = validate_student(data)
        if errors:
            return SaveResult(errors=errors)

        if student_id is None:
            student = self.students.create_student(data)
            verb = "added"
        else:
            student = self.students.update_student(student_id, data)
            verb = "updated"
        self.notifier.add(f"{student.name} has been {verb}", Severity.SUCCESS)
        return SaveResult(student=student)

    def delete_student(self, student_id: str, confirm: Callable[[Student], bool]) -> bool:
        """Delete a student once the user confirms.

        Args:
            student_id: ID of the student to delete.
            confirm: Asked with the student; the delete only happens if it
                     returns True.

        Returns:
            True if the student was deleted, False if the user declined.

        Raises:
            StudentNotFoundError: If ``student_id`` does not exist.
        """
        student = self.students.get_student(student_id)
        if not confirm(student):
            logger.info("Deletion of student %s cancelled", student_id)
            return False
        self.students.delete_student(student_id)
        self.notifier.add(f"{student.name} has been deleted", Severity.SUCCESS)
        return True

    # --- Table view ---

    def set_filter(self, filters: FilterSpec) -> None:
        """Replace the filter settings and go back to the first page."""
        self.filters = filters
        self.page = 1

    def set_sort(self, sort_field: SortField, direction: SortDirection | None = None) -> SortSpec:
        """Change the sort order.

        Without a direction this behaves like clicking a column header: the
        active column flips, another column starts ascending.
        """
        if direction is None:
            self.sort = toggle_sort(self.sort, sort_field)
        else:
            self.sort = SortSpec(field=sort_field, direction=direction)
        return self.sort

    def set_page(self, page: int) -> int:
        """Move to a page, clamped to the pages that exist. Returns the page used."""
        count = len(self._filtered(self.list_students()))
        self.page = clamp_page(page, total_pages(count))
        return self.page

    def view(self) -> ViewPage:
        """The page of the student table for the current settings."""
        filtered = self._filtered(self.list_students())
        self.page = clamp_page(self.page, total_pages(len(filtered)))
        return paginate(sort_students(filtered, self.sort), self.page)

    # --- Catalog ---

    @property
    def courses(self) -> list[Course]:
        return self.catalog.courses

    async def load_courses(self) -> list[Course]:
        """Fetch the catalog; a failure is kept in ``catalog.error``."""
        return await self.catalog.load()

    async def retry_catalog_fetch(self) -> list[Course]:
        return await self.catalog.retry()

    # --- Preferences ---

    @property
    def dark_mode(self) -> bool:
        return self.store.read(DARK_MODE_KEY, False, parse=_parse_flag)

    def toggle_dark_mode(self) -> bool:
        """Flip the theme preference. Returns the new value."""
        enabled = not self.dark_mode
        self.store.write(DARK_MODE_KEY, enabled)
        theme = "dark" if enabled else "light"
        self.notifier.add(f"Switched to {theme} mode", Severity.INFO, THEME_TOAST_DURATION_MS)
        return enabled

    # --- Dashboard ---

    def stats(self, now: datetime | None = None) -> DashboardStats:
        return compute_stats(self.list_students(), self.courses, now)

    def status_distribution(self) -> StatusDistribution:
        return status_distribution(self.list_students())

    def recent_activity(self) -> list[ActivityItem]:
        return recent_activity(self.list_students())

    # --- Internals ---

    def _filtered(self, students: list[Student]) -> list[Student]:
        return filter_students(students, self.filters, self.courses)

    def _on_students_changed(self, value: Any) -> None:
        # Keep the current page valid after the collection shrinks
        students = _students_adapter.validate_python(value)
        self.page = clamp_page(self.page, total_pages(len(self._filtered(students))))
