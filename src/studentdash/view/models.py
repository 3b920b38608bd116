"""Models describing what the student table shows."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from studentdash.students.models import Student  # noqa: TC001 - used at runtime by pydantic

PAGE_SIZE = 10


class StatusFilter(StrEnum):
    """Status selector of the filter bar."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class SortField(StrEnum):
    """Student fields the table can be sorted by."""

    NAME = "name"
    EMAIL = "email"
    STATUS = "status"
    ENROLLMENT_DATE = "enrollment_date"
    LAST_ACTIVE = "last_active"


class SortDirection(StrEnum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class FilterSpec(BaseModel):
    """Which students are visible. The defaults show everyone."""

    status: StatusFilter = StatusFilter.ALL
    course: str = ""
    search: str = ""


class SortSpec(BaseModel):
    """Sort order of the table."""

    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC


class ViewPage(BaseModel):
    """One page of the filtered, sorted collection plus pagination metadata."""

    items: list[Student]
    page: int
    page_size: int = PAGE_SIZE
    total_count: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def first_index(self) -> int:
        """1-based position of the first item on this page, 0 when empty."""
        if not self.items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        """1-based position of the last item on this page, 0 when empty."""
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1
