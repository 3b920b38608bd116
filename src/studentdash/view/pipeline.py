"""Filter, sort and paginate the student collection.

Each stage is a pure function over a list; ``build_view`` composes them and is
re-run from scratch whenever the collection or any view setting changes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from studentdash.view.models import (
    PAGE_SIZE,
    FilterSpec,
    SortDirection,
    SortField,
    SortSpec,
    StatusFilter,
    ViewPage,
)

if TYPE_CHECKING:
    from studentdash.catalog import Course
    from studentdash.students import Student


def course_names(course_ids: Iterable[str], courses: Sequence[Course]) -> str:
    """Comma-joined names of the given courses. Unknown ids are skipped."""
    names_by_id = {course.id: course.name for course in courses}
    return ", ".join(names_by_id[cid] for cid in course_ids if cid in names_by_id)


def matches(student: Student, spec: FilterSpec, courses: Sequence[Course] = ()) -> bool:
    """True if a student passes every predicate of the filter."""
    if spec.status != StatusFilter.ALL and student.status != spec.status:
        return False
    if spec.course and spec.course not in student.course_ids:
        return False
    if spec.search:
        needle = spec.search.lower()
        haystacks = (student.name, student.email, course_names(student.course_ids, courses))
        return any(needle in text.lower() for text in haystacks)
    return True


def filter_students(
    students: Iterable[Student],
    spec: FilterSpec,
    courses: Sequence[Course] = (),
) -> list[Student]:
    """Keep the students matching status, course and search text.

    Args:
        students: Collection to filter.
        spec: Filter settings. Empty course/search mean "any".
        courses: Catalog used to search by enrolled course name.

    Returns:
        Matching students in their original order.
    """
    return [s for s in students if matches(s, spec, courses)]


def sort_students(students: Iterable[Student], sort: SortSpec) -> list[Student]:
    """Order students by one field; ties keep their incoming order."""
    attribute = sort.field.value
    return sorted(
        students,
        key=lambda s: getattr(s, attribute),
        reverse=sort.direction == SortDirection.DESC,
    )


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for ``count`` items; an empty list still has one page."""
    return max(1, math.ceil(count / page_size))


def paginate(students: Sequence[Student], page: int, page_size: int = PAGE_SIZE) -> ViewPage:
    """Slice one page out of a sorted list.

    Pages past the last one come back empty. Keeping ``page`` in range is up
    to the caller, see ``clamp_page``.

    Raises:
        ValueError: If ``page`` is lower than 1.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    start = (page - 1) * page_size
    return ViewPage(
        items=list(students[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(students),
        total_pages=total_pages(len(students), page_size),
    )


def build_view(
    students: Iterable[Student],
    filters: FilterSpec,
    sort: SortSpec,
    page: int = 1,
    courses: Sequence[Course] = (),
    page_size: int = PAGE_SIZE,
) -> ViewPage:
    """Compute the visible page of the student table."""
    filtered = filter_students(students, filters, courses)
    return paginate(sort_students(filtered, sort), page, page_size)


def toggle_sort(current: SortSpec, field: SortField) -> SortSpec:
    """SortSpec after clicking a column header.

    Clicking the active column flips the direction; another column starts
    ascending.
    """
    if current.field == field:
        ascending = current.direction == SortDirection.ASC
        direction = SortDirection.DESC if ascending else SortDirection.ASC
        return SortSpec(field=field, direction=direction)
    return SortSpec(field=field, direction=SortDirection.ASC)


def clamp_page(page: int, pages: int) -> int:
    """Bring a requested page into [1, pages]."""
    return min(max(page, 1), max(pages, 1))
