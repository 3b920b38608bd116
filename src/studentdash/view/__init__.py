"""View - Filter, sort and paginate the student table."""

from studentdash.view.models import (
    PAGE_SIZE,
    FilterSpec,
    SortDirection,
    SortField,
    SortSpec,
    StatusFilter,
    ViewPage,
)
from studentdash.view.pipeline import (
    build_view,
    clamp_page,
    course_names,
    filter_students,
    paginate,
    sort_students,
    toggle_sort,
    total_pages,
)

__all__ = [
    "PAGE_SIZE",
    "FilterSpec",
    "SortDirection",
    "SortField",
    "SortSpec",
    "StatusFilter",
    "ViewPage",
    "build_view",
    "clamp_page",
    "course_names",
    "filter_students",
    "paginate",
    "sort_students",
    "toggle_sort",
    "total_pages",
]
