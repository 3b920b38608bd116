"""Pydantic models for REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, Field

from studentdash.catalog import Course  # noqa: TC001 - used at runtime by pydantic
from studentdash.dashboard import (  # noqa: TC001 - used at runtime by pydantic
    ActivityItem,
    DashboardStats,
    StatusDistribution,
)
from studentdash.notifications import Severity  # noqa: TC001 - used at runtime by pydantic
from studentdash.students import Student  # noqa: TC001 - used at runtime by pydantic
from studentdash.view import (  # noqa: TC001 - used at runtime by pydantic
    FilterSpec,
    SortDirection,
    SortField,
    SortSpec,
)

if TYPE_CHECKING:
    from studentdash.notifications import Toast
    from studentdash.session import DashboardSession
    from studentdash.view import ViewPage

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Students


class DeleteResponse(BaseModel):
    """Outcome of a delete request; ``deleted`` is False when not confirmed."""

    deleted: bool


# View


class SortRequest(BaseModel):
    """Request model for changing the sort order.

    Omitting ``direction`` toggles like a column header click.
    """

    field: SortField
    direction: SortDirection | None = None


class PageRequest(BaseModel):
    """Request model for moving to another page."""

    page: int = Field(..., ge=1)


class ViewResponse(BaseModel):
    """Response model for the student table."""

    items: list[Student]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    filters: FilterSpec
    sort: SortSpec


def view_to_response(page: ViewPage, session: DashboardSession) -> ViewResponse:
    """Combine a computed page with the settings that produced it."""
    return ViewResponse(
        items=page.items,
        page=page.page,
        page_size=page.page_size,
        total_count=page.total_count,
        total_pages=page.total_pages,
        filters=session.filters,
        sort=session.sort,
    )


# Catalog


class CatalogResponse(BaseModel):
    """Response model for the course catalog."""

    courses: list[Course]
    loading: bool


# Dashboard


class DashboardResponse(BaseModel):
    """Response model for the dashboard overview."""

    stats: DashboardStats
    distribution: StatusDistribution
    recent_activity: list[ActivityItem]


# Notifications


class ToastResponse(BaseModel):
    """Response model for a toast."""

    id: str
    message: str
    severity: Severity
    duration_ms: int


def toast_to_response(toast: Toast) -> ToastResponse:
    """Convert a Toast to ToastResponse."""
    return ToastResponse(
        id=toast.id,
        message=toast.message,
        severity=toast.severity,
        duration_ms=toast.duration_ms,
    )


# Preferences


class PreferencesResponse(BaseModel):
    """Response model for display preferences."""

    dark_mode: bool
