"""Dashboard aggregate computations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from studentdash.dashboard.models import ActivityItem, DashboardStats, StatusDistribution
from studentdash.students.models import StudentStatus, utc_now

if TYPE_CHECKING:
    from studentdash.catalog import Course
    from studentdash.students import Student

NEW_ENROLLMENT_WINDOW = timedelta(days=7)
RECENT_ACTIVITY_LIMIT = 5


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_stats(
    students: Sequence[Student],
    courses: Sequence[Course],
    now: datetime | None = None,
) -> DashboardStats:
    """Compute the overview cards.

    Args:
        students: Whole collection.
        courses: Loaded catalog (empty while loading or after a failed fetch).
        now: Reference time for the new-enrollment window.

    Returns:
        DashboardStats for the overview.
    """
    now = now or utc_now()
    active = sum(1 for s in students if s.status == StudentStatus.ACTIVE)
    window_start = now - NEW_ENROLLMENT_WINDOW
    new_enrollments = sum(1 for s in students if s.enrollment_date >= window_start)
    return DashboardStats(
        total_students=len(students),
        active_courses=len(courses),
        completion_rate=_round_half_up(_percentage(active, len(students))),
        new_enrollments=new_enrollments,
    )


def status_distribution(students: Sequence[Student]) -> StatusDistribution:
    """Count active and inactive students, with percentages to one decimal."""
    active = sum(1 for s in students if s.status == StudentStatus.ACTIVE)
    inactive = sum(1 for s in students if s.status == StudentStatus.INACTIVE)
    return StatusDistribution(
        active=active,
        inactive=inactive,
        active_percentage=round(_percentage(active, len(students)), 1),
        inactive_percentage=round(_percentage(inactive, len(students)), 1),
    )


def recent_activity(
    students: Sequence[Student], limit: int = RECENT_ACTIVITY_LIMIT
) -> list[ActivityItem]:
    """First ``limit`` students of the collection, for the activity sidebar."""
    return [
        ActivityItem(
            student_id=s.id,
            name=s.name,
            initial=s.name[:1],
            course_count=len(s.course_ids),
        )
        for s in students[:limit]
    ]
