"""Aggregates shown on the dashboard overview."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DashboardStats:
    """Headline numbers of the overview cards.

    Attributes:
        total_students: Size of the collection.
        active_courses: Number of courses in the loaded catalog.
        completion_rate: Share of active students, as a whole percentage.
        new_enrollments: Students enrolled within the last week.
    """

    total_students: int
    active_courses: int
    completion_rate: int
    new_enrollments: int


@dataclass
class StatusDistribution:
    """Active vs inactive split of the collection."""

    active: int
    inactive: int
    active_percentage: float
    inactive_percentage: float


@dataclass
class ActivityItem:
    """One row of the recent activity list."""

    student_id: str
    name: str
    initial: str
    course_count: int
