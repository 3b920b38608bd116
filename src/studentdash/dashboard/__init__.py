"""Dashboard - Aggregates over the student collection."""

from studentdash.dashboard.models import ActivityItem, DashboardStats, StatusDistribution
from studentdash.dashboard.stats import (
    NEW_ENROLLMENT_WINDOW,
    compute_stats,
    recent_activity,
    status_distribution,
)

__all__ = [
    "NEW_ENROLLMENT_WINDOW",
    "ActivityItem",
    "DashboardStats",
    "StatusDistribution",
    "compute_stats",
    "recent_activity",
    "status_distribution",
]
