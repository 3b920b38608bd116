"""Notifications - Ephemeral toast messages."""

from studentdash.notifications.models import Severity, Toast
from studentdash.notifications.notifier import DEFAULT_DURATION_MS, ToastNotifier

__all__ = [
    "DEFAULT_DURATION_MS",
    "Severity",
    "Toast",
    "ToastNotifier",
]
