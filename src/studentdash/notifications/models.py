"""Data models for toast notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """Visual severity of a toast."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class Toast:
    """A user-facing message.

    Attributes:
        id: Unique toast ID.
        message: Text shown to the user.
        severity: Visual severity.
        duration_ms: Lifetime in milliseconds; 0 keeps it until removed.
        expires_at: Clock reading after which the toast is gone, None if it
                    never expires on its own.
    """

    id: str
    message: str
    severity: Severity
    duration_ms: int
    expires_at: float | None = None
