"""Toast notifier with per-toast expiry timers."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from uuid import uuid4

from studentdash.notifications.models import Severity, Toast

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 4000


class ToastNotifier:
    """Queue of toasts shown in insertion order.

    A toast with a positive duration arms a timer on the event loop that
    removes it when the duration elapses. Removing a toast earlier cancels
    its timer. When no event loop is running (synchronous callers), expiry
    falls back to the toast deadline, checked whenever ``toasts`` is read.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the notifier.

        Args:
            loop: Event loop for expiry timers. Defaults to the loop running
                  at the time of each ``add``.
            clock: Monotonic clock in seconds used for deadlines.
        """
        self._loop = loop
        self._clock = clock
        self._toasts: dict[str, Toast] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}

    def add(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        duration_ms: int = DEFAULT_DURATION_MS,
    ) -> str:
        """Show a toast.

        Args:
            message: Text shown to the user.
            severity: Visual severity.
            duration_ms: Lifetime in milliseconds; 0 keeps the toast until
                         removed explicitly.

        Returns:
            The new toast ID.

        Raises:
            ValueError: If ``duration_ms`` is negative.
        """
        if duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {duration_ms}")

        toast_id = self._new_id()
        expires_at = self._clock() + duration_ms / 1000 if duration_ms > 0 else None
        self._toasts[toast_id] = Toast(
            id=toast_id,
            message=message,
            severity=Severity(severity),
            duration_ms=duration_ms,
            expires_at=expires_at,
        )

        if duration_ms > 0:
            loop = self._event_loop()
            if loop is not None:
                self._timers[toast_id] = loop.call_later(
                    duration_ms / 1000, self._expire, toast_id
                )

        logger.debug("Toast %s added (%s): %s", toast_id, severity, message)
        return toast_id

    def remove(self, toast_id: str) -> None:
        """Dismiss a toast. Removing an unknown or already removed ID is a no-op."""
        self._toasts.pop(toast_id, None)
        handle = self._timers.pop(toast_id, None)
        if handle is not None:
            handle.cancel()

    def clear(self) -> None:
        """Dismiss every toast."""
        for toast_id in list(self._toasts):
            self.remove(toast_id)

    @property
    def toasts(self) -> list[Toast]:
        """Visible toasts in insertion order."""
        self._prune()
        return list(self._toasts.values())

    def __len__(self) -> int:
        return len(self.toasts)

    def __contains__(self, toast_id: object) -> bool:
        self._prune()
        return toast_id in self._toasts

    def _expire(self, toast_id: str) -> None:
        self._timers.pop(toast_id, None)
        # The toast may already be gone if it was dismissed by hand
        if self._toasts.pop(toast_id, None) is not None:
            logger.debug("Toast %s expired", toast_id)

    def _prune(self) -> None:
        now = self._clock()
        expired = [
            t.id for t in self._toasts.values() if t.expires_at is not None and t.expires_at <= now
        ]
        for toast_id in expired:
            self.remove(toast_id)

    def _event_loop(self) -> asyncio.AbstractEventLoop | None:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _new_id(self) -> str:
        while True:
            candidate = uuid4().hex[:12]
            if candidate not in self._toasts:
                return candidate
