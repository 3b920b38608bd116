"""PersistedStore - Durable key/value storage for JSON-serializable values."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from studentdash.state_store.database import Database
from studentdash.state_store.exceptions import EntryDecodeError, StateStoreError
from studentdash.state_store.models import KeyValueEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[Any], None]

_MISSING = object()


@dataclass
class Subscription:
    """An observer registered for one key."""

    id: str
    key: str
    callback: Observer

    @classmethod
    def create(cls, key: str, callback: Observer) -> Subscription:
        return cls(id=str(uuid4()), key=key, callback=callback)


class PersistedStore:
    """Best-effort durable storage for named JSON values.

    The in-memory value is the logical value: ``write`` updates it before
    touching the database, and ``read`` prefers it. Backend failures are
    logged and never reach the caller, so a failed write still changes what
    later reads observe for the rest of the process.
    """

    def __init__(self, db_path: str = ":memory:") -> None:
        """Initialize the store.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self._db = Database(db_path)
        self._db.create_tables()
        self._values: dict[str, Any] = {}
        self._subscriptions: dict[str, Subscription] = {}

    @property
    def database(self) -> Database:
        return self._db

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Read / write ---

    def read(self, key: str, default: T, parse: Callable[[Any], T] | None = None) -> T:
        """Read the value stored under a key.

        Args:
            key: Entry name.
            default: Returned when the entry is missing or malformed.
            parse: Optional converter applied to the decoded JSON value. A
                   ``ValueError`` (pydantic ``ValidationError`` included)
                   marks the stored value as malformed.

        Returns:
            A copy of the stored value, or ``default``.
        """
        if key in self._values:
            raw = copy.deepcopy(self._values[key])
        else:
            try:
                raw = self._load(key)
            except StateStoreError:
                logger.warning("Could not load %r from durable storage, using default", key)
                return default
            if raw is _MISSING:
                return default

        if parse is None:
            return raw
        try:
            return parse(raw)
        except ValueError:
            logger.warning("Stored value for %r is malformed, using default", key)
            return default

    def write(self, key: str, value: Any) -> None:
        """Store a value and notify observers of the key.

        Args:
            key: Entry name.
            value: JSON-serializable value. Values that cannot be encoded stay
                   in memory only.
        """
        self._values[key] = copy.deepcopy(value)
        self._persist(key, value)
        self._notify(key, value)

    # --- Observers ---

    def subscribe(self, key: str, callback: Observer) -> Subscription:
        """Register a callback invoked with the new value on every write of a key."""
        subscription = Subscription.create(key, callback)
        self._subscriptions[subscription.id] = subscription
        return subscription

    def unsubscribe(self, subscription_id: str) -> None:
        """Remove a subscription. Unknown ids are ignored."""
        self._subscriptions.pop(subscription_id, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    # --- Internals ---

    def _load(self, key: str) -> Any:
        try:
            with self._db.get_session() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    return _MISSING
                encoded = entry.value
        except SQLAlchemyError as e:
            raise StateStoreError(f"Failed to load entry '{key}'") from e

        try:
            return json.loads(encoded)
        except json.JSONDecodeError as e:
            raise EntryDecodeError(f"Entry '{key}' is not valid JSON") from e

    def _persist(self, key: str, value: Any) -> None:
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Value for %r is not JSON serializable, kept in memory only", key)
            return

        try:
            with self._db.get_session() as session, session.begin():
                session.merge(KeyValueEntry(key=key, value=encoded))
        except SQLAlchemyError:
            logger.exception("Failed to persist %r, kept in memory only", key)
            return
        logger.debug("Persisted %r (%d bytes)", key, len(encoded))

    def _notify(self, key: str, value: Any) -> None:
        for subscription in list(self._subscriptions.values()):
            if subscription.key != key:
                continue
            try:
                subscription.callback(copy.deepcopy(value))
            except Exception:
                logger.exception("Observer %s for %r failed", subscription.id, key)
