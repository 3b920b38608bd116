"""State Store - Durable key/value storage with observer fan-out."""

from studentdash.state_store.database import Database
from studentdash.state_store.exceptions import EntryDecodeError, StateStoreError
from studentdash.state_store.models import KeyValueEntry
from studentdash.state_store.store import PersistedStore, Subscription

__all__ = [
    "Database",
    "EntryDecodeError",
    "KeyValueEntry",
    "PersistedStore",
    "StateStoreError",
    "Subscription",
]
