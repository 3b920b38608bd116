"""Custom exceptions for State Store."""


class StateStoreError(Exception):
    """Base exception for State Store errors."""


class EntryDecodeError(StateStoreError):
    """A durable entry holds a value that is not valid JSON."""
