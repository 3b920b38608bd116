"""Custom exceptions for the course catalog."""


class CatalogError(Exception):
    """Base exception for course catalog errors."""


class TransientFetchError(CatalogError):
    """A catalog fetch failed; retrying the same call may succeed."""


class CourseNotFoundError(CatalogError):
    """Course with given ID is not in the catalog."""
