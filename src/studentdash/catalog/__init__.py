"""Catalog - Read-only access to the course catalog."""

from studentdash.catalog.client import MOCK_COURSES, CourseCatalog, CourseCatalogClient
from studentdash.catalog.exceptions import CatalogError, CourseNotFoundError, TransientFetchError
from studentdash.catalog.models import Course

__all__ = [
    "MOCK_COURSES",
    "CatalogError",
    "Course",
    "CourseCatalog",
    "CourseCatalogClient",
    "CourseNotFoundError",
    "TransientFetchError",
]
