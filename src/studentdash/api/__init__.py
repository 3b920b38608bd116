"""REST API for studentdash."""

from studentdash.api.app import create_app
from studentdash.api.models import (
    APIResponse,
    CatalogResponse,
    DashboardResponse,
    DeleteResponse,
    ViewResponse,
)

__all__ = [
    "APIResponse",
    "CatalogResponse",
    "DashboardResponse",
    "DeleteResponse",
    "ViewResponse",
    "create_app",
]
