"""FastAPI application setup."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studentdash import __version__
from studentdash.api.exceptions import FormValidationError
from studentdash.api.models import APIResponse
from studentdash.api.routes import courses, dashboard, notifications, preferences, students, view
from studentdash.catalog import CatalogError, CourseNotFoundError, TransientFetchError
from studentdash.config import Settings
from studentdash.session import DashboardSession
from studentdash.state_store import StateStoreError
from studentdash.students import StudentError, StudentNotFoundError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    settings: Settings = app.state.settings
    session = DashboardSession.from_settings(settings)
    app.state.session = session
    # Load the catalog in the background, like the dashboard does on first paint
    catalog_task = asyncio.create_task(session.load_courses())

    yield
    # Shutdown
    if not catalog_task.done():
        await catalog_task
    session.close()
    app.state.session = None


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to APIResponse error bodies."""

    @app.exception_handler(FormValidationError)
    async def form_validation_handler(_request: Request, exc: FormValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=APIResponse[dict[str, str]](
                data=exc.errors, error="Validation failed"
            ).model_dump(),
        )

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=APIResponse[None](data=None, error="Student not found").model_dump(),
        )

    @app.exception_handler(CourseNotFoundError)
    async def course_not_found_handler(
        _request: Request, _exc: CourseNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=APIResponse[None](data=None, error="Course not found").model_dump(),
        )

    @app.exception_handler(TransientFetchError)
    async def transient_fetch_handler(_request: Request, exc: TransientFetchError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    @app.exception_handler(StudentError)
    async def student_error_handler(_request: Request, _exc: StudentError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=APIResponse[None](data=None, error="Invalid student request").model_dump(),
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(_request: Request, _exc: CatalogError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=APIResponse[None](data=None, error="Course catalog error").model_dump(),
        )

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(_request: Request, _exc: StateStoreError) -> JSONResponse:
        logger.error("Unhandled state store error: %s", _exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )


def include_routers(app: FastAPI) -> None:
    app.include_router(students.router, prefix="/api/v1")
    app.include_router(view.router, prefix="/api/v1")
    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(dashboard.router, prefix="/api/v1")
    app.include_router(notifications.router, prefix="/api/v1")
    app.include_router(preferences.router, prefix="/api/v1")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Runtime settings. Read from the environment when omitted.
    """
    app = FastAPI(
        title="studentdash API",
        description="Student management dashboard",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings if settings is not None else Settings.from_env()
    app.state.session = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    include_routers(app)

    return app
