"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from studentdash.session import DashboardSession


def get_session(request: Request) -> DashboardSession:
    """Dependency that provides the DashboardSession owned by the app."""
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise RuntimeError("DashboardSession not initialized. Start the app through its lifespan.")
    return session


# Type alias for dependency injection
SessionDep = Annotated[DashboardSession, Depends(get_session)]
