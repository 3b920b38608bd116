"""Fixtures for route tests: a bare app wired to an in-memory session."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from studentdash.api.app import include_routers, register_exception_handlers
from studentdash.api.dependencies import get_session
from studentdash.session import DashboardSession


@pytest.fixture
def app(session: DashboardSession) -> FastAPI:
    """Create a test FastAPI app using the in-memory session."""
    app = FastAPI()
    app.dependency_overrides[get_session] = lambda: session
    register_exception_handlers(app)
    include_routers(app)
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
