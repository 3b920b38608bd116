"""Integration tests for the assembled application."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from studentdash.api import create_app
from studentdash.config import Settings

STUDENT = {"name": "Ada Lovelace", "email": "ada@example.com", "courseIds": ["1"]}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        db_path=str(tmp_path / "studentdash.db"),
        catalog_delay=0,
        catalog_failure_rate=0,
    )


@pytest.mark.integration
class TestLifespan:
    """Tests for startup and shutdown."""

    def test_session_created_and_closed(self, settings: Settings) -> None:
        app = create_app(settings)

        with TestClient(app) as client:
            assert app.state.session is not None
            assert client.get("/api/v1/students").status_code == status.HTTP_200_OK

        assert app.state.session is None

    def test_catalog_loaded_at_startup(self, settings: Settings) -> None:
        app = create_app(settings)

        with TestClient(app) as client:
            response = client.get("/api/v1/courses")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["data"]["courses"]) == 5

    def test_routes_fail_without_lifespan(self, settings: Settings) -> None:
        client = TestClient(create_app(settings), raise_server_exceptions=False)

        response = client.get("/api/v1/students")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


@pytest.mark.integration
class TestEndToEnd:
    """Flows across several endpoints and restarts."""

    def test_students_survive_restart(self, settings: Settings) -> None:
        with TestClient(create_app(settings)) as client:
            created = client.post("/api/v1/students", json=STUDENT).json()["data"]

        with TestClient(create_app(settings)) as client:
            students = client.get("/api/v1/students").json()["data"]

        assert students == [created]

    def test_dark_mode_survives_restart(self, settings: Settings) -> None:
        with TestClient(create_app(settings)) as client:
            client.post("/api/v1/preferences/dark-mode/toggle")

        with TestClient(create_app(settings)) as client:
            data = client.get("/api/v1/preferences").json()["data"]

        assert data == {"dark_mode": True}

    def test_create_list_delete(self, settings: Settings) -> None:
        with TestClient(create_app(settings)) as client:
            for i in range(12):
                client.post(
                    "/api/v1/students",
                    json={**STUDENT, "name": f"Student {i:02d}", "email": f"s{i}@example.com"},
                )

            page = client.put("/api/v1/view/page", json={"page": 2}).json()["data"]
            assert page["page"] == 2
            assert len(page["items"]) == 2

            last = page["items"][-1]
            response = client.delete(
                f"/api/v1/students/{last['id']}", params={"confirm": True}
            )
            assert response.json()["data"] == {"deleted": True}

            toasts = client.get("/api/v1/notifications").json()["data"]
            assert toasts[-1]["message"] == f"{last['name']} has been deleted"

            stats = client.get("/api/v1/dashboard").json()["data"]["stats"]
            assert stats["total_students"] == 11
            assert stats["active_courses"] == 5

    def test_error_envelope(self, settings: Settings) -> None:
        with TestClient(create_app(settings)) as client:
            response = client.post("/api/v1/students", json={**STUDENT, "email": "bad"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json() == {
            "data": {"email": "Please enter a valid email address"},
            "error": "Validation failed",
        }


@pytest.mark.integration
class TestConcurrentRequests:
    """Requests arriving from several client threads at once."""

    def test_concurrent_creates_are_all_kept(self, settings: Settings) -> None:
        workers, per_worker = 8, 10

        with TestClient(create_app(settings)) as client:

            def create_batch(worker: int) -> list[int]:
                codes = []
                for i in range(per_worker):
                    response = client.post(
                        "/api/v1/students",
                        json={**STUDENT, "name": f"Student {worker}-{i}"},
                    )
                    codes.append(response.status_code)
                    codes.append(client.get("/api/v1/notifications").status_code)
                return codes

            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(create_batch, range(workers)))

            students = client.get("/api/v1/students").json()["data"]

        codes = {code for batch in results for code in batch}
        assert codes == {status.HTTP_200_OK, status.HTTP_201_CREATED}
        assert len(students) == workers * per_worker
        assert len({s["id"] for s in students}) == workers * per_worker
