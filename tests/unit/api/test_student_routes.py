"""Unit tests for student routes."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from studentdash.session import DashboardSession

VALID = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "courseIds": ["1", "2"],
    "status": "active",
}


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/v1/students", json={**VALID, **overrides})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["data"]


@pytest.mark.unit
class TestCreateStudent:
    """Tests for POST /api/v1/students."""

    def test_create_student(self, client: TestClient, session: DashboardSession) -> None:
        response = client.post("/api/v1/students", json=VALID)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["error"] is None
        assert body["data"]["name"] == "Ada Lovelace"
        assert body["data"]["courseIds"] == ["1", "2"]
        assert body["data"]["id"]
        assert body["data"]["enrollmentDate"]
        assert len(session.list_students()) == 1

    def test_create_accepts_snake_case(self, client: TestClient) -> None:
        payload = {"name": "Ada", "email": "ada@example.com", "course_ids": ["3"]}

        response = client.post("/api/v1/students", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["data"]["courseIds"] == ["3"]

    def test_create_raises_toast(self, client: TestClient, session: DashboardSession) -> None:
        _create(client)

        assert [t.message for t in session.notifier.toasts] == ["Ada Lovelace has been added"]

    def test_validation_errors(self, client: TestClient, session: DashboardSession) -> None:
        response = client.post(
            "/api/v1/students",
            json={**VALID, "name": "A", "email": "no-at-sign", "courseIds": []},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["data"] == {
            "name": "Name must be between 2 and 50 characters",
            "email": "Please enter a valid email address",
            "courses": "At least one course must be selected",
        }
        assert session.list_students() == []

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/students", json={"name": "Ada"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.unit
class TestReadStudents:
    """Tests for GET /api/v1/students."""

    def test_list_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/students")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"data": [], "error": None}

    def test_list_in_stored_order(self, client: TestClient) -> None:
        _create(client, name="Zed", email="zed@example.com")
        _create(client, name="Amy", email="amy@example.com")

        names = [s["name"] for s in client.get("/api/v1/students").json()["data"]]

        assert names == ["Zed", "Amy"]

    def test_get_student(self, client: TestClient) -> None:
        created = _create(client)

        response = client.get(f"/api/v1/students/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == created

    def test_get_unknown(self, client: TestClient) -> None:
        response = client.get("/api/v1/students/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"data": None, "error": "Student not found"}


@pytest.mark.unit
class TestUpdateStudent:
    """Tests for PUT /api/v1/students/{id}."""

    def test_update(self, client: TestClient) -> None:
        created = _create(client)

        response = client.put(
            f"/api/v1/students/{created['id']}",
            json={**VALID, "name": "Ada King", "status": "inactive"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == created["id"]
        assert data["name"] == "Ada King"
        assert data["status"] == "inactive"
        assert data["enrollmentDate"] == created["enrollmentDate"]

    def test_update_unknown(self, client: TestClient) -> None:
        response = client.put("/api/v1/students/missing", json=VALID)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_invalid(self, client: TestClient) -> None:
        created = _create(client)

        response = client.put(f"/api/v1/students/{created['id']}", json={**VALID, "email": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["data"] == {"email": "Email is required"}


@pytest.mark.unit
class TestDeleteStudent:
    """Tests for DELETE /api/v1/students/{id}."""

    def test_delete_requires_confirmation(
        self, client: TestClient, session: DashboardSession
    ) -> None:
        created = _create(client)

        response = client.delete(f"/api/v1/students/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == {"deleted": False}
        assert len(session.list_students()) == 1

    def test_delete_confirmed(self, client: TestClient, session: DashboardSession) -> None:
        created = _create(client)

        response = client.delete(f"/api/v1/students/{created['id']}", params={"confirm": True})

        assert response.json()["data"] == {"deleted": True}
        assert session.list_students() == []
        assert session.notifier.toasts[-1].message == "Ada Lovelace has been deleted"

    def test_delete_unknown(self, client: TestClient) -> None:
        response = client.delete("/api/v1/students/missing", params={"confirm": True})

        assert response.status_code == status.HTTP_404_NOT_FOUND
