"""Tests for the projects API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portfolio_site.api.main import app

PROJECT = {
    "title": "Portfolio",
    "description": "This site",
    "technologies": ["Python", "FastAPI"],
    "githubLink": "https://github.com/example/portfolio",
}


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def admin_client(make_token) -> TestClient:
    """Create a test client carrying a valid admin session cookie."""
    return TestClient(app, cookies={"auth_token": make_token()})


class TestProjectCrud:
    """Tests for creating, updating and deleting projects."""

    def test_create_returns_201_with_id(self, admin_client: TestClient) -> None:
        response = admin_client.post("/api/projects", json=PROJECT)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["_id"]
        assert body["data"]["title"] == "Portfolio"
        assert body["data"]["technologies"] == ["Python", "FastAPI"]
        assert body["data"]["order"] == 0
        assert body["data"]["liveLink"] is None

    def test_create_requires_description(self, admin_client: TestClient) -> None:
        response = admin_client.post("/api/projects", json={"title": "Only a title"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "description" in response.json()["error"]

    def test_update_changes_only_supplied_fields(self, admin_client: TestClient) -> None:
        created = admin_client.post("/api/projects", json=PROJECT).json()["data"]

        response = admin_client.put(
            f"/api/projects/{created['_id']}", json={"order": 3, "_id": "spoofed"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["_id"] == created["_id"]
        assert data["order"] == 3
        assert data["title"] == "Portfolio"

    def test_update_rejects_blanked_title(self, admin_client: TestClient) -> None:
        created = admin_client.post("/api/projects", json=PROJECT).json()["data"]

        response = admin_client.put(f"/api/projects/{created['_id']}", json={"title": ""})

        assert response.status_code == 400
        assert "title" in response.json()["error"]

    def test_update_missing_project_is_404(self, admin_client: TestClient) -> None:
        response = admin_client.put("/api/projects/does-not-exist", json={"order": 1})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Project not found"}

    def test_delete_returns_empty_data(self, client: TestClient, admin_client: TestClient) -> None:
        created = admin_client.post("/api/projects", json=PROJECT).json()["data"]

        response = admin_client.delete(f"/api/projects/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {}}
        assert client.get("/api/projects").json()["data"] == []

    def test_delete_missing_project_is_404(self, admin_client: TestClient) -> None:
        response = admin_client.delete("/api/projects/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"] == "Project not found"


    def test_timestamps_match_between_create_and_list(
        self, client: TestClient, admin_client: TestClient
    ) -> None:
        created = admin_client.post("/api/projects", json=PROJECT).json()["data"]

        listed = client.get("/api/projects").json()["data"][0]

        assert listed["createdAt"] == created["createdAt"]
        assert listed["updatedAt"] == created["updatedAt"]
        assert created["createdAt"].endswith("Z")


class TestProjectAuth:
    """Writes require an admin session; reads do not."""

    def test_create_without_cookie_is_401(self, client: TestClient) -> None:
        response = client.post("/api/projects", json=PROJECT)

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}

    def test_update_without_cookie_is_401(
        self, client: TestClient, admin_client: TestClient
    ) -> None:
        created = admin_client.post("/api/projects", json=PROJECT).json()["data"]

        response = client.put(f"/api/projects/{created['_id']}", json={"title": "Hijacked"})

        assert response.status_code == 401
        assert client.get("/api/projects").json()["data"][0]["title"] == "Portfolio"

    def test_delete_without_cookie_is_401(self, client: TestClient) -> None:
        response = client.delete("/api/projects/anything")

        assert response.status_code == 401

    def test_list_is_public(self, client: TestClient) -> None:
        response = client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}


class TestProjectListing:
    """Tests for GET /api/projects."""

    def test_sorted_by_order(self, client: TestClient, admin_client: TestClient) -> None:
        for order in (3, 1, 2):
            payload = {**PROJECT, "title": f"P{order}", "order": order}
            admin_client.post("/api/projects", json=payload)

        data = client.get("/api/projects").json()["data"]

        assert [p["order"] for p in data] == [1, 2, 3]
        assert [p["title"] for p in data] == ["P1", "P2", "P3"]

    def test_database_failure_is_internal_error(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken() -> list:
            raise OperationalError("SELECT", {}, Exception("database is down"))

        monkeypatch.setattr("portfolio_site.api.routes.projects.list_projects", broken)

        response = client.get("/api/projects")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
