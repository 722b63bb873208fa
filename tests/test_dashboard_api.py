"""Tests for the admin landing, the dashboard gate and the health probe."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_site.api.main import app
from portfolio_site.services.profile import upsert_profile
from portfolio_site.services.projects import create_project


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def admin_client(make_token) -> TestClient:
    """Create a test client carrying a valid admin session cookie."""
    return TestClient(app, cookies={"auth_token": make_token()})


class TestDashboardGate:
    """Tests for the /me/dashboard redirect."""

    def test_redirects_to_login_without_cookie(self, client: TestClient) -> None:
        response = client.get("/me/dashboard", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/me"

    def test_nested_paths_are_gated(self, client: TestClient) -> None:
        response = client.get("/me/dashboard/projects", follow_redirects=False)

        assert response.status_code == 307

    def test_garbage_cookie_redirects(self) -> None:
        client = TestClient(app, cookies={"auth_token": "garbage"})

        response = client.get("/me/dashboard", follow_redirects=False)

        assert response.status_code == 307

    def test_admin_sees_summary(self, admin_client: TestClient) -> None:
        upsert_profile(
            {"name": "Alex", "title": "Dev", "university": "SU", "email": "alex@example.com"}
        )
        create_project({"title": "One", "description": "First"})

        response = admin_client.get("/me/dashboard")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "profileName": "Alex",
            "projectCount": 1,
            "achievementCount": 0,
            "messageCount": 0,
        }


class TestLoginLanding:
    """Tests for GET /me."""

    def test_anonymous(self, client: TestClient) -> None:
        response = client.get("/me")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"authenticated": False}}

    def test_with_session(self, admin_client: TestClient) -> None:
        response = admin_client.get("/me")

        assert response.json()["data"]["authenticated"] is True


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
