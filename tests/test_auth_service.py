"""Tests for the shared-secret admin authentication service."""

from __future__ import annotations

import pytest

from portfolio_site.services.auth import AdminAuthService
from portfolio_site.services.session_tokens import SessionTokenService


@pytest.fixture
def auth() -> AdminAuthService:
    return AdminAuthService(admin_password="s3cret", tokens=SessionTokenService("k"))


def test_check_password(auth: AdminAuthService) -> None:
    assert auth.check_password("s3cret") is True
    assert auth.check_password("S3CRET") is False
    assert auth.check_password("") is False
    assert auth.check_password(None) is False


def test_login_issues_admin_token(auth: AdminAuthService) -> None:
    token = auth.login("s3cret")

    assert token is not None
    assert auth.tokens.verify(token)["role"] == "admin"
    assert auth.is_authenticated(token) is True


def test_login_with_wrong_password_returns_none(auth: AdminAuthService) -> None:
    assert auth.login("guess") is None


def test_unconfigured_password_rejects_everything() -> None:
    auth = AdminAuthService(admin_password=None, tokens=SessionTokenService("k"))

    assert auth.login(None) is None
    assert auth.login("") is None
    assert auth.login("anything") is None


def test_is_authenticated_rejects_missing_and_foreign_tokens(auth: AdminAuthService) -> None:
    foreign = SessionTokenService("other").issue({"role": "admin"})

    assert auth.is_authenticated(None) is False
    assert auth.is_authenticated(foreign) is False


def test_from_env_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env")
    monkeypatch.setenv("JWT_SECRET", "env-secret")

    auth = AdminAuthService.from_env()
    token = auth.login("from-env")

    assert token is not None
    assert SessionTokenService("env-secret").verify(token) is not None
