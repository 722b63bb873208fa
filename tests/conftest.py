from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import portfolio_site.data.db as app_db
from portfolio_site.data.db import init_db
from portfolio_site.data.models import Base
from portfolio_site.services.session_tokens import SessionTokenService

ADMIN_PASSWORD = "correct horse battery staple"
JWT_SECRET = "test-signing-secret"


@pytest.fixture(autouse=True)
def auth_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configure a known admin password and signing secret for every test."""
    monkeypatch.setenv("ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setenv("JWT_SECRET", JWT_SECRET)
    monkeypatch.delenv("APP_ENV", raising=False)


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Create a temporary test database for service tests."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(app_db, "_engine", engine)
    monkeypatch.setattr(
        app_db,
        "_SessionLocal",
        sessionmaker(bind=engine, autoflush=False, expire_on_commit=False),
    )
    yield
    engine.dispose()


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    app_db.dispose_engine()


@pytest.fixture
def admin_password() -> str:
    """Return the admin password configured for the test run."""
    return ADMIN_PASSWORD


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Return a helper that signs admin tokens with the test secret."""

    def _make(**kwargs) -> str:
        return SessionTokenService(JWT_SECRET).issue({"role": "admin"}, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _api_db_for_api_tests(request: pytest.FixtureRequest) -> None:
    """Automatically use the api_db fixture for tests in API test files."""
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
