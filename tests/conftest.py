# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from task_reminder.core.config import Settings
from task_reminder.core.notifications import get_notifier
from task_reminder.main import create_app

from .fakes import FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite database, mail disabled."""
    settings = Settings()
    settings.database_url = f"sqlite:///{tmp_path / 'tasks.sqlite3'}"
    settings.secret_key = "test-secret"
    settings.smtp_user = ""
    settings.smtp_password = ""
    settings.debug = False
    return settings


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def app(settings: Settings, notifier: FakeNotifier) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_notifier] = lambda: notifier
    return app


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs the lifespan (database, token service)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def auth_headers(client: TestClient) -> Callable[..., dict[str, str]]:
    """Register and log in a user, returning the bearer header."""

    def _auth_headers(name: str = "Ann", email: str = "ann@x.com", password: str = "pw1") -> dict[str, str]:
        response = client.post("/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 200, response.text
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _auth_headers
