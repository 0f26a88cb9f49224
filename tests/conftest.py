"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from eventbook.config import Settings
from eventbook.domain.models import User
from eventbook.main import create_app
from eventbook.repos.memory import IntervalRepository, UserRepository
from eventbook.services.scheduling import SchedulingService


@pytest.fixture()
def interval_repo() -> IntervalRepository:
    return IntervalRepository()


@pytest.fixture()
def user_repo() -> UserRepository:
    """Two registered users, ids ``owner-u`` (alice) and ``owner-v`` (bob)."""
    repo = UserRepository()
    repo.add(User(id="owner-u", username="alice", password_hash="x"))
    repo.add(User(id="owner-v", username="bob", password_hash="x"))
    return repo


@pytest.fixture()
def scheduling(interval_repo, user_repo) -> SchedulingService:
    return SchedulingService(intervals=interval_repo, users=user_repo)


@pytest.fixture()
def settings() -> Settings:
    return Settings(jwt_secret="test-secret", storage="memory", log_level="WARNING")


@pytest.fixture()
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture()
def auth_header(client):
    """Register and log in a user, returning a callable for more users."""

    def _login(username: str = "alice", password: str = "correct-horse") -> dict[str, str]:
        client.post("/users", json={"username": username, "password": password})
        resp = client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 201
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _login
