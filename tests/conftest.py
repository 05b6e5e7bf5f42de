"""
Shared fixtures: every test gets its own empty in-memory store and app.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Dict, Tuple

import pytest
from fastapi.testclient import TestClient

from footheroes_backend.core.clock import utc_now
from footheroes_backend.core.config import Settings
from footheroes_backend.core.database import create_db_engine, init_db
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_data=False)


@pytest.fixture
def store() -> FootHeroesStore:
    engine = create_db_engine("sqlite://")
    init_db(engine)
    store = FootHeroesStore(engine)
    yield store
    store.close()


@pytest.fixture
def app(settings: Settings, store: FootHeroesStore):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def user_payload(username: str, **overrides) -> Dict:
    payload = {
        "email": f"{username}@example.com",
        "username": username,
        "firstName": username.capitalize(),
        "lastName": "Tester",
        "password": "secret1",
        "position": "midfielder",
        "skillLevel": "intermediate",
        "location": "London, UK",
    }
    payload.update(overrides)
    return payload


def auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def future_iso(days: int = 7) -> str:
    return (utc_now() + timedelta(days=days)).isoformat()


@pytest.fixture
def register(client: TestClient) -> Callable[..., Tuple[Dict, Dict[str, str]]]:
    """Registers a user over the API; returns (user json, auth headers)."""

    def _register(username: str, **overrides) -> Tuple[Dict, Dict[str, str]]:
        resp = client.post("/api/auth/register", json=user_payload(username, **overrides))
        assert resp.status_code == 201, resp.text
        data = resp.json()["data"]
        return data["user"], auth_header(data["token"])

    return _register


@pytest.fixture
def create_team(client: TestClient) -> Callable[..., Dict]:
    def _create_team(headers: Dict[str, str], name: str = "Lions", **overrides) -> Dict:
        payload = {
            "name": name,
            "location": "London, UK",
            "skillLevel": "intermediate",
            "maxMembers": 15,
        }
        payload.update(overrides)
        resp = client.post("/api/teams", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create_team


@pytest.fixture
def create_match(client: TestClient) -> Callable[..., Dict]:
    def _create_match(headers: Dict[str, str], home_id: int, away_id: int, **overrides) -> Dict:
        payload = {
            "title": "Friendly",
            "homeTeamId": home_id,
            "awayTeamId": away_id,
            "scheduledAt": future_iso(),
            "duration": 90,
            "location": "Hackney Marshes",
        }
        payload.update(overrides)
        resp = client.post("/api/matches", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create_match
