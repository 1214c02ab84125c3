import copy
import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mjplayer.main import app
from mjplayer.api.dependencies import get_state_store
from mjplayer.db.session import get_db
from mjplayer.db.init_db import init_db
from mjplayer.db.models.user import UserRole, AppRole
from mjplayer.db.policies import policy_bypass
from mjplayer.player.registry import PlayerRegistry

PASSWORD = "secret123"


class MemoryStateStore:
    """In-process replacement for the Redis state store"""

    available = True

    def __init__(self):
        self.data = {}

    def get_json(self, key):
        return copy.deepcopy(self.data.get(key))

    def set_json(self, key, value):
        self.data[key] = json.loads(json.dumps(value))
        return True

    def delete(self, key):
        return self.data.pop(key, None) is not None


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def state_store():
    return MemoryStateStore()


@pytest.fixture
def client(session_factory, state_store):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_state_store] = lambda: state_store
    app.state.players = PlayerRegistry(default_volume=1.0)
    yield TestClient(app)
    app.dependency_overrides.clear()


def grant_admin(session_factory, user_id):
    session = session_factory()
    try:
        with policy_bypass(session):
            session.add(UserRole(user_id=user_id, role=AppRole.ADMIN))
            session.commit()
    finally:
        session.close()


@pytest.fixture
def make_user(client):
    """Sign up + log in; returns (user json, auth headers)"""
    def _make_user(email, full_name=None):
        response = client.post(
            "/api/v1/user/signup",
            json={"email": email, "password": PASSWORD, "full_name": full_name},
        )
        assert response.status_code == 200, response.text
        token = client.post(
            "/api/v1/user/login",
            data={"username": email, "password": PASSWORD},
        ).json()["access_token"]
        return response.json(), {"Authorization": f"Bearer {token}"}
    return _make_user


@pytest.fixture
def make_admin(make_user, session_factory):
    def _make_admin(email="admin@mjplayer.io"):
        user, headers = make_user(email, full_name="Admin")
        grant_admin(session_factory, user["id"])
        return user, headers
    return _make_admin


@pytest.fixture
def add_song(client):
    def _add_song(headers, title="Song", url=None, **extra):
        payload = {"title": title, "url": url or f"https://cdn.mjplayer.io/{title}.mp3", **extra}
        response = client.post("/api/v1/songs/", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _add_song
