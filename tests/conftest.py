import asyncio

import pytest
from fastapi.testclient import TestClient

from contacts_api.database import create_sessionmaker, create_tables
from contacts_api.main import app
from contacts_api.repositories.factory import get_user_repository
from contacts_api.repositories.sql_repo import SqlUserRepository


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sessionmaker(tmp_path):
    # a file database so every connection (and event loop) sees the same rows
    maker = create_sessionmaker(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    asyncio.run(create_tables(maker))
    return maker


@pytest.fixture
def repo(sessionmaker):
    return SqlUserRepository(sessionmaker)


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_user_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user():
    def _make_user(user_id="u1", first_name="Ann", last_name="Lee", **extra):
        payload = {
            "userID": user_id,
            "firstName": first_name,
            "lastName": last_name,
            "address": "1 Rd",
            "mobileNumber": "555",
            "emailAddress": "a@x.com",
        }
        payload.update(extra)
        return payload

    return _make_user


@pytest.fixture
def seed(client, make_user):
    def _seed(*names):
        """Create one user per ``(user_id, first_name, last_name)`` tuple."""
        for user_id, first_name, last_name in names:
            res = client.post("/users", json=make_user(user_id, first_name, last_name))
            assert res.status_code == 201

    return _seed
