"""
Shared pytest fixtures for Bestodo tests.

Every test gets its own application wired to a private in-memory SQLite
database, so state never leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from bestodo.config.settings import Settings
from bestodo.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings():
    """Settings pointing at in-memory SQLite with cheap bcrypt rounds."""
    return Settings(
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.database.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_session(app):
    """A session on the same database the app under test uses."""
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def signup(client):
    """Sign up a user through the API and return the issued token."""

    def _signup(username="alice", email="a@x.com", password="secret1"):
        response = client.post(
            "/api/auth/signup",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _signup


@pytest.fixture
def auth_headers(signup):
    """Sign up a user and return bearer headers for it."""

    def _auth_headers(**kwargs):
        token = signup(**kwargs)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
