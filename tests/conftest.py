import pytest
from fastapi.testclient import TestClient

from cityease_api.app.core.config import settings
from cityease_api.app.core.db import init_db
from cityease_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for each test."""
    path = tmp_path / "cityease-test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


def register(client, email="asha@example.com", password="secret123", name="Asha", phone="12345"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password, "phone": phone},
    )
    assert response.status_code == 200, response.text
    return response.json()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
