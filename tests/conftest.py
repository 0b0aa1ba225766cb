import pytest
from fastapi.testclient import TestClient

from sport_community_api.app.core.config import Settings
from sport_community_api.app.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "test.db"),
        upload_dir=str(tmp_path / "uploads"),
        secret_key="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client, username, email, password="pw123"):
    return client.post("/register", json={"username": username, "email": email, "password": password})


def login(client, email, password="pw123"):
    return client.post("/login", json={"email": email, "password": password})


def auth_headers(client, username, email=None, password="pw123"):
    """Register ``username`` and return an Authorization header for it."""
    email = email or f"{username}@example.com"
    assert register(client, username, email, password).status_code == 201
    token = login(client, email, password).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def png_file(name="photo.png"):
    return {"file": (name, PNG_BYTES, "image/png")}


def event_form(**overrides):
    form = {
        "name": "Sunday 5-a-side",
        "date": "2025-09-01",
        "lieu": "Stade municipal",
        "sport": "Football",
        "genre": "mixte",
        "nb_participants_max": "10",
        "description": "Friendly game",
    }
    form.update(overrides)
    return form


def create_event(client, headers, **overrides):
    response = client.post("/events", data=event_form(**overrides), files=png_file(), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["eventId"]
