import pytest
from fastapi.testclient import TestClient

from school_library.config import Settings
from school_library.database import create_context
from school_library.create_admin import create_admin
from school_library.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "123456"


@pytest.fixture
def context(tmp_path):
    # Fresh SQLite store per test
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'library_test.db'}",
        jwt_secret="test-secret",
    )
    ctx = create_context(settings)
    ctx.create_tables()
    assert create_admin(ctx, ADMIN_USERNAME, ADMIN_PASSWORD)
    yield ctx
    ctx.engine.dispose()


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as test_client:
        yield test_client


@pytest.fixture
def token(client):
    response = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.json()["ok"] is True
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
