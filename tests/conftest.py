import os
import uuid
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite:///./test_mindease.db"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from mindease.db.base import Base  # noqa: E402
from mindease.db.session import SessionLocal, engine  # noqa: E402
from mindease.main import app  # noqa: E402

PASSWORD = "SecurePass123!"


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def register(client: TestClient, name: str = "Test User", email: str | None = None) -> dict:
    """Register a fresh user; returns the response body plus ready-made auth headers."""
    email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
    r = client.post("/auth/register", json={"name": name, "email": email, "password": PASSWORD})
    assert r.status_code == 201, r.text
    data = r.json()
    data["headers"] = {"Authorization": f"Bearer {data['accessToken']}"}
    data["email"] = email
    return data


@pytest.fixture
def user(client):
    return register(client)


@pytest.fixture
def other_user(client):
    return register(client, name="Other User")


def parse_dt(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
