from datetime import timedelta

from jose import jwt

from mindease.core.config import get_settings
from mindease.core.security import hash_refresh_token
from mindease.core.time import utcnow
from mindease.models.pomodoro_settings import PomodoroSettings
from mindease.models.refresh_token import RefreshToken

from conftest import PASSWORD, register


def test_register_returns_user_and_tokens(client, db):
    data = register(client, name="Ana", email="Ana@Example.com")
    assert data["user"]["name"] == "Ana"
    assert data["user"]["email"] == "ana@example.com"
    assert data["accessToken"]
    assert data["refreshToken"]

    # default settings come with the account
    settings = db.query(PomodoroSettings).filter(PomodoroSettings.user_id == data["user"]["id"]).one()
    assert (settings.focus_minutes, settings.short_break_minutes) == (25, 5)
    assert (settings.long_break_minutes, settings.long_break_every) == (15, 4)

    # only the hash of the refresh token is stored
    stored = db.query(RefreshToken).one()
    assert stored.token_hash == hash_refresh_token(data["refreshToken"])
    assert stored.token_hash != data["refreshToken"]


def test_register_duplicate_email_is_rejected(client):
    register(client, email="dup@example.com")
    r = client.post(
        "/auth/register",
        json={"name": "Again", "email": "dup@example.com", "password": PASSWORD},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "User already exists"}


def test_register_validation(client):
    r = client.post("/auth/register", json={"name": "X", "email": "x@example.com", "password": PASSWORD})
    assert r.status_code == 400
    assert "error" in r.json()

    r = client.post("/auth/register", json={"name": "Valid", "email": "not_an_email", "password": PASSWORD})
    assert r.status_code == 400

    r = client.post("/auth/register", json={"name": "Valid", "email": "a@example.com", "password": "123"})
    assert r.status_code == 400

    # bcrypt limit: 72 bytes
    r = client.post("/auth/register", json={"name": "Valid", "email": "b@example.com", "password": "é" * 40})
    assert r.status_code == 400
    assert "72" in r.json()["error"]


def test_login(client):
    data = register(client, email="login@example.com")

    r = client.post("/auth/login", json={"email": "login@example.com", "password": "WrongPass123!"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}

    r = client.post("/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert r.status_code == 401

    r = client.post("/auth/login", json={"email": "LOGIN@example.com", "password": PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["user"] == {"userId": data["user"]["id"], "email": "login@example.com", "name": "Test User"}
    assert body["accessToken"] and body["refreshToken"]


def test_access_token_payload(client):
    data = register(client)
    settings = get_settings()
    payload = jwt.decode(data["accessToken"], settings.secret_key, algorithms=[settings.algorithm])
    assert payload["userId"] == data["user"]["id"]
    assert payload["email"] == data["email"]
    assert payload["type"] == "access"


def test_me_requires_valid_token(client, user):
    r = client.get("/me")
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}

    r = client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    r = client.get("/me", headers={"Authorization": "Token abc"})
    assert r.status_code == 401

    r = client.get("/me", headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["id"] == user["user"]["id"]
    assert r.json()["email"] == user["email"]
    assert "createdAt" in r.json()


def test_expired_access_token_is_rejected(client, user):
    settings = get_settings()
    expired = jwt.encode(
        {
            "sub": user["user"]["id"],
            "userId": user["user"]["id"],
            "email": user["email"],
            "type": "access",
            "exp": int((utcnow() - timedelta(minutes=1)).timestamp()),
        },
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    r = client.get("/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert "expired" in r.json()["error"].lower()


def test_refresh_issues_new_access_token(client, user):
    r = client.post("/auth/refresh", json={"refreshToken": user["refreshToken"]})
    assert r.status_code == 200
    token = r.json()["accessToken"]
    assert client.get("/me", headers={"Authorization": f"Bearer {token}"}).status_code == 200

    r = client.post("/auth/refresh", json={"refreshToken": "bogus"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid refresh token"}


def test_expired_refresh_token_is_deleted_on_use(client, db, user):
    record = db.query(RefreshToken).one()
    record.expires_at = utcnow() - timedelta(seconds=1)
    db.commit()

    r = client.post("/auth/refresh", json={"refreshToken": user["refreshToken"]})
    assert r.status_code == 401
    assert r.json() == {"error": "Refresh token expired"}

    db.expire_all()
    assert db.query(RefreshToken).count() == 0


def test_logout_revokes_refresh_token(client, user):
    r = client.post("/auth/logout", json={"refreshToken": user["refreshToken"]})
    assert r.status_code == 200
    assert r.json() == {"message": "Logged out successfully"}

    r = client.post("/auth/refresh", json={"refreshToken": user["refreshToken"]})
    assert r.status_code == 401

    # unknown tokens log out quietly
    assert client.post("/auth/logout", json={"refreshToken": "unknown"}).status_code == 200


def test_logout_all_revokes_every_token(client, db, user):
    r = client.post("/auth/login", json={"email": user["email"], "password": PASSWORD})
    second = r.json()["refreshToken"]
    assert db.query(RefreshToken).count() == 2

    r = client.post("/auth/logout-all", headers=user["headers"])
    assert r.status_code == 204
    assert db.query(RefreshToken).count() == 0
    assert client.post("/auth/refresh", json={"refreshToken": second}).status_code == 401


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert "timestamp" in r.json()
