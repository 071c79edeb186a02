"""
Tests for authentication endpoints.
"""
from datetime import timedelta

from globaltrotters.core.security import (
    create_access_token, create_user_token, get_password_hash, token_user_id, verify_password
)
from globaltrotters.models.user import User, UserStatus


def test_register(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={
            "email": "Test@Example.com",
            "password": "testpassword123",
            "name": "Test User"
        }
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["token"]
    assert body["data"]["user"]["email"] == "test@example.com"
    assert body["data"]["user"]["role"] == "USER"
    assert "hashedPassword" not in body["data"]["user"]


def test_register_duplicate_email(client, register):
    """Test registering the same email twice."""
    register(email="dup@example.com")
    response = client.post(
        "/api/auth/register",
        json={"email": "DUP@example.com", "password": "secret123", "name": "Again"}
    )
    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "error": {"code": "CONFLICT", "message": "Email already registered"}
    }


def test_register_missing_field(client):
    """Test registration without a name."""
    response = client.post("/api/auth/register", json={"email": "a@example.com", "password": "secret123"})
    assert response.status_code == 400
    assert response.json()["error"] == {"code": "VALIDATION_ERROR", "message": "name is required"}


def test_login(client, register):
    """Test user login."""
    register(email="test2@example.com", password="testpassword123")

    response = client.post(
        "/api/auth/login",
        json={
            "email": "test2@example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 200
    assert response.json()["data"]["token"]
    assert response.json()["data"]["user"]["email"] == "test2@example.com"


def test_login_invalid_credentials(client, register):
    """Test login with invalid credentials."""
    register(email="test3@example.com")
    response = client.post(
        "/api/auth/login",
        json={
            "email": "test3@example.com",
            "password": "wrongpassword"
        }
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"

    response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"})
    assert response.status_code == 401


def test_login_suspended_user(client, register, db_session):
    register(email="suspended@example.com")
    user = db_session.query(User).filter(User.email == "suspended@example.com").one()
    user.status = UserStatus.SUSPENDED
    db_session.commit()

    response = client.post("/api/auth/login", json={"email": "suspended@example.com", "password": "secret123"})
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


def test_me(client, auth_headers):
    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["user"]["name"] == "Traveller"


def test_me_requires_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["error"] == {"code": "UNAUTHORIZED", "message": "Authentication required"}


def test_me_rejects_bad_tokens(client, register):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401

    register()
    # Valid signature, unknown user
    token = create_access_token({"sub": "999"})
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_user_tokens():
    """Test that tokens carry the user id and expire."""
    assert token_user_id(create_user_token(42, "a@example.com", "USER")) == 42
    assert token_user_id(create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-1))) is None
    assert token_user_id(create_access_token({"sub": "not-a-number"})) is None
    assert token_user_id(create_access_token({"email": "a@example.com"})) is None
    assert token_user_id("garbage") is None


def test_long_passwords_are_not_truncated():
    """Test that passwords differing after 72 bytes hash differently."""
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert verify_password(base + "a", hashed)
    assert not verify_password(base + "b", hashed)
