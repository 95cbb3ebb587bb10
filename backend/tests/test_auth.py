import pytest
from fastapi import status

from app.models import User


def test_register_user(client):
    """Test user registration"""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "testpassword123", "name": "Test User"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "test@example.com"
    assert body["user"]["name"] == "Test User"
    assert body["user"]["role"] == "user"
    assert body["user"]["subscription_tier"] == "free"
    assert body["user"]["tokens_limit"] == 50000
    assert body["user"]["tokens_used"] == 0
    assert body["user"]["is_active"] is True
    assert body["user"]["email_verified"] is False
    assert body["user"]["last_login_at"] is not None


def test_register_sets_session_cookie(client):
    """Test that registration hands the token to the browser as a cookie"""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert response.cookies.get("token") == response.json()["token"]
    assert "httponly" in response.headers["set-cookie"].lower()


def test_register_never_exposes_password_hash(client):
    """Test that the outward user representation has no password hash"""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert "hashed_password" not in response.json()["user"]
    assert "testpassword123" not in response.text


def test_register_normalizes_email_case(client, db):
    """Test that emails are stored lower-cased"""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "Mixed.Case@Example.COM", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["user"]["email"] == "mixed.case@example.com"


def test_register_duplicate_email(client):
    """Test registration with duplicate email"""
    client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )

    response = client.post(
        "/api/v1/auth/register",
        json={"email": "TEST@example.com", "password": "anotherpassword"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Email already registered"


@pytest.mark.parametrize("payload", [
    {"email": "not-an-email", "password": "testpassword123"},
    {"email": "test@example.com", "password": "short"},
    {"email": "test@example.com", "password": "testpassword123", "name": "A"},
    {"email": "test@example.com", "password": "testpassword123", "name": "x" * 101},
    {"password": "testpassword123"},
])
def test_register_rejects_invalid_input(client, payload):
    """Test that malformed registrations fail with field-level detail"""
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    errors = response.json()["detail"]
    assert isinstance(errors, list)
    assert all("loc" in error and "msg" in error for error in errors)


def test_login(client, register_user):
    """Test user login"""
    registered = register_user()

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["token"]
    assert response.json()["user"]["id"] == registered["user"]["id"]
    assert response.cookies.get("token") == response.json()["token"]


def test_login_invalid_credentials(client, register_user):
    """Test login with a wrong password"""
    register_user()

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "test@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_email_uses_same_message(client):
    """Test that an unknown email is indistinguishable from a bad password"""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid credentials"


def test_login_disabled_account(client, db, register_user):
    """Test that a disabled account cannot log in even with the right password"""
    registered = register_user()
    user = db.get(User, registered["user"]["id"])
    user.is_active = False
    db.commit()

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Account is disabled"


def test_me_with_bearer_token(client, register_user):
    """Test resolving the current user from the Authorization header"""
    registered = register_user()

    response = client.get(
        "/api/v1/auth/me",
        headers={"Authorization": f"Bearer {registered['token']}"}
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user"]["id"] == registered["user"]["id"]
    assert "hashed_password" not in response.json()["user"]


def test_me_with_cookie(client, register_user):
    """Test resolving the current user from the session cookie"""
    registered = register_user()

    response = client.get(
        "/api/v1/auth/me",
        headers={"Cookie": f"token={registered['token']}"}
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user"]["email"] == "test@example.com"


def test_me_requires_token(client):
    """Test that /me rejects anonymous requests"""
    response = client.get("/api/v1/auth/me")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_me_rejects_tampered_token(client, register_user):
    """Test that a token with a broken signature is rejected"""
    token = register_user()["token"]
    tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")

    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {tampered}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_me_rejects_disabled_user(client, db, register_user):
    """Test that tokens stop working once the account is disabled"""
    registered = register_user()
    user = db.get(User, registered["user"]["id"])
    user.is_active = False
    db.commit()

    response = client.get(
        "/api/v1/auth/me",
        headers={"Authorization": f"Bearer {registered['token']}"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_logout_clears_cookie(client):
    """Test that logout expires the session cookie"""
    response = client.post("/api/v1/auth/logout")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Logged out successfully"
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "max-age=0" in set_cookie.lower()
