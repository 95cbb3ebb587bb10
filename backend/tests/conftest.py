import asyncio
import os

# Settings are validated at import time, so these must be set before app is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import httpx
import pytest
from httpx import ASGITransport
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models import User, UserRole
from app.schemas import UserRegister
from app.services import AuthService


class CompatibleTestClient:
    """Synchronous test client built on httpx's ASGITransport"""
    def __init__(self, app, raise_app_exceptions=True):
        self.app = app
        self.transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        self.base_url = "http://testserver"

    def request(self, method, url, **kwargs):
        async def _request():
            async with httpx.AsyncClient(transport=self.transport, base_url=self.base_url) as client:
                return await client.request(method, url, **kwargs)
        return asyncio.run(_request())

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def patch(self, url, **kwargs):
        return self.request("PATCH", url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request("DELETE", url, **kwargs)


TestClient = CompatibleTestClient

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create a test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Create a test client"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def server_error_client(client):
    """Client that returns the app's 500 response instead of re-raising the error"""
    return TestClient(app, raise_app_exceptions=False)


@pytest.fixture
def register_user(client):
    """Register through the API and return the parsed response body"""
    def _register(email="test@example.com", password="testpassword123", **extra):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": password, **extra}
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def make_user(db):
    """Create users directly through the auth service"""
    def _make_user(email="owner@example.com", password="ownerpassword", name=None, role=UserRole.USER):
        user, _ = AuthService(db).register(UserRegister(email=email, password=password, name=name))
        if role != UserRole.USER:
            user.role = role
            db.commit()
        return user
    return _make_user


@pytest.fixture
def admin_token(register_user, db):
    """Register a user, promote them to admin and return their token"""
    body = register_user(email="admin@example.com", password="adminpassword")
    admin = db.get(User, body["user"]["id"])
    admin.role = UserRole.ADMIN
    db.commit()
    return body["token"]
