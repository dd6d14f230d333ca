import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "warning")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base, get_db
from app.main import app
from app.models import user, product  # noqa: F401

REGISTER_PAYLOAD = {
    "firstname": "John",
    "lastname": "Doe",
    "email": "john.doe@example.com",
    "password": "JohnDoe@2023",
    "password_confirmation": "JohnDoe@2023",
}


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register_payload():
    return dict(REGISTER_PAYLOAD)


@pytest.fixture
def auth_headers(client):
    """Registers (if needed) and logs in a user, returning bearer headers."""

    def _headers(email: str = REGISTER_PAYLOAD["email"]) -> dict:
        payload = dict(REGISTER_PAYLOAD, email=email)
        client.post("/auth/register", json=payload)
        r = client.post("/auth/login", json={"email": email, "password": payload["password"]})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['data']['access_token']}"}

    return _headers
