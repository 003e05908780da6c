"""Test configuration and fixtures for the DailyVerse backend tests."""

import os
import sys
import pathlib
import pytest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

BACKEND_DIR = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

# Set test environment before importing backend modules
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test_secret_key"
os.environ["TESTING_MODE"] = "True"
os.environ["SLACK_TOKEN"] = ""
os.environ["SMTP_HOST"] = ""
os.environ["NEWS_API_KEY"] = "test_news_key"

TEST_PASSWORD = "Secret#123"


@pytest.fixture(autouse=True, scope="session")
def anyio_backend():  # pragma: no cover
    return "asyncio"


@pytest.fixture(autouse=True)
def test_engine():
    """A fresh in-memory database for every test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Ensure models are imported so tables are registered in SQLModel.metadata
    import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_session(test_engine):
    """Create a test database session."""
    with Session(test_engine) as session:
        yield session


@pytest.fixture
def override_get_session(test_session):
    """Override the get_session dependency for testing."""

    def _override_get_session():
        yield test_session

    return _override_get_session


@pytest.fixture(autouse=True)
def reset_rate_limits():
    from routes.ratelimit import auth_limiter

    auth_limiter.buckets.clear()
    yield
    auth_limiter.buckets.clear()


@pytest.fixture
def test_app(override_get_session):
    """Create a test FastAPI application, migrations are skipped."""
    with patch("app.update_database"):
        from app import create_app

        app = create_app()
        from models.common import get_session

        app.dependency_overrides[get_session] = override_get_session
        yield app
        app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client."""
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def make_user(test_session):
    """Factory storing a verified user with the test password."""
    from models.users import User
    from services.security import hash_password

    password_hash = hash_password(TEST_PASSWORD)

    def _make_user(username: str, email: str | None = None, **fields) -> User:
        user = User(
            email=email or f"{username.lower()}@example.com",
            username=username,
            username_lower=username.lower(),
            password_hash=password_hash,
            country=fields.pop("country", "Norway"),
            city=fields.pop("city", "Trondheim"),
            is_verified=fields.pop("is_verified", True),
            **fields,
        )
        test_session.add(user)
        test_session.commit()
        test_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user("Alice", "alice@x.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob", "bob@x.com")


@pytest.fixture
def login_as(test_app):
    """Authenticate the following requests as the given email."""
    from routes.deps import current_email

    def _login_as(email: str):
        test_app.dependency_overrides[current_email] = lambda: email

    yield _login_as
    test_app.dependency_overrides.pop(current_email, None)
