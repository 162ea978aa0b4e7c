"""
Pytest fixtures for DevConnector API tests.
Uses in-memory SQLite, provides test user and auth token.
"""
import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.dependencies import get_db
from backend.app.core.security import create_access_token, get_password_hash, gravatar_url
from backend.app.models.user import User
from backend.app.models.profile import Profile

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app (and its lifespan) use our test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def make_token(user: User) -> str:
    return create_access_token(data={"sub": str(user.id), "email": user.email})


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_user(db_session):
    """Create a test user in the DB."""
    user = User(
        id=1,
        name="Test User",
        email="test@example.com",
        hashed_password=get_password_hash("testpass123"),
        avatar=gravatar_url("test@example.com"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    user = User(
        id=2,
        name="Other Dev",
        email="other@example.com",
        hashed_password=get_password_hash("otherpass123"),
        avatar=gravatar_url("other@example.com"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user_with_profile(db_session, test_user):
    """Test user with a minimal profile and no embedded entries."""
    profile = Profile(
        user_id=test_user.id,
        status="Developer",
        skills=["python"],
        social={},
        experience=[],
        education=[],
    )
    db_session.add(profile)
    db_session.commit()
    return test_user


@pytest.fixture
def auth_headers(test_user):
    """Bearer token for test user."""
    return {"Authorization": f"Bearer {make_token(test_user)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {make_token(other_user)}"}


@pytest.fixture
def client(db_session, test_user):
    """TestClient with DB and test user pre-seeded."""
    return TestClient(app)
