"""
Pytest configuration and fixtures for AgencyHQ API tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from agencyhq.database import Base, get_db
from agencyhq.limiter import limiter
from agencyhq.main import app
from agencyhq.models import Client
from agencyhq.models.user import User
from agencyhq.auth import get_password_hash, create_access_token

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


def make_user(db, email, password="testpassword123", role="admin", display_name=None):
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        display_name=display_name,
        role=role,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def admin_user(db):
    """Agency staff account."""
    return make_user(db, "admin@agency.com", display_name="Agency Admin")


@pytest.fixture(scope="function")
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_access_token(admin_user.id)}"}


@pytest.fixture(scope="function")
def brand(db):
    """A managed client whose portal login is owner@brand.com."""
    record = Client(company_name="Acme Coffee", user_email="owner@brand.com", status="active")
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture(scope="function")
def client_user(db):
    """Client portal account linked to ``brand`` by email."""
    return make_user(db, "owner@brand.com", role="client", display_name="Brand Owner")


@pytest.fixture(scope="function")
def client_headers(client_user):
    return {"Authorization": f"Bearer {create_access_token(client_user.id)}"}
