"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["MEDIA_DOWNLOAD_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture(autouse=True)
def database() -> Generator[None, None, None]:
    """Give every test an empty schema."""
    from mediashare.db.models import Base
    from mediashare.db.session import engine

    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def foreign_keys(database) -> Generator[None, None, None]:
    """Enforce foreign keys on the SQLite test database, as PostgreSQL does."""
    from mediashare.db.session import engine

    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")
    yield
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=OFF")


@pytest.fixture
def session(database):
    """Get a database session."""
    from mediashare.db.session import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from mediashare.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def alice(session):
    """A user named alice."""
    from mediashare.services.users import create_user

    return create_user(session, "alice", "alice@example.com", "Alice Liddell")


@pytest.fixture
def bob(session):
    """A user named bob."""
    from mediashare.services.users import create_user

    return create_user(session, "bob", "bob@example.com")
