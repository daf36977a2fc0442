"""Database session management."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mediashare.config import settings
from mediashare.db.models import Base
from mediashare.errors import ConflictError, StoreUnavailableError


def _engine_options(database_url: str) -> dict[str, Any]:
    """Engine keyword arguments suited to the database backend."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live in a single connection
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    **_engine_options(settings.database_url),
)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_session() -> Generator[Session, None, None]:
    """Get a database session (for FastAPI dependency injection)."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
    """Get a database session as a context manager (for use outside of FastAPI)."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(create_tables: bool | None = None) -> None:
    """Verify connectivity and optionally create missing tables."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    if create_tables is None:
        create_tables = settings.auto_create_tables
    if create_tables:
        Base.metadata.create_all(bind=engine)


def commit(session: Session) -> None:
    """Commit, reporting constraint and driver failures as domain errors."""
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError("Write rejected by a store constraint") from e
    except DBAPIError as e:
        session.rollback()
        raise StoreUnavailableError("Store unavailable") from e
