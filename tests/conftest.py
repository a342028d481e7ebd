"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For in-memory collaborators, see tests/mocks/matching_mocks.py
"""

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config_loader import MatchingConfig
from database.models import Base


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database session (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def matching_config():
    """Default matching configuration (production constants)."""
    return MatchingConfig()


@pytest.fixture
def sqlite_engine():
    """
    In-memory SQLite engine with every matching table created.

    StaticPool keeps the single in-memory database alive across sessions.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
