"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and gives every
test its own throw-away SQLite database bound through init_engine.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from sqlalchemy import event

from app.config import DatabaseConfig
from domain.models import Base, SessionLocal, dispose_engine, init_engine


@pytest.fixture(scope="function")
def engine(tmp_path):
    """
    Engine on a fresh SQLite file for the test.

    Foreign keys are switched on so ON DELETE CASCADE behaves as on PostgreSQL.
    """
    config = DatabaseConfig(
        url=f"sqlite:///{tmp_path / 'nutriapp-test.db'}",
        connect_args={"check_same_thread": False},
    )
    engine = init_engine(config)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        dispose_engine()


@pytest.fixture(scope="function")
def db_session(engine):
    """
    Session for arranging data and checking results.

    Route handlers open their own sessions on the same engine, so assertions
    after an API call should query rather than rely on objects already loaded.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(engine):
    """TestClient on the app; the engine fixture has already bound SessionLocal"""
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
