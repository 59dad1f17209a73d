"""
Database engine and session management.

The engine (and its connection pool) is created once at startup by
``init_engine`` and shared by every request; each request gets its own
session from ``get_db_session``.
"""

import logging
from typing import Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import DatabaseConfig

logger = logging.getLogger("nutriapp.database")

# Create SQLAlchemy Base
Base = declarative_base()

# Session factory; bound to the engine by init_engine
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False, future=True)

engine: Optional[Engine] = None


def init_engine(config: DatabaseConfig, echo: bool = False, **engine_kwargs: Any) -> Engine:
    """Create the process-wide engine and bind the session factory to it."""
    global engine

    if engine is not None:
        engine.dispose()

    engine = create_engine(
        config.url,
        echo=echo,
        connect_args=config.connect_args,
        future=True,
        **engine_kwargs,
    )
    SessionLocal.configure(bind=engine)
    logger.info(f"engine_initialized dialect={engine.dialect.name} ssl={config.ssl}")
    return engine


def get_engine() -> Engine:
    if engine is None:
        raise RuntimeError("Database engine is not initialized; call init_engine() first")
    return engine


def init_database():
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables created successfully")


def dispose_engine():
    global engine
    if engine is not None:
        engine.dispose()
        engine = None


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
