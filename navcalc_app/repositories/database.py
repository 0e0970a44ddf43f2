"""
SQLAlchemy database setup for the navcalc anchor-point store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

_LOG = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base declarative class for ORM models."""

    pass


# Will be assigned a sessionmaker instance by init_database at startup
SessionLocal: sessionmaker | None = None


def get_db() -> Generator[Session, None, None]:
    """Provide a SQLAlchemy session."""
    if SessionLocal is None:
        raise RuntimeError("SessionLocal is not initialized")
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_database(db_path: Path | str) -> sessionmaker:
    """
    Initialize the SQLite database, create tables, and configure SessionLocal.

    Call once at startup; ":memory:" gives a throwaway in-memory database.
    """
    # Import ORM models so their metadata is registered on Base
    from .water_property_repository import WaterPropertyORM  # noqa: F401

    url = "sqlite://" if str(db_path) == ":memory:" else f"sqlite:///{db_path}"
    engine = create_engine(url, future=True, echo=False)
    Base.metadata.create_all(bind=engine)
    _LOG.debug("Database schema ready at %s", db_path)

    global SessionLocal
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )
    return SessionLocal
