"""
Repository layer for persistence (SQLite via SQLAlchemy).
"""

from navcalc_app.repositories.database import Base, SessionLocal, get_db, init_database
from navcalc_app.repositories.water_property_repository import WaterPropertyRepository

__all__ = [
    "SessionLocal",
    "Base",
    "get_db",
    "init_database",
    "WaterPropertyRepository",
]
