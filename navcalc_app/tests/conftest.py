"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Dict, List

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from navcalc_app.models import AnchorPoint
from navcalc_app.services.unit_conversion import ConversionEngine
from navcalc_app.services.unit_registry import build_default_registry


class StaticAnchorSource:
    """In-memory anchor source; records how often it was read."""

    def __init__(self, points: List[AnchorPoint]) -> None:
        self._points = list(points)
        self.calls: Dict[str, int] = {}

    def fetch_anchor_points(self, medium: str) -> List[AnchorPoint]:
        self.calls[medium] = self.calls.get(medium, 0) + 1
        return [p for p in self._points if p.medium == medium]


def _anchor(medium: str, temp: str, salinity: str, rho: str, nu: str, source: str = "ITTC Test") -> AnchorPoint:
    return AnchorPoint(
        medium=medium,
        temperature_c=Decimal(temp),
        salinity_psu=Decimal(salinity),
        density_kg_m3=Decimal(rho),
        kinematic_viscosity_m2_s=Decimal(nu),
        source_ref=source,
    )


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database and return its path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass  # Windows may hold file; ignore cleanup failure


@pytest.fixture
def db_session(temp_db):
    """Provide a database session with initialized schema."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from navcalc_app.repositories.database import Base
    from navcalc_app.repositories.water_property_repository import WaterPropertyORM  # noqa: F401

    engine = create_engine(f"sqlite:///{temp_db}", future=True)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def registry():
    """The canonical unit registry."""
    return build_default_registry()


@pytest.fixture
def engine(registry):
    return ConversionEngine(registry)


@pytest.fixture
def simple_fresh_anchors():
    """Fresh-water anchors at 0, 10 and 20 °C (deliberately unsorted)."""
    return [
        _anchor("Fresh", "20", "0", "998.2", "0.00000100"),
        _anchor("Fresh", "0", "0", "999.8", "0.00000179"),
        _anchor("Fresh", "10", "0", "999.7", "0.00000131"),
    ]


@pytest.fixture
def ittc_anchors():
    """ITTC reference anchors for both media."""
    return [
        _anchor("Fresh", "0", "0", "999.8425", "0.000001792"),
        _anchor("Fresh", "15", "0", "999.1026", "0.000001139"),
        _anchor("Fresh", "30", "0", "995.6502", "0.000000801"),
        _anchor("Sea", "0", "35", "1028.106", "0.000001829"),
        _anchor("Sea", "15", "35", "1025.970", "0.000001160"),
        _anchor("Sea", "30", "35", "1021.830", "0.000000783"),
    ]


@pytest.fixture
def static_source():
    """Factory for StaticAnchorSource instances."""
    return StaticAnchorSource
