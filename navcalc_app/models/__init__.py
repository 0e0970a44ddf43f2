"""
Domain models for the navcalc measurement subsystem.

These are pure Python/domain classes, separate from ORM mappings.
"""

from navcalc_app.models.units import (
    Category,
    ConversionFactorEntry,
    Unit,
    UnitInfo,
    UnitSystem,
    UnitSystemInfo,
)
from navcalc_app.models.water import AnchorPoint, WaterProperties

__all__ = [
    "Unit",
    "Category",
    "UnitSystem",
    "ConversionFactorEntry",
    "UnitSystemInfo",
    "UnitInfo",
    "AnchorPoint",
    "WaterProperties",
]
