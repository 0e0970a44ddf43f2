from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True)
class AnchorPoint:
    """
    Empirical water-property record used as interpolation input.

    Owned by the persistence layer; one record per (medium, temperature).
    """
    id: int | None = None
    medium: str = "Sea"
    temperature_c: Decimal = Decimal("0")
    salinity_psu: Decimal = Decimal("0")
    density_kg_m3: Decimal = Decimal("0")
    kinematic_viscosity_m2_s: Decimal = Decimal("0")
    source_ref: str = ""


@dataclass(frozen=True, slots=True)
class WaterProperties:
    """Result of a water-property lookup. Never mutated after construction."""
    medium: str
    temperature_c: Decimal
    salinity_psu: Decimal
    density: Decimal
    kinematic_viscosity_m2_s: Decimal
    is_interpolated: bool
    source_ref: str
    units: str = "SI"
