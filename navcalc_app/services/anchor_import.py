"""
Import water-property anchor tables from Excel or CSV.

Expected columns: Temperature (°C), Density (kg/m³), Kinematic viscosity (m²/s);
optional Medium, Salinity (PSU) and Source. Header names are flexible
(e.g. "Temp C", "rho kg/m3", "nu m2/s"). When Medium is absent it is derived
from salinity, and when both are absent the rows are treated as seawater.
"""

from __future__ import annotations

import re
from decimal import Decimal
from pathlib import Path
from typing import List, Set, Tuple

import pandas as pd

from navcalc_app.config.water_reference import DEFAULT_SALINITY_PSU, ITTC_REFERENCE, MEDIUM_FRESH, MEDIUM_SEA
from navcalc_app.models import AnchorPoint
from navcalc_app.services.numeric import as_decimal
from navcalc_app.services.water_properties import classify_medium

# Column name variants (lowercase, strip; \n in headers normalized to space)
_MEDIUM_ALIASES = ("medium", "water", "water type", "type")
_TEMPERATURE_ALIASES = (
    "temperature",
    "temperature (c)",
    "temperature (°c)",
    "temperature c",
    "temperature_c",
    "temp",
    "temp c",
    "temp (c)",
    "t",
)
_SALINITY_ALIASES = ("salinity", "salinity (psu)", "salinity psu", "salinity_psu", "s", "psu")
_DENSITY_ALIASES = (
    "density",
    "density (kg/m3)",
    "density (kg/m³)",
    "density kg/m3",
    "density_kg_m3",
    "rho",
    "rho kg/m3",
    "rho (kg/m3)",
)
_VISCOSITY_ALIASES = (
    "viscosity",
    "kinematic viscosity",
    "kinematic viscosity (m2/s)",
    "kinematic viscosity (m²/s)",
    "kinematic_viscosity_m2_s",
    "nu",
    "nu m2/s",
    "nu (m2/s)",
)
_SOURCE_ALIASES = ("source", "source ref", "source_ref", "reference", "citation")

_REQUIRED = {"temperature_c", "density_kg_m3", "kinematic_viscosity_m2_s"}


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename columns to canonical names if they match known aliases."""
    rename = {}
    for c in df.columns:
        key = str(c).strip().lower().replace("\n", " ").replace("\r", " ").replace("\t", " ")
        key = re.sub(r"[^\w\s.()/°³²-]", "", key)
        key = re.sub(r"\s+", " ", key).strip()
        if key in _MEDIUM_ALIASES:
            rename[c] = "medium"
        elif key in _TEMPERATURE_ALIASES:
            rename[c] = "temperature_c"
        elif key in _SALINITY_ALIASES:
            rename[c] = "salinity_psu"
        elif key in _DENSITY_ALIASES:
            rename[c] = "density_kg_m3"
        elif key in _VISCOSITY_ALIASES:
            rename[c] = "kinematic_viscosity_m2_s"
        elif key in _SOURCE_ALIASES:
            rename[c] = "source_ref"
        elif "viscosity" in key:
            rename[c] = "kinematic_viscosity_m2_s"
        elif "density" in key:
            rename[c] = "density_kg_m3"
    return df.rename(columns=rename)


def _cell_decimal(val) -> Decimal | None:
    """Decimal for a (string-typed) cell; None for NaN, blanks and non-numeric text."""
    if val is None or (isinstance(val, float) and pd.isna(val)):
        return None
    if isinstance(val, str) and not val.strip():
        return None
    try:
        number = as_decimal(val)
    except ValueError:
        return None
    return number if number.is_finite() else None


def _normalize_medium(raw, salinity: Decimal | None) -> str:
    if isinstance(raw, str) and raw.strip():
        text = raw.strip().lower()
        if text.startswith("fresh"):
            return MEDIUM_FRESH
        if text.startswith("sea") or text.startswith("salt"):
            return MEDIUM_SEA
        raise ValueError(f"Unknown medium: {raw!r}")
    if salinity is not None:
        return classify_medium(salinity)
    return MEDIUM_SEA


def _parse_dataframe(df: pd.DataFrame) -> List[AnchorPoint]:
    has_medium = "medium" in df.columns
    has_salinity = "salinity_psu" in df.columns
    has_source = "source_ref" in df.columns

    points: List[AnchorPoint] = []
    seen: Set[Tuple[str, Decimal]] = set()
    for _, r in df.iterrows():
        temperature = _cell_decimal(r["temperature_c"])
        density = _cell_decimal(r["density_kg_m3"])
        viscosity = _cell_decimal(r["kinematic_viscosity_m2_s"])
        if temperature is None or density is None or viscosity is None:
            continue
        if density <= 0 or viscosity <= 0:
            continue
        salinity = _cell_decimal(r["salinity_psu"]) if has_salinity else None
        medium = _normalize_medium(r["medium"] if has_medium else None, salinity)
        if salinity is None:
            salinity = Decimal(0) if medium == MEDIUM_FRESH else Decimal(DEFAULT_SALINITY_PSU)

        key = (medium, temperature)
        if key in seen:
            raise ValueError(f"Duplicate anchor point for {medium} at {temperature}°C")
        seen.add(key)

        source = r["source_ref"] if has_source else None
        points.append(
            AnchorPoint(
                medium=medium,
                temperature_c=temperature,
                salinity_psu=salinity,
                density_kg_m3=density,
                kinematic_viscosity_m2_s=viscosity,
                source_ref=str(source).strip() if isinstance(source, str) and source.strip() else ITTC_REFERENCE,
            )
        )
    points.sort(key=lambda p: (p.medium, p.temperature_c))
    return points


def parse_anchor_file(file_path: str | Path) -> List[AnchorPoint]:
    """
    Parse an anchor-point table from Excel (.xlsx/.xls) or CSV.

    Returns AnchorPoints ordered by medium, then temperature.
    Raises ValueError if required columns are missing or no valid rows remain.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path, engine="openpyxl", dtype=str)
    elif path.suffix.lower() == ".csv":
        df = pd.read_csv(path, dtype=str)
    else:
        raise ValueError(f"Unsupported format: {path.suffix}. Use .xlsx or .csv.")

    df = _normalize_columns(df)
    missing = _REQUIRED - set(df.columns)
    if missing:
        raise ValueError(
            f"Missing columns: {sorted(missing)}. Expected at least: Temperature, Density, "
            f"Kinematic viscosity. Found: {list(df.columns)}"
        )
    points = _parse_dataframe(df)
    if not points:
        raise ValueError("No valid numeric rows found in the file.")
    return points
