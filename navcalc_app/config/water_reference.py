"""
Reference water-property data from ITTC Recommended Procedure 7.5-02-01-03
(Fresh Water and Seawater Properties, 2011).

Anchor points are stored as decimal strings so they reach the database
unchanged; the interpolator only ever reads them back.
"""

from __future__ import annotations

ITTC_REFERENCE = "ITTC 7.5-02-01-03"

# --- Medium classification ---
MEDIUM_FRESH = "Fresh"
MEDIUM_SEA = "Sea"
# Salinity (PSU) below which water is treated as fresh
FRESH_WATER_MAX_SALINITY_PSU = 1

# Default salinity for lookups (standard seawater)
DEFAULT_SALINITY_PSU = 35

# --- Supported temperature domain (°C), bounds inclusive ---
MIN_TEMPERATURE_C = 0
MAX_TEMPERATURE_C = 30

# Anchor points at p = 0.101325 MPa.
# (medium, temperature °C, salinity PSU, density kg/m³, kinematic viscosity m²/s, source)
ITTC_ANCHOR_POINTS = [
    # Freshwater (SA = 0)
    ("Fresh", "0", "0", "999.8425", "0.000001792", "ITTC 7.5-02-01-03 Table 1"),
    ("Fresh", "15", "0", "999.1026", "0.000001139", "ITTC 7.5-02-01-03 Table 1"),
    ("Fresh", "30", "0", "995.6502", "0.000000801", "ITTC 7.5-02-01-03 Table 1"),
    # Standard seawater (SA ≈ 35 g/kg)
    ("Sea", "0", "35", "1028.106", "0.000001829", "ITTC 7.5-02-01-03 Table 2"),
    ("Sea", "15", "35", "1025.970", "0.000001160", "ITTC 7.5-02-01-03 Table 2"),
    ("Sea", "30", "35", "1021.830", "0.000000783", "ITTC 7.5-02-01-03 Table 2"),
]

# --- Closed-form estimates (services.water_formulas) ---
# Standard air density at sea level (kg/m³)
AIR_DENSITY_KG_M3 = 1.225
# Standard gravity (m/s²)
GRAVITY_M_S2 = 9.80665

# Clamp ranges for the closed-form estimates
MIN_VISCOSITY_M2_S = 0.8e-6
MAX_VISCOSITY_M2_S = 2.0e-6
MIN_DENSITY_KG_M3 = 995.0
MAX_DENSITY_KG_M3 = 1030.0
