"""
Closed-form water-property estimates for resistance calculations.

These are quick approximations used where no anchor-point table is
available; results are clamped to physically sensible ranges. Prefer
WaterPropertyService when the ITTC tables are loaded.
"""

from __future__ import annotations

import logging

from navcalc_app.config.water_reference import (
    AIR_DENSITY_KG_M3,
    DEFAULT_SALINITY_PSU,
    GRAVITY_M_S2,
    MAX_DENSITY_KG_M3,
    MAX_VISCOSITY_M2_S,
    MIN_DENSITY_KG_M3,
    MIN_VISCOSITY_M2_S,
)

_LOG = logging.getLogger(__name__)

# Reference point of the linear density model: 1025 kg/m³ at 15 °C, 35 ppt
_RHO_REF_KG_M3 = 1025.0
_T_REF_C = 15.0


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def kinematic_viscosity(temp_c: float, salinity_ppt: float = DEFAULT_SALINITY_PSU) -> float:
    """
    Kinematic viscosity ν (m²/s).

    ν = (1.7915 - 0.0352·T + 0.0004·T²)·1e-6, scaled by 1 + (S - 35)·1e-4,
    clamped to [0.8e-6, 2.0e-6].
    """
    base_nu = (1.7915 - 0.0352 * temp_c + 0.0004 * temp_c * temp_c) * 1e-6
    nu = base_nu * (1.0 + (salinity_ppt - 35.0) * 0.0001)
    nu = _clamp(nu, MIN_VISCOSITY_M2_S, MAX_VISCOSITY_M2_S)
    _LOG.debug("Calculated nu = %r m²/s from T = %s°C, S = %s ppt", nu, temp_c, salinity_ppt)
    return nu


def water_density(temp_c: float, salinity_ppt: float = DEFAULT_SALINITY_PSU) -> float:
    """Density ρ (kg/m³): 1025 - 0.2·(T - 15) + 0.7·(S - 35), clamped to [995, 1030]."""
    rho = _RHO_REF_KG_M3 - 0.2 * (temp_c - _T_REF_C) + 0.7 * (salinity_ppt - 35.0)
    rho = _clamp(rho, MIN_DENSITY_KG_M3, MAX_DENSITY_KG_M3)
    _LOG.debug("Calculated rho = %r kg/m³ from T = %s°C, S = %s ppt", rho, temp_c, salinity_ppt)
    return rho


def air_density() -> float:
    """Standard air density at sea level (kg/m³)."""
    return AIR_DENSITY_KG_M3


def gravity() -> float:
    """Standard gravity (m/s²)."""
    return GRAVITY_M_S2
