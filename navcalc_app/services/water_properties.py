"""
Water density and kinematic viscosity from ITTC 7.5-02-01-03 anchor points.

Lookup rules:
  - salinity < 1 PSU is fresh water, anything else is seawater;
  - temperatures outside 0–30 °C (inclusive bounds) are rejected;
  - an anchor at exactly the requested temperature is returned as stored;
  - otherwise the nearest anchors strictly below and above are linearly
    interpolated, in float, and the result stored back as Decimal.

The anchor source is a collaborator (normally WaterPropertyRepository); this
module never writes to it.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Any, Iterable, List, Protocol

from navcalc_app.config.water_reference import (
    DEFAULT_SALINITY_PSU,
    FRESH_WATER_MAX_SALINITY_PSU,
    ITTC_REFERENCE,
    MAX_TEMPERATURE_C,
    MEDIUM_FRESH,
    MEDIUM_SEA,
    MIN_TEMPERATURE_C,
)
from navcalc_app.models import AnchorPoint, WaterProperties
from navcalc_app.services.errors import AnchorPointLookupError, RangeError
from navcalc_app.services.numeric import as_decimal, plain

_LOG = logging.getLogger(__name__)


class AnchorPointSource(Protocol):
    def fetch_anchor_points(self, medium: str) -> Iterable[AnchorPoint]:
        ...


def classify_medium(salinity_psu: Any) -> str:
    """'Fresh' below 1 PSU, else 'Sea'. RangeError for a NaN salinity."""
    salinity = as_decimal(salinity_psu)
    if salinity.is_nan():
        raise RangeError(f"Salinity {salinity_psu!r} is not a number")
    return MEDIUM_FRESH if salinity < FRESH_WATER_MAX_SALINITY_PSU else MEDIUM_SEA


def _lerp(x: float, x1: float, x2: float, y1: float, y2: float) -> float:
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


class WaterPropertyService:
    """Stateless lookup over an anchor-point source."""

    def __init__(self, source: AnchorPointSource) -> None:
        self._source = source

    def get_anchor_points(self, medium: str) -> List[AnchorPoint]:
        """Anchor points for a medium, ascending by temperature."""
        return sorted(self._source.fetch_anchor_points(medium), key=lambda p: p.temperature_c)

    def get_all_anchor_points(self) -> List[AnchorPoint]:
        """All anchor points ordered by medium, then temperature."""
        fetch_all = getattr(self._source, "fetch_all_anchor_points", None)
        if fetch_all is not None:
            points = list(fetch_all())
        else:
            points = [
                *self._source.fetch_anchor_points(MEDIUM_FRESH),
                *self._source.fetch_anchor_points(MEDIUM_SEA),
            ]
        return sorted(points, key=lambda p: (p.medium, p.temperature_c))

    def get_water_properties(
        self,
        temperature_c: Any,
        salinity_psu: Any = DEFAULT_SALINITY_PSU,
    ) -> WaterProperties:
        """
        Density (kg/m³) and kinematic viscosity (m²/s) at a temperature and salinity.

        Raises RangeError outside 0–30 °C and AnchorPointLookupError when the
        source has no anchors for the medium or none bracketing the temperature.
        """
        temperature = as_decimal(temperature_c)
        salinity = as_decimal(salinity_psu)
        medium = classify_medium(salinity)

        if temperature.is_nan() or temperature < MIN_TEMPERATURE_C or temperature > MAX_TEMPERATURE_C:
            raise RangeError(
                f"Temperature {plain(temperature)}°C is outside supported range "
                f"({MIN_TEMPERATURE_C}-{MAX_TEMPERATURE_C}°C)"
            )

        anchors = self.get_anchor_points(medium)
        if not anchors:
            raise AnchorPointLookupError(f"No anchor points found for medium: {medium}")

        exact = next((p for p in anchors if p.temperature_c == temperature), None)
        if exact is not None:
            _LOG.debug(
                "Exact match found for %s at %s°C: rho=%s, nu=%s",
                medium,
                plain(temperature),
                exact.density_kg_m3,
                exact.kinematic_viscosity_m2_s,
            )
            return WaterProperties(
                medium=exact.medium,
                temperature_c=exact.temperature_c,
                salinity_psu=exact.salinity_psu,
                density=exact.density_kg_m3,
                kinematic_viscosity_m2_s=exact.kinematic_viscosity_m2_s,
                is_interpolated=False,
                source_ref=exact.source_ref,
            )

        lower = next((p for p in reversed(anchors) if p.temperature_c < temperature), None)
        upper = next((p for p in anchors if p.temperature_c > temperature), None)
        if lower is None or upper is None:
            raise AnchorPointLookupError(
                f"Cannot interpolate: missing anchor points for {medium} at {plain(temperature)}°C"
            )

        x = float(temperature)
        x1 = float(lower.temperature_c)
        x2 = float(upper.temperature_c)
        density = _lerp(x, x1, x2, float(lower.density_kg_m3), float(upper.density_kg_m3))
        viscosity = _lerp(
            x,
            x1,
            x2,
            float(lower.kinematic_viscosity_m2_s),
            float(upper.kinematic_viscosity_m2_s),
        )

        _LOG.debug(
            "Interpolated %s at %s°C between %s°C and %s°C: rho=%r, nu=%r",
            medium,
            plain(temperature),
            plain(lower.temperature_c),
            plain(upper.temperature_c),
            density,
            viscosity,
        )

        return WaterProperties(
            medium=medium,
            temperature_c=temperature,
            salinity_psu=salinity,
            density=Decimal(repr(density)),
            kinematic_viscosity_m2_s=Decimal(repr(viscosity)),
            is_interpolated=True,
            source_ref=(
                f"{ITTC_REFERENCE} (interpolated between "
                f"{plain(lower.temperature_c)}°C and {plain(upper.temperature_c)}°C)"
            ),
        )

    async def aget_water_properties(
        self,
        temperature_c: Any,
        salinity_psu: Any = DEFAULT_SALINITY_PSU,
    ) -> WaterProperties:
        """
        Awaitable lookup; the source read runs in a worker thread.

        Cancelling the awaiting task abandons the result; nothing is written,
        so there is nothing to roll back.
        """
        return await asyncio.to_thread(self.get_water_properties, temperature_c, salinity_psu)
