"""
Error taxonomy for unit conversion and water-property lookups.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MeasurementError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ConfigurationError(MeasurementError):
    """Registry data is incomplete or inconsistent. Fatal at startup."""


class NotFoundError(MeasurementError):
    """Unknown unit-system or category identifier."""


class RangeError(MeasurementError):
    """Requested temperature outside the supported domain."""


class AnchorPointLookupError(MeasurementError, LookupError):
    """No anchor points for a medium, or no bounding anchors for a temperature."""
