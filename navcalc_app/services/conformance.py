"""
Shared conformance vectors for unit conversion.

Every engine that claims to implement the canonical unit tables (this one,
and the one embedded in the client application) must reproduce these
results. Expected values follow from the exact definitions in
config.unit_systems; they are kept as strings so no binary rounding enters
the reference.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Sequence

from navcalc_app.services.unit_conversion import ConversionEngine


@dataclass(frozen=True, slots=True)
class ConformanceVector:
    value: str
    from_system: str
    to_system: str
    category: str
    expected: str


@dataclass(frozen=True, slots=True)
class ConformanceFailure:
    vector: ConformanceVector
    actual: Any
    relative_error: float


CONFORMANCE_VECTORS: Sequence[ConformanceVector] = (
    # Identity
    ConformanceVector("123.456", "SI", "SI", "Length", "123.456"),
    ConformanceVector("-7.5", "Imperial", "Imperial", "Density", "-7.5"),
    # Length
    ConformanceVector("10", "SI", "Imperial", "Length", "32.808398950131235"),
    ConformanceVector("32.8084", "Imperial", "SI", "Length", "10.00000032"),
    ConformanceVector("0", "SI", "Imperial", "Length", "0"),
    # Mass
    ConformanceVector("1000", "SI", "Imperial", "Mass", "2204.6226218487759"),
    ConformanceVector("1", "Imperial", "SI", "Mass", "0.45359237"),
    # Area
    ConformanceVector("100", "SI", "Imperial", "Area", "1076.3910416709721"),
    ConformanceVector("1", "Imperial", "SI", "Area", "0.09290304"),
    # Volume
    ConformanceVector("1", "SI", "Imperial", "Volume", "35.314666721488592"),
    ConformanceVector("1", "Imperial", "SI", "Volume", "0.028316846592"),
    # Density
    ConformanceVector("1025", "SI", "Imperial", "Density", "63.988659590548224"),
    ConformanceVector("1", "Imperial", "SI", "Density", "16.018463373960142"),
    # Moment of inertia
    ConformanceVector("1", "SI", "Imperial", "MomentOfInertia", "115.86176745895206"),
    ConformanceVector("1", "Imperial", "SI", "MomentOfInertia", "0.0086309748412416"),
    # Unregistered system: value passes through unchanged
    ConformanceVector("42", "SI", "Nautical", "Length", "42"),
)


def _relative_error(actual: Decimal, expected: Decimal) -> float:
    if expected == 0:
        return abs(float(actual))
    return abs(float((actual - expected) / expected))


def check_conformance(
    engine: ConversionEngine,
    vectors: Sequence[ConformanceVector] = CONFORMANCE_VECTORS,
    rel_tol: float = 1e-6,
) -> List[ConformanceFailure]:
    """Run the vectors through engine.convert; return the ones that disagree."""
    failures: List[ConformanceFailure] = []
    for vector in vectors:
        actual = engine.convert(Decimal(vector.value), vector.from_system, vector.to_system, vector.category)
        error = _relative_error(Decimal(actual), Decimal(vector.expected))
        if math.isnan(error) or error > rel_tol:
            failures.append(ConformanceFailure(vector, actual, error))
    return failures
