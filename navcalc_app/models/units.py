from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import List, Mapping, Tuple


def _empty_names() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Unit:
    """One unit of measurement; factor/base_unit only set for non-base units."""
    id: str
    symbol: str
    is_base: bool = False
    names: Mapping[str, str] = field(default_factory=_empty_names)
    plural_names: Mapping[str, str] = field(default_factory=_empty_names)
    conversion_factor: Decimal | None = None
    base_unit: str | None = None


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    names: Mapping[str, str] = field(default_factory=_empty_names)
    units: Tuple[Unit, ...] = ()

    @property
    def base_units(self) -> Tuple[Unit, ...]:
        return tuple(u for u in self.units if u.is_base)


@dataclass(frozen=True, slots=True)
class UnitSystem:
    id: str
    is_default: bool = False
    names: Mapping[str, str] = field(default_factory=_empty_names)
    descriptions: Mapping[str, str] = field(default_factory=_empty_names)
    categories: Mapping[str, Category] = field(default_factory=_empty_names)


@dataclass(frozen=True, slots=True)
class ConversionFactorEntry:
    """Direct multiplier between two base units of different systems."""
    from_unit_id: str
    to_unit_id: str
    factor: Decimal


@dataclass(frozen=True, slots=True)
class UnitSystemInfo:
    """Localized description of a unit system for display."""
    id: str
    name: str
    description: str
    is_default: bool
    categories: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UnitInfo:
    id: str
    symbol: str
    name: str
    plural_name: str
    category: str
    is_base: bool
