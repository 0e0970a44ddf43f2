"""
Immutable catalog of unit systems, categories, units and locale strings.

A registry is built once from a definition (normally config.unit_systems),
validated, and then passed by reference to conversion engines. Nothing on a
built registry can be mutated, so it is safe to share between threads.
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from navcalc_app.config import unit_systems as defaults
from navcalc_app.models import (
    Category,
    ConversionFactorEntry,
    Unit,
    UnitInfo,
    UnitSystem,
    UnitSystemInfo,
)
from navcalc_app.services.errors import ConfigurationError, NotFoundError

_LOG = logging.getLogger(__name__)

# Precision for derived (inverse) factors
FACTOR_PRECISION = 28


def _to_decimal(raw: Any) -> Decimal:
    """Decimal from a decimal string, a number, or a (numerator, denominator) pair."""
    if isinstance(raw, (tuple, list)):
        num, den = raw
        with localcontext() as ctx:
            ctx.prec = FACTOR_PRECISION
            return Decimal(str(num)) / Decimal(str(den))
    if isinstance(raw, Decimal):
        return raw
    return Decimal(str(raw))


def _inverse(factor: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = FACTOR_PRECISION
        return Decimal(1) / factor


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


def _build_unit(raw: Mapping[str, Any]) -> Unit:
    factor = raw.get("conversion_factor")
    return Unit(
        id=raw["id"],
        symbol=raw.get("symbol", ""),
        is_base=bool(raw.get("is_base", False)),
        names=_frozen(raw.get("names")),
        plural_names=_frozen(raw.get("plural_names")),
        conversion_factor=_to_decimal(factor) if factor is not None else None,
        base_unit=raw.get("base_unit"),
    )


def _build_system(raw: Mapping[str, Any], category_names: Mapping[str, Mapping[str, str]]) -> UnitSystem:
    categories: Dict[str, Category] = {}
    for category_id, units in raw.get("categories", {}).items():
        categories[category_id] = Category(
            id=category_id,
            names=_frozen(category_names.get(category_id)),
            units=tuple(_build_unit(u) for u in units),
        )
    return UnitSystem(
        id=raw["id"],
        is_default=bool(raw.get("is_default", False)),
        names=_frozen(raw.get("names")),
        descriptions=_frozen(raw.get("descriptions")),
        categories=MappingProxyType(categories),
    )


class UnitRegistry:
    """Read-only lookup surface over validated unit-system data."""

    def __init__(
        self,
        systems: Sequence[UnitSystem],
        factors: Iterable[ConversionFactorEntry],
        default_locale: str = defaults.DEFAULT_LOCALE,
        decimal_separators: Mapping[str, str] | None = None,
        symmetry_tolerance: float = defaults.FACTOR_SYMMETRY_TOLERANCE,
    ) -> None:
        self._systems: Mapping[str, UnitSystem] = MappingProxyType({s.id: s for s in systems})
        self._factors: Mapping[Tuple[str, str], ConversionFactorEntry] = MappingProxyType(
            {(f.from_unit_id, f.to_unit_id): f for f in factors}
        )
        self._default_locale = default_locale
        self._decimal_separators = _frozen(decimal_separators or {default_locale: "."})
        self._validate(systems, symmetry_tolerance)
        self._default_system_id = next(s.id for s in systems if s.is_default)
        self._category_ids: Tuple[str, ...] = tuple(systems[0].categories.keys())

    @classmethod
    def from_definitions(
        cls,
        systems: Sequence[Mapping[str, Any]],
        factors: Sequence[Tuple[str, str, Any]] = (),
        category_names: Mapping[str, Mapping[str, str]] | None = None,
        default_locale: str = defaults.DEFAULT_LOCALE,
        decimal_separators: Mapping[str, str] | None = None,
    ) -> "UnitRegistry":
        """
        Build a registry from plain definitions in the config.unit_systems shape.

        Each factor triple registers its forward entry and, unless listed
        explicitly, the Decimal inverse.
        """
        built_systems = [_build_system(raw, category_names or {}) for raw in systems]

        entries: Dict[Tuple[str, str], ConversionFactorEntry] = {}
        for from_id, to_id, raw_factor in factors:
            factor = _to_decimal(raw_factor)
            if factor == 0:
                raise ConfigurationError(f"Conversion factor {from_id} -> {to_id} is zero")
            entries[(from_id, to_id)] = ConversionFactorEntry(from_id, to_id, factor)
        for (from_id, to_id), entry in list(entries.items()):
            if (to_id, from_id) not in entries:
                entries[(to_id, from_id)] = ConversionFactorEntry(to_id, from_id, _inverse(entry.factor))

        return cls(
            built_systems,
            entries.values(),
            default_locale=default_locale,
            decimal_separators=decimal_separators,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, systems: Sequence[UnitSystem], tolerance: float) -> None:
        if not systems:
            raise ConfigurationError("Unit registry has no unit systems")
        if len(self._systems) != len(systems):
            raise ConfigurationError("Duplicate unit system identifiers in registry definition")

        default_count = sum(1 for s in systems if s.is_default)
        if default_count != 1:
            raise ConfigurationError(
                f"Exactly one unit system must be the default, found {default_count}"
            )

        all_categories = set()
        for system in systems:
            all_categories.update(system.categories.keys())

        for system in systems:
            self._require_fallback(system.names, f"unit system '{system.id}' name")
            self._require_fallback(system.descriptions, f"unit system '{system.id}' description")
            missing = all_categories - set(system.categories.keys())
            if missing:
                raise ConfigurationError(
                    f"Unit system '{system.id}' is missing categories: {sorted(missing)}"
                )
            for category in system.categories.values():
                self._require_fallback(category.names, f"category '{category.id}' name")
                base_count = len(category.base_units)
                if base_count != 1:
                    raise ConfigurationError(
                        f"Category '{category.id}' in system '{system.id}' must have exactly "
                        f"one base unit, found {base_count}"
                    )
                unit_ids = {u.id for u in category.units}
                for unit in category.units:
                    self._require_fallback(unit.names, f"unit '{unit.id}' name")
                    self._require_fallback(unit.plural_names, f"unit '{unit.id}' plural name")
                    if unit.is_base:
                        continue
                    if unit.conversion_factor is None or unit.conversion_factor == 0:
                        raise ConfigurationError(f"Non-base unit '{unit.id}' has no conversion factor")
                    if unit.base_unit not in unit_ids:
                        raise ConfigurationError(
                            f"Unit '{unit.id}' references unknown base unit '{unit.base_unit}'"
                        )

        for (from_id, to_id), entry in self._factors.items():
            reverse = self._factors.get((to_id, from_id))
            if reverse is None:
                raise ConfigurationError(f"Conversion {from_id} -> {to_id} has no inverse entry")
            product = float(entry.factor * reverse.factor)
            if abs(product - 1.0) > tolerance:
                raise ConfigurationError(
                    f"Conversion {from_id} <-> {to_id} is not symmetric (product {product!r})"
                )

    def _require_fallback(self, names: Mapping[str, str], what: str) -> None:
        if self._default_locale not in names:
            raise ConfigurationError(f"No '{self._default_locale}' text for {what}")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def default_system_id(self) -> str:
        return self._default_system_id

    @property
    def system_ids(self) -> Tuple[str, ...]:
        return tuple(self._systems.keys())

    @property
    def category_ids(self) -> Tuple[str, ...]:
        return self._category_ids

    @property
    def locales(self) -> Tuple[str, ...]:
        return tuple(self._decimal_separators.keys())

    @property
    def factors(self) -> Tuple[ConversionFactorEntry, ...]:
        return tuple(self._factors.values())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def localize(self, names: Mapping[str, str], locale: str) -> str:
        """Text for locale, else the default locale; ConfigurationError if neither."""
        text = names.get(locale)
        if text is not None:
            return text
        text = names.get(self._default_locale)
        if text is not None:
            return text
        raise ConfigurationError(
            f"No text for locale '{locale}' and no '{self._default_locale}' fallback"
        )

    def decimal_separator(self, locale: str) -> str:
        return self._decimal_separators.get(
            locale, self._decimal_separators.get(self._default_locale, ".")
        )

    def get_system(self, system_id: str) -> UnitSystem:
        system = self._systems.get(system_id)
        if system is None:
            raise NotFoundError(f"Unit system '{system_id}' not found")
        return system

    def get_category(self, system_id: str, category_id: str) -> Category:
        system = self.get_system(system_id)
        category = system.categories.get(category_id)
        if category is None:
            raise NotFoundError(f"Category '{category_id}' not found in unit system '{system_id}'")
        return category

    def base_unit(self, system_id: str, category_id: str) -> Unit:
        return self.get_category(system_id, category_id).base_units[0]

    def find_unit(self, unit_id: str) -> Tuple[str, str, Unit]:
        """Return (system_id, category_id, unit) for a unit identifier."""
        for system in self._systems.values():
            for category in system.categories.values():
                for unit in category.units:
                    if unit.id == unit_id:
                        return system.id, category.id, unit
        raise NotFoundError(f"Unit '{unit_id}' not found")

    def conversion_factor(self, from_unit_id: str, to_unit_id: str) -> Decimal | None:
        entry = self._factors.get((from_unit_id, to_unit_id))
        return entry.factor if entry is not None else None

    def list_unit_systems(self, locale: str = defaults.DEFAULT_LOCALE) -> List[UnitSystemInfo]:
        return [self.get_unit_system_info(system_id, locale) for system_id in self._systems]

    def get_unit_system_info(self, system_id: str, locale: str = defaults.DEFAULT_LOCALE) -> UnitSystemInfo:
        system = self.get_system(system_id)
        return UnitSystemInfo(
            id=system.id,
            name=self.localize(system.names, locale),
            description=self.localize(system.descriptions, locale),
            is_default=system.is_default,
            categories=list(system.categories.keys()),
        )

    def get_unit_symbol(self, system_id: str, category_id: str, locale: str = defaults.DEFAULT_LOCALE) -> str:
        # Symbols are locale-independent today; locale kept for call-site symmetry.
        return self.base_unit(system_id, category_id).symbol

    def get_unit_name(
        self,
        system_id: str,
        category_id: str,
        locale: str = defaults.DEFAULT_LOCALE,
        plural: bool = False,
    ) -> str:
        unit = self.base_unit(system_id, category_id)
        return self.localize(unit.plural_names if plural else unit.names, locale)

    def get_category_name(self, category_id: str, locale: str = defaults.DEFAULT_LOCALE) -> str:
        for system in self._systems.values():
            category = system.categories.get(category_id)
            if category is not None:
                return self.localize(category.names, locale)
        raise NotFoundError(f"Category '{category_id}' not found")

    def get_unit_info(self, system_id: str, category_id: str, locale: str = defaults.DEFAULT_LOCALE) -> UnitInfo:
        unit = self.base_unit(system_id, category_id)
        return UnitInfo(
            id=unit.id,
            symbol=unit.symbol,
            name=self.localize(unit.names, locale),
            plural_name=self.localize(unit.plural_names, locale),
            category=category_id,
            is_base=unit.is_base,
        )


def build_default_registry() -> UnitRegistry:
    """Registry from the canonical definition in config.unit_systems."""
    registry = UnitRegistry.from_definitions(
        defaults.UNIT_SYSTEMS,
        defaults.CONVERSION_FACTORS,
        category_names=defaults.CATEGORY_NAMES,
        default_locale=defaults.DEFAULT_LOCALE,
        decimal_separators=defaults.LOCALE_DECIMAL_SEPARATORS,
    )
    _LOG.info(
        "Unit registry built: systems=%s categories=%d factors=%d",
        ",".join(registry.system_ids),
        len(registry.category_ids),
        len(registry.factors),
    )
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> UnitRegistry:
    """Process-wide registry, built on first use and never mutated."""
    return build_default_registry()
