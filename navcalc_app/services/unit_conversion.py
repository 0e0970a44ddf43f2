"""
Conversion of engineering values between unit systems, and display formatting.

All arithmetic is Decimal so repeated conversions do not accumulate binary
rounding error. A same-system conversion returns its input untouched.

When no factor is registered for a (from system, to system, category)
triple the engine returns the input unchanged. Every occurrence is logged
as a WARNING on this module's logger.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Dict, Hashable, List, Mapping, Tuple

from navcalc_app.config.unit_systems import DEFAULT_LOCALE
from navcalc_app.models import UnitSystemInfo
from navcalc_app.services.errors import NotFoundError
from navcalc_app.services.numeric import as_decimal
from navcalc_app.services.unit_registry import FACTOR_PRECISION, UnitRegistry

_LOG = logging.getLogger(__name__)

# Minimum working precision for formatting; raised for large values
_FORMAT_PRECISION = 60


class ConversionEngine:
    """Scalar/batch conversion and formatting over an explicit registry."""

    def __init__(self, registry: UnitRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    def _factor_for(self, from_system: str, to_system: str, category: str) -> Decimal | None:
        try:
            from_unit = self._registry.base_unit(from_system, category)
            to_unit = self._registry.base_unit(to_system, category)
        except NotFoundError:
            return None
        return self._registry.conversion_factor(from_unit.id, to_unit.id)

    def has_conversion(self, from_system: str, to_system: str, category: str) -> bool:
        """True when convert() would apply a real factor (or is a same-system no-op)."""
        if from_system == to_system:
            return True
        return self._factor_for(from_system, to_system, category) is not None

    def convert(self, value: Any, from_system: str, to_system: str, category: str) -> Any:
        """
        Convert value from one unit system to another for a category.

        Returns value itself when the systems are equal, value unchanged when
        no factor is registered, otherwise a Decimal.
        """
        if from_system == to_system:
            return value

        factor = self._factor_for(from_system, to_system, category)
        if factor is None:
            _LOG.warning(
                "No conversion factor for %s %s -> %s; returning value unchanged",
                category,
                from_system,
                to_system,
            )
            return value

        with localcontext() as ctx:
            ctx.prec = FACTOR_PRECISION
            return as_decimal(value) * factor

    def convert_batch(
        self,
        entries: Mapping[Hashable, Tuple[Any, str]],
        from_system: str,
        to_system: str,
    ) -> Dict[Hashable, Any]:
        """
        Convert every (value, category) entry independently; all keys preserved.

        An entry whose value cannot be converted (non-numeric text, a signalling
        NaN) is passed through unchanged and does not affect the others.
        """
        results: Dict[Hashable, Any] = {}
        for key, (value, category) in entries.items():
            try:
                results[key] = self.convert(value, from_system, to_system, category)
            except (ValueError, ArithmeticError):
                _LOG.warning("Batch entry %r has unconvertible value %r; left unchanged", key, value)
                results[key] = value
        return results

    def convert_unit(self, value: Any, from_unit_id: str, to_unit_id: str) -> Decimal:
        """
        Convert between two specific units of the same category (e.g. inch -> millimeter).

        Goes unit -> system base -> other system base -> unit. Raises
        NotFoundError for unknown units and ValueError across categories.
        """
        from_system, from_category, from_unit = self._registry.find_unit(from_unit_id)
        to_system, to_category, to_unit = self._registry.find_unit(to_unit_id)
        if from_category != to_category:
            raise ValueError(
                f"Cannot convert {from_unit_id} ({from_category}) to {to_unit_id} ({to_category})"
            )

        with localcontext() as ctx:
            ctx.prec = FACTOR_PRECISION
            amount = as_decimal(value)
            if not from_unit.is_base:
                amount = amount * from_unit.conversion_factor
            amount = as_decimal(self.convert(amount, from_system, to_system, from_category))
            if not to_unit.is_base:
                amount = amount / to_unit.conversion_factor
            return amount

    def format_value(
        self,
        value: Any,
        system: str,
        category: str,
        locale: str = DEFAULT_LOCALE,
        decimals: int = 2,
    ) -> str:
        """
        Render "<number> <symbol>" rounded half away from zero to `decimals` places.

        No grouping separators; the decimal separator follows the locale.
        """
        if decimals < 0:
            raise ValueError("decimals must be zero or positive")
        symbol = self._registry.get_unit_symbol(system, category, locale)

        number = as_decimal(value)
        if not number.is_finite():
            raise ValueError(f"Cannot format non-finite value: {value!r}")

        with localcontext() as ctx:
            # Room for every integer digit plus the requested fraction
            ctx.prec = max(_FORMAT_PRECISION, number.adjusted() + decimals + 2)
            rounded = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
            if rounded.is_zero():
                rounded = rounded.copy_abs()
        text = f"{rounded:f}"

        separator = self._registry.decimal_separator(locale)
        if separator != ".":
            text = text.replace(".", separator)
        return f"{text} {symbol}"

    # Registry pass-throughs, so display adapters only need the engine.

    def get_unit_symbol(self, system: str, category: str, locale: str = DEFAULT_LOCALE) -> str:
        return self._registry.get_unit_symbol(system, category, locale)

    def get_unit_name(
        self, system: str, category: str, locale: str = DEFAULT_LOCALE, plural: bool = False
    ) -> str:
        return self._registry.get_unit_name(system, category, locale, plural)

    def get_category_name(self, category: str, locale: str = DEFAULT_LOCALE) -> str:
        return self._registry.get_category_name(category, locale)

    def list_unit_systems(self, locale: str = DEFAULT_LOCALE) -> List[UnitSystemInfo]:
        return self._registry.list_unit_systems(locale)

    def get_unit_system_info(self, system: str, locale: str = DEFAULT_LOCALE) -> UnitSystemInfo:
        return self._registry.get_unit_system_info(system, locale)
