"""
Unit-system conversion of whole result objects.

Fields declared with `convertible("Length")` (or any category id) are
converted; other fields are copied. Nested dataclasses and lists of them
are walked recursively. The input object is never modified.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict

from navcalc_app.services.unit_conversion import ConversionEngine
from navcalc_app.services.unit_registry import UnitRegistry

_LOG = logging.getLogger(__name__)

CATEGORY_METADATA_KEY = "unit_category"


def convertible(category: str, **kwargs: Any) -> Any:
    """dataclasses.field() tagged with the unit category of its value."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[CATEGORY_METADATA_KEY] = category
    return dataclasses.field(metadata=metadata, **kwargs)


def _convert_item(engine: ConversionEngine, value: Any, from_system: str, to_system: str) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return convert_model(engine, value, from_system, to_system)
    if isinstance(value, list):
        return [_convert_item(engine, v, from_system, to_system) for v in value]
    if isinstance(value, tuple):
        return tuple(_convert_item(engine, v, from_system, to_system) for v in value)
    return value


def convert_model(engine: ConversionEngine, obj: Any, from_system: str, to_system: str) -> Any:
    """
    Copy of dataclass `obj` with every category-tagged field converted.

    None values stay None. Same-system calls return obj itself.
    """
    if from_system == to_system:
        return obj
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"convert_model expects a dataclass instance, got {type(obj).__name__}")

    changes: Dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        if not f.init:
            continue
        value = getattr(obj, f.name)
        category = f.metadata.get(CATEGORY_METADATA_KEY)
        if category is not None:
            if value is not None:
                changes[f.name] = engine.convert(value, from_system, to_system, category)
        else:
            converted = _convert_item(engine, value, from_system, to_system)
            if converted is not value:
                changes[f.name] = converted
    return dataclasses.replace(obj, **changes)


def resolve_unit_system(value: str | None, registry: UnitRegistry, default: str | None = None) -> str:
    """
    Unit-system id matching a free-text preference (case-insensitive).

    Blank values give the default; unknown values give the default and a warning.
    """
    fallback = default or registry.default_system_id
    if value is None or not value.strip():
        return fallback
    wanted = value.strip().lower()
    for system_id in registry.system_ids:
        if system_id.lower() == wanted:
            return system_id
    _LOG.warning("Invalid unit system '%s' specified, using default '%s'", value, fallback)
    return fallback
