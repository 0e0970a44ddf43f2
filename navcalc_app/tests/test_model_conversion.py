"""Tests for dataclass-level unit conversion and unit-system preference."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

import pytest

from navcalc_app.services.model_conversion import convert_model, convertible, resolve_unit_system


@dataclass
class Section:
    name: str
    area: Decimal = convertible("Area")
    inertia: Decimal = convertible("MomentOfInertia")


@dataclass
class HullSummary:
    label: str
    length: Decimal = convertible("Length")
    displacement: Optional[Decimal] = convertible("Mass", default=None)
    sections: List[Section] = field(default_factory=list)
    draft_marks: int = 6


class TestConvertModel:
    def _summary(self):
        return HullSummary(
            label="MV Example",
            length=Decimal("100"),
            displacement=Decimal("1000"),
            sections=[Section("mid", Decimal("1"), Decimal("1"))],
        )

    def test_tagged_fields_converted(self, engine):
        out = convert_model(engine, self._summary(), "SI", "Imperial")
        assert out.length == engine.convert(Decimal("100"), "SI", "Imperial", "Length")
        assert float(out.displacement) == pytest.approx(2204.6226218, rel=1e-9)

    def test_untagged_fields_copied(self, engine):
        out = convert_model(engine, self._summary(), "SI", "Imperial")
        assert out.label == "MV Example"
        assert out.draft_marks == 6

    def test_nested_list_converted(self, engine):
        out = convert_model(engine, self._summary(), "SI", "Imperial")
        section = out.sections[0]
        assert section.name == "mid"
        assert float(section.area) == pytest.approx(10.763910417, rel=1e-9)
        assert float(section.inertia) == pytest.approx(115.861767459, rel=1e-9)

    def test_input_not_modified(self, engine):
        summary = self._summary()
        convert_model(engine, summary, "SI", "Imperial")
        assert summary.length == Decimal("100")
        assert summary.sections[0].area == Decimal("1")

    def test_none_stays_none(self, engine):
        summary = HullSummary(label="x", length=Decimal("1"))
        out = convert_model(engine, summary, "SI", "Imperial")
        assert out.displacement is None

    def test_same_system_returns_object(self, engine):
        summary = self._summary()
        assert convert_model(engine, summary, "Imperial", "Imperial") is summary

    def test_non_dataclass_rejected(self, engine):
        with pytest.raises(TypeError):
            convert_model(engine, {"length": 1}, "SI", "Imperial")

    def test_round_trip(self, engine):
        summary = self._summary()
        back = convert_model(engine, convert_model(engine, summary, "SI", "Imperial"), "Imperial", "SI")
        assert float(back.length) == pytest.approx(100, rel=1e-12)
        assert float(back.sections[0].inertia) == pytest.approx(1, rel=1e-12)


class TestResolveUnitSystem:
    def test_exact_and_case_insensitive(self, registry):
        assert resolve_unit_system("Imperial", registry) == "Imperial"
        assert resolve_unit_system(" imperial ", registry) == "Imperial"
        assert resolve_unit_system("si", registry) == "SI"

    def test_blank_gives_default(self, registry):
        assert resolve_unit_system(None, registry) == "SI"
        assert resolve_unit_system("  ", registry) == "SI"
        assert resolve_unit_system("", registry, default="Imperial") == "Imperial"

    def test_unknown_warns_and_defaults(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="navcalc_app.services.model_conversion"):
            assert resolve_unit_system("Nautical", registry) == "SI"
        assert "Invalid unit system 'Nautical'" in caplog.text
