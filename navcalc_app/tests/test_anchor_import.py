"""Tests for anchor-table import from CSV and Excel."""

from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest

from navcalc_app.config.water_reference import ITTC_REFERENCE
from navcalc_app.services.anchor_import import parse_anchor_file


def _write_csv(tmp_path, text, name="anchors.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestParseAnchorFile:
    def test_csv_with_medium_column(self, tmp_path):
        path = _write_csv(
            tmp_path,
            "Medium,Temperature (C),Salinity (PSU),Density (kg/m3),Kinematic viscosity (m2/s),Source\n"
            "Sea,15,35,1025.970,0.000001160,Table 2\n"
            "Fresh,15,0,999.1026,0.000001139,Table 1\n"
            "Fresh,0,0,999.8425,0.000001792,Table 1\n",
        )
        points = parse_anchor_file(path)
        assert [(p.medium, p.temperature_c) for p in points] == [
            ("Fresh", Decimal("0")),
            ("Fresh", Decimal("15")),
            ("Sea", Decimal("15")),
        ]
        assert points[0].density_kg_m3 == Decimal("999.8425")
        assert points[0].kinematic_viscosity_m2_s == Decimal("0.000001792")
        assert points[2].source_ref == "Table 2"

    def test_header_aliases(self, tmp_path):
        path = _write_csv(tmp_path, "Temp C,rho kg/m3,nu m2/s\n20,1024.8,1.05e-6\n")
        (point,) = parse_anchor_file(path)
        assert point.temperature_c == Decimal("20")
        assert point.density_kg_m3 == Decimal("1024.8")
        assert point.kinematic_viscosity_m2_s == Decimal("1.05e-6")

    def test_medium_defaults_to_sea(self, tmp_path):
        path = _write_csv(tmp_path, "Temperature,Density,Viscosity\n10,1026.9,0.00000135\n")
        (point,) = parse_anchor_file(path)
        assert point.medium == "Sea"
        assert point.salinity_psu == Decimal("35")
        assert point.source_ref == ITTC_REFERENCE

    def test_medium_inferred_from_salinity(self, tmp_path):
        path = _write_csv(
            tmp_path,
            "Temperature,Salinity,Density,Viscosity\n10,0.2,999.7,0.00000131\n10,34,1026.0,0.00000136\n",
        )
        points = parse_anchor_file(path)
        assert [p.medium for p in points] == ["Fresh", "Sea"]

    def test_medium_text_variants(self, tmp_path):
        path = _write_csv(
            tmp_path,
            "Water type,Temperature,Density,Viscosity\nfreshwater,5,999.9,0.0000015\nsalt water,5,1027.6,0.0000016\n",
        )
        points = parse_anchor_file(path)
        assert [p.medium for p in points] == ["Fresh", "Sea"]
        assert points[0].salinity_psu == Decimal("0")

    def test_bad_rows_skipped(self, tmp_path):
        path = _write_csv(
            tmp_path,
            "Temperature,Density,Viscosity\n"
            "10,1026.9,0.00000135\n"
            ",1026.0,0.00000130\n"
            "12,n/a,0.00000130\n"
            "14,-1,0.00000130\n"
            "16,1026.1,0\n",
        )
        points = parse_anchor_file(path)
        assert [p.temperature_c for p in points] == [Decimal("10")]

    def test_duplicate_rows_rejected(self, tmp_path):
        path = _write_csv(tmp_path, "Temperature,Density,Viscosity\n10,1026.9,1.3e-6\n10,1027,1.3e-6\n")
        with pytest.raises(ValueError, match="Duplicate"):
            parse_anchor_file(path)

    def test_unknown_medium_rejected(self, tmp_path):
        path = _write_csv(tmp_path, "Medium,Temperature,Density,Viscosity\nBrackish,10,1010,1.3e-6\n")
        with pytest.raises(ValueError, match="Unknown medium"):
            parse_anchor_file(path)

    def test_missing_columns(self, tmp_path):
        path = _write_csv(tmp_path, "Temperature,Density\n10,1026.9\n")
        with pytest.raises(ValueError, match="Missing columns"):
            parse_anchor_file(path)

    def test_no_valid_rows(self, tmp_path):
        path = _write_csv(tmp_path, "Temperature,Density,Viscosity\nx,y,z\n")
        with pytest.raises(ValueError, match="No valid"):
            parse_anchor_file(path)

    def test_unsupported_suffix(self, tmp_path):
        path = _write_csv(tmp_path, "Temperature,Density,Viscosity\n", name="anchors.txt")
        with pytest.raises(ValueError, match="Unsupported format"):
            parse_anchor_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_anchor_file(tmp_path / "nope.csv")

    def test_excel(self, tmp_path):
        path = tmp_path / "anchors.xlsx"
        pd.DataFrame(
            {
                "Medium": ["Fresh", "Fresh"],
                "Temperature": ["30", "0"],
                "Density": ["995.6502", "999.8425"],
                "Kinematic viscosity": ["0.000000801", "0.000001792"],
            }
        ).to_excel(path, index=False, engine="openpyxl")
        points = parse_anchor_file(path)
        assert [p.temperature_c for p in points] == [Decimal("0"), Decimal("30")]
        assert points[1].density_kg_m3 == Decimal("995.6502")
