"""Tests for the closed-form water-property estimates."""

from __future__ import annotations

import pytest

from navcalc_app.services.water_formulas import air_density, gravity, kinematic_viscosity, water_density


class TestWaterDensity:
    def test_reference_point(self):
        assert water_density(15, 35) == pytest.approx(1025.0)

    def test_temperature_and_salinity_terms(self):
        assert water_density(20, 35) == pytest.approx(1024.0)
        assert water_density(15, 30) == pytest.approx(1021.5)

    def test_clamped(self):
        assert water_density(60, 0) == 995.0
        assert water_density(-50, 45) == 1030.0


class TestKinematicViscosity:
    def test_at_15c_standard_seawater(self):
        expected = (1.7915 - 0.0352 * 15 + 0.0004 * 225) * 1e-6
        assert kinematic_viscosity(15) == pytest.approx(expected)

    def test_salinity_scaling(self):
        base = kinematic_viscosity(10, 35)
        assert kinematic_viscosity(10, 45) == pytest.approx(base * 1.001)

    def test_clamped(self):
        assert kinematic_viscosity(-20, 35) == 2.0e-6


class TestConstants:
    def test_air_and_gravity(self):
        assert air_density() == 1.225
        assert gravity() == 9.80665
