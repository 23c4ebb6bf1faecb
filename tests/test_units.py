"""Unit conversion checks."""

import pytest

from calculations import calcs_units


@pytest.mark.parametrize("value, unit, expected", [
    (1.0, "MPa", 1.0),
    (10.0, "Bar", 1.0),
    (1000.0, "PSI", 6.89476),
    (1.0, "kg/cm²", 0.0980665),
    (2.5, "furlongs", 2.5),
])
def test_pressure_to_mpa(value, unit, expected):
    assert calcs_units.pressure_to_mpa(value, unit) == pytest.approx(expected)


@pytest.mark.parametrize("value, unit, expected", [
    (100.0, "°C", 100.0),
    (212.0, "°F", 100.0),
    (373.15, "K", 100.0),
    (55.0, "R", 55.0),
])
def test_temperature_to_celsius(value, unit, expected):
    assert calcs_units.temperature_to_celsius(value, unit) == pytest.approx(expected)


def test_convert_force():
    assert calcs_units.convert_force(1000.0, "kN") == pytest.approx(1.0)
    assert calcs_units.convert_force(1000.0, "lbf") == pytest.approx(224.809)
    assert calcs_units.convert_force(1000.0, "kgf") == pytest.approx(101.972)
    assert calcs_units.convert_force(1000.0, "N") == 1000.0


def test_default_force_unit_follows_pressure_unit():
    assert calcs_units.default_force_unit("PSI") == "lbf"
    assert calcs_units.default_force_unit("kg/cm²") == "kgf"
    assert calcs_units.default_force_unit("MPa") == "kN"
    assert calcs_units.default_force_unit("Bar") == "kN"
