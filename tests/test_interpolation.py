"""Allowable stress interpolation over tabulated temperature steps."""

import pytest

from calculations.calcs_interpolation import interpolate_stress, stress_at_step, clean_stress_curve

STEPS = [40, 100, 200]


def test_clamps_below_first_and_above_last_step():
    curve = [120.0, 110.0, 90.0]
    assert interpolate_stress(-20, curve, STEPS) == 120.0
    assert interpolate_stress(40, curve, STEPS) == 120.0
    assert interpolate_stress(200, curve, STEPS) == 90.0
    assert interpolate_stress(650, curve, STEPS) == 90.0


def test_linear_between_steps():
    curve = [120.0, 110.0, 90.0]
    assert interpolate_stress(70, curve, STEPS) == pytest.approx(115.0)
    assert interpolate_stress(150, curve, STEPS) == pytest.approx(100.0)


def test_missing_entries_count_as_zero():
    curve = [100.0, None, 50.0]
    assert clean_stress_curve(curve) == [100.0, 0.0, 50.0]
    # Interpolates towards zero at the missing upper endpoint
    assert interpolate_stress(70, curve, STEPS) == pytest.approx(50.0)
    assert interpolate_stress(150, curve, STEPS) == pytest.approx(25.0)


def test_missing_last_entry_returns_zero_above_range():
    assert interpolate_stress(500, [100.0, 80.0, None], STEPS) == 0.0


def test_stress_at_step_fallback():
    assert stress_at_step([150.0, 140.0, 130.0], STEPS, 40, 138.0) == 150.0
    assert stress_at_step([None, 140.0, 130.0], STEPS, 40, 138.0) == 138.0
    assert stress_at_step([0.0, 140.0, 130.0], STEPS, 40, 138.0) == 138.0
    assert stress_at_step([150.0, 140.0], [65, 100], 40, 138.0) == 138.0
