"""PCC-1 Appendix O selected bolt stress and steps 5-8."""

import math

import pytest

from calculations import calcs_pcc1
from calculations.calcs_pcc1 import check_pcc1_criteria, calculate_selected_bolt_stress

# Default flange: 48 x 3/4" bolts, seating 1024 / 1054 mm, 1 MPa
DEFAULT_CASE = dict(
    single_bolt_area=194.84, bolt_count=48, seating_id=1024.0, seating_od=1054.0,
    p_mpa=1.0, sg_t=200.0, sg_min_s=140.0, sg_min_o=97.0, sg_max=0.0,
    sb_max=507.5, sb_min=290.0, sf_max=150.0, phi_f_max=0.32, phi_g_max=1.0, g=0.7,
)


def test_gasket_area_with_pass_partition():
    area = calcs_pcc1.calculate_gasket_area(1024.0, 1054.0, 10.0, 1000.0, 50.0)
    assert area["ring_area"] == pytest.approx(math.pi / 4 * (1054.0 ** 2 - 1024.0 ** 2))
    assert area["reduced_pass_area"] == pytest.approx(5000.0)
    assert area["total_ag"] == pytest.approx(area["ring_area"] + 5000.0)


def test_clamp_chain_order():
    # 1000 -> min(., 500) = 500 -> max(., 600) = 600 -> min(., 550) = 550
    result = calculate_selected_bolt_stress(100.0, 10.0, 1.0, sb_max=500.0, sb_min=600.0, sf_max=550.0)
    assert result["sb_sel_calc"] == pytest.approx(1000.0)
    assert result["sb_sel_step2"] == 500.0
    assert result["sb_sel_step3"] == 600.0
    assert result["sb_sel_final"] == 550.0


def test_zero_limits_do_not_clamp():
    result = calculate_selected_bolt_stress(100.0, 10.0, 1.0)
    assert result["sb_sel_final"] == pytest.approx(1000.0)


def test_zero_bolt_area_gives_zero_stress():
    assert calculate_selected_bolt_stress(200.0, 5000.0, 0.0)["sb_sel_calc"] == 0.0


def test_default_flange_pcc1():
    result = check_pcc1_criteria(**DEFAULT_CASE)

    assert result["total_bolt_root_area"] == pytest.approx(9352.32)
    assert result["total_ag"] == pytest.approx(48961.5, rel=1e-4)
    assert result["sb_sel_calc"] == pytest.approx(1047.05, rel=1e-3)
    assert result["sb_sel_final"] == 150.0

    assert result["step5_threshold"] == pytest.approx(140.0 * result["total_ag"] / 9352.32)
    assert result["step5_pass"] is False
    assert result["step6_pass"] is False
    assert result["step7_pass"] is True
    assert result["step8_threshold"] == pytest.approx(468.75)
    assert result["step8_pass"] is True
    assert result["safe"] is False


def test_step7_skipped_when_sg_max_zero():
    result = check_pcc1_criteria(**{**DEFAULT_CASE, "sg_max": 0.0, "sb_max": 0.0, "sf_max": 0.0})
    assert result["step7_pass"] is True


def test_step7_applies_when_sg_max_set():
    result = check_pcc1_criteria(**{**DEFAULT_CASE, "sg_max": 90.0, "sf_max": 0.0})
    # Sbsel = 507.5 > 90 * 5.235
    assert result["step7_pass"] is False


def test_step8_skipped_when_phi_f_max_zero():
    result = check_pcc1_criteria(**{**DEFAULT_CASE, "phi_f_max": 0.0, "sf_max": 0.0})
    assert math.isinf(result["step8_threshold"])
    assert result["step8_pass"] is True


def test_passing_case_within_tolerance():
    # Target gasket stress chosen so Sbsel equals the step 5 threshold exactly
    result = check_pcc1_criteria(**{**DEFAULT_CASE, "sg_t": 140.0, "sb_max": 0.0, "sb_min": 0.0,
                                    "sf_max": 0.0, "sg_min_o": 0.0, "p_mpa": 0.0, "g": 1.0,
                                    "phi_f_max": 0.0})
    assert result["step5_pass"] is True
    assert result["step6_pass"] is True
    assert result["safe"] is True


def test_api660_presets():
    assert calcs_pcc1.get_api660_gasket_stresses("Grooved metal (Soft aluminum)")["sg_max"] == 380.0
    assert calcs_pcc1.get_api660_gasket_stresses("Corrugated metal (Iron or soft steel)")["sg_max"] == 275.0
    spiral = calcs_pcc1.get_api660_gasket_stresses("Spiral-wound (Carbon steel)")
    assert spiral == {"sg_max": 0.0, "sg_min_s": 140.0, "sg_min_o": 97.0}
    assert calcs_pcc1.get_api660_gasket_stresses("Vegetable fiber") is None


def test_bolt_stress_limits_from_yield():
    assert calcs_pcc1.bolt_stress_limits_from_yield(725) == {"sb_max": 507.5, "sb_min": 290.0}
    assert calcs_pcc1.bolt_stress_limits_from_yield(585) == {"sb_max": 409.5, "sb_min": 234.0}
