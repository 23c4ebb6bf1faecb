"""Follow-up rules applied when an input field is edited."""

import pytest

from flange_design import (
    apply_input_change, apply_pcc1_presets, gasket_bound_suggestions, apply_gasket_bounds,
    reset_gasket_standard, evaluate,
)
from conftest import GROOVED_SS, SPIRAL_SS, TEST_BOLT_NO_AMBIENT


def test_inside_diameter_change(tables, base_inputs):
    edited = base_inputs.with_changes(inside_dia=1200, gasket_preference="bcd")
    updated, fixed_size = apply_input_change(edited, "insideDia", tables)

    assert updated.gasket_preference is None
    # 1.0 * 600 / 137.4 = 4.37
    assert updated.g0 == 5
    assert updated.g1 == 8
    assert fixed_size is False


def test_g0_edit_derives_g1(tables, base_inputs):
    updated, fixed_size = apply_input_change(
        base_inputs.with_changes(g0=10, gasket_preference="shell"), "g0", tables
    )
    assert updated.g0 == 10
    assert updated.g1 == 15
    assert updated.gasket_preference is None
    assert fixed_size is None


def test_bolt_size_change_sets_fixed_size(tables, base_inputs):
    updated, fixed_size = apply_input_change(base_inputs.with_changes(bolt_size=1.0), "bolt_size", tables)
    assert fixed_size is True
    assert updated.g0 == base_inputs.g0


def test_unrelated_field_changes_nothing(tables, base_inputs):
    edited = base_inputs.with_changes(item_no="E-7", gasket_preference="bcd")
    updated, fixed_size = apply_input_change(edited, "itemNo", tables)
    assert updated == edited
    assert fixed_size is None


def test_bolt_material_change_resets_bolt_stress_limits(tables, base_inputs):
    edited = base_inputs.with_changes(bolt_material=TEST_BOLT_NO_AMBIENT, sb_max=1.0, sb_min=1.0)
    updated, _ = apply_input_change(edited, "boltMaterial", tables)
    assert updated.sb_max == 350.0
    assert updated.sb_min == 200.0
    # PCC-1 off: gasket presets untouched
    assert updated.sg_max == 0.0


def test_enabling_pcc1_applies_presets(tables, base_inputs):
    edited = base_inputs.with_changes(
        gasket_type=GROOVED_SS, use_pcc1_check=True, phi_f_max=0.0, g=0.0,
        pass_part_area_reduction=0.0,
    )
    updated, _ = apply_input_change(edited, "usePcc1Check", tables)

    assert updated.sg_max == 380.0
    assert updated.sg_min_s == 140.0
    assert updated.sg_min_o == 97.0
    assert updated.sb_max == 507.5
    assert updated.sb_min == 290.0
    assert updated.phi_f_max == 0.32
    assert updated.g == 0.7
    assert updated.pass_part_area_reduction == 50.0
    # Set values are kept
    assert updated.phi_g_max == 1.0


def test_gasket_change_with_pcc1_enabled(tables, base_inputs):
    edited = base_inputs.with_changes(gasket_type=SPIRAL_SS, use_pcc1_check=True, sg_max=380.0)
    updated, _ = apply_input_change(edited, "gasket_type", tables)
    assert updated.sg_max == 0.0


def test_presets_ignore_unknown_gasket_family(tables, base_inputs):
    edited = base_inputs.with_changes(gasket_type="Vegetable fiber", sg_max=123.0)
    assert apply_pcc1_presets(edited, tables).sg_max == 123.0


def test_gasket_bound_suggestions(tables, base_inputs):
    results = evaluate(base_inputs, tables)
    bounds = gasket_bound_suggestions(base_inputs, results)

    assert bounds["bcd"] == (1025, 1055)
    assert bounds["shell"] == (1024, 1054)


def test_shell_bound_suggestion_is_not_rounded(tables, base_inputs):
    inputs = base_inputs.with_changes(shell_gap_a=3.3)
    bounds = gasket_bound_suggestions(inputs, evaluate(inputs, tables))

    # 1000 + 2*3.3 + 2*9 + 2*15
    low, high = bounds["shell"]
    assert low == pytest.approx(1024.6)
    assert high == pytest.approx(1054.6)


def test_apply_gasket_bounds(tables, base_inputs):
    updated = apply_gasket_bounds(base_inputs, "bcd", 1025.004, 1055.0)
    assert updated.gasket_preference == "bcd"
    assert updated.manual_seating_id == 1025.0
    assert updated.manual_seating_od == 1055.0

    # Without manual override the preference alone picks the BCD-side seating
    results = evaluate(updated, tables)
    assert results.seating_od == 1026

    with pytest.raises(ValueError):
        apply_gasket_bounds(base_inputs, "largest", 1000.0, 1030.0)


def test_reset_gasket_standard(base_inputs):
    edited = base_inputs.with_changes(
        c_clearance=6.0, shell_gap_a=5.0, has_inner_ring=False, outer_ring_width_manual=12,
        use_hydraulic_tensioning=True, gasket_preference="shell", actual_bcd=1300,
        manual_m=4.0, pass_partition_width=10, phi_f_max=0.5, g=0.9,
    )
    reset = reset_gasket_standard(edited)

    assert reset.c_clearance == 2.5
    assert reset.shell_gap_a == 3.0
    assert reset.has_inner_ring is True
    assert reset.outer_ring_width_manual is None
    assert reset.use_hydraulic_tensioning is False
    assert reset.gasket_preference is None
    assert reset.actual_bcd is None
    assert reset.manual_m is None
    assert reset.pass_partition_width == 0.0
    assert reset.phi_f_max == 0.32
    assert reset.g == 0.7
    # Process inputs are untouched
    assert reset.inside_dia == base_inputs.inside_dia
    assert reset.bolt_count == base_inputs.bolt_count
