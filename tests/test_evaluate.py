"""Full flange evaluation: default scenario, invariants and manual overrides."""

import math

import pytest

from flange_design import (
    FlangeInputs, ReferenceTables, evaluate, evaluate_pcc1, run_design_check,
    summary_record, records_to_dataframe, format_margin,
)
from conftest import TEST_BOLT_NO_AMBIENT, RING_JOINT_SS


def test_default_scenario(tables, base_inputs):
    results = evaluate(base_inputs, tables)

    assert results.bcd_method1 == 680
    assert results.bcd_method2 == 1072
    assert results.bcd_method3 == 1101
    assert results.selected_bcd_source == 3
    assert results.final_bcd == 1101
    assert results.final_od == 1143
    assert results.seating_id == 1024
    assert results.seating_od == 1054
    assert results.gasket_id == 1006
    assert results.gasket_od == 1070
    assert results.gasket_seating_width == 15
    assert results.geometric_pitch == pytest.approx(72.06, abs=0.01)
    assert results.spacing_ok is True

    assert results.b0_width == 7.5
    assert results.b_width == pytest.approx(6.9011, abs=1e-4)
    assert results.g_mean_dia == pytest.approx(1040.198, abs=1e-3)
    assert results.gasket_m == 3.0
    assert results.gasket_y == 10000
    assert results.wm1 == pytest.approx(984690, rel=1e-4)
    assert results.wm2 == pytest.approx(1554900, rel=1e-4)
    assert results.required_bolt_area == pytest.approx(9040, rel=1e-3)
    assert results.total_bolt_area == pytest.approx(9352.32)
    assert results.is_safe is True
    assert results.margin_percent == pytest.approx(3.45, abs=0.01)
    assert results.required_area_clamped is False
    assert results.shell_stress == 138.0


def test_default_reference_data():
    results = evaluate(FlangeInputs(), ReferenceTables.default())
    assert results.bcd_tema == 1101
    assert results.design_allowable_stress == 172.0
    assert results.ambient_allowable_stress == 172.0
    assert results.shell_stress == 138.0


def test_idempotent(tables, base_inputs):
    assert evaluate(base_inputs, tables) == evaluate(base_inputs, tables)


def test_does_not_mutate_tables(tables, base_inputs):
    before = repr(tables)
    evaluate(base_inputs.with_changes(use_pcc1_check=True), tables)
    assert repr(tables) == before


@pytest.mark.parametrize("changes", [
    {},
    {"inside_dia": 300},
    {"inside_dia": 2500, "bolt_size": 1.25, "bolt_count": 64},
    {"bolt_count": 80},
    {"use_hydraulic_tensioning": True, "bolt_size": 1.0, "bolt_count": 60},
    {"gasket_seating_width": 25, "gasket_preference": "bcd"},
    {"has_inner_ring": False, "has_outer_ring": False},
])
def test_bcd_dominance_and_seating_order(tables, base_inputs, changes):
    results = evaluate(base_inputs.with_changes(**changes), tables)

    assert results.final_bcd == max(results.bcd_method1, results.bcd_method2, results.bcd_method3)
    assert results.final_bcd == results.bcd_tema
    assert results.seating_od > results.seating_id
    assert results.gasket_od >= results.seating_od >= results.seating_id >= results.gasket_id >= 0


def test_bolt_count_monotonicity(tables, base_inputs):
    previous = None
    for count in range(8, 49, 4):
        results = evaluate(base_inputs.with_changes(bolt_count=count), tables)
        if previous is not None:
            # Pitch itself can creep up because Method 1 rounds the BCD up
            assert results.bcd_method1 >= previous.bcd_method1
            assert results.total_bolt_area > previous.total_bolt_area
            assert results.final_bcd >= previous.final_bcd
        previous = results


def test_zero_bolt_count_reports_spacing_ng(tables, base_inputs):
    results = evaluate(base_inputs.with_changes(bolt_count=0), tables)

    assert math.isinf(results.geometric_pitch)
    assert results.spacing_ok is False
    assert results.total_bolt_area == 0
    assert not results.is_safe


def test_manual_override_applies_only_when_enabled(tables, base_inputs):
    manual = base_inputs.with_changes(actual_bcd=1200, actual_od=1250, manual_m=5.0)

    results = evaluate(manual, tables)
    assert results.final_bcd == 1101
    assert results.gasket_m == 3.0

    results = evaluate(manual.with_changes(use_manual_override=True), tables)
    assert results.final_bcd == 1200
    assert results.final_od == 1250
    assert results.gasket_m == 5.0
    # Computed methods are still reported; TEMA OD follows the governing bolt circle
    assert results.bcd_tema == 1101
    assert results.od_tema == 1242


def test_zero_override_means_unset(tables, base_inputs):
    results = evaluate(base_inputs.with_changes(
        use_manual_override=True, actual_bcd=0, actual_od=0, manual_seating_od=0, manual_y=0,
    ), tables)
    assert results.final_bcd == 1101
    assert results.final_od == 1143
    assert results.seating_od == 1054
    assert results.gasket_y == 10000


def test_manual_seating_fields_override_independently(tables, base_inputs):
    results = evaluate(base_inputs.with_changes(use_manual_override=True, manual_seating_id=1030), tables)
    assert results.seating_od == 1054
    assert results.seating_id == 1030
    assert results.n_width == 12
    assert results.b0_width == 6.0
    assert results.b_width == 6.0


def test_ring_joint_basic_width(tables, base_inputs):
    results = evaluate(base_inputs.with_changes(gasket_type=RING_JOINT_SS, facing_sketch="2: Ring Joint"), tables)
    assert results.b0_width == pytest.approx(15 / 8)
    assert results.g_mean_dia == pytest.approx(1039.0)
    assert results.gasket_m == 6.5


def test_missing_ambient_stress_uses_default(tables, base_inputs):
    results = evaluate(base_inputs.with_changes(bolt_material=TEST_BOLT_NO_AMBIENT), tables)
    assert results.ambient_allowable_stress == 138.0


def test_pressure_units_are_equivalent(tables, base_inputs):
    in_mpa = evaluate(base_inputs, tables)
    in_bar = evaluate(base_inputs.with_changes(design_pressure=10.0, pressure_unit="Bar"), tables)
    assert in_bar.wm1 == pytest.approx(in_mpa.wm1)


def test_pass_partition_adds_load(tables, base_inputs):
    plain = evaluate(base_inputs, tables)
    with_pass = evaluate(base_inputs.with_changes(pass_partition_width=10, pass_partition_length=1000), tables)
    assert with_pass.hp_force == pytest.approx(plain.hp_force + 2 * 1.0 * 10 * 1000 * 3.0)
    assert with_pass.wm2 == pytest.approx(plain.wm2 + 10 * 1000 * 10000 * 0.00689476)


def test_pcc1_inactive_by_default(tables, base_inputs):
    results = evaluate(base_inputs, tables)
    pcc1 = evaluate_pcc1(base_inputs, results)
    assert pcc1["active"] is False
    assert pcc1["sb_sel_final"] == 150.0
    assert pcc1["safe"] is False

    check = run_design_check(base_inputs, tables)
    assert check["pcc1"] is None
    assert check["all_pass"] is True


def test_run_design_check_includes_pcc1(tables, base_inputs):
    check = run_design_check(base_inputs.with_changes(use_pcc1_check=True), tables)
    assert check["pcc1"]["active"] is True
    assert check["all_pass"] is False


def test_summary_records(tables, base_inputs):
    results = evaluate(base_inputs, tables)
    record = summary_record(base_inputs, results)
    assert record["FLG BCD"] == 1101
    assert record["FLG OD"] == 1143
    assert record["GSK OD"] == 1054
    assert record["BOLT SIZE"] == '0.75"'
    assert record["PCC-1"] == "NO"

    df = records_to_dataframe([record, summary_record(base_inputs.with_changes(item_no="E-2"), results)])
    assert len(df) == 2
    assert list(df["ITEM NO"]) == ["GEN-001", "E-2"]
    assert records_to_dataframe([]).empty


def test_format_margin():
    assert format_margin(3.456) == "+3.5%"
    assert format_margin(-10.0) == "-10.0%"
    assert format_margin(math.inf) == "∞"


def test_from_dict_accepts_camel_case():
    inputs = FlangeInputs.from_dict({
        "insideDia": 1200, "actualBCD": 1300, "manualSeatingOD": 1100, "phiFMax": 0.5,
        "usePcc1Check": True, "bolt_count": 32, "unknownKey": 1,
    })
    assert inputs.inside_dia == 1200
    assert inputs.actual_bcd == 1300
    assert inputs.manual_seating_od == 1100
    assert inputs.phi_f_max == 0.5
    assert inputs.use_pcc1_check is True
    assert inputs.bolt_count == 32
