"""Reference table lookups and table validation."""

import pytest

from flange_design import ReferenceTables, Material, resolve_references
from conftest import SPIRAL_SS, GROOVED_SS, SELF_ENERGIZING, TEST_BOLT, TEST_PLATE


def test_exact_matches(tables, base_inputs):
    refs = resolve_references(base_inputs.with_changes(pass_gasket_type=GROOVED_SS), tables)
    assert refs.bolt_spec.size == 0.75
    assert refs.tensioning_spec.B_ten == 2.1
    assert refs.ring_standard.ir_min == 9
    assert refs.gasket_factor.id == SPIRAL_SS
    assert refs.pass_gasket_factor.id == GROOVED_SS
    assert refs.bolt_material.id == TEST_BOLT
    assert refs.shell_material.id == TEST_PLATE


def test_unmatched_bolt_size_falls_back_to_first(tables, base_inputs):
    refs = resolve_references(base_inputs.with_changes(bolt_size=0.8), tables)
    assert refs.bolt_spec.size == 0.5
    assert refs.tensioning_spec is None


def test_tensioning_has_no_fallback(tables, base_inputs):
    assert resolve_references(base_inputs.with_changes(bolt_size=0.5), tables).tensioning_spec is None


def test_ring_standard_range_is_inclusive(tables, base_inputs):
    assert resolve_references(base_inputs.with_changes(inside_dia=1001), tables).ring_standard.ir_min == 12
    assert resolve_references(base_inputs.with_changes(inside_dia=631), tables).ring_standard.ir_min == 9


def test_ring_standard_falls_back_to_last(tables, base_inputs):
    assert resolve_references(base_inputs.with_changes(inside_dia=250000), tables).ring_standard.or_min == 15
    # Between tabulated ranges
    assert resolve_references(base_inputs.with_changes(inside_dia=1000.5), tables).ring_standard.or_min == 15


def test_unknown_gaskets_and_materials(tables, base_inputs):
    refs = resolve_references(base_inputs.with_changes(
        gasket_type="Unobtainium", pass_gasket_type="Unobtainium",
        bolt_material="Unknown bolt", shell_material="Unknown plate",
    ), tables)
    assert refs.gasket_factor.id == SELF_ENERGIZING
    assert refs.pass_gasket_factor.id == SELF_ENERGIZING
    assert refs.bolt_material.id == TEST_BOLT
    assert refs.shell_material.id == TEST_PLATE


def test_pass_gasket_falls_back_to_main(tables, base_inputs):
    refs = resolve_references(base_inputs.with_changes(pass_gasket_type="Unobtainium"), tables)
    assert refs.pass_gasket_factor.id == SPIRAL_SS


def test_default_tables_are_valid():
    tables = ReferenceTables.default()
    tables.validate()
    assert len(tables.bolt_specs) == 21
    assert len(tables.bolt_temp_steps) == 35
    assert len(tables.plate_temp_steps) == 32


def test_validate_rejects_empty_table(tables):
    tables.gasket_factors = []
    with pytest.raises(ValueError, match="gasket_factors"):
        tables.validate()


def test_validate_rejects_misaligned_curve(tables):
    tables.shell_materials.append(Material(id="SHORT", stresses=[138.0] * 5))
    with pytest.raises(ValueError, match="SHORT"):
        tables.validate()
