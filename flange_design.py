"""
Flange Bolting & Gasket Design Calculation
TEMA / ASME VIII Div.2 Appendix 2 geometry + PCC-1 assembly bolt stress

Pipeline for one flange:
- Reference data: bolt spec, tensioning, ring standard, gasket factors, materials
- Geometry: BCD (three methods), gasket seating / ring dimensions, flange OD, pitch
- Bolt loads: Wm1 / Wm2, required vs. available bolt area
- PCC-1 (optional): Sbsel clamp chain and steps 5-8

Every call recomputes the full result from the inputs and the reference tables
passed in. Reference tables are never modified.
"""

import logging
import math
import re
from dataclasses import dataclass, field, asdict, fields
from typing import Dict, Any, List, Optional, Tuple

import pandas as pd

from calculations import calcs_units, calcs_interpolation, calcs_hub
from calculations import calcs_geometry, calcs_bolt_load, calcs_pcc1
from reference_data import tema_bolts, gaskets, asme_materials

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Input field groups driving recalculation
# -----------------------------------------------------------------------------
GEOMETRY_TRIGGERS = {
    "inside_dia", "bolt_count", "bolt_size", "g0", "c_clearance", "shell_gap_a",
    "gasket_seating_width",
}

G0_TRIGGERS = {
    "inside_dia", "design_temp", "temp_unit", "design_pressure", "pressure_unit",
    "shell_material", "joint_efficiency", "corrosion_allowance",
}

MANUAL_FIELDS = (
    "actual_bcd", "actual_od", "manual_seating_id", "manual_seating_od",
    "manual_m", "manual_y", "manual_pass_m", "manual_pass_y",
)

_CAMEL_ALIASES = {
    "phiFMax": "phi_f_max",
    "phiGMax": "phi_g_max",
}


def _snake_case(name: str) -> str:
    if name in _CAMEL_ALIASES:
        return _CAMEL_ALIASES[name]
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name).lower()


# -----------------------------------------------------------------------------
# Reference table records
# -----------------------------------------------------------------------------
@dataclass
class BoltSpec:
    size: float  # in
    R: float  # in
    B_min: float  # in
    E: float  # in
    hole_size: float  # mm
    tensile_area: float  # mm²
    b_min_whc: Optional[float] = None  # in


@dataclass
class TensioningSpec:
    size: float  # in
    B_ten: float  # in


@dataclass
class RingStandard:
    min_id: float  # mm
    max_id: float  # mm
    ir_min: float  # mm
    or_min: float  # mm


@dataclass
class GasketFactor:
    id: str
    m: float
    y: float  # psi
    sketches: str = ""


@dataclass
class Material:
    id: str
    stresses: List[Optional[float]]  # MPa, aligned with the temperature steps
    min_tensile: Optional[float] = None  # MPa
    min_yield: Optional[float] = None  # MPa


@dataclass
class ReferenceTables:
    """Snapshot of every lookup table one calculation reads."""
    bolt_specs: List[BoltSpec]
    tensioning_specs: List[TensioningSpec]
    ring_standards: List[RingStandard]
    gasket_factors: List[GasketFactor]
    bolt_materials: List[Material]
    shell_materials: List[Material]
    bolt_temp_steps: List[float] = field(default_factory=lambda: list(asme_materials.BOLT_TEMP_STEPS))
    plate_temp_steps: List[float] = field(default_factory=lambda: list(asme_materials.PLATE_TEMP_STEPS))
    whc_max_pitch: Dict[float, float] = field(default_factory=lambda: dict(tema_bolts.WHC_MAX_PITCH_TABLE))

    @classmethod
    def default(cls) -> "ReferenceTables":
        """Tables built from the bundled TEMA / ASME reference data."""
        return cls(
            bolt_specs=[BoltSpec(**row) for row in tema_bolts.TEMA_BOLT_DATA],
            tensioning_specs=[TensioningSpec(**row) for row in tema_bolts.HYDRAULIC_TENSIONING_DATA],
            ring_standards=[
                RingStandard(min_id=row["min"], max_id=row["max"], ir_min=row["ir_min"], or_min=row["or_min"])
                for row in gaskets.GASKET_RING_TABLE
            ],
            gasket_factors=[GasketFactor(**row) for row in gaskets.GASKET_TYPES],
            bolt_materials=[Material(**row) for row in asme_materials.ASME_BOLT_MATERIALS],
            shell_materials=[Material(**row) for row in asme_materials.ASME_SHELL_MATERIALS],
        )

    def validate(self) -> None:
        """
        Check the tables can serve a calculation.

        Lookups fall back to the first (or last) entry, so an empty table is the
        one condition a calculation cannot recover from. Call once when the
        tables are loaded or edited.

        Raises:
        -------
        ValueError : If a table is empty or a stress curve does not match its
                     temperature step list
        """
        for name in ("bolt_specs", "ring_standards", "gasket_factors",
                     "bolt_materials", "shell_materials"):
            if not getattr(self, name):
                raise ValueError(f"Reference table '{name}' is empty")

        for materials, steps, label in [(self.bolt_materials, self.bolt_temp_steps, "bolt"),
                                        (self.shell_materials, self.plate_temp_steps, "shell")]:
            if list(steps) != sorted(steps):
                raise ValueError(f"{label} temperature steps must be ascending")
            for mat in materials:
                if len(mat.stresses) != len(steps):
                    raise ValueError(
                        f"{label} material '{mat.id}' has {len(mat.stresses)} stress values "
                        f"for {len(steps)} temperature steps"
                    )


# -----------------------------------------------------------------------------
# Inputs and results
# -----------------------------------------------------------------------------
@dataclass
class FlangeInputs:
    # Identification
    item_no: str = "GEN-001"
    part_name: str = "CHANNEL SIDE"
    # Bolting
    bolt_size: float = 0.75  # in
    bolt_count: int = 48
    # Shell geometry (mm)
    inside_dia: float = 1000.0
    g0: float = 5
    g1: float = 7
    corrosion_allowance: float = 0.0
    joint_efficiency: float = 1.0
    # Clearances (mm)
    c_clearance: float = 2.5
    shell_gap_a: float = 3.0
    gasket_seating_width: float = 15.0
    # Rings
    has_inner_ring: bool = True
    has_outer_ring: bool = True
    inner_ring_width_manual: Optional[float] = None
    outer_ring_width_manual: Optional[float] = None
    # Manual override (None or 0 = use computed value)
    use_manual_override: bool = False
    actual_bcd: Optional[float] = None
    actual_od: Optional[float] = None
    manual_seating_id: Optional[float] = None
    manual_seating_od: Optional[float] = None
    manual_m: Optional[float] = None
    manual_y: Optional[float] = None
    manual_pass_m: Optional[float] = None
    manual_pass_y: Optional[float] = None
    # Process conditions
    design_temp: float = 100.0
    temp_unit: str = "°C"
    design_pressure: float = 1.0
    pressure_unit: str = "MPa"
    # Materials
    shell_material: str = asme_materials.DEFAULT_SHELL_MATERIAL
    bolt_material: str = asme_materials.DEFAULT_BOLT_MATERIAL
    gasket_type: str = gaskets.DEFAULT_GASKET_TYPE
    pass_gasket_type: str = gaskets.DEFAULT_GASKET_TYPE
    facing_sketch: str = calcs_geometry.FACING_SKETCHES[0]
    # Pass partition (mm)
    pass_partition_length: float = 0.0
    pass_partition_width: float = 0.0
    pass_part_area_reduction: float = 50.0  # %
    use_hydraulic_tensioning: bool = False
    # PCC-1 (MPa)
    use_pcc1_check: bool = False
    sg_t: float = 200.0
    sg_min_s: float = 140.0
    sg_min_o: float = 97.0
    sg_max: float = 0.0
    sb_max: float = 507.5
    sb_min: float = 290.0
    sf_max: float = 150.0
    phi_f_max: float = 0.32
    phi_g_max: float = 1.0
    g: float = 0.7
    # 'bcd', 'shell' or None (largest)
    gasket_preference: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlangeInputs":
        """Build inputs from a dict with snake_case or camelCase keys; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = key if key in known else _snake_case(key)
            if name in known:
                values[name] = value
            else:
                logger.debug("Ignoring unknown input field '%s'", key)
        return cls(**values)

    def with_changes(self, **changes) -> "FlangeInputs":
        """Copy of these inputs with some fields replaced."""
        return FlangeInputs(**{**asdict(self), **changes})

    def manual_value(self, name: str) -> Optional[float]:
        """A manual override value, or None when it does not apply."""
        value = getattr(self, name)
        if self.use_manual_override and value:
            return value
        return None


@dataclass
class ResolvedReferences:
    bolt_spec: BoltSpec
    tensioning_spec: Optional[TensioningSpec]
    ring_standard: RingStandard
    gasket_factor: GasketFactor
    pass_gasket_factor: GasketFactor
    bolt_material: Material
    shell_material: Material


@dataclass
class CalculationResults:
    # BCD methods and governing values (mm)
    bcd_method1: int
    bcd_method2: int
    bcd_method3: int
    selected_bcd_source: int
    bcd_tema: int
    od_tema: int
    final_bcd: float
    final_od: float
    # Bolt spacing
    effective_b_min: float  # in
    bolt_spacing_min: float  # mm
    max_bolt_spacing: float  # mm
    geometric_pitch: float  # mm
    actual_bolt_spacing: float  # mm
    spacing_ok: bool
    # Clearances and gasket dimensions (mm)
    radial_distance: float
    edge_distance: float
    effective_c: float
    shell_gap_a: float
    gasket_seating_width: float
    inner_ring_width: float
    outer_ring_width: float
    seating_od_from_bcd: float
    seating_od_from_shell: float
    gasket_id: float
    seating_id: float
    seating_od: float
    gasket_od: float
    max_raised_face: float
    bolt_hole_size: float
    # Bolt areas (mm²), loads (N) and allowable stresses (MPa)
    single_bolt_area: float
    total_bolt_area: float
    required_bolt_area: float
    total_bolt_load_ambient: float
    total_bolt_load_design: float
    ambient_allowable_stress: float
    design_allowable_stress: float
    # Gasket factors (y in psi)
    gasket_m: float
    gasket_y: float
    pass_m: float
    pass_y: float
    # ASME bolt loads (N) and gasket widths (mm)
    wm1: float
    wm2: float
    h_force: float
    hp_force: float
    g_mean_dia: float
    b_width: float
    b0_width: float
    n_width: float
    # Shell allowable at design temperature (MPa)
    shell_stress: float
    # Overall bolt load check
    is_safe: bool
    margin_percent: float
    required_area_clamped: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# -----------------------------------------------------------------------------
# Reference data resolver
# -----------------------------------------------------------------------------
def _find_first(rows, predicate):
    for row in rows:
        if predicate(row):
            return row
    return None


def resolve_references(inputs: FlangeInputs, tables: ReferenceTables) -> ResolvedReferences:
    """
    Select the reference records the inputs point at.

    Unmatched ids fall back: bolt spec, gasket and materials to the
    first entry, ring standard to the last, pass gasket to the main gasket.
    Tensioning has no fallback.
    """
    bolt_spec = _find_first(tables.bolt_specs, lambda b: b.size == inputs.bolt_size)
    if bolt_spec is None:
        logger.debug("Bolt size %s not tabulated, using %s", inputs.bolt_size, tables.bolt_specs[0].size)
        bolt_spec = tables.bolt_specs[0]

    tensioning_spec = _find_first(tables.tensioning_specs, lambda t: t.size == inputs.bolt_size)

    ring_standard = _find_first(
        tables.ring_standards, lambda r: r.min_id <= inputs.inside_dia <= r.max_id
    ) or tables.ring_standards[-1]

    gasket_factor = _find_first(tables.gasket_factors, lambda g: g.id == inputs.gasket_type)
    if gasket_factor is None:
        logger.debug("Gasket type '%s' not found, using '%s'", inputs.gasket_type, tables.gasket_factors[0].id)
        gasket_factor = tables.gasket_factors[0]

    pass_gasket_factor = _find_first(
        tables.gasket_factors, lambda g: g.id == inputs.pass_gasket_type
    ) or gasket_factor

    bolt_material = _find_first(tables.bolt_materials, lambda m: m.id == inputs.bolt_material)
    if bolt_material is None:
        logger.debug("Bolt material '%s' not found, using '%s'", inputs.bolt_material, tables.bolt_materials[0].id)
        bolt_material = tables.bolt_materials[0]

    shell_material = _find_first(tables.shell_materials, lambda m: m.id == inputs.shell_material)
    if shell_material is None:
        logger.debug("Shell material '%s' not found, using '%s'", inputs.shell_material, tables.shell_materials[0].id)
        shell_material = tables.shell_materials[0]

    return ResolvedReferences(
        bolt_spec=bolt_spec,
        tensioning_spec=tensioning_spec,
        ring_standard=ring_standard,
        gasket_factor=gasket_factor,
        pass_gasket_factor=pass_gasket_factor,
        bolt_material=bolt_material,
        shell_material=shell_material,
    )


# -----------------------------------------------------------------------------
# Shell thickness
# -----------------------------------------------------------------------------
def calculate_hub_thickness(inputs: FlangeInputs, tables: ReferenceTables) -> Dict[str, Any]:
    """
    Minimum shell thickness g0 and hub thickness g1 for the inputs.

    Returns:
    --------
    dict : calcs_hub.calculate_auto_g0 result plus 'shell_stress' (MPa)
    """
    shell_material = _find_first(tables.shell_materials, lambda m: m.id == inputs.shell_material) \
        or tables.shell_materials[0]
    temp_c = calcs_units.temperature_to_celsius(inputs.design_temp, inputs.temp_unit)
    shell_stress = calcs_interpolation.interpolate_stress(
        temp_c, shell_material.stresses, tables.plate_temp_steps
    )
    p_mpa = calcs_units.pressure_to_mpa(inputs.design_pressure, inputs.pressure_unit)

    result = calcs_hub.calculate_auto_g0(
        p_mpa, inputs.inside_dia, inputs.corrosion_allowance, shell_stress, inputs.joint_efficiency
    )
    if result['infeasible']:
        logger.warning(
            "S*E - 0.6P = %.2f MPa for shell '%s'; g0 = %s mm uses the 1 MPa floor",
            result['denominator'], shell_material.id, result['g0']
        )
    return {**result, 'shell_stress': shell_stress}


def auto_g0(inputs: FlangeInputs, tables: ReferenceTables) -> int:
    """Minimum shell thickness g0 (mm) from internal pressure."""
    return calculate_hub_thickness(inputs, tables)['g0']


# -----------------------------------------------------------------------------
# Evaluation
# -----------------------------------------------------------------------------
def evaluate(inputs: FlangeInputs, tables: ReferenceTables) -> CalculationResults:
    """
    Compute the complete flange geometry and bolt load result.

    Parameters:
    -----------
    inputs : FlangeInputs
        Flange design inputs
    tables : ReferenceTables
        Reference data snapshot (read only)

    Returns:
    --------
    CalculationResults : All derived geometry, loads and checks
    """
    refs = resolve_references(inputs, tables)
    bolt = refs.bolt_spec

    p_mpa = calcs_units.pressure_to_mpa(inputs.design_pressure, inputs.pressure_unit)
    temp_c = calcs_units.temperature_to_celsius(inputs.design_temp, inputs.temp_unit)

    geom = calcs_geometry.calculate_flange_geometry(
        inside_dia=inputs.inside_dia,
        g1=inputs.g1,
        bolt_size=inputs.bolt_size,
        bolt_count=inputs.bolt_count,
        radial_in=bolt.R,
        b_min_in=bolt.B_min,
        edge_in=bolt.E,
        hole_size=bolt.hole_size,
        ir_standard=refs.ring_standard.ir_min,
        or_standard=refs.ring_standard.or_min,
        c_clearance=inputs.c_clearance,
        shell_gap_a=inputs.shell_gap_a,
        seating_width=inputs.gasket_seating_width,
        has_inner_ring=inputs.has_inner_ring,
        has_outer_ring=inputs.has_outer_ring,
        inner_ring_manual=inputs.inner_ring_width_manual,
        outer_ring_manual=inputs.outer_ring_width_manual,
        b_ten_in=refs.tensioning_spec.B_ten if refs.tensioning_spec else None,
        use_tensioning=inputs.use_hydraulic_tensioning,
        preference=inputs.gasket_preference,
        manual_seating_id=inputs.manual_value("manual_seating_id"),
        manual_seating_od=inputs.manual_value("manual_seating_od"),
        actual_bcd=inputs.manual_value("actual_bcd"),
        actual_od=inputs.manual_value("actual_od"),
        facing_sketch=inputs.facing_sketch,
        whc_max_pitch=tables.whc_max_pitch,
    )

    gasket_m = inputs.manual_value("manual_m") or refs.gasket_factor.m
    gasket_y = inputs.manual_value("manual_y") or refs.gasket_factor.y
    pass_m = inputs.manual_value("manual_pass_m") or refs.pass_gasket_factor.m
    pass_y = inputs.manual_value("manual_pass_y") or refs.pass_gasket_factor.y

    ambient_stress = calcs_interpolation.stress_at_step(
        refs.bolt_material.stresses, tables.bolt_temp_steps,
        asme_materials.AMBIENT_TEMP_C, asme_materials.DEFAULT_AMBIENT_BOLT_STRESS
    )
    design_stress = calcs_interpolation.interpolate_stress(
        temp_c, refs.bolt_material.stresses, tables.bolt_temp_steps
    )

    loads = calcs_bolt_load.calculate_bolt_loads(
        g_mean_dia=geom['g_mean_dia'],
        b_width=geom['b_width'],
        p_mpa=p_mpa,
        gasket_m=gasket_m,
        gasket_y_psi=gasket_y,
        tensile_area=bolt.tensile_area,
        bolt_count=inputs.bolt_count,
        ambient_stress=ambient_stress,
        design_stress=design_stress,
        pass_width=inputs.pass_partition_width,
        pass_length=inputs.pass_partition_length,
        pass_m=pass_m,
        pass_y_psi=pass_y,
    )
    check = calcs_bolt_load.check_bolt_load_criteria(
        loads['total_bolt_load_design'], loads['wm1'], loads['wm2']
    )

    shell_stress = calcs_interpolation.interpolate_stress(
        temp_c, refs.shell_material.stresses, tables.plate_temp_steps
    )

    values = {
        **geom,
        **loads,
        'gasket_seating_width': geom['n_width'],
        'ambient_allowable_stress': ambient_stress,
        'design_allowable_stress': design_stress,
        'gasket_m': gasket_m,
        'gasket_y': gasket_y,
        'pass_m': pass_m,
        'pass_y': pass_y,
        'shell_stress': shell_stress,
        'is_safe': check['pass_fail'],
        'margin_percent': check['margin'],
    }
    return CalculationResults(**{f.name: values[f.name] for f in fields(CalculationResults)})


def evaluate_pcc1(inputs: FlangeInputs, results: CalculationResults) -> Dict[str, Any]:
    """
    PCC-1 selected bolt stress check for an evaluated flange.

    Returns:
    --------
    dict : calcs_pcc1.check_pcc1_criteria result plus 'active'
           (the use_pcc1_check flag; callers ignore 'safe' when inactive)
    """
    p_mpa = calcs_units.pressure_to_mpa(inputs.design_pressure, inputs.pressure_unit)
    result = calcs_pcc1.check_pcc1_criteria(
        single_bolt_area=results.single_bolt_area,
        bolt_count=inputs.bolt_count,
        seating_id=results.seating_id,
        seating_od=results.seating_od,
        p_mpa=p_mpa,
        sg_t=inputs.sg_t,
        sg_min_s=inputs.sg_min_s,
        sg_min_o=inputs.sg_min_o,
        sg_max=inputs.sg_max,
        sb_max=inputs.sb_max,
        sb_min=inputs.sb_min,
        sf_max=inputs.sf_max,
        phi_f_max=inputs.phi_f_max,
        phi_g_max=inputs.phi_g_max,
        g=inputs.g,
        pass_width=inputs.pass_partition_width,
        pass_length=inputs.pass_partition_length,
        pass_area_reduction_pct=inputs.pass_part_area_reduction,
    )
    return {'active': inputs.use_pcc1_check, **result}


def run_design_check(inputs: FlangeInputs, tables: ReferenceTables) -> Dict[str, Any]:
    """
    Evaluate a flange and every enabled check.

    Returns:
    --------
    dict : Dictionary containing:
        - results: CalculationResults
        - pcc1: evaluate_pcc1 result, or None when the PCC-1 check is off
        - all_pass: bolt load, spacing and (if enabled) PCC-1 all pass
    """
    results = evaluate(inputs, tables)
    pcc1 = evaluate_pcc1(inputs, results) if inputs.use_pcc1_check else None

    all_pass = results.is_safe and results.spacing_ok
    if pcc1 is not None:
        all_pass = all_pass and pcc1['safe']

    return {
        'results': results,
        'pcc1': pcc1,
        'all_pass': all_pass,
    }


# -----------------------------------------------------------------------------
# Input editing rules
# -----------------------------------------------------------------------------
def apply_pcc1_presets(inputs: FlangeInputs, tables: ReferenceTables) -> FlangeInputs:
    """Fill PCC-1 stresses from API 660 (by gasket family) and the bolt yield."""
    changes: Dict[str, Any] = {}

    gasket_stresses = calcs_pcc1.get_api660_gasket_stresses(inputs.gasket_type)
    if gasket_stresses:
        changes.update(gasket_stresses)

    bolt_material = _find_first(tables.bolt_materials, lambda m: m.id == inputs.bolt_material)
    if bolt_material and bolt_material.min_yield:
        changes.update(calcs_pcc1.bolt_stress_limits_from_yield(bolt_material.min_yield))

    for name, default in calcs_pcc1.PCC1_SECONDARY_DEFAULTS.items():
        if not getattr(inputs, name):
            changes[name] = default

    return inputs.with_changes(**changes)


def apply_input_change(inputs: FlangeInputs, changed_field: str,
                       tables: ReferenceTables) -> Tuple[FlangeInputs, Optional[bool]]:
    """
    Apply the follow-up rules for an edited input field.

    Parameters:
    -----------
    inputs : FlangeInputs
        Inputs that already contain the edited value
    changed_field : str
        Name of the edited field (snake_case or camelCase)
    tables : ReferenceTables
        Reference data snapshot

    Returns:
    --------
    tuple : (updated inputs, fixed-size search flag)
            The flag is False when a shell/process field changed, True when the
            bolt size was picked by hand, None when it is unaffected.
    """
    name = _snake_case(changed_field)
    changes: Dict[str, Any] = {}

    if name in GEOMETRY_TRIGGERS:
        changes["gasket_preference"] = None

    if name == "g0":
        changes["g1"] = calcs_hub.derive_g1(inputs.g0)

    if name in G0_TRIGGERS:
        g0 = auto_g0(inputs, tables)
        changes["g0"] = g0
        changes["g1"] = calcs_hub.derive_g1(g0)

    if name in ("bolt_material", "gasket_type"):
        bolt_material = _find_first(tables.bolt_materials, lambda m: m.id == inputs.bolt_material)
        if bolt_material and bolt_material.min_yield:
            changes.update(calcs_pcc1.bolt_stress_limits_from_yield(bolt_material.min_yield))

    updated = inputs.with_changes(**changes)

    if updated.use_pcc1_check and name in ("use_pcc1_check", "gasket_type", "bolt_material"):
        updated = apply_pcc1_presets(updated, tables)

    fixed_size = None
    if name in G0_TRIGGERS:
        fixed_size = False
    elif name == "bolt_size":
        fixed_size = True

    return updated, fixed_size


def gasket_bound_suggestions(inputs: FlangeInputs, results: CalculationResults) -> Dict[str, Tuple[float, float]]:
    """
    Seating (ID, OD) pairs for the two gasket sizing strategies.

    'bcd'   - largest seating OD that clears the bolt holes on the current BCD
    'shell' - smallest seating OD built outward from the shell ID
    """
    width = inputs.gasket_seating_width
    bcd_od = results.max_raised_face
    # Unrounded, unlike the auto seating OD
    shell_od = inputs.inside_dia + 2 * inputs.shell_gap_a + 2 * results.inner_ring_width + 2 * width
    return {
        'bcd': (bcd_od - 2 * width, bcd_od),
        'shell': (shell_od - 2 * width, shell_od),
    }


def apply_gasket_bounds(inputs: FlangeInputs, preference: str,
                        seating_id: float, seating_od: float) -> FlangeInputs:
    """Fix the gasket seating dimensions and record which strategy produced them."""
    if preference not in calcs_geometry.GASKET_PREFERENCES:
        raise ValueError(f"Unknown gasket preference '{preference}'")
    return inputs.with_changes(
        gasket_preference=preference,
        manual_seating_id=round(seating_id, 2),
        manual_seating_od=round(seating_od, 2),
    )


def reset_gasket_standard(inputs: FlangeInputs) -> FlangeInputs:
    """Restore standard clearances and clear manual gasket / bolt circle values."""
    return inputs.with_changes(
        c_clearance=calcs_geometry.DEFAULT_C_CLEARANCE,
        shell_gap_a=3.0,
        inner_ring_width_manual=None,
        outer_ring_width_manual=None,
        has_inner_ring=True,
        has_outer_ring=True,
        gasket_preference=None,
        use_hydraulic_tensioning=False,
        pass_partition_width=0.0,
        pass_partition_length=0.0,
        **{name: None for name in MANUAL_FIELDS},
        **calcs_pcc1.PCC1_SECONDARY_DEFAULTS,
    )


# -----------------------------------------------------------------------------
# Summary schedule
# -----------------------------------------------------------------------------
def summary_record(inputs: FlangeInputs, results: CalculationResults) -> Dict[str, Any]:
    """One flange schedule row for the evaluated inputs."""
    return {
        "ITEM NO": inputs.item_no or "-",
        "PART": inputs.part_name or "-",
        "FLG OD": round(results.final_od),
        "FLG ID": inputs.inside_dia,
        "FLG BCD": round(results.final_bcd),
        "GSK ROD": round(results.gasket_od, 1),
        "GSK OD": round(results.seating_od, 1),
        "GSK ID": round(results.seating_id, 1),
        "GSK RID": round(results.gasket_id, 1),
        "g0": inputs.g0,
        "g1": inputs.g1,
        "BOLT SIZE": tema_bolts.format_bolt_size(inputs.bolt_size),
        "BOLT EA": inputs.bolt_count,
        "MATERIAL": inputs.bolt_material,
        "TYPE": inputs.gasket_type,
        "PCC-1": "YES" if inputs.use_pcc1_check else "NO",
    }


def records_to_dataframe(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Flange schedule table from summary records."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame(records)


def format_margin(margin_percent: float) -> str:
    if math.isinf(margin_percent):
        return "∞"
    return f"{'+' if margin_percent > 0 else ''}{margin_percent:.1f}%"
