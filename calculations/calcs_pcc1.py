"""
ASME PCC-1 Appendix O - Selected Assembly Bolt Stress (Sbsel)
Gasket stress limits per API 660 referenced values
"""

import math

# Absolute tolerance applied to every PCC-1 comparison
PCC1_TOLERANCE = 0.001

# API 660 Table - gasket stress limits (MPa)
# Format: gasket family keyword -> {sg_max, sg_min_s, sg_min_o}
API660_GASKET_STRESSES = {
    'grooved': {'sg_max': 380.0, 'sg_min_s': 140.0, 'sg_min_o': 97.0},
    'corruga': {'sg_max': 275.0, 'sg_min_s': 140.0, 'sg_min_o': 97.0},
    'spiral': {'sg_max': 0.0, 'sg_min_s': 140.0, 'sg_min_o': 97.0},
}

# Secondary PCC-1 parameters filled in when left blank
PCC1_SECONDARY_DEFAULTS = {
    'phi_f_max': 0.32,
    'phi_g_max': 1.0,
    'g': 0.7,
    'pass_part_area_reduction': 50.0,
}


def get_api660_gasket_stresses(gasket_type):
    """
    API 660 gasket stress limits for a gasket type description.

    Parameters:
    -----------
    gasket_type : str
        Gasket type id, e.g. 'Spiral-wound (Carbon steel)'

    Returns:
    --------
    dict or None : {'sg_max', 'sg_min_s', 'sg_min_o'} in MPa, or None if the
                   gasket family has no API 660 entry
    """
    type_lower = (gasket_type or "").lower()
    for keyword, stresses in API660_GASKET_STRESSES.items():
        if keyword in type_lower:
            return dict(stresses)
    return None


def bolt_stress_limits_from_yield(min_yield):
    """Sbmax = 0.7 Sy, Sbmin = 0.4 Sy (MPa, rounded to 0.1)."""
    return {
        'sb_max': round(min_yield * 0.7 * 10) / 10,
        'sb_min': round(min_yield * 0.4 * 10) / 10,
    }


def calculate_gasket_area(seating_id, seating_od, pass_width=0.0, pass_length=0.0,
                          pass_area_reduction_pct=50.0):
    """
    Gasket contact area Ag (mm²).

    Formula: Ag = pi/4 * (OD² - ID²) + (reduction% / 100) * w_pp * l_pp
    """
    ring_area = (math.pi / 4) * (seating_od ** 2 - seating_id ** 2)
    reduced_pass_area = (pass_area_reduction_pct / 100) * pass_width * pass_length
    return {
        'ring_area': ring_area,
        'reduced_pass_area': reduced_pass_area,
        'total_ag': ring_area + reduced_pass_area,
    }


def calculate_selected_bolt_stress(sg_t, total_ag, total_bolt_root_area,
                                   sb_max=0.0, sb_min=0.0, sf_max=0.0):
    """
    Selected assembly bolt stress Sbsel per PCC-1 Appendix O steps 1-4.

    Step 1: Sbsel = SgT * Ag / Ab
    Step 2: Sbsel = min(Sbsel, Sbmax)
    Step 3: Sbsel = max(Sbsel, Sbmin)
    Step 4: Sbsel = min(Sbsel, Sfmax)

    A zero Sbmax or Sfmax means "no upper limit"; a zero Sbmin means no lower limit.

    Returns:
    --------
    dict : sb_sel_calc and the value after each clamp step
    """
    sb_sel_calc = sg_t * total_ag / total_bolt_root_area if total_bolt_root_area > 0 else 0.0

    step2 = min(sb_sel_calc, sb_max or math.inf)
    step3 = max(step2, sb_min or 0.0)
    step4 = min(step3, sf_max or math.inf)

    return {
        'sb_sel_calc': sb_sel_calc,
        'sb_sel_step2': step2,
        'sb_sel_step3': step3,
        'sb_sel_final': step4,
    }


def check_pcc1_criteria(single_bolt_area, bolt_count, seating_id, seating_od, p_mpa,
                        sg_t, sg_min_s, sg_min_o, sg_max=0.0,
                        sb_max=0.0, sb_min=0.0, sf_max=0.0,
                        phi_f_max=0.0, phi_g_max=1.0, g=0.7,
                        pass_width=0.0, pass_length=0.0, pass_area_reduction_pct=50.0):
    """
    Check the selected assembly bolt stress against PCC-1 steps 5-8.

    Step 5: Sbsel >= SgminS * Ag / Ab                           (gasket seating)
    Step 6: Sbsel >= [SgminO * Ag + pi/4 * P * ID²] / (g * Ab)  (operating)
    Step 7: Sbsel <= Sgmax * Ag / Ab      (skipped when Sgmax = 0)
    Step 8: Sbsel <= Sfmax * phiGmax / phiFmax  (skipped when phiFmax = 0)

    Parameters:
    -----------
    single_bolt_area : float
        Root / tensile area of one bolt (mm²)
    bolt_count : int
        Number of bolts
    seating_id, seating_od : float
        Gasket sealing element ID and OD (mm)
    p_mpa : float
        Design pressure (MPa)
    sg_t : float
        Target assembly gasket stress (MPa)
    sg_min_s, sg_min_o : float
        Minimum gasket seating / operating stress (MPa)
    sg_max : float
        Maximum permissible gasket stress (MPa), 0 = not limited
    sb_max, sb_min : float
        Maximum / minimum permissible bolt stress (MPa)
    sf_max : float
        Maximum permissible bolt stress for the flange (MPa)
    phi_f_max, phi_g_max : float
        Flange rotation limits
    g : float
        Fraction of assembly stress retained in operation (default 0.7)

    Returns:
    --------
    dict : Dictionary containing areas, Sbsel values, each step threshold and
           pass flag, and 'safe' (all four steps pass)
    """
    total_bolt_root_area = single_bolt_area * bolt_count
    area = calculate_gasket_area(seating_id, seating_od, pass_width, pass_length,
                                 pass_area_reduction_pct)
    total_ag = area['total_ag']

    sb_sel = calculate_selected_bolt_stress(sg_t, total_ag, total_bolt_root_area,
                                            sb_max, sb_min, sf_max)
    sb_sel_final = sb_sel['sb_sel_final']

    if total_bolt_root_area > 0:
        area_ratio = total_ag / total_bolt_root_area
        step5_threshold = sg_min_s * area_ratio
        step6_numerator = sg_min_o * total_ag + (math.pi / 4) * p_mpa * seating_id ** 2
        step6_threshold = step6_numerator / ((g or 1) * total_bolt_root_area)
        step7_threshold = sg_max * area_ratio
    else:
        step5_threshold = 0.0
        step6_threshold = 0.0
        step7_threshold = math.inf

    if phi_f_max > 0:
        step8_threshold = sf_max * ((phi_g_max or 1) / phi_f_max)
    else:
        step8_threshold = math.inf

    step5_pass = sb_sel_final >= step5_threshold - PCC1_TOLERANCE
    step6_pass = sb_sel_final >= step6_threshold - PCC1_TOLERANCE
    step7_pass = True if sg_max == 0 else sb_sel_final <= step7_threshold + PCC1_TOLERANCE
    step8_pass = True if phi_f_max == 0 else sb_sel_final <= step8_threshold + PCC1_TOLERANCE

    return {
        'total_bolt_root_area': total_bolt_root_area,
        'ring_area': area['ring_area'],
        'reduced_pass_area': area['reduced_pass_area'],
        'total_ag': total_ag,
        **sb_sel,
        'step5_threshold': step5_threshold,
        'step6_threshold': step6_threshold,
        'step7_threshold': step7_threshold,
        'step8_threshold': step8_threshold,
        'step5_pass': step5_pass,
        'step6_pass': step6_pass,
        'step7_pass': step7_pass,
        'step8_pass': step8_pass,
        'safe': step5_pass and step6_pass and step7_pass and step8_pass,
    }


if __name__ == "__main__":
    print("PCC-1 Appendix O - Selected Bolt Stress")
    print("=" * 70)

    result = check_pcc1_criteria(
        single_bolt_area=194.84, bolt_count=48, seating_id=1024.0, seating_od=1054.0,
        p_mpa=1.0, sg_t=200.0, sg_min_s=140.0, sg_min_o=97.0, sg_max=0.0,
        sb_max=507.5, sb_min=290.0, sf_max=150.0, phi_f_max=0.32, phi_g_max=1.0, g=0.7,
    )

    print(f"  Ag:                 {result['total_ag']:,.0f} mm²")
    print(f"  Ab:                 {result['total_bolt_root_area']:,.0f} mm²")
    print(f"  Sbsel (calc):       {result['sb_sel_calc']:.1f} MPa")
    print(f"  Sbsel (final):      {result['sb_sel_final']:.1f} MPa")
    for step in (5, 6, 7, 8):
        status = 'PASS' if result[f'step{step}_pass'] else 'FAIL'
        print(f"  Step {step}: threshold {result[f'step{step}_threshold']:>10.1f} MPa  {status}")
    print(f"  Status:             {'PASS' if result['safe'] else 'FAIL'}")
