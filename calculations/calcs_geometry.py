"""
TEMA / ASME VIII Div.2 - Flange Bolting and Gasket Geometry
Bolt circle diameter, gasket seating dimensions, flange OD and bolt spacing

BCD is the largest of three TEMA/gasket methods:
- Method 1: Minimum bolt pitch (TEMA Table D-5 B_min)
- Method 2: Hub / radial clearance (TEMA Table D-5 R)
- Method 3: Gasket OD + wrench / hole clearance
"""

import math

MM_PER_INCH = 25.4

# Radial allowance between gasket and bolt hole on each side (mm)
BOLT_HOLE_ALLOWANCE = 1.5

# Clearance used when C is entered as 0 (mm)
DEFAULT_C_CLEARANCE = 2.5

# ASME Table 2-5.2: basic widths above this use the b = 0.5*sqrt(b0) correction (mm)
WIDE_GASKET_B0_LIMIT = 6.0

GASKET_PREFERENCES = ('bcd', 'shell')

FACING_SKETCHES = [
    "1a: Flat Face / Groove",
    "1b: Flat Face",
    "1c: Tongue & Groove",
    "1d: Flat Face w/ Nubbin",
    "2: Ring Joint",
]


def resolve_ring_width(has_ring, manual_width, standard_width):
    """Ring width in mm: 0 without a ring, else the manual width or the table minimum."""
    if not has_ring:
        return 0.0
    return manual_width or standard_width


def effective_b_min(b_min, b_ten=None, use_tensioning=False):
    """
    Minimum bolt pitch in inches.

    With hydraulic tensioning the tool clearance B_ten governs when it is
    larger than the TEMA B_min.
    """
    if use_tensioning and b_ten is not None:
        return max(b_min, b_ten)
    return b_min


def bcd_min_pitch(b_min_in, bolt_count):
    """Method 1: BCD = ceil(B_min * 25.4 * n / pi)"""
    return math.ceil(b_min_in * MM_PER_INCH * bolt_count / math.pi)


def bcd_hub_radial(inside_dia, g1, radial_in):
    """Method 2: BCD = ceil(ID + 2*g1 + 2*R*25.4)"""
    return math.ceil(inside_dia + 2 * g1 + 2 * (radial_in * MM_PER_INCH))


def bcd_gasket_clearance(gasket_od, c_clearance, hole_size):
    """Method 3: BCD = ceil(gasket OD + 2*1.5 + 2*C + hole)"""
    return math.ceil(gasket_od + 2 * BOLT_HOLE_ALLOWANCE + 2 * c_clearance + hole_size)


def raised_face_limit(bcd, hole_size, c_clearance, outer_ring_width):
    """Largest seating OD that still clears the bolt holes: ceil(BCD - hole - 2C - 2*1.5 - 2*OR)"""
    return math.ceil(bcd - hole_size - 2 * c_clearance - 2 * BOLT_HOLE_ALLOWANCE - 2 * outer_ring_width)


def shell_seating_od(inside_dia, shell_gap_a, inner_ring_width, seating_width):
    """Seating OD built outward from the shell: ceil(ID + 2A + 2*IR + 2*N)"""
    return math.ceil(inside_dia + 2 * shell_gap_a + 2 * inner_ring_width + 2 * seating_width)


def calculate_auto_seating_od(base_bcd, hole_size, c_clearance, outer_ring_width,
                              inside_dia, shell_gap_a, inner_ring_width, seating_width,
                              preference=None):
    """
    Auto gasket seating OD from the two competing constraints.

    Parameters:
    -----------
    base_bcd : float
        max(Method 1, Method 2) BCD (mm)
    hole_size : float
        Bolt hole diameter (mm)
    c_clearance : float
        Effective clearance C (mm)
    outer_ring_width, inner_ring_width : float
        Resolved ring widths (mm)
    inside_dia : float
        Shell inside diameter (mm)
    shell_gap_a : float
        Gap between shell ID and gasket ID (mm)
    seating_width : float
        Gasket seating (sealing element) width (mm)
    preference : str or None
        'bcd', 'shell' or None (largest of the two)

    Returns:
    --------
    dict : Dictionary containing:
        - from_bcd: Seating OD working inward from the bolt circle
        - from_shell: Seating OD working outward from the shell
        - seating_od: Selected seating OD
    """
    from_bcd = raised_face_limit(base_bcd, hole_size, c_clearance, outer_ring_width)
    from_shell = shell_seating_od(inside_dia, shell_gap_a, inner_ring_width, seating_width)

    if preference == 'shell':
        seating_od = from_shell
    elif preference == 'bcd':
        seating_od = from_bcd
    else:
        seating_od = max(from_bcd, from_shell)

    return {
        'from_bcd': from_bcd,
        'from_shell': from_shell,
        'seating_od': seating_od,
    }


def select_bcd(bcd_method1, bcd_method2, bcd_method3):
    """
    Governing BCD and the method that produced it.

    Ties resolve to the lowest-numbered method.

    Returns:
    --------
    tuple : (bcd, source) with source in {1, 2, 3}
    """
    bcd = max(bcd_method1, bcd_method2, bcd_method3)
    if bcd == bcd_method1:
        source = 1
    elif bcd == bcd_method2:
        source = 2
    else:
        source = 3
    return bcd, source


def max_bolt_pitch(bolt_size, whc_max_pitch=None):
    """
    Maximum allowable bolt pitch (mm).

    Uses the WHC table by bolt size, else 2.5 * d * 25.4 + 12.
    """
    table = whc_max_pitch or {}
    return table.get(bolt_size) or (2.5 * bolt_size * MM_PER_INCH + 12)


def check_bolt_spacing(bcd, bolt_count, b_min_in, max_pitch):
    """
    Check the geometric bolt pitch against the minimum and maximum limits.

    Returns:
    --------
    dict : Dictionary containing:
        - geometric_pitch: pi * BCD / n (mm)
        - bolt_spacing_min: B_min * 25.4 (mm)
        - max_bolt_spacing: Maximum pitch (mm)
        - spacing_ok: True if min <= pitch <= max
    """
    # No bolts: infinite pitch, spacing NG
    geometric_pitch = math.pi * bcd / bolt_count if bolt_count else math.inf
    bolt_spacing_min = b_min_in * MM_PER_INCH

    return {
        'geometric_pitch': geometric_pitch,
        'bolt_spacing_min': bolt_spacing_min,
        'max_bolt_spacing': max_pitch,
        'spacing_ok': bolt_spacing_min <= geometric_pitch <= max_pitch,
    }


def gasket_basic_width(n_width, facing_sketch):
    """
    Basic gasket seating width b0 per ASME Table 2-5.2.

    Sketch 1a/1b: N/2, 1c/1d: N/4, 2 (ring joint): N/8, otherwise N/2.
    """
    sketch = facing_sketch or ""
    if sketch.startswith('1a') or sketch.startswith('1b'):
        return n_width / 2
    elif sketch.startswith('1c') or sketch.startswith('1d'):
        return n_width / 4
    elif sketch.startswith('2'):
        return n_width / 8
    return n_width / 2


def gasket_effective_width(b0_width, seating_id, seating_od):
    """
    Effective seating width b and gasket load reaction diameter G.

    b0 <= 6 mm: b = b0, G = mean of seating ID and OD
    b0 >  6 mm: b = 0.5 * 25.4 * sqrt(b0 / 25.4), G = seating OD - 2b

    Returns:
    --------
    dict : Dictionary containing:
        - b_width: Effective seating width b (mm)
        - g_mean_dia: Gasket reaction diameter G (mm)
    """
    if b0_width > WIDE_GASKET_B0_LIMIT:
        b_width = 0.5 * MM_PER_INCH * math.sqrt(b0_width / MM_PER_INCH)
        g_mean_dia = seating_od - 2 * b_width
    else:
        b_width = b0_width
        g_mean_dia = (seating_id + seating_od) / 2

    return {
        'b_width': b_width,
        'g_mean_dia': g_mean_dia,
    }


def calculate_flange_geometry(inside_dia, g1, bolt_size, bolt_count,
                              radial_in, b_min_in, edge_in, hole_size,
                              ir_standard, or_standard,
                              c_clearance=DEFAULT_C_CLEARANCE, shell_gap_a=3.0,
                              seating_width=15.0,
                              has_inner_ring=True, has_outer_ring=True,
                              inner_ring_manual=None, outer_ring_manual=None,
                              b_ten_in=None, use_tensioning=False,
                              preference=None,
                              manual_seating_id=None, manual_seating_od=None,
                              actual_bcd=None, actual_od=None,
                              facing_sketch="1a", whc_max_pitch=None):
    """
    Resolve the complete bolting and gasket geometry.

    Manual values (manual_seating_id/od, actual_bcd/od) are passed already
    resolved: None or 0 means "use the computed value".

    Parameters:
    -----------
    inside_dia : float
        Shell inside diameter (mm)
    g1 : float
        Hub thickness at flange (mm)
    bolt_size : float
        Nominal bolt diameter (in)
    bolt_count : int
        Number of bolts
    radial_in, b_min_in, edge_in : float
        TEMA R, B_min and E for the bolt size (in)
    hole_size : float
        Bolt hole diameter (mm)
    ir_standard, or_standard : float
        Minimum inner / outer ring widths for the shell ID (mm)

    Returns:
    --------
    dict : All geometric results (mm unless noted)
    """
    effective_c = c_clearance or DEFAULT_C_CLEARANCE

    # 1. Ring widths
    inner_ring_width = resolve_ring_width(has_inner_ring, inner_ring_manual, ir_standard)
    outer_ring_width = resolve_ring_width(has_outer_ring, outer_ring_manual, or_standard)

    # 2-4. Minimum pitch and the two bolt-driven BCD methods
    eff_b_min = effective_b_min(b_min_in, b_ten_in, use_tensioning)
    bcd_method1 = bcd_min_pitch(eff_b_min, bolt_count)
    radial_distance = radial_in * MM_PER_INCH
    bcd_method2 = bcd_hub_radial(inside_dia, g1, radial_in)

    # 5. Auto seating OD
    auto_seating = calculate_auto_seating_od(
        max(bcd_method1, bcd_method2), hole_size, effective_c, outer_ring_width,
        inside_dia, shell_gap_a, inner_ring_width, seating_width, preference
    )

    # 6. Seating ID / OD (manual replaces the auto value directly)
    seating_od = manual_seating_od or auto_seating['seating_od']
    seating_id = manual_seating_id or (seating_od - 2 * seating_width)

    # 7. Assembly boundary including rings
    gasket_od = seating_od + (2 * outer_ring_width if has_outer_ring else 0)
    gasket_id = seating_id - (2 * inner_ring_width if has_inner_ring else 0)

    # 8-9. Gasket-driven BCD and the governing value
    bcd_method3 = bcd_gasket_clearance(gasket_od, effective_c, hole_size)
    bcd_tema, selected_bcd_source = select_bcd(bcd_method1, bcd_method2, bcd_method3)
    final_bcd = actual_bcd or bcd_tema

    # 10. Flange OD
    edge_distance = edge_in * MM_PER_INCH
    od_tema = math.ceil(final_bcd + 2 * edge_distance)
    final_od = actual_od or od_tema

    # 11. Bolt spacing
    max_pitch = max_bolt_pitch(bolt_size, whc_max_pitch)
    spacing = check_bolt_spacing(final_bcd, bolt_count, eff_b_min, max_pitch)

    # 12-13. Gasket widths per ASME Table 2-5.2
    n_width = (seating_od - seating_id) / 2
    b0_width = gasket_basic_width(n_width, facing_sketch)
    effective = gasket_effective_width(b0_width, seating_id, seating_od)

    return {
        'bcd_method1': bcd_method1,
        'bcd_method2': bcd_method2,
        'bcd_method3': bcd_method3,
        'selected_bcd_source': selected_bcd_source,
        'bcd_tema': bcd_tema,
        'od_tema': od_tema,
        'final_bcd': final_bcd,
        'final_od': final_od,
        'effective_b_min': eff_b_min,
        'bolt_spacing_min': spacing['bolt_spacing_min'],
        'max_bolt_spacing': spacing['max_bolt_spacing'],
        'geometric_pitch': spacing['geometric_pitch'],
        'actual_bolt_spacing': spacing['max_bolt_spacing'],
        'spacing_ok': spacing['spacing_ok'],
        'radial_distance': radial_distance,
        'edge_distance': edge_distance,
        'effective_c': effective_c,
        'shell_gap_a': shell_gap_a,
        'inner_ring_width': inner_ring_width,
        'outer_ring_width': outer_ring_width,
        'seating_od_from_bcd': auto_seating['from_bcd'],
        'seating_od_from_shell': auto_seating['from_shell'],
        'gasket_id': gasket_id,
        'seating_id': seating_id,
        'seating_od': seating_od,
        'gasket_od': gasket_od,
        'max_raised_face': raised_face_limit(final_bcd, hole_size, effective_c, outer_ring_width),
        'bolt_hole_size': hole_size,
        'n_width': n_width,
        'b0_width': b0_width,
        'b_width': effective['b_width'],
        'g_mean_dia': effective['g_mean_dia'],
    }


if __name__ == "__main__":
    print("Flange Geometry - 1000 mm shell, 48 x 3/4\" bolts")
    print("=" * 70)

    geom = calculate_flange_geometry(
        inside_dia=1000.0, g1=7, bolt_size=0.75, bolt_count=48,
        radial_in=1.125, b_min_in=1.75, edge_in=0.8125, hole_size=22.225,
        ir_standard=9, or_standard=8,
        whc_max_pitch={0.75: 90},
    )

    print(f"  BCD Method 1 (min pitch):     {geom['bcd_method1']} mm")
    print(f"  BCD Method 2 (hub/radial):    {geom['bcd_method2']} mm")
    print(f"  BCD Method 3 (gasket):        {geom['bcd_method3']} mm")
    print(f"  Final BCD (method {geom['selected_bcd_source']}):       {geom['final_bcd']} mm")
    print(f"  Flange OD:                    {geom['final_od']} mm")
    print(f"  Gasket ID/OD:                 {geom['gasket_id']} / {geom['gasket_od']} mm")
    print(f"  Seating ID/OD:                {geom['seating_id']} / {geom['seating_od']} mm")
    print(f"  Pitch:                        {geom['geometric_pitch']:.1f} mm "
          f"({'OK' if geom['spacing_ok'] else 'NG'})")
    print(f"  b0 / b / G:                   {geom['b0_width']:.2f} / {geom['b_width']:.2f} / "
          f"{geom['g_mean_dia']:.1f} mm")
