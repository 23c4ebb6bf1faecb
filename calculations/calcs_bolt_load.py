"""
ASME VIII Div.2 Part 4.16 / Div.1 Appendix 2 - Flange Bolt Loads
Operating (Wm1) and gasket seating (Wm2) bolt loads and required bolt area
"""

import math

from calculations.calcs_units import PSI_TO_MPA

# Allowable stress used when a zero allowable would divide the load
STRESS_FLOOR = 1.0


def calculate_hydrostatic_end_force(g_mean_dia, p_mpa):
    """H = 0.785 * G^2 * P  (N, with G in mm and P in MPa)"""
    return 0.785 * g_mean_dia ** 2 * p_mpa


def calculate_gasket_reaction_force(g_mean_dia, b_width, gasket_m, p_mpa,
                                    pass_width=0.0, pass_length=0.0, pass_m=0.0):
    """
    Total joint-contact compression load Hp (N).

    Formula: Hp = 2 * P * (b * pi * G * m + w_pp * l_pp * m_pp)
    """
    return 2 * p_mpa * (b_width * math.pi * g_mean_dia * gasket_m
                        + pass_width * pass_length * pass_m)


def calculate_seating_load(g_mean_dia, b_width, gasket_y_psi,
                           pass_width=0.0, pass_length=0.0, pass_y_psi=0.0):
    """
    Minimum bolt load for gasket seating Wm2 (N).

    Formula: Wm2 = pi * b * G * y + w_pp * l_pp * y_pp   (y converted PSI -> MPa)
    """
    return (math.pi * b_width * g_mean_dia * (gasket_y_psi * PSI_TO_MPA)
            + pass_width * pass_length * (pass_y_psi * PSI_TO_MPA))


def calculate_bolt_loads(g_mean_dia, b_width, p_mpa, gasket_m, gasket_y_psi,
                         tensile_area, bolt_count,
                         ambient_stress, design_stress,
                         pass_width=0.0, pass_length=0.0, pass_m=0.0, pass_y_psi=0.0):
    """
    Calculate required and available bolt loads.

    Parameters:
    -----------
    g_mean_dia : float
        Gasket load reaction diameter G (mm)
    b_width : float
        Effective gasket seating width b (mm)
    p_mpa : float
        Design pressure (MPa)
    gasket_m : float
        Gasket factor m
    gasket_y_psi : float
        Gasket seating stress y (psi)
    tensile_area : float
        Tensile stress area of one bolt (mm²)
    bolt_count : int
        Number of bolts
    ambient_stress : float
        Bolt allowable stress at ambient temperature Sa (MPa)
    design_stress : float
        Bolt allowable stress at design temperature Sb (MPa)
    pass_width, pass_length : float
        Pass partition gasket contact width and length (mm)
    pass_m : float
        Pass partition gasket factor m
    pass_y_psi : float
        Pass partition gasket seating stress y (psi)

    Returns:
    --------
    dict : Dictionary containing:
        - h_force, hp_force, wm1, wm2: Loads (N)
        - single_bolt_area, total_bolt_area, required_bolt_area: Areas (mm²)
        - total_bolt_load_ambient, total_bolt_load_design: Available loads (N)
        - required_area_clamped: True if a zero allowable stress was floored to 1 MPa
    """
    h_force = calculate_hydrostatic_end_force(g_mean_dia, p_mpa)
    hp_force = calculate_gasket_reaction_force(
        g_mean_dia, b_width, gasket_m, p_mpa, pass_width, pass_length, pass_m
    )
    wm1 = h_force + hp_force
    wm2 = calculate_seating_load(
        g_mean_dia, b_width, gasket_y_psi, pass_width, pass_length, pass_y_psi
    )

    total_bolt_area = tensile_area * bolt_count

    # Operating load is carried at design temperature, seating at ambient
    req_area_operating = wm1 / (design_stress or STRESS_FLOOR)
    req_area_seating = wm2 / (ambient_stress or STRESS_FLOOR)
    required_bolt_area = max(req_area_operating, req_area_seating)

    return {
        'h_force': h_force,
        'hp_force': hp_force,
        'wm1': wm1,
        'wm2': wm2,
        'single_bolt_area': tensile_area,
        'total_bolt_area': total_bolt_area,
        'req_area_operating': req_area_operating,
        'req_area_seating': req_area_seating,
        'required_bolt_area': required_bolt_area,
        'total_bolt_load_ambient': total_bolt_area * ambient_stress,
        'total_bolt_load_design': total_bolt_area * design_stress,
        'required_area_clamped': not design_stress or not ambient_stress,
    }


def check_bolt_load_criteria(total_bolt_load_design, wm1, wm2):
    """
    Check available bolt load at design temperature against the governing load.

    Check: W_design >= max(Wm1, Wm2)

    Returns:
    --------
    dict : Dictionary containing:
        - pass_fail: Boolean, True if the bolting carries the governing load
        - governing_load: max(Wm1, Wm2) (N)
        - margin: (W_design - max) / max * 100 (%)
    """
    governing_load = max(wm1, wm2)
    margin = (total_bolt_load_design - governing_load) / (governing_load or 1) * 100

    return {
        'pass_fail': total_bolt_load_design >= governing_load,
        'governing_load': governing_load,
        'margin': margin,
    }


if __name__ == "__main__":
    print("Flange Bolt Loads - G = 1040 mm, b = 6.9 mm, 1.0 MPa")
    print("=" * 70)

    loads = calculate_bolt_loads(
        g_mean_dia=1040.2, b_width=6.90, p_mpa=1.0,
        gasket_m=3.0, gasket_y_psi=10000.0,
        tensile_area=194.84, bolt_count=48,
        ambient_stress=172.0, design_stress=172.0,
    )
    check = check_bolt_load_criteria(loads['total_bolt_load_design'], loads['wm1'], loads['wm2'])

    print(f"  H:                 {loads['h_force'] / 1000:,.1f} kN")
    print(f"  Hp:                {loads['hp_force'] / 1000:,.1f} kN")
    print(f"  Wm1 (operating):   {loads['wm1'] / 1000:,.1f} kN")
    print(f"  Wm2 (seating):     {loads['wm2'] / 1000:,.1f} kN")
    print(f"  Required area:     {loads['required_bolt_area']:,.0f} mm²")
    print(f"  Available area:    {loads['total_bolt_area']:,.0f} mm²")
    print(f"  Margin:            {check['margin']:.1f}%")
    print(f"  Status:            {'PASS' if check['pass_fail'] else 'FAIL'}")
