"""
ASME VIII - Minimum Shell / Hub Thickness (g0, g1)
Internal pressure thickness for cylindrical shells under circumferential stress
"""

import math

# Denominator used when S*E - 0.6*P is not positive
DENOMINATOR_FLOOR = 1.0


def derive_g1(g0):
    """
    Hub thickness at the flange from the shell thickness.

    Formula: g1 = ceil(g0 * 1.3 / 3 + g0)
    """
    return math.ceil(g0 * 1.3 / 3 + g0)


def calculate_auto_g0(p_mpa, inside_dia, corrosion_allowance, shell_stress, joint_efficiency):
    """
    Calculate the minimum shell thickness g0 from internal pressure.

    Formula: g0 = ceil( P * (R + CA) / (S*E - 0.6*P) + CA )

    Parameters:
    -----------
    p_mpa : float
        Design pressure (MPa)
    inside_dia : float
        Shell inside diameter (mm)
    corrosion_allowance : float
        Corrosion allowance (mm)
    shell_stress : float
        Allowable shell stress at design temperature (MPa)
    joint_efficiency : float
        Weld joint efficiency E

    Returns:
    --------
    dict : Dictionary containing:
        - g0: Minimum shell thickness, rounded up (mm)
        - g1: Hub thickness derived from g0 (mm)
        - denominator: Raw S*E - 0.6*P (MPa)
        - infeasible: True when the denominator was not positive and the
          floor of 1 MPa was used instead; g0 is then finite but meaningless
    """
    denominator = shell_stress * joint_efficiency - 0.6 * p_mpa
    infeasible = denominator <= 0
    effective_denominator = denominator if not infeasible else DENOMINATOR_FLOOR

    g0 = math.ceil(p_mpa * (inside_dia / 2 + corrosion_allowance) / effective_denominator
                   + corrosion_allowance)

    return {
        'g0': g0,
        'g1': derive_g1(g0),
        'denominator': denominator,
        'infeasible': infeasible,
    }


if __name__ == "__main__":
    print("Minimum Shell Thickness (g0 / g1)")
    print("=" * 60)
    for p in [0.5, 1.0, 2.0, 5.0]:
        result = calculate_auto_g0(p, 1000.0, 3.0, 138.0, 1.0)
        print(f"  P = {p:>4} MPa -> g0 = {result['g0']} mm, g1 = {result['g1']} mm")

    result = calculate_auto_g0(1.0, 1000.0, 0.0, 0.0, 1.0)
    print(f"  S = 0 MPa     -> g0 = {result['g0']} mm (infeasible: {result['infeasible']})")
