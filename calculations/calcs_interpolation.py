"""
Allowable Stress Interpolation
Piecewise-linear lookup over ASME Section II Part D temperature/stress tables
"""


def clean_stress_curve(stress_curve):
    """
    Replace missing (None) stress entries with 0.

    A missing published value is read as zero allowable stress, so a curve
    with gaps interpolates towards zero across the gap.
    """
    return [s if s is not None else 0.0 for s in stress_curve]


def interpolate_stress(temperature, stress_curve, temp_steps):
    """
    Interpolate allowable stress at a given temperature.

    Parameters:
    -----------
    temperature : float
        Target temperature (°C)
    stress_curve : list of float or None
        Stress values aligned index-for-index with temp_steps
    temp_steps : list of float
        Ascending temperature steps (°C)

    Returns:
    --------
    float : Allowable stress (same units as stress_curve)

    Notes:
    - Below the first step the first value is returned, above the last step
      the last value is returned (no extrapolation).
    - Missing entries count as 0 at both ends of a bracketing interval.
    """
    clean_curve = clean_stress_curve(stress_curve)

    if temperature <= temp_steps[0]:
        return clean_curve[0]
    if temperature >= temp_steps[-1]:
        return clean_curve[-1]

    for i in range(len(temp_steps) - 1):
        t1 = temp_steps[i]
        t2 = temp_steps[i + 1]
        if t1 <= temperature <= t2:
            s1 = clean_curve[i]
            s2 = clean_curve[i + 1]
            return s1 + (s2 - s1) * (temperature - t1) / (t2 - t1)

    return clean_curve[0]


def stress_at_step(stress_curve, temp_steps, step, fallback):
    """
    Read the tabulated stress at an exact temperature step.

    Returns `fallback` when the step is not in the table or the entry is
    missing or zero.
    """
    if step not in temp_steps:
        return fallback
    value = stress_curve[temp_steps.index(step)]
    return value or fallback


if __name__ == "__main__":
    steps = [40, 100, 150, 200]
    curve = [172.0, 172.0, None, 150.0]
    print("Stress Interpolation")
    print("=" * 60)
    for t in [20, 40, 70, 125, 175, 200, 300]:
        print(f"  T = {t:>4} °C -> S = {interpolate_stress(t, curve, steps):.2f} MPa")
