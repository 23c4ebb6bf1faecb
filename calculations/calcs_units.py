"""
Unit Conversions for Flange Design Inputs
Pressure -> MPa, Temperature -> °C, Force N -> display units
"""

# Conversion factors to MPa
PSI_TO_MPA = 0.00689476
BAR_TO_MPA = 0.1
KGCM2_TO_MPA = 0.0980665

PRESSURE_UNITS = ["MPa", "Bar", "PSI", "kg/cm²"]
TEMPERATURE_UNITS = ["°C", "°F", "K"]
FORCE_UNITS = ["N", "kN", "lbf", "kgf"]


def pressure_to_mpa(value, unit):
    """
    Convert a pressure to MPa.

    Parameters:
    -----------
    value : float
        Pressure in the given unit
    unit : str
        One of 'MPa', 'Bar', 'PSI', 'kg/cm²'

    Returns:
    --------
    float : Pressure in MPa (unrecognized units are treated as MPa)
    """
    if unit == "Bar":
        return value * BAR_TO_MPA
    elif unit == "PSI":
        return value * PSI_TO_MPA
    elif unit == "kg/cm²":
        return value * KGCM2_TO_MPA
    return value


def temperature_to_celsius(value, unit):
    """
    Convert a temperature to °C.

    Parameters:
    -----------
    value : float
        Temperature in the given unit
    unit : str
        One of '°C', '°F', 'K'

    Returns:
    --------
    float : Temperature in °C (unrecognized units pass through unchanged)
    """
    if unit == "°F":
        return (value - 32) * 5 / 9
    elif unit == "K":
        return value - 273.15
    return value


def default_force_unit(pressure_unit):
    """Force unit that pairs with the pressure unit the user entered."""
    if pressure_unit == "PSI":
        return "lbf"
    elif pressure_unit == "kg/cm²":
        return "kgf"
    return "kN"


def convert_force(value_n, unit):
    """
    Convert a force in Newtons to the requested display unit.

    Parameters:
    -----------
    value_n : float
        Force in N
    unit : str
        'N', 'kN', 'lbf' or 'kgf'

    Returns:
    --------
    float : Force in the requested unit (N for anything unrecognized)
    """
    factors = {
        'kN': 1.0 / 1000.0,
        'lbf': 0.224809,
        'kgf': 0.101972,
    }
    return value_n * factors.get(unit, 1.0)


if __name__ == "__main__":
    print("Unit Conversions")
    print("=" * 60)
    for unit in PRESSURE_UNITS:
        print(f"  10 {unit:<7} = {pressure_to_mpa(10.0, unit):.5f} MPa")
    for unit in TEMPERATURE_UNITS:
        print(f"  100 {unit:<3} = {temperature_to_celsius(100.0, unit):.2f} °C")
    for unit in FORCE_UNITS:
        print(f"  1000 N = {convert_force(1000.0, unit):.3f} {unit}")
