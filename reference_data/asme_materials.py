"""
ASME Section II Part D - Allowable Stress Tables
Bolting (Table 3) and plate (Table 5A) materials

Structure: material id -> {min tensile (MPa), min yield (MPa), stresses}
Stress lists align index-for-index with BOLT_TEMP_STEPS / PLATE_TEMP_STEPS.
None marks a temperature with no published value.
Values are representative; replace them with the code edition of the project.
"""

# Temperature steps (°C) - never reorder without reordering every stress list
BOLT_TEMP_STEPS = [
    40, 65, 100, 125, 150, 175, 200, 225, 250, 275, 300, 325, 350, 375, 400, 425, 450,
    475, 500, 525, 550, 575, 600, 625, 650, 675, 700, 725, 750, 775, 800, 825, 850, 875, 900,
]

PLATE_TEMP_STEPS = [
    40, 65, 100, 125, 150, 200, 250, 300, 325, 350, 375, 400, 425, 450, 475, 500, 525,
    550, 575, 600, 625, 650, 675, 700, 725, 750, 775, 800, 825, 850, 875, 900,
]

AMBIENT_TEMP_C = 40

# Ambient bolt stress when the 40 °C entry is missing (MPa)
DEFAULT_AMBIENT_BOLT_STRESS = 138.0


def _stress_curve(points, temp_steps):
    """Spread {temperature: stress} points onto the step list, None elsewhere."""
    return [points.get(t) for t in temp_steps]


_B7_POINTS = {
    40: 172.0, 65: 172.0, 100: 172.0, 125: 172.0, 150: 172.0, 175: 172.0, 200: 172.0,
    225: 172.0, 250: 172.0, 275: 172.0, 300: 172.0, 325: 172.0, 350: 172.0, 375: 172.0,
    400: 165.0, 425: 149.0, 450: 129.0, 475: 110.0, 500: 88.0, 525: 66.0,
}

_B16_POINTS = {
    40: 172.0, 65: 172.0, 100: 172.0, 125: 172.0, 150: 172.0, 175: 172.0, 200: 172.0,
    225: 172.0, 250: 172.0, 275: 172.0, 300: 172.0, 325: 172.0, 350: 172.0, 375: 172.0,
    400: 172.0, 425: 165.0, 450: 154.0, 475: 137.0, 500: 115.0, 525: 88.0, 550: 63.0,
}

_L7_POINTS = {
    40: 172.0, 65: 172.0, 100: 172.0, 125: 172.0, 150: 172.0, 175: 172.0, 200: 172.0,
    225: 172.0, 250: 172.0, 275: 172.0, 300: 172.0, 325: 172.0, 350: 172.0, 375: 172.0,
}

_660A_POINTS = {
    40: 129.0, 65: 129.0, 100: 129.0, 125: 129.0, 150: 129.0, 175: 129.0, 200: 129.0,
    225: 129.0, 250: 129.0, 275: 129.0, 300: 129.0, 325: 129.0, 350: 129.0, 375: 129.0,
    400: 129.0, 425: 129.0, 450: 129.0, 475: 129.0, 500: 129.0, 525: 129.0, 550: 129.0,
}


def _carbon_steel_points(room_stress, high_temp_stresses):
    """Flat room-temperature stress up to 350 °C, then the tabulated drop-off."""
    points = {t: room_stress for t in PLATE_TEMP_STEPS if t <= 350}
    points.update(high_temp_stresses)
    return points


ASME_BOLT_MATERIALS = [
    {"id": "SA-193 B7 (<= 64)", "min_tensile": 860, "min_yield": 725,
     "stresses": _stress_curve(_B7_POINTS, BOLT_TEMP_STEPS)},
    {"id": "SA-193 B16 (<= 64)", "min_tensile": 860, "min_yield": 725,
     "stresses": _stress_curve(_B16_POINTS, BOLT_TEMP_STEPS)},
    {"id": "SA-320 L7 (<= 64)", "min_tensile": 860, "min_yield": 725,
     "stresses": _stress_curve(_L7_POINTS, BOLT_TEMP_STEPS)},
    {"id": "SA-453 660 A", "min_tensile": 900, "min_yield": 585,
     "stresses": _stress_curve(_660A_POINTS, BOLT_TEMP_STEPS)},
]

ASME_PLATE_MATERIALS = [
    {"id": "SA–516-55", "min_tensile": 380, "min_yield": 205,
     "stresses": _stress_curve(_carbon_steel_points(108.0, {375: 105.0, 400: 89.0, 425: 75.0, 450: 62.0, 475: 47.0, 500: 31.0}), PLATE_TEMP_STEPS)},
    {"id": "SA–516-60", "min_tensile": 415, "min_yield": 220,
     "stresses": _stress_curve(_carbon_steel_points(118.0, {375: 114.0, 400: 95.0, 425: 79.0, 450: 64.0, 475: 48.0, 500: 31.0}), PLATE_TEMP_STEPS)},
    {"id": "SA–516-65", "min_tensile": 450, "min_yield": 240,
     "stresses": _stress_curve(_carbon_steel_points(128.0, {375: 123.0, 400: 101.0, 425: 83.0, 450: 66.0, 475: 51.0, 500: 36.0}), PLATE_TEMP_STEPS)},
    {"id": "SA–516-70", "min_tensile": 485, "min_yield": 260,
     "stresses": _stress_curve(_carbon_steel_points(138.0, {375: 131.0, 400: 101.0, 425: 83.0, 450: 66.0, 475: 51.0, 500: 36.0}), PLATE_TEMP_STEPS)},
    {"id": "SA–240-316", "min_tensile": 515, "min_yield": 205,
     "stresses": _stress_curve({40: 138.0, 65: 138.0, 100: 138.0, 125: 138.0, 150: 138.0, 200: 134.0,
                                250: 125.0, 300: 118.0, 325: 116.0, 350: 113.0, 375: 111.0, 400: 110.0,
                                425: 109.0, 450: 108.0, 475: 107.0, 500: 106.0, 525: 105.0, 550: 104.0,
                                575: 90.0, 600: 74.0, 625: 61.0, 650: 50.0}, PLATE_TEMP_STEPS)},
]

ASME_SHELL_MATERIALS = list(ASME_PLATE_MATERIALS)

DEFAULT_BOLT_MATERIAL = "SA-193 B7 (<= 64)"
DEFAULT_SHELL_MATERIAL = "SA–516-70"


def get_material(materials, material_id):
    """
    Find a material by id.

    Parameters:
    -----------
    materials : list of dict
        ASME_BOLT_MATERIALS, ASME_PLATE_MATERIALS or a caller-edited copy
    material_id : str
        Material designation

    Returns:
    --------
    dict : Material entry, or None if not listed
    """
    for row in materials:
        if row["id"] == material_id:
            return row
    return None


def get_material_ids(materials):
    """List material designations in table order."""
    return [row["id"] for row in materials]


if __name__ == "__main__":
    print("ASME Section II Part D Allowable Stresses")
    print("=" * 70)
    print(f"Bolt temperature steps:  {len(BOLT_TEMP_STEPS)}")
    print(f"Plate temperature steps: {len(PLATE_TEMP_STEPS)}")

    for label, materials, steps in [("Bolting", ASME_BOLT_MATERIALS, BOLT_TEMP_STEPS),
                                    ("Plate", ASME_PLATE_MATERIALS, PLATE_TEMP_STEPS)]:
        print(f"\n{label} materials:")
        for row in materials:
            defined = [t for t, s in zip(steps, row["stresses"]) if s is not None]
            print(f"  {row['id']:<22} Sy = {row['min_yield']} MPa, "
                  f"published to {max(defined)} °C")
