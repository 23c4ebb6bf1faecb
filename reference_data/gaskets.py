"""
ASME VIII Div.1 Table 2-5.1 - Gasket Materials and Contact Facings
Gasket factors m and y, and spiral-wound ring width standard

Structure: gasket type id -> {m, y (psi), applicable facing sketches}
"""

# ASME Table 2-5.1 gasket factors
GASKET_TYPES = [
    {"id": "Self-energizing types (O rings, metallic, elastomer, other gasket types)", "m": 0.0, "y": 0, "sketches": "..."},
    {"id": "Elastomers without fabric (below 75 A Shore Durometer)", "m": 0.50, "y": 0, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Elastomers without fabric (75 A or higher Shore Durometer)", "m": 1.00, "y": 200, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Mineral fiber w/ suitable binder (3.2 mm thick)", "m": 2.00, "y": 1600, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Mineral fiber w/ suitable binder (1.6 mm thick)", "m": 2.75, "y": 3700, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Mineral fiber w/ suitable binder (0.8 mm thick)", "m": 3.50, "y": 6500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Elastomers with cotton fabric insertion", "m": 1.25, "y": 400, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Elastomers with mineral fiber (3-ply)", "m": 2.25, "y": 2200, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Elastomers with mineral fiber (2-ply)", "m": 2.50, "y": 2900, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Elastomers with mineral fiber (1-ply)", "m": 2.75, "y": 3700, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Vegetable fiber", "m": 1.75, "y": 1100, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Spiral-wound (Carbon steel)", "m": 2.50, "y": 10000, "sketches": "(1a), (1b)"},
    {"id": "Spiral-wound (Stainless steel, Monel, and Ni-base alloy)", "m": 3.00, "y": 10000, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal, jacketed (Soft aluminum)", "m": 2.50, "y": 2900, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal, jacketed (Soft copper or brass)", "m": 2.75, "y": 3700, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal, jacketed (Iron or soft steel)", "m": 3.00, "y": 4500, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal, jacketed (Monel or 4%-6% chrome)", "m": 3.25, "y": 5500, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal, jacketed (Stainless steel and Ni-base alloys)", "m": 3.50, "y": 6500, "sketches": "(1a), (1b)"},
    {"id": "Corrugated metal (Soft aluminum)", "m": 2.75, "y": 3700, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Corrugated metal (Soft copper or brass)", "m": 3.00, "y": 4500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Corrugated metal (Iron or soft steel)", "m": 3.25, "y": 5500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Corrugated metal (Monel or 4%-6% chrome)", "m": 3.50, "y": 6500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Corrugated metal (Stainless steel and Ni-base alloys)", "m": 3.75, "y": 7600, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (Soft aluminum)", "m": 3.25, "y": 5500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (Soft copper or brass)", "m": 3.50, "y": 6500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (Iron or soft steel)", "m": 3.75, "y": 7600, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (Monel)", "m": 3.50, "y": 8000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (4%-6% chrome)", "m": 3.75, "y": 9000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Flat metal, jacketed (Stainless steel and Ni-base alloys)", "m": 3.75, "y": 9000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Grooved metal (Soft aluminum)", "m": 3.25, "y": 5500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Grooved metal (Soft copper or brass)", "m": 3.50, "y": 6500, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Grooved metal (Iron or soft steel)", "m": 3.75, "y": 7600, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Grooved metal (Monel or 4%-6% chrome)", "m": 3.75, "y": 9000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Grooved metal (Stainless steel and Ni-base alloys)", "m": 4.25, "y": 10100, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Solid flat metal (Soft aluminum)", "m": 4.00, "y": 8800, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Solid flat metal (Soft copper or brass)", "m": 4.75, "y": 13000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Solid flat metal (Iron or soft steel)", "m": 5.50, "y": 18000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Solid flat metal (Monel or 4%-6% chrome)", "m": 6.00, "y": 21800, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Solid flat metal (Stainless steel and Ni-base alloys)", "m": 6.50, "y": 26000, "sketches": "(1a), (1b), (1c), (1d)"},
    {"id": "Ring joint (Iron or soft steel)", "m": 5.50, "y": 18000, "sketches": "(2)"},
    {"id": "Ring joint (Monel or 4%-6% chrome)", "m": 6.00, "y": 21800, "sketches": "(2)"},
    {"id": "Ring joint (Stainless steel and Ni-base alloys)", "m": 6.50, "y": 26000, "sketches": "(2)"},
]

DEFAULT_GASKET_TYPE = "Spiral-wound (Stainless steel, Monel, and Ni-base alloy)"

# ASME B16.20 spiral-wound gasket minimum ring widths by shell ID range (mm)
# Format: min ID, max ID (inclusive), inner ring min width, outer ring min width
GASKET_RING_TABLE = [
    {"min": 0, "max": 40, "ir_min": 3, "or_min": 4},
    {"min": 41, "max": 63, "ir_min": 3, "or_min": 4},
    {"min": 64, "max": 100, "ir_min": 4, "or_min": 5},
    {"min": 101, "max": 160, "ir_min": 4, "or_min": 5},
    {"min": 161, "max": 250, "ir_min": 4, "or_min": 5},
    {"min": 251, "max": 400, "ir_min": 6, "or_min": 6},
    {"min": 401, "max": 630, "ir_min": 7, "or_min": 8},
    {"min": 631, "max": 1000, "ir_min": 9, "or_min": 8},
    {"min": 1001, "max": 1200, "ir_min": 12, "or_min": 10},
    {"min": 1201, "max": 1600, "ir_min": 15, "or_min": 10},
    {"min": 1601, "max": 2000, "ir_min": 20, "or_min": 12},
    {"min": 2001, "max": 100000, "ir_min": 20, "or_min": 15},
]


def get_gasket_factors(gasket_id):
    """
    Get ASME gasket factors for a gasket type.

    Parameters:
    -----------
    gasket_id : str
        Gasket type description as listed in GASKET_TYPES

    Returns:
    --------
    dict : {'id', 'm', 'y', 'sketches'}, or None if not listed
    """
    for row in GASKET_TYPES:
        if row["id"] == gasket_id:
            return row
    return None


def get_ring_widths(inside_dia):
    """
    Get minimum inner/outer ring widths for a shell inside diameter.

    Falls back to the last (largest) range when the ID exceeds every range.

    Returns:
    --------
    dict : {'min', 'max', 'ir_min', 'or_min'}
    """
    for row in GASKET_RING_TABLE:
        if row["min"] <= inside_dia <= row["max"]:
            return row
    return GASKET_RING_TABLE[-1]


if __name__ == "__main__":
    print("ASME Table 2-5.1 Gasket Factors")
    print("=" * 90)
    for row in GASKET_TYPES:
        print(f"  {row['id']:<75} m = {row['m']:<5} y = {row['y']}")

    print("\nRing widths:")
    for dia in [50, 500, 1000, 1500, 3000]:
        ring = get_ring_widths(dia)
        print(f"  ID {dia:>5} mm -> IR {ring['ir_min']} mm, OR {ring['or_min']} mm")
