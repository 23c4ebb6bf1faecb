"""
TEMA Table D-5 - Bolting Data
Bolt sizes, minimum pitch, radial and edge distances, hole sizes

Structure: nominal bolt size (inches) -> dimensional data
Dimensions in inches unless noted (hole size in mm, tensile area in mm²)
"""

# TEMA D-5 bolting data (8-UN thread series for 1" and larger)
# Format: size, R (radial distance), B_min (min bolt pitch), E (edge distance),
#         hole size (mm), tensile stress area (mm²), WHC minimum pitch (in)
TEMA_BOLT_DATA = [
    {"size": 0.5, "R": 0.8125, "B_min": 1.25, "E": 0.625, "hole_size": 15.875, "tensile_area": 81.29},
    {"size": 0.625, "R": 0.9375, "B_min": 1.5, "E": 0.75, "hole_size": 19.05, "tensile_area": 130.32},
    {"size": 0.75, "R": 1.125, "B_min": 1.75, "E": 0.8125, "hole_size": 22.225, "tensile_area": 194.84, "b_min_whc": 3.5433},
    {"size": 0.875, "R": 1.25, "B_min": 2.0625, "E": 0.9375, "hole_size": 25.4, "tensile_area": 270.32, "b_min_whc": 4.1732},
    {"size": 1.0, "R": 1.375, "B_min": 2.25, "E": 1.0625, "hole_size": 28.575, "tensile_area": 355.48, "b_min_whc": 4.5669},
    {"size": 1.125, "R": 1.5, "B_min": 2.5, "E": 1.125, "hole_size": 31.75, "tensile_area": 469.68, "b_min_whc": 5.0394},
    {"size": 1.25, "R": 1.75, "B_min": 2.8125, "E": 1.25, "hole_size": 34.925, "tensile_area": 599.35, "b_min_whc": 5.6693},
    {"size": 1.375, "R": 1.875, "B_min": 3.0625, "E": 1.375, "hole_size": 38.1, "tensile_area": 745.16, "b_min_whc": 6.1417},
    {"size": 1.5, "R": 2.0, "B_min": 3.25, "E": 1.5, "hole_size": 41.275, "tensile_area": 906.45, "b_min_whc": 6.5354},
    {"size": 1.625, "R": 2.125, "B_min": 3.5, "E": 1.625, "hole_size": 44.45, "tensile_area": 1083.87, "b_min_whc": 7.0079},
    {"size": 1.75, "R": 2.25, "B_min": 3.75, "E": 1.75, "hole_size": 47.625, "tensile_area": 1277.42, "b_min_whc": 7.5591},
    {"size": 1.875, "R": 2.375, "B_min": 4.0, "E": 1.875, "hole_size": 50.8, "tensile_area": 1486.45, "b_min_whc": 8.0315},
    {"size": 2.0, "R": 2.5, "B_min": 4.25, "E": 2.0, "hole_size": 53.975, "tensile_area": 1710.96, "b_min_whc": 8.5039},
    {"size": 2.25, "R": 2.75, "B_min": 4.75, "E": 2.25, "hole_size": 60.325, "tensile_area": 2208.38, "b_min_whc": 9.5276},
    {"size": 2.5, "R": 3.0625, "B_min": 5.25, "E": 2.5, "hole_size": 66.675, "tensile_area": 2768.16, "b_min_whc": 10.5512},
    {"size": 2.75, "R": 3.375, "B_min": 5.75, "E": 2.625, "hole_size": 76.2, "tensile_area": 3392.90, "b_min_whc": 11.5748},
    {"size": 3.0, "R": 3.625, "B_min": 6.25, "E": 2.875, "hole_size": 82.55, "tensile_area": 4079.56, "b_min_whc": 12.5197},
    {"size": 3.25, "R": 3.75, "B_min": 6.625, "E": 3.0, "hole_size": 88.9, "tensile_area": 4830.31, "b_min_whc": 13.3071},
    {"size": 3.5, "R": 4.125, "B_min": 7.125, "E": 3.25, "hole_size": 95.25, "tensile_area": 5644.50, "b_min_whc": 14.3307},
    {"size": 3.75, "R": 4.4375, "B_min": 7.625, "E": 3.5, "hole_size": 101.6, "tensile_area": 6521.28, "b_min_whc": 15.2756},
    {"size": 4.0, "R": 4.625, "B_min": 8.125, "E": 3.625, "hole_size": 107.95, "tensile_area": 7461.92, "b_min_whc": 16.2992},
]

# Minimum bolt pitch for hydraulic tensioning tools (inches)
HYDRAULIC_TENSIONING_DATA = [
    {"size": 0.75, "B_ten": 2.1},
    {"size": 0.875, "B_ten": 2.1},
    {"size": 1.0, "B_ten": 2.5},
    {"size": 1.125, "B_ten": 2.5},
    {"size": 1.25, "B_ten": 2.9},
    {"size": 1.375, "B_ten": 3.2},
    {"size": 1.5, "B_ten": 3.3},
    {"size": 1.625, "B_ten": 3.7},
    {"size": 1.75, "B_ten": 3.8},
    {"size": 1.875, "B_ten": 4.5},
    {"size": 2.0, "B_ten": 4.6},
    {"size": 2.25, "B_ten": 4.9},
    {"size": 2.5, "B_ten": 5.1},
    {"size": 2.75, "B_ten": 6.0},
    {"size": 3.0, "B_ten": 6.1},
    {"size": 3.25, "B_ten": 7.0},
    {"size": 3.5, "B_ten": 7.3},
    {"size": 3.75, "B_ten": 7.6},
    {"size": 4.0, "B_ten": 7.8},
]

# WHC maximum bolt pitch by bolt size: size (in) -> max pitch (mm)
WHC_MAX_PITCH_TABLE = {
    0.5: 65, 0.625: 78, 0.75: 90, 0.875: 106, 1.0: 116, 1.125: 128, 1.25: 144,
    1.375: 156, 1.5: 166, 1.625: 178, 1.75: 192, 1.875: 204, 2.0: 216, 2.25: 242,
    2.5: 268, 2.75: 294, 3.0: 318, 3.25: 338, 3.5: 364, 3.75: 388, 4.0: 414,
}

# Smallest bolt the size search considers (inches)
MIN_SEARCH_BOLT_SIZE = 0.75


def get_bolt_data(size):
    """
    Get TEMA bolting data for a nominal bolt size.

    Parameters:
    -----------
    size : float
        Nominal bolt size in inches

    Returns:
    --------
    dict : Bolting data, or None if the size is not tabulated
    """
    for row in TEMA_BOLT_DATA:
        if row["size"] == size:
            return row
    return None


def get_available_bolt_sizes(min_size=0.0):
    """Get tabulated bolt sizes (inches) at or above min_size, in table order."""
    return [row["size"] for row in TEMA_BOLT_DATA if row["size"] >= min_size]


def format_bolt_size(size):
    """Format a bolt size for schedules, e.g. 0.75 -> '0.75\"'"""
    return f"{size:g}\""


if __name__ == "__main__":
    print("TEMA Table D-5 Bolting Data")
    print("=" * 60)
    print(f"  {'Size':<8} {'R (in)':<8} {'B_min (in)':<11} {'E (in)':<8} {'Hole (mm)':<10} {'At (mm²)':<10}")
    for row in TEMA_BOLT_DATA:
        print(f"  {format_bolt_size(row['size']):<8} {row['R']:<8} {row['B_min']:<11} "
              f"{row['E']:<8} {row['hole_size']:<10} {row['tensile_area']:<10}")
    print(f"\nSearchable sizes (>= {MIN_SEARCH_BOLT_SIZE}\"): {get_available_bolt_sizes(MIN_SEARCH_BOLT_SIZE)}")
