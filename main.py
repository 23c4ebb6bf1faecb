"""
Flange Bolting & Gasket Design Tool
TEMA / ASME VIII Div.2 Appendix 2 and ASME PCC-1 Checker

For every flange in reference_data/input_data.json this tool reports:
- Bolt circle diameter (three TEMA methods) and flange OD
- Gasket seating, ring and assembly diameters
- Bolt spacing against TEMA minimum / WHC maximum pitch
- Required vs. available bolt load (Wm1 operating, Wm2 seating)
- PCC-1 Appendix O selected bolt stress (when enabled)
- Optional optimizer result and bolt configuration sweep
"""

import json
import logging
import math
import sys

from flange_design import (
    FlangeInputs, ReferenceTables, run_design_check, calculate_hub_thickness,
    summary_record, records_to_dataframe, format_margin,
)
from flange_optimizer import optimize, evaluate_bolt_configurations
from calculations import calcs_units
from reference_data import tema_bolts


def load_input_data(filename='reference_data/input_data.json'):
    """Load flange cases from JSON configuration file."""
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
        return data
    except FileNotFoundError:
        print(f"Error: Configuration file '{filename}' not found.")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in '{filename}': {e}")
        sys.exit(1)


def format_force(value_n, unit):
    return f"{calcs_units.convert_force(value_n, unit):,.1f} {unit}"


def print_pcc1_results(pcc1):
    """
    Print the PCC-1 Appendix O step table.

    Parameters:
    -----------
    pcc1 : dict
        flange_design.evaluate_pcc1 result
    """
    print(f"\nPCC-1 ASSEMBLY BOLT STRESS (Appendix O):")
    print(f"  Gasket Area Ag:             {pcc1['total_ag']:,.0f} mm²")
    print(f"  Bolt Root Area Ab:          {pcc1['total_bolt_root_area']:,.0f} mm²")
    print(f"  Sbsel (SgT * Ag / Ab):      {pcc1['sb_sel_calc']:.1f} MPa")
    print(f"  Sbsel (after limits):       {pcc1['sb_sel_final']:.1f} MPa")
    print()

    def format_threshold(value):
        return "N/A" if math.isinf(value) else f"{value:.1f}"

    print(f"  {'Check':<36} {'Limit (MPa)':<14} {'Status':<8}")
    print(f"  {'-'*60}")
    steps = [
        (5, "5. Gasket seating (>=)"),
        (6, "6. Operating gasket stress (>=)"),
        (7, "7. Max gasket stress (<=)"),
        (8, "8. Flange rotation (<=)"),
    ]
    for step, label in steps:
        status = 'PASS' if pcc1[f'step{step}_pass'] else 'FAIL'
        print(f"  {label:<36} {format_threshold(pcc1[f'step{step}_threshold']):<14} {status:<8}")
    print(f"  {'-'*60}")
    print(f"  {'PCC-1 STATUS':<36} {'':<14} {'PASS' if pcc1['safe'] else 'FAIL':<8}")


def print_results(inputs, check, hub):
    """
    Print flange design report to console.

    Parameters:
    -----------
    inputs : FlangeInputs
        Evaluated inputs
    check : dict
        flange_design.run_design_check result
    hub : dict
        flange_design.calculate_hub_thickness result
    """
    results = check['results']
    force_unit = calcs_units.default_force_unit(inputs.pressure_unit)

    print("\n" + "="*90)
    print(f"FLANGE DESIGN REPORT")
    print("="*90)
    print(f"Item: {inputs.item_no}")
    print(f"Part: {inputs.part_name}")
    print("-"*90)

    print(f"\nINPUT PARAMETERS:")
    print(f"  Shell Inside Diameter:      {inputs.inside_dia:.1f} mm")
    print(f"  Design Pressure:            {inputs.design_pressure} {inputs.pressure_unit}")
    print(f"  Design Temperature:         {inputs.design_temp} {inputs.temp_unit}")
    print(f"  Shell Material:             {inputs.shell_material}  (S = {results.shell_stress:.1f} MPa)")
    print(f"  Bolt Material:              {inputs.bolt_material}")
    print(f"  Gasket Type:                {inputs.gasket_type}")
    print(f"  Bolting:                    {tema_bolts.format_bolt_size(inputs.bolt_size)} x {inputs.bolt_count} EA"
          f"{'  (hydraulic tensioning)' if inputs.use_hydraulic_tensioning else ''}")
    print(f"  g0 / g1:                    {inputs.g0} / {inputs.g1} mm  "
          f"(required g0 = {hub['g0']} mm{', floored denominator' if hub['infeasible'] else ''})")
    if inputs.use_manual_override:
        print(f"  Manual Override:            ON")

    print(f"\nBOLT CIRCLE:")
    print(f"  Method 1 (min pitch):       {results.bcd_method1} mm")
    print(f"  Method 2 (hub + radial):    {results.bcd_method2} mm")
    print(f"  Method 3 (gasket + C):      {results.bcd_method3} mm")
    print(f"  TEMA BCD:                   {results.bcd_tema} mm  (method {results.selected_bcd_source})")
    print(f"  Final BCD:                  {results.final_bcd:.0f} mm")
    print(f"  Flange OD:                  {results.final_od:.0f} mm  (TEMA {results.od_tema} mm)")
    print(f"  Bolt Pitch:                 {results.geometric_pitch:.1f} mm  "
          f"(limits {results.bolt_spacing_min:.1f} - {results.max_bolt_spacing:.1f} mm)  "
          f"{'OK' if results.spacing_ok else 'NG'}")

    print(f"\nGASKET:")
    print(f"  Assembly ID / OD:           {results.gasket_id:.1f} / {results.gasket_od:.1f} mm")
    print(f"  Seating ID / OD:            {results.seating_id:.1f} / {results.seating_od:.1f} mm")
    print(f"  Inner / Outer Ring:         {results.inner_ring_width} / {results.outer_ring_width} mm")
    print(f"  Max Raised Face:            {results.max_raised_face} mm")
    print(f"  N / b0 / b:                 {results.n_width:.2f} / {results.b0_width:.2f} / {results.b_width:.2f} mm")
    print(f"  G:                          {results.g_mean_dia:.1f} mm")
    print(f"  m / y:                      {results.gasket_m} / {results.gasket_y} psi")

    print(f"\nBOLT LOADS:")
    print(f"  H  (end force):             {format_force(results.h_force, force_unit)}")
    print(f"  Hp (gasket reaction):       {format_force(results.hp_force, force_unit)}")
    print(f"  Wm1 (operating):            {format_force(results.wm1, force_unit)}")
    print(f"  Wm2 (seating):              {format_force(results.wm2, force_unit)}")
    print(f"  Sa / Sb:                    {results.ambient_allowable_stress:.1f} / "
          f"{results.design_allowable_stress:.1f} MPa")
    print(f"  Required Bolt Area:         {results.required_bolt_area:,.0f} mm²"
          f"{'  (zero allowable stress floored)' if results.required_area_clamped else ''}")
    print(f"  Available Bolt Area:        {results.total_bolt_area:,.0f} mm²")
    print(f"  Bolt Load @ Design Temp:    {format_force(results.total_bolt_load_design, force_unit)}")
    print(f"  Margin:                     {format_margin(results.margin_percent)}")
    print(f"  Strength:                   {'PASS' if results.is_safe else 'FAIL'}")

    if check['pcc1'] is not None:
        print_pcc1_results(check['pcc1'])

    print("\n" + "-"*90)
    print(f"  {'OVERALL STATUS':<36} {'PASS' if check['all_pass'] else 'FAIL'}")


def main():
    """Main execution function."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "="*90)
    print("FLANGE BOLTING & GASKET DESIGN TOOL")
    print("TEMA / ASME VIII Div.2 Appendix 2 & ASME PCC-1")
    print("="*90)

    print("\nLoading configuration from 'reference_data/input_data.json'...")
    data = load_input_data()

    options = data.get('options', {})
    flanges = data['flanges']

    tables = ReferenceTables.default()
    tables.validate()

    print(f"Loaded {len(flanges)} flange(s) for analysis.")

    records = []
    for i, flange in enumerate(flanges, 1):
        print(f"\n\n{'='*90}")
        print(f"ANALYZING FLANGE {i} of {len(flanges)}")
        print(f"{'='*90}")

        inputs = FlangeInputs.from_dict(flange)
        check = run_design_check(inputs, tables)
        hub = calculate_hub_thickness(inputs, tables)
        print_results(inputs, check, hub)
        records.append(summary_record(inputs, check['results']))

        if options.get('optimize', False):
            result = optimize(inputs, tables, fixed_size=options.get('fixed_bolt_size', False))
            print(f"\nOPTIMIZER:")
            print(f"  {result.summary()}")

        if options.get('show_sweep', False):
            sweep = evaluate_bolt_configurations(inputs, tables, options.get('fixed_bolt_size', False))
            passing = sweep[sweep["Status"] == "PASS"]
            print(f"\nBOLT CONFIGURATION SWEEP ({len(passing)} of {len(sweep)} pass):")
            if not passing.empty:
                print(passing.sort_values("BCD (mm)").head(10).to_string(index=False))

    print("\n\n" + "="*90)
    print("FLANGE SCHEDULE")
    print("="*90)
    print(records_to_dataframe(records).to_string(index=False))

    print("\n\n" + "="*90)
    print("ANALYSIS COMPLETE")
    print("="*90)


if __name__ == "__main__":
    main()
