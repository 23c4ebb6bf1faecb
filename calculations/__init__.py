"""
Calculation modules for flange bolting and gasket design per TEMA, ASME VIII Div.2 Appendix 2 and ASME PCC-1

This package contains all calculation modules:
- calcs_units: Pressure, temperature and force unit conversion
- calcs_interpolation: Allowable stress vs. temperature interpolation
- calcs_hub: Minimum shell thickness g0 and hub thickness g1
- calcs_geometry: Bolt circle, flange OD, gasket seating and bolt spacing
- calcs_bolt_load: Hydrostatic / gasket loads and required bolt area
- calcs_pcc1: PCC-1 selected assembly bolt stress check
"""
