"""
Reference data for flange bolting and gasket design

This package contains:
- tema_bolts: TEMA D-5 bolting data, hydraulic tensioning and WHC pitch limits
- gaskets: ASME Table 2-5.1 gasket factors and spiral-wound ring widths
- asme_materials: ASME II-D allowable stresses for bolting and plate
- input_data.json: Sample flange cases for main.py
"""
