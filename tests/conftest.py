"""Pytest configuration for the flange design tests.

Puts the project root on sys.path and provides a small reference table bundle
with flat allowable stresses so expected values can be worked by hand.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from flange_design import (  # noqa: E402
    BoltSpec, TensioningSpec, RingStandard, GasketFactor, Material,
    ReferenceTables, FlangeInputs,
)
from reference_data import tema_bolts, gaskets, asme_materials  # noqa: E402

SPIRAL_SS = "Spiral-wound (Stainless steel, Monel, and Ni-base alloy)"
GROOVED_SS = "Grooved metal (Stainless steel and Ni-base alloys)"
RING_JOINT_SS = "Ring joint (Stainless steel and Ni-base alloys)"
SELF_ENERGIZING = "Self-energizing types (O rings, metallic, elastomer, other gasket types)"

TEST_BOLT = "TEST BOLT 172"
TEST_BOLT_NO_AMBIENT = "TEST BOLT NO 40C"
TEST_PLATE = "TEST PLATE 138"

TEST_BOLT_SIZES = (0.5, 0.75, 1.0, 1.25)


@pytest.fixture
def tables() -> ReferenceTables:
    bolt_steps = list(asme_materials.BOLT_TEMP_STEPS)
    plate_steps = list(asme_materials.PLATE_TEMP_STEPS)

    no_ambient = [172.0] * len(bolt_steps)
    no_ambient[0] = None

    return ReferenceTables(
        bolt_specs=[BoltSpec(**row) for row in tema_bolts.TEMA_BOLT_DATA if row["size"] in TEST_BOLT_SIZES],
        tensioning_specs=[
            TensioningSpec(**row) for row in tema_bolts.HYDRAULIC_TENSIONING_DATA
            if row["size"] in TEST_BOLT_SIZES
        ],
        ring_standards=[
            RingStandard(min_id=row["min"], max_id=row["max"], ir_min=row["ir_min"], or_min=row["or_min"])
            for row in gaskets.GASKET_RING_TABLE
        ],
        gasket_factors=[
            GasketFactor(**gaskets.get_gasket_factors(gasket_id))
            for gasket_id in (SELF_ENERGIZING, SPIRAL_SS, GROOVED_SS, RING_JOINT_SS)
        ],
        bolt_materials=[
            Material(id=TEST_BOLT, stresses=[172.0] * len(bolt_steps), min_tensile=860, min_yield=725),
            Material(id=TEST_BOLT_NO_AMBIENT, stresses=no_ambient, min_tensile=860, min_yield=500),
        ],
        shell_materials=[
            Material(id=TEST_PLATE, stresses=[138.0] * len(plate_steps), min_tensile=485, min_yield=260),
        ],
        bolt_temp_steps=bolt_steps,
        plate_temp_steps=plate_steps,
        whc_max_pitch=dict(tema_bolts.WHC_MAX_PITCH_TABLE),
    )


@pytest.fixture
def base_inputs() -> FlangeInputs:
    """1000 mm shell, 48 x 3/4" bolts, 1 MPa at 100 °C, spiral-wound gasket."""
    return FlangeInputs(
        shell_material=TEST_PLATE,
        bolt_material=TEST_BOLT,
        gasket_type=SPIRAL_SS,
        pass_gasket_type=SPIRAL_SS,
    )
