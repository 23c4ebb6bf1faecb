"""
Bolt Configuration Optimizer
Brute-force search over bolt size x bolt count for the minimum bolt circle

A candidate is feasible when the design-temperature bolt load covers
max(Wm1, Wm2) and the bolt pitch lies within the TEMA / WHC spacing limits.
The feasible candidate with the smallest TEMA bolt circle wins; the first
one found wins ties (sizes in table order, then counts ascending).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Optional

import pandas as pd

from flange_design import FlangeInputs, ReferenceTables, evaluate, auto_g0
from calculations import calcs_hub
from reference_data import tema_bolts

logger = logging.getLogger(__name__)

# Bolt counts tried for every size (multiples of 4)
SEARCH_BOLT_COUNTS = list(range(4, 81, 4))


class SearchMode(Enum):
    FULL_SEARCH_AUTO_GASKET = "Full Search + Auto Gasket"
    FULL_SEARCH_FIXED_GASKET = "Full Search + Fixed Gasket"
    FIXED_SIZE_AUTO_GASKET = "Fixed Size + Auto Gasket"
    FIXED_SIZE_FIXED_GASKET = "Fixed Size + Fixed Gasket"

    @classmethod
    def from_flags(cls, fixed_size: bool, fixed_gasket: bool) -> "SearchMode":
        if fixed_size:
            return cls.FIXED_SIZE_FIXED_GASKET if fixed_gasket else cls.FIXED_SIZE_AUTO_GASKET
        return cls.FULL_SEARCH_FIXED_GASKET if fixed_gasket else cls.FULL_SEARCH_AUTO_GASKET

    @property
    def fixed_size(self) -> bool:
        return self in (SearchMode.FIXED_SIZE_AUTO_GASKET, SearchMode.FIXED_SIZE_FIXED_GASKET)

    @property
    def fixed_gasket(self) -> bool:
        return self in (SearchMode.FULL_SEARCH_FIXED_GASKET, SearchMode.FIXED_SIZE_FIXED_GASKET)


@dataclass
class OptimizationResult:
    success: bool
    mode: SearchMode
    size: Optional[float] = None
    count: Optional[int] = None
    min_bcd: Optional[float] = None
    inputs: Optional[FlangeInputs] = None
    candidates_evaluated: int = 0

    def summary(self) -> str:
        if not self.success:
            return f"Mode: {self.mode.value} | No feasible bolt configuration found"
        return (f"Mode: {self.mode.value} | Min BCD ~ {self.min_bcd:.0f} mm | "
                f"Bolt {tema_bolts.format_bolt_size(self.size)} x {self.count} EA")


def is_gasket_fixed(inputs: FlangeInputs) -> bool:
    """Gasket seating is held when a manual seating value or a sizing preference is active."""
    has_manual_seating = bool(inputs.manual_seating_id or inputs.manual_seating_od)
    return (inputs.use_manual_override and has_manual_seating) or bool(inputs.gasket_preference)


def search_sizes(inputs: FlangeInputs, tables: ReferenceTables, mode: SearchMode) -> List[float]:
    if mode.fixed_size:
        return [inputs.bolt_size]
    return [spec.size for spec in tables.bolt_specs if spec.size >= tema_bolts.MIN_SEARCH_BOLT_SIZE]


def candidate_inputs(inputs: FlangeInputs, size: float, count: int, mode: SearchMode) -> FlangeInputs:
    """Inputs for one candidate; a manual bolt circle or OD never carries over."""
    changes: Dict[str, Any] = {
        "bolt_size": size,
        "bolt_count": count,
        "actual_bcd": None,
        "actual_od": None,
    }
    if not mode.fixed_gasket:
        changes.update(manual_seating_id=None, manual_seating_od=None, gasket_preference=None)
    return inputs.with_changes(**changes)


def optimize(inputs: FlangeInputs, tables: ReferenceTables, fixed_size: bool = False) -> OptimizationResult:
    """
    Find the feasible bolt size / count with the smallest bolt circle.

    Parameters:
    -----------
    inputs : FlangeInputs
        Current design inputs (not modified)
    tables : ReferenceTables
        Reference data snapshot
    fixed_size : bool
        Search bolt counts for the current bolt size only

    Returns:
    --------
    OptimizationResult : success flag, best size / count / BCD, and the
                         committed inputs; on failure inputs are returned unchanged
    """
    mode = SearchMode.from_flags(fixed_size, is_gasket_fixed(inputs))
    logger.debug("Optimizing bolt configuration, mode: %s", mode.value)

    best = None
    evaluated = 0
    for size in search_sizes(inputs, tables, mode):
        for count in SEARCH_BOLT_COUNTS:
            candidate = candidate_inputs(inputs, size, count, mode)
            results = evaluate(candidate, tables)
            evaluated += 1

            if not (results.is_safe and results.spacing_ok):
                continue
            if best is None or results.bcd_tema < best[2]:
                best = (size, count, results.bcd_tema)

    if best is None:
        logger.info("No feasible bolt configuration (%s, %d candidates)", mode.value, evaluated)
        return OptimizationResult(success=False, mode=mode, inputs=inputs,
                                  candidates_evaluated=evaluated)

    size, count, min_bcd = best
    # Commit the bolting only; the caller's seating values and preference are kept
    committed = inputs.with_changes(bolt_size=size, bolt_count=count, actual_bcd=None, actual_od=None)
    logger.info("Optimal bolting %s x %d, BCD %s mm (%s)",
                tema_bolts.format_bolt_size(size), count, min_bcd, mode.value)
    return OptimizationResult(
        success=True,
        mode=mode,
        size=size,
        count=count,
        min_bcd=min_bcd,
        inputs=committed,
        candidates_evaluated=evaluated,
    )


def evaluate_bolt_configurations(inputs: FlangeInputs, tables: ReferenceTables,
                                 fixed_size: bool = False) -> pd.DataFrame:
    """Evaluate every searched bolt size / count and tabulate the checks."""
    mode = SearchMode.from_flags(fixed_size, is_gasket_fixed(inputs))

    records: List[Dict[str, Any]] = []
    for size in search_sizes(inputs, tables, mode):
        for count in SEARCH_BOLT_COUNTS:
            results = evaluate(candidate_inputs(inputs, size, count, mode), tables)
            required_load = max(results.wm1, results.wm2)
            records.append({
                "Bolt Size": tema_bolts.format_bolt_size(size),
                "Bolt Count": count,
                "BCD (mm)": results.bcd_tema,
                "BCD Method": results.selected_bcd_source,
                "Pitch (mm)": round(results.geometric_pitch, 1),
                "Required Load (kN)": round(required_load / 1000, 1),
                "Available Load (kN)": round(results.total_bolt_load_design / 1000, 1),
                "Strength": "OK" if results.is_safe else "NG",
                "Spacing": "OK" if results.spacing_ok else "NG",
                "Status": "PASS" if results.is_safe and results.spacing_ok else "FAIL",
            })

    return pd.DataFrame(records)


def reset_and_optimize(inputs: FlangeInputs, tables: ReferenceTables) -> OptimizationResult:
    """
    Recompute g0 / g1, drop every manual geometry value and run a full search.

    The reset inputs are returned even when no configuration is feasible.
    """
    g0 = auto_g0(inputs, tables)
    reset = inputs.with_changes(
        g0=g0,
        g1=calcs_hub.derive_g1(g0),
        use_manual_override=False,
        actual_bcd=None,
        actual_od=None,
        manual_seating_id=None,
        manual_seating_od=None,
        gasket_preference=None,
    )
    result = optimize(reset, tables, fixed_size=False)
    if not result.success:
        result.inputs = reset
    return result
