"""
PCC-1 Alternative Bolt Stress Selection

Selects an assembly bolt stress Sb_sel per ASME PCC-1 Appendix O and
verifies it against the gasket and flange limits:

    Sb_calc = SgT · Ag / (Ab · nb)
    A       = min(Sb_calc, Sb_max)
    B       = max(A, Sb_min)
    C       = min(B, Sf_max)
    Sb_sel  = C

    Step 5  Sb_sel ≥ Sg_min-S · Ag / (Ab · nb)
    Step 6  Sb_sel ≥ (Sg_min-O · Ag + π/4 · P · ID²) / (g · Ab · nb)
    Step 7  Sb_sel ≤ Sg_max · Ag / (Ab · nb)
    Step 8  Sb_sel ≤ Sf_max · g / Φf_max

A limit entered as zero means "no limit". All checks carry a 0.001 MPa
tolerance for floating point noise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .bolt_load import safe_divide
from .units import round_half_up

if TYPE_CHECKING:
    from .calculator import DesignInput
    from .tables import ReferenceTables

TOLERANCE = 0.001  # MPa

# Applied by apply_pcc1_defaults() when the design leaves them at zero
DEFAULT_PHI_F_MAX = 0.32
DEFAULT_GASKET_FRACTION = 0.7
DEFAULT_PASS_AREA_REDUCTION = 50.0

# Bolt stress bounds as fractions of bolt minimum yield
SB_MAX_YIELD_FRACTION = 0.7
SB_MIN_YIELD_FRACTION = 0.4


@dataclass(frozen=True)
class Pcc1Result:
    """
    Intermediate values and verdicts of the PCC-1 procedure (MPa, mm²).

    Attributes:
        ring_area: Seating ring area (π/4)(OD² − ID²)
        pass_area: Pass partition area after the reduction factor
        total_root_area: Ab · nb
        sb_calc: Bolt stress for the target gasket stress
        value_a: min(Sb_calc, Sb_max)
        value_b: max(A, Sb_min)
        value_c: min(B, Sf_max)
        sb_selected: Selected bolt stress (C)
        step5_threshold .. step8_threshold: Right-hand sides of the checks
        step5_ok .. step8_ok: Check verdicts
        bounds_ok: Sb_min ≤ Sb_sel ≤ Sb_max (zero bounds ignored)
    """

    ring_area: float
    pass_area: float
    total_root_area: float
    sb_calc: float
    value_a: float
    value_b: float
    value_c: float
    sb_selected: float
    step5_threshold: float
    step6_threshold: float
    step7_threshold: float
    step8_threshold: float
    step5_ok: bool
    step6_ok: bool
    step7_ok: bool
    step8_ok: bool
    bounds_ok: bool

    @property
    def gasket_area(self) -> float:
        """Ag = ring area + reduced pass partition area."""
        return self.ring_area + self.pass_area

    @property
    def abc_minimum(self) -> float:
        """
        min(A, B, C), reported beside Sb_sel for review.

        Differs from Sb_sel only when Sb_calc is below Sb_min, where A is
        the smallest value and Sb_sel is raised to the bolt minimum.
        """
        return min(self.value_a, self.value_b, self.value_c)

    @property
    def safe(self) -> bool:
        return all((self.step5_ok, self.step6_ok, self.step7_ok, self.step8_ok, self.bounds_ok))


def select_bolt_stress(
    sb_calc: float,
    sb_max: float,
    sb_min: float,
    sf_max: float,
) -> tuple[float, float, float, float]:
    """
    Clamp the calculated bolt stress between the bolt and flange limits.

    Returns:
        (A, B, C, Sb_sel)
    """
    value_a = min(sb_calc, sb_max or math.inf)
    value_b = max(value_a, sb_min or 0.0)
    value_c = min(value_b, sf_max or math.inf)
    return value_a, value_b, value_c, value_c


def evaluate_pcc1(
    design: DesignInput,
    *,
    seating_id: float,
    seating_od: float,
    single_bolt_area: float,
    pressure: float,
) -> Pcc1Result:
    """
    Run the PCC-1 selection and checks for a sized joint.

    Args:
        design: Design input carrying the PCC-1 parameters
        seating_id: Gasket seating ID (mm)
        seating_od: Gasket seating OD (mm)
        single_bolt_area: Root area per bolt (mm²)
        pressure: Design pressure (MPa)
    """
    total_root_area = single_bolt_area * design.bolt_count
    ring_area = (math.pi / 4) * (seating_od**2 - seating_id**2)
    pass_area = (
        (design.pass_area_reduction / 100)
        * design.pass_partition_width
        * design.pass_partition_length
    )
    ag = ring_area + pass_area
    fraction = design.gasket_fraction or 1.0

    sb_calc = safe_divide(design.sg_t * ag, total_root_area)
    value_a, value_b, value_c, sb_sel = select_bolt_stress(
        sb_calc, design.sb_max, design.sb_min, design.sf_max
    )

    step5 = safe_divide(design.sg_min_s * ag, total_root_area)
    step6 = safe_divide(
        design.sg_min_o * ag + (math.pi / 4) * pressure * seating_id**2,
        fraction * total_root_area,
    )
    step7 = design.sg_max * ag / total_root_area if total_root_area > 0 else math.inf
    step8 = design.sf_max * fraction / design.phi_f_max if design.phi_f_max > 0 else math.inf

    bounds_ok = (not design.sb_max or sb_sel <= design.sb_max + TOLERANCE) and (
        not design.sb_min or sb_sel >= design.sb_min - TOLERANCE
    )

    return Pcc1Result(
        ring_area=ring_area,
        pass_area=pass_area,
        total_root_area=total_root_area,
        sb_calc=sb_calc,
        value_a=value_a,
        value_b=value_b,
        value_c=value_c,
        sb_selected=sb_sel,
        step5_threshold=step5,
        step6_threshold=step6,
        step7_threshold=step7,
        step8_threshold=step8,
        step5_ok=sb_sel >= step5 - TOLERANCE,
        step6_ok=sb_sel >= step6 - TOLERANCE,
        step7_ok=design.sg_max == 0 or sb_sel <= step7 + TOLERANCE,
        step8_ok=design.phi_f_max == 0 or sb_sel <= step8 + TOLERANCE,
        bounds_ok=bounds_ok,
    )


def apply_pcc1_defaults(design: DesignInput, tables: ReferenceTables) -> DesignInput:
    """
    Fill the PCC-1 limits from the reference tables.

    - Sg_max, Sg_min-S, Sg_min-O from the PCC-1 row matching the gasket type
      (left unchanged when no row matches)
    - Sb_max = 70 % and Sb_min = 40 % of the bolt minimum yield
    - Φf_max, g and the pass area reduction restored when zero
    """
    changes: dict[str, float] = {}

    reference = tables.pcc1_reference(design.gasket_type)
    if reference is not None:
        changes.update(
            sg_max=reference.sg_max,
            sg_min_s=reference.sg_min_s,
            sg_min_o=reference.sg_min_o,
        )

    material = tables.bolt_materials.get(design.bolt_material)
    if material is not None and material.min_yield:
        changes.update(
            sb_max=round_half_up(material.min_yield * SB_MAX_YIELD_FRACTION, 1),
            sb_min=round_half_up(material.min_yield * SB_MIN_YIELD_FRACTION, 1),
        )

    if not design.phi_f_max:
        changes["phi_f_max"] = DEFAULT_PHI_F_MAX
    if not design.gasket_fraction:
        changes["gasket_fraction"] = DEFAULT_GASKET_FRACTION
    if not design.pass_area_reduction:
        changes["pass_area_reduction"] = DEFAULT_PASS_AREA_REDUCTION

    return replace(design, **changes)
