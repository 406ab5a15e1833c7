"""
Bolt Load Calculation

Required bolt loads and bolt areas per ASME VIII Div.1 Appendix 2-5
(Div.2 4.16.6):

    H   = 0.785 G² P
    Hp  = 2 P (b π G m + w_p L_p m_p)
    Wm1 = H + Hp                        (operating)
    Wm2 = π b G y + w_p L_p y_p         (gasket seating)

Lengths in mm, stresses and pressures in MPa, loads in N. The pass
partition strip (w_p × L_p) contributes with its own gasket factors.
"""

import math
from dataclasses import dataclass


def safe_divide(numerator: float, denominator: float) -> float:
    """numerator / denominator, or zero when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator


def hydrostatic_end_force(g: float, pressure: float) -> float:
    """Hydrostatic end force H on the area inside G."""
    return 0.785 * g**2 * pressure


def gasket_reaction(
    pressure: float,
    b: float,
    g: float,
    m: float,
    pass_width: float = 0.0,
    pass_length: float = 0.0,
    pass_m: float = 0.0,
) -> float:
    """Total joint-contact compression load Hp."""
    return 2 * pressure * (b * math.pi * g * m + pass_width * pass_length * pass_m)


def seating_load(
    b: float,
    g: float,
    y: float,
    pass_width: float = 0.0,
    pass_length: float = 0.0,
    pass_y: float = 0.0,
) -> float:
    """Gasket seating load Wm2; y and pass_y in MPa."""
    return math.pi * b * g * y + pass_width * pass_length * pass_y


@dataclass(frozen=True)
class BoltLoads:
    """
    Bolt loads, stresses and areas.

    Attributes:
        h: Hydrostatic end force H (N)
        hp: Gasket reaction Hp (N)
        wm1: Operating bolt load (N)
        wm2: Seating bolt load (N)
        ambient_stress: Bolt allowable stress at the ambient step (MPa)
        design_stress: Bolt allowable stress at design temperature (MPa)
        single_bolt_area: Root area per bolt (mm²)
        total_bolt_area: Root area of all bolts (mm²)
        required_area_operating: Wm1 / design stress (mm²)
        required_area_seating: Wm2 / ambient stress (mm²)
    """

    h: float
    hp: float
    wm1: float
    wm2: float
    ambient_stress: float
    design_stress: float
    single_bolt_area: float
    total_bolt_area: float
    required_area_operating: float
    required_area_seating: float

    @property
    def required_area(self) -> float:
        return max(self.required_area_operating, self.required_area_seating)

    @property
    def required_load(self) -> float:
        return max(self.wm1, self.wm2)

    @property
    def available_load_ambient(self) -> float:
        return self.total_bolt_area * self.ambient_stress

    @property
    def available_load_design(self) -> float:
        return self.total_bolt_area * self.design_stress


def compute_bolt_loads(
    *,
    pressure: float,
    b: float,
    g: float,
    m: float,
    y: float,
    pass_width: float,
    pass_length: float,
    pass_m: float,
    pass_y: float,
    ambient_stress: float,
    design_stress: float,
    single_bolt_area: float,
    bolt_count: int,
) -> BoltLoads:
    """
    Evaluate both governing bolt loads and the bolt areas.

    Args:
        pressure: Design pressure (MPa)
        b: Effective gasket width (mm)
        g: Gasket reaction diameter G (mm)
        m: Gasket factor
        y: Gasket seating stress (MPa)
        pass_width: Pass partition gasket width (mm)
        pass_length: Pass partition gasket length (mm)
        pass_m: Pass partition gasket factor
        pass_y: Pass partition seating stress (MPa)
        ambient_stress: Bolt allowable stress at ambient (MPa)
        design_stress: Bolt allowable stress at design temperature (MPa)
        single_bolt_area: Root area per bolt (mm²)
        bolt_count: Number of bolts
    """
    h = hydrostatic_end_force(g, pressure)
    hp = gasket_reaction(pressure, b, g, m, pass_width, pass_length, pass_m)
    wm1 = h + hp
    wm2 = seating_load(b, g, y, pass_width, pass_length, pass_y)

    return BoltLoads(
        h=h,
        hp=hp,
        wm1=wm1,
        wm2=wm2,
        ambient_stress=ambient_stress,
        design_stress=design_stress,
        single_bolt_area=single_bolt_area,
        total_bolt_area=single_bolt_area * bolt_count,
        required_area_operating=safe_divide(wm1, design_stress),
        required_area_seating=safe_divide(wm2, ambient_stress),
    )
