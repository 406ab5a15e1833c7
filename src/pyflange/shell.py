"""
Shell neck thickness (g0 / g1).

g0 is the required shell thickness under internal pressure per
ASME VIII Div.1 UG-27(c)(1), rounded up to a whole millimeter:

    g0 = ceil(P·R / (S·E − 0.6·P) + CA),  R = (ID + 2·CA) / 2

g1 is the hub thickness at the back of the flange, taken as
ceil(g0 · 1.3 / 3 + g0).
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING

from .stress import interpolate_stress

if TYPE_CHECKING:
    from .calculator import DesignInput
    from .tables import ReferenceTables


def required_g0(
    pressure: float,
    inside_diameter: float,
    corrosion_allowance: float,
    allowable_stress: float,
    joint_efficiency: float,
) -> int:
    """
    Required shell thickness g0 (mm).

    A non-positive denominator (pressure too high for the material) is
    replaced by 1 so the result stays finite.
    """
    denominator = allowable_stress * joint_efficiency - 0.6 * pressure
    if denominator <= 0:
        denominator = 1.0
    radius = (inside_diameter + 2 * corrosion_allowance) / 2
    return math.ceil(pressure * radius / denominator + corrosion_allowance)


def g1_from_g0(g0: float) -> int:
    """Hub thickness g1 for a shell thickness g0."""
    return math.ceil(g0 * 1.3 / 3 + g0)


def apply_auto_shell_thickness(design: DesignInput, tables: ReferenceTables) -> DesignInput:
    """Copy of ``design`` with g0 and g1 recomputed from the shell material."""
    material = tables.plate_material(design.shell_material)
    stress = interpolate_stress(design.temperature_c, material.stresses, tables.temperature_steps)
    g0 = required_g0(
        design.pressure_mpa,
        design.inside_diameter,
        design.corrosion_allowance,
        stress,
        design.joint_efficiency,
    )
    return replace(design, g0=g0, g1=g1_from_g0(g0))
