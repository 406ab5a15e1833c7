"""
Bolt Circle Geometry

Sizes the bolt circle diameter (BCD) and flange outside diameter from three
independent TEMA RCB-11.2 rules and keeps the largest:

- Method 1 (minimum pitch): the bolts must fit around the circle at the
  minimum bolt spacing B.
- Method 2 (hub / radial): the bolt circle must clear the hub by the radial
  distance R.
- Method 3 (gasket / clearance): the bolt holes must clear the gasket OD.

Method 3 depends on the gasket, whose automatic size depends on the bolt
circle. The calculation is therefore done in two passes: the larger of
Methods 1 and 2 is used as a provisional BCD to size the gasket, then
Method 3 is evaluated and the governing BCD taken over all three.
"""

import math
from dataclasses import dataclass

from .tables import BoltDims
from .units import INCH

# =============================================================================
# CONSTANTS
# =============================================================================

BOSS_CLEARANCE = 1.5  # mm, bolt hole boss allowance on each side
DEFAULT_CLEARANCE = 2.5  # mm, used when clearance C is entered as zero


# =============================================================================
# HELPERS
# =============================================================================


def override(manual: float, derived: float) -> float:
    """
    Apply a manual override.

    A value of zero means "not overridden", so a legitimately zero override
    cannot be expressed.
    """
    return manual if manual != 0 else derived


def effective_clearance(clearance: float) -> float:
    """Clearance C between gasket and bolt hole boss; zero means default."""
    return clearance or DEFAULT_CLEARANCE


def rounded_hole_size(hole_diameter: float) -> int:
    """Bolt hole diameter rounded up to the next whole millimeter."""
    return math.ceil(hole_diameter)


def effective_b_min(
    bolt: BoltDims,
    tensioning_spacing: float | None,
    use_tensioning: bool,
) -> float:
    """
    Minimum bolt spacing in inches.

    With hydraulic tensioning the spacing is raised to the tensioner
    clearance when that is larger.
    """
    if use_tensioning and tensioning_spacing is not None:
        return max(bolt.b_min, tensioning_spacing)
    return bolt.b_min


# =============================================================================
# BCD CANDIDATES
# =============================================================================


def bcd_min_pitch(b_min: float, bolt_count: int) -> int:
    """Method 1: ceil(B_min × n / π), B_min in inches, result in mm."""
    return math.ceil((b_min * INCH * bolt_count) / math.pi)


def bcd_hub_radial(inside_diameter: float, g1: float, radial_distance: float) -> int:
    """Method 2: ceil(ID + 2·g1 + 2·R), R in inches, result in mm."""
    return math.ceil(inside_diameter + 2 * g1 + 2 * radial_distance * INCH)


def bcd_gasket_clearance(gasket_od: float, clearance: float, hole_size: float) -> float:
    """Method 3: gasket OD + 2 × boss + 2 × C + hole, in mm."""
    return gasket_od + 2 * BOSS_CLEARANCE + 2 * clearance + hole_size


def governing_bcd(method1: float, method2: float, method3: float) -> tuple[float, int]:
    """
    Pick the governing BCD.

    Returns:
        (BCD, source) where source is the first method (1, 2, 3) equal to
        the maximum.
    """
    bcd = max(method1, method2, method3)
    if bcd == method1:
        return bcd, 1
    if bcd == method2:
        return bcd, 2
    return bcd, 3


def flange_od(bcd: float, edge_distance: float) -> int:
    """Flange OD: ceil(BCD + 2·E), E in inches, result in mm."""
    return math.ceil(bcd + 2 * edge_distance * INCH)


def bolt_pitch(bcd: float, bolt_count: int) -> float:
    """Arc-length bolt pitch along the bolt circle (mm)."""
    if bolt_count <= 0:
        return 0.0
    return math.pi * bcd / bolt_count


def max_raised_face(
    bcd: float,
    hole_size: float,
    clearance: float,
    outer_ring_width: float,
) -> float:
    """Largest seating OD that still clears the bolt holes on a given BCD."""
    return bcd - hole_size - 2 * clearance - 2 * BOSS_CLEARANCE - 2 * outer_ring_width


# =============================================================================
# RESOLVED BOLT CIRCLE
# =============================================================================


@dataclass(frozen=True)
class BoltCircle:
    """
    Resolved bolt circle and flange OD (mm).

    Attributes:
        method1: Minimum pitch candidate
        method2: Hub / radial candidate
        method3: Gasket / clearance candidate
        provisional_bcd: max(method1, method2), used to size the gasket
        governing_bcd: max of all three candidates
        source: Method (1, 2 or 3) that governs
        final_bcd: Governing BCD or the manual override
        auto_od: ceil(final BCD + 2E)
        final_od: Auto OD or the manual override
        spacing_min: Minimum bolt spacing
        spacing_max: Maximum bolt pitch
        pitch: Actual bolt pitch on the final BCD
        radial_distance: R
        edge_distance: E
        clearance: Effective clearance C
        hole_size: Rounded-up bolt hole diameter
        max_raised_face: Largest seating OD clearing the holes on the final BCD
    """

    method1: float
    method2: float
    method3: float
    provisional_bcd: float
    governing_bcd: float
    source: int
    final_bcd: float
    auto_od: float
    final_od: float
    spacing_min: float
    spacing_max: float
    pitch: float
    radial_distance: float
    edge_distance: float
    clearance: float
    hole_size: float
    max_raised_face: float

    @property
    def spacing_ok(self) -> bool:
        """True when the pitch lies within [spacing_min, spacing_max]."""
        return self.spacing_min <= self.pitch <= self.spacing_max


def resolve_bolt_circle(
    *,
    bolt: BoltDims,
    bolt_count: int,
    b_min: float,
    method1: float,
    method2: float,
    gasket_od: float,
    clearance: float,
    outer_ring_width: float,
    max_pitch: float,
    actual_bcd: float = 0.0,
    actual_od: float = 0.0,
) -> BoltCircle:
    """
    Second pass of the BCD calculation.

    Args:
        bolt: Bolting data for the selected size
        bolt_count: Number of bolts
        b_min: Effective minimum spacing (inches)
        method1: Method 1 candidate from the first pass
        method2: Method 2 candidate from the first pass
        gasket_od: Overall gasket OD sized on the provisional BCD
        clearance: Effective clearance C
        outer_ring_width: Outer ring width (0 when absent)
        max_pitch: Maximum bolt pitch (mm)
        actual_bcd: Manual BCD override (0 = auto)
        actual_od: Manual flange OD override (0 = auto)
    """
    hole = rounded_hole_size(bolt.hole_diameter)
    method3 = bcd_gasket_clearance(gasket_od, clearance, hole)
    governing, source = governing_bcd(method1, method2, method3)
    final_bcd = override(actual_bcd, governing)
    auto_od = flange_od(final_bcd, bolt.e)

    return BoltCircle(
        method1=method1,
        method2=method2,
        method3=method3,
        provisional_bcd=max(method1, method2),
        governing_bcd=governing,
        source=source,
        final_bcd=final_bcd,
        auto_od=auto_od,
        final_od=override(actual_od, auto_od),
        spacing_min=b_min * INCH,
        spacing_max=max_pitch,
        pitch=bolt_pitch(final_bcd, bolt_count),
        radial_distance=bolt.r * INCH,
        edge_distance=bolt.e * INCH,
        clearance=clearance,
        hole_size=hole,
        max_raised_face=max_raised_face(final_bcd, hole, clearance, outer_ring_width),
    )
