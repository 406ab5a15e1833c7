"""
Gasket Sizing

Derives the gasket seating (contact) and overall dimensions and the
effective gasket width / diameter used in the bolt load formulas.

The automatic seating OD must satisfy two fits at once:

- Bolt circle fit: the seating OD plus the outer ring must clear the bolt
  holes on the provisional bolt circle.
- Shell fit: the seating face must start outside the shell bore, the shell
  gap A and the inner ring.

The larger of the two governs. Effective widths follow ASME VIII
Div.1 Table 2-5.2 / Div.2 Table 4.16.3.
"""

import math
from dataclasses import dataclass

from .geometry import BOSS_CLEARANCE, override
from .tables import RingWidthRange
from .units import INCH

# Above this basic width (mm) the effective width is reduced and G is
# measured from the seating OD.
B0_LIMIT = 6.0
CUL = INCH  # unit conversion constant for b, mm


# =============================================================================
# RING WIDTHS
# =============================================================================


def ring_widths(
    row: RingWidthRange,
    has_inner_ring: bool,
    has_outer_ring: bool,
    inner_ring_manual: float = 0.0,
    outer_ring_manual: float = 0.0,
) -> tuple[float, float]:
    """
    Inner and outer ring widths (mm).

    Table minimums are replaced by nonzero manual widths; an absent ring
    has zero width.
    """
    inner = override(inner_ring_manual, row.inner_ring_min) if has_inner_ring else 0.0
    outer = override(outer_ring_manual, row.outer_ring_min) if has_outer_ring else 0.0
    return inner, outer


# =============================================================================
# SEATING DIAMETERS
# =============================================================================


def seating_od_from_bcd(
    bcd: float,
    hole_size: float,
    clearance: float,
    outer_ring_width: float,
) -> float:
    """Seating OD that just clears the bolt holes on a bolt circle."""
    return bcd - hole_size - 2 * clearance - 2 * BOSS_CLEARANCE - 2 * outer_ring_width


def seating_od_from_shell(
    inside_diameter: float,
    shell_gap: float,
    inner_ring_width: float,
    contact_width: float,
) -> float:
    """Seating OD built outward from the shell bore."""
    return inside_diameter + 2 * shell_gap + 2 * inner_ring_width + 2 * contact_width


# =============================================================================
# EFFECTIVE WIDTH
# =============================================================================


def basic_width(contact_width: float, facing_sketch: str) -> float:
    """
    Basic gasket seating width b0 from the facing sketch.

    - 1c (tongue & groove), 1d (flat face with nubbin): N / 4
    - 2 (ring joint): N / 8
    - 1a, 1b and anything else: N / 2
    """
    if facing_sketch.startswith(("1c", "1d")):
        return contact_width / 4
    if facing_sketch.startswith("2"):
        return contact_width / 8
    return contact_width / 2


def effective_width(b0: float) -> float:
    """Effective gasket seating width b (mm)."""
    if b0 > B0_LIMIT:
        return 0.5 * CUL * math.sqrt(b0 / CUL)
    return b0


def mean_diameter(seating_id: float, seating_od: float, b0: float, b: float) -> float:
    """Diameter G at the location of the gasket load reaction (mm)."""
    if b0 > B0_LIMIT:
        return seating_od - 2 * b
    return (seating_id + seating_od) / 2


# =============================================================================
# GASKET GEOMETRY
# =============================================================================


@dataclass(frozen=True)
class GasketGeometry:
    """
    Sized gasket (mm).

    Attributes:
        inner_ring_width: Inner ring width (0 when absent)
        outer_ring_width: Outer ring width (0 when absent)
        seating_od_bcd: Auto seating OD from the bolt circle fit
        seating_od_shell: Auto seating OD from the shell fit
        seating_id: Seating (contact) ID used downstream
        seating_od: Seating (contact) OD used downstream
        gasket_id: Overall ID including the inner ring
        gasket_od: Overall OD including the outer ring
        contact_width: Contact width N
        b0: Basic seating width
        b: Effective seating width
        g: Gasket load reaction diameter G
    """

    inner_ring_width: float
    outer_ring_width: float
    seating_od_bcd: float
    seating_od_shell: float
    seating_id: float
    seating_od: float
    gasket_id: float
    gasket_od: float
    contact_width: float
    b0: float
    b: float
    g: float

    @property
    def auto_seating_od(self) -> float:
        return max(self.seating_od_bcd, self.seating_od_shell)

    @property
    def auto_seating_id(self) -> float:
        return self.auto_seating_od - 2 * self.contact_width


def size_gasket(
    *,
    provisional_bcd: float,
    hole_size: float,
    clearance: float,
    inside_diameter: float,
    shell_gap: float,
    contact_width: float,
    inner_ring_width: float,
    outer_ring_width: float,
    facing_sketch: str,
    manual_seating_id: float = 0.0,
    manual_seating_od: float = 0.0,
) -> GasketGeometry:
    """
    Size the gasket on a provisional bolt circle.

    Args:
        provisional_bcd: max(Method 1, Method 2) bolt circle (mm)
        hole_size: Rounded-up bolt hole diameter (mm)
        clearance: Effective clearance C (mm)
        inside_diameter: Shell ID (mm)
        shell_gap: Gap A between shell bore and inner ring (mm)
        contact_width: Gasket contact width N (mm)
        inner_ring_width: Inner ring width, 0 when absent (mm)
        outer_ring_width: Outer ring width, 0 when absent (mm)
        facing_sketch: Facing sketch label, e.g. "1a: Flat Face / Groove"
        manual_seating_id: Seating ID override (0 = auto)
        manual_seating_od: Seating OD override (0 = auto)
    """
    od_bcd = seating_od_from_bcd(provisional_bcd, hole_size, clearance, outer_ring_width)
    od_shell = seating_od_from_shell(inside_diameter, shell_gap, inner_ring_width, contact_width)
    auto_od = max(od_bcd, od_shell)
    auto_id = auto_od - 2 * contact_width

    seating_id = override(manual_seating_id, auto_id)
    seating_od = override(manual_seating_od, auto_od)

    b0 = basic_width(contact_width, facing_sketch)
    b = effective_width(b0)

    return GasketGeometry(
        inner_ring_width=inner_ring_width,
        outer_ring_width=outer_ring_width,
        seating_od_bcd=od_bcd,
        seating_od_shell=od_shell,
        seating_id=seating_id,
        seating_od=seating_od,
        gasket_id=seating_id - 2 * inner_ring_width,
        gasket_od=seating_od + 2 * outer_ring_width,
        contact_width=contact_width,
        b0=b0,
        b=b,
        g=mean_diameter(seating_id, seating_od, b0, b),
    )
