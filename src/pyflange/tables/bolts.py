"""
TEMA Bolting Data

Bolt spacing, radial and edge distances per TEMA RCB-11.2 (Table D-5),
with root areas and hole diameters for UNC / 8UN bolting, plus the
hydraulic tensioning minimum spacing and the maximum bolt pitch table.

References:
- TEMA Standards, 10th Edition, Table D-5 "Bolting Data - Recommended
  Minimum"
- ASME B1.1 Unified Inch Screw Threads (root areas)
"""

from dataclasses import dataclass
from fractions import Fraction

from ..units import INCH

# =============================================================================
# TEMA BOLTING DATA
# =============================================================================


@dataclass(frozen=True)
class BoltDims:
    """
    Bolting data for one nominal bolt size.

    Attributes:
        size: Nominal bolt diameter (inches)
        b_min: Minimum bolt spacing B (inches)
        r: Radial distance R from bolt circle to hub (inches)
        e: Edge distance E from bolt circle to flange OD (inches)
        hole_diameter: Bolt hole diameter dH (mm)
        root_area: Root (tensile stress) area per bolt (mm²)
        b_min_whc: Plant-standard minimum spacing (inches), if any
    """

    size: float
    b_min: float
    r: float
    e: float
    hole_diameter: float
    root_area: float
    b_min_whc: float | None = None

    @property
    def nominal_diameter(self) -> float:
        """Nominal bolt diameter in mm."""
        return self.size * INCH

    @property
    def label(self) -> str:
        """Inch label such as 1-1/8"."""
        return bolt_size_label(self.size)


def _bolt(size, b_min, r, e, hole, area, whc=None) -> BoltDims:
    return BoltDims(
        size=size, b_min=b_min, r=r, e=e,
        hole_diameter=hole, root_area=area, b_min_whc=whc,
    )


# Sizes in ascending order; search iterates in this order.
TEMA_BOLT_DATA: dict[float, BoltDims] = {
    0.5: _bolt(0.5, 1.25, 0.8125, 0.625, 15.9, 81.3),
    0.625: _bolt(0.625, 1.5, 0.9375, 0.75, 19.1, 130.3),
    0.75: _bolt(0.75, 1.75, 1.125, 0.8125, 22.2, 194.8, 1.875),
    0.875: _bolt(0.875, 2.0625, 1.25, 0.9375, 25.4, 270.3, 2.125),
    1.0: _bolt(1.0, 2.25, 1.375, 1.0625, 28.6, 355.5, 2.375),
    1.125: _bolt(1.125, 2.5, 1.5, 1.125, 31.8, 469.7, 2.625),
    1.25: _bolt(1.25, 2.8125, 1.75, 1.25, 34.9, 599.4, 2.875),
    1.375: _bolt(1.375, 3.0625, 1.875, 1.375, 38.1, 745.2),
    1.5: _bolt(1.5, 3.25, 2.0, 1.5, 41.3, 906.4),
    1.625: _bolt(1.625, 3.5, 2.125, 1.625, 44.5, 1083.9),
    1.75: _bolt(1.75, 3.75, 2.25, 1.75, 47.6, 1277.4),
    1.875: _bolt(1.875, 4.0, 2.375, 1.875, 50.8, 1486.4),
    2.0: _bolt(2.0, 4.25, 2.5, 2.0, 54.0, 1711.0),
    2.25: _bolt(2.25, 4.75, 2.75, 2.25, 60.3, 2208.4),
    2.5: _bolt(2.5, 5.25, 3.0625, 2.375, 66.7, 2769.0),
    2.75: _bolt(2.75, 5.75, 3.375, 2.625, 73.0, 3392.9),
    3.0: _bolt(3.0, 6.25, 3.625, 2.875, 79.4, 4080.0),
}


# =============================================================================
# HYDRAULIC TENSIONING
# =============================================================================

# Minimum bolt spacing B_ten (inches) to fit a hydraulic tensioner head
HYDRAULIC_TENSIONING_DATA: dict[float, float] = {
    0.75: 2.0,
    0.875: 2.25,
    1.0: 2.5,
    1.125: 2.75,
    1.25: 3.0,
    1.375: 3.25,
    1.5: 3.5,
    1.625: 3.75,
    1.75: 4.0,
    1.875: 4.25,
    2.0: 4.5,
    2.25: 5.0,
    2.5: 5.5,
    2.75: 6.0,
    3.0: 6.5,
}


# =============================================================================
# MAXIMUM BOLT PITCH
# =============================================================================

# Maximum bolt pitch (mm) per plant standard. Sizes not listed use
# max_pitch_fallback().
WHC_MAX_PITCH_TABLE: dict[float, float] = {
    0.5: 45.0,
    0.625: 53.0,
    0.75: 62.0,
    0.875: 70.0,
    1.0: 78.0,
    1.125: 86.0,
    1.25: 94.0,
    1.375: 102.0,
    1.5: 110.0,
    1.625: 118.0,
    1.75: 126.0,
    1.875: 134.0,
    2.0: 142.0,
}


def max_pitch_fallback(size: float) -> float:
    """Maximum bolt pitch (mm) for a size missing from the pitch table."""
    return 2.5 * size * INCH + 12


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def bolt_size_label(size: float) -> str:
    """
    Format a nominal bolt size in inches as a fractional label.

    Examples:
        >>> bolt_size_label(0.75)
        '3/4"'
        >>> bolt_size_label(1.125)
        '1-1/8"'
        >>> bolt_size_label(2.0)
        '2"'
    """
    frac = Fraction(size).limit_denominator(16)
    whole, rest = divmod(frac, 1)
    if rest == 0:
        return f'{whole}"'
    if whole == 0:
        return f'{rest.numerator}/{rest.denominator}"'
    return f'{whole}-{rest.numerator}/{rest.denominator}"'
