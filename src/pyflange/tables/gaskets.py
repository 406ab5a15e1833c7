"""
Gasket Reference Data

- Gasket factors m and y per ASME VIII Div.1 Mandatory Appendix 2,
  Table 2-5.1 (y tabulated in psi)
- Facing sketch categories per ASME VIII Div.2 Table 4.16.3
- Minimum inner / outer ring widths by shell inside diameter
- PCC-1 / API 660 reference gasket stresses by gasket category

References:
- ASME BPVC Section VIII Division 1, Table 2-5.1 and Table 2-5.2
- ASME PCC-1-2019, Appendix O, Table O-1
"""

from dataclasses import dataclass

# =============================================================================
# FACING SKETCHES
# =============================================================================

FACING_SKETCHES: tuple[str, ...] = (
    "1a: Flat Face / Groove",
    "1b: Flat Face",
    "1c: Tongue & Groove",
    "1d: Flat Face w/ Nubbin",
    "2: Ring Joint",
)
DEFAULT_FACING_SKETCH = FACING_SKETCHES[0]


# =============================================================================
# GASKET FACTORS (TABLE 2-5.1)
# =============================================================================


@dataclass(frozen=True)
class GasketFactor:
    """
    Gasket material factors.

    Attributes:
        id: Gasket material description
        m: Gasket factor m
        y: Minimum design seating stress y (psi)
        sketches: Applicable facing sketches (description only)
    """

    id: str
    m: float
    y: float
    sketches: str = ""


GASKET_TYPES: dict[str, GasketFactor] = {
    g.id: g
    for g in (
        GasketFactor("Self-energizing types (O rings, metallic, elastomer)", 0.0, 0, "-"),
        GasketFactor("Elastomers without fabric: Below 75A Shore Durometer", 0.50, 0, "1a,1b,1c,1d"),
        GasketFactor("Elastomers without fabric: 75A or higher Shore Durometer", 1.00, 200, "1a,1b,1c,1d"),
        GasketFactor("Mineral fiber with suitable binder: 1/8 in. thick", 2.00, 1600, "1a,1b,1c,1d"),
        GasketFactor("Mineral fiber with suitable binder: 1/16 in. thick", 2.75, 3700, "1a,1b,1c,1d"),
        GasketFactor("Mineral fiber with suitable binder: 1/32 in. thick", 3.50, 6500, "1a,1b,1c,1d"),
        GasketFactor("Elastomers with cotton fabric insertion", 1.25, 400, "1a,1b,1c,1d"),
        GasketFactor("Vegetable fiber", 1.75, 1100, "1a,1b,1c,1d"),
        GasketFactor("Spiral-wound metal, mineral fiber filled: Carbon", 2.50, 10000, "1a,1b"),
        GasketFactor("Spiral-wound metal, mineral fiber filled: Stainless steel or nickel-base alloys", 3.00, 10000, "1a,1b"),
        GasketFactor("Corrugated metal, jacketed, mineral fiber filled: Soft aluminum", 2.50, 2900, "1a,1b"),
        GasketFactor("Corrugated metal, jacketed, mineral fiber filled: Soft copper or brass", 2.75, 3700, "1a,1b"),
        GasketFactor("Corrugated metal, jacketed, mineral fiber filled: Iron or soft steel", 3.00, 4500, "1a,1b"),
        GasketFactor("Corrugated metal, jacketed, mineral fiber filled: Stainless steels", 3.50, 6500, "1a,1b"),
        GasketFactor("Corrugated metal with covering layers: Stainless steels", 3.00, 5500, "1a,1b,1c,1d"),
        GasketFactor("Flat metal jacketed, mineral fiber filled: Soft aluminum", 3.25, 5500, "1a,1b,1c,1d,2"),
        GasketFactor("Flat metal jacketed, mineral fiber filled: Iron or soft steel", 3.75, 7600, "1a,1b,1c,1d,2"),
        GasketFactor("Flat metal jacketed, mineral fiber filled: Stainless steels", 3.75, 9000, "1a,1b,1c,1d,2"),
        GasketFactor("Grooved metal: Soft aluminum", 3.25, 5500, "1a,1b,1c,1d,2"),
        GasketFactor("Grooved metal: Iron or soft steel", 3.75, 7600, "1a,1b,1c,1d,2"),
        GasketFactor("Grooved metal: Stainless steels", 4.25, 10100, "1a,1b,1c,1d,2"),
        GasketFactor("Solid flat metal: Soft copper or brass", 4.75, 13000, "1a,1b,1c,1d,2"),
        GasketFactor("Solid flat metal: Iron or soft steel", 5.50, 18000, "1a,1b,1c,1d,2"),
        GasketFactor("Solid flat metal: Stainless steels", 6.50, 26000, "1a,1b,1c,1d,2"),
        GasketFactor("Ring joint: Iron or soft steel", 5.50, 18000, "6"),
        GasketFactor("Ring joint: Stainless steels", 6.50, 26000, "6"),
    )
}

DEFAULT_GASKET_TYPE = "Spiral-wound metal, mineral fiber filled: Stainless steel or nickel-base alloys"


# =============================================================================
# GASKET RING WIDTHS
# =============================================================================


@dataclass(frozen=True)
class RingWidthRange:
    """
    Minimum ring widths for a range of shell inside diameters (mm).

    A shell ID matches when min_id <= ID <= max_id.
    """

    min_id: float
    max_id: float
    inner_ring_min: float
    outer_ring_min: float

    def contains(self, inside_diameter: float) -> bool:
        return self.min_id <= inside_diameter <= self.max_id


GASKET_RING_TABLE: tuple[RingWidthRange, ...] = (
    RingWidthRange(0, 300, 6, 10),
    RingWidthRange(300, 600, 8, 12),
    RingWidthRange(600, 1000, 10, 15),
    RingWidthRange(1000, 1500, 12, 18),
    RingWidthRange(1500, 100000, 15, 20),
)


# =============================================================================
# PCC-1 REFERENCE GASKET STRESSES
# =============================================================================


@dataclass(frozen=True)
class Pcc1GasketStress:
    """
    PCC-1 reference gasket stresses for one gasket category (MPa).

    Attributes:
        gasket_type: Category description
        keyword: Lower-case fragment matched against a gasket type id
        sg_max: Maximum permissible gasket stress (0 = no limit)
        sg_min_s: Minimum gasket seating stress
        sg_min_o: Minimum gasket operating stress
    """

    gasket_type: str
    keyword: str
    sg_max: float
    sg_min_s: float
    sg_min_o: float


PCC1_STRESS_TABLE: tuple[Pcc1GasketStress, ...] = (
    Pcc1GasketStress("Grooved metal with covering layers (kammprofile)", "grooved", 380, 140, 97),
    Pcc1GasketStress("Corrugated metal with covering layers", "corruga", 275, 140, 97),
    # Over-compression is prevented by the centering ring
    Pcc1GasketStress("Spiral-wound with inner ring", "spiral", 0, 140, 97),
)
