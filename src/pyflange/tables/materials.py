"""
ASME Section II Part D Allowable Stresses

Bolting (Table 3) and plate / shell (Table 1A) materials with their maximum
allowable stress curves. Every curve is aligned with TEMPERATURE_STEPS;
``None`` marks a temperature at which the material has no tabulated value.

Values are in MPa and °C, rounded to the nearest MPa.
"""

from dataclasses import dataclass

# =============================================================================
# TEMPERATURE STEPS
# =============================================================================

# Shared temperature steps (°C). The second entry is the ambient step used
# for gasket seating.
TEMPERATURE_STEPS: tuple[float, ...] = (
    -30, 40, 65, 100, 125, 150, 175, 200, 225, 250,
    275, 300, 325, 350, 375, 400, 425, 450, 475, 500,
)
AMBIENT_STEP_INDEX = 1


# =============================================================================
# MATERIAL DATA
# =============================================================================


@dataclass(frozen=True)
class Material:
    """
    A material with its allowable stress curve.

    Attributes:
        id: Material designation, e.g. "SA-193 B7 (≤64mm)"
        min_tensile: Specified minimum tensile strength (MPa)
        min_yield: Specified minimum yield strength (MPa)
        stresses: Allowable stress at each of TEMPERATURE_STEPS (MPa)
    """

    id: str
    min_tensile: float
    min_yield: float
    stresses: tuple[float | None, ...]


def _flat(value: float, count: int) -> tuple[float, ...]:
    return (value,) * count


ASME_BOLT_MATERIALS: dict[str, Material] = {
    m.id: m
    for m in (
        Material(
            "SA-193 B7 (≤64mm)", 862, 724,
            _flat(172, 15) + (159, 145, 117, 86, 59),
        ),
        Material(
            "SA-193 B7 (64<d≤100mm)", 793, 655,
            _flat(159, 15) + (151, 138, 110, 79, 52),
        ),
        Material(
            "SA-193 B7M", 690, 550,
            _flat(138, 16) + (128, 107, 79, None),
        ),
        Material(
            "SA-193 B16 (≤64mm)", 862, 724,
            _flat(172, 16) + (170, 159, 141, 114),
        ),
        Material(
            "SA-320 L7", 862, 724,
            _flat(172, 15) + (None, None, None, None, None),
        ),
        Material(
            "SA-193 B8 Cl.1", 517, 207,
            (129, 129, 124, 115, 110, 106, 102, 99, 96, 93,
             91, 89, 87, 85, 84, 83, 81, 80, 79, 78),
        ),
        Material(
            "SA-193 B8M Cl.1", 517, 207,
            (129, 129, 125, 117, 112, 108, 104, 101, 98, 96,
             94, 92, 91, 89, 88, 87, 86, 85, 84, 84),
        ),
        Material(
            "SA-453 660 Cl.A", 896, 586,
            _flat(179, 20),
        ),
    )
}

ASME_PLATE_MATERIALS: dict[str, Material] = {
    m.id: m
    for m in (
        Material(
            "SA-516 70", 485, 260,
            _flat(138, 13) + (134, 125, 103, 79, 59, 38, 25),
        ),
        Material(
            "SA-516 60", 415, 220,
            _flat(118, 13) + (114, 108, 92, 72, 53, 35, 23),
        ),
        Material(
            "SA-105", 485, 250,
            _flat(138, 13) + (134, 125, 103, 79, 59, 38, 25),
        ),
        Material(
            "SA-106 B", 415, 240,
            _flat(118, 13) + (114, 108, 92, 72, 53, 35, 23),
        ),
        Material(
            "SA-240 304", 515, 205,
            _flat(138, 6) + (134, 129, 126, 122, 119, 116, 114, 111,
                             109, 107, 105, 103, 101, 99),
        ),
        Material(
            "SA-240 316L", 485, 170,
            (115, 115, 115, 115, 112, 106, 101, 97, 94, 91,
             88, 86, 84, 82, 80, 78, 77, 76, 74, 73),
        ),
    )
}

DEFAULT_BOLT_MATERIAL = "SA-193 B7 (≤64mm)"
DEFAULT_SHELL_MATERIAL = "SA-516 70"
