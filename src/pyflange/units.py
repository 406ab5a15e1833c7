"""
Unit normalization for flange design inputs.

The engine works internally in millimeters, MPa (N/mm²), newtons and
degrees Celsius. Pressure and temperature may be entered in any of the
supported units and are converted here before use. Unknown unit tags are
passed through unchanged.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

# =============================================================================
# CONSTANTS
# =============================================================================

INCH = 25.4  # mm per inch
PSI_TO_MPA = 0.00689476

PressureUnit = Literal["MPa", "Bar", "PSI", "kg/cm²"]
TemperatureUnit = Literal["°C", "°F", "K"]
ForceUnit = Literal["kN", "N", "lbf", "kgf"]

PRESSURE_UNITS: tuple[str, ...] = ("MPa", "Bar", "PSI", "kg/cm²")
TEMPERATURE_UNITS: tuple[str, ...] = ("°C", "°F", "K")
FORCE_UNITS: tuple[str, ...] = ("kN", "N", "lbf", "kgf")

# Multiplier from the given unit to MPa
PRESSURE_TO_MPA: dict[str, float] = {
    "MPa": 1.0,
    "Bar": 0.1,
    "PSI": PSI_TO_MPA,
    "kg/cm²": 0.0980665,
}

# Multiplier from newtons to the given unit
NEWTON_TO_FORCE: dict[str, float] = {
    "N": 1.0,
    "kN": 0.001,
    "lbf": 0.224809,
    "kgf": 0.101972,
}


# =============================================================================
# CONVERSIONS
# =============================================================================


def to_mpa(pressure: float, unit: str) -> float:
    """
    Convert a pressure to MPa.

    Args:
        pressure: Pressure value in ``unit``
        unit: One of "MPa", "Bar", "PSI", "kg/cm²"

    Returns:
        Pressure in MPa. Unrecognized units are returned unchanged.

    Examples:
        >>> to_mpa(10, "Bar")
        1.0
    """
    return pressure * PRESSURE_TO_MPA.get(unit, 1.0)


def from_mpa(pressure_mpa: float, unit: str) -> float:
    """Convert a pressure in MPa back to ``unit``."""
    return pressure_mpa / PRESSURE_TO_MPA.get(unit, 1.0)


def to_celsius(temperature: float, unit: str) -> float:
    """
    Convert a temperature to degrees Celsius.

    Args:
        temperature: Temperature value in ``unit``
        unit: One of "°C", "°F", "K"

    Returns:
        Temperature in °C. Unrecognized units are returned unchanged.
    """
    if unit == "°F":
        return (temperature - 32) * 5 / 9
    if unit == "K":
        return temperature - 273.15
    return temperature


def psi_to_mpa(stress_psi: float) -> float:
    """Convert a stress in psi (gasket y tables) to MPa."""
    return stress_psi * PSI_TO_MPA


def convert_force(force_n: float, unit: str) -> float:
    """Convert a force in newtons to ``unit`` (N, kN, lbf or kgf)."""
    return force_n * NEWTON_TO_FORCE.get(unit, 1.0)


def default_force_unit(pressure_unit: str) -> ForceUnit:
    """Pick the force unit that reads naturally next to a pressure unit."""
    if pressure_unit == "PSI":
        return "lbf"
    if pressure_unit == "kg/cm²":
        return "kgf"
    return "kN"


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(value: float, digits: int = 0) -> int | float:
    """
    Round with ties going up, as reported values are.

    The built-in ``round`` sends ties to the even neighbour, so 398.5
    would report as 398.

    Examples:
        >>> round_half_up(398.5)
        399
        >>> round_half_up(0.25, 1)
        0.3
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)
