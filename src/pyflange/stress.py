"""
Allowable stress interpolation.

Material allowable stresses are tabulated over a fixed set of temperature
steps (ASME Section II Part D). This module evaluates a curve at any
temperature by linear interpolation between the bracketing steps, holding
the end values outside the tabulated range.
"""

from collections.abc import Sequence

import numpy as np


def clean_curve(stresses: Sequence[float | None]) -> list[float]:
    """Replace missing (None) curve entries with zero."""
    return [float(s) if s else 0.0 for s in stresses]


def interpolate_stress(
    temperature: float,
    stresses: Sequence[float | None],
    temperature_steps: Sequence[float],
) -> float:
    """
    Evaluate an allowable stress curve at a temperature.

    Args:
        temperature: Temperature in °C
        stresses: Stress values (MPa) aligned with ``temperature_steps``.
            ``None`` marks a value that is not tabulated.
        temperature_steps: Ascending temperature steps (°C)

    Returns:
        Allowable stress in MPa. Below the first step the first value is
        returned, above the last step the last value. A missing upper
        bracket holds the lower bracket value. The bracket is the one
        whose upper step is at or above the temperature, so an interior
        step with no tabulated value returns the value just below it.
    """
    curve = clean_curve(stresses)
    steps = np.asarray(temperature_steps, dtype=float)
    if not curve or steps.size == 0:
        return 0.0

    if temperature <= steps[0]:
        return curve[0]
    if temperature >= steps[-1]:
        return curve[-1]

    # Bracket with t1 < temperature <= t2
    i = int(np.searchsorted(steps, temperature, side="left")) - 1
    t1, t2 = float(steps[i]), float(steps[i + 1])
    s1 = curve[i]
    s2 = curve[i + 1] or s1
    if temperature == t2:
        return s2
    return s1 + (s2 - s1) * (temperature - t1) / (t2 - t1)


def ambient_stress(
    stresses: Sequence[float | None],
    ambient_index: int = 1,
) -> float:
    """
    Allowable stress at the ambient step of a curve.

    The ambient step is the second tabulated temperature (40 °C in the
    default tables). Missing values give zero.
    """
    if len(stresses) <= ambient_index:
        return 0.0
    return float(stresses[ambient_index] or 0.0)
