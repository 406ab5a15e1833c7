"""
Tests for the automatic shell thickness.
"""

import math

import pytest

from pyflange.calculator import DesignInput
from pyflange.shell import apply_auto_shell_thickness, g1_from_g0, required_g0
from pyflange.tables import default_tables


class TestShellThickness:
    """Test g0 / g1 from the shell material allowable stress."""

    def test_required_g0(self):
        # P R / (S E - 0.6 P) = 1.0 * 150 / 137.4 = 1.09
        assert required_g0(1.0, 300, 0.0, 138.0, 1.0) == 2

    def test_corrosion_allowance(self):
        expected = math.ceil(2.0 * 153 / (138.0 * 0.85 - 1.2) + 3.0)
        assert required_g0(2.0, 300, 3.0, 138.0, 0.85) == expected

    def test_non_positive_denominator(self):
        # S E - 0.6 P < 0, denominator replaced by 1
        assert required_g0(300.0, 300, 0.0, 138.0, 1.0) == math.ceil(300.0 * 150)

    @pytest.mark.parametrize("g0,g1", [(2, 3), (6, 9), (10, 15), (12, 18)])
    def test_g1_from_g0(self, g0: int, g1: int):
        assert g1_from_g0(g0) == g1

    def test_apply_auto(self):
        design = DesignInput(g0=0.0, g1=0.0)
        updated = apply_auto_shell_thickness(design, default_tables())
        assert (updated.g0, updated.g1) == (2, 3)
        assert design.g0 == 0.0

    def test_apply_auto_uses_design_units(self):
        design = DesignInput(design_pressure=100.0, pressure_unit="Bar", design_temperature=212.0, temperature_unit="°F")
        updated = apply_auto_shell_thickness(design, default_tables())
        assert updated.g0 == required_g0(10.0, 300, 0.0, 138.0, 1.0)
