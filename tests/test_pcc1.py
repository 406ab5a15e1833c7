"""
Tests for the PCC-1 bolt stress selection and checks.

Tests cover:
- Clamping the calculated bolt stress between the limits
- Step 5 to 8 thresholds and verdicts
- Zero limits meaning "no limit"
- Filling the limits from the reference tables
"""

import math
from dataclasses import replace

import pytest

from pyflange.calculator import DesignInput, calculate
from pyflange.pcc1 import (
    DEFAULT_PHI_F_MAX,
    apply_pcc1_defaults,
    evaluate_pcc1,
    select_bolt_stress,
)
from pyflange.tables import default_tables

SEATING = dict(seating_id=318.0, seating_od=348.0, single_bolt_area=194.8, pressure=1.0)


@pytest.fixture
def design() -> DesignInput:
    return DesignInput(
        bolt_count=24,
        use_pcc1_check=True,
        sg_t=207.0,
        sg_min_s=140.0,
        sg_min_o=97.0,
        sg_max=0.0,
        sb_max=506.8,
        sb_min=289.6,
        sf_max=550.0,
    )


# =============================================================================
# SELECTION
# =============================================================================


class TestSelectBoltStress:
    """Test the A / B / C clamp."""

    @pytest.mark.parametrize("sb_calc", [0.0, 50.0, 289.6, 400.0, 506.8, 900.0, 5000.0])
    def test_clamped_between_bounds(self, sb_calc: float):
        sb_max, sb_min = 506.8, 289.6
        *_, sb_sel = select_bolt_stress(sb_calc, sb_max, sb_min, 0.0)
        assert sb_min <= sb_sel <= sb_max

    def test_values(self):
        assert select_bolt_stress(600.0, 500.0, 300.0, 450.0) == (500.0, 500.0, 450.0, 450.0)
        assert select_bolt_stress(100.0, 500.0, 300.0, 0.0) == (100.0, 300.0, 300.0, 300.0)

    def test_zero_limits_ignored(self):
        assert select_bolt_stress(420.0, 0.0, 0.0, 0.0) == (420.0, 420.0, 420.0, 420.0)


# =============================================================================
# CHECKS
# =============================================================================


class TestEvaluate:
    """Test the step 5 to 8 checks."""

    def test_gasket_area(self, design: DesignInput):
        result = evaluate_pcc1(design, **SEATING)
        ring_area = math.pi / 4 * (348.0**2 - 318.0**2)
        assert result.ring_area == pytest.approx(ring_area)
        assert result.pass_area == 0.0
        assert result.gasket_area == pytest.approx(ring_area)
        assert result.total_root_area == pytest.approx(194.8 * 24)

    def test_pass_partition_area(self, design: DesignInput):
        design = replace(design, pass_partition_width=10.0, pass_partition_length=300.0)
        result = evaluate_pcc1(design, **SEATING)
        assert result.pass_area == pytest.approx(0.5 * 10.0 * 300.0)

    def test_sb_calc(self, design: DesignInput):
        result = evaluate_pcc1(design, **SEATING)
        assert result.sb_calc == pytest.approx(207.0 * result.gasket_area / result.total_root_area)

    def test_thresholds(self, design: DesignInput):
        result = evaluate_pcc1(design, **SEATING)
        ag, ab = result.gasket_area, result.total_root_area
        assert result.step5_threshold == pytest.approx(140.0 * ag / ab)
        assert result.step6_threshold == pytest.approx(
            (97.0 * ag + math.pi / 4 * 1.0 * 318.0**2) / (0.7 * ab)
        )
        assert result.step8_threshold == pytest.approx(550.0 * 0.7 / DEFAULT_PHI_F_MAX)

    def test_zero_sg_max_passes_step7(self, design: DesignInput):
        """With no gasket crush limit step 7 passes however large Sb_sel is."""
        design = replace(design, sg_t=50000.0, sb_max=0.0, sf_max=0.0, sg_max=0.0)
        result = evaluate_pcc1(design, **SEATING)
        assert result.sb_selected > 10000
        assert result.step7_ok

    def test_sg_max_limits_step7(self, design: DesignInput):
        design = replace(design, sg_t=50000.0, sb_max=0.0, sf_max=0.0, sg_max=380.0)
        result = evaluate_pcc1(design, **SEATING)
        assert not result.step7_ok
        assert not result.safe

    def test_zero_phi_passes_step8(self, design: DesignInput):
        result = evaluate_pcc1(replace(design, phi_f_max=0.0), **SEATING)
        assert result.step8_threshold == math.inf
        assert result.step8_ok

    def test_zero_root_area(self, design: DesignInput):
        result = evaluate_pcc1(design, **{**SEATING, "single_bolt_area": 0.0})
        assert result.sb_calc == 0.0
        assert result.step5_threshold == 0.0
        assert result.step6_threshold == 0.0
        assert result.step7_threshold == math.inf

    def test_zero_gasket_fraction_uses_one(self, design: DesignInput):
        result = evaluate_pcc1(replace(design, gasket_fraction=0.0), **SEATING)
        ag, ab = result.gasket_area, result.total_root_area
        assert result.step6_threshold == pytest.approx(
            (97.0 * ag + math.pi / 4 * 318.0**2) / ab
        )

    def test_abc_minimum_reported_beside_selection(self, design: DesignInput):
        design = replace(design, sg_t=10.0)
        result = evaluate_pcc1(design, **SEATING)
        assert result.sb_calc < design.sb_min
        assert result.abc_minimum == result.value_a == result.sb_calc
        assert result.sb_selected == pytest.approx(design.sb_min)
        assert result.abc_minimum < result.sb_selected

    def test_abc_minimum_matches_selection_when_within_bounds(self, design: DesignInput):
        result = evaluate_pcc1(design, **SEATING)
        assert result.abc_minimum == pytest.approx(result.sb_selected)

    def test_low_target_fails_step5(self, design: DesignInput):
        design = replace(design, sg_t=10.0, sb_min=0.0)
        result = evaluate_pcc1(design, **SEATING)
        assert not result.step5_ok
        assert not result.safe

    def test_safe_requires_bounds(self, design: DesignInput):
        result = evaluate_pcc1(design, **SEATING)
        assert result.safe == all(
            (result.step5_ok, result.step6_ok, result.step7_ok, result.step8_ok, result.bounds_ok)
        )
        assert result.bounds_ok


# =============================================================================
# ENGINE INTEGRATION
# =============================================================================


class TestCalculatorIntegration:
    """The engine runs the check only when enabled."""

    def test_disabled(self):
        assert calculate(DesignInput()).pcc1 is None

    def test_enabled_uses_seating_face(self, design: DesignInput):
        result = calculate(design)
        assert result.pcc1 is not None
        expected = math.pi / 4 * (result.gasket.seating_od**2 - result.gasket.seating_id**2)
        assert result.pcc1.ring_area == pytest.approx(expected)


class TestApplyDefaults:
    """Test filling the PCC-1 limits from the tables."""

    def test_spiral_wound_gasket(self):
        design = apply_pcc1_defaults(DesignInput(), default_tables())
        assert (design.sg_max, design.sg_min_s, design.sg_min_o) == (0, 140, 97)
        # SA-193 B7, Sy = 724 MPa
        assert design.sb_max == pytest.approx(506.8)
        assert design.sb_min == pytest.approx(289.6)

    def test_grooved_gasket(self):
        design = DesignInput(gasket_type="Grooved metal: Stainless steels")
        design = apply_pcc1_defaults(design, default_tables())
        assert (design.sg_max, design.sg_min_s, design.sg_min_o) == (380, 140, 97)

    def test_unmatched_gasket_keeps_values(self):
        design = DesignInput(gasket_type="Vegetable fiber", sg_max=123.0)
        design = apply_pcc1_defaults(design, default_tables())
        assert design.sg_max == 123.0

    def test_restores_zero_factors(self):
        design = DesignInput(phi_f_max=0.0, gasket_fraction=0.0, pass_area_reduction=0.0)
        design = apply_pcc1_defaults(design, default_tables())
        assert design.phi_f_max == 0.32
        assert design.gasket_fraction == 0.7
        assert design.pass_area_reduction == 50.0

    def test_input_not_modified(self):
        design = DesignInput()
        apply_pcc1_defaults(design, default_tables())
        assert design.sb_max == 0.0
