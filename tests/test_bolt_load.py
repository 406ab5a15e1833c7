"""
Tests for the bolt load calculation.
"""

import math

import pytest

from pyflange.bolt_load import (
    compute_bolt_loads,
    gasket_reaction,
    hydrostatic_end_force,
    safe_divide,
    seating_load,
)


def _loads(**kwargs):
    args = dict(
        pressure=1.0,
        b=6.9,
        g=334.2,
        m=3.0,
        y=68.9476,
        pass_width=0.0,
        pass_length=0.0,
        pass_m=0.0,
        pass_y=0.0,
        ambient_stress=172.0,
        design_stress=172.0,
        single_bolt_area=194.8,
        bolt_count=12,
    )
    args.update(kwargs)
    return compute_bolt_loads(**args)


class TestFormulas:
    """Test the individual load formulas."""

    def test_safe_divide(self):
        assert safe_divide(10, 4) == 2.5
        assert safe_divide(10, 0) == 0.0

    def test_hydrostatic_end_force(self):
        assert hydrostatic_end_force(300, 2.0) == pytest.approx(0.785 * 300**2 * 2.0)

    def test_gasket_reaction(self):
        expected = 2 * 1.5 * (6.0 * math.pi * 300 * 3.0 + 10 * 500 * 2.0)
        assert gasket_reaction(1.5, 6.0, 300, 3.0, 10, 500, 2.0) == pytest.approx(expected)

    def test_seating_load(self):
        expected = math.pi * 6.0 * 300 * 50.0 + 10 * 500 * 20.0
        assert seating_load(6.0, 300, 50.0, 10, 500, 20.0) == pytest.approx(expected)

    def test_no_pass_partition(self):
        assert gasket_reaction(1.0, 6.0, 300, 3.0) == pytest.approx(2 * 6.0 * math.pi * 300 * 3.0)
        assert seating_load(6.0, 300, 50.0) == pytest.approx(math.pi * 6.0 * 300 * 50.0)


class TestBoltLoads:
    """Test the combined bolt load result."""

    def test_operating_load(self):
        loads = _loads()
        assert loads.wm1 == pytest.approx(loads.h + loads.hp)

    def test_required_load_is_governing(self):
        loads = _loads()
        assert loads.wm2 > loads.wm1
        assert loads.required_load == loads.wm2

        loads = _loads(pressure=10.0)
        assert loads.wm1 > loads.wm2
        assert loads.required_load == loads.wm1

    def test_areas(self):
        loads = _loads(design_stress=150.0)
        assert loads.total_bolt_area == pytest.approx(194.8 * 12)
        assert loads.required_area_operating == pytest.approx(loads.wm1 / 150.0)
        assert loads.required_area_seating == pytest.approx(loads.wm2 / 172.0)
        assert loads.required_area == max(loads.required_area_operating, loads.required_area_seating)

    def test_available_loads(self):
        loads = _loads(design_stress=150.0)
        assert loads.available_load_ambient == pytest.approx(194.8 * 12 * 172.0)
        assert loads.available_load_design == pytest.approx(194.8 * 12 * 150.0)

    def test_zero_stress_gives_zero_area(self):
        loads = _loads(ambient_stress=0.0, design_stress=0.0)
        assert loads.required_area_operating == 0.0
        assert loads.required_area_seating == 0.0
