"""
Tests for gasket sizing.

Tests cover:
- Ring widths from the table and manual widths
- Seating OD from the bolt circle and shell fits
- Basic and effective width per facing sketch
- Manual seating overrides
"""

import math

import pytest

from pyflange.gasket import (
    basic_width,
    effective_width,
    mean_diameter,
    ring_widths,
    seating_od_from_bcd,
    seating_od_from_shell,
    size_gasket,
)
from pyflange.tables import RingWidthRange

ROW = RingWidthRange(0, 300, 6, 10)


def _size(**kwargs):
    args = dict(
        provisional_bcd=364,
        hole_size=23,
        clearance=2.5,
        inside_diameter=300,
        shell_gap=3.0,
        contact_width=15.0,
        inner_ring_width=6.0,
        outer_ring_width=10.0,
        facing_sketch="1a: Flat Face / Groove",
    )
    args.update(kwargs)
    return size_gasket(**args)


class TestRingWidths:
    """Test ring width selection."""

    def test_table_minimums(self):
        assert ring_widths(ROW, True, True) == (6, 10)

    def test_absent_rings(self):
        assert ring_widths(ROW, False, False, 9.0, 14.0) == (0.0, 0.0)

    def test_manual_widths(self):
        assert ring_widths(ROW, True, True, 9.0, 14.0) == (9.0, 14.0)

    def test_zero_manual_restores_table(self):
        assert ring_widths(ROW, True, True, 0.0, 0.0) == (6, 10)


class TestSeatingDiameters:
    """Test the two seating OD fits."""

    def test_bcd_fit(self):
        assert seating_od_from_bcd(364, 23, 2.5, 10) == pytest.approx(313)

    def test_shell_fit(self):
        assert seating_od_from_shell(300, 3, 6, 15) == pytest.approx(348)

    def test_larger_fit_governs(self):
        gasket = _size()
        assert gasket.seating_od == pytest.approx(348)
        assert gasket.seating_id == pytest.approx(318)
        assert gasket.gasket_od == pytest.approx(368)
        assert gasket.gasket_id == pytest.approx(306)

        gasket = _size(provisional_bcd=500)
        assert gasket.seating_od == pytest.approx(500 - 23 - 5 - 3 - 20)
        assert gasket.seating_od == gasket.auto_seating_od

    def test_manual_seating(self):
        gasket = _size(manual_seating_id=320, manual_seating_od=360)
        assert gasket.seating_id == 320
        assert gasket.seating_od == 360
        assert gasket.gasket_od == 380
        assert gasket.gasket_id == 308
        # Auto values are still reported
        assert gasket.auto_seating_od == pytest.approx(348)
        assert gasket.auto_seating_id == pytest.approx(318)

    def test_without_rings(self):
        gasket = _size(inner_ring_width=0.0, outer_ring_width=0.0)
        assert gasket.gasket_od == gasket.seating_od
        assert gasket.gasket_id == gasket.seating_id


class TestEffectiveWidth:
    """Test b0, b and G."""

    @pytest.mark.parametrize(
        "sketch,expected",
        [
            ("1a: Flat Face / Groove", 7.5),
            ("1b: Flat Face", 7.5),
            ("1c: Tongue & Groove", 3.75),
            ("1d: Flat Face w/ Nubbin", 3.75),
            ("2: Ring Joint", 1.875),
        ],
    )
    def test_basic_width(self, sketch: str, expected: float):
        assert basic_width(15.0, sketch) == pytest.approx(expected)

    def test_narrow_gasket(self):
        assert effective_width(6.0) == 6.0
        assert mean_diameter(318, 348, 6.0, 6.0) == 333

    def test_wide_gasket(self):
        b = effective_width(7.5)
        assert b == pytest.approx(0.5 * 25.4 * math.sqrt(7.5 / 25.4))
        assert mean_diameter(318, 348, 7.5, b) == pytest.approx(348 - 2 * b)

    def test_sized_gasket_widths(self):
        gasket = _size()
        assert gasket.b0 == 7.5
        assert gasket.b == pytest.approx(6.9012, abs=1e-3)
        assert gasket.g == pytest.approx(348 - 2 * gasket.b)

        gasket = _size(facing_sketch="1c: Tongue & Groove")
        assert gasket.b == gasket.b0 == 3.75
        assert gasket.g == pytest.approx(333)
