"""Tests for signed sub-area composition."""

import math

import pytest

from specfoundry.core.geometry.composite import (
    SubArea,
    combine,
    fillet_parts,
    quarter_disc_part,
    rectangle_part,
)


def test_two_stacked_rectangles_equal_one():
    """Splitting a rectangle must not change its properties."""
    whole = combine([rectangle_part(0, 0, 2, 4)])
    split = combine([rectangle_part(0, 0, 2, 1), rectangle_part(0, 1, 2, 3)])
    assert split.area == pytest.approx(whole.area)
    assert split.cy == pytest.approx(2.0)
    assert split.ixx == pytest.approx(whole.ixx)
    assert split.iyy == pytest.approx(whole.iyy)


def test_negative_part_cuts_a_hole():
    hollow = combine([rectangle_part(0, 0, 4, 4), rectangle_part(1, 1, 2, 2, sign=-1.0)])
    assert hollow.area == pytest.approx(12.0)
    assert hollow.cx == pytest.approx(2.0)
    assert hollow.ixx == pytest.approx((4 ** 4 - 2 ** 4) / 12)


def test_quarter_disc_centroid():
    part = quarter_disc_part(0, 0, 3, 1, 1)
    assert part.area == pytest.approx(math.pi * 9 / 4)
    assert part.cx == pytest.approx(4 / math.pi)
    assert part.cy == pytest.approx(4 / math.pi)


def test_fillet_spandrel_area():
    parts = fillet_parts(0, 0, 0.5, 1, 1, sign=1.0)
    assert sum(p.area for p in parts) == pytest.approx(0.25 * (1 - math.pi / 4))


def test_zero_radius_fillet_has_no_parts():
    assert fillet_parts(1, 1, 0.0, 1, 1) == []


def test_empty_or_negative_net_area():
    assert combine([]) is None
    assert combine([SubArea(area=-1.0, cx=0, cy=0, ixx=0, iyy=0)]) is None
