"""Tests for bolt circle, sine bar and right triangle helpers."""

import math

import pytest

from specfoundry.core.config import reset_settings
from specfoundry.core.shop_math import (
    calculate_bolt_circle,
    calculate_bolt_circle_chord,
    calculate_sine_bar,
    solve_right_triangle,
)


class TestBoltCircle:
    def test_four_holes_on_four_inch_circle(self):
        holes = calculate_bolt_circle(4, 4, 0)
        assert [h.angle for h in holes] == [0.0, 90.0, 180.0, 270.0]
        assert holes[0].x == pytest.approx(2.0)
        assert holes[1].y == pytest.approx(2.0)
        assert holes[2].x == pytest.approx(-2.0)
        assert holes[3].y == pytest.approx(-2.0)
        assert [h.index for h in holes] == [1, 2, 3, 4]

    def test_start_angle_wraps(self):
        holes = calculate_bolt_circle(10, 3, 300)
        assert [h.angle for h in holes] == pytest.approx([300.0, 60.0, 180.0])
        assert all(0 <= h.angle < 360 for h in holes)

    def test_negative_start_angle(self):
        holes = calculate_bolt_circle(10, 2, -90)
        assert [h.angle for h in holes] == pytest.approx([270.0, 90.0])

    def test_holes_lie_on_circle(self):
        for hole in calculate_bolt_circle(6.5, 7, 15):
            assert math.hypot(hole.x, hole.y) == pytest.approx(3.25)

    def test_invalid_input(self):
        assert calculate_bolt_circle(0, 4) is None
        assert calculate_bolt_circle(4, 0) is None
        assert calculate_bolt_circle(4, 2.5) is None

    def test_chord(self):
        assert calculate_bolt_circle_chord(4, 4) == pytest.approx(4 * math.sin(math.pi / 4))
        assert calculate_bolt_circle_chord(4, 2) == pytest.approx(4.0)
        assert calculate_bolt_circle_chord(4, 1) is None


class TestSineBar:
    def test_thirty_degrees_on_five_inch_bar(self):
        result = calculate_sine_bar(30, 5)
        assert result.block_height == pytest.approx(2.5)

    def test_default_bar_length_from_settings(self, monkeypatch):
        assert calculate_sine_bar(30).bar_length == 5.0
        monkeypatch.setenv("SPECFOUNDRY_DEFAULT_SINE_BAR_LENGTH", "10")
        reset_settings()
        assert calculate_sine_bar(30).block_height == pytest.approx(5.0)

    def test_angle_limits(self):
        assert calculate_sine_bar(0, 5) is None
        assert calculate_sine_bar(90, 5) is None
        assert calculate_sine_bar(-10, 5) is None
        assert calculate_sine_bar(30, 0) is None


class TestRightTriangle:
    def test_three_four_five(self):
        t = solve_right_triangle(a=3, b=4)
        assert t.c == pytest.approx(5.0)
        assert t.A == pytest.approx(36.8699, abs=1e-4)
        assert t.B == pytest.approx(53.1301, abs=1e-4)
        assert t.area == pytest.approx(6.0)
        assert t.perimeter == pytest.approx(12.0)

    def test_hypotenuse_and_leg(self):
        t = solve_right_triangle(b=4, c=5)
        assert t.a == pytest.approx(3.0)
        assert t.A + t.B == pytest.approx(90.0)

    def test_side_and_angle(self):
        t = solve_right_triangle(c=2, A=30)
        assert t.a == pytest.approx(1.0)
        assert t.b == pytest.approx(math.sqrt(3))
        t = solve_right_triangle(a=1, B=60)
        assert t.c == pytest.approx(2.0)

    def test_consistent_extra_values_accepted(self):
        assert solve_right_triangle(a=3, b=4, c=5) is not None

    def test_inconsistent_values_rejected(self):
        assert solve_right_triangle(a=3, b=4, c=6) is None
        assert solve_right_triangle(A=30, B=50, c=1) is None

    def test_under_determined(self):
        assert solve_right_triangle(a=3) is None
        assert solve_right_triangle(A=30, B=60) is None

    def test_impossible_input(self):
        assert solve_right_triangle(a=5, c=3) is None
        assert solve_right_triangle(a=-3, b=4) is None
        assert solve_right_triangle(a=3, A=90) is None
