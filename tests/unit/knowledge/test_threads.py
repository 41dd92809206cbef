"""Tests for tap drills, thread depth and designation parsing."""

import logging
import math

import pytest

from specfoundry.core.config import reset_settings
from specfoundry.core.errors import ErrorCode
from specfoundry.core.knowledge.threads import (
    ClearanceFit,
    ThreadSeries,
    ThreadSpec,
    calculate_metric_tap_drill,
    calculate_tap_drill,
    calculate_thread_depth,
    find_unified_thread,
    get_clearance_hole_size,
    get_coarse_pitch,
    get_tap_drill_size,
    get_unified_thread,
)
from specfoundry.core.units import UnitSystem


class TestTapDrill:
    def test_quarter_twenty_at_75_percent(self):
        result = calculate_tap_drill(0.25, 20, 0.75)
        assert result.tap_drill_diameter == pytest.approx(0.2013, abs=1e-4)
        assert result.thread_depth == pytest.approx(0.6495 / 20)
        assert result.engagement == 0.75

    def test_default_engagement_from_settings(self, monkeypatch):
        assert calculate_tap_drill(0.25, 20).engagement == 0.75
        monkeypatch.setenv("SPECFOUNDRY_DEFAULT_THREAD_ENGAGEMENT", "0.5")
        reset_settings()
        assert calculate_tap_drill(0.25, 20).engagement == 0.5

    def test_full_engagement_is_minor_diameter(self):
        drill = calculate_tap_drill(0.25, 20, 1.0).tap_drill_diameter
        depth = calculate_thread_depth(0.25, 20)
        assert drill == pytest.approx(depth.minor_diameter)

    def test_engagement_out_of_range(self):
        assert calculate_tap_drill(0.25, 20, 0) is None
        assert calculate_tap_drill(0.25, 20, 1.2) is None
        assert calculate_tap_drill(0.25, 20, 75) is None

    def test_metric_tap_drill(self):
        result = calculate_metric_tap_drill(10, 1.5, 0.75)
        assert result.tap_drill_diameter == pytest.approx(10 - 1.5 * 0.6495 * 1.5)

    def test_drill_between_zero_and_major(self):
        for size in ("#4-40", "#10-24", "1/4-20", "3/8-16", "1/2-13", "1-8"):
            thread = get_unified_thread(size)
            for engagement in (0.5, 0.75, 1.0):
                drill = calculate_tap_drill(thread.major_diameter, thread.tpi, engagement)
                assert 0 < drill.tap_drill_diameter < thread.major_diameter

    def test_rejects_non_positive_input(self):
        assert calculate_tap_drill(0, 20) is None
        assert calculate_tap_drill(0.25, -20) is None
        assert calculate_metric_tap_drill(10, 0) is None


class TestThreadDepth:
    def test_quarter_twenty_geometry(self):
        result = calculate_thread_depth(0.25, 20, UnitSystem.IMPERIAL)
        assert result.thread_height == pytest.approx(0.032475)
        assert result.minor_diameter == pytest.approx(0.25 - 2 * 0.032475)
        assert result.pitch_diameter == pytest.approx(0.25 - 0.649519 / 20)
        assert result.stress_area == pytest.approx(0.0318, abs=1e-4)
        assert result.clearance_standard == pytest.approx(0.275)

    def test_metric_stress_area(self):
        """M10x1.5 tensile stress area is 58 mm²."""
        result = calculate_thread_depth(10, 1.5, UnitSystem.METRIC)
        assert result.stress_area == pytest.approx(58.0, abs=0.1)
        assert result.minor_area == pytest.approx(math.pi / 4 * result.minor_diameter ** 2)

    def test_pitch_too_coarse(self):
        assert calculate_thread_depth(0.1, 2) is None

    def test_unknown_unit_system(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="specfoundry"):
            assert calculate_thread_depth(0.25, 20, "furlongs") is None
        records = [r for r in caplog.records if getattr(r, "calculator", None) == "threads"]
        assert records[-1].reason == "unknown unit system"
        assert records[-1].error_code == ErrorCode.DOMAIN_VIOLATION


class TestThreadTables:
    def test_unified_lookup(self):
        thread = get_unified_thread("1/4-20")
        assert thread.series is ThreadSeries.UNC
        assert thread.major_diameter == 0.25

    def test_unified_lookup_normalizes(self):
        thread = get_unified_thread("10-32 UNF")
        assert thread.size == "#10-32"
        assert thread.major_diameter == pytest.approx(0.19)
        assert get_unified_thread("3/8-99") is None

    def test_find_by_diameter_and_tpi(self):
        assert find_unified_thread(0.25, 28).series is ThreadSeries.UNF
        assert find_unified_thread(0.25, 27) is None

    def test_metric_coarse_tables(self):
        assert get_coarse_pitch(10) == 1.5
        assert get_tap_drill_size(10) == 8.5
        assert get_coarse_pitch(7) is None

    def test_clearance_holes(self):
        assert get_clearance_hole_size(10) == 11.0
        assert get_clearance_hole_size(10, "close") == 10.5
        assert get_clearance_hole_size(10, ClearanceFit.FREE) == 12.0
        assert get_clearance_hole_size(9.5) == 11.0
        assert get_clearance_hole_size(40) is None
        assert get_clearance_hole_size(10, "snug") is None


class TestDesignation:
    def test_metric_coarse(self):
        spec = ThreadSpec.from_designation("M10")
        assert spec.pitch == 1.5
        assert spec.is_metric
        assert spec.tpi is None

    def test_metric_fine(self):
        spec = ThreadSpec.from_designation("m10 x 1.25")
        assert spec.pitch == 1.25
        assert spec.major_diameter == 10

    def test_unified(self):
        spec = ThreadSpec.from_designation("1/4-20")
        assert spec.major_diameter == 0.25
        assert spec.tpi == 20
        assert spec.unit_system is UnitSystem.IMPERIAL

    def test_numbered_and_series_suffix(self):
        assert ThreadSpec.from_designation("#10-32").major_diameter == pytest.approx(0.19)
        assert ThreadSpec.from_designation("10-32 UNF").major_diameter == pytest.approx(0.19)

    def test_mixed_fraction(self):
        spec = ThreadSpec.from_designation("1-1/4-7")
        assert spec.major_diameter == 1.25
        assert spec.tpi == 7

    def test_unparsable(self):
        assert ThreadSpec.from_designation("quarter twenty") is None
        assert ThreadSpec.from_designation("M7") is None
        assert ThreadSpec.from_designation(None) is None

    def test_create_needs_exactly_one_step(self):
        assert ThreadSpec.create(10, pitch=1.5, tpi=20) is None
        assert ThreadSpec.create(10) is None
        assert ThreadSpec.create(10, pitch=1.5, engagement=0) is None

    def test_tap_drill_from_spec(self):
        spec = ThreadSpec.from_designation("1/4-20", engagement=0.75)
        assert spec.tap_drill() == calculate_tap_drill(0.25, 20, 0.75)
        metric = ThreadSpec.from_designation("M10")
        assert metric.tap_drill() == calculate_metric_tap_drill(10, 1.5)
