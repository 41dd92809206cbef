"""Tests for severity-tagged input validation."""

from specfoundry.core.errors import ErrorCode
from specfoundry.core.units import UnitSystem
from specfoundry.core.validation import (
    Severity,
    validate_angle,
    validate_dimension,
    validate_material_inputs,
    validate_nominal_size,
    validate_temperature,
    validate_thread_diameter,
    validate_thread_engagement,
    validate_thread_pitch,
    validate_tolerance,
    validate_tpi,
    validate_wall_thickness,
)


class TestDimensionValidation:
    def test_valid_dimension(self):
        result = validate_dimension(2.0, "Width")
        assert result.is_valid
        assert result.severity is None

    def test_negative_and_zero(self):
        assert validate_dimension(-1, "Width").message == "Width cannot be negative"
        result = validate_dimension(0, "Width")
        assert not result.is_valid
        assert result.severity is Severity.ERROR
        assert result.code is ErrorCode.DOMAIN_VIOLATION

    def test_very_large_is_a_warning(self):
        result = validate_dimension(5000, "Length")
        assert result.is_valid
        assert result.severity is Severity.WARNING
        assert "very large length" in result.message.lower()

    def test_wall_thickness(self):
        assert not validate_wall_thickness(0, 2).is_valid
        assert not validate_wall_thickness(1, 2).is_valid
        assert validate_wall_thickness(0.05, 2).severity is Severity.WARNING
        assert validate_wall_thickness(0.25, 2).severity is None

    def test_temperature(self):
        assert validate_temperature(500).severity is None
        assert validate_temperature(-1500).severity is Severity.WARNING


class TestThreadValidation:
    def test_engagement_percent(self):
        assert not validate_thread_engagement(0).is_valid
        assert not validate_thread_engagement(101).is_valid
        assert validate_thread_engagement(40).severity is Severity.WARNING
        assert validate_thread_engagement(75).severity is None
        assert validate_thread_engagement(90).severity is Severity.INFO

    def test_tpi(self):
        assert not validate_tpi(0).is_valid
        assert validate_tpi(100).severity is Severity.WARNING
        assert validate_tpi(3).severity is Severity.WARNING
        assert validate_tpi(20).severity is None

    def test_metric_pitch_relative_to_diameter(self):
        assert validate_thread_pitch(1.5, 10).severity is None
        assert validate_thread_pitch(4, 10).message == "Very coarse pitch for this diameter"
        assert validate_thread_pitch(0.25, 10).message == "Very fine pitch for this diameter"
        assert validate_thread_pitch(20, 0.25, UnitSystem.IMPERIAL).severity is None

    def test_diameter(self):
        assert not validate_thread_diameter(0).is_valid
        assert validate_thread_diameter(8).severity is Severity.WARNING
        assert validate_thread_diameter(8, UnitSystem.METRIC).severity is None
        assert validate_thread_diameter(0.3, UnitSystem.METRIC).severity is Severity.WARNING


class TestToleranceValidation:
    def test_ordering(self):
        assert not validate_tolerance(-0.005, 0.005).is_valid
        assert validate_tolerance(0.005, 0.005).message == "Upper and lower deviations cannot be equal"
        assert validate_tolerance(0.005, -0.005).is_valid

    def test_tight_and_loose(self):
        assert validate_tolerance(0.0004, 0).severity is Severity.WARNING
        assert validate_tolerance(1, -1).severity is Severity.INFO

    def test_nominal_size(self):
        assert not validate_nominal_size(0).is_valid
        assert validate_nominal_size(200).severity is Severity.WARNING
        assert validate_nominal_size(200, UnitSystem.METRIC).severity is None
        assert validate_nominal_size(0.0005).severity is Severity.WARNING


class TestAngleValidation:
    def test_open_interval(self):
        assert validate_angle(30).is_valid
        assert not validate_angle(0).is_valid
        assert not validate_angle(90).is_valid
        assert validate_angle(120, high=180).is_valid


class TestMaterialInputs:
    def test_blank_fields_are_skipped(self):
        results = validate_material_inputs("rectangle", {"width": "", "height": None, "length": "12"})
        assert set(results) == {"length"}
        assert results["length"].is_valid

    def test_unparsable_text(self):
        results = validate_material_inputs("rectangle", {"width": "abc"})
        assert results["width"].code is ErrorCode.PARSE_FAILED
        assert not results["width"].is_valid

    def test_kind_specific_labels(self):
        results = validate_material_inputs("tube", {"diameter": "-2"})
        assert results["diameter"].message == "Outer Diameter cannot be negative"

    def test_wall_checked_against_outer_size(self):
        results = validate_material_inputs("square_tube", {"width": "2", "wall_thickness": "1.5"})
        assert not results["wall_thickness"].is_valid
        results = validate_material_inputs("tube", {"wall_thickness": "0.25"})
        assert results["wall_thickness"].is_valid

    def test_irrelevant_fields_ignored(self):
        results = validate_material_inputs("round", {"diameter": "1", "width": "-4"})
        assert "width" not in results

    def test_fillet_radii_on_structural_shapes(self):
        results = validate_material_inputs("angle", {"inner_fillet_radius": "0", "outer_fillet_radius": "-0.1"})
        assert results["inner_fillet_radius"].is_valid
        assert not results["outer_fillet_radius"].is_valid

    def test_unknown_kind(self):
        assert validate_material_inputs("zee", {"width": "1"}) == {}
