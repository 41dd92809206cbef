"""Tests for IT grades, bilateral limits and roughness conversion."""

import pytest

from specfoundry.core.knowledge.tolerance import (
    ITGrade,
    PUBLISHED_TOLERANCES,
    RoughnessUnit,
    SurfaceFinishGrade,
    calculate_bilateral_tolerance,
    calculate_it_tolerance,
    coerce_it_grade,
    convert_roughness,
    get_tolerance_table,
    get_tolerance_value,
    suggest_surface_finish,
)


class TestITGrades:
    """Tests for IT grade functionality."""

    def test_formula_value_at_25mm(self):
        """IT7 @ 25mm from the formula is about 20.9 µm."""
        assert calculate_it_tolerance(25, "IT7") == pytest.approx(20.92, abs=0.01)
        assert calculate_it_tolerance(25, ITGrade.IT6) == pytest.approx(13.07, abs=0.01)

    def test_published_value_at_25mm(self):
        """IT7 @ 25mm in the published table is 21 µm."""
        assert get_tolerance_value(25, "IT7") == 21
        assert get_tolerance_value(25, ITGrade.IT7) == 21

    def test_formula_tracks_published_table(self):
        """Formula and rounded table agree within 10% for IT5..IT11."""
        for grade in range(5, 12):
            for size in (5, 25, 100, 400):
                formula = calculate_it_tolerance(size, grade)
                table = get_tolerance_value(size, grade)
                assert formula == pytest.approx(table, rel=0.1)

    def test_bracket_boundaries(self):
        """Upper bracket edges are inclusive."""
        assert get_tolerance_value(3, "IT7") == 10
        assert get_tolerance_value(3.01, "IT7") == 12
        assert calculate_it_tolerance(30, "IT7") == calculate_it_tolerance(18.5, "IT7")

    def test_grades_increase_monotonically(self):
        values = [calculate_it_tolerance(25, grade) for grade in ITGrade]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_fine_grades(self):
        """IT01 uses 0.3 + 0.008·D."""
        assert calculate_it_tolerance(25, "IT01") == pytest.approx(0.3 + 0.008 * (18 * 30) ** 0.5)
        assert calculate_it_tolerance(25, "IT1") < calculate_it_tolerance(25, "IT2")
        assert calculate_it_tolerance(25, "IT4") < calculate_it_tolerance(25, "IT5")

    def test_formula_limited_to_500mm(self):
        assert calculate_it_tolerance(500, "IT7") is not None
        assert calculate_it_tolerance(501, "IT7") is None
        assert get_tolerance_value(600, "IT7") == 70

    def test_out_of_range_size(self):
        assert calculate_it_tolerance(0, "IT7") is None
        assert calculate_it_tolerance(-5, "IT7") is None
        assert get_tolerance_value(3151, "IT7") is None

    def test_unknown_grade(self):
        assert calculate_it_tolerance(25, "IT19") is None
        assert get_tolerance_value(25, "X") is None

    def test_coerce_it_grade(self):
        assert coerce_it_grade("it7") is ITGrade.IT7
        assert coerce_it_grade(7) is ITGrade.IT7
        assert coerce_it_grade("01") is ITGrade.IT01
        assert coerce_it_grade(True) is None
        assert ITGrade.IT01.number == -1

    def test_published_table_shape(self):
        for grade in ITGrade:
            assert len(PUBLISHED_TOLERANCES[grade]) == 21

    def test_get_tolerance_table(self):
        table = get_tolerance_table(25)
        assert list(table) == [f"IT{i}" for i in range(5, 15)]
        assert table["IT7"] == 21


class TestBilateralTolerance:
    def test_symmetric_limits(self):
        result = calculate_bilateral_tolerance(1.0, 0.005, -0.005)
        assert result.max_limit == pytest.approx(1.005)
        assert result.min_limit == pytest.approx(0.995)
        assert result.total_tolerance == pytest.approx(0.010)
        assert result.mid_tolerance == pytest.approx(0.0)

    def test_unilateral_limits(self):
        result = calculate_bilateral_tolerance(25.0, 0.021, 0.0)
        assert result.min_limit == 25.0
        assert result.mid_tolerance == pytest.approx(0.0105)

    def test_rejects_inverted_or_equal_deviations(self):
        assert calculate_bilateral_tolerance(1.0, -0.005, 0.005) is None
        assert calculate_bilateral_tolerance(1.0, 0.005, 0.005) is None
        assert calculate_bilateral_tolerance(0, 0.005, -0.005) is None


class TestRoughness:
    def test_micrometers_to_microinches(self):
        result = convert_roughness(1.6)
        assert result.microinches == pytest.approx(62.992)
        assert result.grade is SurfaceFinishGrade.N7
        assert result.rz == pytest.approx(6.4)
        assert result.rms == pytest.approx(1.776)

    def test_microinches_to_micrometers(self):
        result = convert_roughness(32, RoughnessUnit.MICROINCHES)
        assert result.micrometers == pytest.approx(32 / 39.37)
        assert result.microinches == 32
        assert result.grade is SurfaceFinishGrade.N6

    def test_rejects_non_positive_or_unknown_unit(self):
        assert convert_roughness(0) is None
        assert convert_roughness(-1.6) is None
        assert convert_roughness(1.6, "angstroms") is None

    def test_suggest_nearest_grade(self):
        assert suggest_surface_finish(1.5) is SurfaceFinishGrade.N7
        assert suggest_surface_finish(0.01) is SurfaceFinishGrade.N1
        assert suggest_surface_finish(400) is SurfaceFinishGrade.N12
