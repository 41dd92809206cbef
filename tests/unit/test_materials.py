"""Tests for material records, stock weight and thermal expansion."""

import logging

import pytest
from pydantic import ValidationError

from specfoundry.core.errors import ErrorCode
from specfoundry.core.geometry import Dimensions
from specfoundry.core.materials import (
    Material,
    calculate_stock_weight,
    calculate_thermal_expansion,
    calculate_weight_with_units,
    load_materials,
)
from specfoundry.core.units import UnitSystem

STEEL = Material(name="1018 Steel", density=0.284, expansion=6.5, category="steel")


class TestMaterialRecords:
    def test_load_materials(self):
        materials = load_materials(
            {
                "6061": {"name": "6061-T6 Aluminum", "density": 0.098, "expansion": 13.1},
                "1018": STEEL.model_dump(),
            }
        )
        assert materials["6061"].density == 0.098
        assert materials["1018"].category == "steel"
        assert materials["6061"].tensile_strength is None

    def test_non_positive_density_rejected(self):
        with pytest.raises(ValidationError):
            load_materials({"bad": {"name": "Bad", "density": 0, "expansion": 1}})

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Material(name="No density", expansion=1)


class TestWeight:
    def test_imperial_weight(self):
        result = calculate_weight_with_units(10, 0.1)
        assert result.weight == pytest.approx(1.0)
        assert result.weight_lb == pytest.approx(1.0)
        assert result.weight_kg == pytest.approx(0.453592)

    def test_metric_weight_is_kilograms(self):
        result = calculate_weight_with_units(16387.064, 0.1, UnitSystem.METRIC)
        assert result.weight_lb == pytest.approx(0.1)
        assert result.weight == pytest.approx(0.0453592)

    def test_rejects_non_positive(self):
        assert calculate_weight_with_units(0, 0.1) is None
        assert calculate_weight_with_units(10, -0.1) is None

    def test_stock_weight_imperial(self):
        result = calculate_stock_weight("rectangle", Dimensions(width=2, height=1), 12, STEEL)
        assert result.volume == pytest.approx(24.0)
        assert result.surface_area == pytest.approx(76.0)
        assert result.weight == pytest.approx(6.816)

    def test_stock_weight_metric_matches_imperial(self):
        """The same bar entered in mm weighs the same."""
        result = calculate_stock_weight(
            "rectangle", Dimensions(width=50.8, height=25.4), 304.8, 0.284, UnitSystem.METRIC
        )
        assert result.volume == pytest.approx(24.0 * 25.4 ** 3)
        assert result.surface_area == pytest.approx(76.0 * 25.4 ** 2)
        assert result.weight_lb == pytest.approx(6.816)
        assert result.weight == pytest.approx(6.816 * 0.453592)

    def test_stock_weight_invalid(self):
        assert calculate_stock_weight("rectangle", Dimensions(width=2), 12, STEEL) is None
        assert calculate_stock_weight("rectangle", Dimensions(width=2, height=1), 0, STEEL) is None
        assert calculate_stock_weight("rectangle", Dimensions(width=2, height=1), 12, 0) is None

    def test_unknown_unit_system(self, caplog):
        dims = Dimensions(width=2, height=1)
        with caplog.at_level(logging.DEBUG, logger="specfoundry"):
            assert calculate_weight_with_units(10, 0.1, "furlongs") is None
            assert calculate_stock_weight("rectangle", dims, 12, STEEL, "furlongs") is None
        records = [r for r in caplog.records if getattr(r, "reason", None) == "unknown unit system"]
        assert len(records) == 2
        assert all(r.error_code == ErrorCode.DOMAIN_VIOLATION for r in records)


class TestThermalExpansion:
    def test_heating(self):
        result = calculate_thermal_expansion(10, 100, 6.5)
        assert result.expansion == pytest.approx(0.0065)
        assert result.final_length == pytest.approx(10.0065)

    def test_cooling_shrinks(self):
        result = calculate_thermal_expansion(10, -100, 6.5)
        assert result.expansion == pytest.approx(0.0065)
        assert result.final_length == pytest.approx(9.9935)

    def test_zero_change_is_incomplete(self):
        assert calculate_thermal_expansion(10, 0, 6.5) is None
        assert calculate_thermal_expansion(0, 100, 6.5) is None
