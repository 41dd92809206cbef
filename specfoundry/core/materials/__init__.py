"""Materials module: material records, stock weight and thermal expansion."""

from specfoundry.core.materials.properties import (
    Material,
    StockWeightResult,
    ThermalExpansionResult,
    WeightResult,
    calculate_stock_weight,
    calculate_thermal_expansion,
    calculate_weight_with_units,
    load_materials,
)

__all__ = [
    "Material",
    "StockWeightResult",
    "ThermalExpansionResult",
    "WeightResult",
    "calculate_stock_weight",
    "calculate_thermal_expansion",
    "calculate_weight_with_units",
    "load_materials",
]
