"""
Material records and the mass/thermal calculations built on them.

Material data is supplied by the caller (a reference dataset); the library
only validates its shape. Densities are stored in lb/in³ and expansion
coefficients in ×10⁻⁶ in/in/°F regardless of the display unit system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field

from specfoundry.core.errors import ErrorCode
from specfoundry.core.geometry import Dimensions, calculate_solid_properties
from specfoundry.core.units import (
    INCH_PER_MM,
    MM_PER_INCH,
    UnitSystem,
    coerce_unit_system,
    convert_weight_for_display,
    lb_to_kg,
    mm3_to_in3,
)
from specfoundry.utils.numbers import is_finite, is_positive

logger = logging.getLogger(__name__)


class Material(BaseModel):
    """One row of the caller's material reference dataset."""

    name: str = Field(description="Display name, e.g. '6061-T6 Aluminum'")
    density: float = Field(gt=0, description="Density in lb/in³")
    expansion: float = Field(description="Thermal expansion, ×10⁻⁶ in/in/°F")
    tensile_strength: Optional[float] = Field(default=None, description="Ultimate tensile strength, psi")
    yield_strength: Optional[float] = Field(default=None, description="Yield strength, psi")
    hardness: Optional[float] = Field(default=None, description="Brinell hardness")
    category: Optional[str] = Field(default=None, description="Grouping such as 'aluminum'")


def load_materials(records: Mapping[str, Mapping[str, Any]]) -> Dict[str, Material]:
    """
    Validate a raw material dataset keyed by material id.

    Raises:
        pydantic.ValidationError: a record is missing a field or has a
            non-positive density
    """
    materials = {key: Material(**dict(record)) for key, record in records.items()}
    logger.debug("loaded %d materials", len(materials), extra={"calculator": "materials"})
    return materials


@dataclass(frozen=True)
class WeightResult:
    volume: float  # as given (in³ imperial, mm³ metric)
    weight: float  # lb imperial, kg metric
    weight_kg: float
    weight_lb: float
    density: float  # lb/in³
    unit_system: UnitSystem


@dataclass(frozen=True)
class StockWeightResult:
    volume: float  # in³ or mm³
    surface_area: float  # in² or mm²
    weight: float
    weight_kg: float
    weight_lb: float
    unit_system: UnitSystem


@dataclass(frozen=True)
class ThermalExpansionResult:
    expansion: float  # magnitude of the length change
    final_length: float
    coefficient: float  # ×10⁻⁶ in/in/°F


def _density_of(material: Union[Material, float]) -> Optional[float]:
    density = material.density if isinstance(material, Material) else material
    return float(density) if is_positive(density) else None


def _unit_system(value) -> Optional[UnitSystem]:
    system = coerce_unit_system(value)
    if system is None:
        logger.debug(
            "unknown unit system %r",
            value,
            extra={
                "calculator": "materials",
                "reason": "unknown unit system",
                "error_code": ErrorCode.DOMAIN_VIOLATION,
            },
        )
    return system


def calculate_weight_with_units(
    volume: float, density_lb_per_in3: float, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> Optional[WeightResult]:
    """
    Weight of ``volume`` (in³ imperial, mm³ metric) at a lb/in³ density.

    Returns None for a non-positive volume or density.
    """
    if not is_positive(volume) or not is_positive(density_lb_per_in3):
        logger.debug(
            "volume and density must be positive",
            extra={"calculator": "materials", "error_code": ErrorCode.DOMAIN_VIOLATION},
        )
        return None

    unit_system = _unit_system(unit_system)
    if unit_system is None:
        return None
    volume_in3 = mm3_to_in3(volume) if unit_system == UnitSystem.METRIC else volume
    weight_lb = volume_in3 * density_lb_per_in3
    return WeightResult(
        volume=volume,
        weight=convert_weight_for_display(weight_lb, unit_system),
        weight_kg=lb_to_kg(weight_lb),
        weight_lb=weight_lb,
        density=density_lb_per_in3,
        unit_system=unit_system,
    )


def calculate_stock_weight(
    kind,
    dims: Dimensions,
    length: float,
    material: Union[Material, float],
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> Optional[StockWeightResult]:
    """
    Volume, surface area and weight of a length of stock.

    Metric dimensions (mm) are scaled to inches, computed, and the volume
    and surface area reported back in mm³ and mm².
    """
    density = _density_of(material)
    if density is None or not is_positive(length):
        return None

    unit_system = _unit_system(unit_system)
    if unit_system is None:
        return None
    if unit_system == UnitSystem.METRIC:
        solid = calculate_solid_properties(kind, dims.scaled(INCH_PER_MM), length * INCH_PER_MM)
    else:
        solid = calculate_solid_properties(kind, dims, length)
    if solid is None:
        return None

    weight_lb = solid.volume * density
    volume, surface_area = solid.volume, solid.surface_area
    if unit_system == UnitSystem.METRIC:
        volume *= MM_PER_INCH ** 3
        surface_area *= MM_PER_INCH ** 2
    return StockWeightResult(
        volume=volume,
        surface_area=surface_area,
        weight=convert_weight_for_display(weight_lb, unit_system),
        weight_kg=lb_to_kg(weight_lb),
        weight_lb=weight_lb,
        unit_system=unit_system,
    )


def calculate_thermal_expansion(
    original_length: float, temp_change_f: float, coefficient: float
) -> Optional[ThermalExpansionResult]:
    """
    Linear thermal expansion ΔL = L · α · ΔT with α in ×10⁻⁶ /°F.

    A zero temperature change is treated as incomplete input (None).
    """
    if not is_positive(original_length) or not is_finite(temp_change_f) or temp_change_f == 0:
        return None
    if not is_finite(coefficient):
        return None

    delta = original_length * coefficient * 1e-6 * temp_change_f
    return ThermalExpansionResult(
        expansion=abs(delta),
        final_length=original_length + delta,
        coefficient=coefficient,
    )
