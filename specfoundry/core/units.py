"""
Unit conversion between the imperial and metric systems.

Every geometry calculation runs in inch-based units; these helpers scale
input and presentation values. They accept any finite number and never
reject domain errors, callers validate before converting.
"""

from enum import Enum
from typing import Optional

MM_PER_INCH = 25.4
INCH_PER_MM = 1 / MM_PER_INCH
KG_PER_LB = 0.453592
LB_PER_KG = 1 / KG_PER_LB


class UnitSystem(str, Enum):
    """Display/input scaling flag."""

    IMPERIAL = "imperial"  # in, in³, lb, lb/in³
    METRIC = "metric"  # mm, mm³, kg, kg/mm³


def coerce_unit_system(value) -> Optional[UnitSystem]:
    """Map a flag or its case-insensitive name to ``UnitSystem``; None if unknown."""
    if isinstance(value, UnitSystem):
        return value
    try:
        return UnitSystem(str(value).strip().lower())
    except ValueError:
        return None


def mm_to_inches(mm: float) -> float:
    return mm * INCH_PER_MM


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def mm3_to_in3(mm3: float) -> float:
    return mm3 * INCH_PER_MM ** 3


def in3_to_mm3(in3: float) -> float:
    return in3 * MM_PER_INCH ** 3


def lb_to_kg(lb: float) -> float:
    return lb * KG_PER_LB


def kg_to_lb(kg: float) -> float:
    return kg * LB_PER_KG


def lb_per_in3_to_kg_per_mm3(lb_per_in3: float) -> float:
    return lb_per_in3 * (KG_PER_LB / MM_PER_INCH ** 3)


def kg_per_mm3_to_lb_per_in3(kg_per_mm3: float) -> float:
    return kg_per_mm3 * (LB_PER_KG * MM_PER_INCH ** 3)


def to_inches(value: float, unit_system: UnitSystem) -> float:
    """Scale a length entered in ``unit_system`` to inches."""
    if unit_system == UnitSystem.METRIC:
        return mm_to_inches(value)
    return value


def from_inches(value: float, unit_system: UnitSystem) -> float:
    """Scale a length in inches to ``unit_system`` for presentation."""
    if unit_system == UnitSystem.METRIC:
        return inches_to_mm(value)
    return value


def convert_volume(volume: float, from_system: UnitSystem, to_system: UnitSystem) -> float:
    """Convert a volume between in³ and mm³."""
    if from_system == to_system:
        return volume
    if from_system == UnitSystem.METRIC:
        return mm3_to_in3(volume)
    return in3_to_mm3(volume)


def convert_weight_for_display(weight_lb: float, unit_system: UnitSystem) -> float:
    """Weight in lb → lb (imperial) or kg (metric)."""
    if unit_system == UnitSystem.METRIC:
        return lb_to_kg(weight_lb)
    return weight_lb


def density_for_system(density_lb_per_in3: float, unit_system: UnitSystem) -> float:
    """Material density (stored as lb/in³) in the units of ``unit_system``."""
    if unit_system == UnitSystem.METRIC:
        return lb_per_in3_to_kg_per_mm3(density_lb_per_in3)
    return density_lb_per_in3


__all__ = [
    "MM_PER_INCH",
    "INCH_PER_MM",
    "KG_PER_LB",
    "UnitSystem",
    "coerce_unit_system",
    "mm_to_inches",
    "inches_to_mm",
    "mm3_to_in3",
    "in3_to_mm3",
    "lb_to_kg",
    "kg_to_lb",
    "lb_per_in3_to_kg_per_mm3",
    "kg_per_mm3_to_lb_per_in3",
    "to_inches",
    "from_inches",
    "convert_volume",
    "convert_weight_for_display",
    "density_for_system",
]
