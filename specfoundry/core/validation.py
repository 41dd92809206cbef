"""
Input validation with severity levels for calculator forms.

The calculators themselves silently return None for bad input; this layer
runs alongside them and explains *why*, classified as info, warning or
error. Warnings and info leave ``is_valid`` True.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field

from specfoundry.core.errors import ErrorCode
from specfoundry.core.geometry.profiles import (
    FILLET_FIELDS,
    FILLETED_KINDS,
    REQUIRED_DIMENSIONS,
    ProfileKind,
    coerce_profile_kind,
)
from specfoundry.core.units import UnitSystem
from specfoundry.utils.numbers import parse_number


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ValidationResult(BaseModel):
    is_valid: bool = Field(description="False only for error severity")
    message: Optional[str] = Field(default=None, description="Human-readable explanation")
    severity: Optional[Severity] = Field(default=None)
    code: Optional[ErrorCode] = Field(default=None)


VALID = ValidationResult(is_valid=True)


def _error(message: str, code: ErrorCode = ErrorCode.DOMAIN_VIOLATION) -> ValidationResult:
    return ValidationResult(is_valid=False, message=message, severity=Severity.ERROR, code=code)


def _warning(message: str) -> ValidationResult:
    return ValidationResult(is_valid=True, message=message, severity=Severity.WARNING)


def _info(message: str) -> ValidationResult:
    return ValidationResult(is_valid=True, message=message, severity=Severity.INFO)


# ---------------------------------------------------------------------------
# Material calculator
# ---------------------------------------------------------------------------


def validate_dimension(value: float, name: str) -> ValidationResult:
    if value < 0:
        return _error(f"{name} cannot be negative")
    if value == 0:
        return _error(f"{name} must be greater than zero")
    if value > 1000:
        return _warning(f"Very large {name.lower()} - verify units are correct")
    return VALID


def validate_wall_thickness(thickness: float, outer_dimension: float) -> ValidationResult:
    if thickness <= 0:
        return _error("Wall thickness must be positive")
    if thickness >= outer_dimension / 2:
        return _error("Wall thickness must be less than half the outer dimension")
    if thickness < outer_dimension * 0.05:
        return _warning("Very thin wall - may be difficult to machine without deformation")
    return VALID


def validate_temperature(temp_change: float) -> ValidationResult:
    if abs(temp_change) > 1000:
        return _warning("Extreme temperature change - verify material properties remain valid")
    return VALID


# ---------------------------------------------------------------------------
# Thread calculator
# ---------------------------------------------------------------------------


def validate_thread_engagement(percent: float) -> ValidationResult:
    """Engagement entered as a percentage (0, 100]."""
    if percent <= 0 or percent > 100:
        return _error("Thread engagement must be between 0 and 100%")
    if percent < 50:
        return _warning("Low thread engagement - may have reduced strength")
    if percent > 85:
        return _info("High thread engagement - may be difficult to tap")
    return VALID


def validate_tpi(tpi: float) -> ValidationResult:
    if tpi <= 0:
        return _error("TPI must be positive")
    if tpi > 80:
        return _warning("Very fine thread - may be difficult to manufacture")
    if tpi < 4:
        return _warning("Very coarse thread - verify this is correct")
    return VALID


def validate_thread_pitch(
    pitch: float, diameter: float, unit_system: UnitSystem = UnitSystem.METRIC
) -> ValidationResult:
    """``pitch`` is TPI for imperial, mm for metric."""
    if pitch <= 0:
        return _error("Thread pitch must be positive")
    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return validate_tpi(pitch)
    if pitch > diameter * 0.3:
        return _warning("Very coarse pitch for this diameter")
    if pitch < diameter * 0.05:
        return _warning("Very fine pitch for this diameter")
    return VALID


def validate_thread_diameter(diameter: float, unit_system: UnitSystem = UnitSystem.IMPERIAL) -> ValidationResult:
    if diameter <= 0:
        return _error("Thread diameter must be positive")
    small, large = (0.01, 6) if UnitSystem(unit_system) == UnitSystem.IMPERIAL else (0.5, 150)
    if diameter < small:
        return _warning("Very small diameter - may be difficult to machine")
    if diameter > large:
        return _warning("Very large diameter - verify units are correct")
    return VALID


# ---------------------------------------------------------------------------
# Tolerance calculator
# ---------------------------------------------------------------------------


def validate_tolerance(upper: float, lower: float) -> ValidationResult:
    if upper < lower:
        return _error("Upper deviation must be greater than lower deviation")
    if upper == lower:
        return _error("Upper and lower deviations cannot be equal")
    total = upper - lower
    if total < 0.001:
        return _warning("Very tight tolerance - may require precision grinding")
    if total > 1:
        return _info("Very loose tolerance - typical for rough machining only")
    return VALID


def validate_nominal_size(size: float, unit_system: UnitSystem = UnitSystem.IMPERIAL) -> ValidationResult:
    if size <= 0:
        return _error("Nominal size must be positive")
    max_size = 100 if UnitSystem(unit_system) == UnitSystem.IMPERIAL else 2500
    if size > max_size:
        return _warning("Very large dimension - verify calculator is appropriate for this size")
    if size < 0.001:
        return _warning("Very small dimension - precision may be limited")
    return VALID


# ---------------------------------------------------------------------------
# Shop math
# ---------------------------------------------------------------------------


def validate_angle(angle: float, low: float = 0.0, high: float = 90.0) -> ValidationResult:
    """Open interval check used by the sine bar and triangle solver."""
    if not low < angle < high:
        return _error(f"Angle must be between {low:g} and {high:g} degrees")
    return VALID


# ---------------------------------------------------------------------------
# Whole-form validation
# ---------------------------------------------------------------------------

FIELD_LABELS: Dict[str, str] = {
    "length": "Length",
    "width": "Width",
    "height": "Height",
    "diameter": "Diameter",
    "wall_thickness": "Wall Thickness",
    "flat_to_flat": "Flat-to-Flat",
    "leg_width": "Leg Width",
    "leg_height": "Leg Height",
    "leg_thickness": "Leg Thickness",
    "flange_width": "Flange Width",
    "flange_thickness": "Flange Thickness",
    "web_height": "Web Height",
    "web_thickness": "Web Thickness",
    "sheet_thickness": "Thickness",
    "inner_fillet_radius": "Inner Fillet Radius",
    "outer_fillet_radius": "Outer Fillet Radius",
}

# Per-kind label overrides
_KIND_LABELS: Dict[ProfileKind, Dict[str, str]] = {
    ProfileKind.TUBE: {"diameter": "Outer Diameter"},
    ProfileKind.SQUARE_TUBE: {"width": "Outer Size"},
}

# kind -> field holding the outer size a wall sits in
_WALL_OUTER_FIELD = {ProfileKind.TUBE: "diameter", ProfileKind.SQUARE_TUBE: "width"}


def validate_material_inputs(
    kind, raw_fields: Mapping[str, Union[str, float, None]]
) -> Dict[str, ValidationResult]:
    """
    Validate the raw form fields of the material calculator.

    Blank fields are skipped (the form is still being filled in); text
    that is not a number is an error. Only fields relevant to ``kind``
    (plus ``length``) are checked.

    Returns:
        Mapping of field name to result; fields not checked are absent
    """
    profile = coerce_profile_kind(kind)
    if profile is None:
        return {}

    names = ["length", *REQUIRED_DIMENSIONS[profile]]
    if profile in FILLETED_KINDS:
        names += list(FILLET_FIELDS)
    labels = {**FIELD_LABELS, **_KIND_LABELS.get(profile, {})}

    values: Dict[str, float] = {}
    results: Dict[str, ValidationResult] = {}
    for name in names:
        raw = raw_fields.get(name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        value = parse_number(raw)
        if value is None:
            results[name] = _error(f"{labels[name]} is not a number", ErrorCode.PARSE_FAILED)
            continue
        values[name] = value
        if name in FILLET_FIELDS and value == 0:
            # Sharp corner
            results[name] = VALID
        elif name != "wall_thickness":
            results[name] = validate_dimension(value, labels[name])

    outer_field = _WALL_OUTER_FIELD.get(profile)
    if outer_field and "wall_thickness" in values:
        if outer_field in values:
            results["wall_thickness"] = validate_wall_thickness(values["wall_thickness"], values[outer_field])
        else:
            results["wall_thickness"] = validate_dimension(values["wall_thickness"], labels["wall_thickness"])

    return results


__all__ = [
    "Severity",
    "ValidationResult",
    "validate_dimension",
    "validate_wall_thickness",
    "validate_temperature",
    "validate_thread_engagement",
    "validate_tpi",
    "validate_thread_pitch",
    "validate_thread_diameter",
    "validate_tolerance",
    "validate_nominal_size",
    "validate_angle",
    "validate_material_inputs",
]
