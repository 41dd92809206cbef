"""
Tolerance and Fits Module.

Provides ISO tolerance grades (IT01-IT18), hole-basis fit resolution,
bilateral tolerance limits and surface roughness conversion.

Reference Standards:
- ISO 286-1:2010 - Geometrical product specifications (GPS) - ISO code system
- ISO 286-2:2010 - Tables of standard tolerance classes and limit deviations
- ISO 1302:2002 - Indication of surface texture
"""

from .it_grades import (
    ITGrade,
    GRADE_FACTORS,
    PUBLISHED_TOLERANCES,
    coerce_it_grade,
    calculate_it_tolerance,
    get_tolerance_value,
    get_tolerance_table,
)
from .fits import (
    FitType,
    FitClass,
    DeviationSide,
    FundamentalDeviation,
    ToleranceZone,
    FitResult,
    FitDeviations,
    COMMON_FITS,
    parse_tolerance_zone,
    get_shaft_fundamental_deviation,
    get_shaft_limits,
    get_hole_limits,
    classify_fit,
    calculate_fit,
    get_fit_deviations,
    get_common_fits,
)
from .limits import (
    BilateralToleranceResult,
    calculate_bilateral_tolerance,
)
from .surface_finish import (
    RoughnessUnit,
    RoughnessResult,
    SurfaceFinishGrade,
    convert_roughness,
    suggest_surface_finish,
)

__all__ = [
    # IT Grades
    "ITGrade",
    "GRADE_FACTORS",
    "PUBLISHED_TOLERANCES",
    "coerce_it_grade",
    "calculate_it_tolerance",
    "get_tolerance_value",
    "get_tolerance_table",
    # Fits
    "FitType",
    "FitClass",
    "DeviationSide",
    "FundamentalDeviation",
    "ToleranceZone",
    "FitResult",
    "FitDeviations",
    "COMMON_FITS",
    "parse_tolerance_zone",
    "get_shaft_fundamental_deviation",
    "get_shaft_limits",
    "get_hole_limits",
    "classify_fit",
    "calculate_fit",
    "get_fit_deviations",
    "get_common_fits",
    # Limits
    "BilateralToleranceResult",
    "calculate_bilateral_tolerance",
    # Surface finish
    "RoughnessUnit",
    "RoughnessResult",
    "SurfaceFinishGrade",
    "convert_roughness",
    "suggest_surface_finish",
]
