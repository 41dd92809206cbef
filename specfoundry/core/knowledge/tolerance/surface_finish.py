"""
Surface roughness conversion and ISO 1302 N-grades.

µm and µin convert exactly (1 µm = 39.37 µin). The RMS (Rq) and Rz values
are shop rules of thumb, not conversions: the real ratio depends on the
profile shape. Treat them as advisory.

Reference:
- ISO 1302:2002 - Indication of surface texture
- ASME B46.1 - Surface texture
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from specfoundry.utils.numbers import is_positive

MICROINCHES_PER_MICROMETER = 39.37

# Advisory ratios against Ra
RMS_PER_RA = 1.11
RZ_PER_RA = 4.0


class RoughnessUnit(str, Enum):
    MICROMETERS = "micrometers"
    MICROINCHES = "microinches"


class SurfaceFinishGrade(str, Enum):
    """ISO 1302 roughness grade numbers."""

    N1 = "N1"  # Ra 0.025 µm - Mirror finish
    N2 = "N2"  # Ra 0.05 µm
    N3 = "N3"  # Ra 0.1 µm - Super finish
    N4 = "N4"  # Ra 0.2 µm - Lapping
    N5 = "N5"  # Ra 0.4 µm - Honing
    N6 = "N6"  # Ra 0.8 µm - Fine grinding
    N7 = "N7"  # Ra 1.6 µm - Grinding
    N8 = "N8"  # Ra 3.2 µm - Fine turning/milling
    N9 = "N9"  # Ra 6.3 µm - Turning/milling
    N10 = "N10"  # Ra 12.5 µm - Rough machining
    N11 = "N11"  # Ra 25 µm - Coarse machining
    N12 = "N12"  # Ra 50 µm - Very coarse


# Grade -> (Ra µm, typical process)
SURFACE_FINISH_TABLE: Dict[SurfaceFinishGrade, Tuple[float, str]] = {
    SurfaceFinishGrade.N1: (0.025, "Super-finishing, lapping"),
    SurfaceFinishGrade.N2: (0.05, "Precision lapping"),
    SurfaceFinishGrade.N3: (0.1, "Lapping, honing"),
    SurfaceFinishGrade.N4: (0.2, "Precision honing"),
    SurfaceFinishGrade.N5: (0.4, "Honing, precision grinding"),
    SurfaceFinishGrade.N6: (0.8, "Fine grinding"),
    SurfaceFinishGrade.N7: (1.6, "Grinding, fine turning"),
    SurfaceFinishGrade.N8: (3.2, "Fine turning, fine milling"),
    SurfaceFinishGrade.N9: (6.3, "Turning, milling"),
    SurfaceFinishGrade.N10: (12.5, "Rough turning, rough milling"),
    SurfaceFinishGrade.N11: (25, "Rough machining"),
    SurfaceFinishGrade.N12: (50, "Saw cut, as-cast, as-forged"),
}


@dataclass(frozen=True)
class RoughnessResult:
    micrometers: float  # Ra
    microinches: float  # Ra
    rms: float  # approximate Rq, µm
    rz: float  # approximate Rz, µm
    grade: SurfaceFinishGrade  # nearest N-grade


def suggest_surface_finish(target_ra: float) -> SurfaceFinishGrade:
    """
    Closest standard grade for a target Ra.

    Args:
        target_ra: Target Ra value in micrometers
    """
    closest_grade = SurfaceFinishGrade.N12
    closest_diff = float("inf")

    for grade, (ra, _) in SURFACE_FINISH_TABLE.items():
        diff = abs(ra - target_ra)
        if diff < closest_diff:
            closest_diff = diff
            closest_grade = grade

    return closest_grade


def convert_roughness(
    value: float, from_unit: RoughnessUnit = RoughnessUnit.MICROMETERS
) -> Optional[RoughnessResult]:
    """
    Express an Ra value in both units plus advisory RMS/Rz estimates.

    Returns None for a non-positive value or an unknown unit.
    """
    if not is_positive(value):
        return None
    try:
        unit = RoughnessUnit(from_unit)
    except ValueError:
        return None

    if unit == RoughnessUnit.MICROMETERS:
        micrometers = float(value)
        microinches = value * MICROINCHES_PER_MICROMETER
    else:
        micrometers = value / MICROINCHES_PER_MICROMETER
        microinches = float(value)

    return RoughnessResult(
        micrometers=micrometers,
        microinches=microinches,
        rms=micrometers * RMS_PER_RA,
        rz=micrometers * RZ_PER_RA,
        grade=suggest_surface_finish(micrometers),
    )
