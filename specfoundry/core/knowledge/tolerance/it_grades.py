"""
ISO Tolerance Grades (IT Grades).

Standard tolerance widths according to ISO 286-1. Grades range from IT01
(most precise) to IT18 (least precise).

Two sources are offered:
- ``calculate_it_tolerance``: the ISO formula from the standard tolerance
  unit ``i = 0.45·∛D + 0.001·D`` (sizes up to 500 mm)
- ``get_tolerance_value``: the rounded values of ISO 286-1 Table 1
  (sizes up to 3150 mm)

Reference:
- ISO 286-1:2010 Table 1 - Standard tolerance grades
"""

import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from specfoundry.core.errors import ErrorCode

logger = logging.getLogger(__name__)


class ITGrade(str, Enum):
    """ISO Standard Tolerance Grades."""

    IT01 = "IT01"
    IT0 = "IT0"
    IT1 = "IT1"
    IT2 = "IT2"
    IT3 = "IT3"
    IT4 = "IT4"
    IT5 = "IT5"
    IT6 = "IT6"
    IT7 = "IT7"
    IT8 = "IT8"
    IT9 = "IT9"
    IT10 = "IT10"
    IT11 = "IT11"
    IT12 = "IT12"
    IT13 = "IT13"
    IT14 = "IT14"
    IT15 = "IT15"
    IT16 = "IT16"
    IT17 = "IT17"
    IT18 = "IT18"

    @property
    def number(self) -> float:
        """Numeric rank: IT01 -> -1, IT0 -> 0, IT7 -> 7."""
        return -1 if self is ITGrade.IT01 else int(self.value[2:])


# Basic size ranges in mm (lower exclusive, upper inclusive)
SIZE_RANGES: List[Tuple[float, float]] = [
    (0, 3),
    (3, 6),
    (6, 10),
    (10, 18),
    (18, 30),
    (30, 50),
    (50, 80),
    (80, 120),
    (120, 180),
    (180, 250),
    (250, 315),
    (315, 400),
    (400, 500),
    (500, 630),
    (630, 800),
    (800, 1000),
    (1000, 1250),
    (1250, 1600),
    (1600, 2000),
    (2000, 2500),
    (2500, 3150),
]

# The ISO formula applies up to 500 mm
FORMULA_MAX_SIZE_MM = 500.0

# Multiples of the tolerance unit i for IT5..IT18
GRADE_FACTORS: Dict[ITGrade, float] = {
    ITGrade.IT5: 7,
    ITGrade.IT6: 10,
    ITGrade.IT7: 16,
    ITGrade.IT8: 25,
    ITGrade.IT9: 40,
    ITGrade.IT10: 64,
    ITGrade.IT11: 100,
    ITGrade.IT12: 160,
    ITGrade.IT13: 250,
    ITGrade.IT14: 400,
    ITGrade.IT15: 640,
    ITGrade.IT16: 1000,
    ITGrade.IT17: 1600,
    ITGrade.IT18: 2500,
}

# Linear formulas (a + b·D) for the finest grades
FINE_GRADE_FORMULAS: Dict[ITGrade, Tuple[float, float]] = {
    ITGrade.IT01: (0.3, 0.008),
    ITGrade.IT0: (0.5, 0.012),
    ITGrade.IT1: (0.8, 0.020),
}

# ISO 286-1 Table 1 in µm, one value per SIZE_RANGES bracket
PUBLISHED_TOLERANCES: Dict[ITGrade, Tuple[float, ...]] = {
    ITGrade.IT01: (0.3, 0.4, 0.4, 0.5, 0.6, 0.6, 0.8, 1, 1.2, 2, 2.5, 3, 4, 4.5, 5, 5.5, 6.5, 8, 9, 10.5, 12.5),
    ITGrade.IT0: (0.5, 0.6, 0.6, 0.8, 1, 1, 1.2, 1.5, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 14, 16, 19),
    ITGrade.IT1: (0.8, 1, 1, 1.2, 1.5, 1.5, 2, 2.5, 3.5, 4.5, 6, 7, 8, 9, 10, 11, 13, 15, 18, 21, 25),
    ITGrade.IT2: (1.2, 1.5, 1.5, 2, 2.5, 2.5, 3, 4, 5, 7, 8, 9, 10, 11, 13, 15, 18, 21, 25, 30, 36),
    ITGrade.IT3: (2, 2.5, 2.5, 3, 4, 4, 5, 6, 8, 10, 12, 13, 15, 16, 18, 21, 24, 29, 35, 41, 50),
    ITGrade.IT4: (3, 4, 4, 5, 6, 7, 8, 10, 12, 14, 16, 18, 20, 22, 25, 28, 33, 39, 46, 55, 68),
    ITGrade.IT5: (4, 5, 6, 8, 9, 11, 13, 15, 18, 20, 23, 25, 27, 32, 36, 40, 47, 55, 65, 78, 96),
    ITGrade.IT6: (6, 8, 9, 11, 13, 16, 19, 22, 25, 29, 32, 36, 40, 44, 50, 56, 66, 78, 92, 110, 135),
    ITGrade.IT7: (10, 12, 15, 18, 21, 25, 30, 35, 40, 46, 52, 57, 63, 70, 80, 90, 105, 125, 150, 175, 210),
    ITGrade.IT8: (14, 18, 22, 27, 33, 39, 46, 54, 63, 72, 81, 89, 97, 110, 125, 140, 165, 195, 230, 280, 330),
    ITGrade.IT9: (25, 30, 36, 43, 52, 62, 74, 87, 100, 115, 130, 140, 155, 175, 200, 230, 260, 310, 370, 440, 540),
    ITGrade.IT10: (40, 48, 58, 70, 84, 100, 120, 140, 160, 185, 210, 230, 250, 280, 320, 360, 420, 500, 600, 700, 860),
    ITGrade.IT11: (60, 75, 90, 110, 130, 160, 190, 220, 250, 290, 320, 360, 400, 440, 500, 560, 660, 780, 920, 1100, 1350),
    ITGrade.IT12: (100, 120, 150, 180, 210, 250, 300, 350, 400, 460, 520, 570, 630, 700, 800, 900, 1050, 1250, 1500, 1750, 2100),
    ITGrade.IT13: (140, 180, 220, 270, 330, 390, 460, 540, 630, 720, 810, 890, 970, 1100, 1250, 1400, 1650, 1950, 2300, 2800, 3300),
    ITGrade.IT14: (250, 300, 360, 430, 520, 620, 740, 870, 1000, 1150, 1300, 1400, 1550, 1750, 2000, 2300, 2600, 3100, 3700, 4400, 5400),
    ITGrade.IT15: (400, 480, 580, 700, 840, 1000, 1200, 1400, 1600, 1850, 2100, 2300, 2500, 2800, 3200, 3600, 4200, 5000, 6000, 7000, 8600),
    ITGrade.IT16: (600, 750, 900, 1100, 1300, 1600, 1900, 2200, 2500, 2900, 3200, 3600, 4000, 4400, 5000, 5600, 6600, 7800, 9200, 11000, 13500),
    ITGrade.IT17: (1000, 1200, 1500, 1800, 2100, 2500, 3000, 3500, 4000, 4600, 5200, 5700, 6300, 7000, 8000, 9000, 10500, 12500, 15000, 17500, 21000),
    ITGrade.IT18: (1400, 1800, 2200, 2700, 3300, 3900, 4600, 5400, 6300, 7200, 8100, 8900, 9700, 11000, 12500, 14000, 16500, 19500, 23000, 28000, 33000),
}


def coerce_it_grade(grade: Union[str, int, ITGrade]) -> Optional[ITGrade]:
    """Accept ``ITGrade.IT7``, ``"IT7"``, ``"it7"``, ``"7"`` or ``7``."""
    if isinstance(grade, ITGrade):
        return grade
    if isinstance(grade, bool):
        return None
    text = str(grade).strip().upper()
    if not text.startswith("IT"):
        text = f"IT{text}"
    try:
        return ITGrade(text)
    except ValueError:
        return None


def _get_size_range_index(size_mm: float) -> Optional[int]:
    """Find the bracket holding ``size_mm``; the first bracket includes its lower edge."""
    if not size_mm > 0:
        return None
    for i, (lower, upper) in enumerate(SIZE_RANGES):
        if lower < size_mm <= upper:
            return i
    return None


def bracket_mean_diameter(nominal_size_mm: float) -> Optional[float]:
    """Geometric mean D of the bracket containing the size (formula region only)."""
    if nominal_size_mm is None or not 0 < nominal_size_mm <= FORMULA_MAX_SIZE_MM:
        return None
    lower, upper = SIZE_RANGES[_get_size_range_index(nominal_size_mm)]
    # ISO takes the first bracket as 1..3 mm for the mean
    return math.sqrt(max(lower, 1) * upper)


def tolerance_unit(mean_diameter_mm: float) -> float:
    """Standard tolerance unit i in µm."""
    return 0.45 * mean_diameter_mm ** (1 / 3) + 0.001 * mean_diameter_mm


def calculate_it_tolerance(
    nominal_size_mm: float,
    grade: Union[str, int, ITGrade],
) -> Optional[float]:
    """
    Tolerance width from the ISO formula.

    Args:
        nominal_size_mm: Nominal dimension in millimeters (0 < size <= 500)
        grade: IT grade (e.g., "IT7" or ITGrade.IT7)

    Returns:
        Tolerance width in micrometers (µm), unrounded, or None when the
        size or grade is outside the table

    Example:
        >>> round(calculate_it_tolerance(25, "IT7"), 1)
        20.9
    """
    it_grade = coerce_it_grade(grade)
    mean = bracket_mean_diameter(nominal_size_mm)
    if it_grade is None or mean is None:
        logger.debug(
            "no IT tolerance for %s at %s mm",
            grade,
            nominal_size_mm,
            extra={
                "calculator": "tolerance",
                "nominal_size": nominal_size_mm,
                "error_code": ErrorCode.OUT_OF_TABLE_RANGE,
            },
        )
        return None

    if it_grade in GRADE_FACTORS:
        return GRADE_FACTORS[it_grade] * tolerance_unit(mean)
    if it_grade in FINE_GRADE_FORMULAS:
        a, b = FINE_GRADE_FORMULAS[it_grade]
        return a + b * mean

    # IT2..IT4 step geometrically from IT1 towards IT5
    it1 = calculate_it_tolerance(nominal_size_mm, ITGrade.IT1)
    it5 = calculate_it_tolerance(nominal_size_mm, ITGrade.IT5)
    step = int(it_grade.number) - 1
    return it1 * (it5 / it1) ** (step / 4)


def get_tolerance_value(
    nominal_size_mm: float,
    grade: Union[str, int, ITGrade],
) -> Optional[float]:
    """
    Rounded tolerance from ISO 286-1 Table 1.

    Args:
        nominal_size_mm: Nominal dimension in millimeters (0 < size <= 3150)
        grade: IT grade

    Returns:
        Tolerance value in micrometers (µm), or None if out of range

    Example:
        >>> get_tolerance_value(25, "IT7")
        21
    """
    it_grade = coerce_it_grade(grade)
    range_idx = _get_size_range_index(nominal_size_mm) if nominal_size_mm is not None else None
    if it_grade is None or range_idx is None:
        return None
    return PUBLISHED_TOLERANCES[it_grade][range_idx]


def get_tolerance_table(
    nominal_size_mm: float,
    grades: Optional[List[Union[str, ITGrade]]] = None,
) -> Dict[str, float]:
    """
    Published tolerance values for several grades at one size.

    Args:
        nominal_size_mm: Nominal dimension in millimeters
        grades: Grades to include (default: IT5-IT14)

    Returns:
        Dictionary of {grade: tolerance_um}; grades out of range are omitted
    """
    if grades is None:
        grades = [f"IT{i}" for i in range(5, 15)]

    result = {}
    for grade in grades:
        it_grade = coerce_it_grade(grade)
        value = get_tolerance_value(nominal_size_mm, grade)
        if it_grade is not None and value is not None:
            result[it_grade.value] = value
    return result


__all__ = [
    "ITGrade",
    "SIZE_RANGES",
    "GRADE_FACTORS",
    "PUBLISHED_TOLERANCES",
    "coerce_it_grade",
    "bracket_mean_diameter",
    "tolerance_unit",
    "calculate_it_tolerance",
    "get_tolerance_value",
    "get_tolerance_table",
]
