"""
ISO Fit Systems.

Resolves hole-basis fits according to ISO 286-1/286-2: tolerance zone
parsing, shaft fundamental deviations, hole/shaft limit deviations and
clearance classification.

Deviations are in micrometers (µm); limits returned by ``calculate_fit``
are in the caller's length unit (mm metric, inch imperial).

Reference:
- ISO 286-1:2010 Tables 2 and 3 - Fundamental deviations for shafts and holes
- ISO 286-2:2010 - Tables of standard tolerance classes and limit deviations
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from specfoundry.core.errors import ErrorCode
from specfoundry.core.units import UnitSystem, coerce_unit_system, inches_to_mm, mm_to_inches
from specfoundry.utils.numbers import is_positive

from .it_grades import ITGrade, calculate_it_tolerance, coerce_it_grade

logger = logging.getLogger(__name__)


class FitType(str, Enum):
    """Classification of fits by clearance/interference."""

    CLEARANCE = "clearance"
    TRANSITION = "transition"
    INTERFERENCE = "interference"


class FitClass(str, Enum):
    """Common fit classifications."""

    # Clearance fits
    LOOSE_RUNNING = "loose_running"  # H11/c11
    FREE_RUNNING = "free_running"  # H9/d9
    EASY_RUNNING = "easy_running"  # H8/f7
    NORMAL_RUNNING = "normal_running"  # H7/g6
    SLIDING = "sliding"  # H7/h6
    CLOSE_RUNNING = "close_running"  # H8/h7

    # Transition fits
    LOCATION_CLEARANCE = "location_clearance"  # H7/js6
    LOCATION_TRANSITION = "location_transition"  # H7/k6
    LOCATION_INTERFERENCE = "location_interference"  # H7/n6

    # Interference fits
    LIGHT_PRESS = "light_press"  # H7/p6
    MEDIUM_PRESS = "medium_press"  # H7/r6
    HEAVY_PRESS = "heavy_press"  # H7/s6
    FORCE = "force"  # H7/u6


class DeviationSide(str, Enum):
    """Which limit of the tolerance zone the fundamental deviation fixes."""

    UPPER = "upper"  # es, zone lies below it (a..h)
    LOWER = "lower"  # ei, zone lies above it (k..zc)
    SYMMETRIC = "symmetric"  # js, ±IT/2


@dataclass(frozen=True)
class FundamentalDeviation:
    letter: str
    value_um: float
    side: DeviationSide


@dataclass(frozen=True)
class ToleranceZone:
    """Parsed tolerance class such as ``H7`` (hole) or ``g6`` (shaft)."""

    letter: str
    grade: ITGrade
    is_hole: bool

    @property
    def designation(self) -> str:
        return f"{self.letter}{self.grade.value[2:]}"


# Shaft fundamental deviations (µm), ISO 286-1 Tables 2 and 3
# Format: {letter: [(size_upper_bound_mm, deviation_um), ...]}
# Clearance letters store es; the others store ei.

SHAFT_FUNDAMENTAL_DEVIATIONS: Dict[str, List[Tuple[float, float]]] = {
    "c": [
        (3, -60), (6, -70), (10, -80), (18, -95), (30, -110),
        (40, -120), (50, -130), (65, -140), (80, -150), (100, -170),
        (120, -180), (140, -200), (160, -210), (180, -230), (200, -240),
        (225, -260), (250, -280), (280, -300), (315, -330), (355, -360),
        (400, -400), (450, -440), (500, -480),
    ],
    "d": [
        (3, -20), (6, -30), (10, -40), (18, -50), (30, -65),
        (50, -80), (80, -100), (120, -120), (180, -145), (250, -170),
        (315, -190), (400, -210), (500, -230),
    ],
    "e": [
        (3, -14), (6, -20), (10, -25), (18, -32), (30, -40),
        (50, -50), (80, -60), (120, -72), (180, -85), (250, -100),
        (315, -110), (400, -125), (500, -135),
    ],
    "f": [
        (3, -6), (6, -10), (10, -13), (18, -16), (30, -20),
        (50, -25), (80, -30), (120, -36), (180, -43), (250, -50),
        (315, -56), (400, -62), (500, -68),
    ],
    "g": [
        (3, -2), (6, -4), (10, -5), (18, -6), (30, -7),
        (50, -9), (80, -10), (120, -12), (180, -14), (250, -15),
        (315, -17), (400, -18), (500, -20),
    ],
    "h": [(500, 0)],
    # k applies to IT4..IT7 only; other grades take ei = 0
    "k": [
        (3, 0), (6, 1), (10, 1), (18, 1), (30, 2),
        (50, 2), (80, 2), (120, 3), (180, 3), (250, 4),
        (315, 4), (400, 4), (500, 5),
    ],
    "m": [
        (3, 2), (6, 4), (10, 6), (18, 7), (30, 8),
        (50, 9), (80, 11), (120, 13), (180, 15), (250, 17),
        (315, 20), (400, 21), (500, 23),
    ],
    "n": [
        (3, 4), (6, 8), (10, 10), (18, 12), (30, 15),
        (50, 17), (80, 20), (120, 23), (180, 27), (250, 31),
        (315, 34), (400, 37), (500, 40),
    ],
    "p": [
        (3, 6), (6, 12), (10, 15), (18, 18), (30, 22),
        (50, 26), (80, 32), (120, 37), (180, 43), (250, 50),
        (315, 56), (400, 62), (500, 68),
    ],
    "r": [
        (3, 10), (6, 15), (10, 19), (18, 23), (30, 28),
        (50, 34), (65, 41), (80, 43), (100, 51), (120, 54),
        (140, 63), (160, 65), (180, 68), (200, 77), (225, 80),
        (250, 84), (280, 94), (315, 98), (355, 108), (400, 114),
        (450, 126), (500, 132),
    ],
    "s": [
        (3, 14), (6, 19), (10, 23), (18, 28), (30, 35),
        (50, 43), (65, 53), (80, 59), (100, 71), (120, 79),
        (140, 92), (160, 100), (180, 108), (200, 122), (225, 130),
        (250, 140), (280, 158), (315, 170), (355, 190), (400, 208),
        (450, 232), (500, 252),
    ],
    "u": [
        (3, 18), (6, 23), (10, 28), (18, 33), (24, 41),
        (30, 48), (40, 60), (50, 70), (65, 87), (80, 102),
        (100, 124), (120, 144), (140, 170), (160, 190), (180, 210),
        (200, 236), (225, 258), (250, 284), (280, 315), (315, 350),
        (355, 390), (400, 435), (450, 490), (500, 540),
    ],
}

CLEARANCE_SHAFT_LETTERS = ("c", "d", "e", "f", "g", "h")

# Hole letters resolvable for a hole-basis fit; C..G mirror the shaft (EI = -es)
SUPPORTED_HOLE_LETTERS = ("C", "D", "E", "F", "G", "H", "JS")

_ZONE_PATTERN = re.compile(r"^([A-Za-z]{1,2})(01|\d{1,2})$")


# Common standard fits - hole basis system
COMMON_FITS: Dict[str, Dict] = {
    "H11/c11": {
        "hole": ("H", 11),
        "shaft": ("c", 11),
        "type": FitType.CLEARANCE,
        "class": FitClass.LOOSE_RUNNING,
        "name": "Loose running fit",
        "application": "Wide commercial tolerances, pulleys on shafts",
    },
    "H9/d9": {
        "hole": ("H", 9),
        "shaft": ("d", 9),
        "type": FitType.CLEARANCE,
        "class": FitClass.FREE_RUNNING,
        "name": "Free running fit",
        "application": "Large temperature variation, high running speeds",
    },
    "H8/f7": {
        "hole": ("H", 8),
        "shaft": ("f", 7),
        "type": FitType.CLEARANCE,
        "class": FitClass.EASY_RUNNING,
        "name": "Close running fit",
        "application": "Running on accurate machines, moderate speeds",
    },
    "H7/g6": {
        "hole": ("H", 7),
        "shaft": ("g", 6),
        "type": FitType.CLEARANCE,
        "class": FitClass.NORMAL_RUNNING,
        "name": "Sliding fit",
        "application": "Accurate location, parts move and turn freely",
    },
    "H7/h6": {
        "hole": ("H", 7),
        "shaft": ("h", 6),
        "type": FitType.CLEARANCE,
        "class": FitClass.SLIDING,
        "name": "Locational clearance fit",
        "application": "Snug fit for stationary parts, freely assembled",
    },
    "H8/h7": {
        "hole": ("H", 8),
        "shaft": ("h", 7),
        "type": FitType.CLEARANCE,
        "class": FitClass.CLOSE_RUNNING,
        "name": "Locational clearance fit",
        "application": "Accurate location of parts frequently dismantled",
    },
    "H7/js6": {
        "hole": ("H", 7),
        "shaft": ("js", 6),
        "type": FitType.TRANSITION,
        "class": FitClass.LOCATION_CLEARANCE,
        "name": "Locational transition fit",
        "application": "Location fit that can be assembled by hand",
    },
    "H7/k6": {
        "hole": ("H", 7),
        "shaft": ("k", 6),
        "type": FitType.TRANSITION,
        "class": FitClass.LOCATION_TRANSITION,
        "name": "Locational transition fit",
        "application": "Accurate location, compromise between clearance and interference",
    },
    "H7/m6": {
        "hole": ("H", 7),
        "shaft": ("m", 6),
        "type": FitType.TRANSITION,
        "class": FitClass.LOCATION_TRANSITION,
        "name": "Locational transition fit",
        "application": "Gears and couplings needing precise location",
    },
    "H7/n6": {
        "hole": ("H", 7),
        "shaft": ("n", 6),
        "type": FitType.TRANSITION,
        "class": FitClass.LOCATION_INTERFERENCE,
        "name": "Locational transition fit",
        "application": "More accurate location where greater interference is permissible",
    },
    "H7/p6": {
        "hole": ("H", 7),
        "shaft": ("p", 6),
        "type": FitType.INTERFERENCE,
        "class": FitClass.LIGHT_PRESS,
        "name": "Locational interference fit",
        "application": "Rigidity and alignment without special bore pressure",
    },
    "H7/r6": {
        "hole": ("H", 7),
        "shaft": ("r", 6),
        "type": FitType.INTERFERENCE,
        "class": FitClass.MEDIUM_PRESS,
        "name": "Medium drive fit",
        "application": "Ordinary steel parts or shrink fits on light sections",
    },
    "H7/s6": {
        "hole": ("H", 7),
        "shaft": ("s", 6),
        "type": FitType.INTERFERENCE,
        "class": FitClass.HEAVY_PRESS,
        "name": "Medium drive fit",
        "application": "Permanent assembly transmitting torque",
    },
    "H7/u6": {
        "hole": ("H", 7),
        "shaft": ("u", 6),
        "type": FitType.INTERFERENCE,
        "class": FitClass.FORCE,
        "name": "Force fit",
        "application": "Parts highly stressed or shrink fits where heavy pressing is impractical",
    },
}


def _out_of_table(what: str, nominal_size_mm: float) -> None:
    logger.debug(
        "no %s at %s mm",
        what,
        nominal_size_mm,
        extra={
            "calculator": "fits",
            "nominal_size": nominal_size_mm,
            "reason": what,
            "error_code": ErrorCode.OUT_OF_TABLE_RANGE,
        },
    )
    return None


def parse_tolerance_zone(designation: str) -> Optional[ToleranceZone]:
    """
    Parse a tolerance class designation.

    Upper case letters denote holes (``H7``, ``JS8``), lower case shafts
    (``g6``, ``js6``). Mixed case such as ``Js6`` is rejected.
    """
    if not isinstance(designation, str):
        return None
    match = _ZONE_PATTERN.match(designation.strip())
    if match is None:
        return None
    letter, grade_text = match.groups()
    if not (letter.isupper() or letter.islower()):
        return None
    grade = coerce_it_grade(grade_text)
    if grade is None:
        return None
    return ToleranceZone(letter=letter, grade=grade, is_hole=letter.isupper())


def _lookup(table: List[Tuple[float, float]], nominal_size_mm: float) -> Optional[float]:
    for size_upper, deviation in table:
        if nominal_size_mm <= size_upper:
            return deviation
    return None


def get_shaft_fundamental_deviation(
    nominal_size_mm: float,
    letter: str,
    grade: Optional[Union[str, int, ITGrade]] = None,
) -> Optional[FundamentalDeviation]:
    """
    Fundamental deviation of a shaft letter at a nominal size.

    Args:
        nominal_size_mm: Nominal dimension in mm (0 < size <= 500)
        letter: Shaft letter (c d e f g h js k m n p r s u)
        grade: Needed only for ``k``, whose deviation is zero outside IT4..IT7

    Returns:
        FundamentalDeviation, or None for an unknown letter or a size
        outside the table (never extrapolated)
    """
    if not is_positive(nominal_size_mm) or nominal_size_mm > 500:
        return _out_of_table(f"shaft deviation '{letter}'", nominal_size_mm)

    if letter == "js":
        return FundamentalDeviation(letter="js", value_um=0.0, side=DeviationSide.SYMMETRIC)

    table = SHAFT_FUNDAMENTAL_DEVIATIONS.get(letter)
    if table is None:
        return _out_of_table(f"shaft deviation '{letter}'", nominal_size_mm)
    value = _lookup(table, nominal_size_mm)
    if value is None:
        return _out_of_table(f"shaft deviation '{letter}'", nominal_size_mm)

    if letter == "k" and grade is not None:
        it_grade = coerce_it_grade(grade)
        if it_grade is not None and not 4 <= it_grade.number <= 7:
            value = 0.0

    side = DeviationSide.UPPER if letter in CLEARANCE_SHAFT_LETTERS else DeviationSide.LOWER
    return FundamentalDeviation(letter=letter, value_um=float(value), side=side)


def get_shaft_limits(
    nominal_size_mm: float,
    letter: str,
    grade: Union[str, int, ITGrade],
) -> Optional[Tuple[float, float]]:
    """Shaft (upper, lower) deviations es/ei in µm."""
    tolerance = calculate_it_tolerance(nominal_size_mm, grade)
    deviation = get_shaft_fundamental_deviation(nominal_size_mm, letter, grade)
    if tolerance is None or deviation is None:
        return None

    if deviation.side == DeviationSide.SYMMETRIC:
        return tolerance / 2, -tolerance / 2
    if deviation.side == DeviationSide.UPPER:
        return deviation.value_um, deviation.value_um - tolerance
    return deviation.value_um + tolerance, deviation.value_um


def get_hole_limits(
    nominal_size_mm: float,
    letter: str,
    grade: Union[str, int, ITGrade],
) -> Optional[Tuple[float, float]]:
    """
    Hole (upper, lower) deviations ES/EI in µm.

    Supports H (EI = 0), JS (±IT/2) and the clearance letters C..G,
    whose EI mirrors the shaft es.
    """
    if letter not in SUPPORTED_HOLE_LETTERS:
        return _out_of_table(f"hole deviation '{letter}'", nominal_size_mm)
    tolerance = calculate_it_tolerance(nominal_size_mm, grade)
    if tolerance is None:
        return None

    if letter == "H":
        return tolerance, 0.0
    if letter == "JS":
        return tolerance / 2, -tolerance / 2
    shaft = get_shaft_fundamental_deviation(nominal_size_mm, letter.lower())
    if shaft is None:
        return None
    lower = -shaft.value_um
    return lower + tolerance, lower


def _resolve_fit(
    nominal_size_mm: float, hole: str, shaft: str
) -> Optional[Tuple[ToleranceZone, ToleranceZone, Tuple[float, float], Tuple[float, float]]]:
    """Parse both designations and look up their (upper, lower) deviations in µm."""
    hole_zone = parse_tolerance_zone(hole)
    shaft_zone = parse_tolerance_zone(shaft)
    if hole_zone is None or not hole_zone.is_hole or shaft_zone is None or shaft_zone.is_hole:
        logger.debug(
            "unparsable fit designation %s/%s",
            hole,
            shaft,
            extra={
                "calculator": "fits",
                "designation": f"{hole}/{shaft}",
                "error_code": ErrorCode.PARSE_FAILED,
            },
        )
        return None

    hole_limits = get_hole_limits(nominal_size_mm, hole_zone.letter, hole_zone.grade)
    shaft_limits = get_shaft_limits(nominal_size_mm, shaft_zone.letter, shaft_zone.grade)
    if hole_limits is None or shaft_limits is None:
        return None
    return hole_zone, shaft_zone, hole_limits, shaft_limits


def classify_fit(max_clearance: float, min_clearance: float) -> FitType:
    if max_clearance < 0:
        return FitType.INTERFERENCE
    if min_clearance < 0:
        return FitType.TRANSITION
    return FitType.CLEARANCE


@dataclass(frozen=True)
class FitResult:
    """Limits of a hole/shaft pair in the caller's length unit."""

    nominal: float
    hole: str
    shaft: str
    hole_max: float
    hole_min: float
    hole_tolerance: float
    shaft_max: float
    shaft_min: float
    shaft_tolerance: float
    max_clearance: float  # negative means interference
    min_clearance: float
    fit_type: FitType
    unit_system: UnitSystem


def calculate_fit(
    nominal: float,
    hole: str = "H7",
    shaft: str = "g6",
    unit_system: UnitSystem = UnitSystem.METRIC,
) -> Optional[FitResult]:
    """
    Resolve a hole/shaft fit at a nominal size.

    Args:
        nominal: Nominal size in mm (metric) or inches (imperial)
        hole: Hole tolerance class, e.g. "H7"
        shaft: Shaft tolerance class, e.g. "g6"
        unit_system: Unit of ``nominal`` and of the returned limits

    Returns:
        FitResult, or None for a non-positive size, an unparsable or
        unsupported designation, or a size outside the ISO tables

    Example:
        >>> fit = calculate_fit(25, "H7", "g6")
        >>> fit.fit_type
        <FitType.CLEARANCE: 'clearance'>
    """
    if not is_positive(nominal):
        return None
    system = coerce_unit_system(unit_system)
    if system is None:
        logger.debug(
            "unknown unit system %r",
            unit_system,
            extra={
                "calculator": "fits",
                "reason": "unknown unit system",
                "error_code": ErrorCode.DOMAIN_VIOLATION,
            },
        )
        return None
    unit_system = system
    nominal_mm = inches_to_mm(nominal) if unit_system == UnitSystem.IMPERIAL else float(nominal)

    resolved = _resolve_fit(nominal_mm, hole, shaft)
    if resolved is None:
        return None
    hole_zone, shaft_zone, (es_hole, ei_hole), (es_shaft, ei_shaft) = resolved

    def to_unit(value_mm: float) -> float:
        return mm_to_inches(value_mm) if unit_system == UnitSystem.IMPERIAL else value_mm

    max_clearance = to_unit((es_hole - ei_shaft) / 1000)
    min_clearance = to_unit((ei_hole - es_shaft) / 1000)

    return FitResult(
        nominal=nominal,
        hole=hole_zone.designation,
        shaft=shaft_zone.designation,
        hole_max=to_unit(nominal_mm + es_hole / 1000),
        hole_min=to_unit(nominal_mm + ei_hole / 1000),
        hole_tolerance=to_unit((es_hole - ei_hole) / 1000),
        shaft_max=to_unit(nominal_mm + es_shaft / 1000),
        shaft_min=to_unit(nominal_mm + ei_shaft / 1000),
        shaft_tolerance=to_unit((es_shaft - ei_shaft) / 1000),
        max_clearance=max_clearance,
        min_clearance=min_clearance,
        fit_type=classify_fit(max_clearance, min_clearance),
        unit_system=unit_system,
    )


@dataclass
class FitDeviations:
    """Complete deviation data for a fit, in µm."""

    fit_code: str  # e.g., "H7/g6"
    nominal_size_mm: float
    hole_upper_deviation_um: float
    hole_lower_deviation_um: float
    shaft_upper_deviation_um: float
    shaft_lower_deviation_um: float
    max_clearance_um: float  # negative means interference
    min_clearance_um: float
    fit_type: FitType


def get_fit_deviations(
    fit_code: str,
    nominal_size_mm: float,
) -> Optional[FitDeviations]:
    """
    Deviations for a fit code such as "H7/g6".

    Any hole-basis code the resolver supports is accepted, not only the
    entries of COMMON_FITS.

    Example:
        >>> result = get_fit_deviations("H7/g6", 25)
        >>> result.hole_lower_deviation_um
        0.0
    """
    if not isinstance(fit_code, str) or fit_code.count("/") != 1:
        return None
    if not is_positive(nominal_size_mm):
        return None
    hole, shaft = (part.strip() for part in fit_code.split("/"))
    resolved = _resolve_fit(nominal_size_mm, hole, shaft)
    if resolved is None:
        return None
    hole_zone, shaft_zone, (es_hole, ei_hole), (es_shaft, ei_shaft) = resolved

    max_clearance = es_hole - ei_shaft
    min_clearance = ei_hole - es_shaft
    return FitDeviations(
        fit_code=f"{hole_zone.designation}/{shaft_zone.designation}",
        nominal_size_mm=nominal_size_mm,
        hole_upper_deviation_um=es_hole,
        hole_lower_deviation_um=ei_hole,
        shaft_upper_deviation_um=es_shaft,
        shaft_lower_deviation_um=ei_shaft,
        max_clearance_um=max_clearance,
        min_clearance_um=min_clearance,
        fit_type=classify_fit(max_clearance, min_clearance),
    )


def get_common_fits(
    fit_type: Optional[FitType] = None,
) -> Dict[str, Dict]:
    """
    Common standard fits, optionally filtered by type.

    Args:
        fit_type: Optional filter by FitType (CLEARANCE, TRANSITION, INTERFERENCE)

    Returns:
        Dictionary of fit codes and their properties
    """
    if fit_type is None:
        return COMMON_FITS

    return {
        code: data
        for code, data in COMMON_FITS.items()
        if data["type"] == fit_type
    }


__all__ = [
    "FitType",
    "FitClass",
    "DeviationSide",
    "FundamentalDeviation",
    "ToleranceZone",
    "FitResult",
    "FitDeviations",
    "SHAFT_FUNDAMENTAL_DEVIATIONS",
    "COMMON_FITS",
    "parse_tolerance_zone",
    "get_shaft_fundamental_deviation",
    "get_shaft_limits",
    "get_hole_limits",
    "classify_fit",
    "calculate_fit",
    "get_fit_deviations",
    "get_common_fits",
]
