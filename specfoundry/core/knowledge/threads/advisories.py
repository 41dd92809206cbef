"""
Thread engagement length and tightening torque advisories.

These are shop guidance values, not certified data. The torque table
covers grade 5 unified fasteners; everything else falls back to the
short-form torque equation T = K·F·d with a nut factor K = 0.2 and is
flagged approximate.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from specfoundry.core.config import get_settings
from specfoundry.utils.numbers import is_positive

from .tap_drill import STRESS_AREA_FACTOR_INCH
from .unified import GRADE5_TORQUE_DATA, find_unified_thread

logger = logging.getLogger(__name__)


class JointMaterial(str, Enum):
    """Material of the tapped part."""

    STEEL = "steel"
    ALUMINUM = "aluminum"
    CAST_IRON = "cast_iron"
    BRASS = "brass"
    PLASTIC = "plastic"


class BoltGrade(str, Enum):
    """SAE J429 bolt grades."""

    GRADE2 = "grade2"
    GRADE5 = "grade5"
    GRADE8 = "grade8"


# material -> (engagement length as a multiple of diameter, note)
ENGAGEMENT_MULTIPLIERS: Dict[JointMaterial, Tuple[float, str]] = {
    JointMaterial.STEEL: (1.0, "Steel-to-steel provides the best thread engagement"),
    JointMaterial.ALUMINUM: (1.5, "Aluminum needs 50% more engagement than steel"),
    JointMaterial.CAST_IRON: (1.5, "Cast iron is brittle, increase engagement"),
    JointMaterial.BRASS: (1.5, "Softer material, needs more engagement"),
    JointMaterial.PLASTIC: (2.0, "Plastic needs double the engagement of steel"),
}

RECOMMENDED_ENGAGEMENT_FACTOR = 1.25

# Clamp stress used by the fallback, psi
BOLT_STRENGTH_PSI: Dict[BoltGrade, float] = {
    BoltGrade.GRADE2: 33000,
    BoltGrade.GRADE5: 85000,
    BoltGrade.GRADE8: 120000,
}

NUT_FACTOR = 0.2
DRY_RANGE = (0.75, 1.05)
LUBRICATED_FACTOR = 0.8


@dataclass(frozen=True)
class EngagementLength:
    minimum: float
    recommended: float
    multiplier: float
    notes: str


@dataclass(frozen=True)
class TorqueRange:
    min: float
    max: float


@dataclass(frozen=True)
class TorqueRecommendation:
    """Tightening torque in lb-ft."""

    dry: TorqueRange
    lubricated: TorqueRange
    grade: BoltGrade
    source: str  # "table" or "formula"
    approximate: bool


def calculate_engagement_length(
    diameter: float, material: Union[str, JointMaterial] = JointMaterial.STEEL
) -> Optional[EngagementLength]:
    """
    Minimum and recommended length of thread engagement.

    Example:
        >>> calculate_engagement_length(0.5, "aluminum").minimum
        0.75
    """
    if not is_positive(diameter):
        return None
    try:
        joint = JointMaterial(material)
    except ValueError:
        return None

    multiplier, notes = ENGAGEMENT_MULTIPLIERS[joint]
    minimum = diameter * multiplier
    return EngagementLength(
        minimum=minimum,
        recommended=minimum * RECOMMENDED_ENGAGEMENT_FACTOR,
        multiplier=multiplier,
        notes=notes,
    )


def _torque_range(base: float) -> Tuple[TorqueRange, TorqueRange]:
    low, high = DRY_RANGE
    dry = TorqueRange(min=base * low, max=base * high)
    lubricated = TorqueRange(min=dry.min * LUBRICATED_FACTOR, max=dry.max * LUBRICATED_FACTOR)
    return dry, lubricated


def calculate_torque_recommendation(
    diameter: float,
    tpi: float,
    grade: Optional[Union[str, BoltGrade]] = None,
) -> Optional[TorqueRecommendation]:
    """
    Tightening torque for a unified inch bolt.

    Grade 5 sizes in the table return the tabulated range. Otherwise the
    torque is estimated as K·σ·As·d / 12 (lb-ft) with the tensile stress
    area As and flagged approximate.

    Args:
        diameter: Major diameter, in
        tpi: Threads per inch
        grade: Bolt grade (default from settings)
    """
    if not is_positive(diameter) or not is_positive(tpi):
        return None
    try:
        bolt_grade = BoltGrade(grade if grade is not None else get_settings().DEFAULT_BOLT_GRADE)
    except ValueError:
        return None

    thread = find_unified_thread(diameter, tpi)
    if bolt_grade == BoltGrade.GRADE5 and thread is not None and thread.size in GRADE5_TORQUE_DATA:
        (dry_min, dry_max), (lub_min, lub_max) = GRADE5_TORQUE_DATA[thread.size]
        return TorqueRecommendation(
            dry=TorqueRange(min=dry_min, max=dry_max),
            lubricated=TorqueRange(min=lub_min, max=lub_max),
            grade=bolt_grade,
            source="table",
            approximate=False,
        )

    stress_diameter = diameter - STRESS_AREA_FACTOR_INCH / tpi
    if stress_diameter <= 0:
        return None
    stress_area = math.pi / 4 * stress_diameter ** 2
    base = NUT_FACTOR * BOLT_STRENGTH_PSI[bolt_grade] * stress_area * diameter / 12
    logger.debug(
        "torque estimated from formula for %s-%s %s",
        diameter,
        tpi,
        bolt_grade.value,
        extra={"calculator": "threads", "reason": "no table entry"},
    )
    dry, lubricated = _torque_range(base)
    return TorqueRecommendation(
        dry=dry,
        lubricated=lubricated,
        grade=bolt_grade,
        source="formula",
        approximate=True,
    )
