"""
Tap drill and thread depth calculations for 60° threads.

Thread height is taken as H = 0.6495·P (P = pitch, or 1/TPI for inch
threads). A tap drill for engagement fraction e removes 2·H·e from the
major diameter.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from specfoundry.core.config import get_settings
from specfoundry.core.errors import ErrorCode
from specfoundry.core.units import UnitSystem, coerce_unit_system
from specfoundry.utils.numbers import is_finite, is_positive

logger = logging.getLogger(__name__)

THREAD_HEIGHT_FACTOR = 0.6495
PITCH_DIAMETER_FACTOR = 0.649519
# Tensile stress area: As = π/4 · (d - k·P)²
STRESS_AREA_FACTOR_INCH = 0.9743
STRESS_AREA_FACTOR_METRIC = 0.9382

CLEARANCE_CLOSE = 1.05
CLEARANCE_STANDARD = 1.10
CLEARANCE_LOOSE = 1.15


@dataclass(frozen=True)
class TapDrillResult:
    tap_drill_diameter: float
    thread_depth: float  # H
    engagement: float  # fraction of full thread


@dataclass(frozen=True)
class ThreadDepthResult:
    thread_height: float
    minor_diameter: float
    pitch_diameter: float
    stress_area: float
    minor_area: float
    pitch_area: float
    clearance_close: float
    clearance_standard: float
    clearance_loose: float


def _reject(reason: str, code: ErrorCode = ErrorCode.DOMAIN_VIOLATION) -> None:
    logger.debug(
        "thread calculation rejected: %s",
        reason,
        extra={"calculator": "threads", "reason": reason, "error_code": code},
    )
    return None


def resolve_engagement(engagement: Optional[float]) -> Optional[float]:
    """Engagement fraction in (0, 1]; None falls back to the configured default."""
    if engagement is None:
        engagement = get_settings().DEFAULT_THREAD_ENGAGEMENT
    if not is_finite(engagement) or not 0 < engagement <= 1:
        return None
    return float(engagement)


def _tap_drill(major_diameter: float, thread_height: float, engagement: Optional[float]) -> Optional[TapDrillResult]:
    fraction = resolve_engagement(engagement)
    if fraction is None:
        return _reject(f"engagement {engagement!r} outside (0, 1]")
    diameter = major_diameter - 2 * thread_height * fraction
    if diameter <= 0:
        return _reject("thread too deep for the major diameter")
    return TapDrillResult(tap_drill_diameter=diameter, thread_depth=thread_height, engagement=fraction)


def calculate_tap_drill(
    major_diameter: float, tpi: float, engagement: Optional[float] = None
) -> Optional[TapDrillResult]:
    """
    Tap drill for a unified (inch) thread.

    Args:
        major_diameter: Major diameter, in
        tpi: Threads per inch
        engagement: Fraction of full thread (default from settings, 0.75)

    Example:
        >>> round(calculate_tap_drill(0.25, 20, 0.75).tap_drill_diameter, 4)
        0.2013
    """
    if not is_positive(major_diameter) or not is_positive(tpi):
        return _reject("major diameter and TPI must be positive", ErrorCode.INCOMPLETE_INPUT)
    return _tap_drill(major_diameter, THREAD_HEIGHT_FACTOR / tpi, engagement)


def calculate_metric_tap_drill(
    major_diameter: float, pitch: float, engagement: Optional[float] = None
) -> Optional[TapDrillResult]:
    """Tap drill for an ISO metric thread; diameter and pitch in mm."""
    if not is_positive(major_diameter) or not is_positive(pitch):
        return _reject("major diameter and pitch must be positive", ErrorCode.INCOMPLETE_INPUT)
    return _tap_drill(major_diameter, THREAD_HEIGHT_FACTOR * pitch, engagement)


def calculate_thread_depth(
    major_diameter: float,
    pitch_or_tpi: float,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> Optional[ThreadDepthResult]:
    """
    Thread geometry, stress area and clearance holes.

    Args:
        major_diameter: Major diameter (in imperial, mm metric)
        pitch_or_tpi: TPI for imperial, pitch in mm for metric
        unit_system: Selects how ``pitch_or_tpi`` is read

    Returns:
        ThreadDepthResult, or None for non-positive input or a pitch so
        coarse the minor diameter vanishes
    """
    if not is_positive(major_diameter) or not is_positive(pitch_or_tpi):
        return _reject("major diameter and pitch must be positive", ErrorCode.INCOMPLETE_INPUT)

    system = coerce_unit_system(unit_system)
    if system is None:
        return _reject("unknown unit system")
    if system == UnitSystem.IMPERIAL:
        pitch = 1 / pitch_or_tpi
        stress_factor = STRESS_AREA_FACTOR_INCH
    else:
        pitch = pitch_or_tpi
        stress_factor = STRESS_AREA_FACTOR_METRIC

    height = THREAD_HEIGHT_FACTOR * pitch
    minor = major_diameter - 2 * height
    stress_diameter = major_diameter - stress_factor * pitch
    if minor <= 0 or stress_diameter <= 0:
        return _reject("pitch too coarse for the major diameter")
    pitch_diameter = major_diameter - PITCH_DIAMETER_FACTOR * pitch

    return ThreadDepthResult(
        thread_height=height,
        minor_diameter=minor,
        pitch_diameter=pitch_diameter,
        stress_area=math.pi / 4 * stress_diameter ** 2,
        minor_area=math.pi / 4 * minor ** 2,
        pitch_area=math.pi / 4 * pitch_diameter ** 2,
        clearance_close=major_diameter * CLEARANCE_CLOSE,
        clearance_standard=major_diameter * CLEARANCE_STANDARD,
        clearance_loose=major_diameter * CLEARANCE_LOOSE,
    )
