"""Thread specs and designation parsing ("1/4-20", "#10-32 UNF", "M10x1.25")."""

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from specfoundry.core.errors import ErrorCode
from specfoundry.core.units import UnitSystem
from specfoundry.utils.numbers import is_positive, parse_number

from .metric import get_coarse_pitch
from .tap_drill import (
    TapDrillResult,
    calculate_metric_tap_drill,
    calculate_tap_drill,
    resolve_engagement,
)
from .unified import UNIFIED_THREAD_DATA, normalize_unified_size, numbered_size_diameter

logger = logging.getLogger(__name__)

_METRIC_PATTERN = re.compile(r"^M(\d+(?:\.\d+)?)(?:[X×](\d+(?:\.\d+)?))?$")
# size is "#10", "1", "1-1/4" or "1/4"; then "-TPI"
_UNIFIED_PATTERN = re.compile(r"^(#\d+|\d+(?:-\d+/\d+)?|\d+/\d+)-(\d+(?:\.\d+)?)$")


@dataclass(frozen=True)
class ThreadSpec:
    """
    One thread: major diameter plus pitch (metric, mm) or TPI (inch).

    ``engagement`` is the fraction of full thread, 0 < engagement <= 1.
    """

    major_diameter: float
    engagement: float
    unit_system: UnitSystem
    pitch: Optional[float] = None
    tpi: Optional[float] = None
    designation: Optional[str] = None

    @property
    def is_metric(self) -> bool:
        return self.unit_system == UnitSystem.METRIC

    @classmethod
    def create(
        cls,
        major_diameter: float,
        pitch: Optional[float] = None,
        tpi: Optional[float] = None,
        engagement: Optional[float] = None,
        designation: Optional[str] = None,
    ) -> Optional["ThreadSpec"]:
        """Checked constructor; exactly one of ``pitch``/``tpi`` must be given."""
        fraction = resolve_engagement(engagement)
        if fraction is None or not is_positive(major_diameter):
            return None
        if (pitch is None) == (tpi is None):
            return None
        step = pitch if pitch is not None else tpi
        if not is_positive(step):
            return None
        return cls(
            major_diameter=float(major_diameter),
            engagement=fraction,
            unit_system=UnitSystem.METRIC if pitch is not None else UnitSystem.IMPERIAL,
            pitch=pitch,
            tpi=tpi,
            designation=designation,
        )

    @classmethod
    def from_designation(cls, text: str, engagement: Optional[float] = None) -> Optional["ThreadSpec"]:
        """
        Parse a thread callout.

        Metric: ``M10`` (coarse pitch from the ISO table) or ``M10x1.25``.
        Unified: ``1/4-20``, ``#10-32``, ``10-32 UNF``, ``1-1/4-7``.

        Example:
            >>> ThreadSpec.from_designation("M10").pitch
            1.5
        """
        if not isinstance(text, str):
            return None
        compact = text.strip().upper().replace(" ", "")

        metric = _METRIC_PATTERN.match(compact)
        if metric:
            major = float(metric.group(1))
            pitch = parse_number(metric.group(2)) if metric.group(2) else get_coarse_pitch(major)
            if pitch is None:
                return _unparsed(text, "no coarse pitch for this size")
            return cls.create(major, pitch=pitch, engagement=engagement, designation=compact)

        size = normalize_unified_size(compact)
        unified = _UNIFIED_PATTERN.match(size)
        if unified is None:
            return _unparsed(text, "not a metric or unified designation")
        size_text, tpi_text = unified.groups()
        if size_text.startswith("#"):
            major = numbered_size_diameter(int(size_text[1:]))
        elif size in UNIFIED_THREAD_DATA:
            major = UNIFIED_THREAD_DATA[size][0]
        else:
            major = float(sum(Fraction(part) for part in size_text.split("-")))
        return cls.create(major, tpi=float(tpi_text), engagement=engagement, designation=size)

    def tap_drill(self) -> Optional[TapDrillResult]:
        """Tap drill in the thread's own unit (in or mm)."""
        if self.is_metric:
            return calculate_metric_tap_drill(self.major_diameter, self.pitch, self.engagement)
        return calculate_tap_drill(self.major_diameter, self.tpi, self.engagement)


def _unparsed(text: str, reason: str) -> None:
    logger.debug(
        "unparsable thread designation %r",
        text,
        extra={
            "calculator": "threads",
            "designation": text,
            "reason": reason,
            "error_code": ErrorCode.PARSE_FAILED,
        },
    )
    return None
