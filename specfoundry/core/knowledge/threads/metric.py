"""
ISO Metric Threads.

Coarse pitch series with recommended tap drills, and ISO 273 clearance
holes for bolts and screws.

Reference:
- ISO 261:1998 - ISO general purpose metric screw threads - General plan
- ISO 262:1998 - Selected sizes for screws, bolts and nuts
- ISO 273:1979 - Clearance holes for bolts and screws
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from specfoundry.utils.numbers import is_positive


# ISO metric coarse series: nominal d (mm) -> (pitch, recommended tap drill)
METRIC_COARSE_DATA: Dict[float, Tuple[float, float]] = {
    1.0: (0.25, 0.75),
    1.2: (0.25, 0.95),
    1.4: (0.3, 1.1),
    1.6: (0.35, 1.25),
    1.8: (0.35, 1.45),
    2.0: (0.4, 1.6),
    2.5: (0.45, 2.05),
    3.0: (0.5, 2.5),
    3.5: (0.6, 2.9),
    4.0: (0.7, 3.3),
    5.0: (0.8, 4.2),
    6.0: (1.0, 5.0),
    8.0: (1.25, 6.8),
    10.0: (1.5, 8.5),
    12.0: (1.75, 10.2),
    14.0: (2.0, 12.0),
    16.0: (2.0, 14.0),
    18.0: (2.5, 15.5),
    20.0: (2.5, 17.5),
    22.0: (2.5, 19.5),
    24.0: (3.0, 21.0),
    27.0: (3.0, 24.0),
    30.0: (3.5, 26.5),
    33.0: (3.5, 29.5),
    36.0: (4.0, 32.0),
    42.0: (4.5, 37.5),
    48.0: (5.0, 43.0),
    56.0: (5.5, 50.5),
    64.0: (6.0, 58.0),
}


class ClearanceFit(str, Enum):
    """ISO 273 clearance hole series."""

    CLOSE = "close"  # fine
    MEDIUM = "medium"
    FREE = "free"  # coarse


# nominal d (mm) -> (close, medium, free) hole diameter, mm
CLEARANCE_HOLES: Dict[float, Tuple[float, float, float]] = {
    1.6: (1.7, 1.8, 2.0),
    2.0: (2.2, 2.4, 2.6),
    2.5: (2.7, 2.9, 3.1),
    3.0: (3.2, 3.4, 3.6),
    4.0: (4.3, 4.5, 4.8),
    5.0: (5.3, 5.5, 5.8),
    6.0: (6.4, 6.6, 7.0),
    8.0: (8.4, 9.0, 10.0),
    10.0: (10.5, 11.0, 12.0),
    12.0: (13.0, 13.5, 14.5),
    14.0: (15.0, 15.5, 16.5),
    16.0: (17.0, 17.5, 18.5),
    18.0: (19.0, 20.0, 21.0),
    20.0: (21.0, 22.0, 24.0),
    22.0: (23.0, 24.0, 26.0),
    24.0: (25.0, 26.0, 28.0),
    27.0: (28.0, 30.0, 32.0),
    30.0: (31.0, 33.0, 35.0),
    33.0: (34.0, 36.0, 38.0),
    36.0: (37.0, 39.0, 42.0),
}

_FIT_COLUMN = {ClearanceFit.CLOSE: 0, ClearanceFit.MEDIUM: 1, ClearanceFit.FREE: 2}


def get_coarse_pitch(nominal_diameter_mm: float) -> Optional[float]:
    """Coarse series pitch for a nominal diameter, or None if not a standard size."""
    data = METRIC_COARSE_DATA.get(float(nominal_diameter_mm)) if is_positive(nominal_diameter_mm) else None
    return data[0] if data else None


def get_tap_drill_size(nominal_diameter_mm: float) -> Optional[float]:
    """
    Recommended tap drill for a coarse thread.

    Example:
        >>> get_tap_drill_size(10)
        8.5
    """
    data = METRIC_COARSE_DATA.get(float(nominal_diameter_mm)) if is_positive(nominal_diameter_mm) else None
    return data[1] if data else None


def get_clearance_hole_size(
    nominal_diameter_mm: float,
    fit: Union[str, ClearanceFit] = ClearanceFit.MEDIUM,
) -> Optional[float]:
    """
    ISO 273 clearance hole diameter for a bolt/screw.

    Non-standard diameters take the hole of the next larger standard size.

    Args:
        nominal_diameter_mm: Bolt nominal diameter
        fit: "close", "medium", or "free"

    Returns:
        Clearance hole diameter in mm, or None beyond M36
    """
    if not is_positive(nominal_diameter_mm):
        return None
    try:
        column = _FIT_COLUMN[ClearanceFit(fit)]
    except ValueError:
        return None

    for std_d, holes in sorted(CLEARANCE_HOLES.items()):
        if std_d >= nominal_diameter_mm:
            return holes[column]
    return None
