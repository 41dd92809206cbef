"""
Unified Inch Screw Threads (UNC/UNF/UNEF).

Sizes, major diameters and threads per inch per ASME B1.1, plus a
grade 5 tightening torque table used by the torque advisory.

Reference:
- ASME B1.1-2019 - Unified Inch Screw Threads
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class ThreadSeries(str, Enum):
    """Unified thread pitch series."""

    UNC = "UNC"  # coarse
    UNF = "UNF"  # fine
    UNEF = "UNEF"  # extra fine


@dataclass(frozen=True)
class UnifiedThread:
    size: str  # e.g. "1/4-20", "#10-32"
    major_diameter: float  # in
    tpi: float
    series: ThreadSeries


# size: (major diameter in, TPI, series)
UNIFIED_THREAD_DATA: Dict[str, Tuple[float, float, ThreadSeries]] = {
    "#0-80": (0.0600, 80, ThreadSeries.UNF),
    "#1-64": (0.0730, 64, ThreadSeries.UNC),
    "#2-56": (0.0860, 56, ThreadSeries.UNC),
    "#3-48": (0.0990, 48, ThreadSeries.UNC),
    "#4-40": (0.1120, 40, ThreadSeries.UNC),
    "#5-40": (0.1250, 40, ThreadSeries.UNC),
    "#6-32": (0.1380, 32, ThreadSeries.UNC),
    "#8-32": (0.1640, 32, ThreadSeries.UNC),
    "#10-24": (0.1900, 24, ThreadSeries.UNC),
    "#10-32": (0.1900, 32, ThreadSeries.UNF),
    "#12-24": (0.2160, 24, ThreadSeries.UNC),
    "#12-32": (0.2160, 32, ThreadSeries.UNEF),
    "1/4-20": (0.2500, 20, ThreadSeries.UNC),
    "1/4-28": (0.2500, 28, ThreadSeries.UNF),
    "1/4-32": (0.2500, 32, ThreadSeries.UNEF),
    "5/16-18": (0.3125, 18, ThreadSeries.UNC),
    "5/16-24": (0.3125, 24, ThreadSeries.UNF),
    "5/16-32": (0.3125, 32, ThreadSeries.UNEF),
    "3/8-16": (0.3750, 16, ThreadSeries.UNC),
    "3/8-24": (0.3750, 24, ThreadSeries.UNF),
    "3/8-32": (0.3750, 32, ThreadSeries.UNEF),
    "7/16-14": (0.4375, 14, ThreadSeries.UNC),
    "7/16-20": (0.4375, 20, ThreadSeries.UNF),
    "7/16-28": (0.4375, 28, ThreadSeries.UNEF),
    "1/2-13": (0.5000, 13, ThreadSeries.UNC),
    "1/2-20": (0.5000, 20, ThreadSeries.UNF),
    "1/2-28": (0.5000, 28, ThreadSeries.UNEF),
    "9/16-12": (0.5625, 12, ThreadSeries.UNC),
    "9/16-18": (0.5625, 18, ThreadSeries.UNF),
    "5/8-11": (0.6250, 11, ThreadSeries.UNC),
    "5/8-18": (0.6250, 18, ThreadSeries.UNF),
    "3/4-10": (0.7500, 10, ThreadSeries.UNC),
    "3/4-16": (0.7500, 16, ThreadSeries.UNF),
    "7/8-9": (0.8750, 9, ThreadSeries.UNC),
    "1-8": (1.0000, 8, ThreadSeries.UNC),
    "1-12": (1.0000, 12, ThreadSeries.UNF),
}

# Grade 5 tightening torque, lb-ft: size -> ((dry min, dry max), (lubricated min, lubricated max))
GRADE5_TORQUE_DATA: Dict[str, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    "#4-40": ((0.6, 0.9), (0.5, 0.7)),
    "#5-40": ((0.8, 1.2), (0.6, 1.0)),
    "#6-32": ((1.0, 1.5), (0.8, 1.2)),
    "#8-32": ((1.8, 2.5), (1.4, 2.0)),
    "#10-24": ((2.5, 3.5), (2.0, 2.8)),
    "#10-32": ((2.8, 3.8), (2.2, 3.0)),
    "#12-24": ((3.5, 5.0), (2.8, 4.0)),
    "1/4-20": ((6, 9), (5, 7)),
    "1/4-28": ((7, 10), (5.5, 8)),
    "1/4-32": ((8, 11), (6.5, 9)),
    "5/16-18": ((13, 19), (10, 15)),
    "5/16-24": ((15, 21), (12, 17)),
    "5/16-32": ((16, 22), (13, 18)),
    "3/8-16": ((23, 33), (18, 27)),
    "3/8-24": ((27, 37), (21, 30)),
    "3/8-32": ((30, 40), (24, 32)),
    "7/16-14": ((40, 55), (32, 44)),
    "7/16-20": ((45, 60), (36, 48)),
    "7/16-28": ((50, 65), (40, 52)),
    "1/2-13": ((75, 105), (60, 85)),
    "1/2-20": ((85, 120), (68, 96)),
    "1/2-28": ((95, 130), (76, 104)),
    "9/16-12": ((110, 155), (88, 125)),
    "9/16-18": ((125, 175), (100, 140)),
    "5/8-11": ((150, 210), (120, 170)),
    "5/8-18": ((170, 240), (136, 192)),
    "3/4-10": ((280, 395), (225, 315)),
    "3/4-16": ((315, 440), (250, 350)),
    "7/8-9": ((480, 675), (385, 540)),
    "1-8": ((750, 1050), (600, 840)),
    "1-12": ((850, 1200), (680, 960)),
}


def numbered_size_diameter(gauge: int) -> float:
    """Major diameter of a numbered machine screw size (#0..#12)."""
    return 0.060 + 0.013 * gauge


def normalize_unified_size(designation: str) -> str:
    """``"10-32 UNF"`` -> ``"#10-32"``; ``"1/4 - 20"`` -> ``"1/4-20"``."""
    text = designation.strip().upper().replace(" ", "")
    for series in ThreadSeries:
        if text.endswith(series.value):
            text = text[: -len(series.value)]
            break
    if not text.startswith("#") and f"#{text}" in UNIFIED_THREAD_DATA:
        text = f"#{text}"
    return text


def get_unified_thread(designation: str) -> Optional[UnifiedThread]:
    """
    Look up a unified thread by size designation.

    Example:
        >>> get_unified_thread("1/4-20").series
        <ThreadSeries.UNC: 'UNC'>
    """
    if not isinstance(designation, str):
        return None
    size = normalize_unified_size(designation)
    data = UNIFIED_THREAD_DATA.get(size)
    if data is None:
        return None
    major, tpi, series = data
    return UnifiedThread(size=size, major_diameter=major, tpi=tpi, series=series)


def find_unified_thread(major_diameter: float, tpi: float) -> Optional[UnifiedThread]:
    """Match a (diameter, TPI) pair against the table."""
    for size, (major, table_tpi, series) in UNIFIED_THREAD_DATA.items():
        if abs(major - major_diameter) < 1e-4 and abs(table_tpi - tpi) < 1e-6:
            return UnifiedThread(size=size, major_diameter=major, tpi=table_tpi, series=series)
    return None
