"""
Thread Sizing Module.

Tap drills, thread depth and stress area for unified (inch) and ISO metric
threads, designation parsing, clearance holes, and engagement-length and
torque advisories.

Reference Standards:
- ASME B1.1 - Unified Inch Screw Threads
- ISO 261/262 - ISO general purpose metric screw threads
- ISO 273 - Clearance holes for bolts and screws
"""

from .tap_drill import (
    TapDrillResult,
    ThreadDepthResult,
    calculate_tap_drill,
    calculate_metric_tap_drill,
    calculate_thread_depth,
)
from .unified import (
    ThreadSeries,
    UnifiedThread,
    UNIFIED_THREAD_DATA,
    get_unified_thread,
    find_unified_thread,
)
from .metric import (
    ClearanceFit,
    METRIC_COARSE_DATA,
    get_coarse_pitch,
    get_tap_drill_size,
    get_clearance_hole_size,
)
from .designation import ThreadSpec
from .advisories import (
    JointMaterial,
    BoltGrade,
    EngagementLength,
    TorqueRange,
    TorqueRecommendation,
    calculate_engagement_length,
    calculate_torque_recommendation,
)

__all__ = [
    # Tap drill
    "TapDrillResult",
    "ThreadDepthResult",
    "calculate_tap_drill",
    "calculate_metric_tap_drill",
    "calculate_thread_depth",
    # Unified
    "ThreadSeries",
    "UnifiedThread",
    "UNIFIED_THREAD_DATA",
    "get_unified_thread",
    "find_unified_thread",
    # Metric
    "ClearanceFit",
    "METRIC_COARSE_DATA",
    "get_coarse_pitch",
    "get_tap_drill_size",
    "get_clearance_hole_size",
    # Designation
    "ThreadSpec",
    # Advisories
    "JointMaterial",
    "BoltGrade",
    "EngagementLength",
    "TorqueRange",
    "TorqueRecommendation",
    "calculate_engagement_length",
    "calculate_torque_recommendation",
]
