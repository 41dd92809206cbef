"""
Shop math: bolt circles, sine bar setups and right triangles.

Angles are in degrees. Lengths are unit-agnostic; results share the unit
of the inputs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from specfoundry.core.config import get_settings
from specfoundry.core.errors import ErrorCode
from specfoundry.utils.numbers import is_finite, is_positive

logger = logging.getLogger(__name__)

# Relative tolerance when checking over-determined triangle input
_CONSISTENCY_TOL = 1e-6


def _reject(calculator: str, reason: str, code: ErrorCode = ErrorCode.DOMAIN_VIOLATION) -> None:
    logger.debug(
        "%s rejected: %s",
        calculator,
        reason,
        extra={"calculator": calculator, "reason": reason, "error_code": code},
    )
    return None


# ---------------------------------------------------------------------------
# Bolt circle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BoltHole:
    index: int  # 1-based
    angle: float  # degrees in [0, 360)
    x: float
    y: float


def _hole_count(count) -> Optional[int]:
    if not is_finite(count) or count < 1 or int(count) != count:
        return None
    return int(count)


def calculate_bolt_circle(pcd: float, count: int, start_angle: float = 0.0) -> Optional[List[BoltHole]]:
    """
    Hole centres equally spaced on a pitch circle, centred on the origin.

    Args:
        pcd: Pitch circle diameter
        count: Number of holes (positive integer)
        start_angle: Angle of hole 1, degrees counter-clockwise from +X

    Returns:
        Holes in order, or None for a non-positive diameter or bad count

    Example:
        >>> [h.angle for h in calculate_bolt_circle(4, 4)]
        [0.0, 90.0, 180.0, 270.0]
    """
    holes = _hole_count(count)
    if not is_positive(pcd) or holes is None or not is_finite(start_angle):
        return _reject("bolt_circle", "diameter, count and start angle required")

    angles = np.mod(start_angle + np.arange(holes) * (360.0 / holes), 360.0)
    # np.mod can round a tiny negative up to exactly 360
    angles[angles >= 360.0] = 0.0
    radians = np.deg2rad(angles)
    radius = pcd / 2
    xs = radius * np.cos(radians)
    ys = radius * np.sin(radians)

    return [
        BoltHole(index=i + 1, angle=float(angles[i]), x=float(xs[i]), y=float(ys[i]))
        for i in range(holes)
    ]


def calculate_bolt_circle_chord(pcd: float, count: int) -> Optional[float]:
    """Straight-line distance between adjacent holes."""
    holes = _hole_count(count)
    if not is_positive(pcd) or holes is None or holes < 2:
        return None
    return pcd * math.sin(math.pi / holes)


# ---------------------------------------------------------------------------
# Sine bar
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SineBarResult:
    angle: float
    bar_length: float
    block_height: float  # gauge block stack


def calculate_sine_bar(angle: float, bar_length: Optional[float] = None) -> Optional[SineBarResult]:
    """
    Gauge block height to set ``angle`` on a sine bar.

    ``bar_length`` defaults to the configured bar (5.0). Angles must lie
    strictly between 0 and 90 degrees.
    """
    if bar_length is None:
        bar_length = get_settings().DEFAULT_SINE_BAR_LENGTH
    if not is_finite(angle) or not 0 < angle < 90:
        return _reject("sine_bar", "angle must be between 0 and 90 degrees")
    if not is_positive(bar_length):
        return _reject("sine_bar", "bar length must be positive")

    return SineBarResult(
        angle=angle,
        bar_length=bar_length,
        block_height=bar_length * math.sin(math.radians(angle)),
    )


# ---------------------------------------------------------------------------
# Right triangle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TriangleResult:
    """Right triangle with legs a, b and hypotenuse c; A is opposite a."""

    a: float
    b: float
    c: float
    A: float  # degrees
    B: float
    area: float
    perimeter: float


def _solve(a, b, c, A) -> Optional[Dict[str, float]]:
    """Resolve the remaining sides from the first usable combination."""
    if a is not None and b is not None:
        return {"a": a, "b": b, "c": math.hypot(a, b), "A": math.degrees(math.atan2(a, b))}
    if c is not None and (a is not None or b is not None):
        leg = a if a is not None else b
        if leg >= c:
            return None
        other = math.sqrt(c * c - leg * leg)
        angle = math.degrees(math.asin(leg / c))
        if a is not None:
            return {"a": a, "b": other, "c": c, "A": angle}
        return {"a": other, "b": b, "c": c, "A": 90 - angle}
    if A is None:
        return None

    rad = math.radians(A)
    if a is not None:
        return {"a": a, "b": a / math.tan(rad), "c": a / math.sin(rad), "A": A}
    if b is not None:
        return {"a": b * math.tan(rad), "b": b, "c": b / math.cos(rad), "A": A}
    if c is not None:
        return {"a": c * math.sin(rad), "b": c * math.cos(rad), "c": c, "A": A}
    return None


def solve_right_triangle(
    a: Optional[float] = None,
    b: Optional[float] = None,
    c: Optional[float] = None,
    A: Optional[float] = None,
    B: Optional[float] = None,
) -> Optional[TriangleResult]:
    """
    Solve a right triangle from any two independent values.

    Resolution order: both legs, then hypotenuse and a leg, then one side
    and an acute angle. Extra values must agree with the solution.

    Returns:
        TriangleResult, or None when under-determined (no side, or fewer
        than two values), out of range, or inconsistent

    Example:
        >>> t = solve_right_triangle(a=3, b=4)
        >>> round(t.c, 4), round(t.A, 2), t.area
        (5.0, 36.87, 6.0)
    """
    given = {name: value for name, value in (("a", a), ("b", b), ("c", c), ("A", A), ("B", B)) if value is not None}
    if len(given) < 2:
        return _reject("triangle", "need two values", ErrorCode.INCOMPLETE_INPUT)
    for name in ("a", "b", "c"):
        if name in given and not is_positive(given[name]):
            return _reject("triangle", f"side {name} must be positive")
    for name in ("A", "B"):
        if name in given and (not is_finite(given[name]) or not 0 < given[name] < 90):
            return _reject("triangle", f"angle {name} must be between 0 and 90")
    if A is not None and B is not None and not math.isclose(A + B, 90, rel_tol=_CONSISTENCY_TOL):
        return _reject("triangle", "acute angles must sum to 90")

    angle_a = A if A is not None else (90 - B if B is not None else None)
    solved = _solve(a, b, c, angle_a)
    if solved is None:
        return _reject("triangle", "under-determined or impossible input")
    solved["B"] = 90 - solved["A"]

    for name, value in given.items():
        if not math.isclose(solved[name], value, rel_tol=_CONSISTENCY_TOL):
            return _reject("triangle", f"{name} inconsistent with the other values")

    return TriangleResult(
        a=solved["a"],
        b=solved["b"],
        c=solved["c"],
        A=solved["A"],
        B=solved["B"],
        area=solved["a"] * solved["b"] / 2,
        perimeter=solved["a"] + solved["b"] + solved["c"],
    )
