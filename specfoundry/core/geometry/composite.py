"""
Composite cross-sections built from signed sub-areas.

Structural profiles (angle, channel, I-beam) are a short list of
rectangles plus fillet spandrels. Each part carries its own area,
centroid and centroidal second moments; removed material has a negative
sign. ``combine`` reduces the list with the parallel-axis theorem.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

# Centroidal Ix (= Iy) of a quarter disc per r^4
_QUARTER_DISC_I = math.pi / 16 - 4 / (9 * math.pi)


@dataclass(frozen=True)
class SubArea:
    """One signed part of a composite section."""

    area: float
    cx: float
    cy: float
    ixx: float  # about the part's own centroidal x axis
    iyy: float


@dataclass(frozen=True)
class CompositeSection:
    area: float
    cx: float
    cy: float
    ixx: float  # about the composite centroidal x axis
    iyy: float


def rectangle_part(x0: float, y0: float, width: float, height: float, sign: float = 1.0) -> SubArea:
    """Rectangle with lower-left corner at (x0, y0)."""
    return SubArea(
        area=sign * width * height,
        cx=x0 + width / 2,
        cy=y0 + height / 2,
        ixx=sign * width * height ** 3 / 12,
        iyy=sign * height * width ** 3 / 12,
    )


def quarter_disc_part(
    center_x: float, center_y: float, radius: float, sx: int, sy: int, sign: float = 1.0
) -> SubArea:
    """Quarter disc centred at (center_x, center_y) lying in quadrant (sx, sy)."""
    offset = 4 * radius / (3 * math.pi)
    local_i = sign * _QUARTER_DISC_I * radius ** 4
    return SubArea(
        area=sign * math.pi * radius ** 2 / 4,
        cx=center_x + sx * offset,
        cy=center_y + sy * offset,
        ixx=local_i,
        iyy=local_i,
    )


def fillet_parts(
    corner_x: float, corner_y: float, radius: float, sx: int, sy: int, sign: float = 1.0
) -> List[SubArea]:
    """
    Spandrel between a square corner and a tangent quarter arc.

    The square of side ``radius`` grows from the corner in direction
    (sx, sy); the arc is centred at the opposite corner of that square.
    ``sign=+1`` adds the spandrel (inside fillet), ``sign=-1`` removes it
    (rounded outside corner).
    """
    if radius <= 0:
        return []
    x0 = corner_x if sx > 0 else corner_x - radius
    y0 = corner_y if sy > 0 else corner_y - radius
    return [
        rectangle_part(x0, y0, radius, radius, sign),
        quarter_disc_part(
            corner_x + sx * radius, corner_y + sy * radius, radius, -sx, -sy, -sign
        ),
    ]


def combine(parts: Sequence[SubArea]) -> Optional[CompositeSection]:
    """Reduce signed parts to one section about its own centroid."""
    if not parts:
        return None
    areas = np.array([p.area for p in parts], dtype=float)
    xs = np.array([p.cx for p in parts], dtype=float)
    ys = np.array([p.cy for p in parts], dtype=float)
    total = float(areas.sum())
    if total <= 0:
        return None

    cx = float(np.dot(areas, xs) / total)
    cy = float(np.dot(areas, ys) / total)
    ixx = float(sum(p.ixx for p in parts) + np.dot(areas, (ys - cy) ** 2))
    iyy = float(sum(p.iyy for p in parts) + np.dot(areas, (xs - cx) ** 2))
    return CompositeSection(area=total, cx=cx, cy=cy, ixx=ixx, iyy=iyy)


__all__ = [
    "SubArea",
    "CompositeSection",
    "rectangle_part",
    "quarter_disc_part",
    "fillet_parts",
    "combine",
]
