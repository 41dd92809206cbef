"""
Section and solid properties for stock profiles.

All math is unit-agnostic: dimensions and length must share one length
unit, and results come back in that unit (area L², I L⁴, Z L³, volume L³).
Callers working in mm scale with ``Dimensions.scaled`` first if they
want inch results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from specfoundry.core.errors import ErrorCode
from specfoundry.core.geometry.composite import (
    CompositeSection,
    SubArea,
    combine,
    fillet_parts,
    rectangle_part,
)
from specfoundry.core.geometry.profiles import (
    Dimensions,
    ProfileKind,
    coerce_profile_kind,
    resolve_dimensions,
)
from specfoundry.utils.numbers import is_positive

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class SectionProperties:
    area: float
    ixx: float
    iyy: float
    zxx: float
    zyy: float
    rxx: float  # radius of gyration
    ryy: float
    centroid_x: float  # from the lower-left bounding corner
    centroid_y: float


@dataclass(frozen=True)
class SolidProperties:
    volume: float
    surface_area: float
    perimeter: float
    area: float


@dataclass(frozen=True)
class _Outline:
    """Centroidal section plus its bounding box."""

    section: CompositeSection
    bbox_width: float
    bbox_height: float


def _closed(area: float, ixx: float, iyy: float, width: float, height: float) -> _Outline:
    """Doubly symmetric section centred in its bounding box."""
    return _Outline(
        section=CompositeSection(area=area, cx=width / 2, cy=height / 2, ixx=ixx, iyy=iyy),
        bbox_width=width,
        bbox_height=height,
    )


def _fillet_perimeter_delta(radius: float) -> float:
    # A quarter arc replaces two straight segments of length r
    return (math.pi / 2 - 2) * radius


# ---------------------------------------------------------------------------
# Outline builders, one per profile kind
# ---------------------------------------------------------------------------


def _rectangle(d: Dict[str, float]) -> _Outline:
    w, h = d["width"], d["height"]
    return _closed(w * h, w * h ** 3 / 12, h * w ** 3 / 12, w, h)


def _round(d: Dict[str, float]) -> _Outline:
    dia = d["diameter"]
    i = math.pi * dia ** 4 / 64
    return _closed(math.pi * dia ** 2 / 4, i, i, dia, dia)


def _tube(d: Dict[str, float]) -> _Outline:
    outer = d["diameter"]
    inner = outer - 2 * d["wall_thickness"]
    i = math.pi * (outer ** 4 - inner ** 4) / 64
    return _closed(math.pi * (outer ** 2 - inner ** 2) / 4, i, i, outer, outer)


def _square_tube(d: Dict[str, float]) -> _Outline:
    outer = d["width"]
    inner = outer - 2 * d["wall_thickness"]
    i = (outer ** 4 - inner ** 4) / 12
    return _closed(outer ** 2 - inner ** 2, i, i, outer, outer)


def _hex(d: Dict[str, float]) -> _Outline:
    # Flats top and bottom: height is the flat distance, width the corner distance
    flat = d["flat_to_flat"]
    side = flat / SQRT3
    i = (5 * SQRT3 / 16) * side ** 4
    return _closed((3 * SQRT3 / 2) * side ** 2, i, i, 2 * side, flat)


def _sheet(d: Dict[str, float]) -> _Outline:
    w, t = d["width"], d["sheet_thickness"]
    return _closed(w * t, w * t ** 3 / 12, t * w ** 3 / 12, w, t)


def _angle_parts(d: Dict[str, float]) -> List[SubArea]:
    b, h, t = d["leg_width"], d["leg_height"], d["leg_thickness"]
    parts = [
        rectangle_part(0.0, 0.0, b, t),
        rectangle_part(0.0, t, t, h - t),
    ]
    parts += fillet_parts(t, t, d["inner_fillet_radius"], 1, 1, sign=1.0)
    parts += fillet_parts(0.0, 0.0, d["outer_fillet_radius"], 1, 1, sign=-1.0)
    return parts


def _channel_parts(d: Dict[str, float]) -> List[SubArea]:
    bf, tf = d["flange_width"], d["flange_thickness"]
    h, tw = d["web_height"], d["web_thickness"]
    r_in, r_out = d["inner_fillet_radius"], d["outer_fillet_radius"]
    parts = [
        rectangle_part(0.0, 0.0, tw, h),
        rectangle_part(tw, 0.0, bf - tw, tf),
        rectangle_part(tw, h - tf, bf - tw, tf),
    ]
    parts += fillet_parts(tw, tf, r_in, 1, 1, sign=1.0)
    parts += fillet_parts(tw, h - tf, r_in, 1, -1, sign=1.0)
    parts += fillet_parts(0.0, 0.0, r_out, 1, 1, sign=-1.0)
    parts += fillet_parts(0.0, h, r_out, 1, -1, sign=-1.0)
    return parts


def _ibeam_parts(d: Dict[str, float]) -> List[SubArea]:
    bf, tf = d["flange_width"], d["flange_thickness"]
    h, tw = d["web_height"], d["web_thickness"]
    r_in, r_out = d["inner_fillet_radius"], d["outer_fillet_radius"]
    web_left = (bf - tw) / 2
    web_right = web_left + tw
    parts = [
        rectangle_part(0.0, 0.0, bf, tf),
        rectangle_part(0.0, h - tf, bf, tf),
        rectangle_part(web_left, tf, tw, h - 2 * tf),
    ]
    for x, sx in ((web_left, -1), (web_right, 1)):
        parts += fillet_parts(x, tf, r_in, sx, 1, sign=1.0)
        parts += fillet_parts(x, h - tf, r_in, sx, -1, sign=1.0)
    for x, sx in ((0.0, 1), (bf, -1)):
        parts += fillet_parts(x, 0.0, r_out, sx, 1, sign=-1.0)
        parts += fillet_parts(x, h, r_out, sx, -1, sign=-1.0)
    return parts


def _composite(
    parts_for: Callable[[Dict[str, float]], List[SubArea]], width_field: str, height_field: str
) -> Callable[[Dict[str, float]], Optional[_Outline]]:
    def build(d: Dict[str, float]) -> Optional[_Outline]:
        section = combine(parts_for(d))
        if section is None:
            return None
        return _Outline(section=section, bbox_width=d[width_field], bbox_height=d[height_field])

    return build


_OUTLINES: Dict[ProfileKind, Callable[[Dict[str, float]], Optional[_Outline]]] = {
    ProfileKind.RECTANGLE: _rectangle,
    ProfileKind.ROUND: _round,
    ProfileKind.TUBE: _tube,
    ProfileKind.SQUARE_TUBE: _square_tube,
    ProfileKind.HEX: _hex,
    ProfileKind.SHEET: _sheet,
    ProfileKind.ANGLE: _composite(_angle_parts, "leg_width", "leg_height"),
    ProfileKind.CHANNEL: _composite(_channel_parts, "flange_width", "web_height"),
    ProfileKind.IBEAM: _composite(_ibeam_parts, "flange_width", "web_height"),
}


def _perimeter(kind: ProfileKind, d: Dict[str, float]) -> float:
    """Total outline length, inner boundary included for hollow shapes."""
    if kind == ProfileKind.RECTANGLE:
        return 2 * (d["width"] + d["height"])
    if kind == ProfileKind.ROUND:
        return math.pi * d["diameter"]
    if kind == ProfileKind.TUBE:
        inner = d["diameter"] - 2 * d["wall_thickness"]
        return math.pi * (d["diameter"] + inner)
    if kind == ProfileKind.SQUARE_TUBE:
        inner = d["width"] - 2 * d["wall_thickness"]
        return 4 * (d["width"] + inner)
    if kind == ProfileKind.HEX:
        return 6 * d["flat_to_flat"] / SQRT3
    if kind == ProfileKind.SHEET:
        return 2 * (d["width"] + d["sheet_thickness"])

    r_in = _fillet_perimeter_delta(d["inner_fillet_radius"])
    r_out = _fillet_perimeter_delta(d["outer_fillet_radius"])
    if kind == ProfileKind.ANGLE:
        return 2 * (d["leg_width"] + d["leg_height"]) + r_in + r_out
    straight = 2 * d["web_height"] + 4 * d["flange_width"] - 2 * d["web_thickness"]
    if kind == ProfileKind.CHANNEL:
        return straight + 2 * (r_in + r_out)
    return straight + 4 * (r_in + r_out)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_section_properties(kind, dims: Dimensions) -> Optional[SectionProperties]:
    """
    Cross-section properties about the centroidal axes.

    Section moduli use the distance from the centroid to the extreme fibre,
    so asymmetric profiles (angle, channel) report the smaller modulus.

    Returns:
        SectionProperties or None when the dimension set cannot be resolved
    """
    profile = coerce_profile_kind(kind)
    resolved = resolve_dimensions(kind, dims)
    if profile is None or resolved is None:
        return None
    return _section_properties(profile, resolved)


def _section_properties(profile: ProfileKind, resolved: Dict[str, float]) -> Optional[SectionProperties]:
    outline = _OUTLINES[profile](resolved)
    if outline is None:
        logger.debug(
            "composite section has no net area",
            extra={"calculator": "geometry", "profile_kind": profile.value},
        )
        return None

    s = outline.section
    c_y = max(s.cy, outline.bbox_height - s.cy)
    c_x = max(s.cx, outline.bbox_width - s.cx)
    return SectionProperties(
        area=s.area,
        ixx=s.ixx,
        iyy=s.iyy,
        zxx=s.ixx / c_y,
        zyy=s.iyy / c_x,
        rxx=math.sqrt(s.ixx / s.area),
        ryy=math.sqrt(s.iyy / s.area),
        centroid_x=s.cx,
        centroid_y=s.cy,
    )


def calculate_perimeter(kind, dims: Dimensions) -> Optional[float]:
    profile = coerce_profile_kind(kind)
    resolved = resolve_dimensions(kind, dims)
    if profile is None or resolved is None:
        return None
    return _perimeter(profile, resolved)


def calculate_solid_properties(kind, dims: Dimensions, length: float) -> Optional[SolidProperties]:
    """Volume and surface area of a bar of ``length``; end caps included."""
    if not is_positive(length):
        logger.debug(
            "length must be positive",
            extra={
                "calculator": "geometry",
                "reason": "non-positive length",
                "error_code": ErrorCode.DOMAIN_VIOLATION,
            },
        )
        return None
    profile = coerce_profile_kind(kind)
    resolved = resolve_dimensions(kind, dims)
    if profile is None or resolved is None:
        return None
    section = _section_properties(profile, resolved)
    if section is None:
        return None
    perimeter = _perimeter(profile, resolved)
    return SolidProperties(
        volume=section.area * length,
        surface_area=perimeter * length + 2 * section.area,
        perimeter=perimeter,
        area=section.area,
    )


def calculate_volume(kind, dims: Dimensions, length: float) -> Optional[float]:
    solid = calculate_solid_properties(kind, dims, length)
    return solid.volume if solid else None


def calculate_surface_area(kind, dims: Dimensions, length: float) -> Optional[float]:
    solid = calculate_solid_properties(kind, dims, length)
    return solid.surface_area if solid else None


__all__ = [
    "SectionProperties",
    "SolidProperties",
    "calculate_section_properties",
    "calculate_solid_properties",
    "calculate_perimeter",
    "calculate_volume",
    "calculate_surface_area",
]
