"""
Profile kinds and their dimension sets.

Each profile kind maps to a fixed set of required dimension fields. Inputs
arrive on every keystroke, so an incomplete or inconsistent set resolves to
None (logged at DEBUG) rather than raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from specfoundry.core.errors import ErrorCode
from specfoundry.utils.numbers import is_finite, is_positive

logger = logging.getLogger(__name__)


class ProfileKind(str, Enum):
    """Closed set of stock profiles."""

    RECTANGLE = "rectangle"
    ROUND = "round"
    TUBE = "tube"
    SQUARE_TUBE = "square_tube"
    HEX = "hex"
    ANGLE = "angle"  # L-shape
    CHANNEL = "channel"  # C-shape
    IBEAM = "ibeam"
    SHEET = "sheet"


@dataclass(frozen=True)
class Dimensions:
    """Named bag of profile dimensions, all in the same length unit."""

    width: Optional[float] = None
    height: Optional[float] = None
    diameter: Optional[float] = None
    wall_thickness: Optional[float] = None
    flat_to_flat: Optional[float] = None
    leg_width: Optional[float] = None
    leg_height: Optional[float] = None
    leg_thickness: Optional[float] = None
    flange_width: Optional[float] = None
    flange_thickness: Optional[float] = None
    web_height: Optional[float] = None
    web_thickness: Optional[float] = None
    sheet_thickness: Optional[float] = None
    inner_fillet_radius: Optional[float] = None
    outer_fillet_radius: Optional[float] = None

    def scaled(self, factor: float) -> "Dimensions":
        """Copy with every set field multiplied by ``factor``."""
        changes = {
            f.name: getattr(self, f.name) * factor
            for f in fields(self)
            if is_finite(getattr(self, f.name))
        }
        return replace(self, **changes)


REQUIRED_DIMENSIONS: Dict[ProfileKind, Tuple[str, ...]] = {
    ProfileKind.RECTANGLE: ("width", "height"),
    ProfileKind.ROUND: ("diameter",),
    ProfileKind.TUBE: ("diameter", "wall_thickness"),
    ProfileKind.SQUARE_TUBE: ("width", "wall_thickness"),
    ProfileKind.HEX: ("flat_to_flat",),
    ProfileKind.ANGLE: ("leg_width", "leg_height", "leg_thickness"),
    ProfileKind.CHANNEL: ("flange_width", "flange_thickness", "web_height", "web_thickness"),
    ProfileKind.IBEAM: ("flange_width", "flange_thickness", "web_height", "web_thickness"),
    ProfileKind.SHEET: ("width", "sheet_thickness"),
}

FILLETED_KINDS = (ProfileKind.ANGLE, ProfileKind.CHANNEL, ProfileKind.IBEAM)

FILLET_FIELDS = ("inner_fillet_radius", "outer_fillet_radius")


def _reject(kind: ProfileKind, reason: str, code: ErrorCode) -> None:
    logger.debug(
        "profile rejected: %s",
        reason,
        extra={
            "calculator": "geometry",
            "profile_kind": kind.value,
            "reason": reason,
            "error_code": code.value,
        },
    )
    return None


def coerce_profile_kind(kind) -> Optional[ProfileKind]:
    if isinstance(kind, ProfileKind):
        return kind
    try:
        return ProfileKind(str(kind).strip().lower())
    except ValueError:
        return None


def _structural_violation(kind: ProfileKind, d: Dict[str, float]) -> Optional[str]:
    """Return a reason when the dimension set cannot form the profile."""
    if kind == ProfileKind.TUBE:
        if d["wall_thickness"] >= d["diameter"] / 2:
            return "wall thickness must be less than half the outer diameter"
    elif kind == ProfileKind.SQUARE_TUBE:
        if d["wall_thickness"] >= d["width"] / 2:
            return "wall thickness must be less than half the outer size"
    elif kind == ProfileKind.ANGLE:
        t = d["leg_thickness"]
        if t >= d["leg_width"] or t >= d["leg_height"]:
            return "leg thickness must be less than both leg lengths"
        if d["inner_fillet_radius"] > min(d["leg_width"], d["leg_height"]) - t:
            return "inner fillet does not fit between the legs"
        if d["outer_fillet_radius"] > t:
            return "outer fillet larger than leg thickness"
    elif kind in (ProfileKind.CHANNEL, ProfileKind.IBEAM):
        bf, tf = d["flange_width"], d["flange_thickness"]
        h, tw = d["web_height"], d["web_thickness"]
        if tf >= h / 2:
            return "flange thickness must be less than half the depth"
        if tw >= bf / 2:
            return "web thickness must be less than half the flange width"
        clear_depth = (h - 2 * tf) / 2
        if kind == ProfileKind.CHANNEL:
            inner_limit = min(bf - tw, clear_depth)
            outer_limit = min(tw, tf)
        else:
            inner_limit = min((bf - tw) / 2, clear_depth)
            outer_limit = min(tf, bf) / 2
        if d["inner_fillet_radius"] > inner_limit:
            return "inner fillet does not fit between flange and web"
        if d["outer_fillet_radius"] > outer_limit:
            return "outer fillet larger than the flange/web it rounds"
    return None


def resolve_dimensions(kind, dims: Dimensions) -> Optional[Dict[str, float]]:
    """
    Pick and check the dimensions ``kind`` needs.

    Args:
        kind: ProfileKind or its string value
        dims: Caller-supplied dimension set (any unit, consistently)

    Returns:
        Mapping of field name to value (fillet radii default to 0.0), or
        None when a field is missing, non-positive, or the set is
        structurally impossible.
    """
    profile = coerce_profile_kind(kind)
    if profile is None:
        logger.debug("unknown profile kind %r", kind, extra={"calculator": "geometry"})
        return None

    resolved: Dict[str, float] = {}
    for name in REQUIRED_DIMENSIONS[profile]:
        value = getattr(dims, name)
        if value is None:
            return _reject(profile, f"{name} missing", ErrorCode.INCOMPLETE_INPUT)
        if not is_positive(value):
            return _reject(profile, f"{name} must be positive", ErrorCode.DOMAIN_VIOLATION)
        resolved[name] = float(value)

    if profile in FILLETED_KINDS:
        for name in FILLET_FIELDS:
            value = getattr(dims, name)
            if value is None or value == 0:
                resolved[name] = 0.0
            elif not is_positive(value):
                return _reject(profile, f"{name} must be positive", ErrorCode.DOMAIN_VIOLATION)
            else:
                resolved[name] = float(value)

    violation = _structural_violation(profile, resolved)
    if violation:
        return _reject(profile, violation, ErrorCode.DOMAIN_VIOLATION)
    return resolved


__all__ = [
    "ProfileKind",
    "Dimensions",
    "REQUIRED_DIMENSIONS",
    "coerce_profile_kind",
    "resolve_dimensions",
]
