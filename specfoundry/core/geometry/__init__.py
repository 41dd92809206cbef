"""
Shape Geometry Module.

Closed-form cross-section and solid properties for nine stock profiles:
rectangle, round, tube, square tube, hex, angle, channel, I-beam and sheet.
Structural shapes (angle, channel, I-beam) are reduced from rectangle and
fillet sub-areas with the parallel-axis theorem.
"""

from .profiles import (
    ProfileKind,
    Dimensions,
    REQUIRED_DIMENSIONS,
    coerce_profile_kind,
    resolve_dimensions,
)
from .composite import (
    SubArea,
    CompositeSection,
    combine,
)
from .sections import (
    SectionProperties,
    SolidProperties,
    calculate_section_properties,
    calculate_solid_properties,
    calculate_perimeter,
    calculate_volume,
    calculate_surface_area,
)

__all__ = [
    # Profiles
    "ProfileKind",
    "Dimensions",
    "REQUIRED_DIMENSIONS",
    "coerce_profile_kind",
    "resolve_dimensions",
    # Composite
    "SubArea",
    "CompositeSection",
    "combine",
    # Sections
    "SectionProperties",
    "SolidProperties",
    "calculate_section_properties",
    "calculate_solid_properties",
    "calculate_perimeter",
    "calculate_volume",
    "calculate_surface_area",
]
