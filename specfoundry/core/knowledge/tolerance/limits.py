"""Bilateral tolerance limits around a nominal dimension."""

from dataclasses import dataclass
from typing import Optional

from specfoundry.utils.numbers import is_finite, is_positive


@dataclass(frozen=True)
class BilateralToleranceResult:
    max_limit: float
    min_limit: float
    total_tolerance: float
    mid_tolerance: float  # offset of the zone centre from nominal


def calculate_bilateral_tolerance(
    nominal: float, upper_deviation: float, lower_deviation: float
) -> Optional[BilateralToleranceResult]:
    """
    Limits of ``nominal +upper/-lower``; deviations are signed offsets.

    Returns None for a non-positive nominal, a non-finite deviation, or
    ``upper_deviation <= lower_deviation``.
    """
    if not is_positive(nominal) or not is_finite(upper_deviation) or not is_finite(lower_deviation):
        return None
    if upper_deviation <= lower_deviation:
        return None

    max_limit = nominal + upper_deviation
    min_limit = nominal + lower_deviation
    return BilateralToleranceResult(
        max_limit=max_limit,
        min_limit=min_limit,
        total_tolerance=max_limit - min_limit,
        mid_tolerance=(upper_deviation + lower_deviation) / 2,
    )
