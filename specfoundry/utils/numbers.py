"""Safe numeric parsing helpers shared by the calculators."""

from __future__ import annotations

import math
from typing import Optional, Union

Number = Union[int, float]


def parse_number(value: Union[str, Number, None]) -> Optional[float]:
    """Parse form input to a finite float, or None for blank/garbage."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def is_finite(value: Optional[Number]) -> bool:
    return (
        value is not None
        and not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
    )


def is_positive(value: Optional[Number]) -> bool:
    return is_finite(value) and value > 0


__all__ = ["parse_number", "is_finite", "is_positive"]
