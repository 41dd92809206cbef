"""Shared outcome codes for rejected calculator input.

Calculators never raise for these; the codes tag debug log records and
validation results so the UI can tell a half-typed form from a bad one.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INCOMPLETE_INPUT = "INCOMPLETE_INPUT"  # Missing or blank field
    DOMAIN_VIOLATION = "DOMAIN_VIOLATION"  # Negative size, wall too thick, bad angle
    OUT_OF_TABLE_RANGE = "OUT_OF_TABLE_RANGE"  # No bracket/grade/letter entry
    PARSE_FAILED = "PARSE_FAILED"  # Text that is not a number or designation


__all__ = ["ErrorCode"]
