"""
Module: common.numbers

Purpose:
    Rounding helpers shared by the scoring modules. Percentages shown to
    teachers round half up (62.5 -> 63), which Python's built-in round()
    does not do.

Key Functions:
    - round_half_up(): Round a non-negative or negative float half up
    - percentage(): Integer percentage of part over whole, 0 on empty whole

Used By:
    - scoring.aggregator
    - scoring.progress
    - scoring.attendance
    - scoring.summary
"""

from __future__ import annotations

import math

from .thresholds import SCORING_THRESHOLDS


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves towards positive infinity.

    Example:
        >>> round_half_up(62.5)
        63
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """
    Integer percentage of ``part`` over ``whole``.

    Computed with integer arithmetic so that exact halves round up
    without float noise. Returns 0 when ``whole`` is not positive.

    Example:
        >>> percentage(3, 10)
        30
        >>> percentage(1, 8)
        13
        >>> percentage(5, 0)
        0
    """
    if whole <= 0:
        return 0
    scale = SCORING_THRESHOLDS.percentage_scale
    return (2 * part * scale + whole) // (2 * whole)
