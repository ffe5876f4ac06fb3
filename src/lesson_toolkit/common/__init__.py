"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .numbers import percentage, round_half_up
from .thresholds import (
    PARSING_THRESHOLDS,
    SCORING_THRESHOLDS,
    ParsingThresholds,
    ScoringThresholds,
)

__all__ = [
    # numbers
    "percentage",
    "round_half_up",
    # thresholds
    "PARSING_THRESHOLDS",
    "SCORING_THRESHOLDS",
    "ParsingThresholds",
    "ScoringThresholds",
]
