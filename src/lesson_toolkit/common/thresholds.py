"""Centralized threshold and magic number configuration.

This module contains the numeric limits used by question parsing and
scoring. Having these in one place keeps the parser, the validators and
the config defaults in agreement.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParsingThresholds:
    """Thresholds for turning extracted text into questions."""

    min_marks: int = 1  # Smallest mark value accepted from a marks marker
    max_marks: int = 100  # Largest mark value accepted from a marks marker
    default_marks: int = 1  # Used when no valid marker is found
    marks_lookahead_lines: int = 2  # Extra lines searched after a question opens
    loose_min_line_length: int = 5  # Loose mode: lines must be longer than this


@dataclass
class ScoringThresholds:
    """Limits applied at the score input boundary."""

    min_scored_marks: int = 0
    percentage_scale: int = 100


PARSING_THRESHOLDS = ParsingThresholds()
SCORING_THRESHOLDS = ScoringThresholds()
