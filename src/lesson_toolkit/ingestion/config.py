"""
Module: ingestion.config

Purpose:
    Configuration dataclass for question ingestion. Immutable settings
    for the marks range, lookahead and loose-mode line length.

Key Classes:
    - IngestionConfig: Settings shared by parser strategies and pipeline

Dependencies:
    - dataclasses: For frozen dataclass support
    - lesson_toolkit.common.thresholds: Default values

Used By:
    - ingestion.parser: Marks range, lookahead and loose line length
    - ingestion.pipeline: Passed through to the strategy chain
"""

from __future__ import annotations

from dataclasses import dataclass

from lesson_toolkit.common.thresholds import PARSING_THRESHOLDS


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for turning extracted text into questions.

    Attributes:
        min_marks: Smallest accepted parsed mark value (default 1)
        max_marks: Largest accepted parsed mark value (default and ceiling 100)
        default_marks: Marks used when no valid marker is found (default 1)
        marks_lookahead_lines: Lines after a question start searched for a
            marks marker when the start line has none (default 2)
        loose_min_line_length: Loose mode keeps lines longer than this (default 5)
        strip_marks_markers: Remove the marker that supplied a question's
            marks from its text (default True)
    """
    min_marks: int = PARSING_THRESHOLDS.min_marks
    max_marks: int = PARSING_THRESHOLDS.max_marks
    default_marks: int = PARSING_THRESHOLDS.default_marks
    marks_lookahead_lines: int = PARSING_THRESHOLDS.marks_lookahead_lines
    loose_min_line_length: int = PARSING_THRESHOLDS.loose_min_line_length
    strip_marks_markers: bool = True

    def __post_init__(self) -> None:
        if self.min_marks < 1:
            raise ValueError(f"min_marks must be positive: {self.min_marks}")
        if self.max_marks < self.min_marks:
            raise ValueError(
                f"max_marks ({self.max_marks}) must be >= min_marks ({self.min_marks})"
            )
        if self.max_marks > PARSING_THRESHOLDS.max_marks:
            raise ValueError(
                f"max_marks cannot exceed {PARSING_THRESHOLDS.max_marks}: {self.max_marks}"
            )
        if not (self.min_marks <= self.default_marks <= self.max_marks):
            raise ValueError(f"default_marks must lie in the marks range: {self.default_marks}")
        if self.marks_lookahead_lines < 0:
            raise ValueError(f"marks_lookahead_lines must be non-negative: {self.marks_lookahead_lines}")
        if self.loose_min_line_length < 0:
            raise ValueError(f"loose_min_line_length must be non-negative: {self.loose_min_line_length}")

    def accepts_marks(self, value: int) -> bool:
        """True when a parsed mark value lies inside the accepted range."""
        return self.min_marks <= value <= self.max_marks
