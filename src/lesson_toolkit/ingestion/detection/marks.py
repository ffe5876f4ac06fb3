"""
Module: ingestion.detection.marks

Purpose:
    Marks marker detection - finds allocations like "[2 marks]",
    "(1 mark)" or a bare "5 marks" anywhere in a line.

Key Functions:
    - detect_marks_marker(): First marks marker in a line
    - strip_marker(): Remove a detected marker from its line

Key Classes:
    - MarksMarker: Immutable dataclass for a detected allocation

Used By:
    - ingestion.parser: Assigns marks to questions
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Tried in order: bracketed and parenthesised forms take precedence over
# the bare form so that "[2 marks]" is consumed together with its brackets.
# Digit runs are capped at 4; longer runs are never a marks allocation.
MARKS_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\[\s*(\d{1,4})\s*marks?\s*\]", re.IGNORECASE),
    re.compile(r"\(\s*(\d{1,4})\s*marks?\s*\)", re.IGNORECASE),
    re.compile(r"(?<!\d)(\d{1,4})\s*marks?\b", re.IGNORECASE),
)


@dataclass(frozen=True)
class MarksMarker:
    """
    Detected marks allocation.

    Attributes:
        value: Mark value as printed (not yet range-checked).
        span: (start, end) character offsets of the marker in the line.

    Example:
        >>> detect_marks_marker("What is 2+2? [2 marks]")
        MarksMarker(value=2, span=(13, 22))
    """
    value: int
    span: Tuple[int, int]


def detect_marks_marker(line: str) -> Optional[MarksMarker]:
    """
    Find the first marks marker in a line.

    When several forms are present the earliest match of the highest
    priority pattern wins.

    Args:
        line: A single line of extracted text.

    Returns:
        MarksMarker or None.
    """
    for pattern in MARKS_PATTERNS:
        match = pattern.search(line)
        if match:
            return MarksMarker(value=int(match.group(1)), span=match.span())
    return None


def strip_marker(line: str, marker: MarksMarker) -> str:
    """Remove a marker from its line and collapse the whitespace left behind."""
    start, end = marker.span
    return " ".join((line[:start] + " " + line[end:]).split())
