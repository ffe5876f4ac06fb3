"""
Module: ingestion.utils.text

Purpose:
    Text normalisation for extracted test documents. Turns raw extracted
    text into the non-empty, trimmed lines the parser strategies consume.

Key Functions:
    - split_lines(): Normalise line endings and return non-empty trimmed lines
    - sanitize_line(): Drop answer-line dots and collapse whitespace

Used By:
    - ingestion.parser: Line splitting for every strategy
    - ingestion.utils.pdf: Page text clean-up
"""

from __future__ import annotations

import re
from typing import List

_ANSWER_DOTS_RE = re.compile(r"\.{3,}|_{3,}|\u2026+")
_WHITESPACE_RE = re.compile(r"\s+")
# NBSP variants and zero-width characters seen in PDF text layers
_INVISIBLE_RE = re.compile(r"[\u00A0\u2007\u202F]")
_ZERO_WIDTH_RE = re.compile(r"[\u200B\u200C\u200D\uFEFF]")
# "1...." or "2)____": the enumeration marker survives, the run after it goes
_LEADING_MARKER_RE = re.compile(r"^(\s*\d{1,4}[.)])(?=\.{2,}|_{3,}|\u2026)")


def sanitize_line(line: str) -> str:
    """
    Clean a single line of extracted text.

    Removes sequences of 3 or more dots or underscores (answer lines),
    non-breaking and zero-width characters, and collapses whitespace.
    A leading enumeration marker directly followed by such a run (e.g.
    "1.... Explain") is kept intact.

    Example:
        >>> sanitize_line("Explain osmosis. ..........  [2 marks]")
        'Explain osmosis. [2 marks]'
    """
    line = _ZERO_WIDTH_RE.sub("", line)
    line = _INVISIBLE_RE.sub(" ", line)
    prefix = ""
    match = _LEADING_MARKER_RE.match(line)
    if match:
        prefix, line = match.group(1), line[match.end():].lstrip("._\u2026")
    line = _ANSWER_DOTS_RE.sub(" ", line)
    return _WHITESPACE_RE.sub(" ", f"{prefix} {line}").strip()


def split_lines(text: str) -> List[str]:
    """
    Split text into non-empty trimmed lines.

    Handles \\r\\n and bare \\r line endings.

    Args:
        text: Raw extracted text; empty or None-like values yield [].

    Returns:
        Lines in source order with blank lines removed.
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = (sanitize_line(line) for line in normalized.split("\n"))
    return [line for line in lines if line]
