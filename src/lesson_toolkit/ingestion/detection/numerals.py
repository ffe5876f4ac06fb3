"""
Module: ingestion.detection.numerals

Purpose:
    Question start detection - identifies lines that open a new question
    with a leading enumeration marker such as "1." or "12)".

Key Functions:
    - detect_question_start(): Match one line against the start pattern

Key Classes:
    - QuestionStart: Immutable dataclass for a detected question start

Used By:
    - ingestion.parser: Splits text into questions
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# 1-4 digits, then "." or ")", optional whitespace, then the rest of the line
QUESTION_START_RE = re.compile(r"^\s*(\d{1,4})[\.\)]\s*(.*)$")


@dataclass(frozen=True)
class QuestionStart:
    """
    Detected enumeration marker.

    Attributes:
        number: Number printed in the source. Informational only; the
            final question_order never comes from it.
        body: Text after the marker (may be empty).

    Example:
        >>> detect_question_start("3) Define osmosis.")
        QuestionStart(number=3, body='Define osmosis.')
    """
    number: int
    body: str


def detect_question_start(line: str) -> Optional[QuestionStart]:
    """
    Match a line against the question-start pattern.

    Args:
        line: A single line of extracted text.

    Returns:
        QuestionStart if the line opens a question, else None.
    """
    match = QUESTION_START_RE.match(line)
    if not match:
        return None
    return QuestionStart(number=int(match.group(1)), body=match.group(2).strip())


def is_question_start(line: str) -> bool:
    return QUESTION_START_RE.match(line) is not None
