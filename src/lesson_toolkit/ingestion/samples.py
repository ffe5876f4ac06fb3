"""
Module: ingestion.samples

Purpose:
    Placeholder questions for tests whose text could not be parsed. The
    placeholder is tagged so callers can show a "needs manual editing"
    state until a teacher replaces it.

Key Functions:
    - generate_sample_questions(): Deterministic single placeholder
    - minimum_question(): Hard floor used if generation still yields nothing
    - is_sample_question(): Detect generated placeholder text
"""

from __future__ import annotations

import logging
from typing import List, Union

from lesson_toolkit.core.models.lessons import AssessmentKind
from lesson_toolkit.core.models.questions import ParsedQuestion

logger = logging.getLogger(__name__)

SAMPLE_QUESTION_TAG = "[Sample]"
SAMPLE_QUESTION_MARKS = 1
UNTITLED_TEST = "Untitled test"

SAMPLE_QUESTION_TEMPLATE = (
    "{tag} {kind} question 1 for {title}. "
    "Please edit this question to match your actual test content."
)
MINIMUM_QUESTION_TEMPLATE = (
    "Question 1 for {title}. Please edit this to match your actual test content."
)
_MINIMUM_SUFFIX = MINIMUM_QUESTION_TEMPLATE.split("}. ", 1)[1]


def _title(test_title: str) -> str:
    return (test_title or "").strip() or UNTITLED_TEST


def _kind_label(test_kind: Union[AssessmentKind, str]) -> str:
    if isinstance(test_kind, AssessmentKind):
        return test_kind.value
    return str(test_kind or "test").strip() or "test"


def generate_sample_questions(
    test_title: str,
    test_kind: Union[AssessmentKind, str],
) -> List[ParsedQuestion]:
    """
    Build the placeholder question set for a test.

    Args:
        test_title: Title of the test, embedded in the question text.
        test_kind: pretest / posttest (any string is accepted).

    Returns:
        Exactly one ParsedQuestion tagged with SAMPLE_QUESTION_TAG, 1 mark.

    Example:
        >>> generate_sample_questions("Quiz A", "pretest")
        [ParsedQuestion('[Sample] pretest question 1 for Quiz A. Please edit ...', marks=1)]
    """
    kind = _kind_label(test_kind)
    text = SAMPLE_QUESTION_TEMPLATE.format(
        tag=SAMPLE_QUESTION_TAG, kind=kind, title=_title(test_title)
    )
    logger.info(f"Creating sample question for {kind}: {_title(test_title)}")
    return [ParsedQuestion(text, SAMPLE_QUESTION_MARKS)]


def minimum_question(test_title: str) -> ParsedQuestion:
    """The single question a test falls back to when nothing else exists."""
    return ParsedQuestion(
        MINIMUM_QUESTION_TEMPLATE.format(title=_title(test_title)),
        SAMPLE_QUESTION_MARKS,
    )


def is_sample_question(question_text: str) -> bool:
    """True when text was produced by generate_sample_questions or minimum_question."""
    text = (question_text or "").strip()
    return text.startswith(SAMPLE_QUESTION_TAG) or text.endswith(_MINIMUM_SUFFIX)

