"""
Module: ingestion.parser

Purpose:
    Heuristic question parsing. Converts unstructured extracted text into
    an ordered list of ParsedQuestion using a chain of strategies, each
    returning either a non-empty list or "no match".

Key Functions:
    - parse_enumerated(): Strict pass driven by "1." / "1)" markers
    - parse_loose_lines(): Coarse pass, one question per long line
    - run_strategies(): Try strategies in order, stop at the first hit
    - parse_questions(): Default chain, returns the questions only

Key Classes:
    - ParseOutcome: Questions plus the name of the strategy that found them

Dependencies:
    - lesson_toolkit.ingestion.detection: Start and marks detection
    - lesson_toolkit.ingestion.utils.text: Line splitting

Used By:
    - ingestion.pipeline: First stage of the ingestion fallback chain
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from lesson_toolkit.core.models.questions import ParsedQuestion
from .config import IngestionConfig
from .detection.marks import MarksMarker, detect_marks_marker, strip_marker
from .detection.numerals import QuestionStart, detect_question_start, is_question_start
from .utils.text import split_lines

logger = logging.getLogger(__name__)

# (text, config) -> questions; an empty list means "no match"
ParseStrategy = Callable[[str, Optional[IngestionConfig]], List[ParsedQuestion]]


@dataclass
class _PendingQuestion:
    """Question being accumulated while lines are scanned."""
    parts: List[str] = field(default_factory=list)
    marks: int = 1
    marks_line: Optional[int] = None  # index of the line that supplied marks
    marker_text: str = ""  # text the supplying marker was stripped from


def _discover_marks(
    index: int,
    starts: Sequence[Optional[QuestionStart]],
    markers: Sequence[Optional[MarksMarker]],
    config: IngestionConfig,
) -> Tuple[int, Optional[int]]:
    """
    Find marks for the question opened at ``index``.

    Searches the opening line, then up to ``marks_lookahead_lines`` more
    lines, stopping early at the next question start. The first marker
    found decides: an in-range value is used, an out-of-range value is
    discarded for the default.

    Returns:
        (marks, index of the line holding the marker or None)
    """
    last = min(len(markers), index + 1 + config.marks_lookahead_lines)
    for j in range(index, last):
        if j > index and starts[j] is not None:
            break
        marker = markers[j]
        if marker is None:
            continue
        if config.accepts_marks(marker.value):
            return marker.value, j
        logger.warning(
            f"Discarding out-of-range marks {marker.value} on line {j + 1} "
            f"(accepted {config.min_marks}-{config.max_marks})"
        )
        return config.default_marks, j
    return config.default_marks, None


def _flush(pending: _PendingQuestion, questions: List[ParsedQuestion]) -> None:
    # A question made only of its marks marker keeps the marker as text
    text = " ".join(pending.parts).strip() or pending.marker_text
    if not text:
        logger.debug("Dropping enumerated question with no text")
        return
    questions.append(ParsedQuestion(text, pending.marks))


def parse_enumerated(
    text: str,
    config: Optional[IngestionConfig] = None,
) -> List[ParsedQuestion]:
    """
    Parse questions opened by enumeration markers.

    Algorithm:
    1. Split into non-empty trimmed lines
    2. A line matching ``^\\s*\\d{1,4}[.)]\\s*`` opens a question, flushing the
       previous one
    3. Marks come from the opening line, else from the next lines (see
       ``_discover_marks``), else the default
    4. Other lines are continuation text of the open question; lines
       before the first question are ignored
    5. The open question is flushed at end of input

    The numbers printed in the source are ignored; output order is
    discovery order.

    Args:
        text: Extracted document text.
        config: Optional ingestion configuration.

    Returns:
        Questions in source order; [] when no line opens a question.

    Example:
        >>> parse_enumerated("1. What is 2+2? [2 marks]\\n2. Name a prime. (1 mark)")
        [ParsedQuestion('What is 2+2?', marks=2), ParsedQuestion('Name a prime.', marks=1)]
    """
    config = config or IngestionConfig()
    lines = split_lines(text)
    if not lines:
        return []

    starts = [detect_question_start(line) for line in lines]
    markers = [
        detect_marks_marker(start.body if start is not None else line)
        for line, start in zip(lines, starts)
    ]

    questions: List[ParsedQuestion] = []
    pending: Optional[_PendingQuestion] = None

    for i, line in enumerate(lines):
        start = starts[i]
        if start is not None:
            if pending is not None:
                _flush(pending, questions)
            marks, marks_line = _discover_marks(i, starts, markers, config)
            body = start.body
            marker_text = ""
            if marks_line == i and config.strip_marks_markers:
                marker_text, body = body, strip_marker(body, markers[i])
            pending = _PendingQuestion(
                parts=[body] if body else [],
                marks=marks,
                marks_line=marks_line,
                marker_text=marker_text,
            )
            continue

        if pending is None:
            logger.debug(f"Skipping line {i + 1} before first question: {line[:40]!r}")
            continue

        if pending.marks_line == i and config.strip_marks_markers:
            pending.marker_text = line
            line = strip_marker(line, markers[i])
        if line:
            pending.parts.append(line)

    if pending is not None:
        _flush(pending, questions)

    logger.debug(f"Enumerated pass found {len(questions)} questions in {len(lines)} lines")
    return questions


def parse_loose_lines(
    text: str,
    config: Optional[IngestionConfig] = None,
) -> List[ParsedQuestion]:
    """
    Coarse pass: every non-enumerated line longer than
    ``loose_min_line_length`` characters becomes its own question with
    default marks.
    """
    config = config or IngestionConfig()
    return [
        ParsedQuestion(line, config.default_marks)
        for line in split_lines(text)
        if not is_question_start(line) and len(line) > config.loose_min_line_length
    ]


DEFAULT_STRATEGIES: Tuple[Tuple[str, ParseStrategy], ...] = (
    ("enumerated", parse_enumerated),
    ("loose", parse_loose_lines),
)


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of running a strategy chain.

    Attributes:
        strategy: Name of the strategy that matched, None if none did.
        questions: Questions found (empty when strategy is None).
    """
    strategy: Optional[str]
    questions: Tuple[ParsedQuestion, ...] = ()

    @property
    def matched(self) -> bool:
        return self.strategy is not None


def run_strategies(
    text: Optional[str],
    strategies: Sequence[Tuple[str, ParseStrategy]] = DEFAULT_STRATEGIES,
    config: Optional[IngestionConfig] = None,
) -> ParseOutcome:
    """
    Try each strategy in order and return the first non-empty result.

    A strategy raising ValueError is logged and treated as no match, so
    the chain itself never raises for bad input text.

    Args:
        text: Extracted text; None or empty skips every strategy.
        strategies: Ordered (name, strategy) pairs.
        config: Optional ingestion configuration passed to each strategy.

    Returns:
        ParseOutcome naming the strategy that matched.
    """
    if not text or not text.strip():
        return ParseOutcome(strategy=None)

    for name, strategy in strategies:
        try:
            questions = strategy(text, config)
        except ValueError as e:
            logger.warning(f"Parser strategy {name!r} failed: {e}")
            continue
        if questions:
            logger.info(f"Parser strategy {name!r} found {len(questions)} questions")
            return ParseOutcome(strategy=name, questions=tuple(questions))
        logger.debug(f"Parser strategy {name!r} found no questions")

    return ParseOutcome(strategy=None)


def parse_questions(
    text: Optional[str],
    config: Optional[IngestionConfig] = None,
) -> List[ParsedQuestion]:
    """
    Parse text with the default strategy chain.

    Never raises for bad text; returns [] when no strategy matches and
    leaves the fallback decision to the caller.
    """
    return list(run_strategies(text, config=config).questions)
