"""
Module: ingestion.pipeline

Purpose:
    Question ingestion policy. Decides the final question set and total
    marks for a test from (possibly missing) extracted text, walking the
    fallback chain: parser strategies -> sample questions -> minimum
    question. A test is never produced with zero questions.

Key Functions:
    - ingest_questions(): Main entry point for already-extracted text
    - ingest_pdf(): Extraction + ingestion for an uploaded PDF

Key Classes:
    - IngestionResult: Container for ingestion output

Dependencies:
    - lesson_toolkit.ingestion.parser: Strategy chain
    - lesson_toolkit.ingestion.samples: Placeholder questions
    - lesson_toolkit.ingestion.utils.pdf: Text extraction (ingest_pdf only)

Used By:
    - Test upload and re-parse flows in the dashboard
    - scripts/ingest_test_pdf.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from lesson_toolkit.core.models.lessons import AssessmentKind
from lesson_toolkit.core.models.questions import DraftQuestion, ParsedQuestion
from lesson_toolkit.core.utils.serialization import question_records
from .config import IngestionConfig
from .parser import DEFAULT_STRATEGIES, ParseStrategy, run_strategies
from .samples import generate_sample_questions, minimum_question
from .utils.pdf import ExtractionError, extract_text_from_pdf

logger = logging.getLogger(__name__)

SampleGenerator = Callable[[str, Union[AssessmentKind, str]], List[ParsedQuestion]]

STRATEGY_SAMPLE = "sample"
STRATEGY_MINIMUM = "minimum"


@dataclass(frozen=True)
class IngestionResult:
    """
    Result of ingesting a test.

    Attributes:
        questions: Numbered questions, question_order 1..N.
        total_marks: Sum of question marks.
        used_fallback: True when placeholder questions were produced
            instead of parsed ones; callers should ask for review.
        strategy: Name of the stage that produced the questions
            ("enumerated", "loose", "sample" or "minimum").
        warnings: Non-fatal problems met on the way (e.g. extraction failure).
    """
    questions: Tuple[DraftQuestion, ...]
    total_marks: int
    used_fallback: bool
    strategy: str
    warnings: Tuple[str, ...] = ()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def to_records(self, test_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Rows for the storage collaborator's bulk insert."""
        return question_records(self.questions, test_id)


def _number(parsed: Sequence[ParsedQuestion]) -> Tuple[DraftQuestion, ...]:
    # Order is assigned once, here, from final list position.
    return tuple(
        DraftQuestion(p.question_text, p.marks, position)
        for position, p in enumerate(parsed, start=1)
    )


def ingest_questions(
    extracted_text: Optional[str],
    test_title: str,
    test_kind: Union[AssessmentKind, str],
    *,
    config: Optional[IngestionConfig] = None,
    strategies: Sequence[Tuple[str, ParseStrategy]] = DEFAULT_STRATEGIES,
    sample_generator: SampleGenerator = generate_sample_questions,
    warnings: Sequence[str] = (),
) -> IngestionResult:
    """
    Decide the question set for a test.

    Decision order:
    1. No text (None/blank) -> skip to step 3
    2. Run parser strategies; first non-empty result wins
    3. Otherwise generate sample questions (used_fallback=True)
    4. If that is still empty, use the single minimum question

    Args:
        extracted_text: Text from the extraction collaborator, or None
            when extraction failed or no document was supplied.
        test_title: Test title, used in placeholder text.
        test_kind: pretest / posttest.
        config: Optional ingestion configuration.
        strategies: Parser strategy chain (defaults to enumerated, loose).
        sample_generator: Placeholder generator.
        warnings: Warnings gathered by the caller, carried into the result.

    Returns:
        IngestionResult with at least one question.

    Example:
        >>> result = ingest_questions(None, "Quiz A", "pretest")
        >>> result.question_count, result.total_marks, result.used_fallback
        (1, 1, True)
    """
    collected = list(warnings)

    outcome = run_strategies(extracted_text, strategies, config)
    if outcome.matched:
        parsed: List[ParsedQuestion] = list(outcome.questions)
        strategy = outcome.strategy
        used_fallback = False
    else:
        if extracted_text and extracted_text.strip():
            collected.append("No questions could be parsed from the document text")
        else:
            collected.append("No document text available")
        logger.warning(f"Falling back to sample questions for {test_title!r}")
        parsed = list(sample_generator(test_title, test_kind))
        strategy = STRATEGY_SAMPLE
        used_fallback = True

    if not parsed:
        logger.warning(f"Sample generator returned nothing for {test_title!r}; using minimum question")
        parsed = [minimum_question(test_title)]
        strategy = STRATEGY_MINIMUM
        used_fallback = True

    questions = _number(parsed)
    total_marks = sum(q.total_marks for q in questions)
    logger.info(
        f"Ingested {len(questions)} questions ({total_marks} marks) for {test_title!r} "
        f"via {strategy}"
    )
    return IngestionResult(
        questions=questions,
        total_marks=total_marks,
        used_fallback=used_fallback,
        strategy=strategy,
        warnings=tuple(collected),
    )


def ingest_pdf(
    source: Union[bytes, Path],
    test_title: str,
    test_kind: Union[AssessmentKind, str],
    *,
    config: Optional[IngestionConfig] = None,
) -> IngestionResult:
    """
    Extract text from an uploaded PDF and ingest its questions.

    Extraction failure is not fatal: it is logged, recorded in the
    result's warnings, and ingestion continues without text.

    Args:
        source: PDF bytes or path.
        test_title: Test title.
        test_kind: pretest / posttest.
        config: Optional ingestion configuration.

    Returns:
        IngestionResult (always at least one question).
    """
    warnings: List[str] = []
    try:
        text: Optional[str] = extract_text_from_pdf(source)
    except ExtractionError as e:
        logger.warning(f"Text extraction failed for {test_title!r}: {e}")
        warnings.append(str(e))
        text = None

    return ingest_questions(
        text,
        test_title,
        test_kind,
        config=config,
        warnings=warnings,
    )
