"""
Module: questions

Purpose:
    Question data structures at the three stages of their life: parsed
    from text, numbered for persistence, and read back from storage.
    All are frozen and validate their own invariants.

Key Classes:
    - ParsedQuestion: (question_text, marks) as discovered by the parser
    - DraftQuestion: Parsed question with its final question_order
    - Question: Persisted question carrying storage identity

Dependencies:
    - dataclasses (std)
    - lesson_toolkit.common.thresholds

Used By:
    - ingestion.parser / ingestion.samples / ingestion.pipeline
    - core.utils.ordering
    - core.utils.serialization
    - scoring.aggregator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from lesson_toolkit.common.thresholds import PARSING_THRESHOLDS


def _check_text(text: str) -> None:
    if not isinstance(text, str) or not text.strip():
        raise ValueError(f"question_text must be a non-empty string: {text!r}")


def _check_marks(marks: int) -> None:
    lo, hi = PARSING_THRESHOLDS.min_marks, PARSING_THRESHOLDS.max_marks
    if isinstance(marks, bool) or not isinstance(marks, int) or not (lo <= marks <= hi):
        raise ValueError(f"marks must be an integer {lo}-{hi}: {marks!r}")


def _check_order(order: int) -> None:
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise ValueError(f"question_order must be >= 1: {order!r}")


@dataclass(frozen=True)
class ParsedQuestion:
    """
    A question discovered in extracted text, before numbering.

    Attributes:
        question_text: Question body with enumeration marker removed.
        marks: Marks awarded for the question (1-100).

    Example:
        >>> ParsedQuestion("What is 2+2?", 2)
        ParsedQuestion('What is 2+2?', marks=2)
    """

    question_text: str
    marks: int

    def __post_init__(self) -> None:
        _check_text(self.question_text)
        _check_marks(self.marks)

    def __repr__(self) -> str:
        return f"ParsedQuestion({self.question_text!r}, marks={self.marks})"


@dataclass(frozen=True)
class DraftQuestion:
    """
    A question ready to be written to storage.

    question_order is assigned once, after parsing has finished, from the
    position in the final list. It never comes from the numbers printed in
    the source document.

    Attributes:
        question_text: Question body.
        total_marks: Marks available (1-100).
        question_order: 1-based position within the test.
    """

    question_text: str
    total_marks: int
    question_order: int

    def __post_init__(self) -> None:
        _check_text(self.question_text)
        _check_marks(self.total_marks)
        _check_order(self.question_order)

    def to_record(self) -> Dict[str, Any]:
        """Record shape expected by the storage collaborator."""
        return {
            "question_text": self.question_text,
            "total_marks": self.total_marks,
            "question_order": self.question_order,
        }


@dataclass(frozen=True)
class Question:
    """
    A persisted test question.

    Attributes:
        id: Identity assigned by storage.
        test_id: Owning test.
        question_text: Question body (non-empty).
        total_marks: Marks available (1-100).
        question_order: 1-based, dense and unique within the test.

    Example:
        >>> q = Question("q1", "t1", "Name a prime.", 1, 2)
        >>> q.total_marks
        1
    """

    id: str
    test_id: str
    question_text: str
    total_marks: int
    question_order: int

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Question id is required")
        _check_text(self.question_text)
        _check_marks(self.total_marks)
        _check_order(self.question_order)

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "test_id": self.test_id,
            "question_text": self.question_text,
            "total_marks": self.total_marks,
            "question_order": self.question_order,
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> Question:
        """
        Build from a storage row.

        Args:
            data: Row with id, test_id, question_text, total_marks, question_order

        Returns:
            Question instance
        """
        return cls(
            id=str(data["id"]),
            test_id=str(data.get("test_id", "")),
            question_text=data["question_text"],
            total_marks=data["total_marks"],
            question_order=data["question_order"],
        )

    def __repr__(self) -> str:
        return (
            f"Question({self.id!r}, order={self.question_order}, "
            f"marks={self.total_marks})"
        )
