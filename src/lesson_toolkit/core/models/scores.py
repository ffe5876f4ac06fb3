"""
Module: scores

Purpose:
    Raw marks as entered by a teacher and the derived, never-persisted
    score value objects built from them.

Key Classes:
    - RawMarkEntry: One student's scored marks on one question
    - QuestionScore: Per-question line of a StudentTestScore
    - StudentTestScore: Totals and percentage for one student on one test
    - LessonProgress: Pretest/posttest pair for one lesson
    - StudentProgress: All lesson progress for a student plus overall average

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.aggregator
    - scoring.progress
    - scoring.summary
    - core.schemas.validator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RawMarkEntry:
    """
    Marks a student scored on a single question.

    The upper bound (the question's total_marks) is checked at the input
    boundary by ``validate_raw_marks``; only the sign is checked here.

    Attributes:
        question_id: Question the marks belong to.
        scored_marks: Marks awarded (>= 0).
        student_id: Student who was scored. Optional when the caller has
            already grouped entries by student.
    """

    question_id: str
    scored_marks: int
    student_id: str = ""

    def __post_init__(self) -> None:
        if self.scored_marks < 0:
            raise ValueError(f"scored_marks cannot be negative: {self.scored_marks}")


@dataclass(frozen=True)
class QuestionScore:
    """One question's contribution to a student's test score."""

    question_id: str
    question_order: int
    question_text: str
    scored_marks: int
    total_marks: int


@dataclass(frozen=True)
class StudentTestScore:
    """
    Derived score for one student on one test.

    Attributes:
        student_id: Student the score belongs to ("" when not supplied).
        total_scored: Sum of scored marks, missing entries counted as 0.
        total_possible: Sum of question total_marks.
        percentage: Half-up rounded percentage, 0 when total_possible is 0.
        question_scores: Breakdown in question_order.

    Example:
        >>> s = StudentTestScore("s1", 3, 10, 30)
        >>> s.percentage
        30
    """

    student_id: str
    total_scored: int
    total_possible: int
    percentage: int
    question_scores: Tuple[QuestionScore, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "total_scored": self.total_scored,
            "total_possible": self.total_possible,
            "percentage": self.percentage,
            "scores": [
                {
                    "question_id": qs.question_id,
                    "question_order": qs.question_order,
                    "question_text": qs.question_text,
                    "scored_marks": qs.scored_marks,
                    "total_marks": qs.total_marks,
                }
                for qs in self.question_scores
            ],
        }


@dataclass(frozen=True)
class LessonProgress:
    """
    Pretest/posttest comparison for a single lesson.

    improvement is None unless both scores are present. None means "not
    measurable", which is different from 0 ("no change").
    """

    lesson_id: str
    lesson_title: str
    pretest: Optional[StudentTestScore] = None
    posttest: Optional[StudentTestScore] = None
    improvement: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize; the improvement key is omitted when not measurable."""
        d: Dict[str, Any] = {
            "lesson_id": self.lesson_id,
            "lesson_title": self.lesson_title,
        }
        if self.pretest is not None:
            d["pretest"] = _score_summary(self.pretest)
        if self.posttest is not None:
            d["posttest"] = _score_summary(self.posttest)
        if self.improvement is not None:
            d["improvement"] = self.improvement
        return d


@dataclass(frozen=True)
class StudentProgress:
    """Lesson-by-lesson progress for one student."""

    student_id: str
    lessons: Tuple[LessonProgress, ...]
    overall_average: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "overall_average": self.overall_average,
            "lessons": [lp.to_dict() for lp in self.lessons],
        }


def _score_summary(score: StudentTestScore) -> Dict[str, int]:
    return {
        "scored": score.total_scored,
        "total": score.total_possible,
        "percentage": score.percentage,
    }
