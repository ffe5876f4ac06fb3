"""
Module: scoring.aggregator

Purpose:
    Score aggregation - joins a test's questions with a student's raw
    per-question marks to produce totals and a percentage.

Key Functions:
    - aggregate_scores(): One student, marks keyed by question id
    - score_students(): Many students from a flat list of raw entries

Policy:
    A question with no entry counts as 0 scored (not "ungraded"). Input
    is assumed validated; see core.schemas.validator.validate_raw_marks.

Used By:
    - scoring.progress: Pretest/posttest scores per lesson
    - scoring.summary: Dashboard averages
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence

from lesson_toolkit.common.numbers import percentage
from lesson_toolkit.core.models.questions import Question
from lesson_toolkit.core.models.scores import QuestionScore, RawMarkEntry, StudentTestScore
from lesson_toolkit.core.utils.serialization import merge_upserts, score_upsert_key

logger = logging.getLogger(__name__)


def aggregate_scores(
    questions: Sequence[Question],
    marks_by_question_id: Mapping[str, int],
    student_id: str = "",
) -> StudentTestScore:
    """
    Compute one student's score on a test.

    Args:
        questions: The test's questions (any order).
        marks_by_question_id: Scored marks keyed by question id; missing
            questions count as 0.
        student_id: Carried into the result.

    Returns:
        StudentTestScore with a breakdown in question_order. An empty
        question list gives 0/0 and percentage 0.

    Example:
        >>> score = aggregate_scores([q1, q2], {"q1": 3})  # both worth 5
        >>> score.total_scored, score.total_possible, score.percentage
        (3, 10, 30)
    """
    ordered = sorted(questions, key=lambda q: q.question_order)
    breakdown = tuple(
        QuestionScore(
            question_id=q.id,
            question_order=q.question_order,
            question_text=q.question_text,
            scored_marks=marks_by_question_id.get(q.id) or 0,
            total_marks=q.total_marks,
        )
        for q in ordered
    )
    total_scored = sum(s.scored_marks for s in breakdown)
    total_possible = sum(s.total_marks for s in breakdown)
    return StudentTestScore(
        student_id=student_id,
        total_scored=total_scored,
        total_possible=total_possible,
        percentage=percentage(total_scored, total_possible),
        question_scores=breakdown,
    )


def score_students(
    questions: Sequence[Question],
    student_ids: Iterable[str],
    entries: Iterable[RawMarkEntry],
) -> List[StudentTestScore]:
    """
    Score every listed student on one test.

    Entries for questions outside the test and for unlisted students are
    ignored. Duplicate (student, question) entries resolve last-write-wins,
    matching the storage upsert key.

    Args:
        questions: The test's questions.
        student_ids: Students to score, in output order.
        entries: Raw marks for the test (student_id must be set).

    Returns:
        One StudentTestScore per student id; students with no entries
        score 0.
    """
    question_ids = {q.id for q in questions}
    marks: Dict[str, Dict[str, int]] = defaultdict(dict)
    for entry in merge_upserts(entries, score_upsert_key):
        if entry.question_id in question_ids:
            marks[entry.student_id][entry.question_id] = entry.scored_marks

    results = [
        aggregate_scores(questions, marks.get(student_id, {}), student_id)
        for student_id in student_ids
    ]
    logger.debug(f"Scored {len(results)} students on {len(question_ids)} questions")
    return results
