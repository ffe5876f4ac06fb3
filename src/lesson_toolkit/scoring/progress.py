"""
Module: scoring.progress

Purpose:
    Student progress across lessons: pretest vs posttest improvement per
    lesson and an overall average percentage.

Key Functions:
    - compute_lesson_progress(): Improvement for one lesson
    - overall_average(): Average across lessons with at least one score
    - build_student_progress(): Join lessons, assessments and scores

Dependencies:
    - lesson_toolkit.scoring.aggregator: StudentTestScore inputs

Used By:
    - Student profile view in the dashboard
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from lesson_toolkit.common.numbers import round_half_up
from lesson_toolkit.core.models.lessons import Assessment, AssessmentKind, Lesson
from lesson_toolkit.core.models.scores import LessonProgress, StudentProgress, StudentTestScore

logger = logging.getLogger(__name__)


def compute_lesson_progress(
    lesson: Lesson,
    pretest: Optional[StudentTestScore] = None,
    posttest: Optional[StudentTestScore] = None,
) -> LessonProgress:
    """
    Compare a student's pretest and posttest for a lesson.

    improvement = posttest.percentage - pretest.percentage, and only when
    both are present; otherwise it stays None.

    Example:
        >>> compute_lesson_progress(lesson, pre, post).improvement  # 60% -> 75%
        15
    """
    improvement = None
    if pretest is not None and posttest is not None:
        improvement = posttest.percentage - pretest.percentage
    return LessonProgress(
        lesson_id=lesson.id,
        lesson_title=lesson.title,
        pretest=pretest,
        posttest=posttest,
        improvement=improvement,
    )


def overall_average(progress: Iterable[LessonProgress]) -> int:
    """
    Average percentage across lessons.

    Each lesson contributes the mean of whichever of its pretest and
    posttest percentages exist. Lessons with neither are skipped rather
    than counted as 0. The result is rounded once, half up; no scored
    lessons gives 0.
    """
    per_lesson: List[float] = []
    for lp in progress:
        present = [s.percentage for s in (lp.pretest, lp.posttest) if s is not None]
        if present:
            per_lesson.append(sum(present) / len(present))
    if not per_lesson:
        return 0
    return round_half_up(sum(per_lesson) / len(per_lesson))


def _first_of_kind(assessments: Sequence[Assessment], kind: AssessmentKind) -> Optional[Assessment]:
    return next((a for a in assessments if a.kind == kind), None)


def _score_for(
    scores_by_assessment: Mapping[str, Sequence[StudentTestScore]],
    assessment: Optional[Assessment],
    student_id: str,
) -> Optional[StudentTestScore]:
    if assessment is None:
        return None
    scores = scores_by_assessment.get(assessment.id, ())
    return next((s for s in scores if s.student_id == student_id), None)


def build_student_progress(
    student_id: str,
    lessons: Iterable[Lesson],
    assessments: Iterable[Assessment],
    scores_by_assessment: Mapping[str, Sequence[StudentTestScore]],
    *,
    grade: Optional[str] = None,
) -> StudentProgress:
    """
    Build a student's lesson-by-lesson progress.

    For each lesson (restricted to ``grade`` when given), the first
    pretest and first posttest linked to it are looked up and the
    student's score on each is taken from ``scores_by_assessment``.

    Args:
        student_id: Student to report on.
        lessons: Candidate lessons, in display order.
        assessments: All known assessments.
        scores_by_assessment: Scores per assessment id, typically the
            output of score_students for each test.
        grade: Only include lessons for this grade.

    Returns:
        StudentProgress with one LessonProgress per included lesson.
    """
    by_lesson: dict[str, List[Assessment]] = {}
    for assessment in assessments:
        if assessment.lesson_id:
            by_lesson.setdefault(assessment.lesson_id, []).append(assessment)

    progress: List[LessonProgress] = []
    for lesson in lessons:
        if grade is not None and lesson.grade != grade:
            continue
        linked = by_lesson.get(lesson.id, [])
        pretest = _score_for(scores_by_assessment, _first_of_kind(linked, AssessmentKind.PRETEST), student_id)
        posttest = _score_for(scores_by_assessment, _first_of_kind(linked, AssessmentKind.POSTTEST), student_id)
        progress.append(compute_lesson_progress(lesson, pretest, posttest))

    logger.debug(f"Built progress for student {student_id!r} across {len(progress)} lessons")
    return StudentProgress(
        student_id=student_id,
        lessons=tuple(progress),
        overall_average=overall_average(progress),
    )
