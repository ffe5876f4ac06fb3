"""
Module: scoring.summary

Purpose:
    Dashboard-level averages over many student test attempts.

Key Functions:
    - average_percentages(): Overall and per-grade average percentage

Key Classes:
    - ScoreAverages: Container for the averages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from lesson_toolkit.common.numbers import round_half_up
from lesson_toolkit.core.models.scores import StudentTestScore


@dataclass(frozen=True)
class ScoreAverages:
    """
    Attributes:
        overall: Mean percentage across all counted attempts (0 if none).
        by_grade: Mean percentage per grade.
        attempts: Number of attempts counted.
    """
    overall: int = 0
    by_grade: Dict[str, int] = field(default_factory=dict)
    attempts: int = 0


def average_percentages(attempts: Iterable[Tuple[str, StudentTestScore]]) -> ScoreAverages:
    """
    Average unrounded percentages over (grade, score) attempts.

    Attempts with no possible marks are skipped. Each average is rounded
    once, half up, after summing the exact percentages.

    Example:
        >>> average_percentages([("7", s1), ("7", s2), ("8", s3)]).by_grade
        {'7': 65, '8': 80}
    """
    overall: List[float] = []
    grades: Dict[str, List[float]] = {}
    for grade, score in attempts:
        if score.total_possible <= 0:
            continue
        value = score.total_scored / score.total_possible * 100
        overall.append(value)
        grades.setdefault(grade, []).append(value)

    def _mean(values: List[float]) -> int:
        return round_half_up(sum(values) / len(values)) if values else 0

    return ScoreAverages(
        overall=_mean(overall),
        by_grade={grade: _mean(values) for grade, values in grades.items()},
        attempts=len(overall),
    )
