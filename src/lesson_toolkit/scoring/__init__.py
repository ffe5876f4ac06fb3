"""
Module: scoring

Purpose:
    Pure aggregation over data supplied by the storage collaborator:
    per-test scores, lesson progress, attendance and dashboard averages.
    Every function is referentially transparent and holds no state.

Key Functions:
    - aggregate_scores() / score_students(): Test scores
    - compute_lesson_progress() / overall_average() / build_student_progress()
    - attendance_stats() / attendance_stats_for_student()
    - average_percentages(): Dashboard averages
"""

from .aggregator import aggregate_scores, score_students
from .attendance import attendance_stats, attendance_stats_for_student
from .progress import build_student_progress, compute_lesson_progress, overall_average
from .summary import ScoreAverages, average_percentages

__all__ = [
    "aggregate_scores",
    "score_students",
    "attendance_stats",
    "attendance_stats_for_student",
    "build_student_progress",
    "compute_lesson_progress",
    "overall_average",
    "ScoreAverages",
    "average_percentages",
]
