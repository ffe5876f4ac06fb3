"""
Core Models Package

Immutable, validated data models shared by ingestion and scoring.

All models in this package are frozen dataclasses and validate their
own invariants on construction.

Derived models (StudentTestScore, LessonProgress, AttendanceStats) are
never persisted; they are recomputed by the caller whenever needed.
"""

from .attendance import AttendanceRecord, AttendanceStats, AttendanceStatus
from .lessons import Assessment, AssessmentKind, Lesson
from .questions import DraftQuestion, ParsedQuestion, Question
from .scores import (
    LessonProgress,
    QuestionScore,
    RawMarkEntry,
    StudentProgress,
    StudentTestScore,
)

__all__ = [
    "AttendanceRecord",
    "AttendanceStats",
    "AttendanceStatus",
    "Assessment",
    "AssessmentKind",
    "Lesson",
    "DraftQuestion",
    "ParsedQuestion",
    "Question",
    "LessonProgress",
    "QuestionScore",
    "RawMarkEntry",
    "StudentProgress",
    "StudentTestScore",
]
