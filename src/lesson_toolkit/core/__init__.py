"""
Lesson Toolkit Core Package

Shared data models, boundary validation and record helpers used by both
the ingestion and scoring subpackages.

**CONVENTIONS:**

1. **Immutable Data Models**
   - Frozen dataclasses; edits produce new instances via dataclasses.replace

2. **Calculated Totals (Never Stored)**
   - A test's total marks is the sum of its questions' total_marks
   - Percentages and improvements are derived on demand

3. **Dense Question Order**
   - question_order is always 1..N with no gaps; see core.utils.ordering
"""

from .models import (
    Assessment,
    AssessmentKind,
    AttendanceRecord,
    AttendanceStats,
    AttendanceStatus,
    DraftQuestion,
    Lesson,
    LessonProgress,
    ParsedQuestion,
    Question,
    RawMarkEntry,
    StudentProgress,
    StudentTestScore,
)
from .schemas.validator import ValidationError

__all__ = [
    "Assessment",
    "AssessmentKind",
    "AttendanceRecord",
    "AttendanceStats",
    "AttendanceStatus",
    "DraftQuestion",
    "Lesson",
    "LessonProgress",
    "ParsedQuestion",
    "Question",
    "RawMarkEntry",
    "StudentProgress",
    "StudentTestScore",
    "ValidationError",
]
