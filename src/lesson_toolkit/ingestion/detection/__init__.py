"""
Module: ingestion.detection

Purpose:
    Detection subpackage for identifying question elements in extracted
    text. Contains modules for detecting question starts and marks
    allocations.

Key Modules:
    - numerals: Question start detection ("1.", "2)")
    - marks: Marks marker detection ("[N marks]", "(N mark)", "N marks")

Used By:
    - ingestion.parser: Orchestrates detection modules
"""

from .marks import MarksMarker, detect_marks_marker, strip_marker
from .numerals import QuestionStart, detect_question_start, is_question_start

__all__ = [
    "MarksMarker",
    "detect_marks_marker",
    "strip_marker",
    "QuestionStart",
    "detect_question_start",
    "is_question_start",
]
