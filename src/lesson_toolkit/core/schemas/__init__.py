"""
Schemas Package

JSON schema definitions and boundary validation utilities.
"""

from .validator import (
    coerce_marks_input,
    coerce_score_input,
    validate_attendance_record,
    validate_question_order,
    validate_question_record,
    validate_raw_marks,
    ValidationError,
)

__all__ = [
    "coerce_marks_input",
    "coerce_score_input",
    "validate_attendance_record",
    "validate_question_order",
    "validate_question_record",
    "validate_raw_marks",
    "ValidationError",
]
