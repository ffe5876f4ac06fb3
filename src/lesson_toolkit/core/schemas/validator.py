"""
Schema Validation Utilities

Validates user-edited and storage-bound data at the input boundary.

The scoring functions assume validated input and never re-check ranges,
so every value a teacher can edit (question marks, scored marks,
attendance status) passes through here before it is persisted.

**RULES:**

- Question marks must be integers 1-100
- Scored marks must be integers 0..question.total_marks
- Out-of-range numbers are rejected, never clamped
- Non-numeric input at an edit field falls back to the previous value
  (``coerce_marks_input`` / ``coerce_score_input``); this is the only
  place a value is substituted
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

import jsonschema

from lesson_toolkit.common.thresholds import PARSING_THRESHOLDS, SCORING_THRESHOLDS
from ..models.attendance import AttendanceStatus
from ..models.questions import Question
from ..models.scores import RawMarkEntry


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails boundary validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_schema(data: Any, schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


# ─────────────────────────────────────────────────────────────────────────────
# Questions
# ─────────────────────────────────────────────────────────────────────────────

def validate_question_record(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a question record before it is written to storage.

    Args:
        data: Dict with question_text, total_marks, question_order
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    required = ["question_text", "total_marks", "question_order"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    text = data["question_text"]
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("question_text must be a non-empty string", path="question_text")

    marks = data["total_marks"]
    lo, hi = PARSING_THRESHOLDS.min_marks, PARSING_THRESHOLDS.max_marks
    if not _is_int(marks) or not (lo <= marks <= hi):
        raise ValidationError(
            f"Invalid total_marks: {marks!r} (must be {lo}-{hi})",
            path="total_marks",
        )

    order = data["question_order"]
    if not _is_int(order) or order < 1:
        raise ValidationError(
            f"Invalid question_order: {order!r} (must be >= 1)",
            path="question_order",
        )

    if strict:
        _check_schema(data, "question_record")


def validate_question_order(questions: Sequence[Any]) -> None:
    """
    Check that question_order values form exactly 1..N in list order.

    Raises:
        ValidationError: Listing every position that breaks the sequence
    """
    errors = []
    for expected, q in enumerate(questions, start=1):
        order = q["question_order"] if isinstance(q, Mapping) else q.question_order
        if order != expected:
            errors.append(f"position {expected}: question_order={order}")
    if errors:
        raise ValidationError(
            f"question_order must be dense 1..{len(questions)}",
            path="question_order",
            errors=errors,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Scores
# ─────────────────────────────────────────────────────────────────────────────

def validate_raw_marks(
    questions: Iterable[Question],
    entries: Iterable[RawMarkEntry],
) -> None:
    """
    Validate scored marks against their questions.

    Args:
        questions: Questions of the test being scored
        entries: Raw marks entered for those questions

    Raises:
        ValidationError: If any entry references an unknown question or
            lies outside 0..total_marks. All problems are listed in
            ``errors``.
    """
    totals = {q.id: q.total_marks for q in questions}
    errors = []
    for entry in entries:
        total = totals.get(entry.question_id)
        if total is None:
            errors.append(f"{entry.question_id}: unknown question")
            continue
        scored = entry.scored_marks
        if not _is_int(scored) or not (SCORING_THRESHOLDS.min_scored_marks <= scored <= total):
            errors.append(f"{entry.question_id}: scored {scored!r} outside 0..{total}")
    if errors:
        raise ValidationError(
            f"{len(errors)} invalid score entr{'y' if len(errors) == 1 else 'ies'}",
            path="scored_marks",
            errors=errors,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Attendance
# ─────────────────────────────────────────────────────────────────────────────

def validate_attendance_record(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate an attendance record before upsert.

    Raises:
        ValidationError: If fields are missing or status is unknown
    """
    required = ["student_id", "date", "status"]
    missing = [f for f in required if not data.get(f)]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    allowed = [s.value for s in AttendanceStatus]
    if data["status"] not in allowed:
        raise ValidationError(
            f"Invalid status: {data['status']!r} (expected one of {allowed})",
            path="status",
        )

    if strict:
        _check_schema(data, "attendance_record")


# ─────────────────────────────────────────────────────────────────────────────
# Edit-field coercion
# ─────────────────────────────────────────────────────────────────────────────

def _parse_int(raw: Any) -> Optional[int]:
    if _is_int(raw):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def coerce_marks_input(raw: Any, *, previous: int) -> int:
    """
    Read a question's marks from an edit field.

    Args:
        raw: Value typed by the user
        previous: Value to keep when raw is not a number

    Returns:
        The parsed marks, or ``previous`` for non-numeric input

    Raises:
        ValidationError: If the number is outside 1-100

    Example:
        >>> coerce_marks_input("4", previous=1)
        4
        >>> coerce_marks_input("four", previous=2)
        2
    """
    value = _parse_int(raw)
    if value is None:
        return previous
    lo, hi = PARSING_THRESHOLDS.min_marks, PARSING_THRESHOLDS.max_marks
    if not (lo <= value <= hi):
        raise ValidationError(
            f"Marks must be between {lo} and {hi}: {value}",
            path="total_marks",
        )
    return value


def coerce_score_input(raw: Any, total_marks: int, *, previous: int) -> int:
    """
    Read a student's scored marks from an edit field.

    Args:
        raw: Value typed by the user
        total_marks: Question's available marks
        previous: Value to keep when raw is not a number

    Returns:
        The parsed score, or ``previous`` for non-numeric input

    Raises:
        ValidationError: If the number is outside 0..total_marks
    """
    value = _parse_int(raw)
    if value is None:
        return previous
    if not (SCORING_THRESHOLDS.min_scored_marks <= value <= total_marks):
        raise ValidationError(
            f"Score must be between 0 and {total_marks}: {value}",
            path="scored_marks",
        )
    return value
