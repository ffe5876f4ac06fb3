"""
Serialization Utilities

Record shapes exchanged with the storage collaborator, and the composite
keys it uses for idempotent upserts.

**STORAGE CONTRACT:**

- Question rows: {question_text, total_marks, question_order} plus
  test_id when known; order is dense 1..N per test
- Score rows are upserted on (student_id, question_id)
- Attendance rows are upserted on (student_id, date)
- Conflicts resolve last-write-wins
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..models.attendance import AttendanceRecord
from ..models.questions import DraftQuestion, Question
from ..models.scores import RawMarkEntry
from ..schemas.validator import validate_question_order, validate_question_record

T = TypeVar("T")


# ─────────────────────────────────────────────────────────────────────────────
# Question Records
# ─────────────────────────────────────────────────────────────────────────────

def question_records(
    drafts: Sequence[DraftQuestion],
    test_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Build insert rows for a test's questions.

    Args:
        drafts: Numbered questions, in order
        test_id: Owning test; included in each row when given

    Returns:
        List of row dicts ready for a bulk insert

    Raises:
        ValidationError: If order is not dense 1..N or a row is invalid
    """
    validate_question_order(drafts)
    rows = []
    for draft in drafts:
        row = draft.to_record()
        validate_question_record(row)
        if test_id is not None:
            row["test_id"] = test_id
        rows.append(row)
    return rows


def question_from_record(data: Dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a stored question row.

    Raises:
        ValidationError: If validate=True and the row is invalid
        KeyError: If id is missing
    """
    if validate:
        validate_question_record(data)
    return Question.from_record(data)


# ─────────────────────────────────────────────────────────────────────────────
# Upsert Keys
# ─────────────────────────────────────────────────────────────────────────────

def score_upsert_key(entry: RawMarkEntry) -> Tuple[str, str]:
    """Composite conflict key for per-question score rows."""
    return (entry.student_id, entry.question_id)


def attendance_upsert_key(record: AttendanceRecord) -> Tuple[str, str]:
    """Composite conflict key for attendance rows."""
    return (record.student_id, record.date)


def score_record(entry: RawMarkEntry) -> Dict[str, Any]:
    return {
        "student_id": entry.student_id,
        "test_question_id": entry.question_id,
        "scored_marks": entry.scored_marks,
    }


def score_entry_from_record(data: Dict[str, Any]) -> RawMarkEntry:
    return RawMarkEntry(
        question_id=str(data["test_question_id"]),
        scored_marks=int(data.get("scored_marks") or 0),
        student_id=str(data.get("student_id", "")),
    )


def merge_upserts(rows: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """
    Collapse rows sharing a key, later rows winning.

    Mirrors the storage collaborator's conflict handling so in-memory
    batches agree with what a bulk upsert would persist. The surviving
    row keeps the position of the first row with its key.

    Example:
        >>> merged = merge_upserts(entries, score_upsert_key)
    """
    merged: Dict[Hashable, T] = {}
    for row in rows:
        merged[key(row)] = row
    return list(merged.values())
