"""
Tests for core.utils.serialization

Test Coverage:
- question_records() / question_from_record(): Question row shapes
- Upsert keys and merge_upserts(): Last-write-wins conflict handling
- score_record() / score_entry_from_record(): Score row shapes
"""
import pytest

from lesson_toolkit.core.models.attendance import AttendanceRecord
from lesson_toolkit.core.models.questions import DraftQuestion
from lesson_toolkit.core.models.scores import RawMarkEntry
from lesson_toolkit.core.schemas.validator import ValidationError
from lesson_toolkit.core.utils.serialization import (
    attendance_upsert_key,
    merge_upserts,
    question_from_record,
    question_records,
    score_entry_from_record,
    score_record,
    score_upsert_key,
)


class TestQuestionRecords:
    """Tests for question row building."""

    def test_rows_include_test_id(self):
        drafts = [DraftQuestion("A", 2, 1), DraftQuestion("B", 3, 2)]

        rows = question_records(drafts, test_id="t1")

        assert rows == [
            {"question_text": "A", "total_marks": 2, "question_order": 1, "test_id": "t1"},
            {"question_text": "B", "total_marks": 3, "question_order": 2, "test_id": "t1"},
        ]

    def test_gap_in_order_raises(self):
        drafts = [DraftQuestion("A", 2, 1), DraftQuestion("B", 3, 3)]

        with pytest.raises(ValidationError, match="question_order must be dense"):
            question_records(drafts)

    def test_question_from_record_validates(self):
        with pytest.raises(ValidationError, match="Invalid total_marks"):
            question_from_record({
                "id": "q1", "question_text": "A", "total_marks": 0, "question_order": 1,
            })

    def test_question_from_record(self):
        q = question_from_record({
            "id": "q1", "test_id": "t1", "question_text": "A", "total_marks": 4, "question_order": 1,
        })
        assert (q.id, q.test_id, q.total_marks) == ("q1", "t1", 4)


class TestUpserts:
    """Tests for upsert keys and merging."""

    def test_score_key(self):
        assert score_upsert_key(RawMarkEntry("q1", 2, "s1")) == ("s1", "q1")

    def test_attendance_key(self):
        assert attendance_upsert_key(AttendanceRecord("s1", "2026-10-18", "present")) == ("s1", "2026-10-18")

    def test_merge_last_write_wins_in_first_position(self):
        # Arrange
        first = RawMarkEntry("q1", 2, "s1")
        other = RawMarkEntry("q2", 3, "s1")
        rewrite = RawMarkEntry("q1", 4, "s1")

        # Act
        merged = merge_upserts([first, other, rewrite], score_upsert_key)

        # Assert
        assert merged == [rewrite, other]

    def test_merge_is_idempotent(self):
        rows = [
            AttendanceRecord("s1", "2026-10-18", "present"),
            AttendanceRecord("s1", "2026-10-18", "late"),
        ]

        once = merge_upserts(rows, attendance_upsert_key)

        assert merge_upserts(once, attendance_upsert_key) == once
        assert merge_upserts(rows + rows, attendance_upsert_key) == once


class TestScoreRecords:
    """Tests for score row shapes."""

    def test_score_record(self):
        assert score_record(RawMarkEntry("q1", 2, "s1")) == {
            "student_id": "s1",
            "test_question_id": "q1",
            "scored_marks": 2,
        }

    def test_score_entry_from_record_inverts_score_record(self):
        entry = RawMarkEntry("q1", 2, "s1")
        assert score_entry_from_record(score_record(entry)) == entry

    def test_score_entry_from_record_null_marks(self):
        entry = score_entry_from_record({"student_id": "s1", "test_question_id": "q1", "scored_marks": None})
        assert entry.scored_marks == 0
