"""
Utils Package

Record serialization, upsert keys and question order maintenance.
"""

from .ordering import (
    add_question,
    move_question,
    remove_question,
    renumber_questions,
)
from .serialization import (
    attendance_upsert_key,
    merge_upserts,
    question_from_record,
    question_records,
    score_entry_from_record,
    score_record,
    score_upsert_key,
)

__all__ = [
    "add_question",
    "move_question",
    "remove_question",
    "renumber_questions",
    "attendance_upsert_key",
    "merge_upserts",
    "question_from_record",
    "question_records",
    "score_entry_from_record",
    "score_record",
    "score_upsert_key",
]
