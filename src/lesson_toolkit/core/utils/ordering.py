"""
Module: core.utils.ordering

Purpose:
    Keeps question_order dense and contiguous (1..N) across edits. Every
    function returns a new list; inputs are never mutated.

Key Functions:
    - renumber_questions(): Reassign order 1..N from list position
    - add_question(): Append or insert, then renumber
    - remove_question(): Drop by position, then renumber
    - move_question(): Move from one position to another, then renumber

Dependencies:
    - dataclasses.replace (std)

Used By:
    - ingestion.pipeline: Numbers the final parsed list once
    - Question editors in the dashboard
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, TypeVar

# Any frozen dataclass with a question_order field
Q = TypeVar("Q")


def renumber_questions(questions: Sequence[Q]) -> List[Q]:
    """
    Assign question_order 1..N following list position.

    Questions already carrying the right order are returned unchanged.

    Example:
        >>> [q.question_order for q in renumber_questions(qs)]
        [1, 2, 3]
    """
    return [
        q if q.question_order == position else replace(q, question_order=position)
        for position, q in enumerate(questions, start=1)
    ]


def add_question(
    questions: Sequence[Q],
    question: Q,
    position: Optional[int] = None,
) -> List[Q]:
    """
    Insert a question and re-pack order.

    Args:
        questions: Current questions in order
        question: Question to add (its own question_order is ignored)
        position: 1-based position to insert at; None appends

    Raises:
        IndexError: If position is outside 1..N+1
    """
    items = list(questions)
    if position is None:
        position = len(items) + 1
    if not (1 <= position <= len(items) + 1):
        raise IndexError(f"position {position} outside 1..{len(items) + 1}")
    items.insert(position - 1, question)
    return renumber_questions(items)


def remove_question(questions: Sequence[Q], position: int) -> List[Q]:
    """
    Remove the question at a 1-based position and re-pack order.

    Raises:
        IndexError: If position is outside 1..N
    """
    items = list(questions)
    if not (1 <= position <= len(items)):
        raise IndexError(f"position {position} outside 1..{len(items)}")
    del items[position - 1]
    return renumber_questions(items)


def move_question(questions: Sequence[Q], from_position: int, to_position: int) -> List[Q]:
    """Move a question between 1-based positions and re-pack order."""
    items = list(questions)
    for pos in (from_position, to_position):
        if not (1 <= pos <= len(items)):
            raise IndexError(f"position {pos} outside 1..{len(items)}")
    item = items.pop(from_position - 1)
    items.insert(to_position - 1, item)
    return renumber_questions(items)
