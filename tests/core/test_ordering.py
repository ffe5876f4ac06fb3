"""
Tests for core.utils.ordering

Every edit must leave question_order dense 1..N.
"""
import pytest

from lesson_toolkit.core.models.questions import DraftQuestion
from lesson_toolkit.core.utils.ordering import (
    add_question,
    move_question,
    remove_question,
    renumber_questions,
)


@pytest.fixture
def drafts():
    return [
        DraftQuestion("First", 1, 1),
        DraftQuestion("Second", 2, 2),
        DraftQuestion("Third", 3, 3),
    ]


def _orders(questions):
    return [q.question_order for q in questions]


def _texts(questions):
    return [q.question_text for q in questions]


def test_renumber_fills_gaps():
    questions = [DraftQuestion("A", 1, 2), DraftQuestion("B", 1, 7)]

    renumbered = renumber_questions(questions)

    assert _orders(renumbered) == [1, 2]
    assert _texts(renumbered) == ["A", "B"]


def test_renumber_keeps_correct_items(drafts):
    renumbered = renumber_questions(drafts)
    assert all(a is b for a, b in zip(renumbered, drafts))


def test_add_appends_by_default(drafts):
    added = add_question(drafts, DraftQuestion("Fourth", 1, 99))

    assert _orders(added) == [1, 2, 3, 4]
    assert _texts(added)[-1] == "Fourth"


def test_add_inserts_at_position(drafts):
    added = add_question(drafts, DraftQuestion("New", 1, 99), position=1)

    assert _texts(added) == ["New", "First", "Second", "Third"]
    assert _orders(added) == [1, 2, 3, 4]


def test_add_does_not_mutate_input(drafts):
    add_question(drafts, DraftQuestion("New", 1, 99), position=1)
    assert _texts(drafts) == ["First", "Second", "Third"]


@pytest.mark.parametrize("position", [0, 5])
def test_add_out_of_range_raises(drafts, position):
    with pytest.raises(IndexError):
        add_question(drafts, DraftQuestion("New", 1, 1), position=position)


def test_remove_repacks_order(drafts):
    removed = remove_question(drafts, 2)

    assert _texts(removed) == ["First", "Third"]
    assert _orders(removed) == [1, 2]


def test_remove_out_of_range_raises(drafts):
    with pytest.raises(IndexError):
        remove_question(drafts, 4)


def test_move_last_to_first(drafts):
    moved = move_question(drafts, 3, 1)

    assert _texts(moved) == ["Third", "First", "Second"]
    assert _orders(moved) == [1, 2, 3]


def test_move_keeps_marks_with_question(drafts):
    moved = move_question(drafts, 1, 3)
    assert [(q.question_text, q.total_marks) for q in moved] == [("Second", 2), ("Third", 3), ("First", 1)]


def test_move_out_of_range_raises(drafts):
    with pytest.raises(IndexError):
        move_question(drafts, 1, 4)
