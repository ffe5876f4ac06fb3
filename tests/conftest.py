import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import lesson_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from lesson_toolkit.core.models.questions import Question


# Common test fixtures
@pytest.fixture
def make_question():
    """Factory for persisted questions with sensible defaults."""
    def _make(qid: str, total_marks: int = 1, order: int = 1, text: str = "", test_id: str = "t1"):
        return Question(
            id=qid,
            test_id=test_id,
            question_text=text or f"Question {qid}",
            total_marks=total_marks,
            question_order=order,
        )
    return _make


@pytest.fixture
def two_five_mark_questions(make_question):
    """q1 and q2, each worth 5 marks."""
    return [make_question("q1", 5, 1), make_question("q2", 5, 2)]


@pytest.fixture
def make_pdf():
    """Build an in-memory PDF; one list of text lines per page."""
    def _make(pages):
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            y = 72
            for line in lines:
                page.insert_text((72, y), line, fontsize=11)
                y += 20
        data = doc.tobytes()
        doc.close()
        return data
    return _make
