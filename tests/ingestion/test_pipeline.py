"""
Tests for ingestion.pipeline

Test Coverage:
- ingest_questions(): Parser -> sample -> minimum fallback chain
- ingest_pdf(): Extraction failures do not stop ingestion
- IngestionResult: Numbering, totals and storage records
"""
import pytest

from lesson_toolkit.core.models.questions import ParsedQuestion
from lesson_toolkit.ingestion.config import IngestionConfig
from lesson_toolkit.ingestion.pipeline import (
    STRATEGY_MINIMUM,
    STRATEGY_SAMPLE,
    ingest_pdf,
    ingest_questions,
)
from lesson_toolkit.ingestion.samples import SAMPLE_QUESTION_TAG, is_sample_question


# ─────────────────────────────────────────────────────────────────────────────
# ingest_questions
# ─────────────────────────────────────────────────────────────────────────────

class TestIngestQuestions:
    """Tests for the ingestion fallback chain."""

    def test_ingest_when_text_parses_then_numbered_questions(self):
        # Arrange
        text = "1. What is 2+2? [2 marks]\n2. Name a prime. (1 mark)"

        # Act
        result = ingest_questions(text, "Quiz A", "pretest")

        # Assert
        assert result.strategy == "enumerated"
        assert result.used_fallback is False
        assert result.question_count == 2
        assert result.total_marks == 3
        assert [q.question_order for q in result.questions] == [1, 2]
        assert [q.question_text for q in result.questions] == ["What is 2+2?", "Name a prime."]
        assert result.warnings == ()

    def test_ingest_when_no_text_then_single_sample_question(self):
        result = ingest_questions(None, "Quiz A", "pretest")

        assert result.question_count == 1
        assert result.total_marks == 1
        assert result.used_fallback is True
        assert result.strategy == STRATEGY_SAMPLE
        assert result.questions[0].question_order == 1
        assert result.questions[0].question_text.startswith(SAMPLE_QUESTION_TAG)
        assert "Quiz A" in result.questions[0].question_text
        assert result.warnings == ("No document text available",)

    def test_ingest_when_text_unparseable_then_sample_with_warning(self):
        result = ingest_questions("abc\nxy", "Quiz A", "posttest")

        assert result.used_fallback is True
        assert result.strategy == STRATEGY_SAMPLE
        assert "posttest" in result.questions[0].question_text
        assert result.warnings == ("No questions could be parsed from the document text",)

    def test_ingest_when_only_loose_matches_then_not_a_fallback(self):
        """Loose parsing still comes from the document, so no review flag."""
        result = ingest_questions("What is the capital of France?", "Geo", "pretest")

        assert result.strategy == "loose"
        assert result.used_fallback is False

    def test_ingest_when_sample_generator_empty_then_minimum_question(self):
        # Act
        result = ingest_questions(None, "Quiz A", "pretest", sample_generator=lambda title, kind: [])

        # Assert
        assert result.strategy == STRATEGY_MINIMUM
        assert result.used_fallback is True
        assert result.question_count == 1
        assert result.total_marks == 1
        assert is_sample_question(result.questions[0].question_text)

    def test_ingest_when_custom_sample_generator_then_numbered(self):
        def generator(title, kind):
            return [ParsedQuestion(f"{title} warm-up", 2), ParsedQuestion(f"{title} main", 3)]

        result = ingest_questions("", "Quiz B", "pretest", sample_generator=generator)

        assert [q.question_order for q in result.questions] == [1, 2]
        assert result.total_marks == 5

    def test_ingest_when_oversized_number_in_text_then_parsed_questions_kept(self):
        """A very long digit run does not push ingestion onto the fallback."""
        text = "1. What is 2+2? [2 marks]\n2. Foo " + "9" * 5000 + " marks"

        result = ingest_questions(text, "Quiz", "pretest")

        assert result.strategy == "enumerated"
        assert result.used_fallback is False
        assert result.question_count == 2
        assert result.total_marks == 3

    def test_ingest_when_questions_are_only_markers_then_not_a_fallback(self):
        result = ingest_questions("1. [2 marks]\n2. [3 marks]", "Quiz", "pretest")

        assert result.strategy == "enumerated"
        assert result.total_marks == 5

    def test_ingest_when_config_given_then_passed_to_parser(self):
        config = IngestionConfig(default_marks=2)

        result = ingest_questions("1. No marker here", "Quiz", "pretest", config=config)

        assert result.total_marks == 2

    def test_ingest_when_caller_warnings_then_carried(self):
        result = ingest_questions(None, "Quiz", "pretest", warnings=["extraction failed"])

        assert result.warnings[0] == "extraction failed"

    @pytest.mark.parametrize("text", [
        None,
        "",
        "abc",
        "1.\n2.",
        "1. Only question",
        "Line long enough to count\nAnother long enough line",
    ])
    def test_ingest_never_returns_zero_questions(self, text):
        result = ingest_questions(text, "Quiz", "pretest")

        assert result.question_count >= 1
        assert result.total_marks == sum(q.total_marks for q in result.questions)
        assert [q.question_order for q in result.questions] == list(range(1, result.question_count + 1))

    def test_ingest_is_deterministic(self):
        text = "1) Explain osmosis. [2 marks]\n2) Define diffusion."

        assert ingest_questions(text, "Q", "pretest") == ingest_questions(text, "Q", "pretest")


class TestIngestionResultRecords:
    """Tests for IngestionResult.to_records."""

    def test_to_records_with_test_id(self):
        result = ingest_questions("1. What is 2+2? [2 marks]", "Quiz", "pretest")

        assert result.to_records("t9") == [
            {"question_text": "What is 2+2?", "total_marks": 2, "question_order": 1, "test_id": "t9"},
        ]

    def test_to_records_without_test_id(self):
        result = ingest_questions(None, "Quiz", "pretest")

        assert "test_id" not in result.to_records()[0]


# ─────────────────────────────────────────────────────────────────────────────
# ingest_pdf
# ─────────────────────────────────────────────────────────────────────────────

class TestIngestPdf:
    """Tests for PDF extraction + ingestion."""

    def test_ingest_pdf_when_text_pdf_then_parsed(self, make_pdf):
        pdf = make_pdf([["1. What is 2+2? [2 marks]", "2. Name a prime. (1 mark)"]])

        result = ingest_pdf(pdf, "Quiz A", "pretest")

        assert result.strategy == "enumerated"
        assert result.total_marks == 3
        assert result.used_fallback is False

    def test_ingest_pdf_when_blank_pdf_then_sample_and_warning(self, make_pdf):
        pdf = make_pdf([[]])

        result = ingest_pdf(pdf, "Quiz A", "pretest")

        assert result.used_fallback is True
        assert result.question_count == 1
        assert any("No text content" in w for w in result.warnings)

    def test_ingest_pdf_when_unreadable_bytes_then_sample_and_warning(self):
        result = ingest_pdf(b"", "Quiz A", "pretest")

        assert result.used_fallback is True
        assert any("Failed to load PDF" in w for w in result.warnings)
