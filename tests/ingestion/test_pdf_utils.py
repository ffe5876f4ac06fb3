"""
Tests for ingestion.utils.pdf

Uses small PDFs generated in memory with PyMuPDF.
"""
import fitz
import pytest

from lesson_toolkit.ingestion.utils.pdf import (
    PAGE_SEPARATOR,
    ExtractionError,
    extract_page_text,
    extract_text_from_pdf,
)


def test_extract_text_from_bytes(make_pdf):
    """One line of output per line of text on the page."""
    # Arrange
    pdf = make_pdf([["1. What is 2+2? [2 marks]", "2. Name a prime. (1 mark)"]])

    # Act
    text = extract_text_from_pdf(pdf)

    # Assert
    assert text.splitlines() == ["1. What is 2+2? [2 marks]", "2. Name a prime. (1 mark)"]


def test_extract_text_from_path(make_pdf, tmp_path):
    path = tmp_path / "quiz.pdf"
    path.write_bytes(make_pdf([["1. Define osmosis."]]))

    assert extract_text_from_pdf(path) == "1. Define osmosis."


def test_pages_joined_with_blank_line(make_pdf):
    pdf = make_pdf([["1. First page question"], ["2. Second page question"]])

    text = extract_text_from_pdf(pdf)

    assert text == f"1. First page question{PAGE_SEPARATOR}2. Second page question"


def test_blank_pages_skipped(make_pdf):
    pdf = make_pdf([[], ["1. Only question"]])

    assert extract_text_from_pdf(pdf) == "1. Only question"


def test_answer_lines_removed(make_pdf):
    pdf = make_pdf([["1. Explain osmosis.", "....................", "[2 marks]"]])

    assert extract_text_from_pdf(pdf).splitlines() == ["1. Explain osmosis.", "[2 marks]"]


def test_no_text_raises(make_pdf):
    with pytest.raises(ExtractionError, match="No text content"):
        extract_text_from_pdf(make_pdf([[]]))


def test_empty_bytes_raise():
    with pytest.raises(ExtractionError, match="Failed to load PDF"):
        extract_text_from_pdf(b"")


def test_password_protected_raises():
    # Arrange
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "1. Secret question")
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner",
        user_pw="user",
    )
    doc.close()

    # Act / Assert
    with pytest.raises(ExtractionError, match="password protected"):
        extract_text_from_pdf(data)


def test_extract_page_text(make_pdf):
    doc = fitz.open(stream=make_pdf([["Describe the water cycle"]]), filetype="pdf")
    try:
        assert extract_page_text(doc[0]) == "Describe the water cycle"
    finally:
        doc.close()
