"""
Module: ingestion.utils.pdf

Purpose:
    Document text extraction. Given the bytes (or path) of an uploaded
    test PDF, returns its plain text with one line per text line and a
    blank line between pages, or raises ExtractionError.

Key Functions:
    - extract_text_from_pdf(): Extract cleaned text from a whole document
    - extract_page_text(): Extract cleaned text from one page

Key Classes:
    - ExtractionError: Raised when no usable text can be extracted

Dependencies:
    - fitz (PyMuPDF): PDF parsing and text extraction

Used By:
    - ingestion.pipeline.ingest_pdf: Upload path
    - scripts/ingest_test_pdf.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import fitz

from .text import split_lines

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ExtractionError(Exception):
    """Raised when a document yields no extractable text."""


def extract_page_text(page: fitz.Page) -> str:
    """
    Extract cleaned text from a single page.

    Args:
        page: PyMuPDF page object.

    Returns:
        Page text with blank lines removed; empty string on error.
    """
    try:
        raw = page.get_text("text") or ""
    except (RuntimeError, ValueError) as e:
        logger.warning(f"Failed to extract text from page {page.number + 1}: {e}")
        return ""
    return "\n".join(split_lines(raw))


def extract_text_from_pdf(source: Union[bytes, Path]) -> str:
    """
    Extract text from every page of a PDF.

    Pages that fail or contain no text are skipped; the remaining page
    texts are joined with a blank line.

    Args:
        source: Raw PDF bytes or a path to a PDF file.

    Returns:
        Extracted text (never empty).

    Raises:
        ExtractionError: If the document cannot be opened, is password
            protected, or contains no selectable text.
        FileNotFoundError: If a path is given and does not exist.

    Example:
        >>> text = extract_text_from_pdf(Path("quiz.pdf"))
        >>> text.splitlines()[0]
        '1. What is 2+2? [2 marks]'
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            doc = fitz.open(stream=bytes(source), filetype="pdf")
        else:
            doc = fitz.open(source)
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(
            "Failed to load PDF document. The file may be corrupted or not a valid PDF."
        ) from e

    with doc:
        if doc.needs_pass:
            raise ExtractionError(
                "This PDF is password protected. Please provide an unprotected PDF."
            )

        page_texts: List[str] = []
        for page in doc:
            text = extract_page_text(page)
            if text:
                page_texts.append(text)
                logger.debug(f"Page {page.number + 1}: extracted {len(text)} characters")
            else:
                logger.debug(f"Page {page.number + 1}: no text content found")

        page_count = doc.page_count

    full_text = PAGE_SEPARATOR.join(page_texts).strip()
    if not full_text:
        raise ExtractionError(
            "No text content could be extracted from the PDF. This might be an "
            "image-based PDF or the text is not selectable."
        )

    logger.info(
        f"Extracted {len(full_text)} characters from {len(page_texts)}/{page_count} pages"
    )
    return full_text
