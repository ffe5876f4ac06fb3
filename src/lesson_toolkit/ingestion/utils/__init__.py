"""Text and document utilities for question ingestion."""

from .pdf import ExtractionError, extract_page_text, extract_text_from_pdf
from .text import sanitize_line, split_lines

__all__ = [
    "ExtractionError",
    "extract_page_text",
    "extract_text_from_pdf",
    "sanitize_line",
    "split_lines",
]
