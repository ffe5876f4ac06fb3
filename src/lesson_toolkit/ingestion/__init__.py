"""
Module: ingestion

Purpose:
    Test ingestion: turns extracted document text into numbered, graded
    questions with a layered fallback so a test is never left without
    questions.

Key Functions:
    - ingest_questions(): Main entry point for extracted text
    - ingest_pdf(): Extraction + ingestion for an uploaded PDF
    - parse_questions(): Parser strategy chain only

Key Classes:
    - IngestionConfig: Configuration for parsing
    - IngestionResult: Container for ingestion output

Dependencies:
    - fitz (PyMuPDF): Text extraction from uploaded PDFs
"""

from .config import IngestionConfig
from .parser import parse_enumerated, parse_loose_lines, parse_questions, run_strategies
from .pipeline import IngestionResult, ingest_pdf, ingest_questions
from .samples import generate_sample_questions, is_sample_question
from .utils.pdf import ExtractionError, extract_text_from_pdf

__all__ = [
    "IngestionConfig",
    "IngestionResult",
    "ingest_pdf",
    "ingest_questions",
    "parse_enumerated",
    "parse_loose_lines",
    "parse_questions",
    "run_strategies",
    "generate_sample_questions",
    "is_sample_question",
    "ExtractionError",
    "extract_text_from_pdf",
]
