"""
Ingest a test PDF and print the question records it would produce.

Runs text extraction and the ingestion fallback chain, then prints the
question rows, total marks and whether placeholder questions were used.

Usage:
    python scripts/ingest_test_pdf.py quiz.pdf --title "Fractions Quiz" --kind pretest
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path so we can import lesson_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from lesson_toolkit.core.models.lessons import AssessmentKind
from lesson_toolkit.ingestion import IngestionConfig, ingest_pdf

logger = logging.getLogger("ingest_test_pdf")


def main() -> int:
    parser = argparse.ArgumentParser(description="Parse questions from a test PDF")
    parser.add_argument("pdf", type=Path, help="Path to the test PDF")
    parser.add_argument("--title", type=str, default=None, help="Test title (defaults to file name)")
    parser.add_argument(
        "--kind",
        choices=[k.value for k in AssessmentKind],
        default=AssessmentKind.PRETEST.value,
        help="Test kind",
    )
    parser.add_argument("--test-id", type=str, default=None, help="Include test_id in each record")
    parser.add_argument("--lookahead", type=int, default=None, help="Marks lookahead lines")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.pdf.exists():
        logger.error(f"PDF not found: {args.pdf}")
        return 1

    config = IngestionConfig()
    if args.lookahead is not None:
        config = IngestionConfig(marks_lookahead_lines=args.lookahead)

    title = args.title or args.pdf.stem
    result = ingest_pdf(args.pdf, title, args.kind, config=config)

    print(json.dumps(
        {
            "title": title,
            "kind": args.kind,
            "strategy": result.strategy,
            "used_fallback": result.used_fallback,
            "total_marks": result.total_marks,
            "warnings": list(result.warnings),
            "questions": result.to_records(args.test_id),
        },
        indent=2,
        ensure_ascii=False,
    ))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
