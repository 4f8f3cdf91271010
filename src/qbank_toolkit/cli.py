"""
Module: cli

Purpose:
    Command-line entry point. Decodes a question-bank PDF (or reads a
    text file), runs the extraction pipeline and prints the questions
    as JSON.

Key Functions:
    - main(): Parse arguments and run extraction, returns exit code

Exit Codes:
    0: Questions extracted
    1: No question table found in the input
    2: Input could not be read or decoded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .extractor import DiagnosticsCollector, ExtractionConfig, NoQuestionTableFound, extract_questions
from .extractor.utils.pdf import DocumentDecodeError, extract_document_text

logger = logging.getLogger("qbank_toolkit")

EXIT_OK = 0
EXIT_NO_QUESTIONS = 1
EXIT_BAD_INPUT = 2


def _read_input(path: Path) -> str:
    """Return document text for a .pdf or plain-text input file."""
    if path.suffix.lower() == ".pdf":
        return extract_document_text(path)
    return path.read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qbank-extract",
        description="Extract structured questions from a question-bank PDF or text file",
    )
    parser.add_argument("input", type=Path, help="Question-bank .pdf or UTF-8 text file")
    parser.add_argument("--subject", "-s", help="Subject label for the extracted questions")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--diagnostics", type=Path, help="Write a diagnostics report (JSON)")
    parser.add_argument("--no-fallback", action="store_true", help="Disable inline-numbering fallback")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logs go to stderr so stdout stays valid JSON
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        text = _read_input(args.input)
    except DocumentDecodeError as e:
        logger.error(f"Could not decode document: {e}")
        return EXIT_BAD_INPUT
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return EXIT_BAD_INPUT

    config = ExtractionConfig(use_fallback=not args.no_fallback)
    collector = DiagnosticsCollector() if args.diagnostics else None

    try:
        questions = extract_questions(
            text,
            args.subject,
            config=config,
            diagnostics=collector,
        )
    except NoQuestionTableFound as e:
        logger.error(str(e))
        return EXIT_NO_QUESTIONS
    finally:
        if collector is not None:
            collector.generate_report(source=args.input.name).save(args.diagnostics)

    payload = json.dumps([q.to_dict() for q in questions], indent=2, ensure_ascii=False)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(questions)} questions to {args.output}")
    else:
        print(payload)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
