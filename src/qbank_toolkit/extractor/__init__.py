"""
Module: extractor

Purpose:
    Extraction pipeline for turning decoded question-bank text into
    structured questions with course outcome, level, marks, module and
    difficulty.

Key Functions:
    - parse_questions(): Text -> ExtractedQuestion list
    - convert_to_questions(): ExtractedQuestion list -> Question list
    - extract_questions(): Both steps in one call

Key Classes:
    - ExtractionConfig: Configuration for extraction settings
    - NoQuestionTableFound: Raised when no question is found at all

Dependencies:
    - qbank_toolkit.core.models: Candidate and question records

Used By:
    - qbank_toolkit.cli: Command-line extraction
"""

from .builder import convert_to_questions
from .config import DEFAULT_SUBJECT, ExtractionConfig
from .diagnostics import DiagnosticsCollector
from .pipeline import ExtractionError, NoQuestionTableFound, extract_questions, parse_questions

__all__ = [
    "parse_questions",
    "convert_to_questions",
    "extract_questions",
    "ExtractionConfig",
    "DiagnosticsCollector",
    "ExtractionError",
    "NoQuestionTableFound",
    "DEFAULT_SUBJECT",
]
