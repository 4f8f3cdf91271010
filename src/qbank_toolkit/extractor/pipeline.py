"""
Module: extractor.pipeline

Purpose:
    Main pipeline orchestrator for question-bank text extraction.
    Coordinates normalization, segmentation (line-based, then inline
    fallback) and conversion to Question records.

Key Functions:
    - parse_questions(): Raw text -> ExtractedQuestion list
    - extract_questions(): Raw text -> Question list in one call

Key Classes:
    - ExtractionError: Base class for extraction failures
    - NoQuestionTableFound: No question boundary found anywhere

Dependencies:
    - extractor.utils.text: Line splitting
    - extractor.segmentation: Primary and fallback segmenters
    - extractor.builder: Question assembly

Used By:
    - qbank_toolkit.cli: Command-line extraction
"""

from __future__ import annotations

import logging
from typing import List, Optional

from qbank_toolkit.core.models.candidates import ExtractedQuestion
from qbank_toolkit.core.models.questions import Question

from .builder import Clock, convert_to_questions
from .config import ExtractionConfig
from .diagnostics import DiagnosticsCollector
from .segmentation import segment_lines, segment_text
from .utils.text import split_lines

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Base class for errors raised by the extraction pipeline."""


class NoQuestionTableFound(ExtractionError):
    """
    Raised when neither segmenter finds any question.

    Distinguishes "input is not a recognizable question bank" from a
    successful run; callers should ask for a different document.

    Attributes:
        line_count: Non-empty lines in the rejected input.
        char_count: Characters in the rejected input.
    """

    def __init__(self, line_count: int = 0, char_count: int = 0):
        super().__init__(
            "Could not find question table in the document. "
            "Please ensure it contains numbered questions."
        )
        self.line_count = line_count
        self.char_count = char_count


def parse_questions(
    text: str,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[ExtractedQuestion]:
    """
    Extract questions from question-bank text.

    Pipeline:
    1. Split text into normalized lines
    2. Segment numbered lines (header lines skipped, lookahead metadata)
    3. If that finds nothing, segment the whole text by inline numbering
    4. Fail if both stages find nothing

    Args:
        text: Document text, pages concatenated in page order.
        config: Optional extraction configuration.
        diagnostics: Optional collector for heuristic decisions.

    Returns:
        ExtractedQuestion list in document order.

    Raises:
        NoQuestionTableFound: If no question boundary is found at all.

    Example:
        >>> qs = parse_questions("1. Define algorithm. CO1 L2 08\\n2. Explain sorting. CO3 L1 05")
        >>> [(q.serial_number, q.course_outcome, q.level, q.marks) for q in qs]
        [('1', '1', '2', 8), ('2', '3', '1', 5)]
    """
    config = config or ExtractionConfig()
    lines = split_lines(text)

    questions = segment_lines(lines, config=config, diagnostics=diagnostics)

    if not questions and config.use_fallback:
        logger.info(f"No numbered lines among {len(lines)} lines, trying inline numbering")
        if diagnostics is not None:
            diagnostics.add_fallback_used(len(lines))
        questions = segment_text(text, config=config, diagnostics=diagnostics)

    if not questions:
        raise NoQuestionTableFound(line_count=len(lines), char_count=len(text))

    logger.info(f"Extracted {len(questions)} questions")
    return questions


def extract_questions(
    text: str,
    subject: Optional[str] = None,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    clock: Optional[Clock] = None,
) -> List[Question]:
    """
    Parse text and convert the result to Question records.

    Args:
        text: Document text, pages concatenated in page order.
        subject: Subject label. Defaults to config.default_subject.
        config: Optional extraction configuration.
        diagnostics: Optional collector for heuristic decisions.
        clock: Optional timestamp source.

    Returns:
        Question list in document order.

    Raises:
        NoQuestionTableFound: If no question boundary is found at all.
    """
    config = config or ExtractionConfig()
    extracted = parse_questions(text, config=config, diagnostics=diagnostics)
    return convert_to_questions(
        extracted,
        subject if subject is not None else config.default_subject,
        clock=clock,
    )
