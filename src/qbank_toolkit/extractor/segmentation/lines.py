"""
Module: extractor.segmentation.lines

Purpose:
    Primary question segmenter. Scans normalized lines once, opening a
    candidate at every "<n>. <text>" line and accumulating continuation
    lines until the next question starts.

Key Functions:
    - segment_lines(): Line sequence -> ordered ExtractedQuestion list
    - match_question_start(): Parse "<n>. <text>" lines

Dependencies:
    - extractor.detection.headers: Header line skipping
    - extractor.detection.metadata: CO/level/marks extraction
    - extractor.segmentation.finalize: Cleaning and threshold

Used By:
    - extractor.pipeline: First segmentation stage
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from qbank_toolkit.common.thresholds import SEGMENTATION_THRESHOLDS
from qbank_toolkit.core.models.candidates import ExtractedQuestion, QuestionCandidate

from ..config import ExtractionConfig
from ..detection.headers import count_header_keywords, is_header_line
from ..detection.metadata import extract_metadata, is_metadata_line
from ..diagnostics import DiagnosticsCollector
from .finalize import finalize_candidate

logger = logging.getLogger(__name__)

QUESTION_START_PATTERN = re.compile(r"^(\d+)\.\s*(.+)$")


def match_question_start(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a line that starts a numbered question.

    Returns:
        (serial_number, content) or None if the line is not a question start.

    Example:
        >>> match_question_start("12. Explain sorting. CO3 L1 05")
        ('12', 'Explain sorting. CO3 L1 05')
        >>> match_question_start("CO3 L1 05") is None
        True
    """
    match = QUESTION_START_PATTERN.match(line)
    if not match:
        return None
    return match.group(1), match.group(2).strip()


def _lookahead(
    lines: Sequence[str],
    index: int,
    config: ExtractionConfig,
) -> List[str]:
    """Collect up to lookahead_lines following lines for metadata search."""
    buffer: List[str] = []
    for line in lines[index + 1:index + 1 + config.lookahead_lines]:
        if is_header_line(line, threshold=config.header_keyword_threshold):
            continue
        if match_question_start(line):
            break  # Belongs to the next question
        buffer.append(line)
    return buffer


def segment_lines(
    lines: Sequence[str],
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[ExtractedQuestion]:
    """
    Split a normalized line sequence into questions.

    Algorithm:
    1. Header lines are skipped; they never open, close or extend a candidate
    2. A "<n>. <text>" line closes the open candidate and opens a new one
    3. Metadata is read from the new content plus a bounded lookahead
       buffer, which never reaches the question text
    4. While a candidate is open, metadata-only lines feed extraction and
       longer prose lines are appended to the question text
    5. End of input closes the last candidate

    Args:
        lines: Non-empty stripped lines in document order.
        config: Optional extraction configuration.
        diagnostics: Optional collector for skipped/dropped records.

    Returns:
        ExtractedQuestion list in document order. Empty when no line
        starts a numbered question.

    Example:
        >>> segment_lines(["1. Define algorithm. CO1 L2 08"])[0].marks
        8
    """
    config = config or ExtractionConfig()
    questions: List[ExtractedQuestion] = []
    current: Optional[QuestionCandidate] = None

    def close(candidate: QuestionCandidate) -> None:
        extracted = finalize_candidate(
            candidate,
            min_chars=config.min_content_chars,
            diagnostics=diagnostics,
        )
        if extracted is not None:
            questions.append(extracted)

    for index, line in enumerate(lines):
        if is_header_line(line, threshold=config.header_keyword_threshold):
            logger.debug(f"Skipping header line: {line[:60]!r}")
            if diagnostics is not None:
                diagnostics.add_header_skipped(line, count_header_keywords(line))
            continue

        start = match_question_start(line)
        if start:
            if current is not None:
                close(current)
            serial_number, content = start
            current = QuestionCandidate(serial_number=serial_number, raw_text=content)
            current.search_buffer.extend(_lookahead(lines, index, config))
            extract_metadata(current, current.search_text)
            continue

        if current is None:
            continue  # Preamble before the first question

        if is_metadata_line(line):
            extract_metadata(current, line)
        elif current.raw_text and len(line) > SEGMENTATION_THRESHOLDS.min_continuation_chars:
            current.append_text(line)

    if current is not None:
        close(current)

    logger.debug(f"Line segmentation produced {len(questions)} questions from {len(lines)} lines")
    return questions
