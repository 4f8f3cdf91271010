"""
Module: extractor.segmentation.fallback

Purpose:
    Fallback question segmenter for documents whose questions are not on
    separate numbered lines (decoders that join a page into one run of
    text). Splits on inline "<n>." / "<n>)" markers across the whole text.

Key Functions:
    - segment_text(): Raw text -> ordered ExtractedQuestion list

Dependencies:
    - extractor.utils.text: Whitespace collapsing
    - extractor.detection.headers: Embedded header detection
    - extractor.detection.metadata: CO/level/marks extraction

Used By:
    - extractor.pipeline: Runs only when line segmentation finds nothing
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from qbank_toolkit.core.models.candidates import ExtractedQuestion, QuestionCandidate

from ..config import ExtractionConfig
from ..detection.headers import count_header_keywords, find_header_run
from ..detection.metadata import extract_metadata
from ..diagnostics import DiagnosticsCollector
from ..utils.text import collapse_whitespace
from .finalize import finalize_candidate

logger = logging.getLogger(__name__)

# "<n>." or "<n>)" followed by whitespace, not glued to a word or a dot
# (skips "CO1.", "g1)", "3.5.")
_MARKER = r"(?<![\w.])\d{1,3}[.)](?=\s)"
INLINE_QUESTION_PATTERN = re.compile(
    rf"(?<![\w.])(\d{{1,3}})[.)]\s+(.*?)(?={_MARKER}|$)",
    re.DOTALL,
)


def segment_text(
    text: str,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[ExtractedQuestion]:
    """
    Split undifferentiated text into questions by inline numbering.

    Each capture runs from one marker to the next (or end of text).
    Captures not longer than min_fallback_chars are discarded; this floor
    is stricter than the line path because a bare inline numeral is a
    weaker boundary signal. Line-level header filtering does not apply
    here; a capture is instead cut where an embedded table header begins
    (headers repeated on later pages of joined text).

    Args:
        text: Raw document text.
        config: Optional extraction configuration.
        diagnostics: Optional collector for dropped records.

    Returns:
        ExtractedQuestion list in document order.

    Example:
        >>> qs = segment_text("Bank 1. Define algorithm. CO1 L2 08 2. Explain sorting. CO3 L1 05")
        >>> [q.serial_number for q in qs]
        ['1', '2']
    """
    config = config or ExtractionConfig()
    questions: List[ExtractedQuestion] = []

    for match in INLINE_QUESTION_PATTERN.finditer(collapse_whitespace(text)):
        serial_number, body = match.group(1), match.group(2).strip()
        header_at = find_header_run(body, min_keywords=config.header_keyword_threshold)
        if header_at >= 0:
            logger.debug(f"Cutting embedded header from inline capture Q{serial_number}")
            if diagnostics is not None:
                header = body[header_at:]
                diagnostics.add_header_skipped(header, count_header_keywords(header))
            body = body[:header_at].rstrip()
        if len(body) <= config.min_fallback_chars:
            logger.debug(f"Discarding inline capture Q{serial_number}: {body!r}")
            if diagnostics is not None:
                diagnostics.add_candidate_dropped(
                    serial_number,
                    body,
                    f"inline capture of {len(body)} chars, need more than {config.min_fallback_chars}",
                )
            continue

        candidate = QuestionCandidate(serial_number=serial_number, raw_text=body)
        extract_metadata(candidate, candidate.search_text)
        extracted = finalize_candidate(
            candidate,
            min_chars=config.min_content_chars,
            diagnostics=diagnostics,
        )
        if extracted is not None:
            questions.append(extracted)

    logger.debug(f"Inline segmentation produced {len(questions)} questions")
    return questions
