"""
Module: extractor.segmentation.finalize

Purpose:
    Closes a question candidate: cleans its text, applies the minimum
    content threshold and fills metadata defaults.

Key Functions:
    - finalize_candidate(): Candidate -> ExtractedQuestion or None

Dependencies:
    - extractor.cleaning: Metadata token removal
    - core.models.candidates: Candidate and result records

Used By:
    - extractor.segmentation.lines
    - extractor.segmentation.fallback
"""

from __future__ import annotations

import logging
from typing import List, Optional

from qbank_toolkit.core.models.candidates import ExtractedQuestion, QuestionCandidate

from ..cleaning import clean_question_text
from ..diagnostics import DiagnosticsCollector

logger = logging.getLogger(__name__)


def _defaulted_fields(candidate: QuestionCandidate) -> List[str]:
    fields = []
    if candidate.course_outcome is None:
        fields.append("course_outcome")
    if candidate.level is None:
        fields.append("level")
    if candidate.marks is None:
        fields.append("marks")
    return fields


def finalize_candidate(
    candidate: QuestionCandidate,
    *,
    min_chars: int,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> Optional[ExtractedQuestion]:
    """
    Clean a candidate and convert it to an ExtractedQuestion.

    Candidates whose cleaned text is not longer than min_chars are noise
    and are dropped without error.

    Args:
        candidate: Candidate to close. Metadata must already be extracted.
        min_chars: Cleaned text must be longer than this.
        diagnostics: Optional collector for dropped/defaulted records.

    Returns:
        ExtractedQuestion, or None if the candidate was dropped.
    """
    text = clean_question_text(candidate.raw_text)
    if len(text) <= min_chars:
        logger.debug(f"Dropping Q{candidate.serial_number}: {len(text)} chars after cleaning")
        if diagnostics is not None:
            diagnostics.add_candidate_dropped(
                candidate.serial_number,
                candidate.raw_text,
                f"{len(text)} chars after cleaning, need more than {min_chars}",
            )
        return None

    defaulted = _defaulted_fields(candidate)
    if defaulted and diagnostics is not None:
        diagnostics.add_metadata_defaulted(candidate.serial_number, defaulted)

    return ExtractedQuestion.from_candidate(candidate, text)
