"""
Module: extractor.detection.metadata

Purpose:
    Grading metadata detection - reads the course outcome (CO<n>),
    cognitive level (L<n>) and marks value for a question candidate.

Key Functions:
    - extract_metadata(): Fill unset candidate fields from search text
    - find_marks(): First bare number inside the accepted marks range
    - is_metadata_line(): True for continuation lines holding only metadata

Dependencies:
    - re (std)
    - qbank_toolkit.common.thresholds: Marks range

Used By:
    - extractor.segmentation.lines: Metadata for line-based candidates
    - extractor.segmentation.fallback: Metadata for pattern-based candidates

Tie-break policy:
    CO, then level, then marks; first match wins and a field that is
    already set is never reconsidered. A small number in the prose
    ("explain the 2 types of ...") that precedes the real marks value
    will be taken as marks. Known weakness, kept for fixture
    compatibility.
"""

from __future__ import annotations

import re
from typing import Optional

from qbank_toolkit.common.thresholds import METADATA_THRESHOLDS, SEGMENTATION_THRESHOLDS
from qbank_toolkit.core.models.candidates import QuestionCandidate

COURSE_OUTCOME_PATTERN = re.compile(r"\bCO(\d+)", re.IGNORECASE)
LEVEL_PATTERN = re.compile(r"\bL(\d+)", re.IGNORECASE)
BARE_NUMBER_PATTERN = re.compile(r"\b(\d+)\b")

METADATA_LINE_PATTERN = re.compile(r"^(?:CO|L)\d+", re.IGNORECASE)
BARE_NUMBER_LINE_PATTERN = re.compile(
    rf"^\d{{1,{SEGMENTATION_THRESHOLDS.max_metadata_digits}}}$"
)


def is_metadata_line(line: str) -> bool:
    """
    Check if a continuation line carries metadata rather than prose.

    Example:
        >>> is_metadata_line("CO2 L3 10")
        True
        >>> is_metadata_line("08")
        True
        >>> is_metadata_line("Lists are dynamic arrays.")
        False
    """
    return bool(METADATA_LINE_PATTERN.match(line) or BARE_NUMBER_LINE_PATTERN.match(line))


def find_marks(text: str) -> Optional[int]:
    """
    Find the first bare number in the accepted marks range.

    Numbers outside [1, 50] are skipped as question or page numbers.
    Digits glued to letters ("CO1", "L2") are not bare numbers.

    Example:
        >>> find_marks("Define algorithm. CO1 L2 08")
        8
        >>> find_marks("Marks: 97") is None
        True
    """
    for match in BARE_NUMBER_PATTERN.finditer(text):
        value = int(match.group(1))
        if METADATA_THRESHOLDS.min_marks <= value <= METADATA_THRESHOLDS.max_marks:
            return value
    return None


def extract_metadata(candidate: QuestionCandidate, search_text: str) -> None:
    """
    Fill the candidate's unset metadata fields from search text.

    Mutates candidate in place. Fields already set are left alone.

    Args:
        candidate: Candidate to update.
        search_text: Candidate content plus any lookahead lines.
    """
    if candidate.course_outcome is None:
        match = COURSE_OUTCOME_PATTERN.search(search_text)
        if match:
            candidate.course_outcome = match.group(1)

    if candidate.level is None:
        match = LEVEL_PATTERN.search(search_text)
        if match:
            candidate.level = match.group(1)

    if candidate.marks is None:
        candidate.marks = find_marks(search_text)
