"""
Module: candidates

Purpose:
    Provides the two intermediate records of the extraction pipeline:
    QuestionCandidate (mutable, accumulated while scanning lines) and
    ExtractedQuestion (immutable, the finalized candidate with defaults
    applied).

Key Functions:
    - QuestionCandidate.search_text: Content plus lookahead buffer
    - ExtractedQuestion.from_candidate(): Finalize with cleaned text

Dependencies:
    - dataclasses (std)
    - qbank_toolkit.common.thresholds: Fallback metadata values

Used By:
    - extractor.segmentation: Builds and finalizes candidates
    - extractor.detection.metadata: Fills candidate metadata
    - extractor.builder: Converts ExtractedQuestion to Question
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from qbank_toolkit.common.thresholds import METADATA_THRESHOLDS


@dataclass
class QuestionCandidate:
    """
    A provisionally segmented question span (mutable).

    Built incrementally while scanning lines. Only one candidate is
    open at a time during line segmentation.

    Attributes:
        serial_number: Number printed before the question, e.g. "3".
        raw_text: Question text accumulated so far, metadata included.
        course_outcome: Digits of the first "CO<n>" token seen.
        level: Digits of the first "L<n>" token seen.
        marks: First in-range bare number seen.
        search_buffer: Lookahead lines read for metadata only.

    Example:
        >>> c = QuestionCandidate(serial_number="1", raw_text="Define algorithm.")
        >>> c.search_buffer.append("CO1 L2 08")
        >>> c.search_text
        'Define algorithm. CO1 L2 08'
    """

    serial_number: str
    raw_text: str = ""
    course_outcome: Optional[str] = None
    level: Optional[str] = None
    marks: Optional[int] = None
    search_buffer: List[str] = field(default_factory=list)

    @property
    def search_text(self) -> str:
        """Own content followed by any lookahead lines."""
        return " ".join([self.raw_text, *self.search_buffer]).strip()

    def append_text(self, line: str) -> None:
        """Append a continuation line to the question text."""
        self.raw_text = f"{self.raw_text} {line}" if self.raw_text else line


@dataclass(frozen=True)
class ExtractedQuestion:
    """
    Finalized question with metadata defaults applied (immutable).

    Attributes:
        serial_number: Number printed in the source document.
        text: Question prose with metadata tokens removed.
        course_outcome: Course-outcome digits, "1" when not found.
        level: Cognitive-level digits, "2" when not found.
        marks: Marks value in [1, 50], 8 when not found.
    """

    serial_number: str
    text: str
    course_outcome: str = METADATA_THRESHOLDS.default_course_outcome
    level: str = METADATA_THRESHOLDS.default_level
    marks: int = METADATA_THRESHOLDS.default_marks

    @classmethod
    def from_candidate(cls, candidate: QuestionCandidate, text: str) -> ExtractedQuestion:
        """
        Finalize a candidate, filling any missing metadata with defaults.

        Args:
            candidate: The candidate being closed.
            text: Cleaned question text for the candidate.

        Returns:
            ExtractedQuestion carrying the candidate's metadata or defaults.
        """
        return cls(
            serial_number=candidate.serial_number,
            text=text,
            course_outcome=candidate.course_outcome or METADATA_THRESHOLDS.default_course_outcome,
            level=candidate.level or METADATA_THRESHOLDS.default_level,
            marks=candidate.marks or METADATA_THRESHOLDS.default_marks,
        )
