"""
Module: extractor.builder

Purpose:
    Assembles public Question records from ExtractedQuestion results,
    assigning position-derived ids and classifying module/difficulty.

Key Functions:
    - build_question(): One ExtractedQuestion -> Question
    - convert_to_questions(): Whole extraction run -> Question list

Dependencies:
    - extractor.classification: Module/difficulty tables
    - core.models: Question record

Used By:
    - extractor.pipeline: extract_questions() convenience entry point
    - qbank_toolkit.cli: JSON output
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from qbank_toolkit.common.thresholds import METADATA_THRESHOLDS
from qbank_toolkit.core.models.candidates import ExtractedQuestion
from qbank_toolkit.core.models.questions import Question

from .classification import classify
from .config import DEFAULT_SUBJECT

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

ID_PREFIX = "extracted_"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _resolve_marks(marks: int) -> int:
    """Marks outside the plausible range fall back to the default."""
    if METADATA_THRESHOLDS.min_marks <= marks <= METADATA_THRESHOLDS.max_marks:
        return marks
    logger.debug(f"Marks {marks} out of range, using {METADATA_THRESHOLDS.default_marks}")
    return METADATA_THRESHOLDS.default_marks


def question_id(position: int) -> str:
    """
    Build the id for the question at a 0-based position.

    Ids come from output position, not the printed serial number, so
    duplicated or skipped serials in the source still yield unique ids.

    Example:
        >>> question_id(0)
        'extracted_1'
    """
    return f"{ID_PREFIX}{position + 1}"


def build_question(
    extracted: ExtractedQuestion,
    position: int,
    subject: str,
    created_at: datetime,
) -> Question:
    """
    Build one Question record.

    Args:
        extracted: Finalized extraction result.
        position: 0-based index in the extraction output.
        subject: Subject label for the record.
        created_at: Generation timestamp.

    Marks outside 1-50 resolve to the default (8), the same rule
    extraction applies, so hand-built input cannot fail validation.

    Returns:
        Immutable Question.
    """
    module, difficulty = classify(extracted.course_outcome, extracted.level)
    return Question(
        id=question_id(position),
        text=extracted.text,
        module=module,
        difficulty=difficulty,
        marks=_resolve_marks(extracted.marks),
        subject=subject,
        created_at=created_at,
    )


def convert_to_questions(
    extracted: Sequence[ExtractedQuestion],
    subject: str = DEFAULT_SUBJECT,
    *,
    clock: Optional[Clock] = None,
) -> List[Question]:
    """
    Convert an extraction run to Question records.

    The clock is read once, so every record of one run shares a
    timestamp. Never raises for ExtractedQuestion input.

    Args:
        extracted: Results of parse_questions(), in document order.
        subject: Subject label. Defaults to "Computer Science".
        clock: Timestamp source. Defaults to the current UTC time.

    Returns:
        Questions in the same order as extracted.

    Example:
        >>> qs = convert_to_questions([ExtractedQuestion("1", "Define algorithm.", "3", "1", 5)])
        >>> (qs[0].id, qs[0].module, qs[0].difficulty, qs[0].marks)
        ('extracted_1', 2, 'easy', 5)
    """
    created_at = (clock or _utc_now)()
    return [
        build_question(eq, position, subject, created_at)
        for position, eq in enumerate(extracted)
    ]
