"""
Module: extractor.classification

Purpose:
    Module and difficulty classification for extracted questions using
    fixed threshold tables over the course-outcome and level codes.

Key Functions:
    - module_for_outcome(): CO number -> syllabus module 1-5
    - difficulty_for_level(): Level number -> easy/medium/hard

Both functions are total: absent or unparsable codes fall back to
defaults and every integer maps to a value.
"""

from __future__ import annotations

import logging
from typing import Tuple, Union

from qbank_toolkit.common.thresholds import METADATA_THRESHOLDS
from qbank_toolkit.core.models.questions import Difficulty

logger = logging.getLogger(__name__)

# (upper bound inclusive, module); anything above the last bound is module 5
MODULE_TABLE: Tuple[Tuple[int, int], ...] = (
    (2, 1),
    (4, 2),
    (6, 3),
    (8, 4),
)
LAST_MODULE = 5

# (upper bound inclusive, difficulty); anything above is "hard"
DIFFICULTY_TABLE: Tuple[Tuple[int, Difficulty], ...] = (
    (1, "easy"),
    (2, "medium"),
)
HARDEST: Difficulty = "hard"

CodeValue = Union[str, int, None]


def _parse_code(value: CodeValue, default: int) -> int:
    """Parse a CO/level code to int, falling back to default."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug(f"Unparsable code {value!r}, using {default}")
        return default


def module_for_outcome(course_outcome: CodeValue) -> int:
    """
    Map a course-outcome number to a syllabus module.

    Args:
        course_outcome: CO digits ("3"), an int, or None

    Returns:
        Module number 1-5 (CO 1-2 -> 1, 3-4 -> 2, 5-6 -> 3, 7-8 -> 4, else 5)

    Example:
        >>> module_for_outcome("3")
        2
        >>> module_for_outcome(None)
        1
    """
    n = _parse_code(course_outcome, int(METADATA_THRESHOLDS.default_course_outcome))
    for upper, module in MODULE_TABLE:
        if n <= upper:
            return module
    return LAST_MODULE


def difficulty_for_level(level: CodeValue) -> Difficulty:
    """
    Map a cognitive level number to a difficulty tier.

    Args:
        level: Level digits ("2"), an int, or None

    Returns:
        "easy" for level <= 1, "medium" for 2, "hard" above

    Example:
        >>> difficulty_for_level("1")
        'easy'
        >>> difficulty_for_level("x")
        'medium'
    """
    n = _parse_code(level, int(METADATA_THRESHOLDS.default_level))
    for upper, difficulty in DIFFICULTY_TABLE:
        if n <= upper:
            return difficulty
    return HARDEST


def classify(course_outcome: CodeValue, level: CodeValue) -> Tuple[int, Difficulty]:
    """
    Classify a question by its metadata codes.

    Returns:
        (module, difficulty) tuple
    """
    return module_for_outcome(course_outcome), difficulty_for_level(level)

