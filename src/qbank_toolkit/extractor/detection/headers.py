"""
Module: extractor.detection.headers

Purpose:
    Header line detection - flags lines that belong to document titles
    or table headers ("SL# Question CO Level Marks", "Department of ...")
    rather than question content.

Key Functions:
    - count_header_keywords(): Count header vocabulary hits in a line
    - is_header_line(): True when hits reach the threshold
    - find_header_run(): Offset of a header embedded in running text

Dependencies:
    - re (std)
    - qbank_toolkit.common.thresholds: Default keyword threshold

Used By:
    - extractor.segmentation.lines: Skips header lines while scanning
    - extractor.segmentation.fallback: Cuts captures at embedded headers
"""

from __future__ import annotations

import re
from typing import Tuple

from qbank_toolkit.common.thresholds import HEADER_THRESHOLDS

SERIAL_KEYWORDS: Tuple[str, ...] = ("sl#", "sl.no", "s.no", "sr.no")
COLUMN_KEYWORDS: Tuple[str, ...] = ("question", "co", "level", "marks")
INSTITUTION_KEYWORDS: Tuple[str, ...] = (
    "department",
    "faculty",
    "module",
    "semester",
    "institute",
)
HEADER_KEYWORDS: Tuple[str, ...] = SERIAL_KEYWORDS + COLUMN_KEYWORDS + INSTITUTION_KEYWORDS

# Whole-token match: "CO1" and "course" must not count as "co"
HEADER_KEYWORD_PATTERN = re.compile(
    r"(?<![a-z0-9])(?:"
    + "|".join(re.escape(k) for k in sorted(HEADER_KEYWORDS, key=len, reverse=True))
    + r")(?![a-z0-9])"
)


def count_header_keywords(line: str) -> int:
    """
    Count case-insensitive header keyword occurrences in a line.

    Example:
        >>> count_header_keywords("SL# Question CO Level Marks")
        5
        >>> count_header_keywords("1. Define algorithm. CO1 L2 08")
        0
    """
    return len(HEADER_KEYWORD_PATTERN.findall(line.lower()))


def is_header_line(line: str, *, threshold: int = HEADER_THRESHOLDS.keyword_threshold) -> bool:
    """
    Decide whether a line is header furniture.

    A single keyword can appear in question prose ("the level of
    recursion"); several on one line indicate a title or table header.
    This is a tunable heuristic, not an exact rule.

    Args:
        line: One normalized line.
        threshold: Keyword hits needed to classify as header. Defaults to 2.

    Returns:
        True if the line should be skipped.

    Example:
        >>> is_header_line("Module-1 Question Bank")
        True
        >>> is_header_line("Explain the level of recursion in quicksort.")
        False
    """
    return count_header_keywords(line) >= threshold


def _header_run_pattern(min_keywords: int) -> re.Pattern:
    keyword = HEADER_KEYWORD_PATTERN.pattern
    return re.compile(
        rf"{keyword}(?:[^a-z0-9]+{keyword}){{{max(min_keywords - 1, 0)},}}",
        re.IGNORECASE,
    )


HEADER_RUN_PATTERN = _header_run_pattern(HEADER_THRESHOLDS.keyword_threshold)


def find_header_run(text: str, *, min_keywords: int = HEADER_THRESHOLDS.keyword_threshold) -> int:
    """
    Locate a table header embedded in running text.

    Text with no line structure cannot be filtered line by line; instead
    look for min_keywords or more header keywords separated only by
    spaces or punctuation.

    Args:
        text: Whitespace-collapsed text.
        min_keywords: Adjacent keywords that make a header run.

    Returns:
        Start offset of the first run, or -1 if there is none.

    Example:
        >>> find_header_run("Define algorithm. CO1 L2 08 SL# Question CO Level Marks")
        28
        >>> find_header_run("Explain the level of recursion.")
        -1
    """
    if min_keywords == HEADER_THRESHOLDS.keyword_threshold:
        pattern = HEADER_RUN_PATTERN
    else:
        pattern = _header_run_pattern(min_keywords)
    match = pattern.search(text)
    return match.start() if match else -1
