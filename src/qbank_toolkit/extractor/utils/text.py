"""
Module: extractor.utils.text

Purpose:
    Text normalization utilities for decoded question-bank text.
    Turns raw document text into a canonical line sequence.

Key Functions:
    - normalize_line_endings(): Convert all line endings to "\\n"
    - split_lines(): Get non-empty stripped lines in document order
    - collapse_whitespace(): Reduce whitespace runs to single spaces

Dependencies:
    - re (std)

Used By:
    - extractor.pipeline: Line splitting before segmentation
    - extractor.segmentation.fallback: Whitespace collapsing
    - extractor.cleaning: Final whitespace normalization
"""

from __future__ import annotations

import re
from typing import List

_LINE_ENDING_PATTERN = re.compile(r"\r\n?")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_line_endings(text: str) -> str:
    """
    Replace "\\r\\n" and lone "\\r" line endings with "\\n".

    Example:
        >>> normalize_line_endings("a\\r\\nb\\rc")
        'a\\nb\\nc'
    """
    return _LINE_ENDING_PATTERN.sub("\n", text)


def split_lines(text: str) -> List[str]:
    """
    Split text into non-empty, stripped lines.

    Natural line breaks are preserved; whitespace inside a line is
    left as decoded.

    Args:
        text: Raw document text, pages concatenated in order

    Returns:
        Lines in top-to-bottom order

    Example:
        >>> split_lines("  1. Define algorithm.\\r\\n\\n  CO1 L2 08  ")
        ['1. Define algorithm.', 'CO1 L2 08']
    """
    lines: List[str] = []
    for line in normalize_line_endings(text).split("\n"):
        line = line.strip()
        if line:
            lines.append(line)
    return lines


def collapse_whitespace(text: str) -> str:
    """
    Collapse whitespace runs (line breaks included) to single spaces.

    Example:
        >>> collapse_whitespace("Explain\\n  sorting.\\t")
        'Explain sorting.'
    """
    return _WHITESPACE_PATTERN.sub(" ", text).strip()
