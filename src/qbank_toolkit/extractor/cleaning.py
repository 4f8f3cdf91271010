"""
Module: extractor.cleaning

Purpose:
    Removes grading metadata from question prose once it has been read,
    so published question text carries no CO/level/marks tokens.

Key Functions:
    - clean_question_text(): Strip metadata tokens and normalize spacing

Dependencies:
    - re (std)
    - extractor.utils.text: Whitespace collapsing

Used By:
    - extractor.segmentation: Cleans candidate text at finalization
"""

from __future__ import annotations

import re

from .utils.text import collapse_whitespace

METADATA_TOKEN_PATTERN = re.compile(r"\b(?:CO|L)\d+", re.IGNORECASE)
# Bare trailing number only; "3.14" and "v2" endings stay
TRAILING_MARKS_PATTERN = re.compile(r"(?<![.\d])\b\d{1,2}\s*$")


def clean_question_text(raw_text: str) -> str:
    """
    Remove metadata tokens from raw question text.

    Must run after metadata extraction, which reads the uncleaned text.

    Args:
        raw_text: Candidate text as accumulated by the segmenter.

    Returns:
        Text without CO<n>/L<n> tokens or a trailing one- or two-digit
        number, single-spaced and stripped.

    Example:
        >>> clean_question_text("Define algorithm. CO1 L2 08")
        'Define algorithm.'
    """
    text = METADATA_TOKEN_PATTERN.sub(" ", raw_text)
    text = TRAILING_MARKS_PATTERN.sub("", text.rstrip())
    return collapse_whitespace(text)
