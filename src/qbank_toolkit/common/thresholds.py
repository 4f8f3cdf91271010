"""Centralized threshold and magic number configuration.

This module contains all hardcoded thresholds, ranges, and fallback values
used throughout the extraction process. Having these in one place makes
tuning easier and documents why each value was chosen.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HeaderThresholds:
    """Thresholds for header/title line detection."""

    # One keyword can occur in prose ("the level of recursion"),
    # two or more on one line is table-header furniture
    keyword_threshold: int = 2


@dataclass
class SegmentationThresholds:
    """Thresholds for splitting text into question spans."""

    lookahead_lines: int = 2  # Lines after a question start searched for metadata
    min_continuation_chars: int = 5  # Continuation lines must be longer than this
    min_content_chars: int = 0  # Cleaned text must be longer than this (line path)
    min_fallback_chars: int = 10  # Stricter floor for the global-pattern path
    max_metadata_digits: int = 3  # Bare number lines up to this width are metadata


@dataclass
class MetadataThresholds:
    """Accepted ranges and fallback values for grading metadata."""

    min_marks: int = 1
    max_marks: int = 50  # Larger numerals are page/question numbers
    default_marks: int = 8
    default_course_outcome: str = "1"
    default_level: str = "2"


# Global instances for easy import
HEADER_THRESHOLDS = HeaderThresholds()
SEGMENTATION_THRESHOLDS = SegmentationThresholds()
METADATA_THRESHOLDS = MetadataThresholds()
