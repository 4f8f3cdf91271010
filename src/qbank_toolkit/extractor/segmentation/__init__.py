"""
Module: extractor.segmentation

Purpose:
    Segmentation subpackage for splitting question-bank text into
    per-question spans.

Key Modules:
    - lines: Primary segmenter over numbered lines with lookahead
    - fallback: Global-pattern segmenter for run-together text
    - finalize: Shared candidate cleaning and threshold check

Used By:
    - extractor.pipeline: Runs lines first, fallback when it finds nothing
"""

from .fallback import segment_text
from .finalize import finalize_candidate
from .lines import segment_lines

__all__ = ["finalize_candidate", "segment_lines", "segment_text"]
