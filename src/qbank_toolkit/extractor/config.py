"""
Module: extractor.config

Purpose:
    Configuration dataclass for the extraction pipeline. Provides
    immutable per-call settings for header detection, segmentation
    and the default subject label.

Key Classes:
    - ExtractionConfig: Main configuration for extraction

Dependencies:
    - dataclasses: For frozen dataclass support
    - qbank_toolkit.common.thresholds: Default values

Used By:
    - extractor.pipeline: Uses ExtractionConfig for pipeline settings
    - extractor.segmentation: Reads lookahead and content thresholds
"""

from dataclasses import dataclass

from qbank_toolkit.common.thresholds import HEADER_THRESHOLDS, SEGMENTATION_THRESHOLDS

DEFAULT_SUBJECT = "Computer Science"


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for question extraction pipeline.

    Attributes:
        header_keyword_threshold: Keyword hits that mark a header line (default 2)
        lookahead_lines: Lines after a question start searched for metadata (default 2)
        min_content_chars: Cleaned text must exceed this on the line path (default 0)
        min_fallback_chars: Capture must exceed this on the fallback path (default 10)
        use_fallback: Run the global-pattern segmenter when lines yield nothing (default True)
        default_subject: Subject label for converted questions
    """
    header_keyword_threshold: int = HEADER_THRESHOLDS.keyword_threshold
    lookahead_lines: int = SEGMENTATION_THRESHOLDS.lookahead_lines
    min_content_chars: int = SEGMENTATION_THRESHOLDS.min_content_chars
    min_fallback_chars: int = SEGMENTATION_THRESHOLDS.min_fallback_chars
    use_fallback: bool = True
    default_subject: str = DEFAULT_SUBJECT
