"""
Module: extractor.utils

Purpose:
    Utility subpackage with shared helpers for text normalization
    and document decoding.

Key Modules:
    - text: Line-ending normalization and whitespace collapsing
    - pdf: PDF validation and page-ordered text extraction

Dependencies:
    - fitz (PyMuPDF): PDF text extraction (pdf module only)

Used By:
    - extractor.pipeline: Uses text helpers before segmentation
    - qbank_toolkit.cli: Uses pdf helpers to decode input files
"""

from .text import collapse_whitespace, normalize_line_endings, split_lines

__all__ = ["collapse_whitespace", "normalize_line_endings", "split_lines"]
