"""
Module: extractor.utils.pdf

Purpose:
    Document decoding for question-bank PDFs. Validates the input file
    and extracts page text in page order so the extraction core only
    ever sees plain text.

Key Functions:
    - extract_page_texts(): Text of every page of an open document
    - extract_document_text(): Validate, open and decode a PDF file

Key Classes:
    - DocumentDecodeError: Raised for unreadable or rejected documents

Dependencies:
    - fitz (PyMuPDF): PDF text extraction

Used By:
    - qbank_toolkit.cli: Decodes PDF input before extraction
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz

logger = logging.getLogger(__name__)

# Default configuration
MAX_DOCUMENT_BYTES = 10 * 1024 * 1024  # 10 MiB
PDF_SUFFIX = ".pdf"


class DocumentDecodeError(Exception):
    """Raised when a document cannot be turned into text."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def extract_page_texts(doc: fitz.Document) -> List[str]:
    """
    Extract plain text from every page of an open document.

    Args:
        doc: Open PyMuPDF document.

    Returns:
        One string per page, in page order. Pages whose text cannot be
        read contribute an empty string.

    Raises:
        ValueError: If doc is closed.

    Example:
        >>> with fitz.open("bank.pdf") as doc:
        ...     pages = extract_page_texts(doc)
        >>> len(pages)
        3
    """
    if doc.is_closed:
        raise ValueError("Document is closed")

    pages: List[str] = []
    for page in doc:
        try:
            pages.append(page.get_text("text") or "")
        except (RuntimeError, ValueError) as e:
            logger.warning(f"Failed to extract text from page {page.number + 1}: {e}")
            pages.append("")
    return pages


def extract_document_text(
    pdf_path: Path,
    *,
    max_bytes: int = MAX_DOCUMENT_BYTES,
) -> str:
    """
    Decode a PDF file into page-ordered plain text.

    Args:
        pdf_path: Path to the PDF file.
        max_bytes: Largest accepted file size. Defaults to 10 MiB.

    Returns:
        Text of all pages joined with newlines, in page order.

    Raises:
        DocumentDecodeError: If the file is missing, is not a PDF, is
            too large, or cannot be opened.

    Example:
        >>> text = extract_document_text(Path("module1_bank.pdf"))
        >>> text.splitlines()[0]
        'SRI KRISHNA INSTITUTE OF TECHNOLOGY'
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.is_file():
        raise DocumentDecodeError(f"Document not found: {pdf_path}", pdf_path)
    if pdf_path.suffix.lower() != PDF_SUFFIX:
        raise DocumentDecodeError(f"Not a PDF file: {pdf_path.name}", pdf_path)

    size = pdf_path.stat().st_size
    if size > max_bytes:
        raise DocumentDecodeError(
            f"PDF is too large ({size} bytes, limit {max_bytes}): {pdf_path.name}",
            pdf_path,
        )

    try:
        with fitz.open(pdf_path) as doc:
            if doc.page_count == 0:
                raise DocumentDecodeError(f"PDF has no pages: {pdf_path.name}", pdf_path)
            pages = extract_page_texts(doc)
    except DocumentDecodeError:
        raise
    except (RuntimeError, ValueError) as e:
        raise DocumentDecodeError(f"Failed to open PDF {pdf_path.name}: {e}", pdf_path) from e

    logger.info(f"Decoded {len(pages)} pages from {pdf_path.name}")
    return "\n".join(pages)
