"""
Module: extractor.diagnostics

Captures heuristic decisions made during extraction and generates
diagnostic reports for tuning the segmentation thresholds.

Structure:
- Each issue names the question serial (when known) and a short excerpt
- Issues never affect extraction output; collection is opt-in per call
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

EXCERPT_MAX_CHARS = 200


@dataclass
class DiagnosticIssue:
    """
    A single heuristic decision with context.

    Fields:
    - issue_type: "header_skipped", "candidate_dropped", "fallback_used"
      or "metadata_defaulted"
    - serial_number: Question serial, empty when not tied to a question
    - excerpt: Source text the decision was made on
    """
    issue_type: str
    message: str
    serial_number: str = ""
    excerpt: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "issue_type": self.issue_type,
            "message": self.message,
        }
        if self.serial_number:
            d["serial_number"] = self.serial_number
        if self.excerpt:
            d["excerpt"] = self.excerpt[:EXCERPT_MAX_CHARS]
        return d


class DiagnosticsCollector:
    """
    Collector for extraction decisions.

    One collector belongs to one extraction call; pass a fresh one per
    document.
    """

    def __init__(self):
        self._issues: List[DiagnosticIssue] = []

    def add_header_skipped(self, line: str, keyword_count: int) -> None:
        """Record a line dropped as header furniture."""
        self._issues.append(DiagnosticIssue(
            issue_type="header_skipped",
            message=f"Header line skipped ({keyword_count} keywords)",
            excerpt=line,
        ))

    def add_candidate_dropped(self, serial_number: str, raw_text: str, reason: str) -> None:
        """Record a candidate rejected by a content threshold."""
        self._issues.append(DiagnosticIssue(
            issue_type="candidate_dropped",
            message=f"Q{serial_number} dropped: {reason}",
            serial_number=serial_number,
            excerpt=raw_text,
        ))

    def add_fallback_used(self, line_count: int) -> None:
        """Record that line segmentation found nothing."""
        self._issues.append(DiagnosticIssue(
            issue_type="fallback_used",
            message=f"No numbered lines among {line_count} lines; using global pattern",
        ))

    def add_metadata_defaulted(self, serial_number: str, fields: List[str]) -> None:
        """Record metadata fields that fell back to defaults."""
        self._issues.append(DiagnosticIssue(
            issue_type="metadata_defaulted",
            message=f"Q{serial_number}: defaulted {', '.join(fields)}",
            serial_number=serial_number,
        ))

    def generate_report(self, source: str = "") -> "ExtractionDiagnosticsReport":
        return ExtractionDiagnosticsReport.from_issues(list(self._issues), source)

    @property
    def issue_count(self) -> int:
        return len(self._issues)

    @property
    def issues(self) -> List[DiagnosticIssue]:
        return list(self._issues)


@dataclass
class ExtractionDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    source: str
    total_issues: int
    summary_by_type: Dict[str, int]
    issues: List[DiagnosticIssue]

    @classmethod
    def from_issues(cls, issues: List[DiagnosticIssue], source: str = "") -> "ExtractionDiagnosticsReport":
        summary_by_type: Dict[str, int] = {}
        for issue in issues:
            summary_by_type[issue.issue_type] = summary_by_type.get(issue.issue_type, 0) + 1

        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            source=source,
            total_issues=len(issues),
            summary_by_type=summary_by_type,
            issues=issues,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "source": self.source,
            "total_issues": self.total_issues,
            "summary_by_type": self.summary_by_type,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Extraction diagnostics saved: {path}")
