"""
Module: questions

Purpose:
    Provides the Question dataclass - the public output record of the
    extraction pipeline. Immutable, validated on construction, and
    serializable to a JSON-ready dict.

Key Functions:
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - extractor.builder: Produces Question records
    - cli: Serializes questions to JSON
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Literal

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")
MODULES: tuple[int, ...] = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class Question:
    """
    Structured exam question (immutable).

    Attributes:
        id: Position-derived identifier like "extracted_3"
        text: Question prose without grading metadata
        module: Syllabus module, 1-5
        difficulty: "easy", "medium" or "hard"
        marks: Marks awarded for the question
        subject: Subject label supplied by the caller
        created_at: Time the extraction run produced this record

    Invariants:
        - module is one of 1..5
        - difficulty is one of the three tiers
        - marks >= 1

    Example:
        >>> q = Question(
        ...     id="extracted_1",
        ...     text="Define algorithm.",
        ...     module=1,
        ...     difficulty="medium",
        ...     marks=8,
        ...     subject="Computer Science",
        ...     created_at=datetime(2024, 1, 1),
        ... )
        >>> q.to_dict()["createdAt"]
        '2024-01-01T00:00:00'
    """

    id: str
    text: str
    module: int
    difficulty: Difficulty
    marks: int
    subject: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if self.module not in MODULES:
            raise ValueError(f"module must be 1-5: {self.module}")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Invalid difficulty: {self.difficulty!r}")
        if self.marks < 1:
            raise ValueError(f"marks must be positive: {self.marks}")

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-ready dictionary.

        Keys follow the external record layout, so the timestamp is
        stored as ``createdAt`` in ISO-8601 form.
        """
        return {
            "id": self.id,
            "text": self.text,
            "module": self.module,
            "difficulty": self.difficulty,
            "marks": self.marks,
            "subject": self.subject,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Deserialize from dictionary.

        Raises:
            KeyError: If a required key is missing
            ValueError: If a value fails validation
        """
        return cls(
            id=data["id"],
            text=data["text"],
            module=int(data["module"]),
            difficulty=data["difficulty"],
            marks=int(data["marks"]),
            subject=data["subject"],
            created_at=datetime.fromisoformat(data["createdAt"]),
        )
