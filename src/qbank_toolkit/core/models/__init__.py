"""
Core Models Package

Data records passed through the extraction pipeline.

**DESIGN RATIONALE:**

Only the in-flight QuestionCandidate is mutable, and it never leaves the
segmenter. ExtractedQuestion and Question are frozen dataclasses, so
results handed to callers cannot be changed by later pipeline stages.

| Record | Mutable | Produced By |
|--------|---------|-------------|
| `QuestionCandidate` | yes | segmentation |
| `ExtractedQuestion` | no | segmentation (finalize) |
| `Question` | no | builder |
"""

from .candidates import ExtractedQuestion, QuestionCandidate
from .questions import DIFFICULTIES, MODULES, Difficulty, Question

__all__ = [
    "QuestionCandidate",
    "ExtractedQuestion",
    "Question",
    "Difficulty",
    "DIFFICULTIES",
    "MODULES",
]
