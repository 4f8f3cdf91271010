"""
Question-Bank Toolkit Core Package

Shared data models used by the extractor and the command line.
"""

from .models import ExtractedQuestion, Question, QuestionCandidate

__all__ = [
    "QuestionCandidate",
    "ExtractedQuestion",
    "Question",
]
