"""
Unit Tests for Candidate Models

Tests for QuestionCandidate accumulation and ExtractedQuestion defaults.
"""

import pytest

from qbank_toolkit.core.models.candidates import ExtractedQuestion, QuestionCandidate


class TestQuestionCandidate:
    """Tests for QuestionCandidate."""

    def test_search_text_when_buffer_empty_then_own_content(self):
        c = QuestionCandidate(serial_number="1", raw_text="Define algorithm.")
        assert c.search_text == "Define algorithm."

    def test_search_text_when_buffer_present_then_content_first(self):
        c = QuestionCandidate(serial_number="1", raw_text="Define algorithm.")
        c.search_buffer.extend(["CO1 L2", "08"])
        assert c.search_text == "Define algorithm. CO1 L2 08"

    def test_append_text_when_content_present_then_space_joined(self):
        c = QuestionCandidate(serial_number="1", raw_text="Define")
        c.append_text("algorithm.")
        assert c.raw_text == "Define algorithm."

    def test_append_text_when_empty_then_no_leading_space(self):
        c = QuestionCandidate(serial_number="1")
        c.append_text("Define algorithm.")
        assert c.raw_text == "Define algorithm."

    def test_buffers_when_two_candidates_then_not_shared(self):
        a = QuestionCandidate(serial_number="1")
        b = QuestionCandidate(serial_number="2")
        a.search_buffer.append("CO1")
        assert b.search_buffer == []


class TestExtractedQuestion:
    """Tests for ExtractedQuestion."""

    def test_from_candidate_when_metadata_missing_then_defaults(self):
        c = QuestionCandidate(serial_number="3", raw_text="Explain sorting.")

        eq = ExtractedQuestion.from_candidate(c, "Explain sorting.")

        assert eq == ExtractedQuestion("3", "Explain sorting.", "1", "2", 8)

    def test_from_candidate_when_metadata_present_then_kept(self):
        c = QuestionCandidate(serial_number="3", raw_text="x", course_outcome="7", level="4", marks=15)

        eq = ExtractedQuestion.from_candidate(c, "Explain sorting.")

        assert (eq.course_outcome, eq.level, eq.marks) == ("7", "4", 15)

    def test_extracted_when_frozen_then_immutable(self):
        eq = ExtractedQuestion("1", "Define.")
        with pytest.raises(AttributeError):
            eq.marks = 3  # type: ignore
