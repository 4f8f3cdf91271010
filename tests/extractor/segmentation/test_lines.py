"""
Tests for extractor.segmentation.lines

Test Coverage:
- match_question_start(): "<n>. <text>" parsing
- segment_lines(): Opening/closing candidates, continuation lines,
  metadata-only lines, bounded lookahead, header skipping
"""

from qbank_toolkit.extractor.config import ExtractionConfig
from qbank_toolkit.extractor.diagnostics import DiagnosticsCollector
from qbank_toolkit.extractor.segmentation.lines import match_question_start, segment_lines


class TestMatchQuestionStart:
    """Tests for match_question_start()."""

    def test_match_when_numbered_line_then_returns_serial_and_content(self):
        assert match_question_start("12. Explain sorting.") == ("12", "Explain sorting.")

    def test_match_when_no_space_after_dot_then_still_matches(self):
        assert match_question_start("3.Define stack.") == ("3", "Define stack.")

    def test_match_when_no_dot_then_none(self):
        assert match_question_start("12 Explain sorting.") is None

    def test_match_when_number_only_then_none(self):
        assert match_question_start("12.") is None

    def test_match_when_metadata_line_then_none(self):
        assert match_question_start("CO1 L2 08") is None


class TestSegmentLines:
    """Tests for segment_lines()."""

    def test_segment_when_inline_metadata_then_one_question_per_line(self):
        lines = ["1. Define algorithm. CO1 L2 08", "2. Explain sorting. CO3 L1 05"]

        questions = segment_lines(lines)

        assert [q.serial_number for q in questions] == ["1", "2"]
        assert questions[0].text == "Define algorithm."
        assert (questions[1].course_outcome, questions[1].level, questions[1].marks) == ("3", "1", 5)

    def test_segment_when_no_numbered_lines_then_empty(self):
        assert segment_lines(["Plain prose only.", "Nothing numbered here."]) == []

    def test_segment_when_text_wraps_then_continuation_appended(self):
        lines = [
            "1. Define algorithm and explain",
            "its characteristics with an example. CO1 L1 08",
            "2. Explain sorting. CO3 L1 05",
        ]

        questions = segment_lines(lines)

        assert questions[0].text == "Define algorithm and explain its characteristics with an example."
        assert (questions[0].course_outcome, questions[0].level, questions[0].marks) == ("1", "1", 8)

    def test_segment_when_metadata_on_following_line_then_recovered(self):
        lines = ["1. Define algorithm.", "CO2 L3 10", "2. Explain sorting.", "CO3 L1 05"]

        questions = segment_lines(lines)

        assert [q.text for q in questions] == ["Define algorithm.", "Explain sorting."]
        assert (questions[0].course_outcome, questions[0].level, questions[0].marks) == ("2", "3", 10)
        assert (questions[1].course_outcome, questions[1].level, questions[1].marks) == ("3", "1", 5)

    def test_segment_when_metadata_split_across_lines_then_each_field_found(self):
        lines = ["1. Define algorithm.", "CO4", "L1", "06"]

        question = segment_lines(lines)[0]

        assert (question.course_outcome, question.level, question.marks) == ("4", "1", 6)
        assert question.text == "Define algorithm."

    def test_segment_when_lookahead_buffer_then_not_in_question_text(self):
        lines = ["1. Define algorithm.", "CO1 L2 08"]

        question = segment_lines(lines)[0]

        assert "CO1" not in question.text
        assert "08" not in question.text

    def test_segment_when_lookahead_hits_next_question_then_stops(self):
        """Metadata of question 2 must not leak into question 1."""
        lines = ["1. Define algorithm.", "2. Explain sorting.", "CO3 L1 05"]

        questions = segment_lines(lines)

        assert (questions[0].course_outcome, questions[0].level, questions[0].marks) == ("1", "2", 8)
        assert (questions[1].course_outcome, questions[1].level, questions[1].marks) == ("3", "1", 5)

    def test_segment_when_lookahead_disabled_then_prose_metadata_not_read(self):
        lines = ["1. Define algorithm and explain", "its characteristics. CO4 L1 06"]
        config = ExtractionConfig(lookahead_lines=0)

        question = segment_lines(lines, config=config)[0]

        assert question.course_outcome == "1"  # default
        assert question.marks == 8  # default
        assert question.text == "Define algorithm and explain its characteristics."

    def test_segment_when_short_continuation_then_ignored(self):
        lines = ["1. Define algorithm.", "p. 4", "2. Explain sorting."]

        questions = segment_lines(lines)

        assert questions[0].text == "Define algorithm."

    def test_segment_when_preamble_before_first_question_then_ignored(self):
        lines = ["Analysis and Design of Algorithms", "1. Define algorithm. CO1 L2 08"]

        questions = segment_lines(lines)

        assert len(questions) == 1
        assert "Analysis" not in questions[0].text

    def test_segment_when_header_between_questions_then_skipped(self):
        lines = [
            "1. Define algorithm. CO1 L2 08",
            "SL# Question CO Level Marks",
            "2. Explain sorting. CO3 L1 05",
        ]

        questions = segment_lines(lines)

        assert [q.text for q in questions] == ["Define algorithm.", "Explain sorting."]

    def test_segment_when_numbered_header_then_does_not_open_candidate(self):
        lines = ["1. Module Question Bank", "1. Define algorithm. CO1 L2 08"]

        questions = segment_lines(lines)

        assert [q.text for q in questions] == ["Define algorithm."]

    def test_segment_when_metadata_only_content_then_dropped(self):
        lines = ["1. CO1 L2 08", "2. Explain sorting. CO3 L1 05"]

        questions = segment_lines(lines)

        assert [q.serial_number for q in questions] == ["2"]

    def test_segment_when_min_content_raised_then_short_questions_dropped(self):
        lines = ["1. Define.", "2. Explain sorting algorithms in detail."]
        config = ExtractionConfig(min_content_chars=10)

        questions = segment_lines(lines, config=config)

        assert [q.serial_number for q in questions] == ["2"]

    def test_segment_when_duplicate_serials_then_both_kept_in_order(self):
        lines = ["1. Define algorithm.", "1. Explain sorting."]

        questions = segment_lines(lines)

        assert [q.text for q in questions] == ["Define algorithm.", "Explain sorting."]

    def test_segment_when_diagnostics_then_records_headers_and_drops(self):
        collector = DiagnosticsCollector()
        lines = ["SL# Question CO Level Marks", "1. CO1 L2 08", "2. Explain sorting."]

        segment_lines(lines, diagnostics=collector)

        types = [issue.issue_type for issue in collector.issues]
        assert types.count("header_skipped") == 1
        assert types.count("candidate_dropped") == 1
        assert types.count("metadata_defaulted") == 1
