"""
Tests for qbank_toolkit.cli

Test Coverage:
- main(): Text and PDF input, JSON output, exit codes, diagnostics file
- __main__: Import has no side effects
"""

import importlib
import json

import fitz

from qbank_toolkit.cli import EXIT_BAD_INPUT, EXIT_NO_QUESTIONS, EXIT_OK, main


class TestMain:
    """Tests for main()."""

    def test_main_when_text_file_then_prints_json(self, tmp_path, capsys):
        source = tmp_path / "bank.txt"
        source.write_text("1. Define algorithm. CO1 L2 08\n2. Explain sorting. CO3 L1 05\n", encoding="utf-8")

        code = main([str(source), "--subject", "Algorithms"])

        assert code == EXIT_OK
        records = json.loads(capsys.readouterr().out)
        assert [r["id"] for r in records] == ["extracted_1", "extracted_2"]
        assert records[1]["module"] == 2
        assert records[1]["difficulty"] == "easy"
        assert records[0]["subject"] == "Algorithms"
        assert "createdAt" in records[0]

    def test_main_when_output_given_then_writes_file(self, tmp_path):
        source = tmp_path / "bank.txt"
        source.write_text("1. Define algorithm. CO1 L2 08\n", encoding="utf-8")
        output = tmp_path / "out" / "questions.json"

        code = main([str(source), "--output", str(output)])

        assert code == EXIT_OK
        records = json.loads(output.read_text(encoding="utf-8"))
        assert records[0]["text"] == "Define algorithm."
        assert records[0]["subject"] == "Computer Science"

    def test_main_when_pdf_input_then_decoded(self, tmp_path, capsys):
        pdf_path = tmp_path / "bank.pdf"
        doc = fitz.open()
        page = doc.new_page()
        page.insert_text((72, 72), "1. Define algorithm. CO1 L2 08", fontsize=11)
        page.insert_text((72, 88), "2. Explain sorting. CO3 L1 05", fontsize=11)
        doc.save(pdf_path)
        doc.close()

        code = main([str(pdf_path)])

        assert code == EXIT_OK
        records = json.loads(capsys.readouterr().out)
        assert [r["marks"] for r in records] == [8, 5]

    def test_main_when_no_questions_then_exit_one(self, tmp_path):
        source = tmp_path / "prose.txt"
        source.write_text("Nothing numbered in here.\n", encoding="utf-8")

        assert main([str(source)]) == EXIT_NO_QUESTIONS

    def test_main_when_missing_input_then_exit_two(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == EXIT_BAD_INPUT

    def test_main_when_corrupt_pdf_then_exit_two(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"")

        assert main([str(path)]) == EXIT_BAD_INPUT

    def test_main_when_diagnostics_requested_then_report_written(self, tmp_path):
        source = tmp_path / "bank.txt"
        source.write_text("SL# Question CO Level Marks\n1. Define algorithm.\n", encoding="utf-8")
        report = tmp_path / "diag.json"

        code = main([str(source), "--diagnostics", str(report)])

        assert code == EXIT_OK
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["summary_by_type"]["header_skipped"] == 1
        assert data["source"] == "bank.txt"

    def test_main_when_no_questions_and_diagnostics_then_report_still_written(self, tmp_path):
        source = tmp_path / "prose.txt"
        source.write_text("Nothing numbered in here.\n", encoding="utf-8")
        report = tmp_path / "diag.json"

        assert main([str(source), "--diagnostics", str(report)]) == EXIT_NO_QUESTIONS
        assert json.loads(report.read_text(encoding="utf-8"))["summary_by_type"]["fallback_used"] == 1


class TestModuleEntryPoint:
    """Tests for python -m qbank_toolkit."""

    def test_import_when_not_run_as_script_then_main_not_called(self):
        module = importlib.import_module("qbank_toolkit.__main__")

        assert module.main is main
