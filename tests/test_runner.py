"""End-to-end tests for the run driver."""

import json
import tempfile
from pathlib import Path

import pytest

from preprocessor.config import PreprocessorConfig
from preprocessor.runner import preprocess_file, preprocess_text, split_lines


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\n\nb\n") == ["a", "", "b"]


def test_sum_example():
    output, report = preprocess_text("(A = 1)\n(B = 2)\nsum is {A} and {B}\n")

    assert output == "(A = 1)\n(B = 2)\nsum is 1.0 and 2.0\n"
    assert report.diagnostics == []
    assert report.lines_read == 3
    assert report.lines_written == 3


def test_first_binding_wins():
    output, report = preprocess_text("(A = 1)\n(A = 2)\nval {A}\n")

    assert "val 1.0\n" in output
    duplicates = report.diagnostics_of("duplicate_binding")
    assert len(duplicates) == 1
    assert duplicates[0].existing_line_number == 1


def test_forward_reference():
    output, _ = preprocess_text("{Y} before {X}\n(X = 3)\n(Y = 4)\n")

    assert output.splitlines()[0] == "4.0 before 3.0"


def test_undeclared_line_dropped_order_preserved():
    text = "one {A}\ntwo {Ghost}\nthree\n(A = 5)\n"

    output, report = preprocess_text(text)

    assert output == "one 5.0\nthree\n(A = 5)\n"
    assert report.lines_dropped == 1
    assert [d.kind for d in report.diagnostics] == ["nonexistent_binding"]


def test_all_problems_are_non_fatal():
    text = "(A = x)\n(B = 1)\n(B = 2)\n{C}\nend {B}\n"

    output, report = preprocess_text(text)

    assert output == "(A = x)\n(B = 1)\n(B = 2)\nend 1.0\n"
    kinds = sorted(d.kind for d in report.diagnostics)
    assert kinds == ["duplicate_binding", "malformed_declaration", "nonexistent_binding"]


def test_non_letter_braces_are_kept():
    output, report = preprocess_text("x^{²} keep\n")

    assert output == "x^{²} keep\n"
    assert report.diagnostics == []


def test_report_to_dict_is_json_serializable():
    _, report = preprocess_text("(A = 1)\n{Nope}\n")

    data = json.loads(json.dumps(report.to_dict()))
    assert data["bindings"]["A"]["value"] == 1.0
    assert data["diagnostics"][0]["name"] == "Nope"
    assert "existing_line_number" not in data["diagnostics"][0]


class TestPreprocessFile:
    """File-level wrapper."""

    def setup_method(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.workspace = Path(self.temp_dir.name)
        self.input_path = self.workspace / "input.txt"
        self.input_path.write_text("(Rate = 3)\nrate: {rate}\n")

    def teardown_method(self):
        self.temp_dir.cleanup()

    def test_default_output_name(self):
        report = preprocess_file(self.input_path)

        output_path = self.workspace / "input.txt.out"
        assert report.output_path == str(output_path)
        assert output_path.read_text() == "(Rate = 3)\nrate: 3.0\n"

    def test_existing_output_overwritten(self):
        output_path = self.workspace / "result.txt"
        output_path.write_text("stale contents\n" * 10)

        preprocess_file(self.input_path, output_path)

        assert output_path.read_text() == "(Rate = 3)\nrate: 3.0\n"

    def test_config_suffix_and_report(self):
        config = PreprocessorConfig(output_suffix=".expanded", report=True)

        preprocess_file(self.input_path, config=config)

        assert (self.workspace / "input.txt.expanded").exists()
        report_data = json.loads((self.workspace / "input.txt.expanded.report.json").read_text())
        assert report_data["lines_written"] == 2

    def test_missing_input_produces_no_output(self):
        missing = self.workspace / "missing.txt"

        with pytest.raises(FileNotFoundError):
            preprocess_file(missing)

        assert not (self.workspace / "missing.txt.out").exists()
