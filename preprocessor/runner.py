"""Run driver tying the binding and expansion passes together.

Reads the input once into memory, runs the binding pass to completion,
then the expansion pass, and collects a report of what happened.
"""

import io
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from preprocessor.config import PreprocessorConfig
from preprocessor.diagnostics import Diagnostic
from preprocessor.passes.binding import BindingPass
from preprocessor.passes.expansion import ExpansionPass
from preprocessor.symbols.table import SymbolTable


logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Summary of a preprocessing run."""
    table: SymbolTable
    diagnostics: List[Diagnostic] = field(default_factory=list)
    lines_read: int = 0
    lines_written: int = 0
    input_path: Optional[str] = None
    output_path: Optional[str] = None

    @property
    def lines_dropped(self) -> int:
        return self.lines_read - self.lines_written

    def diagnostics_of(self, kind: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        result: Dict[str, Any] = {
            'lines_read': self.lines_read,
            'lines_written': self.lines_written,
            'bindings': self.table.to_dict(),
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }
        if self.input_path is not None:
            result['input_path'] = self.input_path
        if self.output_path is not None:
            result['output_path'] = self.output_path
        return result


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


class Preprocessor:
    """Runs both passes over a list of lines with a fresh symbol table."""

    def run(self, lines: List[str], sink: TextIO) -> RunReport:
        """
        Preprocess lines into sink.

        Args:
            lines: Input lines, without trailing newlines
            sink: Writable text stream

        Returns:
            RunReport with bindings and diagnostics
        """
        table = SymbolTable()
        report = RunReport(table=table, lines_read=len(lines))

        report.diagnostics.extend(BindingPass(table).run(lines))

        expansion = ExpansionPass(table).run(lines, sink)
        report.diagnostics.extend(expansion.diagnostics)
        report.lines_written = expansion.lines_written

        return report


def preprocess_text(text: str) -> Tuple[str, RunReport]:
    """Preprocess a string, returning the output text and the report."""
    sink = io.StringIO()
    report = Preprocessor().run(split_lines(text), sink)
    return sink.getvalue(), report


def preprocess_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    config: Optional[PreprocessorConfig] = None
) -> RunReport:
    """
    Preprocess a file, overwriting the output file.

    Args:
        input_path: File to read
        output_path: File to write; derived from the input name when None
        config: Run settings; defaults when None

    Returns:
        RunReport for the run

    Raises:
        FileNotFoundError: If the input file does not exist
    """
    config = config or PreprocessorConfig()
    input_path = Path(input_path)
    if output_path is None:
        output_path = config.output_path_for(input_path)
    output_path = Path(output_path)

    # Read fully before touching the output so a bad input produces nothing
    with open(input_path, 'r', encoding=config.encoding) as f:
        lines = split_lines(f.read())

    logger.info(f"Preprocessing {input_path} -> {output_path}")
    with open(output_path, 'w', encoding=config.encoding) as f:
        report = Preprocessor().run(lines, f)

    report.input_path = str(input_path)
    report.output_path = str(output_path)

    if config.report:
        write_report(report, output_path.with_name(output_path.name + '.report.json'))

    return report


def write_report(report: RunReport, report_path: Path) -> None:
    """Write a run report as JSON."""
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with open(report_path, 'w') as f:
        json.dump(report.to_dict(), f, indent=2)
    logger.info(f"Wrote report: {report_path}")
