"""Second pass: expand placeholders and write surviving lines."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, TextIO

from preprocessor.diagnostics import Diagnostic
from preprocessor.exceptions import NonexistentBindingError
from preprocessor.expansion.engine import ExpansionEngine
from preprocessor.symbols.table import SymbolTable


logger = logging.getLogger(__name__)


@dataclass
class ExpansionResult:
    """Outcome of an expansion pass."""
    lines_written: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)


class ExpansionPass:
    """Expands every line and writes it to a sink, dropping unresolved lines."""

    def __init__(self, table: SymbolTable):
        self.engine = ExpansionEngine(table)

    def run(self, lines: Iterable[str], sink: TextIO) -> ExpansionResult:
        """
        Expand lines into sink, one output line per surviving input line.

        Args:
            lines: Input lines, without trailing newlines
            sink: Writable text stream

        Returns:
            ExpansionResult with the written count and dropped-line diagnostics
        """
        result = ExpansionResult()

        for line_number, line in enumerate(lines, start=1):
            try:
                expanded = self.engine.expand(line)
            except NonexistentBindingError as e:
                diagnostic = Diagnostic(
                    kind="nonexistent_binding",
                    line_number=line_number,
                    message=f"Variable '{e.name}' was never defined; line dropped",
                    line=line,
                    name=e.name,
                )
                logger.warning(str(diagnostic))
                result.diagnostics.append(diagnostic)
                continue

            sink.write(expanded + '\n')
            result.lines_written += 1

        logger.info(f"Expansion pass complete: {result.lines_written} line(s) written")
        return result
