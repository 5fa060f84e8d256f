"""First pass: collect declarations into the symbol table."""

import logging
from typing import Iterable, List, Optional

from preprocessor.declarations.parser import DeclarationParser
from preprocessor.diagnostics import Diagnostic
from preprocessor.exceptions import DuplicateBindingError, MalformedDeclarationError
from preprocessor.symbols.table import SymbolTable


logger = logging.getLogger(__name__)


class BindingPass:
    """
    Scans every line for `(NAME = VALUE)` declarations.

    Malformed declarations and duplicates are reported and skipped; the
    pass always reaches the last line. The table is frozen when it ends.
    """

    def __init__(self, table: SymbolTable, parser: Optional[DeclarationParser] = None):
        self.table = table
        self.parser = parser or DeclarationParser()

    def run(self, lines: Iterable[str]) -> List[Diagnostic]:
        """
        Bind every well-formed declaration in lines.

        Args:
            lines: Input lines, without trailing newlines

        Returns:
            Diagnostics for malformed and duplicate declarations
        """
        diagnostics: List[Diagnostic] = []

        for line_number, line in enumerate(lines, start=1):
            diagnostic = self._bind_line(line, line_number)
            if diagnostic is not None:
                logger.warning(str(diagnostic))
                diagnostics.append(diagnostic)

        self.table.freeze()
        logger.info(f"Binding pass complete: {len(self.table)} variable(s) defined")
        return diagnostics

    def _bind_line(self, line: str, line_number: int) -> Optional[Diagnostic]:
        if not self.parser.is_candidate(line):
            return None

        try:
            declaration = self.parser.parse(line)
        except MalformedDeclarationError as e:
            return Diagnostic(
                kind="malformed_declaration",
                line_number=line_number,
                message=f"Malformed declaration ({e.reason}): {line}",
                line=line,
            )

        try:
            self.table.bind(declaration.name, declaration.value, line_number)
        except DuplicateBindingError as e:
            return Diagnostic(
                kind="duplicate_binding",
                line_number=line_number,
                message=(
                    f"Duplicate declaration of '{declaration.name}'; already defined "
                    f"on line {e.existing.line_number} with value {e.existing.value}"
                ),
                line=line,
                name=declaration.name,
                existing_line_number=e.existing.line_number,
                existing_value=e.existing.value,
            )

        return None
