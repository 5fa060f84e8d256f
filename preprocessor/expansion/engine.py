"""
Placeholder expansion.
Replaces {NAME} placeholders with values from a symbol table.
"""

import re
from typing import List

from preprocessor.exceptions import NonexistentBindingError
from preprocessor.symbols.table import SymbolTable


class ExpansionEngine:
    """
    Expands {NAME} placeholders in a single line.

    A placeholder is `{`, one or more letters, `}`. Placeholders are
    resolved left to right; the first unresolved name aborts the line.
    """

    # Any brace group; only all-letter names (str.isalpha) are placeholders
    PLACEHOLDER_PATTERN = re.compile(r'\{([^{}]+)\}')

    def __init__(self, table: SymbolTable):
        self.table = table

    def expand(self, line: str) -> str:
        """
        Expand every placeholder in a line.

        Args:
            line: Line of text, possibly containing {NAME} placeholders

        Returns:
            The line with each placeholder replaced by its bound value

        Raises:
            NonexistentBindingError: If a placeholder names an unbound variable
        """
        parts: List[str] = []
        position = 0

        match = self.PLACEHOLDER_PATTERN.search(line, position)
        while match is not None:
            name = match.group(1)
            if not name.isalpha():
                match = self.PLACEHOLDER_PATTERN.search(line, match.end())
                continue

            binding = self.table.lookup(name)
            if binding is None:
                raise NonexistentBindingError(name, line)

            parts.append(line[position:match.start()])
            parts.append(self.render(binding.value))
            position = match.end()
            match = self.PLACEHOLDER_PATTERN.search(line, position)

        if position == 0:
            return line

        parts.append(line[position:])
        return ''.join(parts)

    @staticmethod
    def render(value: float) -> str:
        return str(value)

