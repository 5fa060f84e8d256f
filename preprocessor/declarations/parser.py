"""Parser for single-line `(NAME = VALUE)` declarations."""

import math
from dataclasses import dataclass

from preprocessor.exceptions import MalformedDeclarationError


@dataclass(frozen=True)
class Declaration:
    """A parsed declaration."""
    name: str
    value: float


class DeclarationParser:
    """
    Recognizes and decodes `(NAME = VALUE)` declarations.

    A line is a candidate when it contains `(`, `=` and `)` anywhere.
    Well-formedness is then checked using the first occurrence of each:
    the name between `(` and `=` must be letters only, the value between
    `=` and `)` must be decimal digits only. Both are trimmed of spaces,
    tabs and newlines first.
    """

    STRUCTURAL_CHARS = ('(', '=', ')')
    TRIM_CHARS = ' \t\n'

    def is_candidate(self, line: str) -> bool:
        """Return True if the line contains every structural character."""
        return all(char in line for char in self.STRUCTURAL_CHARS)

    def parse(self, line: str) -> Declaration:
        """
        Parse a declaration candidate.

        Args:
            line: Line of text containing `(`, `=` and `)`

        Returns:
            The parsed Declaration

        Raises:
            MalformedDeclarationError: If the line is not well-formed
        """
        if not self.is_candidate(line):
            raise MalformedDeclarationError(line, "missing '(', '=' or ')'")

        open_pos = line.index('(')
        equals_pos = line.index('=')
        close_pos = line.index(')')

        if not open_pos < equals_pos < close_pos:
            raise MalformedDeclarationError(line, "expected '(' before '=' before ')'")

        name = line[open_pos + 1:equals_pos].strip(self.TRIM_CHARS)
        value_text = line[equals_pos + 1:close_pos].strip(self.TRIM_CHARS)

        if not name:
            raise MalformedDeclarationError(line, "empty name")
        if not name.isalpha():
            raise MalformedDeclarationError(line, f"name '{name}' must contain only letters")
        if not value_text:
            raise MalformedDeclarationError(line, "empty value")
        if not value_text.isdecimal():
            raise MalformedDeclarationError(line, f"value '{value_text}' must contain only digits")

        value = float(value_text)
        if math.isinf(value):
            raise MalformedDeclarationError(line, f"value '{value_text}' out of range")

        return Declaration(name=name, value=value)
