"""Preprocessor exceptions."""

from typing import TYPE_CHECKING, List
from dataclasses import dataclass

if TYPE_CHECKING:
    from preprocessor.symbols.table import Binding


class PreprocessorError(Exception):
    """Base class for all preprocessor errors."""


class MalformedDeclarationError(PreprocessorError):
    """Raised when a declaration candidate line is not well-formed.

    Recovered per line by the binding pass.
    """

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed declaration ({reason}): {line!r}")


class DuplicateBindingError(PreprocessorError):
    """Raised by the symbol table when a name is already bound.

    Carries the binding that was kept so callers can report where the
    name was first declared.
    """

    def __init__(self, name: str, existing: "Binding"):
        self.name = name
        self.existing = existing
        super().__init__(
            f"Variable '{name}' already defined on line {existing.line_number} "
            f"with value {existing.value}"
        )


class NonexistentBindingError(PreprocessorError):
    """Raised when a placeholder names a variable that was never declared.

    Aborts expansion of the whole line.
    """

    def __init__(self, name: str, line: str):
        self.name = name
        self.line = line
        super().__init__(f"Variable '{name}' was never defined")


class SymbolTableFrozenError(PreprocessorError):
    """Raised when binding into a table after the binding pass finished."""


@dataclass
class ValidationError:
    """Single config validation error."""
    message: str
    path: str = ""


class ConfigValidationError(PreprocessorError):
    """Raised when a config file fails validation.

    Raised by the config loader so the CLI can map it to an exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
