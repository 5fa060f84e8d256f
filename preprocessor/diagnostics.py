"""Non-fatal diagnostics reported while preprocessing."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


DiagnosticKind = Literal["malformed_declaration", "duplicate_binding", "nonexistent_binding"]


@dataclass
class Diagnostic:
    """A per-line problem that was reported and skipped."""
    kind: DiagnosticKind
    line_number: int
    message: str
    line: str = ""
    name: Optional[str] = None
    # For duplicate_binding: where the kept binding was declared
    existing_line_number: Optional[int] = None
    existing_value: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting None values."""
        result = {}
        for k, v in asdict(self).items():
            if v is not None:
                result[k] = v
        return result

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"
