"""Symbol table mapping declared names to their numeric bindings."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, Optional

from preprocessor.exceptions import DuplicateBindingError, SymbolTableFrozenError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Binding:
    """A declared variable: its name as written, value and defining line."""
    name: str
    value: float
    line_number: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict."""
        return asdict(self)


class SymbolTable:
    """
    Case-insensitive, case-preserving table of bindings.

    The first binding for a name wins. Later attempts raise
    DuplicateBindingError and leave the original binding untouched.
    Once frozen the table is read-only.
    """

    def __init__(self):
        self._bindings: Dict[str, Binding] = {}
        self._frozen = False

    @staticmethod
    def _key(name: str) -> str:
        return name.casefold()

    def bind(self, name: str, value: float, line_number: int) -> Binding:
        """
        Record a new binding.

        Args:
            name: Variable name as declared
            value: Numeric value, stored as float
            line_number: 1-indexed line of the declaration

        Returns:
            The new Binding

        Raises:
            DuplicateBindingError: If the name is already bound
            SymbolTableFrozenError: If the table has been frozen
        """
        if self._frozen:
            raise SymbolTableFrozenError(f"Cannot bind '{name}': symbol table is frozen")

        key = self._key(name)
        existing = self._bindings.get(key)
        if existing is not None:
            raise DuplicateBindingError(name, existing)

        binding = Binding(name=name, value=float(value), line_number=line_number)
        self._bindings[key] = binding
        logger.debug(f"Bound {name} = {binding.value} (line {line_number})")
        return binding

    def lookup(self, name: str) -> Optional[Binding]:
        """Return the binding for name, ignoring case, or None."""
        return self._bindings.get(self._key(name))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        # dicts keep insertion order, which is declaration order
        return iter(self._bindings.values())

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Convert to a dict keyed by declared name."""
        return {binding.name: binding.to_dict() for binding in self}
