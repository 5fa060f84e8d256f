"""
Preprocessing passes.
The binding pass must finish before the expansion pass starts.
"""

from .binding import BindingPass
from .expansion import ExpansionPass, ExpansionResult

__all__ = [
    "BindingPass",
    "ExpansionPass",
    "ExpansionResult",
]
