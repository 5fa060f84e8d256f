"""
Declaration module.
Recognizes `(NAME = VALUE)` lines.
"""

from .parser import Declaration, DeclarationParser

__all__ = ['Declaration', 'DeclarationParser']
