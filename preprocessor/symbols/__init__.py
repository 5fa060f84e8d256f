"""
Symbol table module.
Holds the bindings collected by the binding pass.
"""

from .table import Binding, SymbolTable

__all__ = ['Binding', 'SymbolTable']
