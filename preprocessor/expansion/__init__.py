"""
Expansion module.
Implements {NAME} placeholder substitution.
"""

from .engine import ExpansionEngine

__all__ = ['ExpansionEngine']
