"""CLI command handlers."""

from .run import run_preprocess

__all__ = ['run_preprocess']
