"""CLI display helpers."""

from .result import ResultDisplay

__all__ = ["ResultDisplay"]
