"""CLI command executors."""

from .ensure import EnsureCommand

__all__ = ["EnsureCommand"]
