"""Command line argument parsing."""

from .options import EnsureArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "EnsureArgs"]
