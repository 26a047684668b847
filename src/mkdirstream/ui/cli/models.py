"""src/mkdirstream/ui/cli/models.py
What: Result records shared between CLI commands and displays.
Why: Keep presentation decoupled from the ensure and stream features.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class EnsureResult:
    """Outcome of ensuring one directory from the command line."""

    path: Path
    success: bool
    error_message: str | None = None


__all__ = ["EnsureResult"]
