"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class EnsureArgs:
    """Validated command line arguments."""

    directories: list[Path] = field(default_factory=list)
    mode: int | None = None
    read_stdin: bool = False
    verbose: bool = False
    quiet: bool = False


__all__ = ["EnsureArgs"]
