"""Shared pytest fixtures for filesystem-backed tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def output_base(tmp_path: Path) -> Path:
    """Provide a scratch directory with a predictable mode.

    Linux propagates the setgid bit of a parent to new directories, which
    would leak into mode assertions, so the base is reset to 0777.
    """

    base = tmp_path / "out-fixtures"
    base.mkdir()
    os.chmod(base, 0o777)
    return base


@pytest.fixture
def current_umask() -> int:
    """Return the process umask without changing it."""

    current = os.umask(0)
    _ = os.umask(current)
    return current


@pytest.fixture
def apply_umask(current_umask: int) -> Callable[[int | str], int]:
    """Return a helper computing the mode mkdir would produce for a request."""

    def _apply(mode: int | str) -> int:
        value = int(mode, 8) if isinstance(mode, str) else mode
        return value & ~current_umask

    return _apply
