"""
Summary: Filesystem port required by the directory ensurer.
Why: Keep the creation algorithm independent of ``os`` so tests can inject failures.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable


@runtime_checkable
class FilesystemPort(Protocol):
    """Primitive filesystem operations; every method raises ``OSError`` on failure."""

    def mkdir(self, path: str, mode: int) -> None:
        """Create a single directory at ``path`` with ``mode`` (subject to umask)."""
        ...

    def stat(self, path: str) -> os.stat_result:
        """Return the status of ``path``, following symlinks."""
        ...

    def lstat(self, path: str) -> os.stat_result:
        """Return the status of ``path`` itself, without following symlinks."""
        ...

    def resolve_link(self, path: str) -> str:
        """Return the final target of the symlink chain at ``path``, existing or not."""
        ...

    def chmod(self, path: str, mode: int) -> None:
        """Set the permission bits of ``path``, following symlinks."""
        ...


__all__ = ["FilesystemPort"]
