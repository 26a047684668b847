"""
Summary: Error taxonomy surfaced by directory creation.
Why: Let callers tell a conflicting entry from a dangling symlink without parsing messages.
"""

from __future__ import annotations

import errno
import os
from enum import Enum


class ErrorKind(Enum):
    """Classification of a failed mkdir call."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    OTHER = "other"


def classify_error(exc: OSError) -> ErrorKind:
    """Map an ``OSError`` raised by mkdir to an ``ErrorKind`` using its errno."""

    if exc.errno == errno.ENOENT:
        return ErrorKind.NOT_FOUND
    if exc.errno == errno.EEXIST:
        return ErrorKind.ALREADY_EXISTS
    return ErrorKind.OTHER


class DirectoryConflictError(FileExistsError):
    """A non-directory entry occupies the requested path.

    ``filename`` is the conflicting entry; for a symlink it is the resolved
    target rather than the link itself.
    """

    def __init__(self, path: str, *, cause: OSError | None = None) -> None:
        code = cause.errno if cause is not None and cause.errno is not None else errno.EEXIST
        super().__init__(code, "File exists and is not a directory", path)


class MissingTargetError(FileNotFoundError):
    """The requested path is a symlink whose target does not exist."""

    link_path: str

    def __init__(self, target: str, *, link_path: str) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), target)
        self.link_path = link_path


__all__ = [
    "DirectoryConflictError",
    "ErrorKind",
    "MissingTargetError",
    "classify_error",
]
