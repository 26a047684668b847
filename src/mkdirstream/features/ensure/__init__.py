"""
Summary: Public surface for idempotent, mode-aware directory creation.
Why: Provide a stable import path for the stream feature, the CLI and tests.
"""

from .usecases import DirectoryEnsurer, FilesystemPort, ensure_directory
from .adapters import LocalFilesystem
from .domain import (
    DirectoryConflictError,
    ErrorKind,
    MissingTargetError,
    ModeLike,
    classify_error,
    parse_mode,
)

__all__ = [
    "DirectoryConflictError",
    "DirectoryEnsurer",
    "ErrorKind",
    "FilesystemPort",
    "LocalFilesystem",
    "MissingTargetError",
    "ModeLike",
    "classify_error",
    "ensure_directory",
    "parse_mode",
]
