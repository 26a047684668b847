"""mkdirstream: idempotent, mode-aware directory creation and per-item directory streams."""

from mkdirstream.features.ensure import (
    DirectoryConflictError,
    DirectoryEnsurer,
    ErrorKind,
    FilesystemPort,
    LocalFilesystem,
    MissingTargetError,
    ensure_directory,
    parse_mode,
)
from mkdirstream.features.stream import (
    AsyncDirectoryStream,
    DirectoryStream,
    DirectoryTarget,
    ItemState,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncDirectoryStream",
    "DirectoryConflictError",
    "DirectoryEnsurer",
    "DirectoryStream",
    "DirectoryTarget",
    "ErrorKind",
    "FilesystemPort",
    "ItemState",
    "LocalFilesystem",
    "MissingTargetError",
    "ensure_directory",
    "parse_mode",
]
