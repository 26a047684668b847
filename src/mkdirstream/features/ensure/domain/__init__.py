"""Domain types for directory creation: modes and errors."""

from .errors import DirectoryConflictError, ErrorKind, MissingTargetError, classify_error
from .mode import ModeLike, format_mode, masked_mode, parse_mode

__all__ = [
    "DirectoryConflictError",
    "ErrorKind",
    "MissingTargetError",
    "ModeLike",
    "classify_error",
    "format_mode",
    "masked_mode",
    "parse_mode",
]
