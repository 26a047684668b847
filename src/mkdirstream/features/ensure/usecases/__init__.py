"""Use cases for the ensure feature."""

from .ensure_directory import DirectoryEnsurer, ensure_directory
from .ports import FilesystemPort

__all__ = ["DirectoryEnsurer", "FilesystemPort", "ensure_directory"]
