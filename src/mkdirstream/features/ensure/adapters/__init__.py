"""Filesystem adapters for the ensure feature."""

from .local import LocalFilesystem

__all__ = ["LocalFilesystem"]
