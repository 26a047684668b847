"""Local filesystem adapter for the directory ensurer."""

from __future__ import annotations

import os

from ..usecases.ports import FilesystemPort


class LocalFilesystem(FilesystemPort):
    """Thin wrapper around ``os`` primitives."""

    def mkdir(self, path: str, mode: int) -> None:
        os.mkdir(path, mode)

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def resolve_link(self, path: str) -> str:
        return os.path.realpath(path)

    def chmod(self, path: str, mode: int) -> None:
        os.chmod(path, mode)


__all__ = ["LocalFilesystem"]
