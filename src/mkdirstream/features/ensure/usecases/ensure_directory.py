"""
Summary: Recursively create a directory and reconcile its permission mode.
Why: Make "this directory exists with this mode" an idempotent precondition.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from mkdirstream.config.settings import DEFAULT_DIRECTORY_MODE
from mkdirstream.platform.logging import logger

from ..adapters.local import LocalFilesystem
from ..domain.errors import DirectoryConflictError, ErrorKind, MissingTargetError, classify_error
from ..domain.mode import ModeLike, format_mode, masked_mode, parse_mode
from .ports import FilesystemPort


class DirectoryEnsurer:
    """Create directories on demand, walking toward the root only when a parent is missing.

    Creation is attempted first; parents are created only after mkdir reports
    ``ENOENT``, so a fresh deep path costs one failed mkdir per missing level
    and no upfront existence checks. Intermediate directories always get the
    default mode. Only the requested path receives the caller's mode, and
    chmod is issued only when the on-disk mode differs.

    Concurrent calls for the same path are not coordinated: the caller that
    loses the mkdir race takes the already-exists branch and reconciles the
    mode like any other existing directory.
    """

    filesystem: FilesystemPort

    def __init__(self, filesystem: FilesystemPort | None = None) -> None:
        self.filesystem = filesystem if filesystem is not None else LocalFilesystem()

    def ensure(self, path: str | os.PathLike[str], mode: ModeLike = None) -> Path:
        """Ensure ``path`` is a directory, applying ``mode`` when given.

        Args:
            path: Directory to create; resolved against the working directory.
            mode: Permission bits as an int or octal string. None keeps the
                filesystem default and never rewrites an existing mode.

        Returns:
            Path: The resolved directory path.

        Raises:
            DirectoryConflictError: A non-directory entry occupies the path.
            MissingTargetError: The path is a symlink to a missing target.
            OSError: Any other filesystem failure, unchanged.
            ValueError: ``mode`` is not a valid permission value.
        """
        requested = parse_mode(mode)
        dirpath = os.path.abspath(os.fspath(path))
        try:
            self._ensure(dirpath, requested)
        except OSError as exc:
            logger.debug(
                "Failed to ensure directory %s: %s",
                dirpath,
                exc,
                extra={
                    "fs_event": "ensure.failed",
                    "path": dirpath,
                    "error_message": exc.strerror or str(exc),
                },
            )
            raise
        return Path(dirpath)

    def _ensure(self, dirpath: str, mode: int | None, *, retried: bool = False) -> None:
        failure: OSError | None = None
        try:
            self.filesystem.mkdir(dirpath, DEFAULT_DIRECTORY_MODE if mode is None else mode)
        except OSError as exc:
            failure = exc

        if failure is None:
            logger.debug(
                "Created directory %s",
                dirpath,
                extra={"fs_event": "ensure.created", "path": dirpath, "mode": mode},
            )
            self._reconcile_mode(dirpath, mode, self.filesystem.stat(dirpath))
            return

        kind = classify_error(failure)
        if kind is ErrorKind.NOT_FOUND:
            parent = os.path.dirname(dirpath)
            if retried or parent == dirpath:
                raise failure
            logger.debug(
                "Parent of %s is missing; creating %s first",
                dirpath,
                parent,
                extra={"fs_event": "ensure.parent_missing", "path": parent},
            )
            self._ensure(parent, None)
            self._ensure(dirpath, mode, retried=True)
            return

        if kind is ErrorKind.ALREADY_EXISTS:
            self._reconcile_existing(dirpath, mode, failure)
            return

        raise failure

    def _reconcile_existing(self, dirpath: str, mode: int | None, create_error: OSError) -> None:
        try:
            st = self.filesystem.stat(dirpath)
        except OSError as stat_error:
            dangling = self._dangling_link_error(dirpath, stat_error)
            if dangling is None:
                raise
            raise dangling from stat_error

        if not stat.S_ISDIR(st.st_mode):
            conflict = dirpath
            if stat.S_ISLNK(self.filesystem.lstat(dirpath).st_mode):
                conflict = self.filesystem.resolve_link(dirpath)
            raise DirectoryConflictError(conflict, cause=create_error) from create_error

        logger.debug(
            "Directory %s already exists",
            dirpath,
            extra={"fs_event": "ensure.exists", "path": dirpath},
        )
        self._reconcile_mode(dirpath, mode, st)

    def _dangling_link_error(self, dirpath: str, stat_error: OSError) -> MissingTargetError | None:
        """Return a ``MissingTargetError`` when ``dirpath`` is a symlink to nowhere."""

        if classify_error(stat_error) is not ErrorKind.NOT_FOUND:
            return None
        try:
            link_st = self.filesystem.lstat(dirpath)
        except OSError:
            return None
        if not stat.S_ISLNK(link_st.st_mode):
            return None
        return MissingTargetError(self.filesystem.resolve_link(dirpath), link_path=dirpath)

    def _reconcile_mode(self, dirpath: str, mode: int | None, st: os.stat_result) -> None:
        if mode is None or masked_mode(st) == mode:
            return

        self.filesystem.chmod(dirpath, mode)
        logger.debug(
            "Changed mode of %s from %s to %s",
            dirpath,
            format_mode(masked_mode(st)),
            format_mode(mode),
            extra={"fs_event": "ensure.mode_changed", "path": dirpath, "mode": mode},
        )


def ensure_directory(
    path: str | os.PathLike[str],
    mode: ModeLike = None,
    *,
    filesystem: FilesystemPort | None = None,
) -> Path:
    """Ensure ``path`` exists as a directory; see ``DirectoryEnsurer.ensure``."""

    return DirectoryEnsurer(filesystem).ensure(path, mode)


__all__ = ["DirectoryEnsurer", "ensure_directory"]
