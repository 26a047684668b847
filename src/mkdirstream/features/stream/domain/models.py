"""Data structures describing per-item directory targets and stream progress."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from mkdirstream.features.ensure import ModeLike


class ItemState(str, Enum):
    """Lifecycle of the item currently held by a stream."""

    PENDING = "pending"
    RESOLVING = "resolving"
    ENSURING = "ensuring"
    FORWARDING = "forwarding"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class DirectoryTarget:
    """Directory (and optional mode) an item requires before it moves on."""

    path: str | os.PathLike[str]
    mode: ModeLike = None

    @staticmethod
    def coerce(value: object) -> "DirectoryTarget":
        """Accept a ``DirectoryTarget``, a bare path, or a ``(path, mode)`` tuple."""

        if isinstance(value, DirectoryTarget):
            return value
        if isinstance(value, (str, os.PathLike)):
            return DirectoryTarget(value)
        if isinstance(value, tuple) and len(value) == 2:
            path, mode = value
            if isinstance(path, (str, os.PathLike)):
                return DirectoryTarget(path, mode)
        msg = (
            "resolver must return a path, a (path, mode) tuple or a DirectoryTarget, "
            f"not {type(value).__name__}"
        )
        raise TypeError(msg)


__all__ = ["DirectoryTarget", "ItemState"]
