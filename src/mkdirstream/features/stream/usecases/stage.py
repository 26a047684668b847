"""
Summary: Shared configuration and bookkeeping for per-item directory streams.
Why: Keep the sync and async streams identical in everything except how they wait.
"""

from __future__ import annotations

import os
from typing import Any, Generic, Self, TypeVar

from mkdirstream.features.ensure import DirectoryEnsurer
from mkdirstream.platform.logging import logger

from ..domain.models import DirectoryTarget, ItemState
from .ports import AsyncResolver, Resolver

ItemT = TypeVar("ItemT")

_BYTES_LIKE: tuple[type, ...] = (bytes, bytearray, memoryview)


def constant_resolver(dirpath: str | os.PathLike[str]) -> Resolver[object]:
    """Build a resolver mapping every item to ``dirpath`` with no mode."""

    target = DirectoryTarget(dirpath)

    def resolve(_item: object) -> DirectoryTarget:
        return target

    return resolve


class DirectoryStage(Generic[ItemT]):
    """Base for streams that ensure a directory per item before forwarding it.

    A stage is single-use: ``pipe`` may be called once, and the first error
    ends the stream for good.
    """

    resolver: AsyncResolver[Any]
    object_mode: bool
    ensurer: DirectoryEnsurer
    state: ItemState
    forwarded: int

    def __init__(
        self,
        resolver: str | os.PathLike[str] | AsyncResolver[ItemT],
        *,
        object_mode: bool = False,
        ensurer: DirectoryEnsurer | None = None,
    ) -> None:
        """Configure the stage.

        Args:
            resolver: A fixed directory path, or a callable receiving each item
                and returning a path, a ``(path, mode)`` tuple or a ``DirectoryTarget``.
            object_mode: Forward arbitrary objects instead of byte chunks.
            ensurer: Directory ensurer to use; a local one by default.
        """
        if isinstance(resolver, (str, os.PathLike)):
            resolver = constant_resolver(resolver)
        elif not callable(resolver):
            raise TypeError(f"resolver must be a path or a callable, not {type(resolver).__name__}")

        self.resolver = resolver
        self.object_mode = object_mode
        self.ensurer = ensurer if ensurer is not None else DirectoryEnsurer()
        self.state = ItemState.PENDING
        self.forwarded = 0
        self._consumed = False

    @classmethod
    def obj(cls, resolver: str | os.PathLike[str] | AsyncResolver[Any], **kwargs: Any) -> Self:
        """Build an object-mode stage, for items carrying their own path fields."""

        return cls(resolver, object_mode=True, **kwargs)

    def _claim(self) -> None:
        if self._consumed:
            raise RuntimeError("stream already consumed; build a new stage per pipeline")
        self._consumed = True

    def _prepare(self, item: Any) -> Any:
        """Return the item as it travels through the stage."""

        if self.object_mode:
            return item
        if isinstance(item, str):
            return item.encode("utf-8")
        if isinstance(item, _BYTES_LIKE):
            return item
        raise TypeError(
            f"byte stream items must be bytes-like or str, not {type(item).__name__}; "
            "use object_mode for structured items"
        )

    def _mark_forwarded(self, target: DirectoryTarget, sequence: int) -> None:
        self.state = ItemState.FORWARDING
        self.forwarded += 1
        logger.debug(
            "Forwarding item %d after ensuring %s",
            sequence,
            os.fspath(target.path),
            extra={
                "fs_event": "stream.item.forwarded",
                "path": os.fspath(target.path),
                "sequence": sequence,
            },
        )

    def _mark_failed(self, exc: BaseException, sequence: int) -> None:
        self.state = ItemState.FAILED
        logger.debug(
            "Directory stream failed on item %d: %s",
            sequence,
            exc,
            extra={
                "fs_event": "stream.failed",
                "path": getattr(exc, "filename", None),
                "sequence": sequence,
                "error_message": str(exc),
            },
        )


__all__ = ["DirectoryStage", "ItemT", "constant_resolver"]
