"""
Summary: Asyncio stream stage that creates a directory per item before forwarding it.
Why: Serve async pipelines and async resolvers without blocking the event loop on mkdir.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import os
from collections.abc import AsyncGenerator, AsyncIterable, Iterable
from typing import Any

from mkdirstream.features.ensure import DirectoryEnsurer

from ..domain.models import DirectoryTarget, ItemState
from .ports import AsyncResolver
from .stage import DirectoryStage, ItemT


async def _aiter_items(items: Iterable[Any] | AsyncIterable[Any]) -> AsyncGenerator[Any, None]:
    if not isinstance(items, AsyncIterable):
        for item in items:
            yield item
        return

    source = aiter(items)
    try:
        async for item in source:
            yield item
    finally:
        aclose = getattr(source, "aclose", None)
        if aclose is not None:
            await aclose()


class AsyncDirectoryStream(DirectoryStage[ItemT]):
    """Async counterpart of ``DirectoryStream``.

    The resolver may be a coroutine function. Filesystem calls run in a
    worker thread via ``asyncio.to_thread``; at most one item is in flight.
    Closing the returned iterator early also closes an async item source.
    """

    def __init__(
        self,
        resolver: str | os.PathLike[str] | AsyncResolver[ItemT],
        *,
        object_mode: bool = False,
        ensurer: DirectoryEnsurer | None = None,
    ) -> None:
        super().__init__(resolver, object_mode=object_mode, ensurer=ensurer)

    def pipe(self, items: Iterable[Any] | AsyncIterable[Any]) -> AsyncGenerator[Any, None]:
        """Return an async iterator forwarding ``items`` once their directories exist."""

        self._claim()
        return self._run(items)

    __call__ = pipe

    async def _run(self, items: Iterable[Any] | AsyncIterable[Any]) -> AsyncGenerator[Any, None]:
        sequence = 0
        async with contextlib.aclosing(_aiter_items(items)) as source:
            async for item in source:
                sequence += 1
                self.state = ItemState.PENDING
                try:
                    chunk = self._prepare(item)
                    self.state = ItemState.RESOLVING
                    resolved = self.resolver(chunk)
                    if inspect.isawaitable(resolved):
                        resolved = await resolved
                    target = DirectoryTarget.coerce(resolved)
                    self.state = ItemState.ENSURING
                    _ = await asyncio.to_thread(self.ensurer.ensure, target.path, target.mode)
                except Exception as exc:
                    self._mark_failed(exc, sequence)
                    raise

                self._mark_forwarded(target, sequence)
                yield chunk
                self.state = ItemState.DONE


__all__ = ["AsyncDirectoryStream"]
