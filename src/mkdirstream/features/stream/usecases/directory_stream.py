"""
Summary: Synchronous stream stage that creates a directory per item before forwarding it.
Why: Guarantee downstream consumers only see items whose target directory exists.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Any

from mkdirstream.features.ensure import DirectoryEnsurer

from ..domain.models import DirectoryTarget, ItemState
from .ports import Resolver
from .stage import DirectoryStage, ItemT


class DirectoryStream(DirectoryStage[ItemT]):
    """Pull-based stage: one item is resolved, ensured and forwarded at a time.

    The next upstream item is not pulled until the consumer asks for it, so
    directory creation never runs ahead of the consumer and output order
    matches input order. A resolver or ensure error is raised from the
    iterator and no later item is pulled.

    Example:
        >>> stream = DirectoryStream.obj(lambda record: record["dirname"])
        >>> for record in stream.pipe(records):
        ...     write(record)
    """

    def __init__(
        self,
        resolver: str | os.PathLike[str] | Resolver[ItemT],
        *,
        object_mode: bool = False,
        ensurer: DirectoryEnsurer | None = None,
    ) -> None:
        super().__init__(resolver, object_mode=object_mode, ensurer=ensurer)

    def pipe(self, items: Iterable[Any]) -> Iterator[Any]:
        """Return an iterator forwarding ``items`` once their directories exist."""

        self._claim()
        return self._run(iter(items))

    __call__ = pipe

    def _run(self, items: Iterator[Any]) -> Iterator[Any]:
        for sequence, item in enumerate(items, start=1):
            self.state = ItemState.PENDING
            try:
                chunk = self._prepare(item)
                self.state = ItemState.RESOLVING
                target = DirectoryTarget.coerce(self.resolver(chunk))
                self.state = ItemState.ENSURING
                _ = self.ensurer.ensure(target.path, target.mode)
            except Exception as exc:
                self._mark_failed(exc, sequence)
                raise

            self._mark_forwarded(target, sequence)
            yield chunk
            self.state = ItemState.DONE


__all__ = ["DirectoryStream"]
