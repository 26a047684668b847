"""
Summary: Resolver protocols mapping stream items to directory targets.
Why: Let callers plug synchronous or asynchronous resolution into the same stream contract.
"""

from __future__ import annotations

import os
from collections.abc import Awaitable
from typing import Protocol, TypeVar

from ..domain.models import DirectoryTarget

ItemT_contra = TypeVar("ItemT_contra", contravariant=True)

ResolvedTarget = DirectoryTarget | str | os.PathLike[str] | tuple[str | os.PathLike[str], int | str | None]


class Resolver(Protocol[ItemT_contra]):
    """Derive the directory an item needs; raise to fail the stream."""

    def __call__(self, item: ItemT_contra, /) -> ResolvedTarget:
        ...


class AsyncResolver(Protocol[ItemT_contra]):
    """Resolver that may await before producing a target."""

    def __call__(self, item: ItemT_contra, /) -> ResolvedTarget | Awaitable[ResolvedTarget]:
        ...


__all__ = ["AsyncResolver", "ResolvedTarget", "Resolver"]
