"""
Summary: Public surface for streams that ensure a directory per item.
Why: Provide a stable import path for pipelines, the CLI and tests.
"""

from .domain import DirectoryTarget, ItemState
from .usecases import (
    AsyncDirectoryStream,
    AsyncResolver,
    DirectoryStream,
    ResolvedTarget,
    Resolver,
)

__all__ = [
    "AsyncDirectoryStream",
    "AsyncResolver",
    "DirectoryStream",
    "DirectoryTarget",
    "ItemState",
    "ResolvedTarget",
    "Resolver",
]
