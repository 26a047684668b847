"""Use cases for the stream feature."""

from .async_directory_stream import AsyncDirectoryStream
from .directory_stream import DirectoryStream
from .ports import AsyncResolver, ResolvedTarget, Resolver
from .stage import DirectoryStage, constant_resolver

__all__ = [
    "AsyncDirectoryStream",
    "AsyncResolver",
    "DirectoryStage",
    "DirectoryStream",
    "ResolvedTarget",
    "Resolver",
    "constant_resolver",
]
