"""Domain records for the stream feature."""

from .models import DirectoryTarget, ItemState

__all__ = ["DirectoryTarget", "ItemState"]
