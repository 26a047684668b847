"""
Summary: Parse and mask POSIX permission modes for directory creation.
Why: Accept integer and octal-string modes while comparing only the low 12 bits.
"""

from __future__ import annotations

import os
import stat

from mkdirstream.config.settings import MODE_MASK

ModeLike = int | str | None


def parse_mode(mode: ModeLike) -> int | None:
    """Return ``mode`` as an integer masked to ``MODE_MASK``, or None when absent.

    Strings are read in base 8 with an optional ``0o`` prefix, so ``"755"``,
    ``"0755"`` and ``"0o755"`` all equal ``0o755``.

    Raises:
        TypeError: ``mode`` is neither an int nor a str.
        ValueError: ``mode`` is negative or not an octal literal.
    """
    if mode is None:
        return None
    if isinstance(mode, bool) or not isinstance(mode, (int, str)):
        raise TypeError(f"mode must be an int or an octal string, not {type(mode).__name__}")

    if isinstance(mode, str):
        text = mode.strip().lower().removeprefix("0o")
        if not text:
            raise ValueError(f"invalid octal mode: {mode!r}")
        try:
            value = int(text, 8)
        except ValueError as exc:
            raise ValueError(f"invalid octal mode: {mode!r}") from exc
    else:
        value = mode

    if value < 0:
        raise ValueError(f"mode must not be negative: {mode!r}")
    return value & MODE_MASK


def masked_mode(st: os.stat_result) -> int:
    """Return the permission and special bits of a stat result."""

    return stat.S_IMODE(st.st_mode) & MODE_MASK


def format_mode(mode: int | None) -> str:
    """Render ``mode`` as a four-digit octal string for messages."""

    return "default" if mode is None else f"{mode:04o}"


__all__ = ["ModeLike", "format_mode", "masked_mode", "parse_mode"]
