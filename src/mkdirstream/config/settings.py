"""Where: src/mkdirstream/config/settings.py
What: Fixed permission constants shared by the feature layers.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - POSIX permission semantics; Windows only honours the write bit.
Trade-offs: - User-tunable values live in ``Config`` and are read by the CLI only.
"""

from __future__ import annotations

# Permission bits ------------------------------------------------------------

# Permission plus setuid/setgid/sticky bits; stat results are compared after
# masking with this value.
MODE_MASK: int = 0o7777

# Mode passed to mkdir when the caller requests none; the process umask
# still applies.
DEFAULT_DIRECTORY_MODE: int = 0o777


__all__ = [
    "MODE_MASK",
    "DEFAULT_DIRECTORY_MODE",
]
