"""src/mkdirstream/ui/cli/commands/ensure.py
What: Execute directory creation for positional arguments and stdin streams.
Why: Map CLI arguments onto the ensure and stream features.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO, final

from mkdirstream.features.ensure import DirectoryEnsurer
from mkdirstream.features.stream import DirectoryStream, DirectoryTarget
from mkdirstream.ui.cli.args.options import EnsureArgs
from mkdirstream.ui.cli.models import EnsureResult


def _read_paths(source: TextIO) -> Iterator[str]:
    for line in source:
        stripped = line.rstrip("\r\n")
        if stripped:
            yield stripped


@final
class EnsureCommand:
    """Ensure every requested directory exists."""

    args: EnsureArgs
    ensurer: DirectoryEnsurer

    def __init__(
        self,
        args: EnsureArgs,
        *,
        ensurer: DirectoryEnsurer | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.args = args
        self.ensurer = ensurer if ensurer is not None else DirectoryEnsurer()
        self._stdin = stdin
        self._stdout = stdout

    def execute(self) -> list[EnsureResult]:
        """Ensure positional directories, then stream stdin paths if requested.

        Positional directories are independent: a failure is recorded and the
        next one is still attempted. The stdin stream stops at its first failure.
        """
        results = [self._ensure_one(directory) for directory in self.args.directories]
        if self.args.read_stdin:
            results.extend(self._ensure_stream())
        return results

    def _ensure_one(self, directory: Path) -> EnsureResult:
        try:
            resolved = self.ensurer.ensure(directory, self.args.mode)
        except OSError as exc:
            return EnsureResult(path=directory, success=False, error_message=_describe(exc))
        return EnsureResult(path=resolved, success=True)

    def _ensure_stream(self) -> list[EnsureResult]:
        source = self._stdin if self._stdin is not None else sys.stdin
        sink = self._stdout if self._stdout is not None else sys.stdout
        mode = self.args.mode

        def resolve(line: str) -> DirectoryTarget:
            return DirectoryTarget(line, mode)

        stream: DirectoryStream[str] = DirectoryStream.obj(resolve, ensurer=self.ensurer)
        results: list[EnsureResult] = []
        pending = _read_paths(source)
        try:
            for line in stream.pipe(pending):
                _ = sink.write(f"{line}\n")
                results.append(EnsureResult(path=Path(line), success=True))
        except OSError as exc:
            failed = Path(exc.filename) if exc.filename else Path("<stdin>")
            results.append(EnsureResult(path=failed, success=False, error_message=_describe(exc)))
        sink.flush()
        return results


def _describe(exc: OSError) -> str:
    if exc.filename:
        return f"{exc.strerror or exc}: {exc.filename}"
    return str(exc)


__all__ = ["EnsureCommand"]
