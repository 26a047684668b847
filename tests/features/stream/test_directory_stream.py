"""
Summary: Validate the synchronous per-item directory stream.
Why: Lock in ordering, short-circuit on failure and the byte/object item contracts.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from mkdirstream.features.ensure import DirectoryEnsurer
from mkdirstream.features.stream import DirectoryStream, DirectoryTarget, ItemState


def _stat_mode(path: Path) -> int:
    return stat.S_IMODE(os.lstat(path).st_mode)


@pytest.fixture
def output_dirpath(output_base: Path) -> Path:
    return output_base / "foo"


def test_takes_a_string_to_create(output_dirpath: Path) -> None:
    forwarded = list(DirectoryStream(str(output_dirpath)).pipe(["test"]))

    assert forwarded == [b"test"]
    assert output_dirpath.is_dir()


def test_takes_a_path_object_to_create(output_dirpath: Path) -> None:
    forwarded = list(DirectoryStream(output_dirpath)(["a", "b"]))

    assert forwarded == [b"a", b"b"]
    assert output_dirpath.is_dir()


def test_resolver_receives_chunk_as_bytes(output_dirpath: Path) -> None:
    received: list[Any] = []

    def resolver(chunk: bytes) -> Path:
        received.append(chunk)
        return output_dirpath

    _ = list(DirectoryStream(resolver).pipe(["test"]))

    assert received == [b"test"]
    assert output_dirpath.is_dir()


def test_bytes_like_items_are_forwarded_unchanged(output_dirpath: Path) -> None:
    payload = bytearray(b"\x00\xffbinary")
    view = memoryview(b"view")

    forwarded = list(DirectoryStream(output_dirpath).pipe([payload, view]))

    assert forwarded[0] is payload
    assert forwarded[1] is view


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission semantics")
def test_resolver_can_supply_a_mode(
    output_dirpath: Path, apply_umask: Callable[[int | str], int]
) -> None:
    mode = apply_umask("700")

    def resolver(chunk: bytes) -> tuple[Path, int]:
        assert chunk == b"test"
        return output_dirpath, mode

    _ = list(DirectoryStream(resolver).pipe(["test"]))

    assert _stat_mode(output_dirpath) == mode


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission semantics")
def test_resolver_can_return_directory_target_with_string_mode(
    output_dirpath: Path, apply_umask: Callable[[int | str], int]
) -> None:
    mode = apply_umask("750")

    stream = DirectoryStream(lambda _chunk: DirectoryTarget(output_dirpath, f"{mode:o}"))
    _ = list(stream.pipe([b"x"]))

    assert _stat_mode(output_dirpath) == mode


def test_resolver_error_fails_the_stream(output_dirpath: Path) -> None:
    def resolver(_chunk: bytes) -> Path:
        raise ValueError("boom")

    stream = DirectoryStream(resolver)
    forwarded: list[Any] = []

    with pytest.raises(ValueError, match="boom"):
        for item in stream.pipe(["test"]):
            forwarded.append(item)

    assert forwarded == []
    assert stream.state is ItemState.FAILED
    assert not output_dirpath.exists()


def test_works_with_object_mode(output_dirpath: Path) -> None:
    record = {"dirname": output_dirpath, "contents": b"payload"}

    def resolver(chunk: dict[str, Any]) -> Path:
        assert isinstance(chunk, dict)
        return chunk["dirname"]

    forwarded = list(DirectoryStream.obj(resolver).pipe([record]))

    assert forwarded == [record]
    assert forwarded[0] is record
    assert output_dirpath.is_dir()


def test_obj_shorthand_enables_object_mode(output_dirpath: Path) -> None:
    assert DirectoryStream.obj(output_dirpath).object_mode is True
    assert DirectoryStream(output_dirpath).object_mode is False


def test_byte_mode_rejects_structured_items(output_dirpath: Path) -> None:
    stream = DirectoryStream(output_dirpath)

    with pytest.raises(TypeError, match="object_mode"):
        _ = list(stream.pipe([{"dirname": "x"}]))

    assert stream.state is ItemState.FAILED
    assert not output_dirpath.exists()


def test_rejects_non_callable_resolver() -> None:
    with pytest.raises(TypeError):
        _ = DirectoryStream(42)


def test_rejects_unusable_resolver_result(output_dirpath: Path) -> None:
    stream = DirectoryStream.obj(lambda _item: 42)

    with pytest.raises(TypeError, match="resolver must return"):
        _ = list(stream.pipe(["x"]))


def test_bubbles_mkdir_errors(mocker: MockerFixture, output_dirpath: Path) -> None:
    ensurer = DirectoryEnsurer()
    _ = mocker.patch.object(ensurer.filesystem, "mkdir", side_effect=OSError(errno.EIO, "boom"))

    with pytest.raises(OSError, match="boom"):
        _ = list(DirectoryStream(output_dirpath, ensurer=ensurer).pipe(["test"]))

    assert not output_dirpath.exists()


def test_failure_short_circuits_remaining_items(output_base: Path) -> None:
    pulled: list[str] = []
    resolved: list[str] = []

    def upstream() -> Iterator[str]:
        for name in ("x1", "x2", "x3"):
            pulled.append(name)
            yield name

    def resolver(item: str) -> Path:
        resolved.append(item)
        if item == "x2":
            raise RuntimeError("cannot resolve x2")
        return output_base / item

    forwarded: list[str] = []
    with pytest.raises(RuntimeError, match="x2"):
        for item in DirectoryStream.obj(resolver).pipe(upstream()):
            forwarded.append(item)

    assert forwarded == ["x1"]
    assert resolved == ["x1", "x2"]
    assert pulled == ["x1", "x2"]
    assert (output_base / "x1").is_dir()
    assert not (output_base / "x3").exists()


def test_preserves_order_and_counts_forwarded_items(output_base: Path) -> None:
    items = [{"dir": output_base / f"d{index}", "index": index} for index in range(5)]
    stream = DirectoryStream.obj(lambda item: item["dir"])

    forwarded = list(stream.pipe(items))

    assert [item["index"] for item in forwarded] == [0, 1, 2, 3, 4]
    assert stream.forwarded == 5
    assert stream.state is ItemState.DONE
    assert all(item["dir"].is_dir() for item in items)


def test_pulls_one_item_at_a_time(output_base: Path) -> None:
    pulled: list[str] = []
    seen_states: list[ItemState] = []

    def upstream() -> Iterator[str]:
        for name in ("a", "b", "c"):
            pulled.append(name)
            yield name

    stream = DirectoryStream.obj(lambda item: output_base / item)
    iterator = stream.pipe(upstream())

    assert pulled == []
    assert next(iterator) == "a"
    seen_states.append(stream.state)
    assert pulled == ["a"]
    assert not (output_base / "b").exists()

    assert next(iterator) == "b"
    assert pulled == ["a", "b"]
    assert seen_states == [ItemState.FORWARDING]


def test_constant_path_ensures_once_per_item(mocker: MockerFixture, output_dirpath: Path) -> None:
    ensurer = DirectoryEnsurer()
    ensure_spy = mocker.spy(ensurer, "ensure")
    chmod_spy = mocker.spy(ensurer.filesystem, "chmod")

    forwarded = list(DirectoryStream(output_dirpath, ensurer=ensurer).pipe(["1", "2", "3"]))

    assert forwarded == [b"1", b"2", b"3"]
    assert ensure_spy.call_count == 3
    assert chmod_spy.call_count == 0


def test_stage_is_single_use(output_dirpath: Path) -> None:
    stream = DirectoryStream(output_dirpath)
    _ = list(stream.pipe(["a"]))

    with pytest.raises(RuntimeError, match="already consumed"):
        _ = stream.pipe(["b"])


def test_failures_are_logged_at_debug_only(
    caplog: pytest.LogCaptureFixture, output_base: Path
) -> None:
    blocker = output_base / "blocker"
    _ = blocker.write_text("not a directory")

    with caplog.at_level(logging.DEBUG, logger="mkdirstream"):
        with pytest.raises(FileExistsError):
            _ = list(DirectoryStream(blocker).pipe(["a"]))

    failures = [record for record in caplog.records if getattr(record, "fs_event", None) == "stream.failed"]
    assert [record.levelno for record in failures] == [logging.DEBUG]
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
