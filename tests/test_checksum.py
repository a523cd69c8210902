# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for content digests and checksum line reporting."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from treesum.checksum import ChecksumRecord, checksum_record, file_digest, report_checksums, strip_root
from treesum.errors import HashingError

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def test_empty_file_has_well_known_digest(tmp_path: Path) -> None:
    target = tmp_path / "empty"
    target.write_bytes(b"")

    assert file_digest(str(target)) == EMPTY_MD5


def test_digest_matches_md5_of_content_across_chunk_sizes(tmp_path: Path) -> None:
    payload = os.urandom(10_000)
    target = tmp_path / "payload.bin"
    target.write_bytes(payload)
    expected = hashlib.md5(payload).hexdigest()

    for chunk_size in (1, 7, 4096, 1 << 20):
        assert file_digest(str(target), chunk_size=chunk_size) == expected


def test_identical_content_gives_identical_digest(tmp_path: Path) -> None:
    (tmp_path / "a").write_bytes(b"same bytes")
    (tmp_path / "b").write_bytes(b"same bytes")
    (tmp_path / "c").write_bytes(b"same bytez")

    digest_a = file_digest(str(tmp_path / "a"))

    assert digest_a == file_digest(str(tmp_path / "b"))
    assert digest_a != file_digest(str(tmp_path / "c"))


def test_digest_is_lowercase_hex_of_fixed_length(tmp_path: Path) -> None:
    target = tmp_path / "data"
    target.write_bytes(b"\x00\xff" * 100)

    digest = file_digest(str(target))

    assert len(digest) == 32
    assert digest == digest.lower()
    int(digest, 16)


def test_missing_file_raises_hashing_error(tmp_path: Path) -> None:
    missing = tmp_path / "gone"

    with pytest.raises(HashingError) as excinfo:
        file_digest(str(missing))

    assert excinfo.value.path == str(missing)
    assert str(excinfo.value).startswith(f"Unable to checksum: {missing}: ")


@pytest.mark.parametrize(
    ("path", "root", "expected"),
    [
        ("/data/sub/file", "/data", "/sub/file"),
        ("/data/sub/file", "/data/", "sub/file"),
        ("/other/file", "/data", "/other/file"),
        ("./a/b", ".", "/a/b"),
        ("/database/x", "/data", "base/x"),
    ],
)
def test_strip_root_is_a_literal_prefix_strip(path: str, root: str, expected: str) -> None:
    assert strip_root(path, root) == expected


def test_checksum_record_renders_path_and_digest(tmp_path: Path) -> None:
    target = tmp_path / "empty"
    target.write_bytes(b"")

    record = checksum_record(str(target), str(tmp_path))

    assert record == ChecksumRecord(relative_path=f"{os.sep}empty", digest=EMPTY_MD5)
    assert record.render() == f"{os.sep}empty: {EMPTY_MD5}"


def test_report_checksums_writes_one_line_per_path_in_order(tmp_path: Path) -> None:
    (tmp_path / "b").write_bytes(b"b")
    (tmp_path / "a").write_bytes(b"a")
    paths = [str(tmp_path / "a"), str(tmp_path / "b")]
    lines: list[str] = []

    written = report_checksums(paths, str(tmp_path), write=lines.append)

    assert written == 2
    assert lines == [
        f"{os.sep}a: {hashlib.md5(b'a').hexdigest()}",
        f"{os.sep}b: {hashlib.md5(b'b').hexdigest()}",
    ]


def test_report_checksums_keeps_lines_written_before_a_failure(tmp_path: Path) -> None:
    (tmp_path / "a").write_bytes(b"a")
    paths = [str(tmp_path / "a"), str(tmp_path / "missing"), str(tmp_path / "z")]
    lines: list[str] = []

    with pytest.raises(HashingError) as excinfo:
        report_checksums(paths, str(tmp_path), write=lines.append)

    assert excinfo.value.path == str(tmp_path / "missing")
    assert lines == [f"{os.sep}a: {hashlib.md5(b'a').hexdigest()}"]


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_file_raises_hashing_error(tmp_path: Path) -> None:
    target = tmp_path / "secret"
    target.write_bytes(b"secret")
    target.chmod(0)
    try:
        with pytest.raises(HashingError) as excinfo:
            file_digest(str(target))
    finally:
        target.chmod(0o644)

    assert isinstance(excinfo.value.cause, PermissionError)
