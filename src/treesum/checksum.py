# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for the files of a directory tree."""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .constants import DEFAULT_CHUNK_SIZE, DIGEST_ALGORITHM, RECORD_SEPARATOR
from .errors import HashingError

LineWriter = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class ChecksumRecord:
    """Pair a root-relative path with the digest of its contents."""

    relative_path: str
    digest: str

    def render(self) -> str:
        """Return the ``path: hexdigest`` output line without a newline."""

        return f"{self.relative_path}{RECORD_SEPARATOR}{self.digest}"


def file_digest(path: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Calculate the content digest of ``path``.

    The file is streamed in ``chunk_size`` blocks so large files never need to
    fit in memory. The handle is closed before returning.

    Args:
        path: Regular file to hash.
        chunk_size: Number of bytes read per iteration.

    Returns:
        str: Lowercase hex-encoded MD5 digest.

    Raises:
        HashingError: If the file cannot be opened or read.
    """

    hasher = hashlib.new(DIGEST_ALGORITHM, usedforsecurity=False)
    try:
        with open(path, "rb") as handle:
            while chunk := handle.read(chunk_size):
                hasher.update(chunk)
    except OSError as exc:
        raise HashingError(path, exc) from exc
    return hasher.hexdigest()


def strip_root(path: str, root: str) -> str:
    """Return ``path`` with the literal ``root`` prefix removed.

    This is plain string handling: no separators are added or normalised, and
    a path that does not start with ``root`` comes back unchanged.
    """

    return path.removeprefix(root)


def checksum_record(path: str, root: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ChecksumRecord:
    """Return the :class:`ChecksumRecord` for ``path`` beneath ``root``."""

    return ChecksumRecord(relative_path=strip_root(path, root), digest=file_digest(path, chunk_size=chunk_size))


def report_checksums(
    paths: Iterable[str],
    root: str,
    *,
    write: LineWriter,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Hash each of ``paths`` in order and emit one line per file.

    Each line is handed to ``write`` as soon as its file is hashed, so output
    produced before a failure is kept.

    Args:
        paths: Sorted regular-file paths.
        root: Root prefix stripped from every emitted path.
        write: Callable receiving each rendered line.
        chunk_size: Number of bytes read per iteration while hashing.

    Returns:
        int: Number of lines written.

    Raises:
        HashingError: If any file cannot be opened or read.
    """

    written = 0
    for path in paths:
        record = checksum_record(path, root, chunk_size=chunk_size)
        write(record.render())
        written += 1
    return written


__all__ = [
    "ChecksumRecord",
    "LineWriter",
    "checksum_record",
    "file_digest",
    "report_checksums",
    "strip_root",
]
