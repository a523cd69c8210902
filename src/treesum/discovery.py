# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem enumeration of the regular files beneath a root path."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from enum import StrEnum

from .errors import EnumerationError, EnumerationStep

SkipCallback = Callable[[str], None]


class EntryKind(StrEnum):
    """Classification applied to every discovered filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def classify_entry(path: str) -> EntryKind:
    """Return the :class:`EntryKind` for ``path`` without following symlinks.

    Args:
        path: Filesystem path to inspect.

    Returns:
        EntryKind: ``FILE`` for regular files, ``DIRECTORY`` for directories and
        ``OTHER`` for symlinks, sockets, FIFOs and devices.

    Raises:
        EnumerationError: If ``path`` cannot be stat'ed.
    """

    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        raise EnumerationError(EnumerationStep.STAT, path, exc) from exc
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def list_directory(path: str) -> list[str]:
    """Return the entry names of ``path`` in the order the filesystem lists them.

    The directory handle is closed before returning, including on failure.

    Args:
        path: Directory to list.

    Returns:
        list[str]: Immediate entry names, excluding ``.`` and ``..``.

    Raises:
        EnumerationError: If the directory cannot be opened or read.
    """

    try:
        handle = os.scandir(path)
    except OSError as exc:
        raise EnumerationError(EnumerationStep.OPEN, path, exc) from exc
    with handle:
        try:
            return [entry.name for entry in handle]
        except OSError as exc:
            raise EnumerationError(EnumerationStep.LIST, path, exc) from exc


def iter_files(root: str, *, on_skip: SkipCallback | None = None) -> Iterator[str]:
    """Yield every regular file reachable from ``root``.

    Directories are expanded depth-first with children visited in listing
    order, which matches a recursive concatenation of each child's results.
    Entries that are neither regular files nor directories are reported via
    ``on_skip`` and otherwise ignored.

    Args:
        root: File or directory where the walk starts.
        on_skip: Optional callback receiving each skipped path.

    Yields:
        str: Paths built as ``directory + os.sep + name``; the root is kept as given.

    Raises:
        EnumerationError: If any path cannot be stat'ed, opened or listed.
    """

    pending = [root]
    while pending:
        path = pending.pop()
        kind = classify_entry(path)
        if kind is EntryKind.FILE:
            yield path
        elif kind is EntryKind.DIRECTORY:
            names = list_directory(path)
            pending.extend(f"{path}{os.sep}{name}" for name in reversed(names))
        elif on_skip is not None:
            on_skip(path)


def find_files(root: str, *, on_skip: SkipCallback | None = None) -> list[str]:
    """Return the regular files reachable from ``root`` in discovery order.

    Args:
        root: File or directory where the walk starts.
        on_skip: Optional callback receiving each skipped path.

    Returns:
        list[str]: Discovered regular-file paths; unsorted.
    """

    return list(iter_files(root, on_skip=on_skip))


__all__ = [
    "EntryKind",
    "SkipCallback",
    "classify_entry",
    "find_files",
    "iter_files",
    "list_directory",
]
