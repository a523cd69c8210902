# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Deterministic ordering for discovered paths."""

from __future__ import annotations

import os
from collections.abc import Iterable


def path_sort_key(path: str) -> bytes:
    """Return the byte representation used to order ``path``."""

    return os.fsencode(path)


def sort_paths(paths: Iterable[str]) -> list[str]:
    """Return ``paths`` ordered by byte-wise comparison of the full path.

    Undecodable names carried as surrogate escapes sort by their original
    bytes, so the order matches on every host regardless of locale.

    Args:
        paths: Paths produced by the enumerator.

    Returns:
        list[str]: New list in ascending byte order.
    """

    return sorted(paths, key=path_sort_key)


__all__ = ["path_sort_key", "sort_paths"]
