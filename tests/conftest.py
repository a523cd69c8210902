# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Return a small tree of regular files and nested directories."""

    root = tmp_path / "tree"
    (root / "b" / "deep").mkdir(parents=True)
    (root / "a").mkdir()
    (root / "a" / "one.txt").write_bytes(b"one\n")
    (root / "a" / "empty").write_bytes(b"")
    (root / "b" / "two.bin").write_bytes(bytes(range(256)) * 64)
    (root / "b" / "deep" / "copy.txt").write_bytes(b"one\n")
    (root / "top.txt").write_bytes(b"top")
    return root

