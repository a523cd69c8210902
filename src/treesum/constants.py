# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across treesum modules."""

from __future__ import annotations

from typing import Final

DIGEST_ALGORITHM: Final[str] = "md5"
DEFAULT_CHUNK_SIZE: Final[int] = 1 << 20
RECORD_SEPARATOR: Final[str] = ": "
CHUNK_SIZE_ENV: Final[str] = "TREESUM_CHUNK_SIZE"
EXIT_FAILURE: Final[int] = 1
