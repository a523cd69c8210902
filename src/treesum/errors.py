# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while walking and checksumming a tree."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from .constants import EXIT_FAILURE


class EnumerationStep(StrEnum):
    """Filesystem operation that failed during enumeration."""

    STAT = "stat"
    OPEN = "open"
    LIST = "list"


_STEP_LABELS: Final[dict[EnumerationStep, str]] = {
    EnumerationStep.STAT: "Unable to stat",
    EnumerationStep.OPEN: "Unable to open",
    EnumerationStep.LIST: "Unable to read directory files",
}


class TreesumError(RuntimeError):
    """Base error for unrecoverable failures that abort a checksum run."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, label: str, path: str, cause: OSError) -> None:
        """Create the error with the offending ``path`` and underlying ``cause``.

        Args:
            label: Short description of the failed operation.
            path: Filesystem path that triggered the failure.
            cause: Operating system error reported for ``path``.
        """

        super().__init__(f"{label}: {path}: {_describe(cause)}")
        self.path = path
        self.cause = cause


class EnumerationError(TreesumError):
    """Raised when a path cannot be stat'ed, opened or listed during the walk."""

    def __init__(self, step: EnumerationStep, path: str, cause: OSError) -> None:
        """Create the error for ``step`` failing on ``path``.

        Args:
            step: Enumeration operation that failed.
            path: Filesystem path that triggered the failure.
            cause: Operating system error reported for ``path``.
        """

        super().__init__(_STEP_LABELS[step], path, cause)
        self.step = step


class HashingError(TreesumError):
    """Raised when a regular file cannot be opened or read for checksumming."""

    def __init__(self, path: str, cause: OSError) -> None:
        """Create the error for ``path`` failing with ``cause``."""

        super().__init__("Unable to checksum", path, cause)


def _describe(cause: OSError) -> str:
    """Return the operating system message for ``cause`` without the path noise."""

    if cause.strerror:
        return cause.strerror
    return str(cause) or cause.__class__.__name__


__all__ = (
    "EnumerationError",
    "EnumerationStep",
    "HashingError",
    "TreesumError",
)
