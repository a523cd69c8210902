# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compose enumeration, ordering and reporting into a single checksum run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .checksum import LineWriter, report_checksums
from .config import ChecksumConfig
from .discovery import SkipCallback, find_files
from .ordering import sort_paths


@dataclass(slots=True)
class RunSummary:
    """Capture the outcome of a completed checksum run."""

    reported: int = 0
    skipped: list[str] = field(default_factory=list)
    notify: SkipCallback | None = None

    def register_skipped(self, path: str) -> None:
        """Record a path ignored during enumeration and forward it to ``notify``."""

        self.skipped.append(path)
        if self.notify is not None:
            self.notify(path)


def run_checks(
    config: ChecksumConfig,
    *,
    write: LineWriter,
    on_skip: SkipCallback | None = None,
) -> RunSummary:
    """Find, sort and checksum every regular file beneath ``config.root``.

    Args:
        config: Validated run configuration.
        write: Callable receiving each rendered checksum line.
        on_skip: Optional callback notified of each skipped entry.

    Returns:
        RunSummary: Counts describing the run.

    Raises:
        EnumerationError: If the tree walk fails.
        HashingError: If a file cannot be read; earlier lines stay written.
    """

    summary = RunSummary(notify=on_skip)
    files = sort_paths(find_files(config.root, on_skip=summary.register_skipped))
    summary.reported = report_checksums(files, config.root, write=write, chunk_size=config.chunk_size)
    return summary


__all__ = ["RunSummary", "run_checks"]
