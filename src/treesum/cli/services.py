# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the treesum command."""

from __future__ import annotations

from dataclasses import dataclass

from ..checksum import LineWriter
from ..config import ChecksumConfig
from ..errors import TreesumError
from ..pipeline import RunSummary, run_checks
from .shared import CLIError, CLILogger

SKIP_MESSAGE = "Ignoring non-regular and non-directory file: {path}"


@dataclass(slots=True)
class SkipWarner:
    """Emit a warning for each entry skipped during enumeration."""

    logger: CLILogger

    def __call__(self, path: str) -> None:
        self.logger.warn(SKIP_MESSAGE.format(path=path))


def execute_checks(config: ChecksumConfig, *, write: LineWriter, logger: CLILogger) -> RunSummary:
    """Run the checksum pipeline for ``config`` and report skipped entries.

    Args:
        config: Validated run configuration.
        write: Sink receiving each checksum line.
        logger: Logger used for warnings and debug diagnostics.

    Returns:
        RunSummary: Counts describing the completed run.

    Raises:
        CLIError: If enumeration or hashing fails.
    """

    logger.debug(f"root={config.root} chunk_size={config.chunk_size}")
    try:
        summary = run_checks(config, write=write, on_skip=SkipWarner(logger))
    except TreesumError as exc:
        raise CLIError(str(exc), exit_code=exc.exit_code) from exc
    logger.debug(f"reported={summary.reported} skipped={len(summary.skipped)}")
    return summary


__all__ = ["SKIP_MESSAGE", "SkipWarner", "execute_checks"]
