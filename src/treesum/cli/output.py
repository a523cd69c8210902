# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Standard output sink for checksum lines."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import BinaryIO


@dataclass(slots=True)
class StdoutLineWriter:
    """Write checksum lines to stdout as raw filesystem-encoded bytes.

    Paths with undecodable bytes round-trip exactly, and each line is flushed
    so output already produced survives a later failure.
    """

    stream: BinaryIO

    def __call__(self, line: str) -> None:
        self.stream.write(os.fsencode(line) + b"\n")
        self.stream.flush()


def stdout_writer() -> StdoutLineWriter:
    """Return a :class:`StdoutLineWriter` bound to the current binary stdout."""

    return StdoutLineWriter(stream=sys.stdout.buffer)


__all__ = ["StdoutLineWriter", "stdout_writer"]
