# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations for the treesum command."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from ..config import ChecksumConfig, build_config
from ..console import detect_tty
from ..constants import CHUNK_SIZE_ENV, DEFAULT_CHUNK_SIZE


def _show_version(value: bool) -> None:
    """Print the package version and stop when ``--version`` is passed."""

    if value:
        typer.echo(f"treesum {__version__}")
        raise typer.Exit(code=0)


ROOT_OPTION = Annotated[
    str | None,
    typer.Option(
        "--dir",
        "-d",
        help="Path to root directory to begin checks.",
        show_default=False,
    ),
]
CHUNK_SIZE_OPTION = Annotated[
    int,
    typer.Option(
        "--chunk-size",
        envvar=CHUNK_SIZE_ENV,
        help="Bytes read per iteration while hashing a file.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in diagnostics."),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--color/--no-color",
        help="Toggle coloured diagnostics (defaults to on when stderr is a terminal).",
        show_default=False,
    ),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug diagnostics to stderr."),
]
VERSION_OPTION = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
]


def build_checksum_config(
    *,
    root: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    emoji: bool = True,
    color: bool | None = None,
    debug: bool = False,
) -> ChecksumConfig:
    """Construct a validated :class:`ChecksumConfig` from Typer callback parameters.

    Raises:
        ConfigError: If any option value fails validation.
    """

    return build_config(
        root=root,
        chunk_size=chunk_size,
        emoji=emoji,
        color=detect_tty() if color is None else color,
        debug=debug,
    )


__all__ = [
    "CHUNK_SIZE_OPTION",
    "COLOR_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "ROOT_OPTION",
    "VERSION_OPTION",
    "build_checksum_config",
]
