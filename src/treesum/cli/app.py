# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for treesum."""

from __future__ import annotations

import typer

from ..config import ConfigError
from ..constants import DEFAULT_CHUNK_SIZE, EXIT_FAILURE
from .options import (
    CHUNK_SIZE_OPTION,
    COLOR_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    ROOT_OPTION,
    VERSION_OPTION,
    build_checksum_config,
)
from .output import stdout_writer
from .services import execute_checks
from .shared import CLIError, build_cli_logger
from .typer_ext import create_typer

COMMAND_HELP = (
    "Emit an MD5 checksum for every regular file under a directory, "
    "one 'path: hexdigest' line per file in byte-wise path order."
)

MISSING_ROOT_MESSAGE = "You must specify a directory."

app = create_typer(add_completion=False, rich_markup_mode=None)


@app.command(help=COMMAND_HELP)
def checksum(
    ctx: typer.Context,
    root: ROOT_OPTION = None,
    chunk_size: CHUNK_SIZE_OPTION = DEFAULT_CHUNK_SIZE,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = None,
    debug: DEBUG_OPTION = False,
    version: VERSION_OPTION = False,
) -> None:
    """Checksum every regular file beneath ``--dir``.

    Raises:
        typer.Exit: With status 1 when the root is missing or configuration,
            enumeration or hashing fails.
    """

    if not root:
        typer.echo(ctx.get_usage(), err=True)
        build_cli_logger(emoji=emoji, color=bool(color)).fail(f"Error: {MISSING_ROOT_MESSAGE}")
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        config = build_checksum_config(root=root, chunk_size=chunk_size, emoji=emoji, color=color, debug=debug)
    except ConfigError as exc:
        build_cli_logger(emoji=emoji, color=bool(color)).fail(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    logger = build_cli_logger(emoji=config.emoji, color=config.color, debug=config.debug)
    try:
        execute_checks(config, write=stdout_writer(), logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def main() -> None:
    """Console-script entry point."""

    app(prog_name="treesum")


__all__ = ["MISSING_ROOT_MESSAGE", "app", "checksum", "main"]
