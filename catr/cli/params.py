# catr/cli/params.py
# CLI argument & option definitions

from __future__ import annotations

from typing import Any

import typer


def FilesArg() -> Any:
    return typer.Argument(
        ...,
        metavar="FILE...",
        help="Input file(s); '-' reads standard input",
        show_default=False,
    )


def NumberOpt() -> Any:
    return typer.Option(False, "--number", "-n", help="Number all output lines")


def NumberNonblankOpt() -> Any:
    return typer.Option(
        False, "--number-nonblank", "-b", help="Number non-blank output lines"
    )


def VerboseOpt() -> Any:
    return typer.Option(
        False, "--verbose", "-v", help="Log diagnostics to stderr for debugging"
    )


def LogFileOpt() -> Any:
    return typer.Option(
        None,
        "--log-file",
        help="Append diagnostics to file (enables verbose mode)",
        dir_okay=False,
    )
