# catr/cli/app.py
# Typer application: parses arguments into a CatConfig & runs the LineStreamer

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

# load environment variables (e.g. CATR_CONFIG) once at startup
load_dotenv()

from .. import __version__
from ..catr_io.streamer import LineStreamer
from ..config.settings import settings_manager
from ..core.types import CatConfig
from ..core.verbose import VerboseSession, vlog, vlog_config
from .decorators import handle_catr_error
from .params import FilesArg, LogFileOpt, NumberNonblankOpt, NumberOpt, VerboseOpt


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"catr {__version__}")
        raise typer.Exit()


# point stdout at devnull so the interpreter's final flush cannot fail again
def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no real descriptor (embedded or captured); nothing left to redirect
        pass


# * Concatenate FILE(s) to standard output, optionally numbering lines
@app.command(help="Concatenate FILE(s) to standard output, optionally numbering lines.")
@handle_catr_error
def cat(
    files: List[str] = FilesArg(),
    number: bool = NumberOpt(),
    number_nonblank: bool = NumberNonblankOpt(),
    verbose: bool = VerboseOpt(),
    log_file: Optional[Path] = LogFileOpt(),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version & exit.",
    ),
) -> None:
    if number and number_nonblank:
        raise typer.BadParameter(
            "cannot be combined with '-n' / '--number'",
            param_hint="'-b' / '--number-nonblank'",
        )

    settings = settings_manager.load()
    config = CatConfig(
        files=list(files),
        number_all_lines=number,
        number_nonblank_lines=number_nonblank,
        number_width=settings.number_width,
        number_separator=settings.number_separator,
        decode_errors=settings.decode_errors,
    )

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    with VerboseSession(
        enabled=verbose_enabled, log_file=log_file, dev_mode=settings.dev_mode
    ):
        vlog("CONFIG", f"Settings: {settings_manager.config_path}")
        for key, value in settings_manager.list_settings().items():
            vlog_config(key, value)
        try:
            summary = LineStreamer(config).run()
        except BrokenPipeError:
            # reader went away (e.g. `catr big.txt | head`)
            _silence_stdout()
            raise typer.Exit(1)

    if not summary.all_sources_read and settings.fail_on_unreadable:
        raise typer.Exit(1)
