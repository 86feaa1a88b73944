# catr/core/verbose.py
# Verbose logging utilities - delegates to the registered OutputManager w/ structured entries for sources & configuration

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log a source being opened
def vlog_source_open(identifier: str) -> None:
    get_output_manager().verbose(f"Open: {identifier}", "SOURCE")


# * Log a source skipped after an open failure
def vlog_source_skip(identifier: str, reason: str) -> None:
    get_output_manager().verbose(f"Skip: {identifier}", "SOURCE", reason)


# * Log a source fully consumed
def vlog_source_done(identifier: str, lines: int) -> None:
    get_output_manager().verbose(f"Done: {identifier} ({lines:,} lines)", "SOURCE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value!r}", "CONFIG")


# * Dev-mode only logging
def vlog_dev(category: str, message: str) -> None:
    get_output_manager().debug(message, category)


# * Context manager for verbose logging session
class VerboseSession:
    def __init__(
        self,
        enabled: bool = False,
        log_file: Path | None = None,
        dev_mode: bool = False,
    ):
        self.enabled = enabled
        self.log_file = log_file
        self.dev_mode = dev_mode

    def __enter__(self) -> "VerboseSession":
        init_verbose(self.enabled, self.log_file, self.dev_mode)
        get_output_manager().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        get_output_manager().end_session()
