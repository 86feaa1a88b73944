# catr/catr_io/console.py
# Centralized diagnostic console for catr

# Standard output carries file content, so every Rich-rendered message
# (verbose logs, error panels) goes through this console bound to stderr.
#
# - The _ConsoleProxy pattern allows reconfiguring/resetting without breaking module-level references
# - Tests: use reset_console() for isolation or configure_console(record=True) to capture output

from __future__ import annotations
from typing import Optional, Any
from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Configure console w/ specific settings (useful for tests)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    record: bool = False,
) -> Console:
    kwargs: dict[str, Any] = {}
    if width is not None:
        kwargs["width"] = width
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if record:
        kwargs["record"] = True

    if kwargs:
        console._set_console(Console(stderr=True, **kwargs))
    return console._get_console()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console(stderr=True))
    return console._get_console()


__all__ = [
    "console",
    "configure_console",
    "reset_console",
]
