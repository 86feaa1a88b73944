# catr/core/output.py
# Diagnostic levels & the registry that lets core code log without importing the CLI
# * Pure module (no I/O); the Rich/file implementation is catr/cli/output_manager.py

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * Diagnostic verbosity, least to most
class OutputLevel(IntEnum):
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * What the streamer & helpers need from a diagnostics sink
@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None: ...

    def debug(self, msg: str, category: str = "DEBUG") -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Sink used until the CLI registers a real one; drops everything
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None:
        pass

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# back to the null sink (tests)
def reset_output_manager() -> None:
    global _output_manager
    _output_manager = NullOutputManager()
