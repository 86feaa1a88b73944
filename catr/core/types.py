# catr/core/types.py
# Core type definitions: numbering policy, source variants & run configuration

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .exceptions import ConfigurationError

# reserved identifier naming standard input
STDIN_IDENTIFIER = "-"

DEFAULT_NUMBER_WIDTH = 6
DEFAULT_NUMBER_SEPARATOR = "\t"
DEFAULT_DECODE_ERRORS = "replace"


# * Line numbering mode
class NumberingPolicy(Enum):
    NONE = "none"
    ALL = "all"
    NONBLANK = "nonblank"


# * Source variant: a path on disk
@dataclass(frozen=True)
class FilePath:
    path: str

    @property
    def identifier(self) -> str:
        return self.path


# * Source variant: the process's standard input
@dataclass(frozen=True)
class StandardInput:
    @property
    def identifier(self) -> str:
        return STDIN_IDENTIFIER


Source = Union[FilePath, StandardInput]


# * Map a configured identifier to its source variant
def resolve_source(identifier: str) -> Source:
    if identifier == STDIN_IDENTIFIER:
        return StandardInput()
    return FilePath(identifier)


# * Validated run configuration consumed by the streamer
@dataclass
class CatConfig:
    files: list[str] = field(default_factory=list)
    number_all_lines: bool = False
    number_nonblank_lines: bool = False

    # formatting knobs, filled from settings by the CLI
    number_width: int = DEFAULT_NUMBER_WIDTH
    number_separator: str = DEFAULT_NUMBER_SEPARATOR
    decode_errors: str = DEFAULT_DECODE_ERRORS
    # None decodes w/ the platform default encoding
    encoding: str | None = None

    def __post_init__(self) -> None:
        if not self.files:
            raise ConfigurationError("at least one input source is required")
        if self.number_width < 1:
            raise ConfigurationError(
                f"number_width must be a positive integer, got {self.number_width}"
            )

    # "number all" wins when both flags are set
    @property
    def policy(self) -> NumberingPolicy:
        if self.number_all_lines:
            return NumberingPolicy.ALL
        if self.number_nonblank_lines:
            return NumberingPolicy.NONBLANK
        return NumberingPolicy.NONE

    @property
    def sources(self) -> list[Source]:
        return [resolve_source(name) for name in self.files]
