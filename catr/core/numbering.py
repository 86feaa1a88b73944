# catr/core/numbering.py
# Line numbering state machine (pure - formats lines, performs no I/O)

from __future__ import annotations

from .types import (
    DEFAULT_NUMBER_SEPARATOR,
    DEFAULT_NUMBER_WIDTH,
    NumberingPolicy,
)


# * Blank means nothing left after trimming whitespace
def is_blank(line: str) -> bool:
    return not line.strip()


# * Applies a numbering policy to successive lines of one run
class LineNumberer:
    # The counter belongs to the whole run, so one instance is shared by
    # every source; it is never reset between files.

    def __init__(
        self,
        policy: NumberingPolicy,
        width: int = DEFAULT_NUMBER_WIDTH,
        separator: str = DEFAULT_NUMBER_SEPARATOR,
        start: int = 1,
    ) -> None:
        self.policy = policy
        self.width = width
        self.separator = separator
        self._counter = start

    # next number to be assigned
    @property
    def counter(self) -> int:
        return self._counter

    def _prefixed(self, line: str) -> str:
        text = f"{self._counter:>{self.width}}{self.separator}{line}"
        self._counter += 1
        return text

    # * Format one terminator-free line, advancing the counter as the policy dictates
    def format(self, line: str) -> str:
        if self.policy is NumberingPolicy.ALL:
            return self._prefixed(line)
        if self.policy is NumberingPolicy.NONBLANK:
            if is_blank(line):
                return ""
            return self._prefixed(line)
        return line
