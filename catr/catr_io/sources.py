# catr/catr_io/sources.py
# Scoped acquisition of input sources (files or standard input)

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from ..core.exceptions import SourceUnavailableError
from ..core.types import DEFAULT_DECODE_ERRORS, Source, StandardInput

# lines end at "\n" only; a lone "\r" is content
LINE_TERMINATOR = "\n"


# OSError text w/o the "[Errno N]" decoration when the OS provides one
def os_reason(error: OSError) -> str:
    return error.strerror or str(error)


# * Re-decode standard input w/ the run's codec error handler & newline policy
@contextmanager
def _stdin_reader(
    stream: TextIO, errors: str, encoding: str | None
) -> Iterator[TextIO]:
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        # pure text stream (e.g. StringIO); already decoded
        yield stream
        return

    reader = io.TextIOWrapper(
        buffer,
        encoding=encoding or getattr(stream, "encoding", None),
        errors=errors,
        newline=LINE_TERMINATOR,
    )
    try:
        yield reader
    finally:
        # ! detach so the process's stdin buffer stays open
        reader.detach()


# * Open a source for line reading; file handles are closed on every exit path
@contextmanager
def open_source(
    source: Source,
    stdin: TextIO | None = None,
    errors: str = DEFAULT_DECODE_ERRORS,
    encoding: str | None = None,
) -> Iterator[TextIO]:
    if isinstance(source, StandardInput):
        stream = stdin if stdin is not None else sys.stdin
        with _stdin_reader(stream, errors, encoding) as reader:
            yield reader
        return

    try:
        handle = open(
            source.path, "r", encoding=encoding, errors=errors, newline=LINE_TERMINATOR
        )
    except OSError as e:
        raise SourceUnavailableError(source.identifier, os_reason(e)) from e

    with handle:
        yield handle
