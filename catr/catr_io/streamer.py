# catr/catr_io/streamer.py
# LineStreamer: streams every configured source to stdout w/ line numbering & per-source error isolation

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from ..core.exceptions import SourceUnavailableError, StreamReadError
from ..core.numbering import LineNumberer
from ..core.types import CatConfig, Source
from ..core.verbose import (
    vlog_config,
    vlog_dev,
    vlog_source_done,
    vlog_source_open,
    vlog_source_skip,
)
from .sources import open_source, os_reason


# * Outcome of a completed run
@dataclass
class StreamSummary:
    sources_read: int = 0
    # (identifier, reason) for every source that could not be opened
    sources_skipped: list[tuple[str, str]] = field(default_factory=list)
    lines_written: int = 0

    @property
    def all_sources_read(self) -> bool:
        return not self.sources_skipped


class LineStreamer:
    """Copy each configured source, in order, to the output stream.

    Sources that cannot be opened are reported as ``<identifier>: <reason>``
    on the error stream and skipped. A read failure on an already opened
    source is fatal and raises :class:`StreamReadError`.

    Streams default to the process's stdin/stdout/stderr, looked up when
    :meth:`run` is called.
    """

    def __init__(
        self,
        config: CatConfig,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.config = config
        self._stdout = stdout
        self._stderr = stderr
        self._stdin = stdin

    def run(self) -> StreamSummary:
        out = self._stdout if self._stdout is not None else sys.stdout
        err = self._stderr if self._stderr is not None else sys.stderr

        config = self.config
        vlog_config("policy", config.policy.value)
        vlog_config("sources", config.files)

        # one numberer for the whole run keeps numbering continuous across files
        numberer = LineNumberer(
            config.policy, config.number_width, config.number_separator
        )
        summary = StreamSummary()

        for source in config.sources:
            vlog_source_open(source.identifier)
            try:
                with open_source(
                    source, self._stdin, config.decode_errors, config.encoding
                ) as handle:
                    count = self._stream(source, handle, numberer, out)
            except SourceUnavailableError as e:
                # keep stdout & stderr interleaved in source order
                out.flush()
                err.write(f"{e}\n")
                err.flush()
                vlog_source_skip(e.identifier, e.reason)
                summary.sources_skipped.append((e.identifier, e.reason))
                continue

            vlog_source_done(source.identifier, count)
            summary.sources_read += 1
            summary.lines_written += count

        out.flush()
        vlog_dev("STREAM", f"next line number: {numberer.counter}")
        return summary

    # * Write one source's lines; returns the number of lines written
    def _stream(
        self,
        source: Source,
        handle: TextIO,
        numberer: LineNumberer,
        out: TextIO,
    ) -> int:
        count = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as e:
                raise StreamReadError(source.identifier, os_reason(e)) from e
            except UnicodeDecodeError as e:
                raise StreamReadError(source.identifier, str(e)) from e
            if not raw:
                break

            # "\r\n" & "\n" are normalized to "\n"; a missing final one is supplied once
            line = raw
            if line.endswith("\n"):
                line = line[:-1].removesuffix("\r")
            out.write(numberer.format(line))
            out.write("\n")
            count += 1
        return count
