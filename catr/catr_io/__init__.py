# catr/catr_io/__init__.py
# Package initialization & exports for catr I/O operations

from .sources import open_source
from .streamer import LineStreamer, StreamSummary
from .generics import read_json_safe

__all__ = [
    "open_source",
    "LineStreamer",
    "StreamSummary",
    "read_json_safe",
]
