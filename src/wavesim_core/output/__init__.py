# src/wavesim_core/output/__init__.py
from .exceptions import OutputWriteError
from .recorder import (
    SnapshotRecorder,
    TextSnapshotWriter,
    MemoryRecorder,
    PREAMBLE_LABELS,
    format_value,
)

__all__ = [
    "OutputWriteError",
    "SnapshotRecorder",
    "TextSnapshotWriter",
    "MemoryRecorder",
    "PREAMBLE_LABELS",
    "format_value",
]
