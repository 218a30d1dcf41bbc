# src/wavesim_core/output/recorder.py
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, TextIO, Tuple, Union

import numpy as np

from ..data_structures import SimulationParameters
from .exceptions import OutputWriteError

logger = logging.getLogger(__name__)

# Labels of the twelve preamble lines, in file order. The padding keeps the values
# aligned in a column.
PREAMBLE_LABELS: Tuple[Tuple[str, str], ...] = (
    ("c", "#c        "),
    ("tau", "#tau      "),
    ("x1", "#x1       "),
    ("x2", "#x2       "),
    ("runtime", "#runtime  "),
    ("dx", "#dx       "),
    ("outtime", "#outtime  "),
    ("outfilename", "#filename "),
    ("ngrid", "#ngrid (derived) "),
    ("dt", "#dt    (derived) "),
    ("nsteps", "#nsteps(derived) "),
    ("nper", "#nper  (derived) "),
)


def format_value(value) -> str:
    """Formats a preamble or data value: six significant digits for floats."""
    if isinstance(value, (float, np.floating)):
        return f"{value:g}"
    return str(value)


class SnapshotRecorder(ABC):
    """
    Receives snapshots from the simulation engine.

    The engine calls `start` once with the run parameters and coordinates, then
    `record` for every snapshot (the initial condition included), and `finalize`
    once at the end, also when the run fails.
    """

    @abstractmethod
    def start(self, params: SimulationParameters, x: np.ndarray) -> None:
        ...

    @abstractmethod
    def record(self, step: int, time: float, rho: np.ndarray) -> None:
        ...

    def finalize(self) -> None:
        pass


class TextSnapshotWriter(SnapshotRecorder):
    """
    Writes snapshots to a plain-text file.

    The file starts with a twelve-line `#` preamble echoing the inputs and derived
    parameters. Each snapshot follows as a `# t = <time>` line and `ngrid` lines of
    `<x> <rho>`. Blocks after the first are preceded by two blank lines so that
    gnuplot treats them as separate data sets; numpy.loadtxt skips the comments.

    Blocks are buffered in memory and written every `buffer_size` snapshots.
    """

    def __init__(self, filename: Union[str, Path], buffer_size: int = 10):
        self.filename = Path(filename)
        self.buffer_size = buffer_size
        self._file: Optional[TextIO] = None
        self._x: Optional[np.ndarray] = None
        self._buffer: List[str] = []
        self.blocks_written = 0

    def start(self, params: SimulationParameters, x: np.ndarray) -> None:
        try:
            self._file = self.filename.open("w", encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(details=str(e), file_path=self.filename) from e
        self._x = x
        self._write("".join(f"{label}{format_value(getattr(params, name))}\n" for name, label in PREAMBLE_LABELS))
        logger.info(f"Writing snapshots to '{self.filename}'.")

    def record(self, step: int, time: float, rho: np.ndarray) -> None:
        separator = "\n" if self.blocks_written + len(self._buffer) == 0 else "\n\n"
        lines = [f"{separator}# t = {format_value(float(time))}\n"]
        lines.extend(f"{format_value(xi)} {format_value(ri)}\n" for xi, ri in zip(self._x, rho))
        self._buffer.append("".join(lines))
        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        if not self._buffer:
            return
        self._write("".join(self._buffer))
        self.blocks_written += len(self._buffer)
        self._buffer = []

    def finalize(self) -> None:
        if self._file is None:
            return
        try:
            self.flush()
        finally:
            self._file.close()
            self._file = None
        logger.debug(f"Closed '{self.filename}' after {self.blocks_written} snapshot(s).")

    def _write(self, text: str) -> None:
        try:
            self._file.write(text)
        except OSError as e:
            raise OutputWriteError(details=str(e), file_path=self.filename) from e


class MemoryRecorder(SnapshotRecorder):
    """Keeps copies of every snapshot in memory, for interactive use and analysis."""

    def __init__(self):
        self.params: Optional[SimulationParameters] = None
        self.x: Optional[np.ndarray] = None
        self.steps: List[int] = []
        self.times: List[float] = []
        self.fields: List[np.ndarray] = []

    def start(self, params: SimulationParameters, x: np.ndarray) -> None:
        self.params = params
        self.x = x

    def record(self, step: int, time: float, rho: np.ndarray) -> None:
        self.steps.append(step)
        self.times.append(time)
        self.fields.append(rho.copy())

    def as_array(self) -> np.ndarray:
        """All recorded fields stacked into a (num_snapshots, ngrid) array."""
        return np.array(self.fields)
