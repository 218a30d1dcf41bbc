# tests/conftest.py
from pathlib import Path
from typing import Any, Dict

import pytest

from wavesim_core import (
    ParameterFileParser,
    PhysicalParameters,
    SimulationParameters,
    derive_parameters,
)
from wavesim_core.parser import PARAMETER_ORDER

# The reference run: c=1, tau=1000 on [0, 10] with dx=0.1, 5 time units, a snapshot
# every time unit. Derives to ngrid=100, dt=0.05, nsteps=100, nper=20.
REFERENCE_VALUES: Dict[str, Any] = {
    "c": 1.0,
    "tau": 1000.0,
    "x1": 0.0,
    "x2": 10.0,
    "runtime": 5.0,
    "dx": 0.1,
    "outtime": 1.0,
    "outfilename": "out.txt",
}


@pytest.fixture
def reference_values() -> Dict[str, Any]:
    return dict(REFERENCE_VALUES)


@pytest.fixture
def make_params():
    """Factory: derived parameters of the reference run with some values overridden."""
    def _make(**overrides) -> SimulationParameters:
        values = {**REFERENCE_VALUES, **overrides}
        return derive_parameters(PhysicalParameters(**values))
    return _make


@pytest.fixture
def write_parameter_file(tmp_path):
    """Factory: writes a plain token parameter file and returns its path."""
    def _write(name: str = "waveparams.txt", separator: str = "\n", **overrides) -> Path:
        values = {**REFERENCE_VALUES, **overrides}
        path = tmp_path / name
        path.write_text(separator.join(str(values[key]) for key in PARAMETER_ORDER) + "\n")
        return path
    return _write


@pytest.fixture
def parser() -> ParameterFileParser:
    return ParameterFileParser()
