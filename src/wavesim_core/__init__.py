# src/wavesim_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("WaveSim Core package initialized.")

from .units import ureg, pint, Quantity, PARAMETER_UNITS
from .data_structures import PhysicalParameters, SimulationParameters
from .parser import ParameterFileParser, ParsingError, SchemaValidationError
from .validation import ParameterValidator, SemanticValidationError
from .parameter_builder import build_simulation_parameters, load_simulation_parameters
from .simulation import (
    derive_parameters,
    build_coordinates,
    triangular_pulse,
    initial_field,
    apply_dirichlet,
    advance_field,
    FieldRing,
    SimulationResult,
    run_simulation,
)
from .output import TextSnapshotWriter, MemoryRecorder, OutputWriteError
from .analysis import field_energy, peak_amplitude
from .errors import WaveSimError, ParameterLoadError, SimulationRunError

__all__ = [
    # Units
    "ureg", "pint", "Quantity", "PARAMETER_UNITS",
    # Data Structures
    "PhysicalParameters", "SimulationParameters",
    # Parameter loading
    "ParameterFileParser", "ParsingError", "SchemaValidationError",
    "ParameterValidator", "SemanticValidationError",
    "build_simulation_parameters", "load_simulation_parameters",
    # Numerical core
    "derive_parameters", "build_coordinates", "triangular_pulse", "initial_field",
    "apply_dirichlet", "advance_field", "FieldRing",
    # Simulation
    "SimulationResult", "run_simulation",
    # Output & diagnostics
    "TextSnapshotWriter", "MemoryRecorder", "OutputWriteError",
    "field_energy", "peak_amplitude",
    # Top-Level Errors (Actionable Diagnostics)
    "WaveSimError", "ParameterLoadError", "SimulationRunError",
]
