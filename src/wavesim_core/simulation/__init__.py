# src/wavesim_core/simulation/__init__.py
from .derivation import derive_parameters
from .grid import build_coordinates, triangular_pulse, initial_field
from .integrator import apply_dirichlet, advance_field
from .buffers import FieldRing
from .context import SimulationContext
from .engine import SimulationEngine
from .results import SimulationResult
from .execution import run_simulation

__all__ = [
    # Parameter derivation
    "derive_parameters",
    # Initial condition
    "build_coordinates",
    "triangular_pulse",
    "initial_field",
    # Step integration
    "apply_dirichlet",
    "advance_field",
    "FieldRing",
    # Driver
    "SimulationContext",
    "SimulationEngine",
    "SimulationResult",
    "run_simulation",
]
