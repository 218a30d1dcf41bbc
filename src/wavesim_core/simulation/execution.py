# src/wavesim_core/simulation/execution.py
"""
Provides the public API function for running a simulation.

`run_simulation` is a thin facade over `SimulationContext` and `SimulationEngine`:
it picks the default recorder, makes sure the recorder is finalized, and turns any
failure into a single `SimulationRunError` carrying a diagnostic report.
"""
import logging
from typing import Optional

from ..data_structures import SimulationParameters
from ..errors import SimulationRunError, DiagnosableError, format_diagnostic_report
from ..output.recorder import SnapshotRecorder, TextSnapshotWriter
from .context import SimulationContext
from .engine import SimulationEngine
from .results import SimulationResult

logger = logging.getLogger(__name__)


def run_simulation(
    params: SimulationParameters,
    recorder: Optional[SnapshotRecorder] = None
) -> SimulationResult:
    """
    Integrates the damped wave equation for the given parameters.

    Args:
        params: Validated, derived parameters, as produced by `build_simulation_parameters`
                or `load_simulation_parameters`.
        recorder: Where snapshots go. Defaults to a `TextSnapshotWriter` writing to
                  `params.outfilename`.

    Returns:
        A `SimulationResult` with the final field and per-snapshot diagnostics.

    Raises:
        SimulationRunError: A user-friendly, diagnosable error if the run fails.
                            The original exception is chained for debugging.
    """
    effective_recorder = recorder if recorder is not None else TextSnapshotWriter(params.outfilename)

    try:
        logger.info(
            f"--- Starting simulation: ngrid={params.ngrid}, dt={params.dt:g}, "
            f"nsteps={params.nsteps}, nper={params.nper} ---"
        )
        context = SimulationContext(params=params, recorder=effective_recorder)
        engine = SimulationEngine(context)
        try:
            result = engine.execute()
        finally:
            effective_recorder.finalize()
        logger.info("Simulation successful.")
        return result

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during simulation: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred during simulation: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Simulation Error Occurred ({type(e).__name__})",
            details=f"The simulator encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={}
        )
        raise SimulationRunError(report) from e
