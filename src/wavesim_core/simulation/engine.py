# src/wavesim_core/simulation/engine.py
"""
Defines the `SimulationEngine`, which owns the time loop of a run.

The engine operates on a `SimulationContext` (the "what") and holds the imperative
logic (the "how"): building the initial field, advancing it step by step through the
`FieldRing`, and handing snapshots to the recorder at the configured cadence.
"""
import logging
from typing import List

import numpy as np

from ..analysis import field_energy, peak_amplitude
from .buffers import FieldRing
from .context import SimulationContext
from .grid import initial_field
from .integrator import advance_field, apply_dirichlet
from .results import SimulationResult

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Runs one simulation described by a `SimulationContext`.
    """
    def __init__(self, context: SimulationContext):
        self.context: SimulationContext = context
        self.params = context.params
        self.recorder = context.recorder
        self._reset_snapshots()
        logger.debug(f"SimulationEngine initialized for a {self.params.ngrid}-point grid.")

    def is_snapshot_step(self, step: int) -> bool:
        """
        True when a snapshot is due after `step` steps.

        Snapshots are taken every `nper` steps. When outtime is shorter than one time
        step, nper is 0 and a snapshot is taken after every step.
        """
        nper = self.params.nper
        return nper == 0 or step % nper == 0

    def execute(self) -> SimulationResult:
        """Runs the time loop to completion and returns the result."""
        params = self.params
        self._reset_snapshots()
        x, rho0 = initial_field(params)
        ring = FieldRing(rho0)

        self.recorder.start(params, x)
        self._snapshot(0, ring.current)

        for s in range(params.nsteps):
            apply_dirichlet(ring.current)
            advance_field(ring.current, ring.previous, params, out=ring.next)
            ring.rotate()

            step = s + 1
            if self.is_snapshot_step(step):
                self._snapshot(step, ring.current)

        logger.info(
            f"Finished {params.nsteps} step(s) of dt={params.dt:g}; recorded {len(self._steps)} snapshot(s)."
        )
        return SimulationResult(
            params=params,
            coordinates=x,
            final_field=ring.current.copy(),
            snapshot_steps=np.array(self._steps, dtype=int),
            snapshot_times=np.array(self._times, dtype=float),
            snapshot_energies=np.array(self._energies, dtype=float),
            snapshot_peaks=np.array(self._peaks, dtype=float),
            steps_taken=params.nsteps,
        )

    def _reset_snapshots(self) -> None:
        self._steps: List[int] = []
        self._times: List[float] = []
        self._energies: List[float] = []
        self._peaks: List[float] = []

    def _snapshot(self, step: int, rho: np.ndarray) -> None:
        time = step * self.params.dt
        self.recorder.record(step, time, rho)
        energy = field_energy(rho)
        peak = peak_amplitude(rho)
        self._steps.append(step)
        self._times.append(time)
        self._energies.append(energy)
        self._peaks.append(peak)
        logger.debug(f"Snapshot at step {step} (t = {time:g}): energy={energy:.6g}, peak={peak:.6g}")
