# src/wavesim_core/simulation/results.py
"""
Defines the result object returned by a simulation run.
"""
from dataclasses import dataclass

import numpy as np

from ..data_structures import SimulationParameters


@dataclass(frozen=True)
class SimulationResult:
    """
    The user-facing result of a run.

    Attributes:
        params: The parameters the run used.
        coordinates: The grid coordinates, shape (ngrid,).
        final_field: The field after the last step, shape (ngrid,).
        snapshot_steps: Step index of every recorded snapshot (0 is the initial condition).
        snapshot_times: Simulated time of every recorded snapshot.
        snapshot_energies: Sum of squared amplitudes of every recorded snapshot.
        snapshot_peaks: Largest absolute amplitude of every recorded snapshot.
        steps_taken: Number of time steps performed (equals params.nsteps).
    """
    params: SimulationParameters
    coordinates: np.ndarray
    final_field: np.ndarray
    snapshot_steps: np.ndarray
    snapshot_times: np.ndarray
    snapshot_energies: np.ndarray
    snapshot_peaks: np.ndarray
    steps_taken: int

    @property
    def num_snapshots(self) -> int:
        return len(self.snapshot_steps)

    @property
    def final_time(self) -> float:
        return self.steps_taken * self.params.dt
