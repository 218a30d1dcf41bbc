# src/wavesim_core/simulation/context.py
"""
Defines the `SimulationContext`, the complete input of a single run.
"""
from dataclasses import dataclass

from ..data_structures import SimulationParameters
from ..output.recorder import SnapshotRecorder


@dataclass(frozen=True)
class SimulationContext:
    """
    An immutable container for everything a run needs: the derived parameters and
    the recorder that receives the snapshots. It is handed to the `SimulationEngine`,
    which holds the time loop.
    """
    params: SimulationParameters
    recorder: SnapshotRecorder
