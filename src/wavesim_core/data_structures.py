# src/wavesim_core/data_structures.py
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhysicalParameters:
    """
    The physical inputs of a run, exactly as read (and unit-converted) from the
    parameter file. Immutable once created.
    """
    c: float              # wave speed
    tau: float            # damping time
    x1: float             # left end of the domain
    x2: float             # right end of the domain
    runtime: float        # simulated time to reach
    dx: float             # requested spatial grid spacing
    outtime: float        # simulated time between snapshots
    outfilename: str      # destination of the snapshot file

    @property
    def length(self) -> float:
        return self.x2 - self.x1


@dataclass(frozen=True)
class SimulationParameters(PhysicalParameters):
    """
    Physical inputs plus the discretization derived from them.

    Produced only by `derive_parameters`; the derived fields are fixed for the run.
    """
    ngrid: int            # number of grid points, boundaries included
    dt: float             # time step
    nsteps: int           # number of steps to reach runtime
    nper: int             # steps between snapshots
