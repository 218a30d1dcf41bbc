# src/wavesim_core/simulation/derivation.py
import logging
from dataclasses import fields

from ..constants import COURANT_FACTOR
from ..data_structures import PhysicalParameters, SimulationParameters

logger = logging.getLogger(__name__)


def derive_parameters(physical: PhysicalParameters) -> SimulationParameters:
    """
    Computes the discretization of a run from its physical inputs.

    The three counts are truncated toward zero, not rounded, so a quotient that lands
    just below an integer because of floating-point representation (e.g. 99.9999999)
    yields one step or grid point fewer. Snapshot timing depends on this, so it is
    kept as is.

    Args:
        physical: Range-checked physical parameters.

    Returns:
        The frozen parameters of the run, with ngrid, dt, nsteps and nper filled in.
    """
    ngrid = int((physical.x2 - physical.x1) / physical.dx)
    dt = COURANT_FACTOR * physical.dx / physical.c
    nsteps = int(physical.runtime / dt)
    nper = int(physical.outtime / dt)

    logger.debug(f"Derived parameters: ngrid={ngrid}, dt={dt}, nsteps={nsteps}, nper={nper}")
    inputs = {f.name: getattr(physical, f.name) for f in fields(PhysicalParameters)}
    return SimulationParameters(**inputs, ngrid=ngrid, dt=dt, nsteps=nsteps, nper=nper)
