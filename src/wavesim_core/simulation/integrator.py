# src/wavesim_core/simulation/integrator.py
"""
The explicit three-level update for the damped wave equation

    d2rho/dt2 = c^2 d2rho/dx2 - (1/tau) drho/dt

with zero Dirichlet boundaries. A step is split in two explicit phases: the caller
first clamps the boundaries of the current field with `apply_dirichlet`, then asks
`advance_field` for the next field. `advance_field` never modifies its inputs.
"""
import logging
from typing import Optional

import numpy as np

from ..data_structures import SimulationParameters

logger = logging.getLogger(__name__)


def apply_dirichlet(field: np.ndarray) -> np.ndarray:
    """Pins both end points of `field` to zero, in place. Returns the same array."""
    field[0] = 0.0
    field[-1] = 0.0
    return field


def advance_field(
    rho: np.ndarray,
    rho_prev: np.ndarray,
    params: SimulationParameters,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Computes the field one time step ahead.

    Central differences in space and time give, for every interior point i,

        laplacian = (c/dx)^2 * (rho[i+1] + rho[i-1] - 2 rho[i])
        friction  = (rho[i] - rho_prev[i]) / tau
        next[i]   = 2 rho[i] - rho_prev[i] + dt * (laplacian * dt - friction)

    The two boundary entries of the result are 0.0. With ngrid == 2 there are no
    interior points and only the boundaries are set.

    Args:
        rho: Field at time t (boundaries already clamped by the caller).
        rho_prev: Field at time t - dt.
        params: Parameters of the run (c, dx, dt, tau are used).
        out: Optional array to write the result into; a new one is allocated otherwise.

    Returns:
        The field at time t + dt (`out` when given).
    """
    if out is None:
        out = np.zeros_like(rho)

    centre = rho[1:-1]
    laplacian = (params.c / params.dx) ** 2 * (rho[2:] + rho[:-2] - 2.0 * centre)
    friction = (centre - rho_prev[1:-1]) / params.tau
    out[1:-1] = 2.0 * centre - rho_prev[1:-1] + params.dt * (laplacian * params.dt - friction)

    out[0] = 0.0
    out[-1] = 0.0
    return out
