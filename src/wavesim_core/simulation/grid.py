# src/wavesim_core/simulation/grid.py
import logging
from typing import Tuple

import numpy as np

from ..constants import (
    PULSE_BAND_START_FRACTION,
    PULSE_BAND_FINISH_FRACTION,
    PULSE_PEAK_AMPLITUDE,
)
from ..data_structures import SimulationParameters

logger = logging.getLogger(__name__)


def build_coordinates(ngrid: int, x1: float, x2: float) -> np.ndarray:
    """
    Returns `ngrid` evenly spaced grid coordinates from x1 to x2, both included.

    The first element is exactly x1 and the last exactly x2. The array is read-only.
    Requires ngrid >= 2.
    """
    x = np.linspace(x1, x2, ngrid, dtype=np.float64)
    x.flags.writeable = False
    return x


def triangular_pulse(x: np.ndarray, x1: float, x2: float) -> np.ndarray:
    """
    Samples the initial wave profile on the coordinates `x`.

    A triangle centered on the domain midpoint, covering the middle half of the
    domain: 0.25 at the midpoint, falling linearly to 0 at the band edges, and exactly
    0 outside the band.
    """
    length = x2 - x1
    xstart = x1 + PULSE_BAND_START_FRACTION * length
    xmid = 0.5 * (x1 + x2)
    xfinish = x1 + PULSE_BAND_FINISH_FRACTION * length

    inside = (x >= xstart) & (x <= xfinish)
    return np.where(inside, PULSE_PEAK_AMPLITUDE - np.abs(x - xmid) / length, 0.0)


def initial_field(params: SimulationParameters) -> Tuple[np.ndarray, np.ndarray]:
    """Returns the coordinate array and the initial profile for a run."""
    x = build_coordinates(params.ngrid, params.x1, params.x2)
    rho = triangular_pulse(x, params.x1, params.x2)
    logger.debug(f"Initialized {params.ngrid}-point grid on [{params.x1}, {params.x2}] (length {params.length:g}).")
    return x, rho
