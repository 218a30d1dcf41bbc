# src/wavesim_core/analysis/diagnostics.py
import logging

import numpy as np

logger = logging.getLogger(__name__)


def field_energy(rho: np.ndarray) -> float:
    """Energy-like measure of a field: the sum of its squared amplitudes."""
    return float(np.sum(np.square(rho)))


def peak_amplitude(rho: np.ndarray) -> float:
    """Largest absolute amplitude of a field."""
    return float(np.max(np.abs(rho))) if rho.size else 0.0
