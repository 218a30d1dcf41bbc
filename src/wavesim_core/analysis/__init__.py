# src/wavesim_core/analysis/__init__.py
from .diagnostics import field_energy, peak_amplitude

__all__ = [
    "field_energy",
    "peak_amplitude",
]
