# src/wavesim_core/simulation/buffers.py
import logging

import numpy as np

logger = logging.getLogger(__name__)


class FieldRing:
    """
    Three equally sized field buffers addressed through a rotating origin index.

    `previous`, `current` and `next` are views into one pre-allocated (3, ngrid)
    block. `rotate()` shifts the roles forward (previous <- current <- next, and the
    old previous becomes the new next) without copying or allocating.
    """

    def __init__(self, initial: np.ndarray):
        self._slots = np.zeros((3, initial.shape[0]), dtype=np.float64)
        self._origin = 0
        # The wave starts at rest: t - dt and t hold the same profile.
        self.previous[:] = initial
        self.current[:] = initial

    @property
    def previous(self) -> np.ndarray:
        return self._slots[self._origin]

    @property
    def current(self) -> np.ndarray:
        return self._slots[(self._origin + 1) % 3]

    @property
    def next(self) -> np.ndarray:
        return self._slots[(self._origin + 2) % 3]

    def rotate(self) -> None:
        self._origin = (self._origin + 1) % 3

    def __len__(self) -> int:
        return self._slots.shape[1]
