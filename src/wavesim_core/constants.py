# --- src/wavesim_core/constants.py ---
import logging

logger = logging.getLogger(__name__)

# --- Numerical Constants for the Explicit Scheme ---

#: Ratio c*dt/dx used to derive the time step. Half of the undamped Courant limit,
#: which keeps the three-level scheme stable for any damping time.
COURANT_FACTOR: float = 0.5

#: Minimum number of grid points for a run: two boundary points plus one interior point.
MIN_GRID_POINTS: int = 3

#: Upper limits for the derived counts. Larger grids do not fit in memory and larger
#: step counts do not finish.
MAX_GRID_POINTS: int = 100_000_000
MAX_TIME_STEPS: int = 1_000_000_000_000

# --- Initial Condition (triangular pulse) ---

#: The pulse occupies the band [x1 + START*L, x1 + FINISH*L] where L = x2 - x1.
PULSE_BAND_START_FRACTION: float = 0.25
PULSE_BAND_FINISH_FRACTION: float = 0.75

#: Amplitude of the pulse at the domain midpoint.
PULSE_PEAK_AMPLITUDE: float = 0.25

logger.debug("Defined core constants: COURANT_FACTOR, MIN_GRID_POINTS, MAX_GRID_POINTS, MAX_TIME_STEPS, pulse shape constants")
