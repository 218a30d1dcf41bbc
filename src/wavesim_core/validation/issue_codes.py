# src/wavesim_core/validation/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ParameterIssueCode(Enum):
    """
    Registry of parameter validation issue codes and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).
    """

    # --- Physical Parameter Ranges (PARAM_...) ---
    PARAM_C_NONPOSITIVE = ("PARAM_C_NONPOSITIVE", "Wave speed c must be positive, got {value}.")
    PARAM_TAU_NONPOSITIVE = ("PARAM_TAU_NONPOSITIVE", "Damping time tau must be positive, got {value}.")
    PARAM_DOMAIN_ORDER = ("PARAM_DOMAIN_ORDER", "x1 must be less than x2, got x1={x1} and x2={x2}.")
    PARAM_DX_NONPOSITIVE = ("PARAM_DX_NONPOSITIVE", "Grid spacing dx must be positive, got {value}.")
    PARAM_DX_TOO_LARGE = ("PARAM_DX_TOO_LARGE", "Grid spacing dx={value} is too large for the domain of length {length}.")
    PARAM_RUNTIME_NEGATIVE = ("PARAM_RUNTIME_NEGATIVE", "runtime must not be negative, got {value}.")
    PARAM_OUTTIME_NEGATIVE = ("PARAM_OUTTIME_NEGATIVE", "outtime must not be negative, got {value}.")
    PARAM_OUTFILE_EMPTY = ("PARAM_OUTFILE_EMPTY", "No output file name given.")
    PARAM_DISCRETIZATION_OVERFLOW = ("PARAM_DISCRETIZATION_OVERFLOW", "The derived {quantity} would be {value:g}, outside the supported range ({allowed}). {hint}")

    # --- Derived Discretization (GRID_... / TIME_...) ---
    GRID_TOO_COARSE = ("GRID_TOO_COARSE", "The grid has {ngrid} point(s); at least {min_points} are needed for one interior point. Decrease dx (currently {dx}).")
    TIME_NO_STEPS = ("TIME_NO_STEPS", "runtime={runtime} is shorter than one time step dt={dt}; only the initial condition will be written.")
    TIME_SNAPSHOT_EVERY_STEP = ("TIME_SNAPSHOT_EVERY_STEP", "outtime={outtime} is shorter than one time step dt={dt}; a snapshot will be written after every step.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
