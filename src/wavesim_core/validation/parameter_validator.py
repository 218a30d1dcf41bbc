# src/wavesim_core/validation/parameter_validator.py
"""
Range checks for simulation parameters.

Structural problems (missing values, non-numeric tokens) are caught by the parser.
This validator looks at the values themselves and reports one `ValidationIssue` per
violated constraint, so a single run shows the user everything that needs fixing.
"""
import logging
import math
from typing import Any, List, Mapping

from ..constants import COURANT_FACTOR, MAX_GRID_POINTS, MAX_TIME_STEPS, MIN_GRID_POINTS
from ..data_structures import SimulationParameters
from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import ParameterIssueCode

logger = logging.getLogger(__name__)


class ParameterValidator:
    """
    Checks physical parameters before derivation and the derived discretization after it.
    """

    def __init__(self):
        self._issues: List[ValidationIssue] = []

    def _add_issue(self, level: ValidationIssueLevel, code: ParameterIssueCode, parameter=None, **details):
        message = code.format_message(**details)
        self._issues.append(
            ValidationIssue(level=level, code=code.code, message=message, parameter=parameter, details=details)
        )

    def validate_physical(self, values: Mapping[str, Any]) -> List[ValidationIssue]:
        """Checks the eight physical inputs. Returns every issue found."""
        self._issues = []
        c, tau = values["c"], values["tau"]
        x1, x2 = values["x1"], values["x2"]
        dx = values["dx"]

        if c <= 0.0:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_C_NONPOSITIVE, "c", value=c)
        if tau <= 0.0:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_TAU_NONPOSITIVE, "tau", value=tau)

        domain_ordered = x1 < x2
        if not domain_ordered:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_DOMAIN_ORDER, "x1", x1=x1, x2=x2)

        if dx <= 0.0:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_DX_NONPOSITIVE, "dx", value=dx)
        elif domain_ordered and dx > x2 - x1:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_DX_TOO_LARGE, "dx", value=dx, length=x2 - x1)

        if values["runtime"] < 0.0:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_RUNTIME_NEGATIVE, "runtime", value=values["runtime"])
        if values["outtime"] < 0.0:
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_OUTTIME_NEGATIVE, "outtime", value=values["outtime"])
        if not str(values["outfilename"]).strip():
            self._add_issue(ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_OUTFILE_EMPTY, "outfilename")

        if c > 0.0 and dx > 0.0 and domain_ordered:
            self._check_discretization_size(values)

        self._log_issues("physical")
        return list(self._issues)

    def _check_discretization_size(self, values: Mapping[str, Any]):
        """Flags derived counts that would be infinite or too large to run."""
        dx = values["dx"]
        dt = _quotient(COURANT_FACTOR * dx, values["c"])
        ngrid = _quotient(values["x2"] - values["x1"], dx)
        if not math.isfinite(ngrid) or ngrid > MAX_GRID_POINTS:
            self._add_overflow_issue("grid size ngrid", ngrid, f"at most {MAX_GRID_POINTS:g}", "dx",
                                     "Increase dx or shorten the domain.")

        if dt == 0.0 or not math.isfinite(dt):
            self._add_overflow_issue("time step dt", dt, "positive and finite", "c", "Bring c and dx closer in scale.")
            return

        nsteps = _quotient(values["runtime"], dt)
        if values["runtime"] >= 0.0 and (not math.isfinite(nsteps) or nsteps > MAX_TIME_STEPS):
            self._add_overflow_issue("step count nsteps", nsteps, f"at most {MAX_TIME_STEPS:g}", "runtime",
                                     "Shorten runtime or increase dx.")
        nper = _quotient(values["outtime"], dt)
        if values["outtime"] >= 0.0 and not math.isfinite(nper):
            self._add_overflow_issue("snapshot interval nper", nper, "finite", "outtime",
                                     "Shorten outtime or increase dx.")

    def _add_overflow_issue(self, quantity: str, value: float, allowed: str, parameter: str, hint: str):
        self._add_issue(
            ValidationIssueLevel.ERROR, ParameterIssueCode.PARAM_DISCRETIZATION_OVERFLOW, parameter,
            quantity=quantity, value=value, allowed=allowed, hint=hint,
        )

    def validate_derived(self, params: SimulationParameters) -> List[ValidationIssue]:
        """Checks the derived discretization of already range-checked parameters."""
        self._issues = []
        if params.ngrid < MIN_GRID_POINTS:
            self._add_issue(
                ValidationIssueLevel.ERROR, ParameterIssueCode.GRID_TOO_COARSE, "dx",
                ngrid=params.ngrid, min_points=MIN_GRID_POINTS, dx=params.dx,
            )
        if params.nsteps == 0:
            self._add_issue(
                ValidationIssueLevel.WARNING, ParameterIssueCode.TIME_NO_STEPS, "runtime",
                runtime=params.runtime, dt=params.dt,
            )
        elif params.nper == 0:
            self._add_issue(
                ValidationIssueLevel.WARNING, ParameterIssueCode.TIME_SNAPSHOT_EVERY_STEP, "outtime",
                outtime=params.outtime, dt=params.dt,
            )
        self._log_issues("derived")
        return list(self._issues)

    def _log_issues(self, stage: str):
        for issue in self._issues:
            if issue.level == ValidationIssueLevel.ERROR:
                logger.error(str(issue))
            elif issue.level == ValidationIssueLevel.WARNING:
                logger.warning(str(issue))
            else:
                logger.info(str(issue))
        logger.debug(f"{stage.capitalize()} parameter validation finished with {len(self._issues)} issue(s).")


def _quotient(numerator: float, denominator: float) -> float:
    """numerator / denominator for a non-negative denominator, inf where it overflows."""
    if numerator == 0.0:
        return 0.0
    try:
        return numerator / denominator
    except (OverflowError, ZeroDivisionError):
        return math.inf
