# src/wavesim_core/parameter_builder.py
"""
Turns a parsed parameter file into the frozen `SimulationParameters` of a run.

The build has two validation passes around the derivation:

1.  The physical inputs are range-checked. Every violated constraint becomes its own
    issue, and any error stops the build before anything is derived.
2.  The discretization is derived (`derive_parameters`) and checked: a grid without
    an interior point is an error, an empty time loop or a snapshot after every step
    is a warning.

`build_simulation_parameters` raises the `SemanticValidationError` directly so the
command line can tell value errors from read errors. `load_simulation_parameters`
is the one-call API for library users and reports every failure as a single
`ParameterLoadError`.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from .data_structures import PhysicalParameters, SimulationParameters
from .errors import ParameterLoadError, DiagnosableError, format_diagnostic_report
from .parser import ParameterFileParser, ParsedParameterFile
from .simulation.derivation import derive_parameters
from .validation import ParameterValidator, SemanticValidationError, ValidationIssueLevel

logger = logging.getLogger(__name__)


def _has_errors(issues) -> bool:
    return any(issue.level == ValidationIssueLevel.ERROR for issue in issues)


def build_simulation_parameters(parsed: ParsedParameterFile) -> SimulationParameters:
    """
    Validates parsed values and derives the discretization.

    Raises:
        SemanticValidationError: one or more values are out of range, or the grid
                                 has no interior point.
    """
    validator = ParameterValidator()

    issues = validator.validate_physical(parsed.raw_values)
    if _has_errors(issues):
        raise SemanticValidationError(issues, source_path=parsed.source_path)

    physical = PhysicalParameters(
        c=float(parsed["c"]),
        tau=float(parsed["tau"]),
        x1=float(parsed["x1"]),
        x2=float(parsed["x2"]),
        runtime=float(parsed["runtime"]),
        dx=float(parsed["dx"]),
        outtime=float(parsed["outtime"]),
        outfilename=str(parsed["outfilename"]),
    )
    params = derive_parameters(physical)

    issues = validator.validate_derived(params)
    if _has_errors(issues):
        raise SemanticValidationError(issues, source_path=parsed.source_path)

    logger.info(
        f"Parameters from '{parsed.source_path}': ngrid={params.ngrid}, dt={params.dt:g}, "
        f"nsteps={params.nsteps}, nper={params.nper}"
    )
    return params


def load_simulation_parameters(
    parameter_file: Union[str, Path],
    parser: Optional[ParameterFileParser] = None
) -> SimulationParameters:
    """
    Reads, validates and derives the parameters of a run in one call.

    Raises:
        ParameterLoadError: A user-friendly, diagnosable error for any failure.
                            The original exception is chained for debugging.
    """
    parser = parser if parser is not None else ParameterFileParser()
    try:
        parsed = parser.parse(parameter_file)
        return build_simulation_parameters(parsed)

    except DiagnosableError as e:
        raise ParameterLoadError(e.get_diagnostic_report()) from e

    except Exception as e:
        report = format_diagnostic_report(
            error_type=f"An Unexpected Error Occurred ({type(e).__name__})",
            details=f"Loading the parameter file failed with an unexpected internal error: {e}",
            suggestion="This may indicate a bug in WaveSim Core. Please review the traceback.",
            context={'source_file': parameter_file}
        )
        raise ParameterLoadError(report) from e
