# src/wavesim_core/cli.py
"""
Command-line driver: `wavesim PARAMFILE`.

Each way of failing before the simulation starts has its own exit status, and every
failure prints a diagnostic report to stderr.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import SimulationRunError
from .log_config import setup_logging
from .parameter_builder import build_simulation_parameters
from .parser import ParameterFileParser, BaseParsingError
from .simulation import run_simulation
from .validation import SemanticValidationError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_READ_ERROR = 3
EXIT_PARAMETER_ERROR = 4
EXIT_SIMULATION_ERROR = 5


class UsageError(Exception):
    """Raised by the argument parser instead of exiting."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="wavesim",
        description="Simulate the one-dimensional damped wave equation with fixed ends.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("parameter_file", help="Parameter file: 'c tau x1 x2 runtime dx outtime outfilename', or a .yaml mapping")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_argument_parser().parse_args(argv)
    except UsageError as e:
        print(f"Error: wavesim needs one parameter file argument ({e}).", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(getattr(logging, args.log_level))

    parameter_file = Path(args.parameter_file)
    if not parameter_file.exists():
        print(f"Error: parameter file '{parameter_file}' not found.", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND

    try:
        parsed = ParameterFileParser().parse(parameter_file)
    except BaseParsingError as e:
        print(e.get_diagnostic_report(), file=sys.stderr)
        return EXIT_READ_ERROR

    try:
        params = build_simulation_parameters(parsed)
    except SemanticValidationError as e:
        print(e.get_diagnostic_report(), file=sys.stderr)
        print(f"Parameter value error in file '{parameter_file}'", file=sys.stderr)
        return EXIT_PARAMETER_ERROR

    try:
        run_simulation(params)
    except SimulationRunError as e:
        print(str(e), file=sys.stderr)
        return EXIT_SIMULATION_ERROR

    print(f"Results written to '{params.outfilename}'.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
