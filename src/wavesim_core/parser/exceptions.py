# src/wavesim_core/parser/exceptions.py
"""
Defines custom, diagnosable exceptions for the parameter-file parsing stage.

`ParsingError` covers file-level problems: the file is missing or unreadable, holds
too few tokens, a numeric token is not a number, or a YAML value has an unusable unit.
`SchemaValidationError` covers a YAML document whose structure does not match the
cerberus schema. Both derive from `DiagnosableError` and provide their own report.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """
    A local, concrete base class for all parameter-file parsing and schema errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the parameter file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Custom exception for file-system issues or unreadable content during parsing.
    """
    details: str
    file_path: Path
    parameter: Optional[str] = None
    user_input: Optional[str] = None

    def __str__(self):
        return f"Error while reading file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Parameter File Read Error",
            details=self.details,
            suggestion=(
                "Ensure the file exists and is readable. A plain parameter file holds eight "
                "whitespace-separated values in the order: c tau x1 x2 runtime dx outtime outfilename."
            ),
            context={'source_file': self.file_path, 'parameter': self.parameter, 'user_input': self.user_input}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Custom exception for failures during cerberus schema validation.
    """
    errors: Dict[str, Any]
    file_path: Path

    def _error_lines(self):
        return [
            f"  - Field '{k}': {v[0]}"
            for k, v in sorted(self.errors.items(), key=lambda item: str(item[0]))
        ]

    def __str__(self):
        return (
            f"Parameter schema validation failed for file '{self.file_path}':\n"
            + "\n".join(self._error_lines())
        )

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the parameter file does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n" + "\n".join(self._error_lines())
        )
        return format_diagnostic_report(
            error_type="Parameter Schema Validation Error",
            details=details,
            suggestion="Provide exactly the keys c, tau, x1, x2, runtime, dx, outtime and outfilename, with numeric (or unit-bearing string) values and a string file name.",
            context={'source_file': self.file_path}
        )
