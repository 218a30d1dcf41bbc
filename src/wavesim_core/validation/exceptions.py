# src/wavesim_core/validation/exceptions.py
"""
Defines the diagnosable exception raised when parameter values fail range checks.
"""
from typing import List

from .issues import ValidationIssue, ValidationIssueLevel
from ..errors import DiagnosableError, format_diagnostic_report


class SemanticValidationError(DiagnosableError):
    """
    Raised when parameter validation detects one or more errors.

    Holds every error-level `ValidationIssue` of the validation pass and formats
    them into a single diagnostic report.
    """
    def __init__(self, issues: List[ValidationIssue], source_path=None):
        """
        Args:
            issues: The complete list of issues found by the ParameterValidator.
                    Only those with a level of `ERROR` are kept.
            source_path: The parameter file the values came from, if known.
        """
        self.source_path = source_path
        self.issues: List[ValidationIssue] = [
            issue for issue in issues if issue.level == ValidationIssueLevel.ERROR
        ]
        if not self.issues:
            summary_message = "SemanticValidationError was raised with no error-level issues."
        else:
            error_lines = [str(issue) for issue in self.issues]
            summary_message = (
                f"Parameter validation failed with {len(self.issues)} error(s):\n"
                + "\n".join(f"  - {line}" for line in error_lines)
            )
        super().__init__(summary_message)

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    def get_diagnostic_report(self) -> str:
        error_lines = [str(issue) for issue in self.issues]
        details = (
            f"One or more parameter values are out of range.\n"
            f"Found {len(self.issues)} error(s). See details below:\n\n"
            + "\n".join(f"  - {line}" for line in error_lines)
        )

        context = {}
        if self.issues and len(self.issues) == 1:
            context['parameter'] = self.issues[0].parameter
        if self.source_path is not None:
            context['source_file'] = self.source_path

        return format_diagnostic_report(
            error_type="Parameter Value Error",
            details=details,
            suggestion="Correct every value listed above in the parameter file.",
            context=context
        )
