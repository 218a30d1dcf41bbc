# src/wavesim_core/output/exceptions.py
from dataclasses import dataclass
from pathlib import Path

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class OutputWriteError(DiagnosableError):
    """Raised when the snapshot file cannot be created or written."""
    details: str
    file_path: Path

    def __str__(self):
        return f"Could not write output file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Output File Error",
            details=self.details,
            suggestion="Check that the directory of the output file exists and is writable, and that there is free disk space.",
            context={'source_file': self.file_path}
        )
