# src/wavesim_core/validation/__init__.py
import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import ParameterIssueCode
from .parameter_validator import ParameterValidator
from .exceptions import SemanticValidationError

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "ParameterIssueCode",
    "ParameterValidator",
    "SemanticValidationError",
]
