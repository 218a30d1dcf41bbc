# src/wavesim_core/parser/__init__.py
from .raw_data import ParsedParameterFile
from .parser import ParameterFileParser, PARAMETER_ORDER
from .exceptions import BaseParsingError, ParsingError, SchemaValidationError

__all__ = [
    # IR Data Structures
    "ParsedParameterFile",
    # Parser and Exceptions
    "ParameterFileParser",
    "PARAMETER_ORDER",
    "BaseParsingError",
    "ParsingError",
    "SchemaValidationError",
]
