# src/wavesim_core/parser/parser.py
import logging
import math
import tokenize
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import cerberus
import yaml
from pint.errors import PintError

from ..units import to_canonical_magnitude
from .raw_data import ParsedParameterFile
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

# Order of the values in a plain (token) parameter file. The last entry is the
# output file name, every other entry is a floating-point number.
PARAMETER_ORDER: Tuple[str, ...] = ("c", "tau", "x1", "x2", "runtime", "dx", "outtime", "outfilename")
NUMERIC_PARAMETERS: Tuple[str, ...] = PARAMETER_ORDER[:-1]

YAML_SUFFIXES = {".yaml", ".yml"}

_NUMBER_RULE: Dict[str, Any] = {"type": "number", "required": True, "finite": True}


class EnhancedValidator(cerberus.Validator):
    """Custom Cerberus validator that rejects NaN and infinite values."""

    def _validate_finite(self, constraint: bool, field: str, value: Any):
        """
        Fails when the value is a float that is NaN or infinite.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint:
            return
        if isinstance(value, float) and not math.isfinite(value):
            self._error(field, f"must be a finite number, got {value!r}.")


class ParameterFileParser:
    """
    Reads a parameter file and validates its structure.

    Two formats are understood: the plain token format (eight whitespace-separated
    values in `PARAMETER_ORDER`) and a YAML mapping with the same keys whose numeric
    values may carry units. The result is a `ParsedParameterFile`; value ranges are
    checked later by the semantic validator.
    """
    # Schema applied after conversion to floats, for both formats.
    _schema = {
        **{name: dict(_NUMBER_RULE) for name in NUMERIC_PARAMETERS},
        "outfilename": {"type": "string", "required": True},
    }

    # Schema applied to a raw YAML document before unit conversion.
    _yaml_schema = {
        **{name: {"type": ["number", "string"], "required": True} for name in NUMERIC_PARAMETERS},
        "outfilename": {"type": "string", "required": True},
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        self._yaml_validator = EnhancedValidator(self._yaml_schema)
        self._yaml_validator.allow_unknown = False
        logger.debug("ParameterFileParser initialized with strict structural validation rules.")

    def parse(self, parameter_file: Union[str, Path]) -> ParsedParameterFile:
        """Parses a parameter file, choosing the format from its suffix."""
        source = Path(parameter_file)
        logger.info(f"Reading parameter file: {source}")
        text = self._read_text(source)
        source_format = "yaml" if source.suffix.lower() in YAML_SUFFIXES else "tokens"
        return self._parse_text(text, source, source_format)

    def parse_string(self, text: str, source_format: str = "tokens") -> ParsedParameterFile:
        """Parses parameter text held in memory."""
        if source_format not in ("tokens", "yaml"):
            raise ValueError(f"Unknown parameter source format '{source_format}'.")
        return self._parse_text(text, Path(f"<{source_format}-string>"), source_format)

    def _parse_text(self, text: str, source: Path, source_format: str) -> ParsedParameterFile:
        if source_format == "yaml":
            values = self._values_from_yaml(text, source)
        else:
            values = self._values_from_tokens(text, source)

        if not self._validator.validate(values):
            raise SchemaValidationError(self._validator.errors, source)

        logger.debug(f"Parsed {source_format} parameter file '{source}': {values}")
        return ParsedParameterFile(
            source_path=source,
            source_format=source_format,
            raw_values=dict(self._validator.document),
        )

    def _read_text(self, source: Path) -> str:
        if not source.is_file():
            raise ParsingError(details=f"Parameter file not found at path: {source}", file_path=source)
        try:
            return source.read_text(encoding="utf-8")
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(details=f"Could not read file: {e}", file_path=source) from e

    def _values_from_tokens(self, text: str, source: Path) -> Dict[str, Any]:
        tokens: List[str] = text.split()
        if len(tokens) < len(PARAMETER_ORDER):
            missing = list(PARAMETER_ORDER[len(tokens):])
            raise ParsingError(
                details=(
                    f"Expected {len(PARAMETER_ORDER)} values but found {len(tokens)}. "
                    f"Missing value(s) for: {missing}"
                ),
                file_path=source,
            )
        if len(tokens) > len(PARAMETER_ORDER):
            logger.warning(
                f"Ignoring {len(tokens) - len(PARAMETER_ORDER)} extra token(s) after the output file name in '{source}'."
            )

        values: Dict[str, Any] = {}
        for name, token in zip(NUMERIC_PARAMETERS, tokens):
            try:
                values[name] = float(token)
            except ValueError as e:
                raise ParsingError(
                    details=f"Value for '{name}' is not a number.",
                    file_path=source,
                    parameter=name,
                    user_input=token,
                ) from e
        values["outfilename"] = tokens[len(NUMERIC_PARAMETERS)]
        return values

    def _values_from_yaml(self, text: str, source: Path) -> Dict[str, Any]:
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)

        if not self._yaml_validator.validate(content):
            raise SchemaValidationError(self._yaml_validator.errors, source)

        values: Dict[str, Any] = {"outfilename": content["outfilename"]}
        for name in NUMERIC_PARAMETERS:
            raw = content[name]
            try:
                values[name] = to_canonical_magnitude(name, raw)
            except (PintError, tokenize.TokenError, AssertionError, SyntaxError, ZeroDivisionError, ValueError, TypeError, AttributeError) as e:
                # pint reports malformed expressions through its tokenizer and parser asserts.
                raise ParsingError(
                    details=f"Value for '{name}' could not be converted to a number in canonical units: {e}",
                    file_path=source,
                    parameter=name,
                    user_input=str(raw),
                ) from e
        return values
