# src/wavesim_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

# The parser hands its result to the parameter builder as a frozen dataclass rather
# than a raw dictionary. Values are already converted to floats in canonical units,
# but have not been range-checked.

@dataclass(frozen=True)
class ParsedParameterFile:
    """IR for a single parameter file that passed structural validation."""
    source_path: Path
    source_format: str  # "tokens" or "yaml"
    raw_values: Dict[str, Any]

    def __getitem__(self, name: str) -> Any:
        return self.raw_values[name]
