# --- src/wavesim_core/units.py ---
import pint
import logging
from typing import Dict

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

# Canonical (SI) units in which the solver works. Values given with units in a
# YAML parameter file are converted to these before validation.
PARAMETER_UNITS: Dict[str, str] = {
    "c": "meter / second",
    "tau": "second",
    "x1": "meter",
    "x2": "meter",
    "runtime": "second",
    "dx": "meter",
    "outtime": "second",
}


def to_canonical_magnitude(name: str, value) -> float:
    """
    Converts a parameter value to a float in the canonical unit for `name`.

    Plain numbers are taken to be in canonical units already. Strings are parsed by
    pint; a dimensionless result is also taken as canonical.

    Raises:
        pint.DimensionalityError: the value's unit is incompatible with the parameter.
        pint.UndefinedUnitError: the string names an unknown unit.
    """
    if isinstance(value, (int, float)):
        return float(value)
    quantity = ureg.Quantity(value)
    if quantity.dimensionless:
        return float(quantity.to(ureg.dimensionless).magnitude)
    return float(quantity.to(PARAMETER_UNITS[name]).magnitude)
