"""
Free-text lumber spec parser.

Turns "2x4x8", 2"x4"x8' or "1 X 6 X 96\"" into (width_inches, height_inches,
length_feet). Width and height default to inches, length defaults to feet.
A trailing ' or " on a token overrides the default unit.
"""

import logging
import math
import re
from enum import Enum

from .errors import SpecParseError

logger = logging.getLogger(__name__)

CONVERSION_FACTOR_INCHES_FEET = 12.0

FEET_MARKER = "'"
INCHES_MARKER = '"'

_SEPARATOR = re.compile(r"[xX]")


class Units(str, Enum):
    INCHES = "inches"
    FEET = "feet"


def tokenize_spec(spec: str) -> list[str]:
    """Split a spec on x/X. Separators are dropped, and so are empty tokens."""
    return [token for token in _SEPARATOR.split(spec) if token]


def determine_dimensions_from_spec(spec: str) -> tuple[float, float, float]:
    """
    Parse a spec into (width_inches, height_inches, length_feet).

    Needs at least three tokens; anything past the third is ignored.
    Raises SpecParseError on a missing dimension or a bad number.
    """
    tokens = tokenize_spec(spec)
    if len(tokens) < 3:
        raise SpecParseError(
            f"Expected width x height x length, got {len(tokens)} dimension(s) in {spec.strip()!r}",
            spec=spec,
        )
    if len(tokens) > 3:
        logger.debug("Ignoring extra spec tokens %s in %r", tokens[3:], spec)

    width = get_from_spec_token(tokens[0], Units.INCHES)
    height = get_from_spec_token(tokens[1], Units.INCHES)
    length = get_from_spec_token(tokens[2], Units.FEET)

    logger.debug("Parsed spec %r -> %s\" x %s\" x %s'", spec.strip(), width, height, length)
    return width, height, length


def get_from_spec_token(spec_token: str, desired_unit: Units) -> float:
    """
    Parse one dimension token into desired_unit.

    10' requested in inches -> 120.0
    12" requested in feet   -> 1.0
    8 (no marker)           -> 8.0 in whatever unit was requested
    """
    stripped = spec_token.strip()
    replaced = stripped.replace(FEET_MARKER, "").replace(INCHES_MARKER, "").strip()

    try:
        value = float(replaced)
    except ValueError as e:
        raise SpecParseError(f"Unable to parse {replaced!r} as a number: {e}", spec=spec_token) from e

    if not math.isfinite(value) or value <= 0:
        raise SpecParseError(f"Dimension must be a positive number, got {replaced!r}", spec=spec_token)

    if desired_unit is Units.FEET and stripped.endswith(INCHES_MARKER):
        value = value / CONVERSION_FACTOR_INCHES_FEET
    elif desired_unit is Units.INCHES and stripped.endswith(FEET_MARKER):
        value = value * CONVERSION_FACTOR_INCHES_FEET

    return value
