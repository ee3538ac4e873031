"""
Nominal <-> actual lumber size conversion.

A "2x4" is a nominal call-out; the planed board is 1.5" x 3.5".
NOMINAL_TO_ACTUAL_INCHES is the lumberyard chart for dimensional lumber.
Lengths are sold at their nominal length, so only width and height convert.
"""

import logging
import math

from .errors import NominalLookupError, UnsupportedSizeError
from .numerical import FractionalValue

logger = logging.getLogger(__name__)

# Nominal inches -> actual inches (softwood dimensional lumber)
_CONVERSION_CHART_INCHES = {
    1.0: 0.75,
    1.25: 1.0,
    1.5: 1.25,
    2.0: 1.5,
    3.0: 2.5,
    4.0: 3.5,
    5.0: 4.5,
    6.0: 5.5,
    7.0: 6.25,
    8.0: 7.25,
    10.0: 9.25,
    12.0: 11.25,
}

NOMINAL_TO_ACTUAL_INCHES = {
    FractionalValue.from_float(nominal): actual
    for nominal, actual in _CONVERSION_CHART_INCHES.items()
}

ACTUAL_TO_NOMINAL_INCHES = {
    FractionalValue.from_float(actual): nominal
    for nominal, actual in _CONVERSION_CHART_INCHES.items()
}

# Boards typically don't come longer than 16'
MAX_STOCK_LENGTH_FEET = 16.0

# Ordered breakpoints for get_nearest_nominal_size_inches:
# (limit, inclusive, nominal). A measurement maps to the first row it fits.
_NOMINAL_BREAKPOINTS_INCHES = (
    (1.0, True, 1.0),
    (1.25, False, 1.25),
    (1.5, False, 1.5),
    (2.0, True, 2.0),
    (3.0, True, 3.0),
    (4.0, True, 4.0),
    (5.0, True, 5.0),
    (6.0, True, 6.0),
    (7.0, True, 7.0),
    (8.0, True, 8.0),
    (9.0, True, 9.0),
    (10.0, True, 10.0),
    (11.0, True, 11.0),
    (12.0, False, 12.0),
)


def standard_nominal_sizes() -> list[float]:
    """Nominal inch sizes present in the conversion chart, smallest first."""
    return sorted(_CONVERSION_CHART_INCHES)


def conversion_chart() -> dict[float, float]:
    """Copy of the chart as plain floats (nominal -> actual)."""
    return dict(_CONVERSION_CHART_INCHES)


def to_actual_size_in_inches(nominal_inches: float) -> float:
    """
    Look up the actual (planed) size for a nominal inch size.
    Raises NominalLookupError if the size isn't in the chart.
    """
    actual = NOMINAL_TO_ACTUAL_INCHES.get(FractionalValue.from_float(nominal_inches))
    if actual is None:
        raise NominalLookupError(nominal_inches, "nominal")
    logger.debug("Nominal %s\" -> actual %s\"", nominal_inches, actual)
    return actual


def to_nominal_size_in_inches(actual_inches: float) -> float:
    """
    Exact reverse lookup: actual inch size -> nominal inch size.
    Use get_nearest_nominal_size_inches for measurements that aren't
    exactly on the chart.
    """
    nominal = ACTUAL_TO_NOMINAL_INCHES.get(FractionalValue.from_float(actual_inches))
    if nominal is None:
        raise NominalLookupError(actual_inches, "actual")
    return nominal


def get_nearest_nominal_size_inches(inches: float) -> float:
    """
    Smallest standard nominal size for a measured inch value.

    Breakpoints mix inclusive and exclusive limits: 1.22" -> 1.25,
    but 1.25" itself -> 1.5. Anything 12" or wider is unsupported.
    """
    for limit, inclusive, nominal in _NOMINAL_BREAKPOINTS_INCHES:
        if inches < limit or (inclusive and inches == limit):
            return nominal
    raise UnsupportedSizeError(
        f"Unable to determine nominal size (in inches) for value {inches}"
    )


def get_nearest_nominal_size_feet(feet: float) -> float:
    """Round a length up to the next whole foot. Over 16' is unsupported."""
    if feet > MAX_STOCK_LENGTH_FEET:
        raise UnsupportedSizeError(
            f"Boards typically do not come in longer than "
            f"{MAX_STOCK_LENGTH_FEET:g}' lengths (got {feet}')"
        )
    return float(math.ceil(feet))
