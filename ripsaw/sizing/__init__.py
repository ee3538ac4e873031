"""
Lumber sizing core.

Pure Python math. No I/O.
Nominal/actual conversion, spec parsing, and cut-list aggregation.
"""

from .errors import (
    InvalidDimensionError,
    LumberError,
    NominalLookupError,
    SpecParseError,
    UnsupportedSizeError,
)
from .numerical import FractionalValue
from .conversion import (
    get_nearest_nominal_size_feet,
    get_nearest_nominal_size_inches,
    to_actual_size_in_inches,
    to_nominal_size_in_inches,
)
from .spec_parser import Units, determine_dimensions_from_spec, get_from_spec_token
from .lumber import Lumber
from .cut_list import CutList
