"""
Lumber value object.

A board is width x height (inches) x length (feet), tagged nominal or actual.
Boards are immutable; conversions return new boards.

Identity is the "{width}x{height}x{length}" string, so two boards are the
same cut-list entry when they print the same, whatever their mode.
"""

import logging
from dataclasses import dataclass, field

from .errors import InvalidDimensionError
from .conversion import (
    get_nearest_nominal_size_feet,
    get_nearest_nominal_size_inches,
    to_actual_size_in_inches,
)
from .spec_parser import CONVERSION_FACTOR_INCHES_FEET, determine_dimensions_from_spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Lumber:
    width_inches: float
    height_inches: float
    length_feet: float
    is_nominal: bool = field(default=False)

    def __post_init__(self):
        for name in ("width_inches", "height_inches", "length_feet"):
            if not getattr(self, name) > 0:
                raise InvalidDimensionError(f"{name} must be positive, got {getattr(self, name)}")

    # --- Factories ---

    @classmethod
    def create_nominal(cls, width_inches: float, height_inches: float, length_feet: float) -> "Lumber":
        return cls(float(width_inches), float(height_inches), float(length_feet), is_nominal=True)

    @classmethod
    def create_actual(cls, width_inches: float, height_inches: float, length_feet: float) -> "Lumber":
        return cls(float(width_inches), float(height_inches), float(length_feet), is_nominal=False)

    @classmethod
    def create_from_spec(cls, spec: str, nominal: bool = False) -> "Lumber":
        """
        Build a board from text like "2x4x8".

        Parsed specs are treated as actual measurements unless nominal=True.
        Raises SpecParseError for malformed specs.
        """
        width, height, length = determine_dimensions_from_spec(spec)
        if nominal:
            return cls.create_nominal(width, height, length)
        return cls.create_actual(width, height, length)

    # --- Accessors ---

    def get_width_in_inches(self) -> float:
        return self.width_inches

    def get_height_in_inches(self) -> float:
        return self.height_inches

    def get_length_in_feet(self) -> float:
        return self.length_feet

    def get_length_in_inches(self) -> float:
        return CONVERSION_FACTOR_INCHES_FEET * self.length_feet

    # --- Conversions ---

    def as_actual_size(self) -> "Lumber":
        """
        Actual-mode copy of this board. Nominal width and height go through
        the conversion chart (NominalLookupError if off-chart); length is kept.
        """
        if not self.is_nominal:
            return Lumber.create_actual(self.width_inches, self.height_inches, self.length_feet)

        actual = Lumber.create_actual(
            to_actual_size_in_inches(self.width_inches),
            to_actual_size_in_inches(self.height_inches),
            self.length_feet,
        )
        logger.debug("%s nominal -> %s actual", self.get_identifier_string(), actual.get_identifier_string())
        return actual

    def as_nearest_nominal(self) -> "Lumber":
        """
        Smallest standard nominal board that covers this one.

        Width and height are swapped if needed so the narrow side comes
        first (there's no such thing as a 4x1). Raises UnsupportedSizeError
        for anything wider than 12" or longer than 16'.
        """
        if self.is_nominal:
            return Lumber.create_nominal(self.width_inches, self.height_inches, self.length_feet)

        width, height = self.width_inches, self.height_inches
        if width > height:
            width, height = height, width

        nominal = Lumber.create_nominal(
            get_nearest_nominal_size_inches(width),
            get_nearest_nominal_size_inches(height),
            get_nearest_nominal_size_feet(self.length_feet),
        )
        logger.debug("%s actual -> %s nominal", self.get_identifier_string(), nominal.get_identifier_string())
        return nominal

    # --- Identity ---

    def get_identifier_string(self) -> str:
        return f"{self.width_inches}x{self.height_inches}x{self.length_feet}"

    def __eq__(self, other):
        if not isinstance(other, Lumber):
            return NotImplemented
        return self.get_identifier_string() == other.get_identifier_string()

    def __hash__(self):
        return hash(self.get_identifier_string())

    def __str__(self) -> str:
        return self.get_identifier_string()

    def to_dict(self) -> dict:
        return {
            "width_inches": self.width_inches,
            "height_inches": self.height_inches,
            "length_feet": self.length_feet,
            "is_nominal": self.is_nominal,
            "identifier": self.get_identifier_string(),
        }
