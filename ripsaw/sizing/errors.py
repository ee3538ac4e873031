"""
Errors raised by the sizing core.

Core functions raise; the CLI loop and API routers decide whether to
re-prompt, skip, or return an HTTP error. A rejected spec never adds a
board to a cut list.
"""


class LumberError(Exception):
    """Base class for every sizing error."""


class NominalLookupError(LumberError, LookupError):
    """A size has no entry in the nominal/actual conversion table."""

    def __init__(self, value: float, direction: str = "nominal"):
        self.value = value
        self.direction = direction
        super().__init__(f"{value} was not found in the {direction} lookup table")


class UnsupportedSizeError(LumberError, ValueError):
    """A measurement is larger than any standard stock size."""


class SpecParseError(LumberError, ValueError):
    """A free-text lumber spec couldn't be turned into dimensions."""

    def __init__(self, message: str, spec: str = None):
        self.spec = spec
        super().__init__(message)


class InvalidDimensionError(LumberError, ValueError):
    """A board dimension is zero, negative, or not a number."""
