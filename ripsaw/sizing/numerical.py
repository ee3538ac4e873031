"""
Exact, hashable keys for dimension values.

Floats like 1.25 can't safely be used as dict keys when they come from
arithmetic or user input. FractionalValue splits the value into a whole
part and a fixed-precision fractional part so equal dimensions always
land on the same key.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

# Fraction is stored in millionths of an inch (or foot)
FRACTION_PRECISION = 6
FRACTION_SCALE = 10 ** FRACTION_PRECISION


@dataclass(frozen=True)
class FractionalValue:
    """A float decomposed into (whole, fraction) integer components."""

    whole: int
    fraction: int

    @classmethod
    def from_float(cls, value: float) -> "FractionalValue":
        """
        Decompose a float. The whole part truncates toward zero and the
        remainder is rounded to FRACTION_PRECISION decimal places, so
        1.25 and 1.250 collide while 1.25 and 1.26 don't.
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot build a FractionalValue from {value!r}")

        # repr() is the shortest string that round-trips, so 0.1 stays 0.1
        exact = Decimal(repr(value))
        quantum = Decimal(1).scaleb(-FRACTION_PRECISION)

        with localcontext() as ctx:
            # Every whole digit plus FRACTION_PRECISION must fit in the context
            ctx.prec = max(ctx.prec, exact.adjusted() + FRACTION_PRECISION + 2)
            exact = exact.quantize(quantum, rounding=ROUND_HALF_EVEN)
            whole = int(exact)  # truncates toward zero
            fraction = int((exact - whole) * FRACTION_SCALE)
        return cls(whole=whole, fraction=fraction)

    def to_float(self) -> float:
        return self.whole + self.fraction / FRACTION_SCALE

    def __str__(self) -> str:
        return repr(self.to_float())
