import math
from decimal import Context, Decimal, ROUND_HALF_UP

# From this magnitude on, fixed notation gives way to the plain number string.
FIXED_NOTATION_LIMIT = 1e21


def to_fixed(value: float, digits: int = 2) -> str:
    """Render a number with a fixed count of decimals, as shown on product cards.

    Ties round away from zero on the exact binary value (0.125 -> "0.13"), and
    non-finite numbers are written out as NaN / Infinity instead of raising.
    Magnitudes of 1e21 and above come back in exponent form ("1e+21").
    """
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= FIXED_NOTATION_LIMIT:
        return repr(float(value))
    if value == 0:
        value = 0  # no "-0.00"
    exact = Decimal(value)
    ctx = Context(prec=max(28, exact.adjusted() + digits + 2))
    return str(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=ctx))
