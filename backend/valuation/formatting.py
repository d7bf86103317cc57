import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

_TIERS = [
    (1_000_000_000, "B", 1),
    (1_000_000, "M", 1),
    (1_000, "K", 0),
]


def _to_fixed(value: float, digits: int) -> str:
    """Round the exact binary value half away from zero to a fixed number of decimals."""
    if not math.isfinite(value):
        return str(value)
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(60, exact.adjusted() + digits + 2)
        return str(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a number as entered: 35.0 -> "35", 12.3456789 -> "12.3456789"."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_currency(value: float) -> str:
    """Abbreviate a dollar amount, e.g. 1_500_000_000 -> "$1.5B", 45_000 -> "$45K".

    Negative values pass through the same thresholds, so -500 renders as
    "$-500" and -2_000_000 as "$-2000000". Non-finite values are rendered
    as-is ("$infB", "$nan").
    """
    for threshold, suffix, digits in _TIERS:
        if value >= threshold:
            return f"${_to_fixed(value / threshold, digits)}{suffix}"
    return f"${_to_fixed(value, 0)}"
