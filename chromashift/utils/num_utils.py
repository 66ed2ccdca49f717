import math
from decimal import Decimal, ROUND_HALF_UP

from boundednumbers.functions import cyclic_wrap_float

from ..types.constants import HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (``round`` rounds halves to even)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_fixed(value: float, places: int) -> str:
    """
    Render ``value`` with exactly ``places`` decimals, rounding halves away from zero.

    ``'%.2f' % 0.125`` gives ``'0.12'``; this gives ``'0.13'``.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        # no "-0.00"
        rounded = rounded.copy_abs()
    return f"{rounded:.{places}f}"


def wrap_hue(h: float) -> float:
    """Normalize hue to [0, 360)."""
    h = cyclic_wrap_float(h, 0, HUE_360)
    # -1e-20 + 360 rounds to exactly 360.0
    if h >= HUE_360:
        h = 0.0
    return h


def snap_to_range(value: float, low: float, high: float, tol: float) -> float:
    """Pull values that overshoot [low, high] by at most ``tol`` back onto the bound."""
    if low - tol <= value < low:
        return low
    if high < value <= high + tol:
        return high
    return value
