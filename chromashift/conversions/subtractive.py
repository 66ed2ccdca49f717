from ..types.constants import CHANNEL_EPSILON, RGB_MAX
from ..utils.num_utils import snap_to_range


def rgb_to_cmy(r: float, g: float, b: float) -> tuple[float, float, float]:
    return 1 - r / RGB_MAX, 1 - g / RGB_MAX, 1 - b / RGB_MAX


def cmy_to_rgb(c: float, m: float, y: float) -> tuple[float, float, float]:
    return tuple(
        snap_to_range((1 - v) * RGB_MAX, 0, RGB_MAX, CHANNEL_EPSILON) for v in (c, m, y)
    )  # type: ignore[return-value]


def cmy_to_cmyk(c: float, m: float, y: float) -> tuple[float, float, float, float]:
    """
    Extract the key (black) component: ``k = min(c, m, y)``.

    Pure black (k == 1) has no chromatic remainder and maps to (0, 0, 0, 1).
    """
    k = min(1.0, c, m, y)
    if k == 1:
        return 0.0, 0.0, 0.0, k
    return (c - k) / (1 - k), (m - k) / (1 - k), (y - k) / (1 - k), k


def cmyk_to_cmy(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    return c * (1 - k) + k, m * (1 - k) + k, y * (1 - k) + k
