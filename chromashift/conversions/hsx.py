import math

from ..types.constants import CHANNEL_EPSILON, HUE_360, PERCENT_MAX, RGB_MAX
from ..utils.num_utils import snap_to_range


def _to_channel(unit: float) -> float:
    return snap_to_range(unit * RGB_MAX, 0, RGB_MAX, CHANNEL_EPSILON)


def _sextant_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if r == max_c:
        hue = (g - b) / delta
    elif g == max_c:
        hue = 2 + (b - r) / delta
    else:
        hue = 4 + (r - g) / delta
    hue *= 60
    if hue < 0:
        hue += HUE_360
    return hue


## RGB to HSV / HSL

def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0, 360], saturation [0, 100], value [0, 100])
    """
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, max_c * PERCENT_MAX

    saturation = delta / max_c
    hue = _sextant_hue(r, g, b, max_c, delta)
    return hue, saturation * PERCENT_MAX, max_c * PERCENT_MAX


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0, 360], saturation [0, 100], lightness [0, 100])
    """
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    # Grey: hue and saturation are 0
    if delta == 0:
        return 0.0, 0.0, lightness * PERCENT_MAX

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2 - max_c - min_c)

    hue = _sextant_hue(r, g, b, max_c, delta)
    return hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX


## HSV / HSL to RGB

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees; 360 is treated as 0
        s: Saturation in [0, 100]
        v: Value in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    s = s / PERCENT_MAX
    v = v / PERCENT_MAX

    if s == 0:
        return _to_channel(v), _to_channel(v), _to_channel(v)

    h6 = h / HUE_360 * 6
    sextant = math.floor(h6)
    fract = h6 - sextant
    p = v * (1 - s)
    q = v * (1 - s * fract)
    t = v * (1 - s * (1 - fract))

    sextant %= 6
    if sextant == 0:
        r, g, b = v, t, p
    elif sextant == 1:
        r, g, b = q, v, p
    elif sextant == 2:
        r, g, b = p, v, t
    elif sextant == 3:
        r, g, b = p, q, v
    elif sextant == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return _to_channel(r), _to_channel(g), _to_channel(b)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees; 360 is treated as 0
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    r = g = b = l
    v = l * (1.0 + s) if l <= 0.5 else l + s - l * s
    if v > 0:
        m = l + l - v
        sv = (v - m) / v
        h6 = h / HUE_360 * 6.0
        sextant = math.floor(h6)
        fract = h6 - sextant
        vsf = v * sv * fract
        mid1 = m + vsf
        mid2 = v - vsf

        sextant %= 6
        if sextant == 0:
            r, g, b = v, mid1, m
        elif sextant == 1:
            r, g, b = mid2, v, m
        elif sextant == 2:
            r, g, b = m, v, mid1
        elif sextant == 3:
            r, g, b = m, mid2, v
        elif sextant == 4:
            r, g, b = mid1, m, v
        else:
            r, g, b = v, m, mid2

    return _to_channel(r), _to_channel(g), _to_channel(b)
