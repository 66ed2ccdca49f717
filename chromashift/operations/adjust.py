"""
Single-channel adjustments.

Each function converts to the model that owns the channel, changes it and
converts back, so the result is always in the input color's model:

- ``hue``: CIELCh hue, in degrees
- ``saturation``: HSV saturation, in percent
- ``brightness``: CIELab lightness
- ``greyscale``: RGB luma replicated across the three channels

Results leaving a model's domain (e.g. an HSV saturation above 100 that
cannot be expressed in RGB) raise ``InvalidColorError``; nothing is clamped.
"""
from __future__ import annotations
import math

from ..colors.color_base import ColorBase
from ..colors.hsv import HSV
from ..colors.rgb import RGB
from ..types.constants import HUE_360, RGB_MAX

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.3, 0.59, 0.11)


def hue(color: ColorBase, delta: float, absolute: bool = False) -> ColorBase:
    """
    Rotate (or set, with ``absolute=True``) the CIELCh hue.

    Negative results wrap like the CIELCh constructor does:

    >>> from chromashift.colors import CIELCh
    >>> hue(CIELCh(50, 20, 10), -30).hue
    340.0
    """
    lch = color.to_cielch()
    new_hue = delta if absolute else lch.hue + delta
    return lch.with_hue(math.fmod(new_hue, HUE_360)).convert(color.mode)


def saturation(color: ColorBase, delta: float, absolute: bool = False) -> ColorBase:
    hsv = color.to_hsv()
    new_saturation = delta if absolute else hsv.saturation + delta
    return HSV(hsv.hue, new_saturation, hsv.brightness).convert(color.mode)


def brightness(color: ColorBase, delta: float, absolute: bool = False) -> ColorBase:
    lab = color.to_cielab()
    new_lightness = delta if absolute else lab.lightness + delta
    return lab.with_lightness(new_lightness).convert(color.mode)


def greyscale(color: ColorBase) -> ColorBase:
    rgb = color.to_rgb()
    wr, wg, wb = LUMA_WEIGHTS
    # the weights sum to 1 only up to rounding; white must stay in range
    luma = min(rgb.red * wr + rgb.green * wg + rgb.blue * wb, RGB_MAX)
    return RGB(luma, luma, luma).convert(color.mode)
