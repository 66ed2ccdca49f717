from __future__ import annotations

from ..colors.color_base import ColorBase
from ..colors.rgb import Hex
from ..conversions.hexcode import hex_to_rgb
from ..types.constants import (
    DARK_LIGHTNESS_THRESHOLD,
    PERCENT_MAX,
    RGB_MAX,
    TEXT_ON_DARK,
    TEXT_ON_LIGHT,
)
from ..utils.num_utils import round_half_up


def is_dark(color: ColorBase) -> bool:
    """
    True when the HSL lightness of ``color``, rounded to a whole percent, is
    below 50. Channels are taken from the Hex form, so they are rounded first.
    """
    r, g, b = (channel / RGB_MAX for channel in hex_to_rgb(color.to_hex().hex))
    lightness = round_half_up((max(r, g, b) + min(r, g, b)) / 2 * PERCENT_MAX)
    return lightness < DARK_LIGHTNESS_THRESHOLD


def matching_text_color(color: ColorBase) -> Hex:
    """Black text on light colors, white text on dark ones."""
    return Hex(TEXT_ON_DARK if is_dark(color) else TEXT_ON_LIGHT)
