from __future__ import annotations
import math
import warnings

from ..colors.cie import CIELCh
from ..colors.color_base import ColorBase
from ..colors.hsv import HSV
from ..colors.rgb import RGB
from ..types.constants import HUE_360, PERCENT_MAX
from ..utils.num_utils import round_half_up
from .adjust import hue


def complement(color: ColorBase) -> ColorBase:
    """The color on the opposite side of the CIELCh hue circle."""
    return hue(color, 180)


def analogous(color: ColorBase, include_self: bool = False) -> list[ColorBase]:
    """Neighbors 30° either side; ``color`` sits between them when included."""
    palette = [hue(color, -30)]
    if include_self:
        palette.append(color)
    palette.append(hue(color, 30))
    return palette


def split(color: ColorBase, include_self: bool = False) -> list[ColorBase]:
    """Split complements at ±150°, with ``color`` first when included."""
    palette = [color] if include_self else []
    palette.append(hue(color, -150))
    palette.append(hue(color, 150))
    return palette


def equal(color: ColorBase, parts: int, include_self: bool = False) -> list[ColorBase]:
    """
    Divide the CIELCh hue circle into ``parts`` equal wedges starting at
    ``color``'s hue and return the other ``parts - 1`` corners.

    ``parts`` below 2 is raised to 2 with a warning.
    """
    if parts < 2:
        warnings.warn(f"equal() needs at least 2 parts, got {parts}; using 2", stacklevel=2)
        parts = 2
    lch = color.to_cielch()
    step = HUE_360 / parts
    palette = [color] if include_self else []
    for i in range(1, parts):
        corner = CIELCh(lch.lightness, lch.chroma, lch.hue + step * i)
        palette.append(corner.convert(color.mode))
    return palette


def rectangle(color: ColorBase, side_length: float, include_self: bool = False) -> list[ColorBase]:
    """
    The other three corners of a hue rectangle whose short side spans
    ``side_length`` degrees. ``rectangle(c, 90)`` is the square (tetrad).
    """
    lch = color.to_cielch()
    long_side = (HUE_360 - side_length * 2) / 2
    offsets = (side_length, side_length + long_side, side_length + long_side + side_length)
    palette = [color] if include_self else []
    for offset in offsets:
        corner = CIELCh(lch.lightness, lch.chroma, lch.hue + offset)
        palette.append(corner.convert(color.mode))
    return palette


def color_range(
    color: ColorBase,
    other: ColorBase,
    steps: int,
    include_self: bool = False,
) -> list[ColorBase]:
    """
    Gradient of ``steps`` colors from ``color`` to ``other``, interpolated in RGB.

    Interior channels are floored. The endpoints are only part of the result
    with ``include_self=True``, ``other`` converted to ``color``'s model.
    With ``steps <= 2`` there is no interior and a warning is issued.

    >>> [str(c) for c in color_range(RGB(0, 0, 0), RGB(255, 255, 255), 4)]
    ['85, 85, 85', '170, 170, 170']
    """
    if steps <= 2:
        warnings.warn(
            f"color_range() with {steps} steps has no interior colors", stacklevel=2,
        )
    a = color.to_rgb().channels
    b = other.to_rgb().channels
    segments = steps - 1
    palette = []
    for n in range(1, segments):
        channels = [math.floor(start + n * (end - start) / segments) for start, end in zip(a, b)]
        palette.append(RGB(*channels).convert(color.mode))
    if include_self:
        palette.insert(0, color)
        palette.append(other.convert(color.mode))
    return palette


def sweetspot(color: ColorBase, include_self: bool = False) -> list[ColorBase]:
    """
    Five HSV variations of ``color`` that tend to work well together: a pale
    bright tint, a deeper shade of that tint, a hue shifted by 300°, and two
    greys whose value is offset by 50 from that shade.
    """
    base = color.to_hsv()
    h, s, v = base.hue, base.saturation, base.brightness

    tint = HSV(h, round_half_up(s * 0.3), min(round_half_up(v * 1.3), PERCENT_MAX))
    shade = HSV(
        h,
        min(round_half_up(tint.saturation * 1.2), PERCENT_MAX),
        min(round_half_up(tint.brightness * 0.5), PERCENT_MAX),
    )
    shifted = HSV(int(h + 300) % HUE_360, s, v)
    grey = HSV(h, 0, (int(shade.brightness) + 50) % PERCENT_MAX)
    second_grey = HSV(h, 0, (int(grey.brightness) + 50) % PERCENT_MAX)

    variants = [tint, shade, shifted, grey, second_grey]
    if include_self:
        variants.insert(0, base)
    return [variant.convert(color.mode) for variant in variants]
