"""
Derived-color operations.

Every function takes a color of any model and returns results in that same
model. They are also bound as methods on all color classes (``hue``,
``saturation`` and ``brightness`` as ``adjust_hue``, ``adjust_saturation`` and
``adjust_brightness``, since those names are channel accessors on some models):

>>> from chromashift.colors import RGB
>>> RGB(255, 0, 0).websafe()
RGB(255.0, 0.0, 0.0)
>>> RGB(0, 0, 0).matching_text_color()
Hex(0xFFFFFF)

Groups
------
- distance: distance, match, websafe, websafe_palette
- adjust: hue, saturation, brightness, greyscale
- harmony: complement, analogous, split, equal, rectangle, color_range
  (method ``range``), sweetspot
- contrast: is_dark, matching_text_color
"""

from ..colors.color_base import ColorBase
from .adjust import brightness, greyscale, hue, saturation
from .contrast import is_dark, matching_text_color
from .distance import distance, match, websafe, websafe_palette
from .harmony import analogous, color_range, complement, equal, rectangle, split, sweetspot

ColorBase.distance = distance
ColorBase.match = match
ColorBase.websafe = websafe
ColorBase.adjust_hue = hue
ColorBase.adjust_saturation = saturation
ColorBase.adjust_brightness = brightness
ColorBase.greyscale = greyscale
ColorBase.complement = complement
ColorBase.analogous = analogous
ColorBase.split = split
ColorBase.equal = equal
ColorBase.rectangle = rectangle
ColorBase.range = color_range
ColorBase.sweetspot = sweetspot
ColorBase.is_dark = is_dark
ColorBase.matching_text_color = matching_text_color


__all__ = [
    # distance
    'distance',
    'match',
    'websafe',
    'websafe_palette',
    # adjust
    'hue',
    'saturation',
    'brightness',
    'greyscale',
    # harmony
    'complement',
    'analogous',
    'split',
    'equal',
    'rectangle',
    'color_range',
    'sweetspot',
    # contrast
    'is_dark',
    'matching_text_color',
]
