"""
Chromashift Color Classes
=========================

Immutable value types for the ten supported color models.

Features
--------
- Immutable color instances (frozen after initialization)
- Domain checks at construction (RGB channels in [0, 255], Hex in
  0..0xFFFFFF, finite fields everywhere, CIELCh hue wrapped into [0, 360))
- Conversion to every other model via ``to_<model>()`` or ``convert(model)``
- Display, CSS and URL-safe renderers
- Parsing from text via ``<Class>.parse(text)``

Usage
-----
>>> from chromashift.colors import RGB, Hex
>>> red = RGB(255, 0, 0)
>>> red.to_hex()
Hex(0xFF0000)
>>> str(red.to_hsl())
'0°, 100%, 50%'
>>> Hex.parse("#0000FF").to_rgb()
RGB(0.0, 0.0, 255.0)

Constructing from another color converts it:

>>> RGB(Hex(0x00FF00))
RGB(0.0, 255.0, 0.0)

Color Classes
-------------
    - Hex:    packed 24-bit integer
    - RGB:    red, green, blue (0-255)
    - XYZ:    CIE 1931 tristimulus
    - Yxy:    luminance + chromaticity
    - CIELab: lightness, a, b
    - CIELCh: lightness, chroma, hue
    - CMY:    cyan, magenta, yellow (0-1)
    - CMYK:   cyan, magenta, yellow, key (0-1)
    - HSL:    hue (degrees), saturation, lightness (percent)
    - HSV:    hue (degrees), saturation, value (percent)

Notes
-----
- Equality is value equality within a model; instances are hashable.
- Converting to an out-of-gamut RGB from CIE models clips to [0, 255];
  oversaturated HSV/HSL/CMY inputs fail instead.
"""

from .color_base import ColorBase
from .rgb import RGB, Hex
from .cie import XYZ, Yxy, CIELab, CIELCh
from .subtractive import CMY, CMYK
from .hsl import HSL
from .hsv import HSV
from .color import color_convert, convert_color, get_color_class, model_to_class


__all__ = [
    'ColorBase',
    'Hex',
    'RGB',
    'XYZ',
    'Yxy',
    'CIELab',
    'CIELCh',
    'CMY',
    'CMYK',
    'HSL',
    'HSV',
    'color_convert',
    'convert_color',
    'get_color_class',
    'model_to_class',
]
