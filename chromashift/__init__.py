"""Chromashift: color model conversion and color harmony utilities."""

from .colors import (
    ColorBase,
    Hex,
    RGB,
    XYZ,
    Yxy,
    CIELab,
    CIELCh,
    CMY,
    CMYK,
    HSL,
    HSV,
    color_convert,
    convert_color,
    get_color_class,
)
from .conversions import convert, canonical_path
from .exceptions import ErrorKind, InvalidColorError
from .parsing import parse
from .types.color_types import ColorModel
from .operations import (
    distance,
    match,
    websafe,
    websafe_palette,
    hue,
    saturation,
    brightness,
    greyscale,
    complement,
    analogous,
    split,
    equal,
    rectangle,
    color_range,
    sweetspot,
    is_dark,
    matching_text_color,
)

color_class = get_color_class

__all__ = [
    # core color types
    "ColorBase",
    "ColorModel",
    "Hex",
    "RGB",
    "XYZ",
    "Yxy",
    "CIELab",
    "CIELCh",
    "CMY",
    "CMYK",
    "HSL",
    "HSV",
    "color_class",
    "color_convert",
    "convert_color",
    "get_color_class",
    "parse",
    # errors
    "ErrorKind",
    "InvalidColorError",
    # conversions
    "convert",
    "canonical_path",
    # operations
    "distance",
    "match",
    "websafe",
    "websafe_palette",
    "hue",
    "saturation",
    "brightness",
    "greyscale",
    "complement",
    "analogous",
    "split",
    "equal",
    "rectangle",
    "color_range",
    "sweetspot",
    "is_dark",
    "matching_text_color",
]
