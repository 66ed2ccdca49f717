"""
Chromashift Color Model Conversions
===================================

Conversion graph across the ten supported color models. Functions here work
on plain tuples of field values; the color classes in ``chromashift.colors``
wrap them.

Direct Edges
------------
Only these pairs have closed-form formulas:

    RGB  <-> Hex      pack/unpack rounded channels
    RGB  <-> XYZ      sRGB companding + 3x3 matrix (XYZ -> RGB clips to gamut)
    XYZ  <-> CIELab   D65 reference white
    CIELab <-> CIELCh polar form of a/b
    XYZ  <-> Yxy      chromaticity coordinates
    RGB  <-> HSV      sextant decomposition
    RGB  <-> HSL      sextant decomposition
    RGB  <-> CMY      complement
    CMY  <-> CMYK     black extraction

Composed Conversions
--------------------
Every other pair follows one fixed route (``canonical_path``), e.g.::

    HSV -> RGB -> CMY -> CMYK
    Yxy -> XYZ -> CIELab -> CIELCh
    CIELCh -> CIELab -> XYZ -> RGB -> HSL

Results are path dependent under floating point, so the route table in
``graph.NEXT_HOP`` is fixed.

Vectorized Functions
--------------------
``np_rgb_to_xyz``, ``np_xyz_to_rgb``, ``np_xyz_to_lab``, ``np_lab_to_xyz``,
``np_lab_to_lch`` and ``np_lch_to_lab`` take ``(..., 3)`` arrays.

Examples
--------
>>> from chromashift.conversions import convert
>>> convert((255.0, 0.0, 0.0), "rgb", "hex")
(16711680,)
>>> convert((0.0, 100.0, 100.0), "hsv", "cmyk")
(0.0, 1.0, 1.0, 0.0)
"""

from .srgb import rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb
from .cielab import (
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
    np_lch_to_lab,
)
from .yxy import xyz_to_yxy, yxy_to_xyz
from .hsx import rgb_to_hsv, rgb_to_hsl, hsv_to_rgb, hsl_to_rgb
from .subtractive import rgb_to_cmy, cmy_to_rgb, cmy_to_cmyk, cmyk_to_cmy
from .hexcode import rgb_to_hex, hex_to_rgb
from .graph import (
    DIRECT_EDGES,
    NEXT_HOP,
    CANONICAL_PATHS,
    canonical_path,
    convert,
)
from ..types.color_types import ColorModel

__all__ = [
    # RGB <-> XYZ
    'rgb_to_xyz',
    'xyz_to_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',

    # XYZ <-> CIELab <-> CIELCh
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_lab_to_lch',
    'np_lch_to_lab',

    # XYZ <-> Yxy
    'xyz_to_yxy',
    'yxy_to_xyz',

    # RGB <-> HSV / HSL
    'rgb_to_hsv',
    'rgb_to_hsl',
    'hsv_to_rgb',
    'hsl_to_rgb',

    # RGB <-> CMY <-> CMYK
    'rgb_to_cmy',
    'cmy_to_rgb',
    'cmy_to_cmyk',
    'cmyk_to_cmy',

    # RGB <-> Hex
    'rgb_to_hex',
    'hex_to_rgb',

    # Graph
    'DIRECT_EDGES',
    'NEXT_HOP',
    'CANONICAL_PATHS',
    'canonical_path',
    'convert',
    'ColorModel',
]
