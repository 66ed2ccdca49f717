# No dependencies
from typing import Tuple

# D65 reference white (2° observer), tristimulus scaled to Y = 100
REF_WHITE_D65: Tuple[float, float, float] = (95.047, 100.000, 108.883)

# sRGB companding
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

RGB_TO_XYZ_MATRIX = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

XYZ_TO_RGB_MATRIX = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

# CIE Lab piecewise function
LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787
LAB_OFFSET = 16 / 116

RGB_MAX = 255
PERCENT_MAX = 100
HEX_MAX = 0xFFFFFF
HUE_360 = 360

# Float noise tolerated at channel bounds before a value counts as out of range
CHANNEL_EPSILON = 1e-9

WEBSAFE_STEP = 51

DARK_LIGHTNESS_THRESHOLD = 50
TEXT_ON_LIGHT = 0x000000
TEXT_ON_DARK = 0xFFFFFF
