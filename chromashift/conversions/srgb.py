import numpy as np
from boundednumbers.functions import clamp
from boundednumbers.np_functions import clamp as np_clamp
from numpy import ndarray as NDArray

from ..types.constants import (
    RGB_MAX,
    RGB_TO_XYZ_MATRIX,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    XYZ_TO_RGB_MATRIX,
)

_RGB_TO_XYZ = np.array(RGB_TO_XYZ_MATRIX, dtype=float)
_XYZ_TO_RGB = np.array(XYZ_TO_RGB_MATRIX, dtype=float)


def srgb_decode(c: float) -> float:
    """sRGB inverse companding of one channel in [0, 1]."""
    if c > SRGB_DECODE_THRESHOLD:
        return ((c + 0.055) / 1.055) ** SRGB_GAMMA
    return c / 12.92


def srgb_encode(c: float) -> float:
    """sRGB companding of one linear channel."""
    if c > SRGB_ENCODE_THRESHOLD:
        return 1.055 * (c ** (1 / SRGB_GAMMA)) - 0.055
    return 12.92 * c


## RGB to XYZ conversions

def rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert sRGB to CIE 1931 XYZ.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (X, Y, Z) scaled so that white has Y = 100
    """
    lr = srgb_decode(r / RGB_MAX) * 100
    lg = srgb_decode(g / RGB_MAX) * 100
    lb = srgb_decode(b / RGB_MAX) * 100
    (xr, xg, xb), (yr, yg, yb), (zr, zg, zb) = RGB_TO_XYZ_MATRIX
    x = lr * xr + lg * xg + lb * xb
    y = lr * yr + lg * yg + lb * yb
    z = lr * zr + lg * zg + lb * zb
    return x, y, z


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB to XYZ.

    Args:
        rgb: array of shape (..., 3), channels in [0, 255]

    Returns:
        xyz: array of shape (..., 3)
    """
    c = np.asarray(rgb, dtype=float) / RGB_MAX
    linear = np.where(
        c > SRGB_DECODE_THRESHOLD,
        ((c + 0.055) / 1.055) ** SRGB_GAMMA,
        c / 12.92,
    ) * 100
    return linear @ _RGB_TO_XYZ.T


## XYZ to RGB conversions

def xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert XYZ to sRGB, clipping out-of-gamut results into [0, 255].

    Lab and LCh can describe colors sRGB cannot show; hue rotations land there
    routinely, so this edge clips instead of failing.
    """
    vx, vy, vz = x / 100, y / 100, z / 100
    (rx, ry, rz), (gx, gy, gz), (bx, by, bz) = XYZ_TO_RGB_MATRIX
    lr = vx * rx + vy * ry + vz * rz
    lg = vx * gx + vy * gy + vz * gz
    lb = vx * bx + vy * by + vz * bz
    return (
        clamp(srgb_encode(lr) * RGB_MAX, 0, RGB_MAX),
        clamp(srgb_encode(lg) * RGB_MAX, 0, RGB_MAX),
        clamp(srgb_encode(lb) * RGB_MAX, 0, RGB_MAX),
    )


def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """
    Vectorized: Convert XYZ to sRGB with gamut clipping.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        rgb: array of shape (..., 3), channels in [0, 255]
    """
    linear = (np.asarray(xyz, dtype=float) / 100) @ _XYZ_TO_RGB.T
    # fractional powers of negatives are nan; those lanes take the linear branch anyway
    positive = np.maximum(linear, SRGB_ENCODE_THRESHOLD)
    encoded = np.where(
        linear > SRGB_ENCODE_THRESHOLD,
        1.055 * positive ** (1 / SRGB_GAMMA) - 0.055,
        12.92 * linear,
    )
    return np_clamp(encoded * RGB_MAX, 0, RGB_MAX)
