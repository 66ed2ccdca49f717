import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.constants import LAB_EPSILON, LAB_KAPPA_SLOPE, LAB_OFFSET, REF_WHITE_D65

_REF_WHITE = np.array(REF_WHITE_D65, dtype=float)


def lab_f(t: float) -> float:
    """Forward CIE Lab companding of a white-relative ratio."""
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return LAB_KAPPA_SLOPE * t + LAB_OFFSET


def lab_f_inv(t: float) -> float:
    """Inverse of ``lab_f``; the threshold is tested on the cube, as on the way in."""
    cube = t ** 3
    if cube > LAB_EPSILON:
        return cube
    return (t - LAB_OFFSET) / LAB_KAPPA_SLOPE


## XYZ <-> CIELab

def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert XYZ to CIELab relative to the D65 white point.

    Returns:
        Tuple[float, float, float]: (L, a, b)
    """
    ref_x, ref_y, ref_z = REF_WHITE_D65
    fx = lab_f(x / ref_x)
    fy = lab_f(y / ref_y)
    fz = lab_f(z / ref_z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    ref_x, ref_y, ref_z = REF_WHITE_D65
    fy = (lightness + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    return ref_x * lab_f_inv(fx), ref_y * lab_f_inv(fy), ref_z * lab_f_inv(fz)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """
    Vectorized: Convert XYZ to CIELab.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        lab: array of shape (..., 3)
    """
    t = np.asarray(xyz, dtype=float) / _REF_WHITE
    f = np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA_SLOPE * t + LAB_OFFSET)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = lab[..., 1] / 500 + fy
    fz = fy - lab[..., 2] / 200
    f = np.stack([fx, fy, fz], axis=-1)
    cube = f ** 3
    return np.where(cube > LAB_EPSILON, cube, (f - LAB_OFFSET) / LAB_KAPPA_SLOPE) * _REF_WHITE


## CIELab <-> CIELCh

def lab_to_lch(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert CIELab to CIELCh.

    A non-positive atan2 angle maps to ``360 - |angle|``, so a neutral color
    (a = b = 0) comes out with hue 360, which the CIELCh domain wraps to 0.

    Returns:
        Tuple[float, float, float]: (L, C, H) with H in degrees
    """
    angle = math.atan2(b, a)
    if angle > 0:
        hue = (angle / math.pi) * 180
    else:
        hue = 360 - (abs(angle) / math.pi) * 180
    chroma = math.sqrt(a ** 2 + b ** 2)
    return lightness, chroma, hue


def lch_to_lab(lightness: float, chroma: float, hue: float) -> tuple[float, float, float]:
    radians = hue * (math.pi / 180)
    return lightness, math.cos(radians) * chroma, math.sin(radians) * chroma


def np_lab_to_lch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    angle = np.arctan2(lab[..., 2], lab[..., 1])
    hue = np.where(angle > 0, angle / np.pi * 180, 360 - np.abs(angle) / np.pi * 180) % 360
    chroma = np.sqrt(lab[..., 1] ** 2 + lab[..., 2] ** 2)
    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=float)
    radians = np.radians(lch[..., 2])
    chroma = lch[..., 1]
    return np.stack([lch[..., 0], np.cos(radians) * chroma, np.sin(radians) * chroma], axis=-1)
