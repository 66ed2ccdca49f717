from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from ..colors.color_base import ColorBase
from ..colors.rgb import RGB
from ..conversions.cielab import np_xyz_to_lab
from ..conversions.srgb import np_rgb_to_xyz
from ..exceptions import InvalidColorError
from ..types.color_types import ColorModel
from ..types.constants import RGB_MAX, WEBSAFE_STEP


def distance(color: ColorBase, other: ColorBase) -> float:
    """
    Euclidean distance between two colors in CIELab space.

    >>> distance(RGB(12, 34, 56), RGB(12, 34, 56))
    0.0
    """
    a = color.to_cielab()
    b = other.to_cielab()
    return math.sqrt(
        (a.lightness - b.lightness) ** 2
        + (a.a - b.a) ** 2
        + (a.b - b.b) ** 2
    )


def _lab_array(colors: list[ColorBase]) -> np.ndarray:
    """CIELab values as an (n, 3) array; RGB entries are converted in one vectorized pass."""
    labs = np.empty((len(colors), 3), dtype=np.float64)
    rgb_rows = [i for i, c in enumerate(colors) if c.mode == ColorModel.RGB]
    if rgb_rows:
        rgb = np.array([colors[i].value for i in rgb_rows], dtype=np.float64)
        labs[rgb_rows] = np_xyz_to_lab(np_rgb_to_xyz(rgb))
    for i, c in enumerate(colors):
        if c.mode != ColorModel.RGB:
            labs[i] = c.to_cielab().value
    return labs


def match(color: ColorBase, palette: Sequence[ColorBase]) -> ColorBase:
    """
    Return the palette entry closest to ``color``, in ``color``'s model.

    Ties go to the earliest entry.

    Raises:
        InvalidColorError: if ``palette`` is empty
        TypeError: if an entry is not a color
    """
    palette = list(palette)
    if not palette:
        raise InvalidColorError("Cannot match against an empty palette", palette)
    for entry in palette:
        if not isinstance(entry, ColorBase):
            raise TypeError(f"Palette entries must be colors, got {type(entry).__name__}")

    target = _lab_array([color])[0]
    labs = _lab_array(palette)
    distances = np.sqrt(np.sum((labs - target) ** 2, axis=1))
    # argmin returns the first occurrence of the minimum
    closest = palette[int(np.argmin(distances))]
    return closest.convert(color.mode)


def websafe_palette() -> list[RGB]:
    """The 216 websafe colors, red varying slowest and blue fastest."""
    steps = range(0, RGB_MAX + 1, WEBSAFE_STEP)
    return [RGB(r, g, b) for r in steps for g in steps for b in steps]


def websafe(color: ColorBase) -> ColorBase:
    return match(color, websafe_palette())
