from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

ColorValue = Union[Tuple[int], Tuple[float, ...]]


class ColorModel(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    XYZ = "xyz"
    YXY = "yxy"
    CIELAB = "cielab"
    CIELCH = "cielch"
    CMY = "cmy"
    CMYK = "cmyk"
    HSL = "hsl"
    HSV = "hsv"


num_channels: dict[ColorModel, int] = {
    ColorModel.HEX: 1,
    ColorModel.RGB: 3,
    ColorModel.XYZ: 3,
    ColorModel.YXY: 3,
    ColorModel.CIELAB: 3,
    ColorModel.CIELCH: 3,
    ColorModel.CMY: 3,
    ColorModel.CMYK: 4,
    ColorModel.HSL: 3,
    ColorModel.HSV: 3,
}


def as_model(model: ColorModel | str) -> ColorModel:
    """Accept a ColorModel member or its name in any case."""
    if isinstance(model, ColorModel):
        return model
    return ColorModel(model.lower())
