from __future__ import annotations
from .color_base import ColorBase, build_registry
from .cie import XYZ, Yxy, CIELab, CIELCh
from .hsl import HSL
from .hsv import HSV
from .rgb import RGB, Hex
from .subtractive import CMY, CMYK
from ..conversions.graph import convert as graph_convert
from ..types.color_types import ColorModel, as_model

model_to_class: dict[ColorModel, type[ColorBase]] = build_registry(
    Hex, RGB, XYZ, Yxy, CIELab, CIELCh, CMY, CMYK, HSL, HSV,
)


def get_color_class(model: ColorModel | str) -> type[ColorBase]:
    try:
        return model_to_class[as_model(model)]
    except ValueError:
        raise ValueError(f"Unsupported color model: {model!r}") from None


def color_convert(self: ColorBase, to_model: ColorModel | str | None = None) -> ColorBase:
    """
    Convert this color to another model along the canonical path.

    Converting to the color's own model returns an equal (not necessarily
    identical) value; derived operations rely on this to hand results back in
    the caller's model.

    Args:
        to_model: Target model (``ColorModel`` or its name, case-insensitive).
            Defaults to the color's own model.

    Returns:
        New ColorBase instance in the target model
    """
    target = as_model(to_model) if to_model is not None else self.mode
    if target == self.mode:
        return self
    cls = model_to_class[target]
    return cls(*graph_convert(self.value, self.mode, target))


def convert_color(color: ColorBase, model: ColorModel | str) -> ColorBase:
    if not isinstance(color, ColorBase):
        raise TypeError(f"Expected a color, got {type(color).__name__}")
    return color.convert(model)


ColorBase.convert = color_convert
