"""
Per-model domain checks.

Shared by the color classes (at construction) and the conversion graph (after
every hop), so an intermediate value outside its model's domain fails exactly
as constructing it by hand would.
"""
from __future__ import annotations
import math
from numbers import Integral, Real
from typing import Any, Callable, Tuple

from ..exceptions import InvalidColorError
from ..utils.num_utils import wrap_hue
from .color_types import ColorModel, num_channels
from .constants import HEX_MAX, RGB_MAX

FIELD_NAMES: dict[ColorModel, Tuple[str, ...]] = {
    ColorModel.HEX: ("hex",),
    ColorModel.RGB: ("red", "green", "blue"),
    ColorModel.XYZ: ("X", "Y", "Z"),
    ColorModel.YXY: ("Y", "x", "y"),
    ColorModel.CIELAB: ("lightness", "a", "b"),
    ColorModel.CIELCH: ("lightness", "chroma", "hue"),
    ColorModel.CMY: ("cyan", "magenta", "yellow"),
    ColorModel.CMYK: ("cyan", "magenta", "yellow", "key"),
    ColorModel.HSL: ("hue", "saturation", "lightness"),
    ColorModel.HSV: ("hue", "saturation", "value"),
}


def _require_finite(model: ColorModel, values: Tuple[Any, ...]) -> Tuple[float, ...]:
    expected = num_channels[model]
    if len(values) != expected:
        raise InvalidColorError(
            f"{model.value} expects {expected} values, got {len(values)}", values
        )
    out = []
    for name, v in zip(FIELD_NAMES[model], values):
        if isinstance(v, bool) or not isinstance(v, Real):
            raise InvalidColorError(f"Parameter {name} is not a number ({v!r})", v)
        if not math.isfinite(v):
            raise InvalidColorError(f"Parameter {name} is not finite ({v!r})", v)
        out.append(float(v))
    return tuple(out)


def _check_hex(values: Tuple[Any, ...]) -> Tuple[int]:
    if len(values) != 1:
        raise InvalidColorError(f"hex expects 1 value, got {len(values)}", values)
    (v,) = values
    if isinstance(v, bool) or not isinstance(v, Integral):
        raise InvalidColorError(f"Parameter hex is not an integer ({v!r})", v)
    v = int(v)
    if v < 0 or v > HEX_MAX:
        raise InvalidColorError(f"Parameter hex out of range ({v:#x})", v)
    return (v,)


def _check_rgb(values: Tuple[Any, ...]) -> Tuple[float, ...]:
    values = _require_finite(ColorModel.RGB, values)
    for name, v in zip(FIELD_NAMES[ColorModel.RGB], values):
        if v < 0 or v > RGB_MAX:
            raise InvalidColorError(f"Parameter {name} out of range ({v})", v)
    return values


def _check_cielch(values: Tuple[Any, ...]) -> Tuple[float, ...]:
    lightness, chroma, hue = _require_finite(ColorModel.CIELCH, values)
    return (lightness, chroma, wrap_hue(hue))


def _finite_only(model: ColorModel) -> Callable[[Tuple[Any, ...]], Tuple[float, ...]]:
    return lambda values: _require_finite(model, values)


DOMAIN_CHECKS: dict[ColorModel, Callable[[Tuple[Any, ...]], Tuple[Any, ...]]] = {
    ColorModel.HEX: _check_hex,
    ColorModel.RGB: _check_rgb,
    ColorModel.XYZ: _finite_only(ColorModel.XYZ),
    ColorModel.YXY: _finite_only(ColorModel.YXY),
    ColorModel.CIELAB: _finite_only(ColorModel.CIELAB),
    ColorModel.CIELCH: _check_cielch,
    ColorModel.CMY: _finite_only(ColorModel.CMY),
    ColorModel.CMYK: _finite_only(ColorModel.CMYK),
    ColorModel.HSL: _finite_only(ColorModel.HSL),
    ColorModel.HSV: _finite_only(ColorModel.HSV),
}


def check_domain(model: ColorModel, values: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """
    Validate ``values`` for ``model`` and return them in canonical form.

    Canonical form means floats for every model except Hex (an int), and a
    CIELCh hue wrapped into [0, 360).

    Raises:
        InvalidColorError: if any field is outside the model's domain.
    """
    return DOMAIN_CHECKS[model](tuple(values))
