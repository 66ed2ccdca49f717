"""
Parse colors from their textual notations.

Each model has one entry point (``parse_rgb``, ``parse_hsl``, ...) and
``parse(text, model)`` dispatches on the model. The grammar is deliberately
forgiving about decoration and strict about content:

- the model keyword, parentheses and semicolons are removed wherever they
  occur, case-insensitively (``"RGB(1, 2, 3);"`` and ``"1,2,3"`` are equal);
- HSL, HSV and Yxy also drop degree and percent signs, including the
  ``Â°`` form a UTF-8 degree sign takes when decoded as Latin-1;
- the remainder is split on commas and must have exactly the model's
  field count;
- RGB and HSL accept unsigned integers only, every other model accepts plain
  decimal numbers (sign, fraction and exponent allowed; ``nan``/``inf`` not);
- bounded fields are range checked, nothing is clamped.

Every failure raises ``InvalidColorError`` carrying the original input.

>>> parse_rgb("rgb(255, 0, 0)")
RGB(255.0, 0.0, 0.0)
>>> parse_hsl("hsl(120°, 100%, 50%)").to_css_string()
'hsl(120, 100%, 50%)'
"""
from __future__ import annotations
import re
from typing import Callable, Sequence, Tuple

from .colors import CIELab, CIELCh, CMY, CMYK, HSL, HSV, RGB, XYZ, Hex, Yxy
from .colors.color_base import ColorBase
from .exceptions import InvalidColorError
from .types.color_types import ColorModel, as_model
from .types.constants import HUE_360, PERCENT_MAX, RGB_MAX

_DIGITS = re.compile(r"[0-9]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")
_HEX_PREFIX = re.compile(r"^(?:#|0x|hex)", re.IGNORECASE)

_PUNCTUATION = ("(", ")", ";")
# '°' as UTF-8 read back as Latin-1 is 'Â°'; lower-cased input turns it into 'â°'
_DEGREE_AND_PERCENT = ("Â°", "â°", "°", "%")

Bounds = Tuple[float | None, float | None]
UNBOUNDED: Bounds = (None, None)
UNIT: Bounds = (0, 1)
PERCENT: Bounds = (0, PERCENT_MAX)
CHANNEL: Bounds = (0, RGB_MAX)
DEGREES: Bounds = (0, HUE_360)


def _invalid(model: str, text: str) -> InvalidColorError:
    return InvalidColorError(f"Parameter str is an invalid {model} string ({text!r})", text)


def _strip(text: str, keyword: str, extra: Sequence[str] = ()) -> str:
    stripped = re.sub(re.escape(keyword), "", text, flags=re.IGNORECASE)
    for token in (*_PUNCTUATION, *extra):
        stripped = stripped.replace(token, "")
    return stripped


def _fields(
    text: str,
    model: str,
    bounds: Sequence[Bounds],
    *,
    integers_only: bool = False,
    extra: Sequence[str] = (),
) -> Tuple[float, ...]:
    """Split, validate and range check the comma-separated fields of ``text``."""
    if not isinstance(text, str):
        raise InvalidColorError(f"Expected a {model} string, got {type(text).__name__}", text)

    tokens = [t.strip() for t in _strip(text, model, extra).split(",")]
    if len(tokens) != len(bounds):
        raise _invalid(model, text)

    grammar = _DIGITS if integers_only else _NUMBER
    values = []
    for token, (low, high) in zip(tokens, bounds):
        if not grammar.fullmatch(token):
            raise _invalid(model, text)
        value = float(token)
        if (low is not None and value < low) or (high is not None and value > high):
            raise _invalid(model, text)
        values.append(value)
    return tuple(values)


def parse_hex(text: str) -> Hex:
    """
    Parse ``#RRGGBB``, ``RRGGBB``, ``0xRRGGBB``, ``hex(RRGGBB)`` or the three
    digit shorthand ``#RGB``.
    """
    if not isinstance(text, str):
        raise InvalidColorError(f"Expected a hex string, got {type(text).__name__}", text)
    digits = _strip(_HEX_PREFIX.sub("", text.strip()), "hex").strip()
    if not _HEX_DIGITS.fullmatch(digits):
        raise _invalid("hex", text)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return Hex(int(digits, 16))


def parse_rgb(text: str) -> RGB:
    return RGB(*_fields(text, "rgb", (CHANNEL, CHANNEL, CHANNEL), integers_only=True))


def parse_xyz(text: str) -> XYZ:
    return XYZ(*_fields(text, "xyz", (UNBOUNDED,) * 3))


def parse_yxy(text: str) -> Yxy:
    return Yxy(*_fields(text, "yxy", (UNBOUNDED,) * 3, extra=_DEGREE_AND_PERCENT))


def parse_cielab(text: str) -> CIELab:
    return CIELab(*_fields(text, "cielab", (PERCENT, UNBOUNDED, UNBOUNDED)))


def parse_cielch(text: str) -> CIELCh:
    return CIELCh(*_fields(text, "cielch", (PERCENT, UNBOUNDED, UNBOUNDED)))


def parse_cmy(text: str) -> CMY:
    return CMY(*_fields(text, "cmy", (UNIT,) * 3))


def parse_cmyk(text: str) -> CMYK:
    return CMYK(*_fields(text, "cmyk", (UNIT,) * 4))


def parse_hsl(text: str) -> HSL:
    return HSL(*_fields(
        text, "hsl", (DEGREES, PERCENT, PERCENT), integers_only=True, extra=_DEGREE_AND_PERCENT,
    ))


def parse_hsv(text: str) -> HSV:
    return HSV(*_fields(text, "hsv", (DEGREES, PERCENT, PERCENT), extra=_DEGREE_AND_PERCENT))


PARSERS: dict[ColorModel, Callable[[str], ColorBase]] = {
    ColorModel.HEX: parse_hex,
    ColorModel.RGB: parse_rgb,
    ColorModel.XYZ: parse_xyz,
    ColorModel.YXY: parse_yxy,
    ColorModel.CIELAB: parse_cielab,
    ColorModel.CIELCH: parse_cielch,
    ColorModel.CMY: parse_cmy,
    ColorModel.CMYK: parse_cmyk,
    ColorModel.HSL: parse_hsl,
    ColorModel.HSV: parse_hsv,
}


def parse(text: str, model: ColorModel | str) -> ColorBase:
    """
    Parse ``text`` as a color of ``model``.

    Args:
        text: Color notation, e.g. ``"cmyk(0, 1, 1, 0)"``
        model: Target model (``ColorModel`` or its name, case-insensitive)

    Raises:
        InvalidColorError: if ``text`` does not match the model's grammar or range
    """
    return PARSERS[as_model(model)](text)
