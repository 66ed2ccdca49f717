from typing import ClassVar

from ..types.color_types import ColorModel
from ..utils.num_utils import round_half_up
from .color_base import ColorBase


class RGB(ColorBase):
    """
    sRGB color with channels in [0, 255].

    Channels are stored as given (fractional values survive conversions); the
    ``red``/``green``/``blue`` accessors and every renderer round half-up.

    >>> RGB(255, 0, 0).to_css_string()
    'rgb(255, 0, 0)'
    >>> RGB(12.5, 0, 0).red
    13
    """
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.RGB

    @property
    def red(self) -> int:
        return round_half_up(self._value[0])

    @property
    def green(self) -> int:
        return round_half_up(self._value[1])

    @property
    def blue(self) -> int:
        return round_half_up(self._value[2])

    @property
    def channels(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def __str__(self) -> str:
        return f"{self.red}, {self.green}, {self.blue}"

    def to_url_string(self) -> str:
        return f"{self.red}_{self.green}_{self.blue}"

    def to_css_string(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"


class Hex(ColorBase):
    """
    Packed 24-bit ``0xRRGGBB`` color.

    >>> Hex(0xFF0000).to_css_string()
    '#FF0000'
    """
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HEX

    @property
    def hex(self) -> int:
        return self._value[0]

    def __int__(self) -> int:
        return self._value[0]

    def __repr__(self) -> str:
        return f"Hex(0x{self.hex:06X})"

    def __str__(self) -> str:
        return f"{self.hex:06X}"

    def to_url_string(self) -> str:
        return str(self)

    def to_css_string(self) -> str:
        return f"#{self}"
