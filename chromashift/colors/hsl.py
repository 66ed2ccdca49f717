from typing import ClassVar, Tuple

from ..types.color_types import ColorModel
from .color_base import ColorBase


class HSL(ColorBase):
    """
    Hue in degrees, saturation and lightness in percent.

    >>> HSL(120, 100, 25).to_css_string()
    'hsl(120, 100%, 25%)'
    """
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HSL
    display_places: ClassVar[Tuple[int, ...]] = (0, 0, 0)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]

    def __str__(self) -> str:
        h, s, l = self._formatted()
        return f"{h}°, {s}%, {l}%"

    def to_css_string(self) -> str:
        h, s, l = self._formatted()
        return f"hsl({h}, {s}%, {l}%)"
