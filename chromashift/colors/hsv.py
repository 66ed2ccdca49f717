from typing import ClassVar, Tuple

from ..types.color_types import ColorModel
from .color_base import ColorBase


class HSV(ColorBase):
    """Hue in degrees, saturation and value in percent."""
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.HSV
    display_places: ClassVar[Tuple[int, ...]] = (0, 0, 0)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def brightness(self) -> float:
        """The V channel; ``value`` already names the raw field tuple."""
        return self._value[2]

    def __str__(self) -> str:
        h, s, v = self._formatted()
        return f"{h}°, {s}%, {v}%"

    def to_css_string(self) -> str:
        # CSS has no hsv(); hsl() keeps the hue-based notation
        return self.to_hsl().to_css_string()
