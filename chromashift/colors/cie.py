from typing import ClassVar, Tuple

from ..types.color_types import ColorModel
from .color_base import ColorBase


class XYZ(ColorBase):
    """CIE 1931 tristimulus values, white at Y = 100."""
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.XYZ
    display_places: ClassVar[Tuple[int, ...]] = (4, 4, 4)

    @property
    def X(self) -> float:
        return self._value[0]

    @property
    def Y(self) -> float:
        return self._value[1]

    @property
    def Z(self) -> float:
        return self._value[2]


class Yxy(ColorBase):
    """Luminance ``Y`` with chromaticity coordinates ``x`` and ``y``."""
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.YXY
    display_places: ClassVar[Tuple[int, ...]] = (4, 4, 4)

    @property
    def Y(self) -> float:
        return self._value[0]

    @property
    def x(self) -> float:
        return self._value[1]

    @property
    def y(self) -> float:
        return self._value[2]


class CIELab(ColorBase):
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.CIELAB
    display_places: ClassVar[Tuple[int, ...]] = (0, 3, 3)

    @property
    def lightness(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    def with_lightness(self, lightness: float) -> "CIELab":
        return CIELab(lightness, self.a, self.b)


class CIELCh(ColorBase):
    """
    Cylindrical CIELab: lightness, chroma and hue in degrees.

    The hue is always normalized into [0, 360), both at construction and in
    ``with_hue``.

    >>> CIELCh(50, 10, -90).hue
    270.0
    """
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.CIELCH
    display_places: ClassVar[Tuple[int, ...]] = (0, 3, 3)

    @property
    def lightness(self) -> float:
        return self._value[0]

    @property
    def chroma(self) -> float:
        return self._value[1]

    @property
    def hue(self) -> float:
        return self._value[2]

    def with_hue(self, hue: float) -> "CIELCh":
        """Return a copy with ``hue`` replaced (and normalized)."""
        return CIELCh(self.lightness, self.chroma, hue)
