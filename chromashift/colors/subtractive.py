from typing import ClassVar, Tuple

from ..types.color_types import ColorModel
from .color_base import ColorBase


class CMY(ColorBase):
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.CMY
    display_places: ClassVar[Tuple[int, ...]] = (4, 4, 4)

    @property
    def cyan(self) -> float:
        return self._value[0]

    @property
    def magenta(self) -> float:
        return self._value[1]

    @property
    def yellow(self) -> float:
        return self._value[2]


class CMYK(ColorBase):
    __slots__ = ()
    mode: ClassVar[ColorModel] = ColorModel.CMYK
    display_places: ClassVar[Tuple[int, ...]] = (2, 2, 2, 2)

    @property
    def cyan(self) -> float:
        return self._value[0]

    @property
    def magenta(self) -> float:
        return self._value[1]

    @property
    def yellow(self) -> float:
        return self._value[2]

    @property
    def key(self) -> float:
        return self._value[3]
