from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Tuple

from ..conversions.graph import convert as graph_convert
from ..types.color_types import ColorModel, ColorValue
from ..types.domains import FIELD_NAMES, check_domain
from ..utils.num_utils import format_fixed

if TYPE_CHECKING:
    from .cie import XYZ, Yxy, CIELab, CIELCh
    from .hsl import HSL
    from .hsv import HSV
    from .rgb import RGB, Hex
    from .subtractive import CMY, CMYK


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode: ClassVar[ColorModel]
    # decimals per field for the display and url renderers
    display_places: ClassVar[Tuple[int, ...]] = ()

    convert: Callable[[ColorBase, ColorModel | str], ColorBase]

    # bound in chromashift.operations
    distance: Callable[..., float]
    match: Callable[..., ColorBase]
    websafe: Callable[..., ColorBase]
    adjust_hue: Callable[..., ColorBase]
    adjust_saturation: Callable[..., ColorBase]
    adjust_brightness: Callable[..., ColorBase]
    greyscale: Callable[..., ColorBase]
    complement: Callable[..., ColorBase]
    analogous: Callable[..., list]
    split: Callable[..., list]
    equal: Callable[..., list]
    rectangle: Callable[..., list]
    range: Callable[..., list]
    sweetspot: Callable[..., list]
    is_dark: Callable[..., bool]
    matching_text_color: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *values: Any) -> None:
        # ---- Handle ColorBase input ----
        if len(values) == 1 and isinstance(values[0], ColorBase):
            other = values[0]
            if other.mode == self.mode:
                values = other.value
            else:
                values = graph_convert(other.value, other.mode, self.mode)

        # ---- Domain check, canonical form ----
        self._value = check_domain(self.mode, values)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def fields(self) -> dict[str, Any]:
        """Field values keyed by name, e.g. ``{'red': 255.0, 'green': 0.0, 'blue': 0.0}``."""
        return dict(zip(FIELD_NAMES[self.mode], self._value))

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(v) for v in self._value)})"

    # ------------------ RENDERING ------------------
    def _formatted(self) -> list[str]:
        return [format_fixed(v, p) for v, p in zip(self._value, self.display_places)]

    def __str__(self) -> str:
        return ", ".join(self._formatted())

    def to_display_string(self) -> str:
        return str(self)

    def to_url_string(self) -> str:
        """Display form with ``_`` separators, safe for URL paths and query strings."""
        return "_".join(self._formatted())

    def to_css_string(self) -> str:
        """CSS form; models CSS cannot express render through RGB."""
        return self.to_rgb().to_css_string()

    # ------------------ PARSING ------------------
    @classmethod
    def parse(cls, text: str):
        """Parse ``text`` in this model's notation, e.g. ``RGB.parse("rgb(255, 0, 0)")``."""
        from ..parsing import parse  # local import to avoid cycles
        return parse(text, cls.mode)

    # ------------------ CONVERSIONS ------------------
    def to_hex(self) -> Hex:
        return self.convert(ColorModel.HEX)  # type: ignore[return-value]

    def to_rgb(self) -> RGB:
        return self.convert(ColorModel.RGB)  # type: ignore[return-value]

    def to_xyz(self) -> XYZ:
        return self.convert(ColorModel.XYZ)  # type: ignore[return-value]

    def to_yxy(self) -> Yxy:
        return self.convert(ColorModel.YXY)  # type: ignore[return-value]

    def to_cielab(self) -> CIELab:
        return self.convert(ColorModel.CIELAB)  # type: ignore[return-value]

    def to_cielch(self) -> CIELCh:
        return self.convert(ColorModel.CIELCH)  # type: ignore[return-value]

    def to_cmy(self) -> CMY:
        return self.convert(ColorModel.CMY)  # type: ignore[return-value]

    def to_cmyk(self) -> CMYK:
        return self.convert(ColorModel.CMYK)  # type: ignore[return-value]

    def to_hsl(self) -> HSL:
        return self.convert(ColorModel.HSL)  # type: ignore[return-value]

    def to_hsv(self) -> HSV:
        return self.convert(ColorModel.HSV)  # type: ignore[return-value]


def build_registry(*classes: type[ColorBase]) -> dict[ColorModel, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
